"""Intake portal for managed service account requests."""

__version__ = "1.0.0"
