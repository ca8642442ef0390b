"""This module handles persisting request records."""
from .request_store import RequestStore
from .file_system_request_store import FilesystemRequestStore
from .in_memory_request_store import InMemoryRequestStore
