"""This module defines intake requests and their lifecycle."""
from .entities import (
    AccountType,
    EncryptionType,
    RequestInput,
    RequestRecord,
    RequestStatus,
    ScriptDownload,
)
