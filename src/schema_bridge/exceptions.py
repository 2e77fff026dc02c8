"""
Custom exceptions for Schema Bridge.

Schema conversion itself never raises; these cover reading schema documents.
"""
from pathlib import Path
from typing import Optional, Union


class SchemaBridgeError(Exception):
    """Base class for all Schema Bridge errors."""
    pass


class SchemaDocumentError(SchemaBridgeError):
    """Raised when a schema document cannot be read or is not a valid schema."""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None, reason: Optional[str] = None):
        full_message = f"{message} ({path})" if path else message
        if reason:
            full_message = f"{full_message}: {reason}"
        super().__init__(full_message)
        self.path = Path(path) if path else None
        self.reason = reason
