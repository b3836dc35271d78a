"""Exception classes for settings persistence.

Reading and writing the plugin data file are the only operations in the
package that can fail. Both wrap the underlying exception so callers can
log it without caring about the storage format.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class PersistenceError(Exception):
    """Error while reading or writing persisted settings."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Data file involved, if any
            original_error: The original exception that was caught
        """
        super().__init__(f"{message} ({path})" if path else message)
        self.message = message
        self.path = path
        self.original_error = original_error


class StoreReadError(PersistenceError):
    """Raised when stored settings exist but cannot be read or parsed."""

    pass


class StoreWriteError(PersistenceError):
    """Raised when settings cannot be written."""

    pass
