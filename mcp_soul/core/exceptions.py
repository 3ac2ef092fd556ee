"""Custom exceptions for MCP Soul."""

from enum import Enum
from typing import Any, Dict, Optional


class SoulError(Exception):
    """Base exception for all MCP Soul errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(SoulError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ErrorKind(str, Enum):
    """Closed set of failures a memory store operation can report."""

    PATH_TRAVERSAL = "PATH_TRAVERSAL"
    NOT_FOUND = "NOT_FOUND"
    IO_ERROR = "IO_ERROR"


class MemoryStoreError(SoulError):
    """Raised when a memory file operation fails.

    Only the three subclasses below are ever raised; callers can switch on
    ``kind`` instead of on the exception type.
    """

    kind: ErrorKind

    def __init__(self, message: str, filename: Optional[str] = None) -> None:
        details = {"filename": filename} if filename is not None else {}
        super().__init__(message, self.kind.value, details)
        self.filename = filename


class PathTraversalError(MemoryStoreError):
    """Raised when a filename resolves outside the memory directory."""

    kind = ErrorKind.PATH_TRAVERSAL

    def __init__(self, filename: str) -> None:
        super().__init__(
            "Invalid filename: path must stay within the memory directory.",
            filename,
        )


class MemoryFileNotFoundError(MemoryStoreError):
    """Raised when the requested memory file does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, filename: str) -> None:
        super().__init__(f"Memory file not found: {filename}", filename)


class StorageIOError(MemoryStoreError):
    """Raised on permission, disk or missing-directory failures."""

    kind = ErrorKind.IO_ERROR
