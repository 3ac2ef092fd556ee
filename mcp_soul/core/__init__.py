"""Core server functionality for MCP Soul."""

from .server import SoulServer
from .exceptions import (
    ConfigurationError,
    ErrorKind,
    MemoryFileNotFoundError,
    MemoryStoreError,
    PathTraversalError,
    SoulError,
    StorageIOError,
)

__all__ = [
    "SoulServer",
    "SoulError",
    "ConfigurationError",
    "ErrorKind",
    "MemoryStoreError",
    "PathTraversalError",
    "MemoryFileNotFoundError",
    "StorageIOError",
]
