"""MCP Soul domain models."""

from .base import SoulBaseModel
from .memory import (
    DEFAULT_MEMORY_FILENAME,
    AppendRequest,
    DeleteRequest,
    MemoryFileInfo,
    ReadRequest,
    WriteRequest,
)

__all__ = [
    # Base models
    "SoulBaseModel",

    # Memory file models
    "DEFAULT_MEMORY_FILENAME",
    "ReadRequest",
    "WriteRequest",
    "AppendRequest",
    "DeleteRequest",
    "MemoryFileInfo",
]
