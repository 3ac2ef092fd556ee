"""Memory file request and listing models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..utils.date_utils import format_timestamp
from .base import SoulBaseModel

DEFAULT_MEMORY_FILENAME = "soul.md"


class ReadRequest(SoulBaseModel):
    """Parameters of a memory file read."""

    filename: str = Field(
        default=DEFAULT_MEMORY_FILENAME,
        description="Name of the memory file to read",
    )


class WriteRequest(SoulBaseModel):
    """Parameters of a full overwrite of a memory file."""

    filename: str = Field(
        default=DEFAULT_MEMORY_FILENAME,
        description="Name of the memory file to write",
    )
    content: str = Field(description="The full content to write to the memory file")
    notify_human: bool = Field(
        default=True,
        description="Whether to mention to the human that memory was updated",
    )


class AppendRequest(SoulBaseModel):
    """Parameters of an append to a memory file."""

    filename: str = Field(
        default=DEFAULT_MEMORY_FILENAME,
        description="Name of the memory file to append to",
    )
    content: str = Field(description="Content to append to the end of the memory file")
    section: Optional[str] = Field(
        default=None,
        description="Optional section header placed before the content",
    )


class DeleteRequest(SoulBaseModel):
    """Parameters of a memory file deletion."""

    filename: str = Field(description="Name of the memory file to delete")
    confirm: bool = Field(description="Must be true to confirm deletion")


class MemoryFileInfo(SoulBaseModel):
    """Filesystem attributes of one memory file in the memory directory."""

    name: str = Field(description="File name relative to the memory directory")
    size_bytes: int = Field(ge=0, description="File size in bytes")
    modified_at: datetime = Field(description="Last modification time (UTC)")

    def describe(self) -> str:
        """One listing line, e.g. ``- soul.md (12 bytes, modified: ...)``."""
        return (
            f"- {self.name} ({self.size_bytes} bytes, "
            f"modified: {format_timestamp(self.modified_at)})"
        )
