"""Memory file MCP tools."""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from ..config.logging import LoggerMixin
from ..core.exceptions import MemoryFileNotFoundError, MemoryStoreError
from ..memory.store import MemoryStore
from ..models.memory import (
    DEFAULT_MEMORY_FILENAME,
    AppendRequest,
    DeleteRequest,
    ReadRequest,
    WriteRequest,
)

READ_DESCRIPTION = """Read a persistent memory file. This is your long-term memory that persists across conversations.

Use this at the start of conversations to remember context about the human you're talking to,
previous conversations, ongoing projects, and anything else worth remembering.

The default file is 'soul.md' but you can read other memory files too.

Returns the full contents of the memory file, or a message if the file doesn't exist yet."""

WRITE_DESCRIPTION = """Write to a persistent memory file. This overwrites the entire file with new content.

Use this to save important context that should persist across conversations:
- Information about the human you're talking to
- Summaries of important conversations
- Ongoing projects and their status
- Preferences, communication style notes
- Anything you'd want to remember next time

The memory file uses markdown format. Structure it however makes sense.

IMPORTANT: This overwrites the entire file. Read the current content first if you want to preserve and add to it."""

APPEND_DESCRIPTION = """Append content to a persistent memory file without overwriting existing content.

Use this to add new information:
- Log a new conversation summary
- Add a new insight or preference learned
- Record a new project or task

Optionally include a section header to organize the new content."""

LIST_DESCRIPTION = """List all memory files in the memory directory.

Use this to see what memory files exist - there might be separate files for different purposes
(e.g., soul.md for core identity, conversations.md for conversation logs, projects.md for ongoing work)."""

DELETE_DESCRIPTION = """Delete a memory file. Requires explicit confirmation.

Use with caution - this permanently removes the memory file."""


class MemoryTools(LoggerMixin):
    """Memory file MCP tools.

    The ``read``/``write``/``append``/``list_files``/``delete`` methods hold
    the tool behaviour and always return text: store errors are turned into
    messages here and nowhere else.
    """

    def __init__(self, mcp: FastMCP, store: MemoryStore):
        self.mcp = mcp
        self.store = store
        self._register_tools()

    def _register_tools(self) -> None:
        """Register memory tools with FastMCP server."""

        @self.mcp.tool(
            name="memory_read_soul",
            title="Read Soul/Memory File",
            description=READ_DESCRIPTION,
            annotations=ToolAnnotations(
                readOnlyHint=True,
                destructiveHint=False,
                idempotentHint=True,
                openWorldHint=False,
            ),
        )
        async def memory_read_soul(
            filename: Annotated[str, Field(
                description="Name of the memory file to read (default: soul.md)"
            )] = DEFAULT_MEMORY_FILENAME,
        ) -> str:
            return await self.read(ReadRequest(filename=filename))

        @self.mcp.tool(
            name="memory_write_soul",
            title="Write Soul/Memory File",
            description=WRITE_DESCRIPTION,
            annotations=ToolAnnotations(
                readOnlyHint=False,
                destructiveHint=True,
                idempotentHint=False,
                openWorldHint=False,
            ),
        )
        async def memory_write_soul(
            content: Annotated[str, Field(description="The full content to write to the memory file")],
            filename: Annotated[str, Field(
                description="Name of the memory file to write (default: soul.md)"
            )] = DEFAULT_MEMORY_FILENAME,
            notify_human: Annotated[bool, Field(
                description="Whether to mention to the human that you've updated your memory"
            )] = True,
        ) -> str:
            return await self.write(
                WriteRequest(filename=filename, content=content, notify_human=notify_human)
            )

        @self.mcp.tool(
            name="memory_append_soul",
            title="Append to Soul/Memory File",
            description=APPEND_DESCRIPTION,
            annotations=ToolAnnotations(
                readOnlyHint=False,
                destructiveHint=False,
                idempotentHint=False,
                openWorldHint=False,
            ),
        )
        async def memory_append_soul(
            content: Annotated[str, Field(description="Content to append to the end of the memory file")],
            filename: Annotated[str, Field(
                description="Name of the memory file to append to (default: soul.md)"
            )] = DEFAULT_MEMORY_FILENAME,
            section: Annotated[Optional[str], Field(
                description="Optional section header to add before the content (e.g. '## New Conversation')"
            )] = None,
        ) -> str:
            return await self.append(
                AppendRequest(filename=filename, content=content, section=section)
            )

        @self.mcp.tool(
            name="memory_list_files",
            title="List Memory Files",
            description=LIST_DESCRIPTION,
            annotations=ToolAnnotations(
                readOnlyHint=True,
                destructiveHint=False,
                idempotentHint=True,
                openWorldHint=False,
            ),
        )
        async def memory_list_files() -> str:
            return await self.list_files()

        @self.mcp.tool(
            name="memory_delete_file",
            title="Delete Memory File",
            description=DELETE_DESCRIPTION,
            annotations=ToolAnnotations(
                readOnlyHint=False,
                destructiveHint=True,
                idempotentHint=False,
                openWorldHint=False,
            ),
        )
        async def memory_delete_file(
            filename: Annotated[str, Field(description="Name of the memory file to delete")],
            confirm: Annotated[bool, Field(description="Must be true to confirm deletion")],
        ) -> str:
            return await self.delete(DeleteRequest(filename=filename, confirm=confirm))

    async def read(self, request: ReadRequest) -> str:
        """Full text of a memory file, or a friendly note if it doesn't exist."""
        try:
            return await self.store.read(request.filename)
        except MemoryFileNotFoundError:
            self.logger.debug("Memory file not found", filename=request.filename)
            return (
                f"No memory file found at '{request.filename}'. "
                "This is a fresh start - consider creating one with memory_write_soul."
            )
        except MemoryStoreError as e:
            self.logger.warning("Failed to read memory file", filename=request.filename, **e.to_dict())
            return f"Error reading memory file: {e.message}"

    async def write(self, request: WriteRequest) -> str:
        """Overwrite a memory file."""
        try:
            await self.store.write(request.filename, request.content)
        except MemoryStoreError as e:
            self.logger.warning("Failed to write memory file", filename=request.filename, **e.to_dict())
            return f"Error writing memory file: {e.message}"

        suffix = " (Human has been notified)" if request.notify_human else ""
        return f"Memory file '{request.filename}' updated successfully.{suffix}"

    async def append(self, request: AppendRequest) -> str:
        """Append to a memory file."""
        try:
            await self.store.append(request.filename, request.content, request.section)
        except MemoryStoreError as e:
            self.logger.warning("Failed to append to memory file", filename=request.filename, **e.to_dict())
            return f"Error appending to memory file: {e.message}"

        return f"Appended to memory file '{request.filename}' successfully."

    async def list_files(self) -> str:
        """Human-readable listing of the memory directory."""
        root = self.store.root
        try:
            files = await self.store.list_files()
        except MemoryStoreError as e:
            self.logger.warning("Failed to list memory files", root=str(root), **e.to_dict())
            return f"Error listing memory files: {e.message}"

        if not files:
            return f"No memory files found in {root}. Create one with memory_write_soul."

        lines = "\n".join(info.describe() for info in files)
        return f"Memory files in {root}:\n\n{lines}"

    async def delete(self, request: DeleteRequest) -> str:
        """Delete a memory file once the caller has confirmed."""
        if not request.confirm:
            self.logger.debug("Deletion not confirmed", filename=request.filename)
            return "Deletion not confirmed. Set confirm: true to delete the file."

        try:
            await self.store.delete(request.filename)
        except MemoryStoreError as e:
            self.logger.warning("Failed to delete memory file", filename=request.filename, **e.to_dict())
            return f"Error deleting memory file: {e.message}"

        return f"Memory file '{request.filename}' deleted."
