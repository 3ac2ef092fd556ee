"""Always-available MCP resources."""

from mcp.server.fastmcp import FastMCP

from ..config.logging import LoggerMixin
from ..memory.store import MemoryStore

SOUL_RESOURCE_URI = "memory://soul"


class MemoryResources(LoggerMixin):
    """Expose the default memory file as ``memory://soul``."""

    def __init__(self, mcp: FastMCP, store: MemoryStore):
        self.mcp = mcp
        self.store = store
        self._register_resources()

    def _register_resources(self) -> None:
        """Register memory resources with FastMCP server."""

        @self.mcp.resource(
            SOUL_RESOURCE_URI,
            name="soul_memory",
            description=(
                "Core memory and context from past conversations. "
                "Read this at the start of every new conversation."
            ),
            mime_type="text/markdown",
        )
        async def soul_memory() -> str:
            return await self.default_context()

    async def default_context(self) -> str:
        """Contents of soul.md, or a placeholder document when it doesn't exist.

        Failures other than a missing file propagate, so the client sees a
        failed resource read.
        """
        try:
            return await self.store.read_default_context()
        except Exception as e:
            self.logger.error("Failed to read default memory context", error=str(e))
            raise
