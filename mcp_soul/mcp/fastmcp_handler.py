"""FastMCP-based server implementation for MCP Soul."""

from mcp.server.fastmcp import FastMCP

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..memory.store import MemoryStore
from .memory_tools import MemoryTools
from .resources import MemoryResources

SERVER_INSTRUCTIONS = (
    "Persistent memory kept as markdown files. Read memory://soul (or call "
    "memory_read_soul) at the start of a conversation and record anything worth "
    "remembering with memory_append_soul or memory_write_soul."
)


class FastMCPHandler(LoggerMixin):
    """FastMCP server implementation for MCP Soul."""

    def __init__(self, settings: Settings, store: MemoryStore):
        self.settings = settings
        self.store = store

        # Create FastMCP server
        self.mcp = FastMCP(
            settings.MCP_SERVER_NAME,
            instructions=SERVER_INSTRUCTIONS,
            host=settings.SERVER_HOST,
            port=settings.SERVER_PORT,
            log_level=settings.LOG_LEVEL,
            debug=settings.DEBUG,
        )

        self.memory_tools = MemoryTools(self.mcp, store)
        self.memory_resources = MemoryResources(self.mcp, store)

        self.logger.debug(
            "FastMCP handler created",
            server_name=settings.MCP_SERVER_NAME,
            root=str(store.root),
        )

    def get_mcp_server(self) -> FastMCP:
        """Get the FastMCP server instance."""
        return self.mcp

    async def run(self) -> None:
        """Serve MCP requests on the configured transport until it closes."""
        transport = self.settings.MCP_TRANSPORT
        self.logger.info("Serving MCP", transport=transport)

        if transport == "stdio":
            await self.mcp.run_stdio_async()
        elif transport == "sse":
            await self.mcp.run_sse_async()
        else:
            await self.mcp.run_streamable_http_async()
