"""Main MCP Soul server implementation."""

from typing import Optional

from ..config.logging import LoggerMixin, setup_logging
from ..config.settings import Settings
from ..mcp.fastmcp_handler import FastMCPHandler
from ..memory.store import MemoryStore


class SoulServer(LoggerMixin):
    """MCP server giving an agent persistent markdown memory."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the server with configuration."""
        self.settings = settings or Settings()

        # Set up logging
        setup_logging(self.settings)
        self.logger.info("Initializing MCP Soul server", version=self.settings.MCP_SERVER_VERSION)

        self.store = MemoryStore(
            self.settings.MEMORY_DIR,
            extension=self.settings.MEMORY_FILE_EXTENSION,
        )
        self.handler: Optional[FastMCPHandler] = None
        self._running = False

    def _startup(self) -> None:
        """Create the memory directory and the MCP handler.

        A memory directory that cannot be created is fatal: the
        ConfigurationError propagates to the caller.
        """
        self.store.bootstrap()
        self.handler = FastMCPHandler(self.settings, self.store)
        self.logger.info(
            "Claude Memory MCP Server starting",
            memory_dir=str(self.store.root),
            transport=self.settings.MCP_TRANSPORT,
        )

    async def run(self) -> None:
        """Start the server and serve until the transport closes."""
        self._startup()
        self._running = True
        try:
            await self.handler.run()
        finally:
            self._running = False
            self.logger.info("Server shutdown complete")

    @property
    def is_running(self) -> bool:
        """Check if the server is running."""
        return self._running
