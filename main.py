"""Main entry point for MCP Soul server."""

import asyncio
import sys

from mcp_soul import SoulServer, Settings


async def main() -> None:
    """Main entry point."""
    try:
        # Load settings
        settings = Settings()

        # Create and start server
        server = SoulServer(settings)
        await server.run()

    except KeyboardInterrupt:
        print("\nServer stopped by user", file=sys.stderr)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
