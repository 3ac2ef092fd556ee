"""
MCP Soul - persistent markdown memory for MCP clients.

This package provides an MCP (Model Context Protocol) server with:
- Read, write, append, list and delete tools over markdown memory files
- A memory://soul resource exposing the default memory file
- Confinement of every filename to a single memory directory
"""

__version__ = "1.0.0"

from .core.server import SoulServer
from .config.settings import Settings

__all__ = ["SoulServer", "Settings"]
