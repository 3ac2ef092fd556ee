"""MCP protocol implementation."""

from .fastmcp_handler import FastMCPHandler
from .memory_tools import MemoryTools
from .resources import MemoryResources

__all__ = ["FastMCPHandler", "MemoryTools", "MemoryResources"]
