"""Pytest configuration and shared fixtures for MCP Soul tests."""

import os
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest
import structlog

from mcp_soul.config.settings import Settings
from mcp_soul.mcp.memory_tools import MemoryTools
from mcp_soul.memory.store import MemoryStore


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def memory_dir(temp_dir: Path) -> Path:
    """Memory directory that does not exist yet."""
    return temp_dir / "memory"


@pytest.fixture
def test_settings(memory_dir: Path) -> Settings:
    """Create test settings pointing at a temporary memory directory."""
    return Settings(
        _env_file=None,
        MEMORY_DIR=memory_dir,
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        MCP_SERVER_NAME="claude-memory-test",
    )


@pytest.fixture
def memory_store(test_settings: Settings) -> MemoryStore:
    """Memory store with its directory already created."""
    store = MemoryStore(test_settings.MEMORY_DIR, test_settings.MEMORY_FILE_EXTENSION)
    store.bootstrap()
    return store


@pytest.fixture
def mock_mcp() -> MagicMock:
    """Create a mock FastMCP instance."""
    mcp = MagicMock()
    mcp.tool.return_value = lambda func: func  # Return function unchanged
    mcp.resource.return_value = lambda func: func
    return mcp


@pytest.fixture
def memory_tools(mock_mcp: MagicMock, memory_store: MemoryStore) -> MemoryTools:
    """MemoryTools over a real store and a mocked FastMCP."""
    return MemoryTools(mock_mcp, memory_store)


# Environment cleanup
@pytest.fixture(autouse=True)
def cleanup_env():
    """Clean up environment variables and logging config before/after tests."""
    original_env = dict(os.environ)
    os.environ.pop("CLAUDE_MEMORY_DIR", None)
    os.environ.pop("MEMORY_DIR", None)

    yield

    os.environ.clear()
    os.environ.update(original_env)
    structlog.reset_defaults()
