"""Test utilities and helper functions for MCP Soul tests."""

import os
from pathlib import Path
from typing import Any, Dict, List


class MemoryFileHelper:
    """Helper class for arranging memory files on disk."""

    @staticmethod
    def create_file(root: Path, name: str, content: str = "") -> Path:
        """Write a file directly, bypassing the store."""
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    @staticmethod
    def snapshot(root: Path) -> Dict[str, bytes]:
        """Relative path -> bytes of every file below ``root``."""
        files = {}
        for dirpath, _, filenames in os.walk(root):
            for filename in filenames:
                path = Path(dirpath) / filename
                files[str(path.relative_to(root))] = path.read_bytes()
        return files


def tool_text(result: Any) -> str:
    """Text of a FastMCP ``call_tool`` result.

    Depending on the mcp release, ``call_tool`` returns either the content
    blocks or a ``(content_blocks, structured_output)`` tuple.
    """
    if isinstance(result, tuple):
        result = result[0]
    blocks: List[Any] = list(result)
    return "".join(block.text for block in blocks)
