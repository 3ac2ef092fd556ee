"""Markdown memory file storage confined to one directory."""

from .paths import resolve_memory_path
from .store import DEFAULT_CONTEXT_PLACEHOLDER, MemoryStore, compose_append

__all__ = ["MemoryStore", "resolve_memory_path", "compose_append", "DEFAULT_CONTEXT_PLACEHOLDER"]
