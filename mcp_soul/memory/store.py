"""Markdown memory files kept in a single directory."""

import asyncio
import os
from pathlib import Path
from typing import List, Optional, Union

from ..config.logging import LoggerMixin
from ..core.exceptions import (
    ConfigurationError,
    MemoryFileNotFoundError,
    StorageIOError,
)
from ..models.memory import DEFAULT_MEMORY_FILENAME, MemoryFileInfo
from ..utils.date_utils import from_timestamp
from .paths import resolve_memory_path

DEFAULT_CONTEXT_PLACEHOLDER = (
    "# soul.md\n\nNo memory file exists yet. Use memory_write_soul to create one."
)

APPEND_SEPARATOR = "\n\n"


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF content byte-exact across a write/read round-trip
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def compose_append(existing: str, content: str, section: Optional[str] = None) -> str:
    """Build the new file body for an append.

    Layout: existing text, a blank line if there was any, the optional section
    header followed by a blank line, then the new content.
    """
    separator = APPEND_SEPARATOR if existing else ""
    header = f"{section}{APPEND_SEPARATOR}" if section else ""
    return existing + separator + header + content


class MemoryStore(LoggerMixin):
    """Read, write, append, list and delete memory files under one root.

    Every call resolves its filename through :func:`resolve_memory_path`
    before touching the disk. Nothing is cached between calls and there is no
    locking: an append racing another writer on the same file may lose one of
    the two updates.
    """

    def __init__(self, root: Union[str, Path], extension: str = ".md") -> None:
        self.root = Path(os.path.normpath(os.path.abspath(os.fspath(root))))
        self.extension = extension

    def bootstrap(self) -> None:
        """Create the memory directory at startup.

        Raises:
            ConfigurationError: If the directory cannot be created. The server
                cannot run without it.
        """
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error("Failed to create memory directory", root=str(self.root), error=str(e))
            raise ConfigurationError(
                f"Cannot create memory directory {self.root}: {e.strerror or e}",
                "MEMORY_DIR",
            ) from e

        if not self.root.is_dir():
            raise ConfigurationError(
                f"Memory directory path is not a directory: {self.root}", "MEMORY_DIR"
            )

        self.logger.info("Memory directory ready", root=str(self.root))

    async def _ensure_root(self) -> None:
        try:
            await asyncio.to_thread(self.root.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(
                f"Cannot create memory directory {self.root}: {e.strerror or e}"
            ) from e

    def resolve(self, filename: str) -> Path:
        """Resolve a filename inside the memory directory."""
        return resolve_memory_path(self.root, filename)

    async def read(self, filename: str = DEFAULT_MEMORY_FILENAME) -> str:
        """Return the full text of a memory file.

        Raises:
            PathTraversalError: If the name escapes the memory directory.
            MemoryFileNotFoundError: If the file does not exist.
            StorageIOError: On any other read failure.
        """
        path = self.resolve(filename)
        await self._ensure_root()

        try:
            content = await asyncio.to_thread(_read_text, path)
        except FileNotFoundError as e:
            raise MemoryFileNotFoundError(filename) from e
        except (OSError, ValueError) as e:
            raise StorageIOError(_describe(e, path), filename) from e

        self.logger.debug("Memory file read", filename=filename, size=len(content))
        return content

    async def write(self, filename: str, content: str) -> Path:
        """Replace a memory file's content, creating the file if needed.

        Parent directories are not created.
        """
        path = self.resolve(filename)
        await self._ensure_root()
        await self._write(path, filename, content)

        self.logger.info("Memory file written", filename=filename, size=len(content))
        return path

    async def append(
        self,
        filename: str,
        content: str,
        section: Optional[str] = None,
    ) -> Path:
        """Append content (optionally under a section header) to a memory file.

        A missing file counts as empty; any other read failure aborts before
        anything is written.
        """
        path = self.resolve(filename)
        await self._ensure_root()

        try:
            existing = await asyncio.to_thread(_read_text, path)
        except FileNotFoundError:
            existing = ""
        except (OSError, ValueError) as e:
            raise StorageIOError(_describe(e, path), filename) from e

        await self._write(path, filename, compose_append(existing, content, section))

        self.logger.info(
            "Memory file appended",
            filename=filename,
            created=not existing,
            section=section,
        )
        return path

    async def list_files(self) -> List[MemoryFileInfo]:
        """List memory files directly inside the memory directory, by name."""
        await self._ensure_root()

        try:
            files = await asyncio.to_thread(self._scan)
        except OSError as e:
            raise StorageIOError(_describe(e, self.root)) from e

        self.logger.debug("Memory files listed", count=len(files))
        return files

    async def delete(self, filename: str) -> Path:
        """Remove a memory file.

        Raises:
            PathTraversalError: If the name escapes the memory directory.
            MemoryFileNotFoundError: If the file does not exist.
            StorageIOError: On any other failure (e.g. the name is a directory).
        """
        path = self.resolve(filename)

        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError as e:
            raise MemoryFileNotFoundError(filename) from e
        except (OSError, ValueError) as e:
            raise StorageIOError(_describe(e, path), filename) from e

        self.logger.info("Memory file deleted", filename=filename)
        return path

    async def read_default_context(self) -> str:
        """Text of the default memory file, or a placeholder document if absent."""
        try:
            return await self.read(DEFAULT_MEMORY_FILENAME)
        except MemoryFileNotFoundError:
            self.logger.debug("Default memory file missing, serving placeholder")
            return DEFAULT_CONTEXT_PLACEHOLDER

    async def _write(self, path: Path, filename: str, content: str) -> None:
        try:
            await asyncio.to_thread(_write_text, path, content)
        except FileNotFoundError as e:
            raise StorageIOError(
                f"Directory does not exist: {path.parent}", filename
            ) from e
        except (OSError, ValueError) as e:
            raise StorageIOError(_describe(e, path), filename) from e

    def _scan(self) -> List[MemoryFileInfo]:
        files = []
        with os.scandir(self.root) as entries:
            for entry in entries:
                if not entry.name.endswith(self.extension) or not entry.is_file():
                    continue
                stat = entry.stat()
                files.append(
                    MemoryFileInfo(
                        name=entry.name,
                        size_bytes=stat.st_size,
                        modified_at=from_timestamp(stat.st_mtime),
                    )
                )
        return sorted(files, key=lambda info: info.name)


def _describe(error: Exception, path: Path) -> str:
    if isinstance(error, OSError) and error.strerror:
        return f"{error.strerror}: {path}"
    return str(error)
