"""Tests for memory path resolution."""

import os
from pathlib import Path

import pytest

from mcp_soul.core.exceptions import ErrorKind, PathTraversalError
from mcp_soul.memory.paths import resolve_memory_path

ROOT = Path("/home/u/.mem")


class TestResolveMemoryPath:
    """Test confinement of filenames to the memory directory."""

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("soul.md", "/home/u/.mem/soul.md"),
            ("notes/today.md", "/home/u/.mem/notes/today.md"),
            ("./soul.md", "/home/u/.mem/soul.md"),
            ("notes//today.md", "/home/u/.mem/notes/today.md"),
            ("notes/../soul.md", "/home/u/.mem/soul.md"),
            ("a/b/../../c.md", "/home/u/.mem/c.md"),
        ],
    )
    def test_names_inside_root_are_accepted(self, filename, expected):
        """Relative names are joined and normalized under the root."""
        assert resolve_memory_path(ROOT, filename) == Path(expected)

    @pytest.mark.parametrize(
        "filename",
        [
            "../secret",
            "../../etc/passwd",
            "a/../../b",
            "notes/../../../soul.md",
            "/etc/passwd",
            "/home/u/.mem-other/soul.md",
            "../.mem-evil/soul.md",
        ],
    )
    def test_escaping_names_are_rejected(self, filename):
        """Anything normalizing outside the root raises PathTraversalError."""
        with pytest.raises(PathTraversalError) as exc_info:
            resolve_memory_path(ROOT, filename)

        error = exc_info.value
        assert error.kind is ErrorKind.PATH_TRAVERSAL
        assert error.error_code == "PATH_TRAVERSAL"
        assert error.filename == filename
        assert error.message == "Invalid filename: path must stay within the memory directory."

    def test_sibling_with_shared_prefix_is_rejected(self):
        """A directory whose name merely starts with the root name is outside it."""
        with pytest.raises(PathTraversalError):
            resolve_memory_path("/data/mem", "../memory/soul.md")

    def test_absolute_path_inside_root_is_accepted(self):
        """An absolute override that still lands inside the root is fine."""
        assert resolve_memory_path(ROOT, "/home/u/.mem/soul.md") == ROOT / "soul.md"

    def test_root_itself_is_accepted(self):
        """Names normalizing to the root resolve to the root."""
        assert resolve_memory_path(ROOT, ".") == ROOT
        assert resolve_memory_path(ROOT, "") == ROOT
        assert resolve_memory_path(ROOT, "notes/..") == ROOT

    def test_trailing_separator_on_root(self):
        """A trailing separator on the root changes nothing."""
        assert resolve_memory_path("/home/u/.mem/", "soul.md") == ROOT / "soul.md"
        with pytest.raises(PathTraversalError):
            resolve_memory_path("/home/u/.mem/", "../soul.md")

    def test_filesystem_root(self):
        """A store rooted at the filesystem root accepts any absolute path."""
        assert resolve_memory_path("/", "etc/soul.md") == Path("/etc/soul.md")
        assert resolve_memory_path("/", "../soul.md") == Path("/soul.md")

    def test_relative_root_is_made_absolute(self, temp_dir, monkeypatch):
        """A relative root is interpreted against the working directory."""
        monkeypatch.chdir(temp_dir)
        resolved = resolve_memory_path("mem", "soul.md")
        assert resolved == Path(os.path.abspath("mem")) / "soul.md"

    def test_does_not_touch_filesystem(self, temp_dir):
        """Resolution works for roots that don't exist and creates nothing."""
        root = temp_dir / "not-created"
        resolved = resolve_memory_path(root, "notes/today.md")

        assert resolved == root / "notes" / "today.md"
        assert not root.exists()

    @pytest.mark.parametrize(
        "filename",
        ["soul.md", "notes/today.md", "a/b/c/d.md", "x..md", "..hidden.md", "dots.../f.md"],
    )
    def test_traversal_free_names_stay_prefixed(self, filename):
        """Without '..' segments the result always starts with the root."""
        resolved = str(resolve_memory_path(ROOT, filename))
        assert resolved.startswith(str(ROOT) + os.sep)
