"""Confinement of caller-supplied filenames to the memory directory."""

import os
from pathlib import Path
from typing import Union

from ..core.exceptions import PathTraversalError


def resolve_memory_path(root: Union[str, Path], filename: str) -> Path:
    """Resolve ``filename`` against ``root`` and refuse anything outside it.

    Resolution is purely lexical (``.``, ``..`` and repeated separators are
    collapsed, nothing on disk is consulted), and the containment check runs on
    the normalized result. An absolute ``filename`` replaces the root during
    the join and is rejected the same way as ``../`` escapes.

    Args:
        root: The memory directory. A trailing separator is ignored.
        filename: Caller-supplied name, e.g. ``soul.md`` or ``notes/today.md``.

    Returns:
        The absolute path, equal to the root or strictly below it.

    Raises:
        PathTraversalError: If the normalized path leaves the root.
    """
    base = os.path.normpath(os.path.abspath(os.fspath(root)))
    candidate = os.path.normpath(os.path.join(base, filename))

    # base is "/" only for a filesystem-root store; avoid a "//" prefix then
    prefix = base if base.endswith(os.sep) else base + os.sep
    if candidate != base and not candidate.startswith(prefix):
        raise PathTraversalError(filename)

    return Path(candidate)
