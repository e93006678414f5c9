"""Asset tree walker — best-effort discovery of files by suffix.

Walks a read-only tree of folders and files (``pathlib.Path`` or an
``importlib.resources`` traversable) and returns the ``/``-joined paths of
files ending with a suffix.

Any file or folder whose name contains the reserved ``main`` marker is left
out of discovery: those files override the main layout instead of becoming
views of their own.

Folders that cannot be listed (missing, permission denied) contribute
nothing.  Discovery never fails.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from viewkit._types import ReadDir, TreeEntry

# Marker reserving a file or folder for the main layout
RESERVED_MARKER = "main"

logger = logging.getLogger(__name__)


def is_reserved(name: str) -> bool:
    """Return True if *name* is reserved for the main layout."""
    return RESERVED_MARKER in name


def tree_reader(root: Path | Traversable) -> ReadDir:
    """Build a ``read_dir`` callable over *root*.

    Folder arguments are ``/``-joined paths relative to *root*; ``""`` lists
    *root* itself.  Entries are sorted by name so walks are reproducible.

    """

    def read_dir(folder: str) -> list[TreeEntry]:
        node = root
        for part in folder.split("/"):
            if part:
                node = node.joinpath(part)
        return sorted(node.iterdir(), key=lambda entry: entry.name)

    return read_dir


def walk(read_dir: ReadDir, folder: str, suffix: str) -> list[str]:
    """Recursively list files under *folder* whose name ends with *suffix*.

    Args:
        read_dir: Lists the entries of a folder.
        folder: Folder to start from (``""`` for the tree root).
        suffix: Required filename suffix, e.g. ``".css"``.

    Returns:
        Paths joined with ``/`` and prefixed with *folder* when it is
        non-empty, in listing order.

    """
    try:
        entries = list(read_dir(folder))
    except OSError as exc:
        logger.debug("Skipping unreadable folder %r: %s", folder, exc)
        return []

    found: list[str] = []
    for entry in entries:
        name = entry.name
        if is_reserved(name):
            continue

        entry_path = f"{folder}/{name}" if folder else name
        if entry.is_dir():
            found.extend(walk(read_dir, entry_path, suffix))
        elif name.endswith(suffix):
            found.append(entry_path)

    return found


def reserved_files(root: Path | Traversable, suffix: str) -> list[Path | Traversable]:
    """Return top-level files under *root* with a reserved name and *suffix*.

    Sorted by name.  A missing or unreadable *root* yields an empty list.

    """
    try:
        entries = sorted(root.iterdir(), key=lambda entry: entry.name)
    except OSError:
        return []
    return [
        entry
        for entry in entries
        if is_reserved(entry.name) and entry.name.endswith(suffix) and not entry.is_dir()
    ]
