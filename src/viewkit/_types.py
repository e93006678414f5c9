"""Shared type definitions for viewkit."""

from collections.abc import Callable, Iterable
from typing import Any, Protocol

# Name of a registered view (and of its data source)
type ViewName = str

# Per-request data producer; may return a value or an awaitable
type DataSource = Callable[[Any], Any]

# Template function exposed as a kida global
type TemplateFunction = Callable[..., Any]


class TreeEntry(Protocol):
    """One entry of a read-only asset tree (``Path`` or resource traversable)."""

    @property
    def name(self) -> str: ...

    def is_dir(self) -> bool: ...


# Lists the entries of a folder given as a ``/``-joined relative path
type ReadDir = Callable[[str], Iterable[TreeEntry]]
