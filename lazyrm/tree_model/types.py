"""Tree node and visible-row datatypes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import DirectoryReadError, NodeError
from ..file_tree_model import EntryKind


@dataclass(frozen=True)
class Unfetched:
    """Directory listing has not been read yet."""


@dataclass(frozen=True)
class Fetched:
    """Directory listing was read; ``children`` is owned by the node."""

    children: list[Node]


@dataclass(frozen=True)
class Failed:
    """Last listing attempt failed; nothing was cached."""

    error: DirectoryReadError


Listing = Unfetched | Fetched | Failed

UNFETCHED = Unfetched()


@dataclass(eq=False)
class Node:
    """One filesystem entry in the in-memory tree.

    Nodes compare by identity. ``listing`` is only meaningful for directories;
    files always stay ``UNFETCHED``.
    """

    path: Path
    kind: EntryKind
    name: str = ""
    is_symlink: bool = False
    file_size: int | None = None
    listing: Listing = UNFETCHED
    expanded: bool = False
    selected: bool = False
    error: NodeError | None = None
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.path.name or str(self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_fetched(self) -> bool:
        return isinstance(self.listing, Fetched)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def children(self) -> list[Node] | None:
        """Cached children, or ``None`` when the listing was never fetched."""
        if isinstance(self.listing, Fetched):
            return self.listing.children
        return None

    def iter_subtree(self) -> Iterator[Node]:
        """Yield this node and every cached descendant in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            children = node.children
            if children:
                stack.extend(reversed(children))


@dataclass(frozen=True)
class VisibleRow:
    """One projected row handed to the renderer.

    ``guides`` holds, per ancestor level, whether more siblings follow at that
    level; the renderer turns it into ``│`` connectors.
    """

    path: Path
    name: str
    kind: EntryKind
    depth: int
    selected: bool = False
    has_error: bool = False
    expanded: bool = False
    is_symlink: bool = False
    file_size: int | None = None
    is_last: bool = False
    guides: tuple[bool, ...] = ()
    error_message: str | None = None

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_selected(self) -> bool:
        return self.selected


__all__ = [
    "Unfetched",
    "Fetched",
    "Failed",
    "Listing",
    "UNFETCHED",
    "Node",
    "VisibleRow",
]
