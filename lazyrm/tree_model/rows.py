"""Projection of the tree's expansion state into visible rows."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .types import Node, VisibleRow


def _row_for(node: Node, depth: int, is_last: bool, guides: tuple[bool, ...]) -> VisibleRow:
    return VisibleRow(
        path=node.path,
        name=node.name,
        kind=node.kind,
        depth=depth,
        selected=node.selected,
        has_error=node.has_error,
        expanded=node.expanded,
        is_symlink=node.is_symlink,
        file_size=node.file_size,
        is_last=is_last,
        guides=guides,
        error_message=node.error.describe() if node.error is not None else None,
    )


def iter_visible_rows(root: Node) -> Iterator[VisibleRow]:
    """Yield rows for ``root``'s descendants in depth-first pre-order.

    The root itself is not a row. Only children of expanded directories are
    visited. Call again to restart after any structural change.
    """
    if not root.expanded or not root.children:
        return

    # Each frame: (children, next index, depth, ancestor guides).
    stack: list[tuple[list[Node], int, int, tuple[bool, ...]]] = [(root.children, 0, 0, ())]
    while stack:
        children, idx, depth, guides = stack.pop()
        if idx >= len(children):
            continue
        stack.append((children, idx + 1, depth, guides))
        node = children[idx]
        is_last = idx == len(children) - 1
        yield _row_for(node, depth, is_last, guides)
        if node.is_dir and node.expanded and node.children:
            stack.append((node.children, 0, depth + 1, guides + (not is_last,)))


def build_visible_rows(root: Node) -> list[VisibleRow]:
    """Materialize ``iter_visible_rows`` into a list."""
    return list(iter_visible_rows(root))


def index_of_path(rows: list[VisibleRow], path: Path) -> int | None:
    """Return the row index for ``path`` or ``None`` when not visible."""
    for idx, row in enumerate(rows):
        if row.path == path:
            return idx
    return None


__all__ = [
    "iter_visible_rows",
    "build_visible_rows",
    "index_of_path",
]
