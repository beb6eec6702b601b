"""Tree model: lazily-expanded nodes, row projection, and row formatting.

Defines ``Node``/``VisibleRow`` and the ``DirTree`` that owns the node graph
and its selection index.
"""

from __future__ import annotations

from .rendering import format_size, format_tree_row, tree_prefix
from .rows import build_visible_rows, index_of_path, iter_visible_rows
from .tree import DirTree
from .types import UNFETCHED, Failed, Fetched, Listing, Node, Unfetched, VisibleRow

__all__ = [
    "DirTree",
    "Node",
    "VisibleRow",
    "Listing",
    "Unfetched",
    "Fetched",
    "Failed",
    "UNFETCHED",
    "iter_visible_rows",
    "build_visible_rows",
    "index_of_path",
    "format_tree_row",
    "format_size",
    "tree_prefix",
]
