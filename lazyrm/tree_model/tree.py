"""Lazily-expanded directory tree with a built-in selection index.

``DirTree`` owns every ``Node`` reachable from the root. All mutations of
node expansion, selection, and structure go through it so the selection
index never drifts from the per-node ``selected`` flags.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..errors import DirectoryReadError, NodeNotFoundError, StartupError
from ..file_tree_model import DirectoryChild, EntryKind, FilesystemProbe
from .types import Failed, Fetched, Node

logger = logging.getLogger(__name__)


def _node_from_child(child: DirectoryChild, parent: Node) -> Node:
    return Node(
        path=child.path,
        kind=child.kind,
        name=child.name,
        is_symlink=child.is_symlink,
        file_size=child.file_size,
        parent=parent,
    )


class DirTree:
    """In-memory directory hierarchy rooted at the start path."""

    def __init__(self, root_path: Path, probe: FilesystemProbe | None = None) -> None:
        self.probe = probe if probe is not None else FilesystemProbe()
        self.root = Node(path=root_path, kind=EntryKind.DIRECTORY, name=str(root_path))
        self._selected: dict[Path, Node] = {}

    @classmethod
    def open(cls, root_path: Path, probe: FilesystemProbe | None = None) -> DirTree:
        """Create a tree for ``root_path`` and expand the root.

        Raises ``StartupError`` when the path is missing, not a directory, or
        cannot be listed.
        """
        try:
            resolved = root_path.expanduser().resolve()
        except (OSError, RuntimeError) as exc:
            raise StartupError(root_path, str(exc)) from exc
        if not resolved.exists():
            raise StartupError(resolved, "path not found")
        if not resolved.is_dir():
            raise StartupError(resolved, "not a directory")

        tree = cls(resolved, probe)
        try:
            tree.expand(tree.root)
        except DirectoryReadError as exc:
            raise StartupError(resolved, exc.kind.label) from exc
        return tree

    # Expansion

    def expand(self, node: Node) -> None:
        """Reveal ``node``'s children, listing the directory on first use.

        Raises ``DirectoryReadError`` when listing fails; the node then stays
        collapsed with the error attached and no cached children.
        """
        if not node.is_dir:
            return
        if not node.is_fetched:
            self._fetch(node)
        node.expanded = True

    def collapse(self, node: Node) -> None:
        """Hide ``node``'s children while keeping them cached."""
        if node.is_dir:
            node.expanded = False

    def toggle_open(self, node: Node) -> None:
        """Expand a collapsed directory or collapse an expanded one."""
        if not node.is_dir:
            return
        if node.expanded:
            self.collapse(node)
        else:
            self.expand(node)

    def _fetch(self, node: Node) -> None:
        children, scan_error = self.probe.list_directory(node.path)
        if scan_error is not None:
            error = DirectoryReadError.from_probe_error(scan_error)
            node.listing = Failed(error)
            node.error = error
            node.expanded = False
            raise error
        node.listing = Fetched([_node_from_child(child, node) for child in children])
        if isinstance(node.error, DirectoryReadError):
            node.error = None

    def refresh(self, node: Node) -> None:
        """Re-list a fetched directory, keeping surviving children by path.

        Surviving children keep their own listing, expansion, and selection.
        Vanished children leave the selection index. A failing listing is
        attached to the node as in ``expand`` but does not raise.
        """
        if not node.is_dir or not node.is_fetched:
            return
        previous = {child.path: child for child in node.children or ()}
        children, scan_error = self.probe.list_directory(node.path)
        if scan_error is not None:
            error = DirectoryReadError.from_probe_error(scan_error)
            self._forget_selection(previous.values())
            node.listing = Failed(error)
            node.error = error
            node.expanded = False
            return

        refreshed: list[Node] = []
        for child in children:
            kept = previous.pop(child.path, None)
            if kept is not None and kept.kind is child.kind:
                refreshed.append(kept)
                continue
            if kept is not None:
                previous[child.path] = kept
            refreshed.append(_node_from_child(child, node))
        self._forget_selection(previous.values())
        for stale in previous.values():
            stale.parent = None
        node.listing = Fetched(refreshed)

    # Selection

    def toggle_select(self, node: Node) -> None:
        """Flip the deletion mark on ``node``; the root is never marked."""
        self.set_selected(node, not node.selected)

    def set_selected(self, node: Node, selected: bool) -> None:
        if node is self.root:
            return
        node.selected = selected
        if selected:
            self._selected[node.path] = node
        else:
            self._selected.pop(node.path, None)

    def selected_nodes(self) -> list[Node]:
        """Return marked nodes in the order they were marked."""
        return list(self._selected.values())

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    def _forget_selection(self, nodes: Iterable[Node]) -> None:
        for top in nodes:
            for node in top.iter_subtree():
                if node.selected:
                    self._selected.pop(node.path, None)

    # Structure

    def is_attached(self, node: Node) -> bool:
        """Return whether ``node`` is still reachable from the root."""
        current = node
        while current.parent is not None:
            siblings = current.parent.children
            if siblings is None or not any(sibling is current for sibling in siblings):
                return False
            current = current.parent
        return current is self.root

    def remove_subtree(self, node: Node) -> Node:
        """Detach ``node`` from its parent and drop its subtree's marks.

        Returns the detached node. Raises ``NodeNotFoundError`` for the root
        or a node that is no longer attached.
        """
        if node is self.root or not self.is_attached(node):
            raise NodeNotFoundError(node.path)
        parent = node.parent
        assert parent is not None and parent.children is not None
        parent.children[:] = [child for child in parent.children if child is not node]
        node.parent = None
        self._forget_selection([node])
        logger.debug("Detached %s from tree", node.path)
        return node

    def find(self, path: Path) -> Node | None:
        """Find an attached node by path, walking only cached listings."""
        if path == self.root.path:
            return self.root
        try:
            relative = path.relative_to(self.root.path)
        except ValueError:
            return None
        node = self.root
        for part in relative.parts:
            children = node.children
            if children is None:
                return None
            node = next((child for child in children if child.name == part), None)
            if node is None:
                return None
        return node


__all__ = ["DirTree"]
