"""Batch deletion of tree nodes with per-target failure isolation.

Each target is removed independently through the filesystem probe. Removed
targets are excised from the tree; failed targets stay in place, keep their
mark, and carry a ``DeletionError``. Nothing is retried or rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import DeletionError
from .file_tree_model import ProbeErrorKind
from .tree_model import DirTree, Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletionResult:
    """Aggregate outcome of one ``DeletionExecutor.delete`` call.

    Attributes:
        removed: Target paths that are gone from disk and from the tree.
        failed: ``(path, error)`` pairs for targets that could not be removed.
        skipped: Targets already removed together with a removed ancestor.
    """

    removed: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, DeletionError]] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.removed)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        """One-line summary for the status line."""
        if not self.removed and not self.failed:
            return "nothing to delete"
        text = f"deleted {self.removed_count}"
        if self.failed:
            text += f", {self.failed_count} failed"
            if self.failed_count == 1:
                text += f" ({self.failed[0][1].describe()})"
        return text


class DeletionExecutor:
    """Removes target nodes from disk and reconciles the tree afterwards."""

    def __init__(self, tree: DirTree) -> None:
        self.tree = tree

    def _ordered_targets(self, targets: Iterable[Node]) -> list[Node]:
        unique: dict[int, Node] = {}
        for node in targets:
            unique.setdefault(id(node), node)
        # Ancestors first so nested targets are swept with them.
        return sorted(unique.values(), key=lambda node: len(node.path.parts))

    def delete(self, targets: Iterable[Node]) -> DeletionResult:
        """Attempt to remove every target, continuing past failures."""
        result = DeletionResult()
        for node in self._ordered_targets(targets):
            if node is self.tree.root:
                continue
            if not self.tree.is_attached(node):
                result.skipped.append(node.path)
                continue
            self._delete_one(node, result)

        logger.info(
            "Deletion batch finished: %d removed, %d failed, %d skipped",
            result.removed_count,
            result.failed_count,
            len(result.skipped),
        )
        return result

    def _delete_one(self, node: Node, result: DeletionResult) -> None:
        probe_error = self.tree.probe.remove(node.path, recursive=node.is_dir)
        if probe_error is not None and probe_error.kind is ProbeErrorKind.NOT_FOUND:
            logger.warning("%s vanished before removal; dropping it from the tree", node.path)
            probe_error = None

        if probe_error is None:
            self.tree.remove_subtree(node)
            result.removed.append(node.path)
            return

        error = DeletionError.from_probe_error(probe_error)
        node.error = error
        result.failed.append((node.path, error))
        if node.is_dir:
            # A partial rmtree may have removed some descendants.
            self.tree.refresh(node)
            node.error = error


__all__ = ["DeletionResult", "DeletionExecutor"]
