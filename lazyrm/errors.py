"""Exception taxonomy for tree reads, deletions, and startup.

Per-node errors are attached to tree nodes and shown in the row display.
Only ``StartupError`` is fatal; it is raised before the event loop starts.
"""

from __future__ import annotations

from pathlib import Path

from .file_tree_model.types import ProbeError, ProbeErrorKind


class LazyRmError(Exception):
    """Base class for all lazyrm errors."""


class NodeError(LazyRmError):
    """Probe failure bound to one tree node path."""

    verb = "access"

    def __init__(self, path: Path, kind: ProbeErrorKind, cause: BaseException | None = None) -> None:
        self.path = path
        self.kind = kind
        self.cause = cause
        super().__init__(self.describe())

    @classmethod
    def from_probe_error(cls, error: ProbeError) -> NodeError:
        """Wrap a probe error value into the node-level exception type."""
        return cls(error.path, error.kind, error.cause)

    def describe(self) -> str:
        """Return a short one-line message suitable for the status line."""
        detail = self.kind.label
        if self.kind is ProbeErrorKind.OTHER and self.cause is not None:
            detail = getattr(self.cause, "strerror", None) or str(self.cause) or detail
        return f"cannot {self.verb} {self.path.name or self.path}: {detail}"


class DirectoryReadError(NodeError):
    """Listing a directory failed; the node stays collapsed."""

    verb = "read"


class DeletionError(NodeError):
    """Removing a target failed; the node stays in the tree."""

    verb = "delete"


class NodeNotFoundError(LazyRmError):
    """Node is the tree root or no longer attached to the tree."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"node not attached to tree: {path}")


class StartupError(LazyRmError):
    """Start path is missing, not a directory, or unreadable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


__all__ = [
    "LazyRmError",
    "NodeError",
    "DirectoryReadError",
    "DeletionError",
    "NodeNotFoundError",
    "StartupError",
]
