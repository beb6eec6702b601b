"""Probe datatypes: directory entries and classified OS errors."""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    """Kind of filesystem entry as seen by the tree.

    Symlinks are reported as ``FILE`` so they are never traversed.
    """

    FILE = "file"
    DIRECTORY = "directory"


class ProbeErrorKind(str, Enum):
    """Classified reason for a failed listing or removal."""

    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    NOT_EMPTY = "not_empty"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable label used in status and row messages."""
        return self.value.replace("_", " ")

    @classmethod
    def from_os_error(cls, exc: OSError) -> ProbeErrorKind:
        """Map an ``OSError`` subclass or errno onto a probe error kind."""
        if isinstance(exc, PermissionError):
            return cls.PERMISSION_DENIED
        if isinstance(exc, FileNotFoundError):
            return cls.NOT_FOUND
        if exc.errno in {errno.ENOTEMPTY, errno.EEXIST}:
            return cls.NOT_EMPTY
        if exc.errno in {errno.EACCES, errno.EPERM}:
            return cls.PERMISSION_DENIED
        if exc.errno == errno.ENOENT:
            return cls.NOT_FOUND
        return cls.OTHER


@dataclass(frozen=True)
class ProbeError:
    """Failed probe call for ``path`` with its original exception."""

    path: Path
    kind: ProbeErrorKind
    cause: OSError | None = None

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> ProbeError:
        return cls(path=path, kind=ProbeErrorKind.from_os_error(exc), cause=exc)


@dataclass(frozen=True)
class DirectoryChild:
    """One directory-listing record."""

    name: str
    path: Path
    kind: EntryKind
    is_symlink: bool = False
    file_size: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


__all__ = [
    "EntryKind",
    "ProbeErrorKind",
    "ProbeError",
    "DirectoryChild",
]
