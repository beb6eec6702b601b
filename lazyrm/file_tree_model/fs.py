"""Filesystem probe: directory listing and removal with classified errors."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .types import DirectoryChild, EntryKind, ProbeError

logger = logging.getLogger(__name__)


def sort_key(child: DirectoryChild) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name, then exact name."""
    return (not child.is_dir, child.name.casefold(), child.name)


def list_directory_children(
    directory: Path,
    show_hidden: bool = True,
) -> tuple[list[DirectoryChild], ProbeError | None]:
    """List children of ``directory`` in tree order.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned, in which case ``children`` is empty.
    Symlinks are never followed and are reported as files.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue

                try:
                    is_symlink = child.is_symlink()
                except OSError:
                    is_symlink = False
                try:
                    is_dir = not is_symlink and child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                file_size: int | None = None
                if not is_dir:
                    try:
                        file_size = int(child.stat(follow_symlinks=False).st_size)
                    except OSError:
                        pass

                children.append(
                    DirectoryChild(
                        name=name,
                        path=Path(child.path),
                        kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
                        is_symlink=is_symlink,
                        file_size=file_size,
                    )
                )
    except OSError as exc:
        return [], ProbeError.from_os_error(directory, exc)

    children.sort(key=sort_key)
    return children, None


def remove_path(path: Path, recursive: bool) -> ProbeError | None:
    """Remove ``path`` and return ``None`` on success or the classified error.

    Directories are removed with ``shutil.rmtree`` when ``recursive`` is set,
    otherwise with ``rmdir``. Files and symlinks (including symlinks to
    directories) are unlinked.
    """
    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink()
        elif recursive:
            shutil.rmtree(path)
        else:
            path.rmdir()
    except OSError as exc:
        return ProbeError.from_os_error(path, exc)
    return None


class FilesystemProbe:
    """Bound probe used by the tree model and deletion executor."""

    def __init__(self, show_hidden: bool = True) -> None:
        self.show_hidden = show_hidden

    def list_directory(self, path: Path) -> tuple[list[DirectoryChild], ProbeError | None]:
        """List one directory, logging failures."""
        children, error = list_directory_children(path, self.show_hidden)
        if error is not None:
            logger.warning("Cannot list %s: %s", path, error.kind.label)
        return children, error

    def remove(self, path: Path, recursive: bool) -> ProbeError | None:
        """Remove one entry, logging the outcome."""
        error = remove_path(path, recursive)
        if error is None:
            logger.info("Removed %s", path)
        else:
            logger.warning("Cannot remove %s: %s", path, error.kind.label)
        return error


__all__ = [
    "FilesystemProbe",
    "sort_key",
    "list_directory_children",
    "remove_path",
]
