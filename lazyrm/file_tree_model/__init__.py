"""Filesystem probe for the tree model.

This package contains the only code that touches the filesystem:
- entry and error datatypes
- directory listing in tree order
- single and recursive removal
"""

from __future__ import annotations

from .types import DirectoryChild, EntryKind, ProbeError, ProbeErrorKind
from .fs import FilesystemProbe, list_directory_children, remove_path, sort_key

__all__ = [
    "DirectoryChild",
    "EntryKind",
    "ProbeError",
    "ProbeErrorKind",
    "FilesystemProbe",
    "list_directory_children",
    "remove_path",
    "sort_key",
]
