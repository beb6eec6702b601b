"""Tests for the filesystem probe listing and removal helpers."""

from __future__ import annotations

import errno
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyrm.file_tree_model import (
    EntryKind,
    FilesystemProbe,
    ProbeErrorKind,
    list_directory_children,
    remove_path,
)


class ListDirectoryChildrenTests(unittest.TestCase):
    def test_directories_sort_before_files_then_case_insensitive_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "beta").mkdir()
            (root / "Alpha").mkdir()
            (root / "b.txt").write_text("b", encoding="utf-8")
            (root / "A.txt").write_text("a", encoding="utf-8")
            (root / "c.txt").write_text("c", encoding="utf-8")

            children, scan_error = list_directory_children(root)

            self.assertIsNone(scan_error)
            self.assertEqual([child.name for child in children], ["Alpha", "beta", "A.txt", "b.txt", "c.txt"])
            self.assertEqual(
                [child.kind for child in children],
                [EntryKind.DIRECTORY, EntryKind.DIRECTORY, EntryKind.FILE, EntryKind.FILE, EntryKind.FILE],
            )

    def test_hidden_entries_are_filtered_only_when_requested(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".hidden").write_text("x", encoding="utf-8")
            (root / "shown.txt").write_text("x", encoding="utf-8")

            visible, _ = list_directory_children(root, show_hidden=False)
            everything, _ = list_directory_children(root, show_hidden=True)

            self.assertEqual([child.name for child in visible], ["shown.txt"])
            self.assertEqual([child.name for child in everything], [".hidden", "shown.txt"])

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlink_to_directory_is_reported_as_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "real"
            target.mkdir()
            (root / "link").symlink_to(target, target_is_directory=True)

            children, scan_error = list_directory_children(root)

            self.assertIsNone(scan_error)
            link = next(child for child in children if child.name == "link")
            self.assertEqual(link.kind, EntryKind.FILE)
            self.assertTrue(link.is_symlink)

    def test_missing_directory_returns_not_found_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "gone"

            children, scan_error = list_directory_children(missing)

            self.assertEqual(children, [])
            self.assertIsNotNone(scan_error)
            self.assertEqual(scan_error.kind, ProbeErrorKind.NOT_FOUND)
            self.assertEqual(scan_error.path, missing)

    def test_permission_error_is_classified(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch("lazyrm.file_tree_model.fs.os.scandir", side_effect=PermissionError(errno.EACCES, "denied")):
                children, scan_error = list_directory_children(root)

            self.assertEqual(children, [])
            self.assertEqual(scan_error.kind, ProbeErrorKind.PERMISSION_DENIED)


class RemovePathTests(unittest.TestCase):
    def test_recursive_removal_deletes_directory_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            nested = root / "a" / "b"
            nested.mkdir(parents=True)
            (nested / "f.txt").write_text("x", encoding="utf-8")

            self.assertIsNone(remove_path(root / "a", recursive=True))
            self.assertFalse((root / "a").exists())

    def test_non_recursive_removal_of_populated_directory_reports_not_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a").mkdir()
            (root / "a" / "f.txt").write_text("x", encoding="utf-8")

            error = remove_path(root / "a", recursive=False)

            self.assertIsNotNone(error)
            self.assertEqual(error.kind, ProbeErrorKind.NOT_EMPTY)
            self.assertTrue((root / "a").exists())

    def test_file_removal_and_missing_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "f.txt"
            target.write_text("x", encoding="utf-8")

            self.assertIsNone(remove_path(target, recursive=False))
            self.assertFalse(target.exists())
            error = remove_path(target, recursive=False)
            self.assertEqual(error.kind, ProbeErrorKind.NOT_FOUND)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlink_to_directory_is_unlinked_without_touching_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "real"
            target.mkdir()
            (target / "keep.txt").write_text("x", encoding="utf-8")
            link = root / "link"
            link.symlink_to(target, target_is_directory=True)

            self.assertIsNone(remove_path(link, recursive=True))
            self.assertFalse(link.is_symlink())
            self.assertTrue((target / "keep.txt").exists())

    def test_probe_remove_logs_failures(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "missing.txt"
            probe = FilesystemProbe()

            with self.assertLogs("lazyrm.file_tree_model.fs", level="WARNING") as logs:
                error = probe.remove(missing, recursive=False)

            self.assertEqual(error.kind, ProbeErrorKind.NOT_FOUND)
            self.assertIn("Cannot remove", logs.output[0])


if __name__ == "__main__":
    unittest.main()
