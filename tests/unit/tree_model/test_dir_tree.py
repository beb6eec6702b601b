"""Tests for lazy expansion, selection, and structural edits on ``DirTree``."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazyrm.errors import DirectoryReadError, NodeNotFoundError, StartupError
from lazyrm.file_tree_model import FilesystemProbe, ProbeError, ProbeErrorKind
from lazyrm.tree_model import DirTree, Failed, Fetched, Unfetched


class CountingProbe(FilesystemProbe):
    """Probe that records list calls and can be told to fail for a path."""

    def __init__(self) -> None:
        super().__init__(show_hidden=True)
        self.list_calls: list[Path] = []
        self.fail_listing: dict[Path, ProbeErrorKind] = {}

    def list_directory(self, path: Path):
        self.list_calls.append(path)
        kind = self.fail_listing.get(path)
        if kind is not None:
            return [], ProbeError(path, kind)
        return super().list_directory(path)


def _child(tree: DirTree, name: str, parent=None):
    node = parent if parent is not None else tree.root
    return next(child for child in node.children if child.name == name)


class DirTreeExpansionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "a").mkdir()
        (self.root / "a" / "inner.txt").write_text("x", encoding="utf-8")
        (self.root / "b.txt").write_text("b", encoding="utf-8")
        self.probe = CountingProbe()
        self.tree = DirTree.open(self.root, self.probe)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_open_expands_root_only(self) -> None:
        self.assertTrue(self.tree.root.expanded)
        self.assertEqual([child.name for child in self.tree.root.children], ["a", "b.txt"])
        a = _child(self.tree, "a")
        self.assertIsInstance(a.listing, Unfetched)
        self.assertFalse(a.expanded)
        self.assertEqual(self.probe.list_calls, [self.root])

    def test_expand_fetches_once_and_collapse_keeps_cache(self) -> None:
        a = _child(self.tree, "a")

        self.tree.expand(a)
        self.assertIsInstance(a.listing, Fetched)
        cached = a.children
        self.tree.collapse(a)
        self.assertFalse(a.expanded)
        self.assertIs(a.children, cached)
        self.tree.expand(a)

        self.assertTrue(a.expanded)
        self.assertIs(a.children, cached)
        self.assertEqual(self.probe.list_calls.count(self.root / "a"), 1)

    def test_failed_expand_stays_collapsed_and_retries_later(self) -> None:
        a = _child(self.tree, "a")
        self.probe.fail_listing[a.path] = ProbeErrorKind.PERMISSION_DENIED

        with self.assertRaises(DirectoryReadError) as raised:
            self.tree.expand(a)

        self.assertEqual(raised.exception.kind, ProbeErrorKind.PERMISSION_DENIED)
        self.assertFalse(a.expanded)
        self.assertIsInstance(a.listing, Failed)
        self.assertTrue(a.has_error)
        self.assertIsNone(a.children)

        del self.probe.fail_listing[a.path]
        self.tree.expand(a)

        self.assertTrue(a.expanded)
        self.assertFalse(a.has_error)
        self.assertEqual([child.name for child in a.children], ["inner.txt"])
        self.assertEqual(self.probe.list_calls.count(a.path), 2)

    def test_toggle_open_ignores_files(self) -> None:
        b = _child(self.tree, "b.txt")

        self.tree.toggle_open(b)

        self.assertFalse(b.expanded)
        self.assertIsInstance(b.listing, Unfetched)

    def test_refresh_keeps_surviving_children_and_drops_vanished_marks(self) -> None:
        a = _child(self.tree, "a")
        b = _child(self.tree, "b.txt")
        self.tree.expand(a)
        self.tree.set_selected(b, True)
        (self.root / "b.txt").unlink()
        (self.root / "c.txt").write_text("c", encoding="utf-8")

        self.tree.refresh(self.tree.root)

        self.assertEqual([child.name for child in self.tree.root.children], ["a", "c.txt"])
        self.assertIs(_child(self.tree, "a"), a)
        self.assertTrue(a.expanded)
        self.assertEqual(self.tree.selected_count, 0)
        self.assertIsNone(b.parent)


class DirTreeSelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "a").mkdir()
        (self.root / "a" / "inner.txt").write_text("x", encoding="utf-8")
        (self.root / "b.txt").write_text("b", encoding="utf-8")
        self.tree = DirTree.open(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_toggle_select_keeps_index_and_flags_in_sync(self) -> None:
        a = _child(self.tree, "a")
        b = _child(self.tree, "b.txt")

        self.tree.toggle_select(b)
        self.tree.toggle_select(a)
        self.assertEqual(self.tree.selected_nodes(), [b, a])
        self.assertTrue(a.selected and b.selected)

        self.tree.toggle_select(b)
        self.assertEqual(self.tree.selected_nodes(), [a])
        self.assertFalse(b.selected)
        self.assertEqual(self.tree.selected_count, 1)

    def test_root_cannot_be_selected(self) -> None:
        self.tree.toggle_select(self.tree.root)

        self.assertFalse(self.tree.root.selected)
        self.assertEqual(self.tree.selected_nodes(), [])

    def test_remove_subtree_drops_descendant_marks(self) -> None:
        a = _child(self.tree, "a")
        self.tree.expand(a)
        inner = _child(self.tree, "inner.txt", a)
        self.tree.set_selected(inner, True)
        b = _child(self.tree, "b.txt")
        self.tree.set_selected(b, True)

        detached = self.tree.remove_subtree(a)

        self.assertIs(detached, a)
        self.assertEqual([child.name for child in self.tree.root.children], ["b.txt"])
        self.assertEqual(self.tree.selected_nodes(), [b])
        self.assertFalse(self.tree.is_attached(a))
        self.assertFalse(self.tree.is_attached(inner))

    def test_remove_subtree_rejects_root_and_detached_nodes(self) -> None:
        b = _child(self.tree, "b.txt")
        self.tree.remove_subtree(b)

        with self.assertRaises(NodeNotFoundError):
            self.tree.remove_subtree(self.tree.root)
        with self.assertRaises(NodeNotFoundError):
            self.tree.remove_subtree(b)

    def test_find_walks_cached_listings_only(self) -> None:
        a = _child(self.tree, "a")

        self.assertIs(self.tree.find(self.root), self.tree.root)
        self.assertIs(self.tree.find(self.root / "a"), a)
        self.assertIsNone(self.tree.find(self.root / "a" / "inner.txt"))
        self.assertIsNone(self.tree.find(Path("/definitely/elsewhere")))

        self.tree.expand(a)
        self.assertIsNotNone(self.tree.find(self.root / "a" / "inner.txt"))


class DirTreeOpenTests(unittest.TestCase):
    def test_missing_path_raises_startup_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "missing"
            with self.assertRaises(StartupError) as raised:
                DirTree.open(missing)
            self.assertEqual(raised.exception.reason, "path not found")

    def test_file_path_raises_startup_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "f.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(StartupError) as raised:
                DirTree.open(target)
            self.assertEqual(raised.exception.reason, "not a directory")

    def test_unreadable_root_raises_startup_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            probe = CountingProbe()
            probe.fail_listing[root] = ProbeErrorKind.PERMISSION_DENIED
            with self.assertRaises(StartupError) as raised:
                DirTree.open(root, probe)
            self.assertEqual(raised.exception.reason, "permission denied")
            self.assertIn("permission denied", str(raised.exception))

    def test_empty_root_has_no_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tree = DirTree.open(Path(tmp))
            self.assertEqual(tree.root.children, [])
            self.assertTrue(tree.root.expanded)


if __name__ == "__main__":
    unittest.main()
