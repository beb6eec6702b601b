from __future__ import annotations

import errno
import unittest
from pathlib import Path

from lazyrm.errors import DeletionError, DirectoryReadError, StartupError
from lazyrm.file_tree_model import ProbeError, ProbeErrorKind


class ProbeErrorKindTests(unittest.TestCase):
    def test_os_errors_are_classified(self) -> None:
        self.assertIs(ProbeErrorKind.from_os_error(PermissionError(errno.EACCES, "x")), ProbeErrorKind.PERMISSION_DENIED)
        self.assertIs(ProbeErrorKind.from_os_error(FileNotFoundError(errno.ENOENT, "x")), ProbeErrorKind.NOT_FOUND)
        self.assertIs(ProbeErrorKind.from_os_error(OSError(errno.ENOTEMPTY, "x")), ProbeErrorKind.NOT_EMPTY)
        self.assertIs(ProbeErrorKind.from_os_error(OSError(errno.EIO, "x")), ProbeErrorKind.OTHER)


class NodeErrorTests(unittest.TestCase):
    def test_describe_uses_verb_and_label(self) -> None:
        read_error = DirectoryReadError(Path("/r/locked"), ProbeErrorKind.PERMISSION_DENIED)
        delete_error = DeletionError(Path("/r/full"), ProbeErrorKind.NOT_EMPTY)

        self.assertEqual(read_error.describe(), "cannot read locked: permission denied")
        self.assertEqual(delete_error.describe(), "cannot delete full: not empty")
        self.assertEqual(str(delete_error), "cannot delete full: not empty")

    def test_other_kind_uses_os_message(self) -> None:
        probe_error = ProbeError(Path("/r/x"), ProbeErrorKind.OTHER, OSError(errno.EIO, "Input/output error"))

        error = DeletionError.from_probe_error(probe_error)

        self.assertEqual(error.describe(), "cannot delete x: Input/output error")
        self.assertIs(error.cause, probe_error.cause)

    def test_startup_error_message(self) -> None:
        error = StartupError(Path("/nope"), "path not found")

        self.assertEqual(str(error), "/nope: path not found")


if __name__ == "__main__":
    unittest.main()
