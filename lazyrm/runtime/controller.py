"""Navigation and selection controller.

Interprets logical commands against ``AppState``: moves the cursor, toggles
expansion and marks through the tree model, routes delete commands through
the deletion executor, and keeps the cursor valid after every change.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from ..deletion import DeletionExecutor, DeletionResult
from ..errors import DirectoryReadError
from ..input import Command
from ..tree_model import Node, build_visible_rows, index_of_path
from .state import AppState

STATUS_MESSAGE_SECONDS = 4.0

logger = logging.getLogger(__name__)


def clamp_cursor(cursor: int | None, row_count: int) -> int | None:
    """Clamp ``cursor`` into ``[0, row_count - 1]``; ``None`` for no rows."""
    if row_count <= 0:
        return None
    if cursor is None:
        return 0
    return max(0, min(cursor, row_count - 1))


class TreeController:
    """Command handler owning cursor arithmetic over projected rows."""

    def __init__(
        self,
        state: AppState,
        executor: DeletionExecutor | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.state = state
        self.executor = executor if executor is not None else DeletionExecutor(state.tree)
        self._clock = clock
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.MOVE_UP: lambda: self.move_cursor(-1),
            Command.MOVE_DOWN: lambda: self.move_cursor(1),
            Command.TOGGLE_OPEN: self.toggle_open,
            Command.TOGGLE_SELECT: self.toggle_select,
            Command.DELETE_SELECTED: self.delete_at_cursor,
            Command.DELETE_ALL: self.delete_marked,
        }
        self.rebuild_rows()

    def handle(self, command: Command) -> bool:
        """Apply one command and return ``True`` when the app should quit."""
        if command is Command.QUIT:
            return True
        self._handlers[command]()
        return False

    def rebuild_rows(self, preferred_path: Path | None = None) -> None:
        """Re-project rows and re-clamp the cursor.

        The cursor follows ``preferred_path`` when it is still visible;
        otherwise it keeps its index, clamped to the shorter list.
        """
        state = self.state
        state.rows = build_visible_rows(state.tree.root)
        target = index_of_path(state.rows, preferred_path) if preferred_path is not None else None
        state.cursor = target if target is not None else clamp_cursor(state.cursor, len(state.rows))
        state.dirty = True

    def set_status_message(self, message: str) -> None:
        """Show ``message`` in the status line for a short interval."""
        self.state.status_message = message
        self.state.status_message_until = self._clock() + STATUS_MESSAGE_SECONDS
        self.state.dirty = True

    def expire_status_message(self) -> None:
        state = self.state
        if state.status_message and self._clock() >= state.status_message_until:
            state.status_message = ""
            state.status_message_until = 0.0
            state.dirty = True

    def _cursor_node(self) -> Node | None:
        row = self.state.cursor_row
        if row is None:
            return None
        return self.state.tree.find(row.path)

    def move_cursor(self, delta: int) -> None:
        state = self.state
        if not state.rows:
            state.cursor = None
            return
        moved = clamp_cursor((state.cursor or 0) + delta, len(state.rows))
        if moved != state.cursor:
            state.cursor = moved
            state.dirty = True

    def toggle_open(self) -> None:
        node = self._cursor_node()
        if node is None or not node.is_dir:
            return
        try:
            self.state.tree.toggle_open(node)
        except DirectoryReadError as exc:
            logger.warning("Expand failed: %s", exc)
            self.set_status_message(exc.describe())
        self.rebuild_rows(preferred_path=node.path)

    def toggle_select(self) -> None:
        node = self._cursor_node()
        if node is None:
            return
        self.state.tree.toggle_select(node)
        self.rebuild_rows(preferred_path=node.path)

    def delete_at_cursor(self) -> None:
        """Delete the node under the cursor, whether or not it is marked."""
        node = self._cursor_node()
        if node is None:
            return
        self._run_deletion([node])

    def delete_marked(self) -> None:
        """Delete every marked node in the tree, wherever the cursor is."""
        targets = self.state.tree.selected_nodes()
        if not targets:
            self.set_status_message("nothing marked")
            return
        self._run_deletion(targets)

    def _run_deletion(self, targets: list[Node]) -> DeletionResult:
        row = self.state.cursor_row
        preferred_path = row.path if row is not None else None
        result = self.executor.delete(targets)
        self.state.last_deletion = result
        self.rebuild_rows(preferred_path=preferred_path)
        self.set_status_message(result.summary())
        return result


__all__ = ["STATUS_MESSAGE_SECONDS", "clamp_cursor", "TreeController"]
