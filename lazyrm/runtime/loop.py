"""Main interactive event loop for the terminal UI.

One key is read, decoded into a command, and fully handled (state mutated,
rows re-projected) before the next key is read. Rendering happens only when
state is dirty.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyComboRegistry, KeyReader
from ..render import scroll_start_for_cursor, tree_view_rows
from .controller import TreeController
from .state import AppState
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    idle_poll_ms: int = 250


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    reader: KeyReader,
    controller: TreeController,
    registry: KeyComboRegistry,
    render: Callable[[AppState, int, int], None],
    timing: RuntimeLoopTiming | None = None,
) -> None:
    """Run the interactive TUI loop until a quit command arrives.

    Each iteration handles terminal resize bookkeeping, optional rendering,
    and key decoding/dispatch.
    """
    active_timing = timing or RuntimeLoopTiming()
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                state.dirty = True

            controller.expire_status_message()
            state.usable = tree_view_rows(term.lines)
            prev_tree_start = state.tree_start
            state.tree_start = scroll_start_for_cursor(
                state.cursor,
                state.tree_start,
                state.usable,
                len(state.rows),
            )
            if state.tree_start != prev_tree_start:
                state.dirty = True

            if state.dirty:
                render(state, term.columns, term.lines)
                state.dirty = False

            key = reader.read_key(timeout_ms=active_timing.idle_poll_ms)
            command = registry.resolve(key)
            if command is None:
                continue
            if controller.handle(command):
                return


__all__ = ["RuntimeLoopTiming", "run_main_loop"]
