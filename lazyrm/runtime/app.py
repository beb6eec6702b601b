"""Runtime bootstrap: build state from a start path and run the loop."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..errors import StartupError
from ..file_tree_model import FilesystemProbe
from ..input import KeyReader, default_key_registry
from ..render import render_screen
from ..tree_model import DirTree
from ..ui_theme import resolve_theme
from .config import AppConfig
from .controller import TreeController
from .loop import run_main_loop
from .state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_state(path: Path, config: AppConfig) -> AppState:
    """Open the tree at ``path`` and wrap it in fresh ``AppState``.

    Raises ``StartupError`` when the start path cannot be used.
    """
    tree = DirTree.open(path, FilesystemProbe(show_hidden=config.show_hidden))
    return AppState(tree=tree, show_size_labels=config.show_size_labels)


def run_app(
    path: Path,
    config: AppConfig,
    theme_name: str | None = None,
    no_color: bool = False,
) -> None:
    """Initialize runtime state, wire subsystems, and run the event loop.

    Raises ``StartupError`` before touching the terminal when the start path
    is unusable or stdin is not an interactive terminal.
    """
    state = build_state(path, config)
    logger.info("Opened %s", state.tree.root.path)
    stdin_fd = sys.stdin.fileno()
    if not os.isatty(stdin_fd):
        raise StartupError(state.tree.root.path, "standard input is not a terminal")

    controller = TreeController(state)
    theme = resolve_theme(theme_name or config.theme, no_color=no_color or not os.isatty(sys.stdout.fileno()))

    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_main_loop(
        state,
        terminal,
        KeyReader(stdin_fd),
        controller,
        default_key_registry(),
        render=lambda current, width, height: render_screen(current, width, height, theme),
    )
    logger.info("Session ended with %d marked entries", state.tree.selected_count)


__all__ = ["build_state", "run_app"]
