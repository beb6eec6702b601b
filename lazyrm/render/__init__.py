"""Screen rendering for the tree view.

``build_frame`` is pure: it turns rows, cursor, and status into one ANSI
string. ``render_screen`` writes that frame to the terminal.
"""

from __future__ import annotations

import os
import sys

from ..ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width, pad_ansi_line, sanitize_text
from ..runtime.state import AppState
from ..tree_model import format_tree_row
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import footer_line

CURSOR_SYMBOL = "▶ "
EMPTY_TREE_TEXT = "(empty directory)"


def tree_view_rows(total_lines: int) -> int:
    """Rows available to the tree after the status line and footer."""
    return max(1, total_lines - 2)


def scroll_start_for_cursor(cursor: int | None, start: int, view_rows: int, row_count: int) -> int:
    """Return a scroll offset that keeps ``cursor`` inside the viewport."""
    if cursor is not None:
        if cursor < start:
            start = cursor
        elif cursor >= start + view_rows:
            start = cursor - view_rows + 1
    return max(0, min(start, max(0, row_count - view_rows)))


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Fit left/right status text into exactly ``width`` columns."""
    right = right_text if display_width(right_text) < width else ""
    left_room = max(0, width - display_width(right))
    left = clip_ansi_line(left_text, left_room)
    gap = max(0, width - display_width(left) - display_width(right))
    return left + " " * gap + right


def status_text(state: AppState, theme: UITheme | None = None) -> tuple[str, str]:
    """Return ``(left, right)`` status line texts for ``state``."""
    active_theme = theme or DEFAULT_THEME
    row_count = len(state.rows)
    position = f"{state.cursor + 1}/{row_count}" if state.cursor is not None else f"0/{row_count}"
    left = f" {sanitize_text(str(state.tree.root.path))}  {position}"
    marked = state.tree.selected_count
    if marked:
        left += f"  {marked} marked"
    right = ""
    if state.status_message:
        right = f"{active_theme.status_message}{sanitize_text(state.status_message)}{active_theme.reset}{active_theme.reverse} "
    return left, right


def build_frame(state: AppState, width: int, height: int, theme: UITheme | None = None) -> str:
    """Build a full-screen frame for the current rows and cursor."""
    active_theme = theme or DEFAULT_THEME
    width = max(1, width)
    view_rows = tree_view_rows(height)
    out: list[str] = ["\033[H\033[J"]

    for offset in range(view_rows):
        idx = state.tree_start + offset
        if idx < len(state.rows):
            row = state.rows[idx]
            is_cursor = idx == state.cursor
            prefix = CURSOR_SYMBOL if is_cursor else " " * len(CURSOR_SYMBOL)
            text = prefix + format_tree_row(row, show_size_labels=state.show_size_labels, theme=active_theme)
            if is_cursor:
                # Cursor row is drawn uncolored in reverse video.
                text = active_theme.reverse + pad_ansi_line(ANSI_ESCAPE_RE.sub("", text), width)
            else:
                text = clip_ansi_line(text, width)
            out.append(text)
            out.append(active_theme.reset)
        elif idx == 0 and not state.rows:
            out.append(clip_ansi_line(f"  {EMPTY_TREE_TEXT}", width))
        out.append("\r\n")

    left, right = status_text(state, active_theme)
    out.append(active_theme.reverse)
    out.append(build_status_line(left, width, right))
    out.append(active_theme.reset)
    out.append("\r\n")
    out.append(clip_ansi_line(footer_line(active_theme), width))
    out.append(active_theme.reset)
    return "".join(out)


def render_screen(state: AppState, width: int, height: int, theme: UITheme | None = None) -> None:
    """Write the current frame to stdout."""
    frame = build_frame(state, width, height, theme)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "CURSOR_SYMBOL",
    "tree_view_rows",
    "scroll_start_for_cursor",
    "build_status_line",
    "status_text",
    "build_frame",
    "render_screen",
]
