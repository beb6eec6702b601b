"""Formatting helpers for tree rows."""

from __future__ import annotations

from ..ansi import sanitize_text
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import VisibleRow

TREE_SIZE_LABEL_MIN_BYTES = 10 * 1024
SELECTED_MARK = "[x] "
UNSELECTED_MARK = "[ ] "


def tree_prefix(row: VisibleRow) -> str:
    """Return the ``│ ├─ └─`` connector prefix for ``row``."""
    guides = "".join("│ " if more else "  " for more in row.guides)
    return guides + ("└─" if row.is_last else "├─")


def format_size(size: int) -> str:
    """Return a compact size label such as ``12 KB`` or ``3.4 MB``."""
    if size < 1024 * 1024:
        return f"{size // 1024} KB"
    if size < 1024 * 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MB"
    return f"{size / (1024 * 1024 * 1024):.1f} GB"


def format_tree_row(
    row: VisibleRow,
    show_size_labels: bool = True,
    theme: UITheme | None = None,
) -> str:
    """Render one tree row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    label = sanitize_text(row.name)
    guide = f"{active_theme.tree_guide}{tree_prefix(row)}{reset}"

    if row.selected:
        mark = f"{active_theme.tree_selected}{SELECTED_MARK}{reset}"
        name_color = active_theme.tree_selected
    else:
        mark = UNSELECTED_MARK
        name_color = ""

    if row.is_directory:
        marker = "▾ " if row.expanded else "▸ "
        name = f"{active_theme.tree_marker}{marker}{reset}{name_color or active_theme.tree_dir}{label}/{reset}"
    elif row.is_symlink:
        name = f"  {name_color or active_theme.tree_symlink}{label}@{reset}"
    else:
        name = f"  {name_color or active_theme.tree_file}{label}{reset}"
    size_label = ""
    if show_size_labels and row.file_size is not None and row.file_size >= TREE_SIZE_LABEL_MIN_BYTES:
        size_label = f"{active_theme.tree_size} [{format_size(row.file_size)}]{reset}"

    error_label = ""
    if row.has_error:
        message = sanitize_text(row.error_message or "error")
        error_label = f"{active_theme.tree_error} ! {message}{reset}"

    return f"{guide} {mark}{name}{size_label}{error_label}"


__all__ = [
    "TREE_SIZE_LABEL_MIN_BYTES",
    "tree_prefix",
    "format_size",
    "format_tree_row",
]
