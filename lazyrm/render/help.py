"""Key-hint footer content.

Presentation-only helpers; the bindings themselves live in ``lazyrm.input``.
"""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme

# (label, key, destructive); the plain line fits in 80 columns.
FOOTER_HINTS: tuple[tuple[str, str, bool], ...] = (
    ("Move", "↑↓", False),
    ("Open", "Enter", False),
    ("Mark", "Space", False),
    ("Del", "r", True),
    ("Del all", "^R/R", True),
    ("Quit", "q", False),
)


def footer_line(theme: UITheme | None = None) -> str:
    """Return the styled one-line key-hint footer."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    parts: list[str] = []
    for label, key, destructive in FOOTER_HINTS:
        key_color = active_theme.footer_danger_key if destructive else active_theme.footer_key
        parts.append(f"{active_theme.footer_label}{label}:{reset} {key_color}<{key}>{reset}")
    return " " + "  ".join(parts)


__all__ = ["FOOTER_HINTS", "footer_line"]
