"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows, the status line, and the key-hint
footer. ``plain`` is used when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    tree_guide: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_symlink: str
    tree_size: str
    tree_selected: str
    tree_error: str
    status_message: str
    footer_label: str
    footer_key: str
    footer_danger_key: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    tree_guide="\033[2m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_symlink="\033[38;5;140m",
    tree_size="\033[38;5;109m",
    tree_selected="\033[1;31m",
    tree_error="\033[38;5;208m",
    status_message="\033[1;38;5;229m",
    footer_label="\033[2;38;5;250m",
    footer_key="\033[1;34m",
    footer_danger_key="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    tree_guide="\033[2;38;5;31m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_symlink="\033[38;5;117m",
    tree_size="\033[38;5;73m",
    tree_selected="\033[1;38;5;203m",
    tree_error="\033[38;5;215m",
    status_message="\033[1;38;5;153m",
    footer_label="\033[2;38;5;110m",
    footer_key="\033[1;38;5;45m",
    footer_danger_key="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    tree_guide="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_symlink="",
    tree_size="",
    tree_selected="",
    tree_error="",
    status_message="",
    footer_label="",
    footer_key="",
    footer_danger_key="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
