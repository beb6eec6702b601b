"""Persistent JSON config helpers.

Stores hidden-file preference, theme name, log level, and size-label toggle.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyrm"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AppConfig:
    """User preferences read once at startup."""

    show_hidden: bool = True
    theme: str | None = None
    log_level: int = logging.WARNING
    show_size_labels: bool = True


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit boolean values are accepted; anything else is ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_log_level(data: dict[str, object]) -> int:
    value = data.get("log_level")
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return int(logging.getLevelName(value.strip().upper()))
    return logging.WARNING


def load_app_config(path: Path | None = None) -> AppConfig:
    """Build an ``AppConfig`` from the config file with per-key fallbacks."""
    data = load_config(path)
    theme = data.get("theme")
    return AppConfig(
        show_hidden=_load_bool(data, "show_hidden", True),
        theme=theme if isinstance(theme, str) and theme.strip() else None,
        log_level=_load_log_level(data),
        show_size_labels=_load_bool(data, "show_size_labels", True),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "AppConfig",
    "load_config",
    "load_app_config",
]
