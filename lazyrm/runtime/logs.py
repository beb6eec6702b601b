"""File logging for the interactive session.

The terminal is owned by the TUI, so log records go to a file under the
platform log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "lazyrm.log"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_HANDLER_NAME = "lazyrm-session"


def configure_logging(level: int = logging.WARNING, path: Path | None = None) -> logging.Handler:
    """Attach a file handler to the ``lazyrm`` logger and return it.

    A ``NullHandler`` is attached instead when the log file cannot be opened.
    A handler installed by an earlier call is removed and closed first.
    """
    log_path = path if path is not None else LOG_PATH
    handler: logging.Handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(LOG_HANDLER_NAME)

    package_logger = logging.getLogger("lazyrm")
    for previous in list(package_logger.handlers):
        if previous.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(previous)
            previous.close()
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return handler


__all__ = ["LOG_PATH", "LOG_HANDLER_NAME", "configure_logging"]
