"""Command-line front door for lazyrm.

Parses CLI options, loads preferences, configures logging, and dispatches
into the interactive runtime. Startup failures exit with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import StartupError
from .runtime import run_app
from .runtime.config import load_app_config
from .runtime.logs import configure_logging
from .ui_theme import available_theme_names

EXIT_STARTUP_ERROR = 1

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyrm",
        description="Browse a directory tree, mark entries, and delete them interactively.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazyrm on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path

    config = load_app_config()
    configure_logging(config.log_level)
    try:
        run_app(path, config, theme_name=args.theme, no_color=args.no_color)
    except StartupError as exc:
        logger.error("Startup failed: %s", exc)
        print(f"lazyrm: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_STARTUP_ERROR) from exc


if __name__ == "__main__":
    main()
