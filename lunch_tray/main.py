"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

from lunch_tray.config import resolve_debug_log_path
from lunch_tray.lunch_tray_app import LunchTrayApp

_LOG_FORMAT = "%(asctime)s %(name)s %(message)s"


def configure_logging(log_path: Path | None = None) -> logging.Handler | None:
    """Send lunch_tray debug logs to a file; the terminal belongs to the UI.

    Returns the installed handler, or None when the file cannot be opened.
    """
    path = log_path if log_path is not None else resolve_debug_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        print(f"lunch-tray: debug log disabled ({exc})", file=sys.stderr)
        return None

    formatter = logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    formatter.converter = time.gmtime
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("lunch_tray")
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)
    return handler


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
