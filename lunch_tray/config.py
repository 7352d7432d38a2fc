"""Runtime configuration defaults for logging and price display."""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

DEBUG_LOG_PATH = "/tmp/lunch-tray-debug.log"
DEBUG_LOG_ENV = "LUNCH_TRAY_DEBUG_LOG"

CURRENCY_SYMBOL = "$"
PRICE_QUANTUM = Decimal("0.01")


def resolve_debug_log_path() -> Path:
    """Return the debug log file, honoring LUNCH_TRAY_DEBUG_LOG when set."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(DEBUG_LOG_PATH)
