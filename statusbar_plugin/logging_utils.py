from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

DEBUG_LOG_FILENAME = "statusbar.log"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEBUG_LOG_MAX_BYTES = 256 * 1024


def resolve_logs_dir(plugin_dir: Path) -> Path:
    """Directory for the optional debug log, kept beside the settings file."""
    target = Path(plugin_dir) / "logs"
    target.mkdir(parents=True, exist_ok=True)
    return target


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def build_debug_log_handler(
    plugin_dir: Path,
    *,
    debug_enabled: bool = True,
    retention: int = 5,
    max_bytes: int = DEBUG_LOG_MAX_BYTES,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Rotating ``logs/statusbar.log`` handler; ``retention`` counts the live file."""
    handler = RotatingFileHandler(
        resolve_logs_dir(plugin_dir) / DEBUG_LOG_FILENAME,
        maxBytes=max_bytes,
        backupCount=max(1, retention) - 1,
        encoding="utf-8",
    )
    handler.setFormatter(formatter or logging.Formatter(DEBUG_LOG_FORMAT))
    handler.setLevel(resolve_log_level(debug_enabled))
    return handler
