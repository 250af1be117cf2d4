"""Primary entry point for the statusbar overlay plugin."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from version import __version__ as STATUSBAR_VERSION
from statusbar_plugin import statusbar_api
from statusbar_plugin.host import HostBridge
from statusbar_plugin.logging_utils import build_debug_log_handler
from statusbar_plugin.preferences import Preferences
from statusbar_plugin.runtime import StatusbarRuntime

PLUGIN_NAME = "Statusbar"
PLUGIN_VERSION = STATUSBAR_VERSION
LOGGER_NAME = "Statusbar"
LOG_TAG = "Statusbar"


HOST_DEFAULT_LOG_LEVEL = logging.INFO
_LEVEL_NAME_MAP = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": logging.DEBUG,
}

_host_logger: Optional[logging.Logger] = None
_host_log_level: Any = None


def _coerce_level(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        token = raw.strip().upper()
        if token.isdigit():
            return int(token)
        return _LEVEL_NAME_MAP.get(token)
    return None


def _resolve_host_log_level() -> int:
    candidates: list[Optional[int]] = [_coerce_level(_host_log_level)]
    if _host_logger is not None:
        candidates.append(_host_logger.getEffectiveLevel())
    candidates.append(logging.getLogger().getEffectiveLevel())
    candidates.append(HOST_DEFAULT_LOG_LEVEL)
    for level in candidates:
        if isinstance(level, int) and level != logging.NOTSET:
            return level
    return HOST_DEFAULT_LOG_LEVEL


class _HostLogHandler(logging.Handler):
    """Logging bridge that forwards plugin records to the host's logger."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < _resolve_host_log_level():
            return
        message = self.format(record)
        if _host_logger is not None:
            try:
                if _host_logger.isEnabledFor(record.levelno):
                    _host_logger.log(record.levelno, message)
                return
            except Exception:
                self.handleError(record)
                return
        root_logger = logging.getLogger()
        if root_logger.isEnabledFor(record.levelno):
            root_logger.log(record.levelno, message)


def _configure_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if not any(getattr(handler, "_host_handler", False) for handler in logger.handlers):
        handler = _HostLogHandler()
        handler._host_handler = True  # type: ignore[attr-defined]
        formatter = logging.Formatter(f"[%(asctime)s] [{LOG_TAG}] %(message)s", "%H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


LOGGER = _configure_logger()

_plugin: Optional[StatusbarRuntime] = None
_debug_handler: Optional[logging.Handler] = None


def _bind_host_logging(host: HostBridge) -> None:
    global _host_logger, _host_log_level
    _host_logger = host.logger if isinstance(host.logger, logging.Logger) else None
    _host_log_level = host.log_level


def _attach_debug_log(plugin_dir: Path, preferences: Preferences) -> None:
    global _debug_handler
    if not preferences.debug_logging or _debug_handler is not None:
        return
    try:
        handler = build_debug_log_handler(
            plugin_dir,
            debug_enabled=preferences.debug_logging,
            retention=preferences.log_retention,
        )
    except OSError as exc:
        LOGGER.warning("Debug log unavailable: %s", exc)
        return
    LOGGER.addHandler(handler)
    _debug_handler = handler


def _detach_debug_log() -> None:
    global _debug_handler
    handler = _debug_handler
    if handler is None:
        return
    LOGGER.removeHandler(handler)
    handler.close()
    _debug_handler = None


def plugin_start3(plugin_dir: str, host: HostBridge) -> str:
    """Host hook: build the runtime and enable the statusbar."""
    global _plugin
    if _plugin is not None:
        LOGGER.debug("plugin_start3 called while already running; ignoring")
        return PLUGIN_NAME
    _bind_host_logging(host)
    plugin_path = Path(plugin_dir)
    preferences = Preferences(plugin_path)
    _attach_debug_log(plugin_path, preferences)
    runtime = StatusbarRuntime(preferences, host)
    _plugin = runtime
    statusbar_api.register_runtime(runtime)
    runtime.enable()
    LOGGER.info("%s %s started", PLUGIN_NAME, PLUGIN_VERSION)
    return PLUGIN_NAME


def plugin_stop() -> None:
    """Host hook: disable the statusbar and release everything it holds."""
    global _plugin
    runtime = _plugin
    if runtime is None:
        return
    try:
        runtime.disable()
    finally:
        statusbar_api.unregister_runtime()
        _plugin = None
        LOGGER.info("%s stopped", PLUGIN_NAME)
        _detach_debug_log()


def statusbar_toggle() -> bool:
    return statusbar_api.toggle()


def statusbar_set_note(text: str) -> bool:
    return statusbar_api.set_note(text)


def statusbar_clear_note() -> bool:
    return statusbar_api.clear_note()
