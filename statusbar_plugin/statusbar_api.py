"""Public helper API for driving the statusbar from other plugins and key bindings."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from statusbar_plugin.runtime import StatusbarRuntime

_LOGGER = logging.getLogger("Statusbar.API")

_runtime: Optional["StatusbarRuntime"] = None


def register_runtime(runtime: "StatusbarRuntime") -> None:
    """Register the running statusbar (called by the plugin during startup)."""

    global _runtime
    _runtime = runtime


def unregister_runtime() -> None:
    """Clear the registered runtime (called when the plugin stops)."""

    global _runtime
    _runtime = None


def set_note(text: Optional[str]) -> bool:
    """Set the prefix note shown ahead of the status values and refresh.

    Returns ``True`` when a running statusbar accepted the note.
    """

    return _dispatch("set_note", lambda runtime: runtime.set_note(text))


def clear_note() -> bool:
    return _dispatch("clear_note", lambda runtime: runtime.clear_note())


def toggle() -> bool:
    """Flip the statusbar between enabled and disabled."""

    return _dispatch("toggle", lambda runtime: runtime.toggle())


def refresh() -> bool:
    return _dispatch("refresh", lambda runtime: runtime.refresh())


def _dispatch(command: str, action: Callable[["StatusbarRuntime"], Any]) -> bool:
    runtime = _runtime
    if runtime is None:
        _LOGGER.warning("Statusbar %s ignored: plugin not running", command)
        return False
    action(runtime)
    return True
