from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from statusbar_plugin.focus_hooks import FocusNotifier
from statusbar_plugin.preferences import Preferences
from statusbar_plugin.value_observer import ValueObserver


class _RuntimeLike(Protocol):
    preferences: Preferences
    focus_notifier: FocusNotifier
    observer: ValueObserver
    buffer: Any

    def refresh(self) -> Optional[str]: ...
    def _destroy_surface(self) -> None: ...


def start_statusbar_services(
    runtime: _RuntimeLike,
    logger: logging.Logger,
    track_handle: Optional[Callable[[Any], None]] = None,
) -> bool:
    """Install the refresh triggers and take over the redirected variables."""
    tracker = track_handle or (lambda handle: None)
    runtime.focus_notifier.install(runtime.refresh)
    tracker(runtime.focus_notifier)
    if runtime.buffer is not None:
        runtime.buffer.read_only = True
    prefs = runtime.preferences
    redirected = runtime.observer.enable(prefs.redirected_variables, prefs.watched_variables)
    tracker(runtime.observer)
    logger.debug(
        "Statusbar enabled via %s notifier; %d variable(s) redirected",
        getattr(runtime.focus_notifier, "name", "unknown"),
        redirected,
    )
    runtime.refresh()
    return True


def stop_statusbar_services(
    runtime: _RuntimeLike,
    logger: logging.Logger,
    untrack_handle: Optional[Callable[[Any], None]] = None,
) -> None:
    """Reverse start_statusbar_services and tear down the surface."""
    untracker = untrack_handle or (lambda handle: None)
    notifier = runtime.focus_notifier
    try:
        notifier.uninstall()
    finally:
        untracker(notifier)

    restored = runtime.observer.disable()
    untracker(runtime.observer)
    if restored:
        logger.debug("Returned %s to the display list", ", ".join(restored))
    runtime._destroy_surface()
