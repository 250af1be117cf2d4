"""Enable/disable orchestration and the single refresh entry point."""
from __future__ import annotations

import logging
from typing import Any, Optional

from statusbar_client.buffer import OverlayBuffer
from statusbar_client.placement import PositionEngine
from statusbar_plugin.aggregator import Aggregator
from statusbar_plugin.focus_hooks import select_focus_notifier
from statusbar_plugin.host import HostBridge
from statusbar_plugin.lifecycle import LifecycleTracker
from statusbar_plugin.preferences import Preferences
from statusbar_plugin.runtime_services import start_statusbar_services, stop_statusbar_services
from statusbar_plugin.value_observer import ValueObserver

_LOGGER = logging.getLogger("Statusbar.Runtime")


class StatusbarRuntime:
    """Owns the overlay state; every refresh trigger ends up in ``refresh``."""

    def __init__(self, preferences: Preferences, host: HostBridge) -> None:
        self.preferences = preferences
        self.host = host
        self.aggregator = Aggregator(host.variables, separator=preferences.separator)
        self.observer = ValueObserver(host.variables, host.display_list, self.refresh)
        self.focus_notifier = select_focus_notifier(
            host.hooks,
            host.focus_state_fn or getattr(host.renderer, "parent_focused", None),
        )
        self.position_engine = PositionEngine(reserved_regions_fn=host.reserved_regions_fn)
        self.lifecycle = LifecycleTracker(_LOGGER)
        self.buffer: Optional[OverlayBuffer] = None
        self.surface: Any = None
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> bool:
        if self._enabled:
            return False
        self.buffer = OverlayBuffer()
        self._enabled = True
        start_statusbar_services(self, _LOGGER, self.lifecycle.track_handle)
        return True

    def disable(self) -> bool:
        if not self._enabled:
            return False
        self._enabled = False
        stop_statusbar_services(self, _LOGGER, self.lifecycle.untrack_handle)
        self.lifecycle.log_state("after disable")
        return True

    def toggle(self) -> bool:
        if self._enabled:
            self.disable()
        else:
            self.enable()
        return self._enabled

    def refresh(self) -> Optional[str]:
        if not self._enabled or self.buffer is None:
            return None
        prefs = self.preferences
        self.aggregator.separator = prefs.separator
        redirected = self.observer.overlay_names(prefs.redirected_variables)
        text = self.aggregator.build(prefs.watched_variables, redirected, prefs.note)
        handle = self.host.renderer.show(
            self.buffer,
            text,
            x_offset=prefs.x_offset,
            placement_fn=self.position_engine,
            left_fringe=prefs.left_fringe,
            right_fringe=prefs.right_fringe,
        )
        if handle is not self.surface:
            self.lifecycle.untrack_handle(self.surface)
            self.lifecycle.track_handle(handle)
            self.surface = handle
        _LOGGER.debug("Statusbar refreshed: %r", text)
        return text

    def set_note(self, text: Optional[str]) -> Optional[str]:
        self.preferences.set_note(text)
        return self.refresh()

    def clear_note(self) -> Optional[str]:
        self.preferences.clear_note()
        return self.refresh()

    def _destroy_surface(self) -> None:
        handle = self.surface
        self.surface = None
        try:
            if handle is not None:
                self.host.renderer.destroy(handle)
        finally:
            self.lifecycle.untrack_handle(handle)
            self.buffer = None
