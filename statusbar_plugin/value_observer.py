"""Variable watching and redirection out of the shared status strip."""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from statusbar_plugin.display_list import SharedDisplayList
from statusbar_plugin.subscriptions import SubscriptionRegistry

_LOGGER = logging.getLogger("Statusbar.Observer")


class ValueObserver:
    """Watches status variables and moves the redirected ones into the overlay.

    Redirected variables are removed from the shared display list while the
    observer is enabled and appended back on disable. Note variables are
    watched but never touch the list.
    """

    def __init__(
        self,
        store,
        display_list: SharedDisplayList,
        on_change: Callable[[], None],
        *,
        registry: Optional[SubscriptionRegistry] = None,
    ) -> None:
        self._store = store
        self._display_list = display_list
        self._on_change = on_change
        self._registry = registry or SubscriptionRegistry(store)
        self._redirected: List[str] = []
        self._note_names: List[str] = []
        self._enabled = False
        self._redirecting = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def registry(self) -> SubscriptionRegistry:
        return self._registry

    def overlay_names(self, names: Sequence[str]) -> List[str]:
        """Redirected names the overlay may show, in ``names`` order.

        A name still on the display list (e.g. unbound when the redirect ran)
        is left out so it shows on one surface only.
        """
        return [name for name in names if name not in self._display_list]

    def enable(self, redirected_vars: Sequence[str], note_vars: Sequence[str] = ()) -> int:
        self._redirected = list(dict.fromkeys(redirected_vars))
        self._note_names = [name for name in dict.fromkeys(note_vars) if name not in self._redirected]
        self._enabled = True
        for name in self._note_names:
            self._registry.subscribe(name, self._on_variable_changed)
        self._display_list.subscribe(self._on_list_changed)
        return self._redirect()

    def disable(self, redirected_vars: Optional[Sequence[str]] = None) -> List[str]:
        names = list(dict.fromkeys(redirected_vars)) if redirected_vars is not None else list(self._redirected)
        self._display_list.unsubscribe(self._on_list_changed)
        self._enabled = False
        restored: List[str] = []
        for name in names:
            if self._registry.release(name):
                self._display_list.append(name)
                restored.append(name)
        for name in self._note_names:
            self._registry.release(name)
        self._note_names = []
        self._display_list.request_redisplay()
        if restored:
            _LOGGER.debug("Restored to display list: %s", ", ".join(restored))
        return restored

    def _redirect(self) -> int:
        if self._redirecting:
            return 0
        self._redirecting = True
        removed: List[str] = []
        try:
            for name in self._redirected:
                if name not in self._display_list:
                    continue
                if self._registry.subscribe(name, self._on_variable_changed) is None:
                    continue
                if self._display_list.remove(name):
                    removed.append(name)
        finally:
            self._redirecting = False
        if removed:
            _LOGGER.debug("Redirected from display list: %s", ", ".join(removed))
            self._display_list.request_redisplay()
            self._on_change()
        return len(removed)

    def _on_list_changed(self, _display_list: SharedDisplayList) -> None:
        if self._enabled:
            self._redirect()

    def _on_variable_changed(self, name: str, value: Optional[Any], operation: str) -> None:
        _LOGGER.debug("Variable %s changed (%s)", name, operation)
        self._on_change()
