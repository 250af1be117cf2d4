from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

from statusbar_plugin.variables import UnboundVariableError

_LOGGER = logging.getLogger("Statusbar.Observer")

Watcher = Callable[[str, Optional[Any], str], None]


class _WatchableStore(Protocol):
    def watch(self, name: str, callback: Watcher) -> None: ...
    def unwatch(self, name: str, callback: Watcher) -> None: ...


@dataclass(frozen=True)
class Subscription:
    name: str
    callback: Watcher


class SubscriptionRegistry:
    """Tracks the watchers this plugin installed so teardown reverses exactly those."""

    def __init__(self, store: _WatchableStore) -> None:
        self._store = store
        self._active: Dict[str, List[Subscription]] = {}

    def subscribe(self, name: str, callback: Watcher) -> Optional[Subscription]:
        for existing in self._active.get(name, ()):
            if existing.callback == callback:
                return existing
        try:
            self._store.watch(name, callback)
        except UnboundVariableError:
            _LOGGER.debug("Skipping watch on unbound variable %s", name)
            return None
        token = Subscription(name, callback)
        self._active.setdefault(name, []).append(token)
        _LOGGER.debug("Watching %s", name)
        return token

    def release(self, name: str) -> bool:
        """Remove every watcher installed on ``name``; True when any were active."""
        tokens = self._active.pop(name, None)
        if not tokens:
            return False
        for token in tokens:
            try:
                self._store.unwatch(token.name, token.callback)
            except UnboundVariableError:
                _LOGGER.debug("Skipping unwatch on unbound variable %s", name)
        _LOGGER.debug("Stopped watching %s", name)
        return True

    def is_active(self, name: str) -> bool:
        return bool(self._active.get(name))

    def active_names(self) -> List[str]:
        return list(self._active)
