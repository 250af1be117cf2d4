"""Observable variable table standing in for the host's status variables."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

_LOGGER = logging.getLogger("Statusbar.Variables")

Watcher = Callable[[str, Optional[Any], str], None]

_UNBOUND = object()


class UnboundVariableError(KeyError):
    """Raised when reading or watching a variable that has no binding."""


class VariableTable:
    """Named values owned by the host; watchers fire after a value changes."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})
        self._watchers: Dict[str, List[Watcher]] = {}

    def is_bound(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise UnboundVariableError(name) from None

    def set(self, name: str, value: Any) -> None:
        previous = self._values.get(name, _UNBOUND)
        self._values[name] = value
        if previous is _UNBOUND or previous != value:
            self._notify(name, value, "set")

    def unbind(self, name: str) -> None:
        if name not in self._values:
            return
        del self._values[name]
        self._notify(name, None, "unbind")

    def watch(self, name: str, callback: Watcher) -> None:
        if name not in self._values:
            raise UnboundVariableError(name)
        self._watchers.setdefault(name, []).append(callback)

    def unwatch(self, name: str, callback: Watcher) -> None:
        watchers = self._watchers.get(name)
        if not watchers:
            if name not in self._values:
                raise UnboundVariableError(name)
            return
        try:
            watchers.remove(callback)
        except ValueError:
            return
        if not watchers:
            del self._watchers[name]

    def watchers(self, name: str) -> List[Watcher]:
        return list(self._watchers.get(name, ()))

    def _notify(self, name: str, value: Any, operation: str) -> None:
        for watcher in list(self._watchers.get(name, ())):
            try:
                watcher(name, value, operation)
            except Exception as exc:
                _LOGGER.warning("Watcher for %s failed: %s", name, exc, exc_info=exc)
