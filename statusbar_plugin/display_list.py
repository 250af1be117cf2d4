"""Shared status strip handle (the host's mode-line style entry list)."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

_LOGGER = logging.getLogger("Statusbar.DisplayList")

ListListener = Callable[["SharedDisplayList"], None]


class SharedDisplayList:
    """Ordered status entries shared between the host and plugins.

    Entries are variable identifiers (or literal strings). Every mutation is
    a single remove/append/replace performed synchronously, after which the
    list listeners are told the list changed.
    """

    def __init__(
        self,
        entries: Optional[Iterable[str]] = None,
        *,
        redisplay_fn: Optional[Callable[[], None]] = None,
    ) -> None:
        self._entries: List[str] = list(entries or ())
        self._listeners: List[ListListener] = []
        self._redisplay_fn = redisplay_fn
        self.redisplay_count = 0

    def entries(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def remove(self, entry: str) -> bool:
        """Drop every occurrence of ``entry``; True when anything was removed."""
        kept = [item for item in self._entries if item != entry]
        if len(kept) == len(self._entries):
            return False
        self._entries = kept
        self._changed()
        return True

    def append(self, entry: str) -> None:
        self._entries.append(entry)
        self._changed()

    def replace(self, entries: Iterable[str]) -> None:
        self._entries = list(entries)
        self._changed()

    def subscribe(self, listener: ListListener) -> None:
        if listener in self._listeners:
            return
        self._listeners.append(listener)

    def unsubscribe(self, listener: ListListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def request_redisplay(self) -> None:
        self.redisplay_count += 1
        if self._redisplay_fn is not None:
            self._redisplay_fn()

    def _changed(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as exc:
                _LOGGER.warning("Display list listener failed: %s", exc, exc_info=exc)
