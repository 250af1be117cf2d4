from __future__ import annotations

import logging
from typing import Any, Dict, List


class LifecycleTracker:
    """Tracks handles acquired on enable so disable can verify they were all released."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self._handles: Dict[int, Any] = {}

    @property
    def handles(self) -> List[Any]:
        return list(self._handles.values())

    def track_handle(self, handle: Any) -> None:
        if handle is None:
            return
        self._handles[id(handle)] = handle

    def untrack_handle(self, handle: Any) -> None:
        if handle is None:
            return
        self._handles.pop(id(handle), None)

    def is_tracked(self, handle: Any) -> bool:
        return handle is not None and id(handle) in self._handles

    def log_state(self, label: str) -> None:
        handles = list(self._handles.values())
        if handles:
            self._logger.debug("Tracked resources %s: handles=%s", label, handles)
