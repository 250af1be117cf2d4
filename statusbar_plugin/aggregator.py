from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from statusbar_plugin.variables import UnboundVariableError

_LOGGER = logging.getLogger("Statusbar.Aggregator")

DEFAULT_SEPARATOR = " "


def _display_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def current_values(
    store,
    note_vars: Sequence[str],
    redirected_vars: Sequence[str],
    note: Optional[str] = None,
) -> List[str]:
    """Collect the note and every bound, non-empty watched value in display order."""
    values: List[str] = []
    if note:
        values.append(note)
    for name in list(note_vars) + list(redirected_vars):
        try:
            raw = store.get(name)
        except UnboundVariableError:
            continue
        except Exception as exc:
            _LOGGER.warning("Failed to read %s: %s", name, exc, exc_info=exc)
            continue
        text = _display_text(raw)
        if text is not None:
            values.append(text)
    return values


def render(values: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    return separator.join(values)


class Aggregator:
    """Builds the combined overlay string from the watched variables."""

    def __init__(self, store, *, separator: str = DEFAULT_SEPARATOR) -> None:
        self._store = store
        self.separator = separator

    def current_values(
        self,
        note_vars: Sequence[str],
        redirected_vars: Sequence[str],
        note: Optional[str] = None,
    ) -> List[str]:
        return current_values(self._store, note_vars, redirected_vars, note)

    def render(self, values: Iterable[str]) -> str:
        return render(values, self.separator)

    def build(self, note_vars: Sequence[str], redirected_vars: Sequence[str], note: Optional[str] = None) -> str:
        return self.render(self.current_values(note_vars, redirected_vars, note))
