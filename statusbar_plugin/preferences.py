"""Preferences management for the statusbar overlay."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


PREFERENCES_FILE = "statusbar_settings.json"
DEFAULT_REDIRECTED_VARIABLES = ("clock", "battery", "player")
DEFAULT_X_OFFSET = 10
DEFAULT_SEPARATOR = " "
LOG_RETENTION_MIN = 1
LOG_RETENTION_MAX = 20


def _coerce_names(raw: Any, default: List[str]) -> List[str]:
    if not isinstance(raw, (list, tuple)):
        return list(default)
    names = [str(item).strip() for item in raw if isinstance(item, str)]
    return [name for name in dict.fromkeys(names) if name]


def _coerce_int(raw: Any, default: int, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = default
    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


@dataclass
class Preferences:
    """Simple JSON-backed preferences store."""

    plugin_dir: Path
    note: Optional[str] = None
    watched_variables: List[str] = field(default_factory=list)
    redirected_variables: List[str] = field(default_factory=lambda: list(DEFAULT_REDIRECTED_VARIABLES))
    x_offset: int = DEFAULT_X_OFFSET
    separator: str = DEFAULT_SEPARATOR
    left_fringe: int = 0
    right_fringe: int = 0
    debug_logging: bool = False
    log_retention: int = 5

    def __post_init__(self) -> None:
        self.plugin_dir = Path(self.plugin_dir)
        self._path = self.plugin_dir / PREFERENCES_FILE
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    # Persistence ---------------------------------------------------------

    def _load(self) -> None:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return
        except (OSError, json.JSONDecodeError):
            return
        if not isinstance(data, dict):
            return
        note = data.get("note")
        self.note = note if isinstance(note, str) and note else None
        self.watched_variables = _coerce_names(data.get("watched_variables"), [])
        self.redirected_variables = _coerce_names(
            data.get("redirected_variables"), list(DEFAULT_REDIRECTED_VARIABLES)
        )
        self.x_offset = _coerce_int(data.get("x_offset", DEFAULT_X_OFFSET), DEFAULT_X_OFFSET)
        separator = data.get("separator", DEFAULT_SEPARATOR)
        self.separator = separator if isinstance(separator, str) else DEFAULT_SEPARATOR
        self.left_fringe = _coerce_int(data.get("left_fringe", 0), 0, minimum=0)
        self.right_fringe = _coerce_int(data.get("right_fringe", 0), 0, minimum=0)
        self.debug_logging = bool(data.get("debug_logging", False))
        self.log_retention = _coerce_int(
            data.get("log_retention", 5), 5, minimum=LOG_RETENTION_MIN, maximum=LOG_RETENTION_MAX
        )

    def save(self) -> None:
        payload: Dict[str, Any] = {
            "note": self.note or None,
            "watched_variables": list(self.watched_variables),
            "redirected_variables": list(self.redirected_variables),
            "x_offset": int(self.x_offset),
            "separator": str(self.separator),
            "left_fringe": int(self.left_fringe),
            "right_fringe": int(self.right_fringe),
            "debug_logging": bool(self.debug_logging),
            "log_retention": int(self.log_retention),
        }
        self.plugin_dir.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def set_note(self, text: Optional[str]) -> None:
        self.note = text or None
        self.save()

    def clear_note(self) -> None:
        self.set_note(None)
