from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class BufferReadOnlyError(RuntimeError):
    """Raised when something other than the renderer edits a read-only buffer."""


class OverlayBuffer:
    """Text backing the overlay surface."""

    def __init__(self, name: str = " *statusbar*") -> None:
        self.name = name
        self.read_only = False
        self._text = ""
        self._inhibit = False

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"OverlayBuffer({self.name!r}, read_only={self.read_only})"

    def insert(self, text: str) -> None:
        self._check_writable()
        self._text += text

    def erase(self) -> None:
        self._check_writable()
        self._text = ""

    def replace(self, text: str) -> None:
        with self.inhibit_read_only():
            self.erase()
            self.insert(text)

    @contextmanager
    def inhibit_read_only(self) -> Iterator["OverlayBuffer"]:
        previous = self._inhibit
        self._inhibit = True
        try:
            yield self
        finally:
            self._inhibit = previous

    def _check_writable(self) -> None:
        if self.read_only and not self._inhibit:
            raise BufferReadOnlyError(f"Buffer {self.name!r} is read-only")
