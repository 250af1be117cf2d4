"""Frameless PyQt6 surface that renders the statusbar text."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QFontDatabase, QFontMetrics
from PyQt6.QtWidgets import QLabel, QWidget

from statusbar_client.buffer import OverlayBuffer
from statusbar_client.placement import PlacementInfo, Position, surface_top_left

_LOGGER_NAME = "Statusbar.Client"
_CLIENT_LOGGER = logging.getLogger(_LOGGER_NAME)

PlacementFn = Callable[[PlacementInfo], Position]


class _StatusbarFrame(QLabel):
    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setWindowFlag(Qt.WindowType.FramelessWindowHint, True)
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        self.setWindowFlag(Qt.WindowType.Tool, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.setTextFormat(Qt.TextFormat.PlainText)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)


class QtSurfaceRenderer:
    """Shows one floating frame per buffer, anchored inside ``parent``."""

    def __init__(self, parent: QWidget) -> None:
        self._parent = parent
        self._frames: Dict[int, _StatusbarFrame] = {}

    def font_width(self, frame: QLabel) -> int:
        return QFontMetrics(frame.font()).horizontalAdvance("M")

    def frame_for(self, buffer: OverlayBuffer) -> Optional[QLabel]:
        return self._frames.get(id(buffer))

    def parent_focused(self) -> bool:
        return self._parent.isActiveWindow()

    def show(
        self,
        buffer: OverlayBuffer,
        text: str,
        *,
        x_offset: int,
        placement_fn: PlacementFn,
        left_fringe: int = 0,
        right_fringe: int = 0,
    ) -> QLabel:
        buffer.replace(text)
        frame = self._frames.get(id(buffer))
        if frame is None:
            frame = _StatusbarFrame(self._parent)
            self._frames[id(buffer)] = frame
            _CLIENT_LOGGER.debug("Created statusbar frame for %r", buffer)
        frame.setContentsMargins(max(0, left_fringe), 0, max(0, right_fringe), 0)
        frame.setText(buffer.text)
        frame.adjustSize()
        info = PlacementInfo(
            font_width=self.font_width(frame),
            buffer=buffer,
            parent_window=self._parent,
            parent_width=self._parent.width(),
            x_pixel_offset=x_offset,
        )
        x, y = placement_fn(info)
        local_x, local_y = surface_top_left(x, y, self._parent.height(), frame.height())
        frame.move(self._parent.mapToGlobal(QPoint(local_x, local_y)))
        if not frame.isVisible():
            frame.show()
        return frame

    def destroy(self, handle: Optional[QLabel]) -> None:
        if handle is None:
            return
        for key, frame in list(self._frames.items()):
            if frame is handle:
                del self._frames[key]
        handle.hide()
        handle.close()
        handle.deleteLater()
        _CLIENT_LOGGER.debug("Destroyed statusbar frame")
