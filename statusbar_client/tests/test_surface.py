from __future__ import annotations

import pytest
from PyQt6.QtCore import QPoint
from PyQt6.QtWidgets import QApplication, QWidget

from statusbar_client.buffer import OverlayBuffer
from statusbar_client.surface import QtSurfaceRenderer

pytestmark = pytest.mark.pyqt_required


@pytest.fixture
def qt_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def parent(qt_app):
    widget = QWidget()
    widget.resize(800, 600)
    widget.show()
    yield widget
    widget.close()


def test_show_passes_placement_info_and_reuses_frame(parent):
    renderer = QtSurfaceRenderer(parent)
    buffer = OverlayBuffer()
    seen = []

    def placement(info):
        seen.append(info)
        return 100, -1

    first = renderer.show(buffer, "WFH 12:00", x_offset=10, placement_fn=placement)
    second = renderer.show(buffer, "WFH 12:01", x_offset=10, placement_fn=placement, left_fringe=2, right_fringe=3)
    try:
        assert first is second
        assert second.text() == "WFH 12:01"
        assert buffer.text == "WFH 12:01"
        assert seen[-1].buffer is buffer
        assert seen[-1].parent_width == parent.width()
        assert seen[-1].x_pixel_offset == 10
        assert seen[-1].font_width > 0
        expected = parent.mapToGlobal(QPoint(100, parent.height() - second.height()))
        assert second.pos() == expected
        margins = second.contentsMargins()
        assert (margins.left(), margins.right()) == (2, 3)
    finally:
        renderer.destroy(second)


def test_destroy_forgets_frame(parent):
    renderer = QtSurfaceRenderer(parent)
    buffer = OverlayBuffer()
    frame = renderer.show(buffer, "x", x_offset=0, placement_fn=lambda info: (0, -1))

    renderer.destroy(frame)

    assert renderer.frame_for(buffer) is None
    assert frame.isVisible() is False
    renderer.destroy(None)
