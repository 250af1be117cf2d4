from __future__ import annotations

import logging

import pytest

from statusbar_plugin import statusbar_api


class _DummyRuntime:
    def __init__(self):
        self.calls = []

    def set_note(self, text):
        self.calls.append(("set_note", text))

    def clear_note(self):
        self.calls.append("clear_note")

    def toggle(self):
        self.calls.append("toggle")
        return True

    def refresh(self):
        self.calls.append("refresh")


@pytest.fixture(autouse=True)
def _reset_runtime():
    yield
    statusbar_api.unregister_runtime()


def test_commands_without_runtime_warn():
    messages = []

    class _Collect(logging.Handler):
        def emit(self, record):
            messages.append(record.getMessage())

    logger = logging.getLogger("Statusbar.API")
    handler = _Collect(level=logging.WARNING)
    logger.addHandler(handler)
    try:
        assert statusbar_api.toggle() is False
        assert statusbar_api.set_note("x") is False
    finally:
        logger.removeHandler(handler)

    assert messages == [
        "Statusbar toggle ignored: plugin not running",
        "Statusbar set_note ignored: plugin not running",
    ]


def test_commands_dispatch_to_runtime():
    runtime = _DummyRuntime()
    statusbar_api.register_runtime(runtime)

    assert statusbar_api.set_note("WFH") is True
    assert statusbar_api.clear_note() is True
    assert statusbar_api.toggle() is True
    assert statusbar_api.refresh() is True
    assert runtime.calls == [("set_note", "WFH"), "clear_note", "toggle", "refresh"]
