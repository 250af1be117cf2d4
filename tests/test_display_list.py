from __future__ import annotations

from statusbar_plugin.display_list import SharedDisplayList


def test_mutations_notify_listeners_once_each():
    calls = []
    display = SharedDisplayList(["mode", "clock"])
    listener = lambda lst: calls.append(lst.entries())  # noqa: E731
    display.subscribe(listener)
    display.subscribe(listener)

    display.remove("clock")
    display.remove("missing")
    display.append("battery")
    display.unsubscribe(listener)
    display.replace(["mode"])

    assert calls == [["mode"], ["mode", "battery"]]


def test_request_redisplay_counts_and_delegates():
    redraws = []
    display = SharedDisplayList(redisplay_fn=lambda: redraws.append(True))

    display.request_redisplay()
    display.request_redisplay()

    assert display.redisplay_count == 2
    assert len(redraws) == 2


def test_remove_drops_every_occurrence():
    calls = []
    display = SharedDisplayList(["clock", "mode", "clock"])
    display.subscribe(lambda lst: calls.append(lst.entries()))

    assert display.remove("clock") is True

    assert display.entries() == ["mode"]
    assert calls == [["mode"]]
