from __future__ import annotations

from statusbar_plugin.aggregator import current_values
from statusbar_plugin.display_list import SharedDisplayList
from statusbar_plugin.value_observer import ValueObserver
from statusbar_plugin.variables import VariableTable


def _build(entries, values):
    store = VariableTable(values)
    display = SharedDisplayList(entries)
    refreshes = []
    observer = ValueObserver(store, display, lambda: refreshes.append(True))
    return store, display, observer, refreshes


def test_enable_redirects_present_variables_and_refreshes_once():
    store, display, observer, refreshes = _build(["mode", "clock"], {"clock": "12:00"})

    removed = observer.enable(["clock", "battery"], [])

    assert removed == 1
    assert display.entries() == ["mode"]
    assert display.redisplay_count == 1
    assert len(refreshes) == 1
    assert observer.registry.is_active("clock")
    assert not observer.registry.is_active("battery")


def test_enable_without_matches_does_not_refresh():
    _store, display, observer, refreshes = _build(["mode"], {"clock": "12:00"})

    assert observer.enable(["clock"], []) == 0
    assert refreshes == []
    assert display.redisplay_count == 0


def test_variable_change_triggers_refresh_only_on_new_value():
    store, _display, observer, refreshes = _build(["clock"], {"clock": "12:00"})
    observer.enable(["clock"], [])
    refreshes.clear()

    store.set("clock", "12:00")
    store.set("clock", "12:01")

    assert len(refreshes) == 1


def test_disable_restores_entries_and_stops_watching():
    store, display, observer, refreshes = _build(["mode", "clock", "battery"], {"clock": "1", "battery": "2"})
    observer.enable(["battery", "clock"], [])

    restored = observer.disable(["battery", "clock"])
    refreshes.clear()
    store.set("clock", "3")

    assert restored == ["battery", "clock"]
    assert display.entries() == ["mode", "battery", "clock"]
    assert refreshes == []
    assert store.watchers("clock") == []


def test_enable_disable_cycle_preserves_other_entries():
    entries = ["mode", "clock", "branch", "battery", "misc"]
    redirected = ["clock", "battery"]
    _store, display, observer, _refreshes = _build(entries, {"clock": "1", "battery": "2"})

    observer.enable(redirected, [])
    observer.disable(redirected)
    observer.enable(redirected, [])
    observer.disable(redirected)

    assert display.entries() == ["mode", "branch", "misc", "clock", "battery"]


def test_double_enable_and_disable_are_harmless():
    store, display, observer, _refreshes = _build(["clock"], {"clock": "1"})

    observer.enable(["clock"], [])
    observer.enable(["clock"], [])
    assert len(store.watchers("clock")) == 1

    observer.disable(["clock"])
    observer.disable(["clock"])
    assert display.entries() == ["clock"]


def test_entries_added_later_are_captured():
    _store, display, observer, refreshes = _build(["mode"], {"player": "song"})
    observer.enable(["player"], [])

    display.append("player")

    assert display.entries() == ["mode"]
    assert observer.registry.is_active("player")
    assert len(refreshes) == 1

    display.replace(["mode", "player", "extra"])
    assert display.entries() == ["mode", "extra"]


def test_list_changes_ignored_after_disable():
    _store, display, observer, _refreshes = _build(["clock"], {"clock": "1"})
    observer.enable(["clock"], [])
    observer.disable()

    display.replace(["clock", "mode"])

    assert display.entries() == ["clock", "mode"]


def test_unbound_variable_stays_in_display_list():
    _store, display, observer, refreshes = _build(["mode", "battery"], {})

    assert observer.enable(["battery"], []) == 0
    assert display.entries() == ["mode", "battery"]
    assert refreshes == []


def test_note_variables_are_watched_but_not_removed():
    store, display, observer, refreshes = _build(["mail"], {"mail": "1"})
    observer.enable([], ["mail"])

    store.set("mail", "2")

    assert display.entries() == ["mail"]
    assert len(refreshes) == 1

    observer.disable([])
    store.set("mail", "3")
    assert display.entries() == ["mail"]
    assert len(refreshes) == 1


def test_variable_bound_after_enable_stays_on_one_surface():
    store, display, observer, refreshes = _build(["mode", "clock"], {})
    observer.enable(["clock"], [])

    store.set("clock", "12:00")

    assert display.entries() == ["mode", "clock"]
    assert observer.overlay_names(["clock"]) == []
    assert current_values(store, [], observer.overlay_names(["clock"])) == []
    assert refreshes == []


def test_variable_bound_after_enable_is_captured_on_next_list_change():
    store, display, observer, refreshes = _build(["mode", "clock"], {})
    observer.enable(["clock"], [])
    store.set("clock", "12:00")

    display.append("misc")

    assert display.entries() == ["mode", "misc"]
    assert observer.overlay_names(["clock"]) == ["clock"]
    assert current_values(store, [], observer.overlay_names(["clock"])) == ["12:00"]
    assert len(refreshes) == 1


def test_duplicate_entries_are_all_redirected_at_enable():
    _store, display, observer, _refreshes = _build(["clock", "mode", "clock"], {"clock": "1"})

    assert observer.enable(["clock"], []) == 1
    assert display.entries() == ["mode"]

    observer.disable()
    assert display.entries() == ["mode", "clock"]


def test_duplicates_from_external_replace_are_redirected():
    _store, display, observer, _refreshes = _build(["mode", "clock"], {"clock": "1"})
    observer.enable(["clock"], [])

    display.replace(["clock", "mode", "clock", "extra"])

    assert display.entries() == ["mode", "extra"]


def test_overlay_names_keep_order_and_skip_names_on_the_list():
    _store, _display, observer, _refreshes = _build(["clock", "battery"], {"clock": "1", "battery": "2"})
    observer.enable(["clock", "battery"], [])

    assert observer.overlay_names(["battery", "player", "clock"]) == ["battery", "player", "clock"]

    observer.disable()
    assert observer.overlay_names(["battery", "player", "clock"]) == ["player"]
