"""Widget tests; skipped when no display is available."""

import tkinter

import pytest

ctk = pytest.importorskip("customtkinter")

from ir_learner.api.models import LearnType, Thing
from ir_learner.gui.components.thing_list import TABLE_ID, ThingList


@pytest.fixture
def root():
    try:
        window = ctk.CTk()
    except tkinter.TclError as e:
        pytest.skip(f"no display: {e}")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def clicks():
    return []


@pytest.fixture
def thing_list(root, clicks):
    widget = ThingList(root, on_learn=lambda *args: clicks.append(args))
    widget.pack()
    return widget


def test_rows_follow_things_with_label_fallback(thing_list):
    thing_list.show_things([Thing("dev:1", "Living Room AC"), Thing("dev:2", None)])

    assert thing_list.table_id == TABLE_ID
    assert [t.uid for t in thing_list.things] == ["dev:1", "dev:2"]
    assert thing_list.get_row("dev:1").label.cget("text") == "Living Room AC"
    assert thing_list.get_row("dev:2").label.cget("text") == "dev:2"


def test_show_things_replaces_previous_rows(thing_list):
    thing_list.show_things([Thing("a"), Thing("b")])
    thing_list.show_things([Thing("c")])

    assert len(thing_list) == 1
    assert "a" not in thing_list
    assert "c" in thing_list


def test_every_row_is_followed_by_a_spacer(thing_list):
    thing_list.show_things([Thing("a"), Thing("b"), Thing("c")])

    assert len(thing_list._spacers) == len(thing_list) == 3
    for index, uid in enumerate(["a", "b", "c"]):
        row_info = thing_list.get_row(uid).grid_info()
        spacer_info = thing_list._spacers[index].grid_info()
        assert int(spacer_info["row"]) == int(row_info["row"]) + 1

    thing_list.show_things([Thing("d")])

    assert len(thing_list._spacers) == len(thing_list) == 1


def test_row_control_ids(thing_list):
    thing_list.show_things([Thing("abc")])
    row = thing_list.get_row("abc")

    assert row.command_id == "command-abc"
    assert row.learn_id == "learnir-abc"
    assert row.clear_id == "clear-abc"
    assert thing_list.find_entry("command-abc") is row.command_entry
    assert thing_list.find_entry("command-nope") is None


def test_learn_button_passes_thing_and_command(thing_list, clicks):
    thing_list.show_things([Thing("abc", "Remote")])
    row = thing_list.get_row("abc")

    row.command_entry.insert(0, "cmd1")
    row.learn_button.invoke()

    assert clicks == [(Thing("abc", "Remote"), "cmd1", LearnType.IR)]


def test_clear_button_is_inert(thing_list):
    thing_list.show_things([Thing("abc")])

    assert thing_list.get_row("abc").clear_button.cget("state") == "disabled"


def test_clear_empties_list(thing_list):
    thing_list.show_things([Thing("abc")])
    thing_list.clear()

    assert len(thing_list) == 0
    assert thing_list.things == []
