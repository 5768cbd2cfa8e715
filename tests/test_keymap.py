"""
Tests for translating key presses into form events
"""
import pytest

from mailform.core import events
from mailform.tui.keymap import key_to_event


@pytest.mark.parametrize(
    "key, expected",
    [
        ("enter", events.Advance()),
        ("tab", events.Advance()),
        ("ctrl+n", events.Advance()),
        ("shift+tab", events.Retreat()),
        ("ctrl+s", events.Send()),
        ("ctrl+c", events.Quit()),
        ("escape", events.Quit()),
        ("backspace", events.DeleteBackward()),
        ("left", events.CursorLeft()),
        ("ctrl+e", events.CursorEnd()),
    ],
)
def test_named_keys(key, expected):
    assert key_to_event(key) == expected


def test_named_key_wins_over_character():
    assert key_to_event("tab", "\t") == events.Advance()
    assert key_to_event("enter", "\r") == events.Advance()


def test_printable_character_inserts():
    assert key_to_event("a", "a") == events.InsertText("a")
    assert key_to_event("at", "@") == events.InsertText("@")
    assert key_to_event("space", " ") == events.InsertText(" ")


def test_unbound_keys_are_ignored():
    assert key_to_event("f5") is None
    assert key_to_event("ctrl+z", "\x1a") is None
