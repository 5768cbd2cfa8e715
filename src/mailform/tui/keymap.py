"""Maps terminal key names to form events."""

from typing import Optional

from mailform.core import events

KEY_BINDINGS: dict[str, events.FormEvent] = {
    "enter": events.Advance(),
    "tab": events.Advance(),
    "ctrl+n": events.Advance(),
    "shift+tab": events.Retreat(),
    "ctrl+s": events.Send(),
    "ctrl+c": events.Quit(),
    "escape": events.Quit(),
    "backspace": events.DeleteBackward(),
    "ctrl+h": events.DeleteBackward(),
    "delete": events.DeleteForward(),
    "ctrl+d": events.DeleteForward(),
    "ctrl+w": events.DeleteWordBackward(),
    "ctrl+u": events.DeleteToStart(),
    "ctrl+k": events.DeleteToEnd(),
    "left": events.CursorLeft(),
    "ctrl+b": events.CursorLeft(),
    "right": events.CursorRight(),
    "ctrl+f": events.CursorRight(),
    "home": events.CursorHome(),
    "ctrl+a": events.CursorHome(),
    "end": events.CursorEnd(),
    "ctrl+e": events.CursorEnd(),
}


def key_to_event(key: str, character: Optional[str] = None) -> Optional[events.FormEvent]:
    """Translate a key press into a form event, or None if the key is unbound."""

    event = KEY_BINDINGS.get(key)
    if event is not None:
        return event

    if character and character.isprintable():
        return events.InsertText(character)

    return None
