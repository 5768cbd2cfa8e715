"""Input events consumed by the form controller.

Control events drive focus, validation and the terminal states. Edit events
are forwarded untouched to the focused field.
"""

from dataclasses import dataclass


class FormEvent:
    """Base class for everything the controller accepts."""


## Control Events


@dataclass(frozen=True)
class Advance(FormEvent):
    """Move focus to the next field, validating the current one first."""


@dataclass(frozen=True)
class Retreat(FormEvent):
    """Move focus to the previous field."""


@dataclass(frozen=True)
class Send(FormEvent):
    """Hand the composed message to the sender."""


@dataclass(frozen=True)
class Quit(FormEvent):
    """Leave the form without sending."""


@dataclass(frozen=True)
class Tick(FormEvent):
    """Cursor blink timer fired."""


@dataclass(frozen=True)
class Resize(FormEvent):
    width: int
    height: int


## Edit Events


class EditEvent(FormEvent):
    """An event that changes the focused field's text or cursor."""


@dataclass(frozen=True)
class InsertText(EditEvent):
    text: str


@dataclass(frozen=True)
class Paste(EditEvent):
    text: str


@dataclass(frozen=True)
class DeleteBackward(EditEvent):
    pass


@dataclass(frozen=True)
class DeleteForward(EditEvent):
    pass


@dataclass(frozen=True)
class DeleteWordBackward(EditEvent):
    pass


@dataclass(frozen=True)
class DeleteToStart(EditEvent):
    pass


@dataclass(frozen=True)
class DeleteToEnd(EditEvent):
    pass


@dataclass(frozen=True)
class CursorLeft(EditEvent):
    pass


@dataclass(frozen=True)
class CursorRight(EditEvent):
    pass


@dataclass(frozen=True)
class CursorHome(EditEvent):
    pass


@dataclass(frozen=True)
class CursorEnd(EditEvent):
    pass
