"""Form fields and focus bookkeeping."""

from enum import Enum
from typing import Callable, Iterator, Optional, Sequence

from prompt_toolkit.buffer import Buffer

from .events import (
    CursorEnd,
    CursorHome,
    CursorLeft,
    CursorRight,
    DeleteBackward,
    DeleteForward,
    DeleteToEnd,
    DeleteToStart,
    DeleteWordBackward,
    EditEvent,
    InsertText,
    Paste,
)


class FieldName(Enum):
    """The four form fields, valued by their position in the form."""

    TO = 0
    FROM = 1
    SUBJECT = 2
    BODY = 3

    @property
    def label(self) -> str:
        return f"{self.name.capitalize()}:"

    @property
    def key(self) -> str:
        """Lowercase name, as used in the configuration file."""
        return self.name.lower()


def _sanitize(text: str) -> str:
    """Flatten tabs and line breaks; fields are single-line."""
    return (
        text.replace("\r\n", " ")
        .replace("\r", " ")
        .replace("\n", " ")
        .replace("\t", " ")
    )


class Field:
    """A single-line text input with a character limit.

    Text and cursor live in a prompt_toolkit ``Buffer``. The ``focused`` flag
    is owned by the enclosing ``FieldSet``.
    """

    def __init__(
        self,
        name: FieldName,
        placeholder: str = "",
        char_limit: int = 50,
        validator: Optional[Callable] = None,
    ):
        self.name = name
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.validator = validator
        self.focused = False
        self._buffer = Buffer(multiline=False)

    @property
    def value(self) -> str:
        return self._buffer.text

    @property
    def cursor_position(self) -> int:
        return self._buffer.cursor_position

    def validate(self):
        """Run the validator, if any. Returns a ValidationError or None."""
        if self.validator is None:
            return None
        return self.validator(self.value)

    def _insert(self, text: str) -> None:
        text = _sanitize(text)
        available = self.char_limit - len(self.value)
        if available <= 0 or not text:
            return
        self._buffer.insert_text(text[:available])

    def apply(self, event: EditEvent) -> bool:
        """Apply an edit event to this field. Returns True if it was accepted."""

        buffer = self._buffer
        document = buffer.document

        match event:
            case InsertText(text=text) | Paste(text=text):
                self._insert(text)
            case DeleteBackward():
                buffer.delete_before_cursor(1)
            case DeleteForward():
                buffer.delete(1)
            case DeleteWordBackward():
                offset = document.find_start_of_previous_word()
                if offset:
                    buffer.delete_before_cursor(-offset)
            case DeleteToStart():
                buffer.delete_before_cursor(len(document.text_before_cursor))
            case DeleteToEnd():
                buffer.delete(len(document.text_after_cursor))
            case CursorLeft():
                buffer.cursor_left()
            case CursorRight():
                buffer.cursor_right()
            case CursorHome():
                buffer.cursor_position = 0
            case CursorEnd():
                buffer.cursor_position = len(buffer.text)
            case _:
                return False

        return True

    def __repr__(self) -> str:
        return f"Field({self.name.name}, value={self.value!r}, focused={self.focused})"


class FieldSet:
    """An ordered, fixed set of fields with exactly one focused."""

    def __init__(self, fields: Sequence[Field]):
        names = [field.name for field in fields]
        if names != list(FieldName):
            raise ValueError(f"Fields must be exactly {[n.name for n in FieldName]}")

        self._fields = list(fields)
        self.focused_index = 0
        self.apply_focus()

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __getitem__(self, index: int) -> Field:
        return self._fields[index]

    @property
    def focused(self) -> Field:
        return self._fields[self.focused_index]

    def field(self, name: FieldName) -> Field:
        return self._fields[name.value]

    def values(self) -> tuple[str, ...]:
        """Contents of every field, in field order."""
        return tuple(field.value for field in self._fields)

    def focus_next(self) -> None:
        self.focused_index = (self.focused_index + 1) % len(self._fields)

    def focus_prev(self) -> None:
        self.focused_index = (self.focused_index - 1 + len(self._fields)) % len(self._fields)

    def apply_focus(self) -> None:
        """Sync every field's focused flag with ``focused_index``."""
        for field in self._fields:
            field.focused = False
        self._fields[self.focused_index].focused = True

    def dispatch(self, event: EditEvent) -> bool:
        """Send an edit event to the focused field. Returns True if a redraw is needed."""
        return self.focused.apply(event)
