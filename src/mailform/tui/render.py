"""Lays out the form state as styled text."""

from rich.text import Text

from mailform.core.controller import FormState
from mailform.core.fields import Field

from .theme import Theme

FOOTER = "(ctrl + c to quit or ctrl + s to send) ->"


def _field_view(field: Field, theme: Theme, cursor_visible: bool) -> Text:
    """Render one input line: placeholder when empty, cursor when focused."""

    show_cursor = field.focused and cursor_visible
    value = field.value

    if not value:
        placeholder = field.placeholder[: theme.width]
        if show_cursor and placeholder:
            view = Text(placeholder[0], style=theme.cursor + theme.placeholder)
            view.append(placeholder[1:], style=theme.placeholder)
            return view
        if show_cursor:
            return Text(" ", style=theme.cursor)
        return Text(placeholder, style=theme.placeholder)

    # Scroll so the cursor cell stays inside the visible width.
    cursor = field.cursor_position
    offset = max(0, cursor - theme.width + 1)
    visible = value[offset : offset + theme.width]
    cursor -= offset

    if not show_cursor:
        return Text(visible)

    view = Text(visible[:cursor])
    view.append(visible[cursor : cursor + 1] or " ", style=theme.cursor)
    view.append(visible[cursor + 1 :])
    return view


def render(state: FormState, theme: Theme) -> Text:
    """Render the whole form. Pure: the same state always gives the same text."""

    output = Text("\n")

    for field in state.fields:
        output.append(field.name.label.ljust(theme.width), style=theme.label)
        output.append("\n")
        output.append_text(_field_view(field, theme, state.cursor_visible))
        output.append("\n\n")

    output.append(FOOTER, style=theme.hint)
    output.append("\n")

    if state.last_error is not None:
        output.append(state.last_error.message, style=theme.error)
        output.append("\n")

    if state.send_error is not None:
        output.append(state.send_error, style=theme.error)
        output.append("\n")

    return output
