"""
Tests for form rendering

Tests cover:
- Field order, labels and placeholders
- Footer and error lines
- Cursor display and horizontal scrolling
- Purity of the render function
"""
from rich.style import Style

from mailform.core import events
from mailform.tui.render import FOOTER, render
from mailform.tui.theme import DEFAULT_THEME, Theme
from mailform.utils.config_manager import UIConfig

from .helpers import type_text


def _lines(controller, theme=DEFAULT_THEME):
    return render(controller.state, theme).plain.split("\n")


class TestLayout:
    """Tests for the overall layout"""

    def test_labels_in_field_order(self, controller):
        lines = _lines(controller)
        labels = [line.strip() for line in lines if line.strip().endswith(":")]
        assert labels == ["To:", "From:", "Subject:", "Body:"]

    def test_labels_padded_to_width(self, controller):
        lines = _lines(controller)
        assert lines[1] == "To:".ljust(50)

    def test_placeholders_shown_when_empty(self, controller):
        lines = _lines(controller)
        assert lines[2] == "Enter to address here..."
        assert lines[5] == "Enter from address here..."
        assert lines[8] == "Enter subject here..."
        assert lines[11] == "Send a message..."

    def test_footer_follows_fields(self, controller):
        lines = _lines(controller)
        assert lines[13] == FOOTER
        assert lines[14:] == [""]

    def test_content_replaces_placeholder(self, controller):
        type_text(controller, "a@b.com")
        controller.handle(events.Tick())
        assert _lines(controller)[2] == "a@b.com"


class TestErrors:
    """Tests for error rendering"""

    def test_error_below_footer(self, controller):
        type_text(controller, "not-an-address")
        controller.handle(events.Advance())

        lines = _lines(controller)

        assert lines[13] == FOOTER
        assert lines[14] == "To: invalid email address"

    def test_send_error_rendered(self, controller):
        controller.state.send_error = "Failed to send message"
        assert "Failed to send message" in _lines(controller)

    def test_error_uses_error_style(self, controller):
        type_text(controller, "bad")
        controller.handle(events.Advance())
        text = render(controller.state, DEFAULT_THEME)
        start = text.plain.index("To: invalid")
        styles = [span.style for span in text.spans if span.start == start]
        assert DEFAULT_THEME.error in styles


class TestCursor:
    """Tests for cursor display"""

    def test_cursor_cell_after_text(self, controller):
        type_text(controller, "abc")
        assert _lines(controller)[2] == "abc "

    def test_cursor_hidden_on_blink(self, controller):
        type_text(controller, "abc")
        controller.handle(events.Tick())
        assert _lines(controller)[2] == "abc"

    def test_unfocused_field_has_no_cursor(self, controller):
        type_text(controller, "abc")
        controller.handle(events.Retreat())
        assert _lines(controller)[2] == "abc"

    def test_long_value_scrolls_to_cursor(self, sender):
        from mailform.core.controller import FormController
        from mailform.utils.config_manager import FormConfig

        controller = FormController.from_config(sender, FormConfig(char_limit=100))
        theme = Theme.from_config(UIConfig(width=10))
        type_text(controller, "abcdefghijklmnop")
        controller.handle(events.Tick())

        assert _lines(controller, theme)[2] == "hijklmnop"

        controller.handle(events.Tick())
        assert _lines(controller, theme)[2] == "hijklmnop "


class TestPurity:
    """Tests that rendering has no side effects"""

    def test_render_twice_is_identical(self, filled_controller):
        filled_controller.handle(events.Advance())
        first = render(filled_controller.state, DEFAULT_THEME)
        second = render(filled_controller.state, DEFAULT_THEME)
        assert first.plain == second.plain
        assert first.markup == second.markup
        assert first.spans == second.spans

    def test_render_does_not_change_state(self, filled_controller):
        before = filled_controller.state.fields.values()
        render(filled_controller.state, DEFAULT_THEME)
        assert filled_controller.state.fields.values() == before
        assert filled_controller.state.focused_index == 0


def test_theme_from_config():
    theme = Theme.from_config(UIConfig(label_color="blue", width=30))
    assert theme.label == Style(color="blue")
    assert theme.width == 30
