from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

from mailform.core import events as form_events
from mailform.core.controller import FormController, FormStatus
from mailform.utils.logging import get_logger

from .keymap import key_to_event
from .render import render as render_form
from .theme import DEFAULT_THEME, Theme

logger = get_logger(__name__)


class FormView(Widget, can_focus=True):
    """Hosts the form controller and redraws it after every event."""

    DEFAULT_CSS = """
    FormView {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(self, controller: FormController, form_theme: Theme):
        super().__init__(id="form-view")
        self.controller = controller
        self.form_theme = form_theme

    def render(self):
        return render_form(self.controller.state, self.form_theme)

    def on_mount(self) -> None:
        self.set_interval(self.form_theme.blink_interval, self._blink)

    def _blink(self) -> None:
        self.feed(form_events.Tick())

    def feed(self, event: form_events.FormEvent) -> None:
        """Pass one event to the controller, redraw, and exit on a terminal state."""
        state = self.controller.handle(event)
        self.refresh()
        if state.finished:
            self.app.exit(state.status)

    async def on_key(self, event: events.Key) -> None:
        form_event = key_to_event(event.key, event.character)
        if form_event is None:
            return
        event.stop()
        event.prevent_default()
        self.feed(form_event)

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self.feed(form_events.Paste(event.text))

    def on_resize(self, event: events.Resize) -> None:
        self.feed(form_events.Resize(event.size.width, event.size.height))


class MailFormApp(App[FormStatus]):
    TITLE = "mailform"

    def __init__(self, controller: FormController, form_theme: Theme = DEFAULT_THEME):
        super().__init__()
        self.controller = controller
        self.form_theme = form_theme

    def compose(self) -> ComposeResult:
        yield FormView(self.controller, self.form_theme)

    def on_mount(self) -> None:
        self.query_one(FormView).focus()
        logger.debug("Form mounted")
