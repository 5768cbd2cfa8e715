"""Form state machine: focus, validation and the send/quit transitions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mailform.utils.config_manager import FormConfig
from mailform.utils.errors import SendError
from mailform.utils.logging import get_logger, log_event

from .events import (
    Advance,
    EditEvent,
    FormEvent,
    Quit,
    Resize,
    Retreat,
    Send,
    Tick,
)
from .fields import Field, FieldName, FieldSet
from .sender import MessageSender
from .validation import AddressValidator, ValidationError

logger = get_logger(__name__)


class FormStatus(Enum):
    EDITING = "editing"
    EDITING_WITH_ERROR = "editing_with_error"
    SENT = "sent"
    QUIT = "quit"


@dataclass
class FormState:
    """Everything the renderer needs to draw the form."""

    fields: FieldSet
    last_error: Optional[ValidationError] = None
    send_error: Optional[str] = None
    cursor_visible: bool = True
    outcome: Optional[FormStatus] = None

    @property
    def focused_index(self) -> int:
        return self.fields.focused_index

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    @property
    def status(self) -> FormStatus:
        if self.outcome is not None:
            return self.outcome
        if self.last_error is not None:
            return FormStatus.EDITING_WITH_ERROR
        return FormStatus.EDITING


def build_fields(config: Optional[FormConfig] = None) -> FieldSet:
    """Create the To/From/Subject/Body field set, validating the two addresses."""

    config = config or FormConfig()
    fields = []

    for name in FieldName:
        validator = None
        if name in (FieldName.TO, FieldName.FROM):
            validator = AddressValidator(name)
        fields.append(
            Field(
                name,
                placeholder=config.placeholders.get(name.key, ""),
                char_limit=config.char_limit,
                validator=validator,
            )
        )

    return FieldSet(fields)


class FormController:
    """Routes input events to the form and applies its transitions."""

    def __init__(
        self,
        sender: MessageSender,
        fields: Optional[FieldSet] = None,
        clear_error_on_edit: bool = False,
    ):
        self.sender = sender
        self.clear_error_on_edit = clear_error_on_edit
        self.state = FormState(fields=fields or build_fields())

    @classmethod
    def from_config(cls, sender: MessageSender, config: FormConfig) -> "FormController":
        return cls(
            sender,
            fields=build_fields(config),
            clear_error_on_edit=config.clear_error_on_edit,
        )

    @property
    def status(self) -> FormStatus:
        return self.state.status

    def handle(self, event: FormEvent) -> FormState:
        """Apply one event and return the updated state."""

        state = self.state
        if state.finished:
            return state

        match event:
            case Advance():
                self._advance()
            case Retreat():
                self._retreat()
            case Send():
                self._send()
            case Quit():
                logger.info("Quitting...")
                log_event("form_quit", "Form closed without sending")
                state.outcome = FormStatus.QUIT
            case Tick():
                state.cursor_visible = not state.cursor_visible
            case Resize():
                pass
            case EditEvent():
                self._edit(event)
            case _:
                logger.debug(f"Ignoring unknown event {event!r}")

        return state

    def _advance(self) -> None:
        state = self.state
        field = state.fields.focused

        error = field.validate()
        if error is not None:
            logger.info(f"Validation failed on {field.name.name}: {error.reason.value}")
            state.last_error = error
            return

        state.last_error = None
        state.fields.focus_next()
        state.fields.apply_focus()
        logger.debug(f"Focus advanced to {state.fields.focused.name.name}")

    def _retreat(self) -> None:
        fields = self.state.fields
        fields.focus_prev()
        fields.apply_focus()
        logger.debug(f"Focus moved back to {fields.focused.name.name}")

    def _send(self) -> None:
        state = self.state
        if state.last_error is not None:
            logger.debug("Send blocked by pending validation error")
            return

        for name in (FieldName.TO, FieldName.FROM):
            error = state.fields.field(name).validate()
            if error is not None:
                logger.info(f"Send refused, {name.name} {error.reason.value}")
                state.last_error = error
                state.fields.focused_index = name.value
                state.fields.apply_focus()
                return

        to, from_, subject, body = state.fields.values()
        to, from_ = to.strip(), from_.strip()
        state.send_error = None

        try:
            self.sender.send(to, from_, subject, body)
        except SendError as e:
            logger.warning(f"Sender failed: {e.message}")
            state.send_error = e.message
            return

        state.outcome = FormStatus.SENT

    def _edit(self, event: EditEvent) -> None:
        state = self.state
        state.fields.dispatch(event)

        error = state.last_error
        if (
            self.clear_error_on_edit
            and error is not None
            and error.field is state.fields.focused.name
        ):
            state.last_error = None
