"""Form core: fields, events, validation and the controller state machine."""

from .controller import FormController, FormState, FormStatus, build_fields
from .fields import Field, FieldName, FieldSet
from .sender import LogSender, MessageSender
from .validation import AddressValidator, ErrorReason, ValidationError

__all__ = [
    "AddressValidator",
    "ErrorReason",
    "Field",
    "FieldName",
    "FieldSet",
    "FormController",
    "FormState",
    "FormStatus",
    "LogSender",
    "MessageSender",
    "ValidationError",
    "build_fields",
]
