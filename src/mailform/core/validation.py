"""Address validation for the To and From fields."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from mailform.utils.logging import get_logger

from .fields import FieldName

logger = get_logger(__name__)


class ErrorReason(Enum):
    """Why a field's content failed validation."""

    INVALID_ADDRESS = "invalid email address"


@dataclass(frozen=True)
class ValidationError:
    """A failed check, tied to the field that failed it."""

    reason: ErrorReason
    field: FieldName

    @property
    def message(self) -> str:
        return f"{self.field.label} {self.reason.value}"


def is_valid_mailbox(text: str) -> bool:
    """Return True if ``text`` is a single mailbox address.

    Accepts a bare ``local@domain`` or ``Display Name <local@domain>``,
    including quoted local parts, domain literals and single-label or
    reserved test domains. Group syntax, address lists, ``localhost`` and the
    empty string are rejected.
    """
    candidate = text.strip()
    if not candidate:
        return False

    try:
        # Don't check deliverability to avoid DNS lookups
        validate_email(
            candidate,
            check_deliverability=False,
            allow_display_name=True,
            allow_quoted_local=True,
            allow_domain_literal=True,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError as e:
        logger.debug(f"Address rejected: {e}")
        return False

    return True


class AddressValidator:
    """Validator for one of the address fields."""

    def __init__(self, field: FieldName):
        self.field = field

    def __call__(self, text: str) -> Optional[ValidationError]:
        if is_valid_mailbox(text):
            return None
        return ValidationError(ErrorReason.INVALID_ADDRESS, self.field)

    def __repr__(self) -> str:
        return f"AddressValidator({self.field.name})"
