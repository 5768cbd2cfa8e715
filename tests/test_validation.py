"""
Tests for address validation

Tests cover:
- Accepted mailbox forms
- Rejected input (empty, malformed, lists, groups)
- ValidationError values and messages
"""
import pytest

from mailform.core.fields import FieldName
from mailform.core.validation import (
    AddressValidator,
    ErrorReason,
    ValidationError,
    is_valid_mailbox,
)


class TestMailboxParsing:
    """Tests for is_valid_mailbox"""

    @pytest.mark.parametrize(
        "address",
        [
            "john@example.com",
            "a@b.com",
            "first.last+tag@mail.example.org",
            "John Doe <john@example.com>",
            "  john@example.com  ",
            "a@b",
            '"john doe"@example.com',
            "john@[192.168.0.1]",
            "john@mail.test",
        ],
    )
    def test_accepts_single_mailbox(self, address):
        assert is_valid_mailbox(address) is True

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "   ",
            "not-an-address",
            "@example.com",
            "john@",
            "john@@example.com",
            "a@b.com, c@d.com",
            "undisclosed-recipients:;",
            "Group: a@b.com;",
            "user@localhost",
        ],
    )
    def test_rejects_everything_else(self, address):
        assert is_valid_mailbox(address) is False


class TestAddressValidator:
    """Tests for the per-field validator"""

    def test_empty_is_invalid(self):
        assert AddressValidator(FieldName.TO)("") == ValidationError(
            ErrorReason.INVALID_ADDRESS, FieldName.TO
        )

    def test_valid_address_passes(self):
        assert AddressValidator(FieldName.TO)("john@example.com") is None

    def test_error_carries_its_field(self):
        error = AddressValidator(FieldName.FROM)("not-an-address")
        assert error.field is FieldName.FROM
        assert error.reason is ErrorReason.INVALID_ADDRESS

    def test_error_message_is_readable(self):
        error = ValidationError(ErrorReason.INVALID_ADDRESS, FieldName.TO)
        assert error.message == "To: invalid email address"
