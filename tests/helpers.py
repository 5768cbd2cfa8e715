"""
Test doubles and helpers shared across the test suite
"""
from mailform.core import events
from mailform.utils.errors import SendError


class RecordingSender:
    """Sender double that remembers every call."""

    def __init__(self):
        self.calls = []

    def send(self, to, from_, subject, body):
        self.calls.append((to, from_, subject, body))


class FailingSender:
    """Sender double that always refuses the message."""

    def __init__(self, message="SMTP server unavailable"):
        self.message = message
        self.attempts = 0

    def send(self, to, from_, subject, body):
        self.attempts += 1
        raise SendError(self.message)


def type_text(controller, text):
    """Feed text one character at a time, the way a keyboard would."""
    for char in text:
        controller.handle(events.InsertText(char))
