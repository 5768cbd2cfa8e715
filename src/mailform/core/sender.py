"""Message sender collaborators."""

from typing import Protocol

from mailform.utils.logging import get_logger, log_event

logger = get_logger(__name__)


class MessageSender(Protocol):
    """Transmits a composed message.

    Called at most once per run, after the To and From addresses have passed
    validation. Implementations signal failure by raising ``SendError``.
    """

    def send(self, to: str, from_: str, subject: str, body: str) -> None: ...


class LogSender:
    """Sender that records the message in the event log instead of delivering it."""

    def send(self, to: str, from_: str, subject: str, body: str) -> None:
        logger.info("Sending message...")
        log_event(
            "message_sent",
            f"Message from {from_} to {to}",
            subject=subject,
            body_length=len(body),
        )
