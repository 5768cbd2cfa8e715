"""Exception hierarchy for mailform."""

from enum import Enum
from typing import Any, Dict


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    CONFIGURATION = "configuration"
    FILE_SYSTEM = "file_system"
    DELIVERY = "delivery"
    UNKNOWN = "unknown"


## Custom Exceptions


class MailFormError(Exception):
    """Base exception for all mailform errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise MailFormError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Configuration Errors


class ConfigurationError(MailFormError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class InvalidConfigError(ConfigurationError):
    """Exception for configuration files that fail to parse or validate."""

    user_message = "The configuration file is invalid"


class MissingConfigError(ConfigurationError):
    """Exception for unknown configuration keys."""

    user_message = "Configuration key not found"


## File System Errors


class FileSystemError(MailFormError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


## Delivery Errors


class SendError(MailFormError):
    """Raised by a message sender that could not hand the message off."""

    category = ErrorCategory.DELIVERY
    user_message = "Failed to send message"
