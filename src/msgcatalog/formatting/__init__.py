"""Error-text formatting for validators.

Python 3.13+.
"""

from .handler import (
    ErrorMessageFormatter,
    FormatErrorOptions,
    MessageHandler,
    create_message_handler,
    format_error_message,
)

__all__ = [
    "ErrorMessageFormatter",
    "FormatErrorOptions",
    "MessageHandler",
    "create_message_handler",
    "format_error_message",
]
