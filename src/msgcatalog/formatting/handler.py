"""Two-mode error-text formatting for validators.

A validator describes an error with FormatErrorOptions and hands it to an
ErrorMessageFormatter. In Message mode the caller's text is final. In
FieldName mode the caller's text is a field name, combined with a catalog
template through the catalog's own errorFormat.

MessageHandler is the catalog-backed formatter. Validators depend on the
ErrorMessageFormatter protocol, so tests can substitute any object with
a format_error_message() method.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from msgcatalog.constants import INVALID_MESSAGE_KEY
from msgcatalog.enums import MsgType
from msgcatalog.localization.default import get_localization_manager
from msgcatalog.localization.manager import LocalizationManager
from msgcatalog.localization.types import InterpolationParams, LocaleCode, MessageKeyPath

__all__ = [
    "ErrorMessageFormatter",
    "FormatErrorOptions",
    "MessageHandler",
    "create_message_handler",
    "format_error_message",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatErrorOptions:
    """Description of one validation error to format.

    Attributes:
        msg: Field name (FieldName mode) or final text (Message mode)
        msg_type: How ``msg`` is interpreted (plain strings are coerced)
        group: Message group (e.g., "string"); joined with message_key
        message_key: Key within the group, or a full dotted key when
            group is empty
        params: Placeholder values for the template
        locale: Locale to format in (default: the manager's current locale)
        fallback: Text combined with ``msg`` when no key is given

    Example:
        >>> FormatErrorOptions("Email", MsgType.FIELD_NAME, group="string",
        ...                    message_key="required").key
        'string.required'
    """

    msg: str
    msg_type: MsgType = MsgType.FIELD_NAME
    group: str = ""
    message_key: str = ""
    params: InterpolationParams | None = None
    locale: LocaleCode | None = None
    fallback: str | None = None

    def __post_init__(self) -> None:
        """Coerce msg_type to MsgType.

        Raises:
            ValueError: If msg_type is not "fieldName" or "message"
        """
        object.__setattr__(self, "msg_type", MsgType(self.msg_type))

    @property
    def key(self) -> MessageKeyPath:
        """Full dotted key, or "" when no message key is set."""
        if not self.message_key:
            return ""
        return f"{self.group}.{self.message_key}" if self.group else self.message_key


class ErrorMessageFormatter(Protocol):
    """Anything that turns FormatErrorOptions into display text."""

    def format_error_message(self, options: FormatErrorOptions) -> str:
        """Return the display text for one validation error."""


class MessageHandler:
    """Catalog-backed ErrorMessageFormatter.

    Args:
        manager: LocalizationManager holding the catalogs
        logger: Logger for formatting events (default: module logger)

    Example:
        >>> handler = MessageHandler(manager)
        >>> handler.format_error_message(
        ...     FormatErrorOptions("Name", group="string", message_key="tooShort",
        ...                        params={"min": 2}))
        'Name is too short (minimum: 2 characters)'
    """

    __slots__ = ("_logger", "_manager")

    def __init__(self, manager: LocalizationManager, logger: logging.Logger | None = None) -> None:
        self._manager = manager
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"MessageHandler(manager={self._manager!r})"

    @property
    def manager(self) -> LocalizationManager:
        """Manager used for lookups."""
        return self._manager

    def format_error_message(self, options: FormatErrorOptions) -> str:
        """Format one validation error.

        Message mode returns ``str(options.msg)`` without any lookup.
        FieldName mode looks up ``options.key``; without a key it combines
        the field name with ``options.fallback``, or with the catalog's
        ``string.invalid`` text when no fallback is given.

        Args:
            options: Error description

        Returns:
            Display text. Never raises for missing keys.
        """
        match options.msg_type:
            case MsgType.MESSAGE:
                formatted = str(options.msg)
            case MsgType.FIELD_NAME if options.key:
                formatted = self._manager.get_error_message(
                    options.msg, options.key, options.params, options.locale
                )
            case MsgType.FIELD_NAME if options.fallback:
                formatted = self._manager.compose_error_message(
                    options.msg, options.fallback, options.locale
                )
            case _:
                formatted = self._manager.get_error_message(
                    options.msg, INVALID_MESSAGE_KEY, None, options.locale
                )

        self._logger.debug(
            "Error message formatted (group=%s, key=%s, params=%r)",
            options.group,
            options.message_key,
            options.params,
        )
        return formatted


def create_message_handler(
    manager: LocalizationManager | None = None,
    logger: logging.Logger | None = None,
) -> ErrorMessageFormatter:
    """Create a MessageHandler.

    Args:
        manager: Manager to use (default: the initialized default manager)
        logger: Logger for formatting events

    Raises:
        RuntimeError: If manager is omitted and localization is not initialized
    """
    return MessageHandler(manager if manager is not None else get_localization_manager(), logger)


def format_error_message(
    options: FormatErrorOptions, manager: LocalizationManager | None = None
) -> str:
    """Format one validation error without keeping a handler around.

    Raises:
        RuntimeError: If manager is omitted and localization is not initialized
    """
    return create_message_handler(manager).format_error_message(options)
