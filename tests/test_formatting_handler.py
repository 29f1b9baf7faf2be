"""Tests for the error message formatter and its two modes."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError

import pytest

from msgcatalog import (
    ErrorMessageFormatter,
    FormatErrorOptions,
    LocalizationManager,
    MessageHandler,
    MsgType,
    create_message_handler,
    format_error_message,
    initialize_localization,
)
from msgcatalog.localization import MappingCatalogLoader


class TestGetErrorMessage:
    """LocalizationManager.get_error_message combining rules."""

    def test_field_name_and_message(self, manager: LocalizationManager) -> None:
        """Field name and message are joined by errorFormat."""
        assert manager.get_error_message("Email", "string.required") == "Email is required"

    def test_empty_field_name(self, manager: LocalizationManager) -> None:
        """An empty field name leaves the separating space."""
        assert manager.get_error_message("", "string.required") == " is required"

    def test_params(self, manager: LocalizationManager) -> None:
        """Message params are interpolated before combining."""
        result = manager.get_error_message("Name", "string.tooShort", {"min": 3})

        assert result == "Name is too short (minimum: 3 characters)"

    def test_missing_key(self, manager: LocalizationManager) -> None:
        """A missing key is combined as-is."""
        assert manager.get_error_message("Name", "no.such") == "Name no.such"

    def test_catalog_error_format(self) -> None:
        """A catalog can reorder field name and message."""
        manager = LocalizationManager()
        manager.register_messages(
            {
                "locale": "xx",
                "common": {"errorFormat": "{message}: {fieldName}"},
                "string": {"required": "required"},
            }
        )

        result = manager.get_error_message("Email", "string.required", locale="xx")

        assert result == "required: Email"

    def test_top_level_error_format(self) -> None:
        """A top-level errorFormat is used when common.errorFormat is absent."""
        manager = LocalizationManager()
        manager.register_messages(
            {"locale": "en", "errorFormat": "[{fieldName}] {message}", "g": {"k": "bad"}}
        )

        assert manager.get_error_message("F", "g.k") == "[F] bad"

    def test_default_format_without_catalog(self) -> None:
        """Without any errorFormat the built-in template is used."""
        manager = LocalizationManager()
        manager.register_messages({"locale": "en", "g": {"k": "bad"}})

        assert manager.get_error_message("F", "g.k") == "F bad"

    def test_error_format_from_fallback(self, manager: LocalizationManager) -> None:
        """A locale without errorFormat uses the fallback locale's."""
        manager.register_messages({"locale": "fr", "string": {"required": "est requis"}})

        assert manager.get_error_message("Nom", "string.required", locale="fr") == "Nom est requis"

    def test_field_name_with_braces_is_literal(self, manager: LocalizationManager) -> None:
        """Field names are not rescanned for placeholders."""
        result = manager.get_error_message("{message}", "string.required")

        assert result == "{message} is required"


class TestFormatErrorOptions:
    """The options dataclass."""

    def test_key_joins_group(self) -> None:
        """group and message_key join with a dot."""
        options = FormatErrorOptions(
            "Email", MsgType.FIELD_NAME, group="string", message_key="required"
        )

        assert options.key == "string.required"

    def test_key_without_group(self) -> None:
        """message_key alone is used as the full key."""
        assert FormatErrorOptions("x", message_key="string.required").key == "string.required"

    def test_no_key(self) -> None:
        """No message key gives an empty key."""
        assert FormatErrorOptions("x", group="string").key == ""

    def test_plain_string_mode_coerced(self) -> None:
        """Plain strings are coerced to MsgType."""
        options = FormatErrorOptions("x", "message")  # type: ignore[arg-type]

        assert options.msg_type is MsgType.MESSAGE

    def test_unknown_mode_rejected(self) -> None:
        """Unknown modes raise ValueError."""
        with pytest.raises(ValueError):
            FormatErrorOptions("x", "error")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Options are immutable."""
        options = FormatErrorOptions("x")

        with pytest.raises(FrozenInstanceError):
            options.msg = "y"  # type: ignore[misc]


class TestMessageHandler:
    """Two-mode formatting."""

    def test_message_mode_verbatim(self, manager: LocalizationManager) -> None:
        """Message mode returns msg unchanged without lookup."""
        handler = MessageHandler(manager)
        options = FormatErrorOptions(
            "Custom error {min}",
            MsgType.MESSAGE,
            group="string",
            message_key="required",
            params={"min": 1},
        )

        assert handler.format_error_message(options) == "Custom error {min}"

    def test_field_name_mode(self, manager: LocalizationManager) -> None:
        """FieldName mode combines the field with the catalog template."""
        handler = MessageHandler(manager)
        options = FormatErrorOptions(
            "Name", MsgType.FIELD_NAME, group="string", message_key="tooShort", params={"min": 2}
        )

        assert handler.format_error_message(options) == "Name is too short (minimum: 2 characters)"

    def test_field_name_mode_locale(self, manager: LocalizationManager, es_messages) -> None:
        """The options' locale selects the catalog."""
        manager.register_messages(es_messages)
        handler = MessageHandler(manager)
        options = FormatErrorOptions("Nombre", group="string", message_key="required", locale="es")

        assert handler.format_error_message(options) == "Nombre es requerido"

    def test_fallback_text(self, manager: LocalizationManager) -> None:
        """Without a key, the fallback text is combined with the field name."""
        handler = MessageHandler(manager)
        options = FormatErrorOptions("email", fallback="must be a valid email address")

        assert handler.format_error_message(options) == "email must be a valid email address"

    def test_invalid_default(self, manager: LocalizationManager) -> None:
        """Without key or fallback, string.invalid is used."""
        handler = MessageHandler(manager)

        assert handler.format_error_message(FormatErrorOptions("email")) == "email is invalid"

    def test_missing_key_never_raises(self, manager: LocalizationManager) -> None:
        """An unknown key is combined as-is."""
        handler = MessageHandler(manager)
        options = FormatErrorOptions("Field", group="nope", message_key="missing")

        assert handler.format_error_message(options) == "Field nope.missing"

    def test_debug_log(self, manager, caplog: pytest.LogCaptureFixture) -> None:
        """Each call logs 'Error message formatted' at DEBUG."""
        handler = MessageHandler(manager)
        options = FormatErrorOptions("x", group="string", message_key="required")
        with caplog.at_level(logging.DEBUG, logger="msgcatalog.formatting.handler"):
            handler.format_error_message(options)

        assert any("Error message formatted" in r.getMessage() for r in caplog.records)

    def test_custom_logger(self, manager, caplog: pytest.LogCaptureFixture) -> None:
        """A custom logger receives the formatting events."""
        custom = logging.getLogger("validators.audit")
        handler = MessageHandler(manager, custom)
        with caplog.at_level(logging.DEBUG, logger="validators.audit"):
            handler.format_error_message(FormatErrorOptions("x", MsgType.MESSAGE))

        assert [r.name for r in caplog.records] == ["validators.audit"]

    def test_satisfies_protocol(self, manager: LocalizationManager) -> None:
        """MessageHandler is an ErrorMessageFormatter."""
        formatter: ErrorMessageFormatter = MessageHandler(manager)

        assert formatter.format_error_message(FormatErrorOptions("ok", MsgType.MESSAGE)) == "ok"


class _StubFormatter:
    """Test double used in place of a catalog-backed formatter."""

    def format_error_message(self, options: FormatErrorOptions) -> str:
        if options.msg_type is MsgType.MESSAGE:
            return options.msg
        return f"{options.msg} <{options.key}>"


class TestFormatterSubstitution:
    """Validators depend only on the protocol."""

    def test_stub_formatter(self) -> None:
        """Any object with format_error_message works as a formatter."""

        def validate_required(value: str, formatter: ErrorMessageFormatter) -> str | None:
            if value:
                return None
            return formatter.format_error_message(
                FormatErrorOptions("Email", group="string", message_key="required")
            )

        assert validate_required("", _StubFormatter()) == "Email <string.required>"
        assert validate_required("x", _StubFormatter()) is None


class TestModuleFunctions:
    """create_message_handler and format_error_message."""

    def test_create_with_manager(self, manager: LocalizationManager) -> None:
        """An explicit manager is used."""
        handler = create_message_handler(manager)

        assert isinstance(handler, MessageHandler)
        assert handler.manager is manager

    def test_create_without_default_raises(self) -> None:
        """Without a manager and without initialization, RuntimeError is raised."""
        with pytest.raises(RuntimeError, match="not initialized"):
            create_message_handler()

    def test_format_with_default_manager(self, en_messages) -> None:
        """format_error_message uses the initialized default manager."""
        initialize_localization(loader=MappingCatalogLoader({"en": en_messages}))

        options = FormatErrorOptions("Email", group="string", message_key="required")

        result = format_error_message(options)

        assert result == "Email is required"

    def test_format_with_explicit_manager(self, manager: LocalizationManager) -> None:
        """An explicit manager overrides the default."""
        options = FormatErrorOptions("Age", message_key="number.tooSmall", params={"min": 18})

        result = format_error_message(options, manager)

        assert result == "Age is too small (minimum: 18)"
