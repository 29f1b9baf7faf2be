"""Quickstart example for msgcatalog.

Demonstrates message lookup, interpolation, field-level error text and
the two formatting modes validators use.

Note: Examples register catalogs in memory for brevity. Production code
normally calls initialize_localization() once at startup and loads the
bundled catalogs.
"""

from msgcatalog import (
    FormatErrorOptions,
    LocalizationManager,
    MessageHandler,
    MsgType,
)

# Example 1: Lookup and interpolation
print("=" * 50)
print("Example 1: Lookup and Interpolation")
print("=" * 50)

manager = LocalizationManager()
manager.register_messages({
    "locale": "en",
    "common": {"errorFormat": "{fieldName} {message}"},
    "string": {
        "required": "is required",
        "tooShort": "is too short (minimum: {min} characters)",
    },
    "phone": {
        "invalidE164Format": "is invalid. Example: {example}",
        "examples": {"e164": "+11234567890"},
    },
})

print(manager.get_message("string.required"))
# Output: is required

print(manager.get_message("string.tooShort", {"min": 5}))
# Output: is too short (minimum: 5 characters)

print(manager.get_message("no.such.key"))
# Output: no.such.key

# Example 2: Field-level error text
print("\n" + "=" * 50)
print("Example 2: Field-Level Errors")
print("=" * 50)

print(manager.get_error_message("Email", "string.required"))
# Output: Email is required

example = manager.get_message("phone.examples.e164")
print(manager.get_error_message("Phone", "phone.invalidE164Format", {"example": example}))
# Output: Phone is invalid. Example: +11234567890

# Example 3: Formatting modes
print("\n" + "=" * 50)
print("Example 3: FieldName vs. Message Mode")
print("=" * 50)

handler = MessageHandler(manager)

print(handler.format_error_message(
    FormatErrorOptions("Username", MsgType.FIELD_NAME, group="string",
                       message_key="tooShort", params={"min": 3})
))
# Output: Username is too short (minimum: 3 characters)

print(handler.format_error_message(
    FormatErrorOptions("Please pick another username", MsgType.MESSAGE)
))
# Output: Please pick another username

print(handler.format_error_message(
    FormatErrorOptions("Website", fallback="must start with https://")
))
# Output: Website must start with https://
