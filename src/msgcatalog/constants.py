"""Shared constants for msgcatalog.

Centralizes default locales, structural limits and fallback templates
used by the catalog, localization and formatting packages. Placing them
here avoids circular imports between those packages.

Constants are grouped by domain:
- Locale defaults: Initial current/fallback locale of a new manager
- Depth limits: Recursion protection for tree building and stringification
- Formatting: Error-format template keys and the built-in template

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_FALLBACK_LOCALE",
    "BUNDLED_LOCALES",
    # Depth limits
    "MAX_TREE_DEPTH",
    "MAX_STRINGIFY_DEPTH",
    # Formatting
    "ERROR_FORMAT_KEYS",
    "DEFAULT_ERROR_FORMAT",
    "INVALID_MESSAGE_KEY",
    "CIRCULAR_PLACEHOLDER",
    "DEPTH_PLACEHOLDER",
    # Environment
    "ENV_LOCALE",
    "ENV_FALLBACK_LOCALE",
    "ENV_PRELOAD",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en"
"""Current locale of a freshly constructed LocalizationManager."""

DEFAULT_FALLBACK_LOCALE: str = "en"
"""Fallback locale of a freshly constructed LocalizationManager."""

BUNDLED_LOCALES: tuple[str, ...] = ("en", "es", "fr", "de")
"""Locales shipped as JSON catalogs inside the msgcatalog.locales package."""

# ============================================================================
# DEPTH LIMITS
# ============================================================================

MAX_TREE_DEPTH: int = 100
"""Maximum nesting depth accepted when building a message tree.

Deeper branches are replaced with an Invalid node, so lookups through
them resolve to not found instead of exhausting the stack.
"""

MAX_STRINGIFY_DEPTH: int = 100
"""Maximum container nesting rendered by safe_stringify."""

# ============================================================================
# FORMATTING
# ============================================================================

ERROR_FORMAT_KEYS: tuple[str, ...] = ("common.errorFormat", "errorFormat")
"""Catalog keys consulted, in order, for the field-name combining template."""

DEFAULT_ERROR_FORMAT: str = "{fieldName} {message}"
"""Combining template used when no catalog defines one."""

INVALID_MESSAGE_KEY: str = "string.invalid"
"""Key used in FieldName mode when neither a message key nor fallback text is given."""

CIRCULAR_PLACEHOLDER: str = "[Circular]"
"""Rendered in place of a container that is already being stringified."""

DEPTH_PLACEHOLDER: str = "..."
"""Rendered in place of containers nested beyond MAX_STRINGIFY_DEPTH."""

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_LOCALE: str = "MSGCATALOG_LOCALE"
ENV_FALLBACK_LOCALE: str = "MSGCATALOG_FALLBACK_LOCALE"
ENV_PRELOAD: str = "MSGCATALOG_PRELOAD"
