"""msgcatalog - Localizable validation-error message catalog.

Resolves human-readable validation-error messages from per-locale message
trees, with dotted-path lookup, a two-step locale fallback chain,
placeholder interpolation and a two-mode (field name vs. literal message)
formatting contract for validators.

Public API:
    LocalizationManager - Per-locale catalog registry with fallback lookup
    LocalizationConfig - Startup configuration (current/fallback/preload locales)
    MessageHandler - Catalog-backed ErrorMessageFormatter
    FormatErrorOptions - Description of one validation error
    MsgType - FieldName vs. Message formatting mode
    initialize_localization - Create the process default manager

Exceptions:
    CatalogError - Base exception class
    CatalogFormatError - Unusable catalog document
    LocaleLoadError - Locale catalog could not be loaded
    UnsupportedLocaleError - Loader has no catalog for the locale

Submodules:
    msgcatalog.catalog - Message tree, key resolution, interpolation
    msgcatalog.localization - Registry, loaders, default instance
    msgcatalog.formatting - Error-text formatting
    msgcatalog.diagnostics - Error types and diagnostic codes
"""

from .config import LocalizationConfig
from .diagnostics import (
    CatalogError,
    CatalogFormatError,
    LocaleLoadError,
    UnsupportedLocaleError,
)
from .enums import MsgType
from .formatting import (
    ErrorMessageFormatter,
    FormatErrorOptions,
    MessageHandler,
    create_message_handler,
    format_error_message,
)
from .localization import (
    LocalizationManager,
    get_localization_manager,
    get_message,
    initialize_localization,
    reset_localization,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("msgcatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "ErrorMessageFormatter",
    "FormatErrorOptions",
    "LocaleLoadError",
    "LocalizationConfig",
    "LocalizationManager",
    "MessageHandler",
    "MsgType",
    "UnsupportedLocaleError",
    "__version__",
    "create_message_handler",
    "format_error_message",
    "get_localization_manager",
    "get_message",
    "initialize_localization",
    "reset_localization",
]
