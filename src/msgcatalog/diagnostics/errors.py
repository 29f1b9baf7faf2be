"""Catalog exception hierarchy with structured diagnostics.

Lookups and formatting never raise; these exceptions are reserved for
operations with real failure modes: loading a locale, registering an
unusable catalog document, and setting an unusable locale code.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "LocaleLoadError",
    "UnsupportedLocaleError",
]


class CatalogError(Exception):
    """Base exception for all msgcatalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CatalogFormatError(CatalogError, ValueError):
    """Catalog document cannot be registered.

    Raised when the document is not a mapping, lacks a string ``locale``
    field, or names a different locale than the one requested from a loader.
    Malformed groups inside an otherwise usable document are NOT errors.
    """


class LocaleLoadError(CatalogError):
    """Loading a locale's catalog failed.

    The registry is left unchanged when this is raised.

    Attributes:
        locale: Locale code whose load failed
    """

    def __init__(self, message: str | Diagnostic, *, locale: str = "") -> None:
        """Initialize LocaleLoadError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Locale code whose load failed
        """
        super().__init__(message)
        self.locale = locale


class UnsupportedLocaleError(LocaleLoadError):
    """The configured loader has no catalog for the requested locale."""
