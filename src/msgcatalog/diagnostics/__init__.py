"""Diagnostic system for catalog errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogError,
    CatalogFormatError,
    LocaleLoadError,
    UnsupportedLocaleError,
)
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LocaleLoadError",
    "UnsupportedLocaleError",
]
