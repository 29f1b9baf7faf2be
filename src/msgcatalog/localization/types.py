"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by validator code annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "CatalogDocument",
    "InterpolationParams",
    "LocaleCode",
    "MessageKeyPath",
]

LocaleCode: TypeAlias = str
"""Opaque locale identifier (e.g., 'en', 'es', 'en-US'); not a closed set."""

MessageKeyPath: TypeAlias = str
"""Dot-delimited address into a catalog (e.g., 'string.tooShort', 'items.1')."""

InterpolationParams: TypeAlias = Mapping[str, object]
"""Placeholder values keyed by placeholder name."""

CatalogDocument: TypeAlias = Mapping[str, object]
"""Raw catalog as decoded from its source; carries its own 'locale' field."""
