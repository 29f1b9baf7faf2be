"""Locale utilities: code validation, normalization and negotiation.

Locale codes are opaque to the catalog (any non-empty, whitespace-free
string is a valid key). Babel is used only where CLDR knowledge helps:
negotiating a best match from a preference list and parsing the system
locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from msgcatalog.diagnostics.templates import ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "negotiate_locale",
    "normalize_locale",
    "parse_accept_language",
    "validate_locale_code",
]

_QUALITY = re.compile(r"^q=([0-9.]+)$", re.ASCII)


def validate_locale_code(locale_code: object) -> str:
    """Check that a value is usable as a locale code.

    Args:
        locale_code: Candidate locale code

    Returns:
        The same code, typed as str

    Raises:
        ValueError: If the code is not a string, is empty, or has
            leading/trailing whitespace
    """
    if not isinstance(locale_code, str) or not locale_code or locale_code.strip() != locale_code:
        raise ValueError(str(ErrorTemplate.locale_code_invalid(locale_code)))
    return locale_code


def normalize_locale(locale_code: str) -> str:
    """Convert a POSIX locale code to BCP-47 form.

    Catalog keys use hyphens (``en-US``); the system and Babel use
    underscores (``en_US``). Encoding suffixes are dropped.

    Args:
        locale_code: Locale code in either form (e.g., "pt_BR.UTF-8")

    Returns:
        BCP-47 form (e.g., "pt-BR")

    Example:
        >>> normalize_locale("en_US")
        'en-US'
        >>> normalize_locale("de_DE.UTF-8")
        'de-DE'
    """
    return locale_code.split(".")[0].replace("_", "-")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code), sep="-")


def get_system_locale(default: str = "en") -> str:
    """Detect the system locale from the environment.

    Detection order: LC_ALL, LC_MESSAGES, LANG. The "C" and "POSIX"
    pseudo-locales are ignored.

    Args:
        default: Code returned when nothing usable is set

    Returns:
        Detected locale in BCP-47 form, or ``default``
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX") and not value.startswith("C."):
            return normalize_locale(value)
    return default


def parse_accept_language(header: str) -> list[str]:
    """Parse an HTTP Accept-Language header into codes ordered by quality.

    Malformed entries are skipped; ``*`` is ignored. Equal qualities keep
    header order.

    Args:
        header: Header value (e.g., "fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5")

    Returns:
        Locale codes, best first

    Example:
        >>> parse_accept_language("en;q=0.8, es-ES, es;q=0.9")
        ['es-ES', 'es', 'en']
    """
    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        code, *options = (piece.strip() for piece in part.split(";"))
        if not code or code == "*":
            continue
        quality = 1.0
        for option in options:
            match = _QUALITY.match(option)
            if match:
                try:
                    quality = float(match.group(1))
                except ValueError:
                    quality = 0.0
        if quality > 0:
            weighted.append((-quality, position, normalize_locale(code)))
    return [code for _, _, code in sorted(weighted)]


def negotiate_locale(preferred: Iterable[str], available: Iterable[str]) -> str | None:
    """Pick the best available locale for a preference list.

    Uses Babel's negotiation: exact (case-insensitive) matches first, then
    CLDR aliases, then the bare language of a regional preference
    ("en-US" matches "en").

    Args:
        preferred: Locale codes in preference order
        available: Locale codes that can be served

    Returns:
        A code from ``available``, or None if nothing matches

    Example:
        >>> negotiate_locale(["de-AT", "en"], ["en", "de"])
        'de'
    """
    from babel.core import negotiate_locale as babel_negotiate  # noqa: PLC0415

    # Babel returns the preferred spelling; map back to the available one
    by_lower = {code.lower(): code for code in available if code}
    if not by_lower:
        return None
    preferred_codes = [normalize_locale(code) for code in preferred if code]
    match = babel_negotiate(preferred_codes, list(by_lower.values()), sep="-")
    return by_lower.get(match.lower()) if match else None
