"""Localization configuration.

Provides a single frozen dataclass describing how a LocalizationManager
starts: its current locale, its fallback locale, and which locales the
default instance registers eagerly at initialization.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from msgcatalog.constants import (
    DEFAULT_FALLBACK_LOCALE,
    DEFAULT_LOCALE,
    ENV_FALLBACK_LOCALE,
    ENV_LOCALE,
    ENV_PRELOAD,
)
from msgcatalog.locale_utils import get_babel_locale, get_system_locale, validate_locale_code

__all__ = ["LocalizationConfig"]


@dataclass(frozen=True, slots=True)
class LocalizationConfig:
    """Immutable startup configuration for a LocalizationManager.

    All fields have defaults; ``LocalizationConfig()`` reproduces the
    behavior of a bare ``LocalizationManager()``.

    Attributes:
        default_locale: Current locale after construction (default: "en").
        fallback_locale: Locale consulted when the requested one lacks a
            key (default: "en").
        preload: Locales registered synchronously by
            ``initialize_localization()`` (default: ("en",)).

    Example:
        >>> config = LocalizationConfig(default_locale="es", preload=("en", "es"))
        >>> manager = initialize_localization(config)
        >>> manager.get_locale()
        'es'
    """

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = DEFAULT_FALLBACK_LOCALE
    preload: tuple[str, ...] = (DEFAULT_FALLBACK_LOCALE,)

    def __post_init__(self) -> None:
        """Validate locale codes at construction time.

        Raises:
            ValueError: If any locale code is empty or padded with whitespace.
        """
        validate_locale_code(self.default_locale)
        validate_locale_code(self.fallback_locale)
        # Accept any iterable for preload but store a tuple
        object.__setattr__(self, "preload", tuple(dict.fromkeys(self.preload)))
        for code in self.preload:
            validate_locale_code(code)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LocalizationConfig:
        """Build a configuration from environment variables.

        Reads MSGCATALOG_LOCALE, MSGCATALOG_FALLBACK_LOCALE and
        MSGCATALOG_PRELOAD (comma-separated). Unset or blank variables
        keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            LocalizationConfig

        Raises:
            ValueError: If a variable holds an unusable locale code
        """
        env = os.environ if environ is None else environ
        default_locale = env.get(ENV_LOCALE, "").strip() or DEFAULT_LOCALE
        fallback_locale = env.get(ENV_FALLBACK_LOCALE, "").strip() or DEFAULT_FALLBACK_LOCALE
        preload_raw = env.get(ENV_PRELOAD, "")
        preload = tuple(code.strip() for code in preload_raw.split(",") if code.strip())
        return cls(
            default_locale=default_locale,
            fallback_locale=fallback_locale,
            preload=preload or (fallback_locale,),
        )

    @classmethod
    def from_system(cls, fallback_locale: str = DEFAULT_FALLBACK_LOCALE) -> LocalizationConfig:
        """Build a configuration whose current locale is the system language.

        The system locale (LC_ALL, LC_MESSAGES, LANG) is reduced to its
        language subtag with Babel ("de_DE.UTF-8" becomes "de"). Unknown
        system locales fall back to ``fallback_locale``.

        Args:
            fallback_locale: Fallback locale, also used when detection fails

        Returns:
            LocalizationConfig preloading both locales
        """
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        detected = get_system_locale(default=fallback_locale)
        try:
            language = get_babel_locale(detected).language
        except (UnknownLocaleError, ValueError):
            language = fallback_locale
        return cls(
            default_locale=language,
            fallback_locale=fallback_locale,
            preload=(fallback_locale, language),
        )
