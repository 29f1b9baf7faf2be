"""Process-wide default LocalizationManager.

Validators that are not handed a manager explicitly use the default
instance. It is never created implicitly: call initialize_localization()
once at startup, and get_localization_manager() afterwards.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading

from msgcatalog.config import LocalizationConfig
from msgcatalog.localization.loading import CatalogLoader
from msgcatalog.localization.manager import LocalizationManager
from msgcatalog.localization.types import InterpolationParams, LocaleCode, MessageKeyPath

__all__ = [
    "get_localization_manager",
    "get_message",
    "initialize_localization",
    "reset_localization",
]

logger = logging.getLogger(__name__)

_DEFAULT_MANAGER: LocalizationManager | None = None
_DEFAULT_LOCK = threading.Lock()


def initialize_localization(
    config: LocalizationConfig | None = None,
    loader: CatalogLoader | None = None,
) -> LocalizationManager:
    """Create the default manager and register its preload locales.

    Replaces any previously initialized default manager. The preload
    locales are loaded synchronously, so the returned manager can format
    messages immediately.

    Args:
        config: Startup configuration (default: LocalizationConfig())
        loader: Catalog source (default: bundled JSON catalogs)

    Returns:
        The new default LocalizationManager

    Raises:
        LocaleLoadError: If a preload locale cannot be loaded; the previous
            default manager (if any) stays in place

    Example:
        >>> manager = initialize_localization(LocalizationConfig(preload=("en", "es")))
        >>> manager.get_available_locales()
        ['en', 'es']
    """
    # pylint: disable=global-statement
    global _DEFAULT_MANAGER  # noqa: PLW0603
    config = config if config is not None else LocalizationConfig()
    manager = LocalizationManager(loader, config=config)
    manager.preload(config.preload)
    with _DEFAULT_LOCK:
        _DEFAULT_MANAGER = manager
    logger.info(
        "Default localization initialized (locale=%s, fallback=%s, preloaded=%s)",
        config.default_locale,
        config.fallback_locale,
        ", ".join(config.preload) or "<none>",
    )
    return manager


def get_localization_manager() -> LocalizationManager:
    """Return the default manager.

    Raises:
        RuntimeError: If initialize_localization() has not been called
    """
    manager = _DEFAULT_MANAGER
    if manager is None:
        msg = "Localization is not initialized; call initialize_localization() first"
        raise RuntimeError(msg)
    return manager


def reset_localization() -> None:
    """Drop the default manager (tests, reconfiguration)."""
    # pylint: disable=global-statement
    global _DEFAULT_MANAGER  # noqa: PLW0603
    with _DEFAULT_LOCK:
        _DEFAULT_MANAGER = None


def get_message(
    key: MessageKeyPath,
    params: InterpolationParams | None = None,
    locale: LocaleCode | None = None,
) -> str:
    """Look up a message through the default manager.

    Unlike LocalizationManager.get_message(), an omitted locale targets the
    fallback locale rather than the current one.

    Raises:
        RuntimeError: If initialize_localization() has not been called
    """
    manager = get_localization_manager()
    return manager.get_message(key, params, locale or manager.get_fallback_locale())
