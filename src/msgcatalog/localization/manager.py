"""Per-locale catalog registry with a two-step fallback chain.

LocalizationManager owns the mutable half of the engine: the mapping of
locale code to immutable message tree, the current and fallback locale,
and the loader used to source catalogs on demand. Lookups resolve in the
requested locale first, then in the fallback locale, then return the key
itself. They never raise.

Key architectural decisions:
- Trees are built before the locked swap, so registration is atomic
- Lookups snapshot the trees under the lock and resolve outside it
- Protocol-based CatalogLoader (dependency inversion)
- Loading is the only asynchronous operation; the blocking fetch runs in
  a worker thread via asyncio.to_thread

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Iterable, Mapping

from msgcatalog.catalog import Node, build_root, interpolate, iter_leaf_paths, resolve
from msgcatalog.config import LocalizationConfig
from msgcatalog.constants import DEFAULT_ERROR_FORMAT, ERROR_FORMAT_KEYS
from msgcatalog.diagnostics import (
    CatalogFormatError,
    ErrorTemplate,
    LocaleLoadError,
    UnsupportedLocaleError,
)
from msgcatalog.enums import LoadStatus
from msgcatalog.locale_utils import negotiate_locale, parse_accept_language, validate_locale_code
from msgcatalog.localization.loading import (
    CatalogLoader,
    FallbackInfo,
    LoadResult,
    LoadSummary,
    PackageCatalogLoader,
)
from msgcatalog.localization.types import (
    CatalogDocument,
    InterpolationParams,
    LocaleCode,
    MessageKeyPath,
)

__all__ = ["LocalizationManager"]

logger = logging.getLogger(__name__)


class LocalizationManager:
    """Registry of locale catalogs with message lookup and formatting.

    Thread-safe: registry and locale state are guarded by an RLock.
    Multiple managers never share state.

    Example:
        >>> manager = LocalizationManager()
        >>> manager.register_messages({"locale": "en", "string": {"required": "is required"}})
        >>> manager.get_message("string.required")
        'is required'
        >>> manager.get_error_message("Email", "string.required")
        'Email is required'
    """

    __slots__ = (
        "_catalogs",
        "_config",
        "_current_locale",
        "_fallback_locale",
        "_load_results",
        "_loader",
        "_lock",
        "_logger",
        "_on_fallback",
    )

    def __init__(
        self,
        loader: CatalogLoader | None = None,
        *,
        config: LocalizationConfig | None = None,
        logger: logging.Logger | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize an empty manager.

        Args:
            loader: Source for load_locale() (default: bundled JSON catalogs)
            config: Initial current/fallback locale (default: both "en").
                    Preloading is done by initialize_localization(), not here.
            logger: Logger for registry events (default: module logger)
            on_fallback: Optional callback invoked when a message is resolved
                        from the fallback locale instead of the requested one.
                        Receives a FallbackInfo.
        """
        self._config = config if config is not None else LocalizationConfig()
        self._loader: CatalogLoader = loader if loader is not None else PackageCatalogLoader()
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._on_fallback = on_fallback
        self._current_locale: LocaleCode = self._config.default_locale
        self._fallback_locale: LocaleCode = self._config.fallback_locale
        # dict preserves registration order for get_available_locales()
        self._catalogs: dict[LocaleCode, Node] = {}
        self._load_results: list[LoadResult] = []
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(LocalizationManager())
            "LocalizationManager(locale='en', fallback='en', locales=[])"
        """
        return (
            f"LocalizationManager(locale={self._current_locale!r}, "
            f"fallback={self._fallback_locale!r}, "
            f"locales={list(self._catalogs)!r})"
        )

    @property
    def config(self) -> LocalizationConfig:
        """Configuration the manager was created with."""
        return self._config

    @property
    def loader(self) -> CatalogLoader:
        """Loader used by load_locale()."""
        return self._loader

    def set_logger(self, logger: logging.Logger) -> None:
        """Replace the logger used for registry and lookup events."""
        self._logger = logger

    # ------------------------------------------------------------------
    # Locale state
    # ------------------------------------------------------------------

    def get_locale(self) -> LocaleCode:
        """Return the current locale."""
        return self._current_locale

    def set_locale(self, locale: LocaleCode) -> None:
        """Set the current locale.

        The locale does not need to be registered; lookups against an
        unregistered locale go straight to the fallback locale.

        Args:
            locale: Locale code

        Raises:
            ValueError: If the code is empty or padded with whitespace
        """
        validate_locale_code(locale)
        with self._lock:
            self._current_locale = locale
        self._logger.debug("Current locale set to %s", locale)

    def get_fallback_locale(self) -> LocaleCode:
        """Return the fallback locale."""
        return self._fallback_locale

    def set_fallback_locale(self, locale: LocaleCode) -> None:
        """Set the locale consulted when the requested one lacks a key.

        Raises:
            ValueError: If the code is empty or padded with whitespace
        """
        validate_locale_code(locale)
        with self._lock:
            self._fallback_locale = locale
        self._logger.debug("Fallback locale set to %s", locale)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register_messages(self, messages: CatalogDocument) -> None:
        """Register (or fully replace) the catalog of the locale it declares.

        The locale code is read from the document's own ``locale`` field.
        Groups that are not mappings, and leaves that are not strings, are
        accepted and simply resolve to not found. The document is copied
        into an immutable tree; later changes to ``messages`` have no effect.

        Args:
            messages: Catalog document

        Raises:
            CatalogFormatError: If messages is not a mapping or its
                ``locale`` field is not a usable locale code
        """
        if not isinstance(messages, Mapping):
            diagnostic = ErrorTemplate.catalog_invalid(
                f"expected a mapping, got {type(messages).__name__}"
            )
            raise CatalogFormatError(diagnostic)
        locale = messages.get("locale")
        if not isinstance(locale, str) or not locale or locale.strip() != locale:
            diagnostic = ErrorTemplate.catalog_invalid(
                f"'locale' must be a non-empty string, got {locale!r}"
            )
            raise CatalogFormatError(diagnostic)

        tree = build_root(messages)
        with self._lock:
            replaced = locale in self._catalogs
            self._catalogs[locale] = tree

        self._logger.info(
            "%s messages for locale %s (%d keys)",
            "Replaced" if replaced else "Registered",
            locale,
            sum(1 for _ in iter_leaf_paths(tree)),
        )

    def unregister_locale(self, locale: LocaleCode) -> bool:
        """Remove a locale's catalog.

        Returns:
            True if the locale was registered
        """
        with self._lock:
            removed = self._catalogs.pop(locale, None) is not None
        if removed:
            self._logger.info("Unregistered locale %s", locale)
        return removed

    def clear(self) -> None:
        """Drop every catalog and load result; restore configured locales."""
        with self._lock:
            self._catalogs.clear()
            self._load_results.clear()
            self._current_locale = self._config.default_locale
            self._fallback_locale = self._config.fallback_locale
        self._logger.debug("Cleared all catalogs")

    def has_locale(self, locale: LocaleCode) -> bool:
        """Check whether a catalog is registered for a locale."""
        return locale in self._catalogs

    def get_available_locales(self) -> list[LocaleCode]:
        """Return registered locale codes in registration order."""
        with self._lock:
            return list(self._catalogs)

    def get_supported_locales(self) -> tuple[LocaleCode, ...]:
        """Return the locale codes the loader can source.

        Loaders without available_locales() report nothing.
        """
        available = getattr(self._loader, "available_locales", None)
        if available is None:
            return ()
        return tuple(available())

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _check_params(self, params: InterpolationParams | None) -> InterpolationParams | None:
        """Treat a non-mapping params argument as absent.

        Callers annotate params as Mapping | None, but dynamic callers may
        violate the contract at runtime. Lookups never raise, so the value
        is dropped with a warning.
        """
        if params is not None and not isinstance(params, Mapping):
            self._logger.warning(
                "Ignoring params of type %s: expected a mapping", type(params).__name__
            )
            return None
        return params

    def _lookup(
        self, key: MessageKeyPath, locale: LocaleCode | None, *, notify: bool = True
    ) -> str | None:
        """Resolve a template through the fallback chain.

        Args:
            key: Dotted key path
            locale: Requested locale (None or "" for the current locale)
            notify: Invoke on_fallback when the fallback locale answers

        Returns:
            Template text, or None if neither locale defines the key
        """
        with self._lock:
            target = locale or self._current_locale
            fallback = self._fallback_locale
            primary = self._catalogs.get(target)
            secondary = self._catalogs.get(fallback) if fallback != target else None

        if primary is not None:
            found = resolve(primary, key)
            if found is not None:
                return found

        if secondary is None:
            return None
        found = resolve(secondary, key)
        if found is not None:
            self._logger.debug(
                "Message %s resolved from fallback locale %s (requested %s)",
                key,
                fallback,
                target,
            )
            if notify and self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(requested_locale=target, resolved_locale=fallback, message_key=key)
                )
        return found

    def get_message(
        self,
        key: MessageKeyPath,
        params: InterpolationParams | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Look up a message and substitute its parameters.

        Args:
            key: Dotted key path (e.g., 'string.tooShort', 'items.1')
            params: Placeholder values
            locale: Locale to look in (default: current locale)

        Returns:
            Interpolated template, or ``key`` unchanged if neither the
            requested nor the fallback locale defines it

        Example:
            >>> manager.get_message("string.tooShort", {"min": 5})
            'is too short (minimum: 5 characters)'
            >>> manager.get_message("no.such.key", {"min": 5})
            'no.such.key'
        """
        params = self._check_params(params)
        template = self._lookup(key, locale)
        if template is None:
            self._logger.debug("Message key not found: %s", key)
            return key
        return interpolate(template, params)

    def has_message(self, key: MessageKeyPath, locale: LocaleCode | None = None) -> bool:
        """Check whether get_message() would find the key (fallback included)."""
        return self._lookup(key, locale, notify=False) is not None

    def is_message_defined(self, key: MessageKeyPath, locale: LocaleCode | None = None) -> bool:
        """Check whether the key is defined in one locale, without fallback.

        Args:
            key: Dotted key path
            locale: Locale to check (default: current locale)

        Returns:
            True if the key resolves to a template in that locale
        """
        with self._lock:
            tree = self._catalogs.get(locale or self._current_locale)
        return tree is not None and resolve(tree, key) is not None

    def get_message_keys(self, locale: LocaleCode | None = None) -> list[MessageKeyPath]:
        """Return every resolvable key of a locale in dot notation.

        Sequence elements appear as ``key.N``. Unregistered locales give an
        empty list.

        Args:
            locale: Locale to list (default: current locale)
        """
        with self._lock:
            tree = self._catalogs.get(locale or self._current_locale)
        if tree is None:
            return []
        return list(iter_leaf_paths(tree))

    # ------------------------------------------------------------------
    # Error formatting
    # ------------------------------------------------------------------

    def compose_error_message(
        self, field_name: str, message: str, locale: LocaleCode | None = None
    ) -> str:
        """Combine a field name with message text using the catalog's errorFormat.

        The combining template is the first of ``common.errorFormat`` and
        ``errorFormat`` found through the fallback chain, else
        ``"{fieldName} {message}"``.

        Args:
            field_name: Subject of the message (may be empty)
            message: Final message text
            locale: Locale whose errorFormat is used (default: current locale)

        Returns:
            Combined text
        """
        template = DEFAULT_ERROR_FORMAT
        for format_key in ERROR_FORMAT_KEYS:
            found = self._lookup(format_key, locale, notify=False)
            if found is not None:
                template = found
                break
        return interpolate(template, {"fieldName": field_name, "message": message})

    def get_error_message(
        self,
        field_name: str,
        message_key: MessageKeyPath,
        params: InterpolationParams | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Build the display text for a field-level validation error.

        Args:
            field_name: Subject of the message (e.g., "Email"; may be empty)
            message_key: Dotted key of the message template
            params: Placeholder values for the message template
            locale: Locale to look in (default: current locale)

        Returns:
            Combined text

        Example:
            >>> manager.get_error_message("Email", "string.required")
            'Email is required'
            >>> manager.get_error_message("", "string.required")
            ' is required'
        """
        message = self.get_message(message_key, params, locale)
        return self.compose_error_message(field_name, message, locale)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _describe_path(self, locale: LocaleCode) -> str | None:
        describe = getattr(self._loader, "describe_path", None)
        return describe(locale) if describe is not None else None

    def _record(self, result: LoadResult) -> None:
        with self._lock:
            self._load_results.append(result)

    def _fail(self, result: LoadResult) -> None:
        self._record(result)
        self._logger.warning("Failed to load locale %s: %s", result.locale, result.error)

    def _supported_for_error(self) -> tuple[LocaleCode, ...]:
        try:
            return self.get_supported_locales()
        except OSError as e:
            self._logger.debug("Could not list supported locales: %s", e)
            return ()

    @staticmethod
    def _check_document(
        locale: LocaleCode, document: object, source_path: str | None
    ) -> CatalogDocument:
        """Check that a fetched document is a catalog for ``locale``.

        Raises:
            CatalogFormatError: If the document is not a mapping or declares
                a different locale
        """
        if not isinstance(document, Mapping):
            diagnostic = ErrorTemplate.catalog_invalid(
                f"expected a mapping, got {type(document).__name__}", source_path
            )
            raise CatalogFormatError(diagnostic)
        declared = document.get("locale")
        if isinstance(declared, str) and declared != locale:
            raise CatalogFormatError(
                ErrorTemplate.catalog_locale_mismatch(locale, declared, source_path)
            )
        return document

    def _load(self, locale: LocaleCode) -> None:
        """Fetch, check and register one locale; record the outcome.

        Blocking. Runs in a worker thread under load_locale().

        Raises:
            UnsupportedLocaleError: If the loader cannot source the locale
            LocaleLoadError: If fetching, decoding or registering fails
        """
        source_path = self._describe_path(locale)
        try:
            document = self._loader.load(locale)
        except (FileNotFoundError, KeyError) as e:
            diagnostic = ErrorTemplate.locale_not_supported(
                locale, self._supported_for_error(), source_path
            )
            error: LocaleLoadError = UnsupportedLocaleError(diagnostic, locale=locale)
            self._fail(LoadResult(locale, LoadStatus.NOT_FOUND, error, source_path))
            raise error from e
        except (OSError, ValueError) as e:
            # Permission errors, JSON decoding errors, path traversal
            diagnostic = ErrorTemplate.locale_load_failed(locale, str(e), source_path)
            error = LocaleLoadError(diagnostic, locale=locale)
            self._fail(LoadResult(locale, LoadStatus.ERROR, error, source_path))
            raise error from e
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Custom loaders (HTTP clients, databases) raise their own types
            reason = f"{type(e).__name__}: {e}"
            diagnostic = ErrorTemplate.locale_load_failed(locale, reason, source_path)
            error = LocaleLoadError(diagnostic, locale=locale)
            self._fail(LoadResult(locale, LoadStatus.ERROR, error, source_path))
            raise error from e

        try:
            self.register_messages(self._check_document(locale, document, source_path))
        except CatalogFormatError as e:
            reason = e.diagnostic.message if e.diagnostic is not None else str(e)
            diagnostic = ErrorTemplate.locale_load_failed(locale, reason, source_path)
            error = LocaleLoadError(diagnostic, locale=locale)
            self._fail(LoadResult(locale, LoadStatus.ERROR, error, source_path))
            raise error from e

        self._record(LoadResult(locale, LoadStatus.SUCCESS, source_path=source_path))
        self._logger.info("Loaded locale %s from %s", locale, source_path or repr(self._loader))

    async def load_locale(self, locale: LocaleCode) -> None:
        """Load and register a locale's catalog unless it is already registered.

        Idempotent: returns immediately for a registered locale. Concurrent
        calls for the same unregistered locale may both fetch; both register
        the same content.

        Args:
            locale: Locale code to load

        Raises:
            UnsupportedLocaleError: If the loader has no catalog for the locale
            LocaleLoadError: If the catalog cannot be read, decoded or
                registered. The registry is unchanged.
        """
        if self.has_locale(locale):
            return
        await asyncio.to_thread(self._load, locale)

    async def load_locales(self, locales: Iterable[LocaleCode]) -> None:
        """Load several locales concurrently.

        All-or-nothing from the caller's view: if any load fails, the call
        raises the first error. Locales that finished loading before the
        failure stay registered.

        Args:
            locales: Locale codes to load (duplicates ignored)

        Raises:
            LocaleLoadError: First failure among the loads
        """
        codes = list(dict.fromkeys(locales))
        await asyncio.gather(*(self.load_locale(code) for code in codes))

    async def ensure_locale_loaded(self, locale: LocaleCode) -> None:
        """Make sure a locale is registered, loading it only if missing.

        Raises:
            LocaleLoadError: If the locale is missing and cannot be loaded
        """
        if not self.has_locale(locale):
            await self.load_locale(locale)

    def preload(self, locales: Iterable[LocaleCode]) -> None:
        """Synchronously load locales that are not yet registered.

        Used by initialize_localization(); stops at the first failure.

        Raises:
            LocaleLoadError: If a locale cannot be loaded
        """
        for locale in dict.fromkeys(locales):
            if not self.has_locale(locale):
                self._load(locale)

    def get_load_summary(self) -> LoadSummary:
        """Get summary of every load attempt since construction or clear().

        Returns:
            LoadSummary with per-locale results
        """
        with self._lock:
            return LoadSummary(results=tuple(self._load_results))

    # ------------------------------------------------------------------
    # Negotiation
    # ------------------------------------------------------------------

    def negotiate_locale(self, preferred: str | Iterable[str]) -> LocaleCode | None:
        """Pick the registered locale that best matches a preference list.

        Args:
            preferred: Locale codes in preference order, or an HTTP
                Accept-Language header value

        Returns:
            A registered locale code, or None if nothing matches

        Example:
            >>> manager.negotiate_locale("es-MX,es;q=0.9,en;q=0.5")
            'es'
        """
        codes = parse_accept_language(preferred) if isinstance(preferred, str) else list(preferred)
        return negotiate_locale(codes, self.get_available_locales())
