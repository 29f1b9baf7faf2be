"""Catalog loading infrastructure for LocalizationManager.

Provides the protocol for locale catalog loaders, three implementations
(bundled package data, filesystem with path-traversal protection,
in-memory mapping) and result/summary data structures for tracking load
attempts.

Components:
    CatalogLoader - Protocol for loading catalog documents (structural typing)
    PackageCatalogLoader - Loader for the JSON catalogs bundled with msgcatalog
    PathCatalogLoader - Disk-based loader with path-traversal prevention
    MappingCatalogLoader - In-memory loader
    FallbackInfo - Immutable record of a locale fallback event
    LoadResult - Immutable result of a single locale load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from msgcatalog.enums import LoadStatus
from msgcatalog.localization.types import CatalogDocument, LocaleCode, MessageKeyPath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogLoader",
    # Concrete loaders
    "PackageCatalogLoader",
    "PathCatalogLoader",
    "MappingCatalogLoader",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "LoadResult",
    "LoadSummary",
    # Helpers
    "decode_catalog",
]

_LOCALES_PACKAGE = "msgcatalog.locales"
_CATALOG_SUFFIX = ".json"


def decode_catalog(text: str) -> CatalogDocument:
    """Decode a JSON catalog document.

    Args:
        text: JSON source

    Returns:
        Decoded top-level mapping

    Raises:
        ValueError: If the text is not JSON or its top level is not an object
            (json.JSONDecodeError is a ValueError subclass)
    """
    document = json.loads(text)
    if not isinstance(document, dict):
        msg = f"Catalog root must be a JSON object, got {type(document).__name__}"
        raise ValueError(msg)
    return document


def _check_locale_segment(locale: LocaleCode) -> None:
    """Reject locale codes that cannot safely name a file.

    Raises:
        ValueError: If locale is empty or contains path components
    """
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if ".." in locale:
        msg = f"Path traversal sequences not allowed in locale: '{locale}'"
        raise ValueError(msg)
    if "/" in locale or "\\" in locale:
        msg = f"Path separators not allowed in locale: '{locale}'"
        raise ValueError(msg)


class CatalogLoader(Protocol):
    """Protocol for loading the catalog document of a locale.

    Implementations must provide load(). Two methods are optional; the
    manager looks them up with getattr() and skips them when absent:

    - available_locales() -> tuple[str, ...]: locale codes the loader can
      source, listed by get_supported_locales() and in UnsupportedLocaleError
      messages. Without it the loader reports no supported locales.
    - describe_path(locale) -> str: human-readable catalog location for
      diagnostics and LoadResult.source_path.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class HttpLoader:
        ...     def load(self, locale: str) -> Mapping[str, object]:
        ...         return fetch_json(f"https://cdn.example/i18n/{locale}.json")
        ...     def available_locales(self) -> tuple[str, ...]:
        ...         return ("en", "es")
        ...
        >>> manager = LocalizationManager(HttpLoader())
    """

    def load(self, locale: LocaleCode) -> CatalogDocument:
        """Load the catalog document for a locale.

        Args:
            locale: Locale code (e.g., 'en', 'es', 'pt-BR')

        Returns:
            Catalog document (a mapping with a 'locale' field)

        Raises:
            FileNotFoundError: If no catalog exists for this locale
            OSError: If the catalog cannot be read
            ValueError: If the catalog cannot be decoded

        Any other exception is also reported by the manager as a
        LocaleLoadError with status ERROR.
        """


@dataclass(frozen=True, slots=True)
class PackageCatalogLoader:
    """Loader for the JSON catalogs bundled in the ``msgcatalog.locales`` package.

    Attributes:
        package: Importable package holding ``<locale>.json`` files
    """

    package: str = _LOCALES_PACKAGE

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the package resource name of a locale's catalog."""
        return f"{self.package}/{locale}{_CATALOG_SUFFIX}"

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return the locales with a bundled catalog."""
        return tuple(
            sorted(
                entry.name.removesuffix(_CATALOG_SUFFIX)
                for entry in resources.files(self.package).iterdir()
                if entry.is_file() and entry.name.endswith(_CATALOG_SUFFIX)
            )
        )

    def load(self, locale: LocaleCode) -> CatalogDocument:
        """Read and decode a bundled catalog.

        Raises:
            FileNotFoundError: If no catalog is bundled for this locale
            ValueError: If locale is unsafe or the JSON is invalid
        """
        _check_locale_segment(locale)
        resource = resources.files(self.package).joinpath(f"{locale}{_CATALOG_SUFFIX}")
        if not resource.is_file():
            msg = f"No bundled catalog for locale '{locale}'"
            raise FileNotFoundError(msg)
        return decode_catalog(resource.read_text(encoding="utf-8"))


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader using a path template.

    Implements CatalogLoader for JSON files on disk. Uses a {locale}
    placeholder in the path template for locale substitution.

    Security:
        Locale codes containing path separators or ".." are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathCatalogLoader("i18n/{locale}.json")
        >>> document = loader.load("es")
        # Loads from: i18n/es.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        # Without the placeholder every locale would read the same file
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # "i18n/{locale}.json" -> "i18n"
            static_prefix = self.base_path.split("{locale}")[0]
            static_dir = static_prefix.rstrip("/\\")
            if static_prefix and static_dir == static_prefix:
                # Prefix ends inside a file name ("i18n/messages_{locale}.json")
                static_dir = str(Path(static_prefix).parent)
            resolved = Path(static_dir).resolve() if static_dir else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path is within base_dir after resolving both."""
        try:
            full_path.resolve().relative_to(base_dir.resolve())
        except ValueError:
            return False
        return True

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the locale-substituted path for diagnostics."""
        return self.base_path.replace("{locale}", locale)

    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Return locales whose catalog file exists under the template.

        The placeholder may sit in the file name ("i18n/{locale}.json")
        or in the last directory ("i18n/{locale}/messages.json").
        """
        template = Path(self.base_path)
        if "{locale}" in template.name:
            directory, name = template.parent, template.name
        elif "{locale}" in template.parent.name:
            directory, name = template.parent.parent, template.parent.name
        else:
            return ()
        if not directory.is_dir():
            return ()
        before, _, after = name.partition("{locale}")
        pattern = re.compile(re.escape(before) + "(.+)" + re.escape(after))
        found: set[str] = set()
        for entry in directory.iterdir():
            match = pattern.fullmatch(entry.name)
            code = match.group(1) if match else None
            if code and ".." not in code and Path(self.describe_path(code)).is_file():
                found.add(code)
        return tuple(sorted(found))

    def load(self, locale: LocaleCode) -> CatalogDocument:
        """Read and decode a catalog file.

        Raises:
            ValueError: If locale contains path traversal sequences, or
                the file is not a JSON object
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        _check_locale_segment(locale)

        # replace() rather than format(): other braces in the template stay literal
        full_path = Path(self.base_path.replace("{locale}", locale)).resolve()

        if not self._is_safe_path(self._resolved_root, full_path):
            msg = (
                "Path traversal detected: resolved path escapes root directory. "
                f"locale={locale!r}"
            )
            raise ValueError(msg)

        return decode_catalog(full_path.read_text(encoding="utf-8"))


class MappingCatalogLoader:
    """In-memory loader serving catalog documents from a mapping.

    Documents are served as-is; the manager copies them into immutable
    trees on registration.

    Example:
        >>> loader = MappingCatalogLoader({"en": {"locale": "en", "common": {}}})
        >>> loader.load("en")["locale"]
        'en'
    """

    __slots__ = ("_catalogs",)

    def __init__(self, catalogs: Mapping[LocaleCode, CatalogDocument]) -> None:
        self._catalogs: Mapping[LocaleCode, CatalogDocument] = MappingProxyType(dict(catalogs))

    def __repr__(self) -> str:
        return f"MappingCatalogLoader(locales={list(self._catalogs)!r})"

    def describe_path(self, locale: LocaleCode) -> str:
        return f"<memory>/{locale}"

    def available_locales(self) -> tuple[LocaleCode, ...]:
        return tuple(sorted(self._catalogs))

    def load(self, locale: LocaleCode) -> CatalogDocument:
        try:
            return self._catalogs[locale]
        except KeyError:
            msg = f"No in-memory catalog for locale '{locale}'"
            raise FileNotFoundError(msg) from None


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when LocalizationManager resolves
    a message from the fallback locale instead of the requested one.

    Attributes:
        requested_locale: The locale the lookup targeted
        resolved_locale: The locale that actually contained the message
        message_key: The key path that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.message_key} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> manager = LocalizationManager(on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    message_key: MessageKeyPath


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of loading the catalog of a single locale.

    Attributes:
        locale: Locale code that was requested
        status: Load status (success, not_found, error)
        error: Exception if status is not SUCCESS, None otherwise
        source_path: Human-readable catalog location (if available)
    """

    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if the catalog loaded and registered successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the loader had no catalog for the locale."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of locale load results.

    All statistics are computed properties derived from the ``results``
    tuple, in attempt order.

    Attributes:
        results: All individual load results (immutable tuple)

    Example:
        >>> summary = manager.get_load_summary()
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.locale}: {result.error}")
    """

    results: tuple[LoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of locales the loader could not source."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[LoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[LoadResult, ...]:
        """Get all results where the locale was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[LoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[LoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def has_errors(self) -> bool:
        """Check if any load failed with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted load succeeded.

        Returns:
            True if errors == 0 and not_found == 0
        """
        return self.errors == 0 and self.not_found == 0
