"""Locale registry, loaders and the default-instance lifecycle.

Python 3.13+.
"""

from .default import (
    get_localization_manager,
    get_message,
    initialize_localization,
    reset_localization,
)
from .loading import (
    CatalogLoader,
    FallbackInfo,
    LoadResult,
    LoadSummary,
    MappingCatalogLoader,
    PackageCatalogLoader,
    PathCatalogLoader,
)
from .manager import LocalizationManager
from .types import CatalogDocument, InterpolationParams, LocaleCode, MessageKeyPath

__all__ = [
    "CatalogDocument",
    "CatalogLoader",
    "FallbackInfo",
    "InterpolationParams",
    "LoadResult",
    "LoadSummary",
    "LocaleCode",
    "LocalizationManager",
    "MappingCatalogLoader",
    "MessageKeyPath",
    "PackageCatalogLoader",
    "PathCatalogLoader",
    "get_localization_manager",
    "get_message",
    "initialize_localization",
    "reset_localization",
]
