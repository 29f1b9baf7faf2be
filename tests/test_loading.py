"""Tests for catalog loaders and load result tracking.

Covers the bundled package loader, the filesystem loader (including
path-traversal protection) and the in-memory loader.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from msgcatalog.constants import BUNDLED_LOCALES
from msgcatalog.enums import LoadStatus
from msgcatalog.localization import (
    LoadResult,
    LoadSummary,
    MappingCatalogLoader,
    PackageCatalogLoader,
    PathCatalogLoader,
)
from msgcatalog.localization.loading import decode_catalog


def _write_catalog(path: Path, locale: str, **groups: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"locale": locale, **groups}), encoding="utf-8")


class TestDecodeCatalog:
    """JSON decoding of catalog documents."""

    def test_object_root(self) -> None:
        """A JSON object decodes to a dict."""
        assert decode_catalog('{"locale": "en"}') == {"locale": "en"}

    @pytest.mark.parametrize("text", ["[1, 2]", '"en"', "null", "3"])
    def test_non_object_root(self, text: str) -> None:
        """Non-object roots raise ValueError."""
        with pytest.raises(ValueError, match="must be a JSON object"):
            decode_catalog(text)

    def test_invalid_json(self) -> None:
        """Malformed JSON raises ValueError (JSONDecodeError)."""
        with pytest.raises(ValueError):
            decode_catalog("{not json")


class TestPackageCatalogLoader:
    """Bundled catalogs shipped inside msgcatalog.locales."""

    def test_available_locales(self) -> None:
        """Every bundled locale is discovered."""
        assert PackageCatalogLoader().available_locales() == tuple(sorted(BUNDLED_LOCALES))

    @pytest.mark.parametrize("locale", BUNDLED_LOCALES)
    def test_load_declares_own_locale(self, locale: str) -> None:
        """Each bundled document names the locale it was loaded for."""
        document = PackageCatalogLoader().load(locale)

        assert document["locale"] == locale

    def test_missing_locale(self) -> None:
        """Unknown locales raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="No bundled catalog"):
            PackageCatalogLoader().load("xx")

    @pytest.mark.parametrize("locale", ["../en", "a/b", "a\\b", ""])
    def test_unsafe_locale(self, locale: str) -> None:
        """Path-like locale codes are rejected."""
        with pytest.raises(ValueError):
            PackageCatalogLoader().load(locale)

    def test_describe_path(self) -> None:
        """describe_path names the package resource."""
        assert PackageCatalogLoader().describe_path("en") == "msgcatalog.locales/en.json"


class TestPathCatalogLoader:
    """Catalog files on disk."""

    def test_load(self, tmp_path: Path) -> None:
        """Loads and decodes the locale-substituted file."""
        _write_catalog(tmp_path / "i18n" / "es.json", "es", string={"required": "es requerido"})
        loader = PathCatalogLoader(str(tmp_path / "i18n" / "{locale}.json"))

        assert loader.load("es")["string"] == {"required": "es requerido"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise FileNotFoundError."""
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))

        with pytest.raises(FileNotFoundError):
            loader.load("de")

    def test_requires_placeholder(self, tmp_path: Path) -> None:
        """A template without {locale} is rejected at construction."""
        with pytest.raises(ValueError, match="placeholder"):
            PathCatalogLoader(str(tmp_path / "messages.json"))

    @pytest.mark.parametrize("locale", ["..", "../secret", "en/../../x", "a\\b"])
    def test_traversal_rejected(self, tmp_path: Path, locale: str) -> None:
        """Locale codes with path components are rejected."""
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))

        with pytest.raises(ValueError, match="not allowed"):
            loader.load(locale)

    def test_symlink_escape_rejected(self, tmp_path: Path) -> None:
        """Resolved paths must stay under the root directory."""
        root = tmp_path / "i18n"
        outside = tmp_path / "outside.json"
        _write_catalog(outside, "en")
        root.mkdir()
        (root / "en.json").symlink_to(outside)
        loader = PathCatalogLoader(str(root / "{locale}.json"))

        with pytest.raises(ValueError, match="Path traversal detected"):
            loader.load("en")

    def test_explicit_root_dir(self, tmp_path: Path) -> None:
        """root_dir widens the allowed tree."""
        _write_catalog(tmp_path / "shared" / "en.json", "en")
        loader = PathCatalogLoader(
            str(tmp_path / "app" / ".." / "shared" / "{locale}.json"), root_dir=str(tmp_path)
        )

        assert loader.load("en")["locale"] == "en"

    def test_available_locales_file_template(self, tmp_path: Path) -> None:
        """Locales are discovered from file names."""
        for code in ("en", "pt-BR", "es"):
            _write_catalog(tmp_path / f"messages_{code}.json", code)
        (tmp_path / "README.md").write_text("x", encoding="utf-8")
        loader = PathCatalogLoader(str(tmp_path / "messages_{locale}.json"))

        assert loader.available_locales() == ("en", "es", "pt-BR")

    def test_available_locales_directory_template(self, tmp_path: Path) -> None:
        """Locales are discovered from directory names."""
        _write_catalog(tmp_path / "en" / "messages.json", "en")
        _write_catalog(tmp_path / "fr" / "messages.json", "fr")
        (tmp_path / "empty").mkdir()
        loader = PathCatalogLoader(str(tmp_path / "{locale}" / "messages.json"))

        assert loader.available_locales() == ("en", "fr")

    def test_available_locales_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory yields no locales."""
        loader = PathCatalogLoader(str(tmp_path / "nope" / "{locale}.json"))

        assert loader.available_locales() == ()

    def test_describe_path(self, tmp_path: Path) -> None:
        """describe_path substitutes the locale."""
        loader = PathCatalogLoader("i18n/{locale}.json")

        assert loader.describe_path("de") == "i18n/de.json"


class TestMappingCatalogLoader:
    """In-memory catalogs."""

    def test_load(self) -> None:
        """Documents are served by locale code."""
        loader = MappingCatalogLoader({"en": {"locale": "en"}})

        assert loader.load("en") == {"locale": "en"}
        assert loader.available_locales() == ("en",)

    def test_missing(self) -> None:
        """Unknown codes raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            MappingCatalogLoader({}).load("en")

    def test_snapshot_of_keys(self) -> None:
        """Adding to the source dict later does not add locales."""
        source: dict[str, dict[str, object]] = {}
        loader = MappingCatalogLoader(source)
        source["en"] = {"locale": "en"}

        assert loader.available_locales() == ()


class TestLoadSummary:
    """Aggregation of load results."""

    def test_counts(self) -> None:
        """Statuses are counted separately."""
        summary = LoadSummary(
            results=(
                LoadResult("en", LoadStatus.SUCCESS),
                LoadResult("xx", LoadStatus.NOT_FOUND, FileNotFoundError("xx")),
                LoadResult("bad", LoadStatus.ERROR, ValueError("json")),
            )
        )

        assert summary.total_attempted == 3
        assert summary.successful == 1
        assert summary.not_found == 1
        assert summary.errors == 1
        assert summary.has_errors
        assert not summary.all_successful
        assert [r.locale for r in summary.get_errors()] == ["bad"]
        assert [r.locale for r in summary.get_not_found()] == ["xx"]
        assert summary.get_by_locale("en")[0].is_success

    def test_empty(self) -> None:
        """No attempts means everything succeeded."""
        summary = LoadSummary(results=())

        assert summary.all_successful
        assert repr(summary) == "LoadSummary(total=0, ok=0, not_found=0, errors=0)"
