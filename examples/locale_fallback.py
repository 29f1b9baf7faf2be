"""Locale fallback and loading examples.

Demonstrates:
1. Two-step fallback (requested locale, then fallback locale, then key)
2. Observing fallbacks with on_fallback
3. Asynchronous loading of the bundled catalogs
4. Loading catalogs from disk with PathCatalogLoader
5. Locale negotiation from an Accept-Language header
6. The process-wide default manager
"""

import asyncio
import json
import logging
import tempfile
from pathlib import Path

from msgcatalog import (
    LocalizationConfig,
    LocalizationManager,
    UnsupportedLocaleError,
    get_message,
    initialize_localization,
)
from msgcatalog.localization import FallbackInfo, PathCatalogLoader


def example_1_basic_fallback() -> None:
    """Keys missing from the requested locale come from the fallback."""
    print("=" * 60)
    print("Example 1: Basic Fallback")
    print("=" * 60)

    manager = LocalizationManager()
    manager.register_messages({
        "locale": "en",
        "string": {"required": "is required", "tooLong": "is too long (maximum: {max} characters)"},
    })
    manager.register_messages({"locale": "lv", "string": {"required": "ir obligāts"}})
    manager.set_locale("lv")

    print(manager.get_error_message("Vārds", "string.required"))
    # Output: Vārds ir obligāts
    print(manager.get_error_message("Vārds", "string.tooLong", {"max": 20}))
    # Output: Vārds is too long (maximum: 20 characters)
    print(manager.get_message("string.unknown"))
    # Output: string.unknown


def example_2_fallback_callback() -> None:
    """on_fallback reports every key served by the fallback locale."""
    print("\n" + "=" * 60)
    print("Example 2: Fallback Callback")
    print("=" * 60)

    missing: list[FallbackInfo] = []
    manager = LocalizationManager(on_fallback=missing.append)
    manager.register_messages({"locale": "en", "email": {"invalid": "is invalid"}})
    manager.register_messages({"locale": "de", "email": {}})

    manager.get_message("email.invalid", locale="de")
    for info in missing:
        print(f"{info.requested_locale}: {info.message_key} served from {info.resolved_locale}")
    # Output: de: email.invalid served from en


def example_3_async_loading() -> None:
    """load_locales fetches several bundled catalogs concurrently."""
    print("\n" + "=" * 60)
    print("Example 3: Async Loading")
    print("=" * 60)

    manager = LocalizationManager()
    asyncio.run(manager.load_locales(["en", "es", "fr", "de"]))
    for locale in manager.get_available_locales():
        print(f"{locale}: {manager.get_error_message('Email', 'email.required', locale=locale)}")

    try:
        asyncio.run(manager.load_locale("xx"))
    except UnsupportedLocaleError as e:
        print(e.diagnostic)
    # Output: Unsupported locale 'xx'. Available locales: de, en, es, fr

    print(manager.get_load_summary())


def example_4_disk_catalogs(base: Path) -> None:
    """PathCatalogLoader reads {locale} files below one directory."""
    print("\n" + "=" * 60)
    print("Example 4: Catalogs on Disk")
    print("=" * 60)

    for locale, text in (("en", "must be a valid IBAN"), ("es", "debe ser un IBAN válido")):
        document = {"locale": locale, "bank": {"iban": text}}
        (base / f"{locale}.json").write_text(json.dumps(document), encoding="utf-8")

    manager = LocalizationManager(PathCatalogLoader(str(base / "{locale}.json")))
    print(f"Supported: {manager.get_supported_locales()}")
    manager.preload(["en", "es"])
    print(manager.get_error_message("Cuenta", "bank.iban", locale="es"))
    # Output: Cuenta debe ser un IBAN válido


def example_5_negotiation() -> None:
    """Pick the best registered locale for a request."""
    print("\n" + "=" * 60)
    print("Example 5: Locale Negotiation")
    print("=" * 60)

    manager = LocalizationManager()
    manager.preload(["en", "es"])
    print(manager.negotiate_locale("es-MX,es;q=0.9,en;q=0.5"))
    # Output: es
    print(manager.negotiate_locale(["ja", "ko"]))
    # Output: None


def example_6_default_manager() -> None:
    """initialize_localization() sets up the shared instance once."""
    print("\n" + "=" * 60)
    print("Example 6: Default Manager")
    print("=" * 60)

    initialize_localization(LocalizationConfig(default_locale="fr", preload=("en", "fr")))
    print(get_message("string.required"))
    # Output: is required
    print(get_message("string.required", locale="fr"))
    # Output: est requis


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    example_1_basic_fallback()
    example_2_fallback_callback()
    example_3_async_loading()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_4_disk_catalogs(Path(tmp_dir_main))

    example_5_negotiation()
    example_6_default_manager()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
