"""Pytest configuration for the msgcatalog test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from msgcatalog import LocalizationManager, reset_localization
from msgcatalog.localization import MappingCatalogLoader
from tests.helpers.catalogs import make_messages

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_default_manager() -> Iterator[None]:
    """Every test starts and ends without a default manager."""
    reset_localization()
    yield
    reset_localization()


@pytest.fixture
def en_messages() -> dict[str, object]:
    """English catalog document with a nested group."""
    messages = make_messages("en")
    messages["nested"] = {"deep": {"value": "deep nested value with {param}"}}
    return messages


@pytest.fixture
def es_messages() -> dict[str, object]:
    """Partial Spanish catalog document."""
    return make_messages(
        "es",
        string={
            "required": "es requerido",
            "tooShort": "es demasiado corto (mínimo: {min} caracteres)",
        },
    )


@pytest.fixture
def manager(en_messages: dict[str, object]) -> LocalizationManager:
    """Manager with the English catalog registered."""
    mgr = LocalizationManager()
    mgr.register_messages(en_messages)
    return mgr


@pytest.fixture
def memory_loader(
    en_messages: dict[str, object], es_messages: dict[str, object]
) -> MappingCatalogLoader:
    """In-memory loader serving English, Spanish and a partial French catalog."""
    return MappingCatalogLoader(
        {
            "en": en_messages,
            "es": es_messages,
            "fr": {"locale": "fr", "string": {"required": "est requis"}},
        }
    )
