"""Pytest configuration for the transtree test suite.

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
from collections.abc import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from transtree.diagnostics import DiagnosticEvent, DiagnosticsEmitter

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

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


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


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

TRANSLATIONS = {
    "pear": {"it": "Pera", "en": "Pear"},
    "apple": {
        "it": ["Mela", "Mele", "Nessuna mela"],
        "en": ["Apple", "Apples", "No apples"],
    },
    "banana": {"it": "Banana"},
    "vegetable": {"root": {"carrot": {"it": "Carota", "en": "Carrot"}}},
    "sub": {
        "orange": {"it": "Arancia", "en": "Orange"},
        "cantaloupe": {"it": "Melone", "en": "Cantaloupe"},
        "strawberry": {
            "en": ["1 strawberry", "%n strawberries", "0 strawberry"],
            "it": ["1 fragola", "2+ fragole", "0 fragole"],
        },
    },
}

BAD_TRANSLATIONS = {
    "pear": {"it": "Pera"},
    "apple": {"it": ["Mela", "Mele", "Nessuna mela"], "en": ["Apple"]},
    "sub": {
        "orange": {"it": "Arancia", "en": ["Orange", "Oranges", "No oranges"]},
        "cantaloupe": {"en": "Cantaloupe", "es": "Cantalupo"},
        "strawberry": {"en": ["1 strawberry", "0 strawberries"]},
    },
}


@pytest.fixture
def catalog() -> dict[str, object]:
    """Well-formed Italian/English catalog."""
    return TRANSLATIONS


@pytest.fixture
def bad_catalog() -> dict[str, object]:
    """Catalog with missing languages, mixed shapes and short plural variants."""
    return BAD_TRANSLATIONS


@pytest.fixture
def events() -> list[DiagnosticEvent]:
    """Diagnostic events recorded by the ``emitter`` fixture."""
    return []


@pytest.fixture
def emitter(events: list[DiagnosticEvent]) -> Generator[DiagnosticsEmitter]:
    """Private emitter recording every event into ``events``."""
    with DiagnosticsEmitter(on_diagnostic=events.append) as diagnostics:
        yield diagnostics
