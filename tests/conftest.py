"""Pytest configuration for the phraselex suite.

Hypothesis runs under one of two profiles:
- dev: 500 examples, random seeds (default)
- ci: 50 derandomized examples, selected when CI=true

HYPOTHESIS_PROFILE=dev|ci overrides the detection.

Tests marked @pytest.mark.fuzz (long concurrent property runs) are skipped
unless requested with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import settings

from phraselex.locale_utils import clear_locale_cache

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


@pytest.fixture(autouse=True)
def _fresh_locale_cache() -> None:
    """Start every test with an empty primary-language cache."""
    clear_locale_cache()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long concurrent property runs, skipped unless -m fuzz is given",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
