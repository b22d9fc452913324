"""Pytest configuration for the cldrdates test suite.

Hypothesis profiles (all without deadlines, since Babel loads CLDR data
lazily the first time each locale is used):
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with per-example output

HYPOTHESIS_PROFILE=<name> selects a profile explicitly and wins over CI.

Tests marked @pytest.mark.fuzz are skipped unless selected with -m fuzz.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from cldrdates.runtime.cache import FormatterCache, reset_default_cache

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    derandomize=False,
    deadline=None,
)

# Reproducible between runs; failing examples are printed as blobs
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    deadline=None,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    deadline=None,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if it names a profile, else "ci" under CI=true, else "dev"."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
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
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped
    """
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


@pytest.fixture
def cache() -> FormatterCache:
    """Isolated formatter cache with a fixed default locale."""
    return FormatterCache(default_locale="en_US")


@pytest.fixture(autouse=True)
def _isolated_default_cache() -> Iterator[None]:
    """Never let one test observe another test's process-wide cache."""
    reset_default_cache()
    yield
    reset_default_cache()
