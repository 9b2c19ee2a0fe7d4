"""Pytest configuration for the verbiage test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared fixtures pin "now" to a fixed instant so template output is
reproducible regardless of when the suite runs.
"""

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from hypothesis import Phase, Verbosity, settings

from verbiage.catalog import Registry, build_registry
from verbiage.content import ALL_TABLES
from verbiage.runtime import BabelFormatter, ContextSnapshot, FixedContextProvider, Resolver

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

# CI profile: fast feedback for GitHub Actions (50 examples)
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


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os  # noqa: PLC0415 - only needed for profile detection

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================

# 18:00 UTC on a Saturday; templates compare against this instant.
FIXED_NOW = datetime(2026, 3, 14, 18, 0, tzinfo=UTC)


@pytest.fixture
def fresh_formatter_cache() -> Iterator[None]:
    """Empty the class-level BabelFormatter cache around a test."""
    BabelFormatter.clear_cache()
    yield
    BabelFormatter.clear_cache()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def snapshot() -> ContextSnapshot:
    """Default application state at FIXED_NOW."""
    return ContextSnapshot(now=FIXED_NOW)


@pytest.fixture
def provider(snapshot: ContextSnapshot) -> FixedContextProvider:
    return FixedContextProvider(snapshot)


@pytest.fixture(scope="session")
def shipped_registry() -> Registry:
    """Registry over every shipped content table (built once per session)."""
    return build_registry(ALL_TABLES)


@pytest.fixture
def shipped_resolver(shipped_registry: Registry, provider: FixedContextProvider) -> Resolver:
    return Resolver(shipped_registry, provider)
