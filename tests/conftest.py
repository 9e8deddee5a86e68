"""
Pytest configuration and shared fixtures for jidkit tests.

Provides:
- A fake profile function that records its calls
- Normalizers with small caches (fake and real stringprep profiles)
- Isolation of the process-wide default normalizer
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from jidkit.core.cache import CacheConfig, PrepCaches
from jidkit.core.metrics import MetricsConfig
from jidkit.core.prep import ComponentNormalizer, PrepConfig, set_default_normalizer
from jidkit.models.constants import ComponentKind


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Fakes
# ============================================================================


class FakeProfile:
    """Deterministic stand-in for the stringprep profiles.

    Lowercases nodes and domains, leaves resources alone, and rejects any
    value containing a space or a ``!`` the way nodeprep rejects prohibited
    characters.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[ComponentKind, str]] = []

    def __call__(self, kind: ComponentKind, value: str) -> str:
        self.calls.append((kind, value))
        if " " in value or "!" in value:
            raise UnicodeError(f"Invalid character in {value!r}")
        if kind == ComponentKind.RESOURCE:
            return value
        return value.lower()

    def count(self, kind: ComponentKind) -> int:
        return sum(1 for k, _ in self.calls if k == kind)


# ============================================================================
# Normalizer Fixtures
# ============================================================================


@pytest.fixture
def fake_profile() -> FakeProfile:
    return FakeProfile()


@pytest.fixture
def small_config() -> PrepConfig:
    return PrepConfig(
        caches=CacheConfig(node=4, domain=2, resource=4),
        metrics=MetricsConfig(enabled=True),
    )


@pytest.fixture
def normalizer(fake_profile: FakeProfile, small_config: PrepConfig) -> ComponentNormalizer:
    """Normalizer with small caches and the fake profile."""
    return ComponentNormalizer(profile=fake_profile, config=small_config)


@pytest.fixture
def real_normalizer() -> ComponentNormalizer:
    """Normalizer with fresh caches and the Twisted stringprep profiles."""
    return ComponentNormalizer(caches=PrepCaches.from_config(CacheConfig()))


@pytest.fixture(autouse=True)
def reset_default_normalizer() -> Iterator[None]:
    """Give every test a fresh process-wide normalizer."""
    set_default_normalizer(None)
    yield
    set_default_normalizer(None)
