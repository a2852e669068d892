"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from core.cache.result_cache import ResultCacheService
from tests import FakeClock, SAMPLE_RESUME


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests that wait on real threads (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def fake_clock():
    """Controllable clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def result_cache(fake_clock):
    """Result cache with 5 minute TTL driven by the fake clock."""
    return ResultCacheService(ttl_seconds=300, sweep_interval_seconds=600, clock=fake_clock)


@pytest.fixture
def sample_resume():
    """The reference resume used across extraction and API tests."""
    return SAMPLE_RESUME
