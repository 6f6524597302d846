"""
Shared pytest fixtures for the crocodile load test suite.

Fixtures hand every test a fresh in-memory crocodile API, an empty check
tally, and a think-time stand-in that never sleeps, so the journey can be
exercised end to end in milliseconds.

Key Concepts Demonstrated:
- Function-scoped fixtures for test isolation
- Test doubles that follow the real client's protocol
- Replacing wall-clock waits with counters
"""

from __future__ import annotations

# Locust monkey-patches ssl on import; it must load before requests does.
import locust  # noqa: F401
import pytest

from shared.test_helpers import FakeCrocodileApi
from tests.performance.checks import CheckStats


@pytest.fixture
def crocodile_api() -> FakeCrocodileApi:
    """Provide a fresh, empty in-memory crocodile API."""
    return FakeCrocodileApi()


@pytest.fixture
def checks() -> CheckStats:
    """Provide an empty check tally."""
    return CheckStats()


@pytest.fixture
def no_pause():
    """
    Provide a think-time stand-in that counts pauses instead of sleeping.

    Returns:
        A callable with a ``count`` attribute.
    """

    def pause() -> None:
        pause.count += 1

    pause.count = 0
    return pause
