"""Pytest configuration and fixtures for Datewise tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datewise can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datewise import FixedClock, Instant  # noqa: E402

BERLIN = "Europe/Berlin"
NEW_YORK = "America/New_York"


@pytest.fixture
def monday() -> Instant:
    """Reference Instant on a Monday (2026-02-09 15:30 UTC)."""
    return Instant(2026, 2, 9, 15, 30, 0)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at Monday 2026-02-09 15:30:45 UTC."""
    return FixedClock(Instant(2026, 2, 9, 15, 30, 45))


@pytest.fixture
def berlin_clock() -> FixedClock:
    """Clock frozen at 2026-02-01 00:30 in Berlin (still Jan 31 in UTC)."""
    return FixedClock(Instant(2026, 2, 1, 0, 30, 0, timezone=BERLIN))
