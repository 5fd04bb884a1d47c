"""Tests for clocks."""

from __future__ import annotations

import datetime

import pytest

from datewise import Clock, FixedClock, Instant, SystemClock

from conftest import BERLIN


class TestFixedClock:
    """Tests for FixedClock."""

    def test_returns_configured_instant(self):
        moment = Instant(2026, 2, 9, 12, timezone=BERLIN)
        clock = FixedClock(moment)
        assert clock.now() == moment
        assert clock.now() == clock.now()

    def test_accepts_datetime(self):
        clock = FixedClock(datetime.datetime(2026, 2, 9, 12))
        assert clock.now() == Instant(2026, 2, 9, 12)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            FixedClock("2026-02-09")

    def test_from_datetime(self):
        clock = FixedClock(Instant(2000, 1, 1))
        assert clock.from_datetime(datetime.datetime(2026, 1, 1)) == Instant(2026, 1, 1)

    def test_is_a_clock(self):
        assert isinstance(FixedClock(Instant(2026, 1, 1)), Clock)


class TestSystemClock:
    """Tests for SystemClock."""

    def test_now_is_current(self):
        before = datetime.datetime.now(datetime.timezone.utc)
        now = SystemClock().now()
        after = datetime.datetime.now(datetime.timezone.utc)
        assert before.timestamp() - 1 <= now.unix() <= after.timestamp() + 1

    def test_zone(self):
        assert SystemClock(BERLIN).now().zone_name == BERLIN

    def test_is_a_clock(self):
        assert isinstance(SystemClock(), Clock)
