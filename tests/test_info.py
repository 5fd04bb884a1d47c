"""Tests for calendar inspection."""

from __future__ import annotations

import dataclasses

import pytest

from datewise import DateInfo, Instant

from conftest import BERLIN


class TestInspection:
    """Tests for week number, quarter, day of year and flags."""

    @pytest.mark.parametrize(
        "ymd,week",
        [
            ((2026, 1, 1), 1),
            ((2026, 2, 9), 7),
            ((2026, 12, 31), 53),
            ((2027, 1, 1), 53),
            ((2023, 1, 1), 52),
            ((2024, 12, 30), 1),
        ],
    )
    def test_week_number(self, ymd, week):
        assert Instant(*ymd).week_number() == week

    def test_quarter(self):
        assert Instant(2026, 2, 9).quarter() == 1
        assert Instant(2026, 11, 30).quarter() == 4

    def test_day_of_year(self):
        assert Instant(2026, 2, 9).day_of_year() == 40
        assert Instant(2024, 12, 31).day_of_year() == 366

    def test_is_weekend(self):
        assert not Instant(2026, 2, 9).is_weekend()
        assert Instant(2026, 2, 14).is_weekend()
        assert Instant(2026, 2, 15).is_weekend()

    def test_is_leap_year(self):
        assert Instant(2024, 6, 1).is_leap_year()
        assert not Instant(2026, 6, 1).is_leap_year()

    def test_uses_local_date(self):
        """Saturday 23:30 UTC is Sunday in Berlin."""
        i = Instant(2026, 2, 14, 23, 30).in_timezone(BERLIN)
        assert i.day_of_year() == 46
        assert i.is_weekend()


class TestDateInfo:
    """Tests for the aggregated record."""

    def test_info(self):
        info = Instant(2026, 2, 9).info()
        assert info == DateInfo(
            week_number=7,
            quarter=1,
            day_of_year=40,
            is_weekend=False,
            is_leap_year=False,
            unix=1770595200,
        )

    def test_frozen(self):
        info = Instant(2026, 2, 9).info()
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.quarter = 2
