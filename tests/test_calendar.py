"""Tests for the internal calendar primitives."""

from __future__ import annotations

import datetime

import pytest

from datewise._internal.calendar import (
    day_of_year,
    days_in_month,
    days_in_year,
    floor_month_shift,
    is_leap_year,
    iso_week,
    iso_weekday,
    last_day_of_month,
    ordinal_to_ymd,
    quarter_of,
    ymd_to_ordinal,
)


class TestLeapYear:
    """Tests for is_leap_year."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2000, True),
            (1900, False),
            (2100, False),
            (2024, True),
            (2026, False),
            (1600, True),
            (4, True),
            (1, False),
        ],
    )
    def test_gregorian_rules(self, year, expected):
        """Century years are leap only when divisible by 400."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self):
        assert days_in_year(2024) == 366
        assert days_in_year(2026) == 365


class TestDaysInMonth:
    """Tests for days_in_month."""

    @pytest.mark.parametrize(
        "year,month,expected",
        [
            (2026, 1, 31),
            (2026, 2, 28),
            (2024, 2, 29),
            (1900, 2, 28),
            (2000, 2, 29),
            (2026, 4, 30),
            (2026, 12, 31),
        ],
    )
    def test_lengths(self, year, month, expected):
        assert days_in_month(year, month) == expected

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month_raises(self, month):
        with pytest.raises(ValueError):
            days_in_month(2026, month)


class TestLastDayOfMonth:
    """Tests for last_day_of_month."""

    def test_february_leap(self):
        assert last_day_of_month(2024, 2) == (2024, 2, 29)

    def test_february_common(self):
        assert last_day_of_month(2026, 2) == (2026, 2, 28)

    def test_december_stays_in_year(self):
        """December goes through January of the next year and back."""
        assert last_day_of_month(2026, 12) == (2026, 12, 31)

    def test_thirty_day_month(self):
        assert last_day_of_month(2026, 6) == (2026, 6, 30)


class TestMonthShift:
    """Tests for floor_month_shift."""

    @pytest.mark.parametrize(
        "year,month,delta,expected",
        [
            (2026, 1, 0, (2026, 1)),
            (2026, 1, -1, (2025, 12)),
            (2026, 12, 1, (2027, 1)),
            (2026, 11, 14, (2028, 1)),
            (2026, 3, -27, (2023, 12)),
            (2026, 6, 24, (2028, 6)),
        ],
    )
    def test_shift(self, year, month, delta, expected):
        assert floor_month_shift(year, month, delta) == expected


class TestOrdinals:
    """Tests for ymd_to_ordinal and ordinal_to_ymd."""

    @pytest.mark.parametrize(
        "ymd",
        [
            (1, 1, 1),
            (1970, 1, 1),
            (2000, 2, 29),
            (2000, 12, 31),
            (2024, 12, 31),
            (2026, 2, 9),
            (9999, 12, 31),
        ],
    )
    def test_matches_stdlib(self, ymd):
        """Ordinals agree with datetime.date.toordinal."""
        expected = datetime.date(*ymd).toordinal()
        assert ymd_to_ordinal(*ymd) == expected
        assert ordinal_to_ymd(expected) == ymd

    def test_ordinal_below_one_raises(self):
        with pytest.raises(ValueError):
            ordinal_to_ymd(0)


class TestWeekAndYearPosition:
    """Tests for weekday, ISO week, day-of-year and quarter helpers."""

    def test_iso_weekday(self):
        assert iso_weekday(2026, 2, 9) == 1  # Monday
        assert iso_weekday(2026, 2, 15) == 7  # Sunday
        assert iso_weekday(1, 1, 1) == 1

    @pytest.mark.parametrize(
        "ymd,expected",
        [
            ((2026, 1, 1), (2026, 1)),
            ((2026, 2, 9), (2026, 7)),
            ((2023, 1, 1), (2022, 52)),
            ((2024, 12, 30), (2025, 1)),
            ((2020, 12, 31), (2020, 53)),
            ((2021, 1, 3), (2020, 53)),
            ((2027, 1, 1), (2026, 53)),
        ],
    )
    def test_iso_week(self, ymd, expected):
        assert iso_week(*ymd) == expected
        assert iso_week(*ymd) == tuple(datetime.date(*ymd).isocalendar())[:2]

    def test_day_of_year(self):
        assert day_of_year(2026, 1, 1) == 1
        assert day_of_year(2026, 12, 31) == 365
        assert day_of_year(2024, 12, 31) == 366
        assert day_of_year(2024, 3, 1) == 61

    @pytest.mark.parametrize(
        "month,expected",
        [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4), (12, 4)],
    )
    def test_quarter_of(self, month, expected):
        assert quarter_of(month) == expected
