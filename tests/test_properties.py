"""Hypothesis property-based tests.

Properties that must hold for all valid inputs, verified by random generation.
"""

from __future__ import annotations

import calendar

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from datewise import Instant, Unit, Weekday, diff

from conftest import BERLIN, NEW_YORK


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_zones = st.sampled_from(["UTC", BERLIN, NEW_YORK, "Asia/Tokyo"])


@st.composite
def _dates(draw):
    year = draw(st.integers(min_value=1990, max_value=2040))
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=31))
    assume(day <= calendar.monthrange(year, month)[1])
    return year, month, day


_instants = st.builds(
    lambda ymd, h, mi, s, tz: Instant(*ymd, h, mi, s, timezone=tz),
    _dates(),
    st.integers(min_value=0, max_value=23),
    st.integers(min_value=0, max_value=59),
    st.integers(min_value=0, max_value=59),
    _zones,
)

_midnights = st.builds(lambda ymd: Instant(*ymd), _dates())

_amounts = st.integers(min_value=-500, max_value=500)
_units = st.sampled_from(list(Unit))
_period_units = st.sampled_from([Unit.WEEKS, Unit.MONTHS, Unit.QUARTERS, Unit.YEARS])
_weekdays = st.sampled_from(list(Weekday))


def _local_date(instant):
    return instant.to_datetime().date()


# ---------------------------------------------------------------------------
# Property: add / subtract
# ---------------------------------------------------------------------------
class TestAddSubtract:
    """Algebraic facts about unit arithmetic."""

    @given(i=_instants, unit=_units)
    @settings(max_examples=50)
    def test_add_zero_is_identity(self, i, unit):
        assert i.add(0, unit) == i
        assert i.add(0, unit).zone_name == i.zone_name

    @given(i=_instants, n=_amounts, unit=_units)
    @settings(max_examples=50)
    def test_subtract_is_negative_add(self, i, n, unit):
        assert i.subtract(n, unit) == i.add(-n, unit)

    @given(i=_instants, n=_amounts)
    @settings(max_examples=50)
    def test_fixed_units_are_physical(self, i, n):
        moved = i.add(n, Unit.HOURS)
        assert moved.unix_nanos() - i.unix_nanos() == n * Unit.HOURS.nanoseconds

    @given(i=_instants, n=_amounts)
    @settings(max_examples=50)
    def test_month_add_clamps_day(self, i, n):
        moved = i.add(n, Unit.MONTHS)
        last = calendar.monthrange(moved.year, moved.month)[1]
        assert moved.day == min(i.day, last)
        assert (moved.year * 12 + moved.month) - (i.year * 12 + i.month) == n

    @given(i=_instants, n=_amounts)
    @settings(max_examples=50)
    def test_day_add_moves_calendar_date(self, i, n):
        moved = i.add(n, Unit.DAYS)
        assert (_local_date(moved) - _local_date(i)).days == n


# ---------------------------------------------------------------------------
# Property: Duration antisymmetry
# ---------------------------------------------------------------------------
class TestDurationAntisymmetry:
    """Swapping the endpoints negates every measurement."""

    @given(a=_instants, b=_instants)
    @settings(max_examples=50)
    def test_integer_measures(self, a, b):
        forward = diff(a, b)
        backward = diff(b, a)
        assert forward.seconds() == -backward.seconds()
        assert forward.hours() == -backward.hours()
        assert forward.days() == -backward.days()
        assert forward.months() == -backward.months()
        assert forward.years() == -backward.years()

    @given(a=_instants, b=_instants)
    @settings(max_examples=50)
    def test_fractional_months(self, a, b):
        assert diff(a, b).months_float() == -diff(b, a).months_float()

    @given(a=_midnights, b=_midnights)
    @settings(max_examples=100)
    def test_fractional_months_extend_whole_months(self, a, b):
        """For whole dates the fraction never reaches or undercuts a month."""
        d = diff(a, b) if a <= b else diff(b, a)
        assert d.months() <= d.months_float() < d.months() + 1

    @given(a=_instants, b=_instants)
    @settings(max_examples=50)
    def test_sign_follows_order(self, a, b):
        d = diff(a, b)
        assert d.is_negative() == (b < a)
        assert (d.seconds() >= 0) == (not d.is_negative())


# ---------------------------------------------------------------------------
# Property: period boundaries
# ---------------------------------------------------------------------------
class TestBoundaries:
    """start_of and end_of bracket the instant."""

    @given(i=_instants, unit=_period_units)
    @settings(max_examples=50)
    def test_brackets_instant(self, i, unit):
        assert i.start_of(unit) <= i <= i.end_of(unit)

    @given(i=_instants, unit=_period_units)
    @settings(max_examples=50)
    def test_idempotent(self, i, unit):
        start = i.start_of(unit)
        assert start.start_of(unit) == start
        assert i.end_of(unit).start_of(unit) == start

    @given(i=_instants, unit=_period_units)
    @settings(max_examples=50)
    def test_keeps_zone(self, i, unit):
        assert i.start_of(unit).zone_name == i.zone_name
        assert i.end_of(unit).zone_name == i.zone_name


# ---------------------------------------------------------------------------
# Property: weekday search
# ---------------------------------------------------------------------------
class TestWeekdaySearch:
    """next_weekday and prev_weekday land within one week, never today."""

    @given(i=_instants, target=_weekdays)
    @settings(max_examples=50)
    def test_next(self, i, target):
        found = i.next_weekday(target)
        assert found.weekday is target
        assert 1 <= (_local_date(found) - _local_date(i)).days <= 7

    @given(i=_instants, target=_weekdays)
    @settings(max_examples=50)
    def test_prev(self, i, target):
        found = i.prev_weekday(target)
        assert found.weekday is target
        assert 1 <= (_local_date(i) - _local_date(found)).days <= 7
