"""Tests for the Instant value type."""

from __future__ import annotations

import datetime
import zoneinfo

import pytest

from datewise import (
    DateOverflowError,
    Instant,
    InvalidTimezoneError,
    Lang,
    ValidationError,
    Weekday,
)

from conftest import BERLIN, NEW_YORK


# =============================================================================
# Construction Tests
# =============================================================================


class TestInstantConstruction:
    """Tests for Instant construction."""

    def test_defaults(self):
        """Time fields default to midnight in UTC with English names."""
        i = Instant(2026, 2, 9)
        assert (i.year, i.month, i.day) == (2026, 2, 9)
        assert (i.hour, i.minute, i.second, i.nanosecond) == (0, 0, 0, 0)
        assert i.zone_name == "UTC"
        assert i.lang is Lang.EN

    def test_all_components(self):
        i = Instant(2026, 2, 9, 14, 30, 45, nanosecond=123_456_789)
        assert i.hour == 14
        assert i.minute == 30
        assert i.second == 45
        assert i.nanosecond == 123_456_789

    def test_named_zone(self):
        i = Instant(2026, 6, 15, 12, timezone=BERLIN)
        assert i.zone_name == BERLIN
        assert i.utc_offset == datetime.timedelta(hours=2)

    def test_tzinfo_zone(self):
        i = Instant(2026, 6, 15, 12, timezone=zoneinfo.ZoneInfo(NEW_YORK))
        assert i.zone_name == NEW_YORK

    def test_lang_from_tag(self):
        assert Instant(2026, 1, 1, lang="de-AT").lang is Lang.DE

    @pytest.mark.parametrize(
        "args,kwargs",
        [
            ((2026, 13, 1), {}),
            ((2026, 0, 1), {}),
            ((2026, 2, 30), {}),
            ((2026, 1, 32), {}),
            ((2026, 1, 1, 24), {}),
            ((2026, 1, 1, 0, 60), {}),
            ((2026, 1, 1, 0, 0, 60), {}),
            ((2026, 1, 1), {"nanosecond": 1_000_000_000}),
            ((2026, 1, 1), {"nanosecond": -1}),
            ((0, 1, 1), {}),
            ((10000, 1, 1), {}),
        ],
    )
    def test_invalid_components_raise(self, args, kwargs):
        with pytest.raises(ValidationError):
            Instant(*args, **kwargs)

    def test_unknown_zone_raises(self):
        with pytest.raises(InvalidTimezoneError):
            Instant(2026, 1, 1, timezone="Mars/Olympus_Mons")

    def test_spring_forward_gap_moves_forward(self):
        """02:30 does not exist in Berlin on 2026-03-29; it becomes 03:30."""
        i = Instant(2026, 3, 29, 2, 30, timezone=BERLIN)
        assert (i.hour, i.minute) == (3, 30)
        assert i.utc_offset == datetime.timedelta(hours=2)

    def test_fall_back_takes_first_occurrence(self):
        """02:30 happens twice in Berlin on 2026-10-25; the first one wins."""
        i = Instant(2026, 10, 25, 2, 30, timezone=BERLIN)
        assert (i.hour, i.minute) == (2, 30)
        assert i.utc_offset == datetime.timedelta(hours=2)

    def test_slots_reject_attribute_assignment(self):
        i = Instant(2026, 1, 1)
        with pytest.raises(AttributeError):
            i.foo = 1


# =============================================================================
# Factory Method Tests
# =============================================================================


class TestInstantFactories:
    """Tests for Instant factory methods."""

    def test_from_unix_epoch(self):
        assert Instant.from_unix(0) == Instant(1970, 1, 1)

    def test_from_unix_negative(self):
        assert Instant.from_unix(-86400) == Instant(1969, 12, 31)

    def test_from_unix_in_zone(self):
        i = Instant.from_unix(0, timezone=BERLIN)
        assert (i.year, i.month, i.day, i.hour) == (1970, 1, 1, 1)

    def test_from_unix_nanos(self):
        i = Instant.from_unix_nanos(1_500_000_000)
        assert i.second == 1
        assert i.nanosecond == 500_000_000

    def test_from_unix_nanos_negative(self):
        i = Instant.from_unix_nanos(-1)
        assert (i.year, i.second, i.nanosecond) == (1969, 59, 999_999_999)

    def test_from_naive_datetime_is_utc(self):
        i = Instant.from_datetime(datetime.datetime(2026, 2, 9, 12, 30, 0, 250))
        assert i.zone_name == "UTC"
        assert i.nanosecond == 250_000

    def test_from_aware_datetime_keeps_zone(self):
        dt = datetime.datetime(2026, 2, 9, 12, tzinfo=zoneinfo.ZoneInfo(BERLIN))
        i = Instant.from_datetime(dt, lang=Lang.FR)
        assert i.zone_name == BERLIN
        assert i.hour == 12
        assert i.lang is Lang.FR

    def test_now_in_zone(self):
        i = Instant.now("UTC")
        assert i.zone_name == "UTC"
        assert i.year >= 2024


# =============================================================================
# Conversion Tests
# =============================================================================


class TestInstantConversions:
    """Tests for unix timestamps, zone conversion and replace."""

    def test_unix(self):
        assert Instant(2026, 2, 9).unix() == 1770595200

    def test_unix_nanos(self):
        i = Instant(1970, 1, 1, 0, 0, 1, nanosecond=5)
        assert i.unix_nanos() == 1_000_000_005

    def test_unix_independent_of_zone(self):
        berlin = Instant(2026, 2, 9, 1, timezone=BERLIN)
        assert berlin.unix() == Instant(2026, 2, 9).unix()

    def test_to_datetime(self):
        i = Instant(2026, 2, 9, 12, nanosecond=123_456_789, timezone=BERLIN)
        dt = i.to_datetime()
        assert dt.microsecond == 123_456
        assert dt.tzinfo == zoneinfo.ZoneInfo(BERLIN)

    def test_in_timezone_same_moment(self):
        utc = Instant(2026, 6, 15, 12, lang=Lang.DE)
        berlin = utc.in_timezone(BERLIN)
        assert berlin.hour == 14
        assert berlin == utc
        assert berlin.lang is Lang.DE

    def test_in_timezone_fixed_offset(self):
        i = Instant(2026, 6, 15, 12).in_timezone("+05:30")
        assert (i.hour, i.minute) == (17, 30)
        assert i.zone_name == "+05:30"

    @pytest.mark.parametrize("name", ["", "   ", "Not/AZone", "../etc/passwd"])
    def test_in_timezone_invalid(self, name):
        with pytest.raises(InvalidTimezoneError):
            Instant(2026, 1, 1).in_timezone(name)

    def test_in_timezone_overflow(self):
        with pytest.raises(DateOverflowError):
            Instant(9999, 12, 31, 23).in_timezone("+05:00")

    def test_replace(self):
        i = Instant(2026, 2, 9, 14, 30, timezone=BERLIN)
        r = i.replace(hour=9, minute=0)
        assert (r.hour, r.minute) == (9, 0)
        assert r.zone_name == BERLIN

    def test_replace_invalid(self):
        with pytest.raises(ValidationError):
            Instant(2026, 1, 31).replace(month=2)

    def test_with_lang(self):
        i = Instant(2026, 1, 1).with_lang("es")
        assert i.lang is Lang.ES


# =============================================================================
# Accessor and Comparison Tests
# =============================================================================


class TestInstantAccessors:
    """Tests for derived accessors."""

    def test_weekday(self, monday):
        assert monday.weekday is Weekday.MONDAY

    def test_weekday_is_local(self):
        """Late Sunday UTC is already Monday in Tokyo."""
        i = Instant(2026, 2, 8, 22, timezone="UTC").in_timezone("Asia/Tokyo")
        assert i.weekday is Weekday.MONDAY


class TestInstantComparison:
    """Tests for equality, ordering and hashing."""

    def test_equal_across_zones(self):
        a = Instant(2026, 6, 15, 12)
        b = Instant(2026, 6, 15, 14, timezone=BERLIN)
        assert a == b
        assert hash(a) == hash(b)

    def test_ordering(self):
        a = Instant(2026, 1, 1)
        b = Instant(2026, 1, 1, nanosecond=1)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b

    def test_not_equal_to_other_types(self):
        assert Instant(2026, 1, 1) != "2026-01-01"

    def test_ordering_with_other_types_raises(self):
        with pytest.raises(TypeError):
            Instant(2026, 1, 1) < 5


class TestInstantRepr:
    """Tests for repr and str."""

    def test_repr(self):
        i = Instant(2026, 2, 9, 12, 30, 0, timezone=BERLIN)
        assert repr(i) == (
            "Instant(2026, 2, 9, 12, 30, 0, nanosecond=0, timezone='Europe/Berlin')"
        )

    def test_str(self):
        assert str(Instant(2026, 2, 9, 8, 5, 3)) == "2026-02-09 08:05:03"
