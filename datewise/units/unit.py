"""Unit enumeration for calendar arithmetic.

This module provides the Unit enum accepted by add/subtract and by the
start_of/end_of boundary operations.
"""

from __future__ import annotations

from enum import Enum

from datewise._internal.constants import (
    DAYS_PER_WEEK,
    MONTHS_PER_QUARTER,
    MONTHS_PER_YEAR,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class Unit(Enum):
    """Granularities for temporal arithmetic.

    Members are declared from smallest to largest. QUARTERS is not a
    magnitude of its own: it is exactly three MONTHS.

    SECONDS, MINUTES and HOURS have a fixed physical length. DAYS and
    WEEKS step the calendar date and keep the wall-clock time, so across
    a DST change a day can last 23 or 25 hours. MONTHS, QUARTERS and
    YEARS vary in length and use month-end clamping.

    Examples:
        >>> Unit.HOURS.nanoseconds
        3600000000000

        >>> Unit.QUARTERS.months
        3

        >>> Unit.DAYS.nanoseconds is None
        True

        >>> Unit.from_name("Weeks")
        <Unit.WEEKS: 'weeks'>
    """

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"

    @property
    def is_fixed(self) -> bool:
        """True for units with a fixed physical length."""
        return self in (Unit.SECONDS, Unit.MINUTES, Unit.HOURS)

    @property
    def is_calendar_day(self) -> bool:
        """True for units that step whole calendar dates."""
        return self in (Unit.DAYS, Unit.WEEKS)

    @property
    def is_month_based(self) -> bool:
        """True for units resolved through month arithmetic."""
        return self in (Unit.MONTHS, Unit.QUARTERS, Unit.YEARS)

    @property
    def nanoseconds(self) -> int | None:
        """Physical length of one unit, or None for calendar units."""
        return _FIXED_NANOS.get(self)

    @property
    def days(self) -> int | None:
        """Calendar days in one unit, or None outside DAYS/WEEKS."""
        return _CALENDAR_DAYS.get(self)

    @property
    def months(self) -> int | None:
        """Months in one unit, or None outside month-based units."""
        return _MONTH_MULTIPLES.get(self)

    @classmethod
    def from_name(cls, name: str) -> Unit:
        """Look up a unit by its singular or plural name.

        Matching is case-insensitive and ignores surrounding whitespace.

        Args:
            name: A name such as "day", "Days" or "QUARTER".

        Returns:
            The matching Unit.

        Raises:
            ValueError: If the name is not a known unit.
        """
        key = name.strip().lower()
        if not key.endswith("s"):
            key += "s"
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown unit {name!r}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return _ORDER.index(self) < _ORDER.index(other)


_ORDER = list(Unit)

_FIXED_NANOS: dict[Unit, int] = {
    Unit.SECONDS: NANOS_PER_SECOND,
    Unit.MINUTES: NANOS_PER_MINUTE,
    Unit.HOURS: NANOS_PER_HOUR,
}

_CALENDAR_DAYS: dict[Unit, int] = {
    Unit.DAYS: 1,
    Unit.WEEKS: DAYS_PER_WEEK,
}

_MONTH_MULTIPLES: dict[Unit, int] = {
    Unit.MONTHS: 1,
    Unit.QUARTERS: MONTHS_PER_QUARTER,
    Unit.YEARS: MONTHS_PER_YEAR,
}


__all__ = ["Unit"]
