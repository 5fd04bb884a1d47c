"""Calendar arithmetic on Instants.

This module provides add and subtract, the canonical implementation of
unit arithmetic. ``Instant.add`` and ``Instant.subtract`` delegate here.

Each unit family moves along a different axis:
    - SECONDS, MINUTES, HOURS: physical time on the UTC timeline
    - DAYS, WEEKS: calendar dates, keeping the wall-clock time
    - MONTHS, QUARTERS, YEARS: calendar months, with month-end clamping

Clamping behavior:
    When a month step lands on a day the target month does not have, the
    day is clamped to the last day of that month.

Examples:
    Instant(2026, 1, 31) + 1 MONTHS -> Instant(2026, 2, 28)
    Instant(2024, 1, 31) + 1 MONTHS -> Instant(2024, 2, 29)  # leap year
    Instant(2026, 5, 31) + 1 MONTHS -> Instant(2026, 6, 30)
    Instant(2024, 2, 29) + 1 YEARS  -> Instant(2025, 2, 28)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewise._internal.calendar import (
    days_in_month,
    floor_month_shift,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datewise._internal.constants import MAX_YEAR, MIN_YEAR
from datewise.errors import DateOverflowError
from datewise.units.unit import Unit

if TYPE_CHECKING:
    from datewise.core.instant import Instant


def add(instant: Instant, value: int, unit: Unit) -> Instant:
    """Add a signed count of a unit to an Instant.

    The zone, the language and (except for fixed units) the wall-clock
    time of day are carried through to the result.

    Args:
        instant: The base instant.
        value: How many units to add; negative values move backwards.
        unit: The unit to count in.

    Returns:
        A new Instant. Adding zero returns an equal Instant.

    Raises:
        TypeError: If value is not an int or unit is not a Unit.
        DateOverflowError: If the result falls outside years 1-9999.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> add(Instant(2026, 1, 31, 9, 30), 1, Unit.MONTHS)
        Instant(2026, 2, 28, 9, 30, 0, nanosecond=0, timezone='UTC')

        >>> add(Instant(2026, 2, 9), -2, Unit.WEEKS)
        Instant(2026, 1, 26, 0, 0, 0, nanosecond=0, timezone='UTC')
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, not {type(value).__name__}")
    if not isinstance(unit, Unit):
        raise TypeError(f"unit must be a Unit, not {type(unit).__name__}")

    if value == 0:
        return instant

    if unit.is_fixed:
        return _add_fixed(instant, value * unit.nanoseconds)
    elif unit.is_calendar_day:
        return add_days(instant, value * unit.days)
    elif unit.is_month_based:
        return add_months(instant, value * unit.months)
    else:
        raise ValueError(f"unsupported unit {unit!r}")


def subtract(instant: Instant, value: int, unit: Unit) -> Instant:
    """Subtract a signed count of a unit from an Instant.

    Equivalent to ``add(instant, -value, unit)``.

    Raises:
        TypeError: If value is not an int or unit is not a Unit.
        DateOverflowError: If the result falls outside years 1-9999.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, not {type(value).__name__}")
    return add(instant, -value, unit)


def _add_fixed(instant: Instant, nanos: int) -> Instant:
    from datewise.core.instant import Instant

    return Instant._from_unix_nanos(
        instant.unix_nanos() + nanos, instant.timezone, instant.lang
    )


def add_days(instant: Instant, days: int) -> Instant:
    """Step the wall-clock date by a number of calendar days.

    The time of day is kept and the result is re-localized in the same
    zone, so across a DST change the elapsed physical time is 23 or 25
    hours rather than 24.

    Raises:
        DateOverflowError: If the result falls outside years 1-9999.
    """
    from datewise.core.instant import Instant

    ordinal = ymd_to_ordinal(instant.year, instant.month, instant.day) + days
    try:
        year, month, day = ordinal_to_ymd(ordinal)
    except ValueError:
        raise DateOverflowError(
            f"{instant} {days:+d} days is before year {MIN_YEAR}"
        ) from None
    if year > MAX_YEAR:
        raise DateOverflowError(f"{instant} {days:+d} days is after year {MAX_YEAR}")

    return Instant._from_wall(
        year, month, day,
        instant.hour, instant.minute, instant.second,
        instant.nanosecond, instant.timezone, instant.lang,
    )


def add_months(instant: Instant, months: int) -> Instant:
    """Step the wall-clock date by a number of calendar months.

    The day is clamped to the length of the target month; the original
    day is not remembered, so ``Jan 31 + 1 month - 1 month`` is Jan 28.

    Raises:
        DateOverflowError: If the result falls outside years 1-9999.
    """
    from datewise.core.instant import Instant

    year, month = floor_month_shift(instant.year, instant.month, months)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise DateOverflowError(
            f"{instant} {months:+d} months leaves years {MIN_YEAR}-{MAX_YEAR}"
        )

    day = min(instant.day, days_in_month(year, month))

    return Instant._from_wall(
        year, month, day,
        instant.hour, instant.minute, instant.second,
        instant.nanosecond, instant.timezone, instant.lang,
    )


__all__ = ["add", "subtract", "add_days", "add_months"]
