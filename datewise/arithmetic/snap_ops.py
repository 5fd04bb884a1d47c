"""Period boundaries and weekday search.

start_of and end_of snap an Instant to the first or last representable
moment of its ISO week, month, quarter or year. next_weekday and
prev_weekday step to the nearest other occurrence of a weekday.

All four keep the zone and the language of the input. The boundary
functions return the input unchanged for units without a boundary
(SECONDS through DAYS).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewise._internal.calendar import last_day_of_month, quarter_of
from datewise._internal.constants import (
    DAYS_PER_WEEK,
    MAX_NANOSECOND,
    MONTHS_PER_QUARTER,
    QUARTER_START_MONTHS,
)
from datewise.arithmetic.ops import add_days
from datewise.units.unit import Unit
from datewise.units.weekday import Weekday

if TYPE_CHECKING:
    from datewise.core.instant import Instant


def _midnight(instant: Instant, year: int, month: int, day: int) -> Instant:
    from datewise.core.instant import Instant

    return Instant._from_wall(
        year, month, day, 0, 0, 0, 0, instant.timezone, instant.lang
    )


def _last_moment(instant: Instant, year: int, month: int, day: int) -> Instant:
    from datewise.core.instant import Instant

    return Instant._from_wall(
        year, month, day, 23, 59, 59, MAX_NANOSECOND, instant.timezone, instant.lang
    )


def start_of(instant: Instant, unit: Unit) -> Instant:
    """Snap to the first moment of the enclosing period.

    Args:
        instant: The instant to snap.
        unit: WEEKS (ISO week, Monday), MONTHS, QUARTERS or YEARS.

    Returns:
        The period's first day at 00:00:00.000000000 in the same zone, or
        the input unchanged for any other unit.

    Raises:
        TypeError: If unit is not a Unit.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> start_of(Instant(2026, 2, 11, 15, 30), Unit.WEEKS)
        Instant(2026, 2, 9, 0, 0, 0, nanosecond=0, timezone='UTC')

        >>> start_of(Instant(2026, 8, 20), Unit.QUARTERS)
        Instant(2026, 7, 1, 0, 0, 0, nanosecond=0, timezone='UTC')
    """
    if not isinstance(unit, Unit):
        raise TypeError(f"unit must be a Unit, not {type(unit).__name__}")

    if unit is Unit.WEEKS:
        monday = add_days(instant, -(instant.weekday - 1))
        return _midnight(instant, monday.year, monday.month, monday.day)
    elif unit is Unit.MONTHS:
        return _midnight(instant, instant.year, instant.month, 1)
    elif unit is Unit.QUARTERS:
        first_month = QUARTER_START_MONTHS[quarter_of(instant.month)]
        return _midnight(instant, instant.year, first_month, 1)
    elif unit is Unit.YEARS:
        return _midnight(instant, instant.year, 1, 1)
    return instant


def end_of(instant: Instant, unit: Unit) -> Instant:
    """Snap to the last moment of the enclosing period.

    Args:
        instant: The instant to snap.
        unit: WEEKS (ISO week, Sunday), MONTHS, QUARTERS or YEARS.

    Returns:
        The period's last day at 23:59:59.999999999 in the same zone, or
        the input unchanged for any other unit.

    Raises:
        TypeError: If unit is not a Unit.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> end_of(Instant(2026, 2, 9), Unit.MONTHS)
        Instant(2026, 2, 28, 23, 59, 59, nanosecond=999999999, timezone='UTC')
    """
    if not isinstance(unit, Unit):
        raise TypeError(f"unit must be a Unit, not {type(unit).__name__}")

    if unit is Unit.WEEKS:
        sunday = add_days(instant, DAYS_PER_WEEK - instant.weekday)
        return _last_moment(instant, sunday.year, sunday.month, sunday.day)
    elif unit is Unit.MONTHS:
        return _last_moment(instant, *last_day_of_month(instant.year, instant.month))
    elif unit is Unit.QUARTERS:
        last_month = QUARTER_START_MONTHS[quarter_of(instant.month)] + MONTHS_PER_QUARTER - 1
        return _last_moment(instant, *last_day_of_month(instant.year, last_month))
    elif unit is Unit.YEARS:
        return _last_moment(instant, instant.year, 12, 31)
    return instant


def next_weekday(instant: Instant, weekday: Weekday) -> Instant:
    """Return the next occurrence of a weekday, strictly after today.

    When the instant already falls on ``weekday`` the result is one week
    later. The time of day is kept.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> next_weekday(Instant(2026, 2, 9, 15, 30), Weekday.MONDAY)
        Instant(2026, 2, 16, 15, 30, 0, nanosecond=0, timezone='UTC')
    """
    target = Weekday(weekday)
    days_ahead = (target - instant.weekday) % DAYS_PER_WEEK
    if days_ahead == 0:
        days_ahead = DAYS_PER_WEEK
    return add_days(instant, days_ahead)


def prev_weekday(instant: Instant, weekday: Weekday) -> Instant:
    """Return the previous occurrence of a weekday, strictly before today."""
    target = Weekday(weekday)
    days_back = (instant.weekday - target) % DAYS_PER_WEEK
    if days_back == 0:
        days_back = DAYS_PER_WEEK
    return add_days(instant, -days_back)


__all__ = ["start_of", "end_of", "next_weekday", "prev_weekday"]
