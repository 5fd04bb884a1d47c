"""Calendar inspection of an Instant.

Every function reads the wall-clock date of the instant in its own zone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from datewise._internal import calendar as _calendar

if TYPE_CHECKING:
    from datewise.core.instant import Instant


@dataclass(frozen=True)
class DateInfo:
    """Aggregated calendar facts about an instant.

    Attributes:
        week_number: ISO 8601 week number (1-53).
        quarter: Quarter of the year (1-4).
        day_of_year: Day of the year (1-366).
        is_weekend: True on Saturday and Sunday.
        is_leap_year: True when the year has 366 days.
        unix: Unix timestamp in whole seconds.
    """

    week_number: int
    quarter: int
    day_of_year: int
    is_weekend: bool
    is_leap_year: bool
    unix: int


def week_number(instant: Instant) -> int:
    """Return the ISO 8601 week number.

    Early January dates can belong to the previous year's last week and
    late December dates to week 1 of the following year.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> week_number(Instant(2026, 2, 9))
        7
        >>> week_number(Instant(2027, 1, 1))
        53
    """
    return _calendar.iso_week(instant.year, instant.month, instant.day)[1]


def quarter(instant: Instant) -> int:
    return _calendar.quarter_of(instant.month)


def day_of_year(instant: Instant) -> int:
    return _calendar.day_of_year(instant.year, instant.month, instant.day)


def is_weekend(instant: Instant) -> bool:
    return instant.weekday.is_weekend


def is_leap_year(instant: Instant) -> bool:
    return _calendar.is_leap_year(instant.year)


def info(instant: Instant) -> DateInfo:
    """Collect every inspection result into one DateInfo.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> info(Instant(2024, 12, 31)).day_of_year
        366
    """
    return DateInfo(
        week_number=week_number(instant),
        quarter=quarter(instant),
        day_of_year=day_of_year(instant),
        is_weekend=is_weekend(instant),
        is_leap_year=is_leap_year(instant),
        unix=instant.unix(),
    )


__all__ = [
    "DateInfo",
    "week_number",
    "quarter",
    "day_of_year",
    "is_weekend",
    "is_leap_year",
    "info",
]
