"""Calendar utilities for Datewise.

This module provides the pure integer functions every other part of the
library builds on: leap year logic, month lengths, proleptic Gregorian
ordinals and ISO 8601 week numbering.

Ordinal 1 = 0001-01-01 (a Monday).

This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    The checks run from the most specific rule to the least specific one,
    which is what makes century years come out right.

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2026)  # Not divisible by 4
        False
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month (28-31).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def floor_month_shift(year: int, month: int, delta: int) -> tuple[int, int]:
    """Shift a (year, month) pair by a signed number of months.

    The month index is made 0-based and split with floor division and
    floor modulo, so negative deltas and deltas larger than a year roll
    the year in both directions.

    Args:
        year: The starting year.
        month: The starting month (1-12).
        delta: Months to move (can be negative).

    Returns:
        Tuple of (year, month) with month in 1-12.

    Examples:
        >>> floor_month_shift(2026, 1, -1)
        (2025, 12)
        >>> floor_month_shift(2026, 11, 14)
        (2028, 1)
    """
    index = year * MONTHS_PER_YEAR + (month - 1) + delta
    return index // MONTHS_PER_YEAR, index % MONTHS_PER_YEAR + 1


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since 0001-01-01, plus one).

    Args:
        year: The year.
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (ordinal 1 = 0001-01-01) to year, month, day.

    Args:
        ordinal: The ordinal day number, at least 1.

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is below 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: 36524 days each (the last has one more)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def last_day_of_month(year: int, month: int) -> tuple[int, int, int]:
    """Return the last day of a month as (year, month, day).

    Computed as the first day of the following month minus one day, so
    December needs no special case: its "following month" is January of
    the next year and the subtraction walks back across the year boundary.

    Examples:
        >>> last_day_of_month(2024, 2)
        (2024, 2, 29)
        >>> last_day_of_month(2026, 12)
        (2026, 12, 31)
    """
    next_year, next_month = floor_month_shift(year, month, 1)
    return ordinal_to_ymd(ymd_to_ordinal(next_year, next_month, 1) - 1)


def iso_weekday(year: int, month: int, day: int) -> int:
    """Return the ISO weekday (Monday=1, Sunday=7)."""
    return (ymd_to_ordinal(year, month, day) - 1) % DAYS_PER_WEEK + 1


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the year (1-366)."""
    return _days_before_month(year, month) + day


def quarter_of(month: int) -> int:
    """Return the quarter (1-4) containing a month."""
    return (month - 1) // 3 + 1


def iso_weeks_in_year(year: int) -> int:
    """Return 53 for ISO long years, 52 otherwise.

    A year is long when it starts on a Thursday, or when it is a leap year
    starting on a Wednesday.
    """
    jan1 = iso_weekday(year, 1, 1)
    if jan1 == 4 or (jan1 == 3 and is_leap_year(year)):
        return 53
    return 52


def iso_week(year: int, month: int, day: int) -> tuple[int, int]:
    """Return the ISO 8601 (week-year, week number) of a date.

    Week 1 is the week containing the year's first Thursday; weeks run
    Monday to Sunday. Early January dates can belong to the last week of
    the previous year and late December dates to week 1 of the next.

    Examples:
        >>> iso_week(2026, 1, 1)   # Thursday
        (2026, 1)
        >>> iso_week(2023, 1, 1)   # Sunday
        (2022, 52)
        >>> iso_week(2024, 12, 30)  # Monday
        (2025, 1)
    """
    week = (day_of_year(year, month, day) - iso_weekday(year, month, day) + 10) // 7
    if week < 1:
        return (year - 1, iso_weeks_in_year(year - 1))
    if week > iso_weeks_in_year(year):
        return (year + 1, 1)
    return (year, week)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "floor_month_shift",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "last_day_of_month",
    "iso_weekday",
    "day_of_year",
    "quarter_of",
    "iso_weeks_in_year",
    "iso_week",
]
