"""Validation utilities for Datewise.

This module provides the range checks applied when an Instant is built
from components.

This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.constants import MAX_NANOSECOND, MAX_YEAR, MIN_YEAR
from datewise.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from datewise._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate time-of-day components.

    Raises:
        ValidationError: If any component is out of range.
    """
    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("nanosecond", nanosecond, MAX_NANOSECOND),
    ):
        if value < 0 or value > upper:
            raise ValidationError(
                f"{name} must be between 0 and {upper}, got {value}"
            )


def validate_components(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
) -> None:
    """Validate a full set of wall-clock components.

    Raises:
        ValidationError: If any component is not an integer or out of range.
    """
    for name, value in (
        ("year", year),
        ("month", month),
        ("day", day),
        ("hour", hour),
        ("minute", minute),
        ("second", second),
        ("nanosecond", nanosecond),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"{name} must be an integer, got {type(value).__name__}"
            )

    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    validate_time(hour, minute, second, nanosecond)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
    "validate_components",
]
