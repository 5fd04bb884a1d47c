"""Weekday enumeration using ISO 8601 numbering."""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, Monday=1 through Sunday=7.

    Examples:
        >>> Weekday.SUNDAY.value
        7
        >>> Weekday.SATURDAY.is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def is_weekend(self) -> bool:
        """True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY


__all__ = ["Weekday"]
