"""Duration class: the elapsed amount between two Instants.

This module provides the Duration class and the diff() constructor. A
Duration keeps its two endpoints rather than a length, because calendar
units (days, months, years) can only be measured against the dates they
start from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datewise._internal.calendar import days_in_month, floor_month_shift, ymd_to_ordinal
from datewise._internal.constants import (
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from datewise.units.lang import Lang

if TYPE_CHECKING:
    from datewise.core.instant import Instant


def _truncate(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


class Duration:
    """The elapsed amount from ``start`` to ``end``.

    A Duration is positive when start precedes end and negative when the
    pair is inverted. Every extractor is antisymmetric: swapping the pair
    negates the result.

    Fixed units (seconds, minutes, hours) measure physical time. Calendar
    units (days, weeks, months, years) count calendar steps on the wall
    clock of the earlier instant's zone, so a day across a DST change is
    still one day.

    Integer extractors truncate toward zero.

    Attributes:
        start: The instant the duration is measured from.
        end: The instant the duration is measured to.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> d = diff(Instant(2026, 1, 1), Instant(2026, 11, 17))
        >>> d.months()
        10
        >>> d.human()
        '10 months, 16 days'
        >>> diff(Instant(2026, 1, 3), Instant(2026, 1, 1)).days()
        -2
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant, end: Instant) -> None:
        """Create a Duration from an ordered pair of instants.

        Raises:
            TypeError: If either endpoint is not an Instant.
        """
        from datewise.core.instant import Instant

        if not isinstance(start, Instant) or not isinstance(end, Instant):
            raise TypeError(
                "Duration endpoints must be Instants, got "
                f"{type(start).__name__} and {type(end).__name__}"
            )
        self._start = start
        self._end = end

    @property
    def start(self) -> Instant:
        return self._start

    @property
    def end(self) -> Instant:
        return self._end

    def is_negative(self) -> bool:
        """Return True when end precedes start."""
        return self._end < self._start

    def _ordered(self) -> tuple[Instant, Instant, int]:
        """Return (earlier, later, sign), with later expressed in earlier's zone."""
        if self.is_negative():
            earlier, later, sign = self._end, self._start, -1
        else:
            earlier, later, sign = self._start, self._end, 1
        return earlier, later.in_timezone(earlier.timezone), sign

    def _elapsed_nanos(self) -> int:
        return self._end.unix_nanos() - self._start.unix_nanos()

    # Fixed units

    def seconds(self) -> int:
        """Return the physical elapsed seconds, truncated toward zero."""
        return _truncate(self._elapsed_nanos(), NANOS_PER_SECOND)

    def minutes(self) -> int:
        """Return the physical elapsed minutes, truncated toward zero."""
        return _truncate(self._elapsed_nanos(), NANOS_PER_MINUTE)

    def hours(self) -> int:
        """Return the physical elapsed hours, truncated toward zero."""
        return _truncate(self._elapsed_nanos(), NANOS_PER_HOUR)

    # Calendar units

    def days(self) -> int:
        """Return the number of calendar-day steps between the endpoints.

        This is how many times the earlier instant has to be advanced by
        one calendar day before it is no longer before the later instant.
        Any part of a day counts as a step, and a day that lasts 23 or 25
        hours because of a DST change is still one step.

        Examples:
            >>> from datewise.core.instant import Instant
            >>> diff(Instant(2026, 1, 1), Instant(2026, 1, 3)).days()
            2
            >>> diff(Instant(2026, 1, 1), Instant(2026, 1, 3, 5)).days()
            3
        """
        earlier, later, sign = self._ordered()
        return sign * _calendar_days(earlier, later)

    def weeks(self) -> int:
        """Return ``days() / 7`` truncated toward zero."""
        return _truncate(self.days(), DAYS_PER_WEEK)

    def months(self) -> int:
        """Return the number of whole months between the endpoints.

        The year and month difference is reduced by one when the later
        day of month is strictly less than the earlier one, since that
        month has not completed yet. Times of day are not compared.

        Examples:
            >>> from datewise.core.instant import Instant
            >>> diff(Instant(2026, 1, 31), Instant(2026, 2, 28)).months()
            0
            >>> diff(Instant(2026, 1, 15), Instant(2026, 3, 15)).months()
            2
        """
        earlier, later, sign = self._ordered()
        return sign * _calendar_months(earlier, later)

    def years(self) -> int:
        """Return ``months() / 12`` truncated toward zero."""
        return _truncate(self.months(), MONTHS_PER_YEAR)

    def months_float(self) -> float:
        """Return the number of months including the partial month.

        The whole months are counted to the point where the next month
        completes. When the earlier day of month does not exist in a
        target month (Jan 31 in February) that point is the 1st of the
        month after, so a month that ends early is never counted as
        complete. What is left over is divided by the physical length of
        the month being filled: 16 days into February is a larger
        fraction than 16 days into January.

        Examples:
            >>> from datewise.core.instant import Instant
            >>> round(diff(Instant(2026, 1, 1), Instant(2026, 1, 16)).months_float(), 4)
            0.4839
            >>> round(diff(Instant(2026, 2, 1), Instant(2026, 2, 15)).months_float(), 4)
            0.5
            >>> round(diff(Instant(2026, 1, 31), Instant(2026, 2, 28)).months_float(), 4)
            0.9655
        """
        earlier, later, sign = self._ordered()
        whole = _calendar_months(earlier, later)
        # Times of day are ignored by the month count; never start past later
        while whole > 0 and _month_mark(earlier, whole) > later:
            whole -= 1

        base = _month_mark(earlier, whole)
        following = _month_mark(earlier, whole + 1)
        remaining_days = (later.unix_nanos() - base.unix_nanos()) / NANOS_PER_DAY
        month_days = (following.unix_nanos() - base.unix_nanos()) / NANOS_PER_DAY

        return sign * (whole + remaining_days / month_days)

    def years_float(self) -> float:
        """Return ``months_float() / 12``."""
        return self.months_float() / MONTHS_PER_YEAR

    # Rendering

    def human(self, lang: Lang | str | None = None) -> str:
        """Render the duration with its two largest non-zero components.

        The components are years and months (taken off the earlier instant
        one calendar step at a time), then days, hours, minutes and
        seconds split from the physical time that remains. Smaller
        components are dropped, not rounded into the shown ones.

        Args:
            lang: Language for the unit names. Defaults to the language
                of the start instant.

        Returns:
            A string such as "10 months, 16 days", "-2 days" or
            "0 seconds".

        Examples:
            >>> from datewise.core.instant import Instant
            >>> diff(Instant(2026, 1, 1), Instant(2026, 1, 3, 5)).human()
            '2 days, 5 hours'
            >>> diff(Instant(2026, 2, 1), Instant(2026, 1, 1)).human("de")
            '-1 Monat'
        """
        language = self._start.lang if lang is None else Lang.parse(lang)
        earlier, later, sign = self._ordered()

        parts = [
            (count, key)
            for count, key in _components(earlier, later)
            if count != 0
        ][:2]
        if not parts:
            return f"0 {language.duration_unit('second', plural=True)}"

        rendered = ", ".join(
            f"{count} {language.duration_unit(key, plural=count != 1)}"
            for count, key in parts
        )
        return f"-{rendered}" if sign < 0 else rendered

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Duration(start={self._start!r}, end={self._end!r})"

    def __str__(self) -> str:
        return self.human()


def _calendar_days(earlier: Instant, later: Instant) -> int:
    from datewise.arithmetic.ops import add_days

    steps = ymd_to_ordinal(later.year, later.month, later.day) - ymd_to_ordinal(
        earlier.year, earlier.month, earlier.day
    )
    # Gap normalization can push a stepped wall time past midnight
    while steps > 0 and add_days(earlier, steps - 1) >= later:
        steps -= 1
    if add_days(earlier, steps) < later:
        steps += 1
    return steps


def _calendar_months(earlier: Instant, later: Instant) -> int:
    months = (later.year - earlier.year) * MONTHS_PER_YEAR + (later.month - earlier.month)
    if later.day < earlier.day:
        months -= 1
    return months


def _month_mark(earlier: Instant, months: int) -> Instant:
    """Return the moment ``months`` whole months after ``earlier`` complete.

    Unlike add_months this does not clamp: a day of month missing from
    the target month rolls over to the 1st of the month after.
    """
    from datewise.core.instant import Instant

    year, month = floor_month_shift(earlier.year, earlier.month, months)
    day = earlier.day
    if day > days_in_month(year, month):
        year, month = floor_month_shift(year, month, 1)
        day = 1
    return Instant._from_wall(
        year, month, day,
        earlier.hour, earlier.minute, earlier.second, earlier.nanosecond,
        earlier.timezone, earlier.lang,
    )


def _components(earlier: Instant, later: Instant) -> list[tuple[int, str]]:
    """Split an ordered pair into (count, unit key) from years to seconds."""
    from datewise.arithmetic.ops import add_months

    months = _calendar_months(earlier, later)
    # The day comparison ignores the time of day; never step past later
    while months > 0 and add_months(earlier, months) > later:
        months -= 1

    years, months = divmod(months, MONTHS_PER_YEAR)
    cursor = add_months(earlier, years * MONTHS_PER_YEAR + months)

    remaining = later.unix_nanos() - cursor.unix_nanos()
    days, remaining = divmod(remaining, NANOS_PER_DAY)
    hours, remaining = divmod(remaining, NANOS_PER_HOUR)
    minutes, remaining = divmod(remaining, NANOS_PER_MINUTE)
    seconds = remaining // NANOS_PER_SECOND

    return [
        (years, "year"),
        (months, "month"),
        (days, "day"),
        (hours, "hour"),
        (minutes, "minute"),
        (seconds, "second"),
    ]


def diff(start: Instant, end: Instant) -> Duration:
    """Return the Duration from ``start`` to ``end``.

    Positive when start precedes end.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> diff(Instant(2026, 1, 1), Instant(2027, 3, 1)).human()
        '1 year, 2 months'
    """
    return Duration(start, end)


__all__ = ["Duration", "diff"]
