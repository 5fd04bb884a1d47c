"""Clocks: the source of "now".

Code that needs the current time takes a Clock instead of reading the
system clock, so tests can substitute a FixedClock.

Examples:
    >>> from datewise.core.instant import Instant
    >>> clock = FixedClock(Instant(2026, 2, 9, 12, 0, 0))
    >>> clock.now()
    Instant(2026, 2, 9, 12, 0, 0, nanosecond=0, timezone='UTC')
"""

from __future__ import annotations

import datetime as _datetime
from typing import Protocol, runtime_checkable

from datewise.core.instant import Instant
from datewise.units.timezone import resolve_timezone


@runtime_checkable
class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> Instant:
        """Return the current moment."""
        ...

    def from_datetime(self, dt: _datetime.datetime) -> Instant:
        """Wrap a ``datetime.datetime`` as an Instant."""
        ...


class SystemClock:
    """Clock backed by the host's system time.

    Args:
        timezone: Zone of the instants returned by now(). None means the
            host's local zone.
    """

    __slots__ = ("_timezone",)

    def __init__(self, timezone: str | _datetime.tzinfo | None = None) -> None:
        self._timezone = None if timezone is None else resolve_timezone(timezone)

    def now(self) -> Instant:
        return Instant.now(self._timezone)

    def from_datetime(self, dt: _datetime.datetime) -> Instant:
        return Instant.from_datetime(dt)

    def __repr__(self) -> str:
        return f"SystemClock(timezone={self._timezone!r})"


class FixedClock:
    """Clock that always returns the same moment.

    Args:
        moment: An Instant, or a ``datetime.datetime`` (naive values are
            taken to be UTC).

    Raises:
        TypeError: If moment is neither an Instant nor a datetime.
    """

    __slots__ = ("_moment",)

    def __init__(self, moment: Instant | _datetime.datetime) -> None:
        if isinstance(moment, _datetime.datetime):
            moment = Instant.from_datetime(moment)
        elif not isinstance(moment, Instant):
            raise TypeError(
                f"moment must be an Instant or datetime, not {type(moment).__name__}"
            )
        self._moment = moment

    def now(self) -> Instant:
        return self._moment

    def from_datetime(self, dt: _datetime.datetime) -> Instant:
        return Instant.from_datetime(dt)

    def __repr__(self) -> str:
        return f"FixedClock({self._moment!r})"


__all__ = ["Clock", "SystemClock", "FixedClock"]
