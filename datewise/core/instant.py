"""Instant class: a zone-aware moment with nanosecond precision.

This module provides the Instant class, the single value type every
Datewise operation consumes and produces.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from datewise._internal.calendar import iso_weekday
from datewise._internal.constants import (
    DEFAULT_TIMEZONE,
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from datewise._internal.validation import validate_components
from datewise.errors import DateOverflowError, InvalidTimezoneError
from datewise.units.lang import Lang
from datewise.units.timezone import UTC, resolve_timezone, zone_name
from datewise.units.weekday import Weekday

if TYPE_CHECKING:
    from datewise.core.duration import Duration
    from datewise.core.info import DateInfo
    from datewise.format.presets import Format
    from datewise.units.unit import Unit

_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def _normalize(dt: _datetime.datetime) -> _datetime.datetime:
    """Round-trip an aware wall-clock datetime through UTC.

    Local times inside a spring-forward gap do not exist; the round trip
    moves them forward by the size of the gap (02:30 becomes 03:30).
    Ambiguous fall-back times keep fold=0, the first occurrence.
    """
    tz = dt.tzinfo
    return dt.astimezone(_datetime.timezone.utc).astimezone(tz)


class Instant:
    """An immutable moment in time with a zone and a language tag.

    Instant combines a wall-clock date and time, an IANA zone (or fixed
    offset) and nanosecond precision. The language tag does not take part
    in any calculation; it only selects the names used when rendering.

    Every operation returns a new Instant. Equality, ordering and hashing
    use the physical moment, so the same moment seen from two zones
    compares equal.

    Attributes:
        year: The year component (1-9999).
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The nanosecond within the second (0-999999999).
        timezone: The tzinfo the wall-clock fields are expressed in.
        lang: Language used by rendering.

    Examples:
        >>> i = Instant(2026, 1, 31, 12, 0, 0)
        >>> i.add(1, Unit.MONTHS)
        Instant(2026, 2, 28, 12, 0, 0, nanosecond=0, timezone='UTC')

        >>> berlin = Instant(2026, 3, 28, 12, timezone="Europe/Berlin")
        >>> berlin.add(1, Unit.DAYS).hour
        12
    """

    __slots__ = ("_dt", "_nanos", "_lang")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        timezone: str | _datetime.tzinfo | None = DEFAULT_TIMEZONE,
        lang: Lang | str = Lang.EN,
    ) -> None:
        """Create an Instant from wall-clock components in a zone.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999999999).
            timezone: Zone name, tzinfo, or None for UTC.
            lang: Language tag for rendering.

        Raises:
            ValidationError: If any component is out of range.
            InvalidTimezoneError: If the zone name cannot be resolved.
            DateOverflowError: If the moment falls outside the UTC range
                of years 1-9999 (0001-01-01 00:00 in a zone east of UTC).
        """
        validate_components(year, month, day, hour, minute, second, nanosecond)
        tz = resolve_timezone(timezone)

        try:
            self._dt: _datetime.datetime = _normalize(
                _datetime.datetime(year, month, day, hour, minute, second, tzinfo=tz)
            )
        except OverflowError as exc:
            raise DateOverflowError(
                f"{year:04d}-{month:02d}-{day:02d} cannot be expressed in UTC"
            ) from exc
        self._nanos: int = nanosecond
        self._lang: Lang = Lang.parse(lang)

    @classmethod
    def _from_internal(
        cls,
        dt: _datetime.datetime,
        nanos: int,
        lang: Lang,
    ) -> Instant:
        """Create an Instant from an aware, normalized, whole-second datetime.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._dt = dt
        instance._nanos = nanos
        instance._lang = lang
        return instance

    @classmethod
    def _from_wall(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanos: int,
        tz: _datetime.tzinfo,
        lang: Lang,
    ) -> Instant:
        """Build an Instant from already-valid wall-clock fields.

        Raises:
            DateOverflowError: If the fields fall outside years 1-9999.
        """
        try:
            dt = _normalize(
                _datetime.datetime(year, month, day, hour, minute, second, tzinfo=tz)
            )
        except (OverflowError, ValueError) as exc:
            raise DateOverflowError(
                f"{year:04d}-{month:02d}-{day:02d} is outside the representable range"
            ) from exc
        return cls._from_internal(dt, nanos, lang)

    @classmethod
    def _from_unix_nanos(
        cls,
        nanos: int,
        tz: _datetime.tzinfo,
        lang: Lang,
    ) -> Instant:
        """Build an Instant from nanoseconds since the Unix epoch.

        Raises:
            DateOverflowError: If the moment is outside years 1-9999.
        """
        seconds, sub = divmod(nanos, NANOS_PER_SECOND)
        try:
            dt = (_EPOCH + _datetime.timedelta(seconds=seconds)).astimezone(tz)
        except (OverflowError, ValueError) as exc:
            raise DateOverflowError(
                f"unix time {seconds}s is outside the representable range"
            ) from exc
        return cls._from_internal(dt, sub, lang)

    @classmethod
    def from_datetime(
        cls,
        dt: _datetime.datetime,
        *,
        lang: Lang | str = Lang.EN,
    ) -> Instant:
        """Wrap a ``datetime.datetime``.

        Naive datetimes are taken to be UTC. Microseconds become
        nanoseconds.

        Examples:
            >>> import datetime
            >>> Instant.from_datetime(datetime.datetime(2026, 2, 9, 12, 30))
            Instant(2026, 2, 9, 12, 30, 0, nanosecond=0, timezone='UTC')
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        nanos = dt.microsecond * NANOS_PER_MICROSECOND
        return cls._from_internal(
            _normalize(dt.replace(microsecond=0)), nanos, Lang.parse(lang)
        )

    @classmethod
    def from_unix(
        cls,
        seconds: int,
        *,
        timezone: str | _datetime.tzinfo | None = DEFAULT_TIMEZONE,
    ) -> Instant:
        """Create an Instant from a Unix timestamp in seconds.

        Negative timestamps address moments before 1970.

        Examples:
            >>> Instant.from_unix(0)
            Instant(1970, 1, 1, 0, 0, 0, nanosecond=0, timezone='UTC')
        """
        return cls._from_unix_nanos(
            seconds * NANOS_PER_SECOND, resolve_timezone(timezone), Lang.EN
        )

    @classmethod
    def from_unix_nanos(
        cls,
        nanos: int,
        *,
        timezone: str | _datetime.tzinfo | None = DEFAULT_TIMEZONE,
    ) -> Instant:
        """Create an Instant from nanoseconds since the Unix epoch."""
        return cls._from_unix_nanos(nanos, resolve_timezone(timezone), Lang.EN)

    @classmethod
    def now(cls, timezone: str | _datetime.tzinfo | None = None) -> Instant:
        """Return the current moment.

        Prefer an injected ``datewise.clock.Clock`` in code that needs to be
        tested; this reads the system clock directly.

        Args:
            timezone: Zone for the result. None means the host's local zone.
        """
        if timezone is None:
            current = _datetime.datetime.now().astimezone()
        else:
            current = _datetime.datetime.now(resolve_timezone(timezone))
        return cls.from_datetime(current)

    # Component accessors

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._dt.year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._dt.month

    @property
    def day(self) -> int:
        """Return the day component (1-31)."""
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond within the second (0-999999999)."""
        return self._nanos

    @property
    def timezone(self) -> _datetime.tzinfo:
        """Return the tzinfo of this instant."""
        return self._dt.tzinfo  # type: ignore[return-value]

    @property
    def zone_name(self) -> str:
        """Return the zone's display name ("Europe/Berlin", "UTC", "+02:00")."""
        return zone_name(self.timezone)

    @property
    def lang(self) -> Lang:
        """Return the language tag used for rendering."""
        return self._lang

    @property
    def weekday(self) -> Weekday:
        """Return the ISO weekday of the wall-clock date."""
        return Weekday(iso_weekday(self.year, self.month, self.day))

    @property
    def utc_offset(self) -> _datetime.timedelta:
        """Return the UTC offset in effect at this instant."""
        return self._dt.utcoffset()  # type: ignore[return-value]

    # Conversions

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware ``datetime.datetime`` (sub-microsecond digits dropped)."""
        return self._dt.replace(microsecond=self._nanos // NANOS_PER_MICROSECOND)

    def unix(self) -> int:
        """Return the Unix timestamp in whole seconds."""
        delta = self._dt - _EPOCH
        return delta.days * SECONDS_PER_DAY + delta.seconds

    def unix_nanos(self) -> int:
        """Return the Unix timestamp in nanoseconds."""
        return self.unix() * NANOS_PER_SECOND + self._nanos

    def with_lang(self, lang: Lang | str) -> Instant:
        """Return a copy carrying a different language tag."""
        return Instant._from_internal(self._dt, self._nanos, Lang.parse(lang))

    def in_timezone(self, timezone: str | _datetime.tzinfo) -> Instant:
        """Return the same moment expressed in another zone.

        The language tag is preserved.

        Args:
            timezone: IANA zone name ("Europe/Berlin"), UTC alias, numeric
                offset, or a tzinfo.

        Raises:
            InvalidTimezoneError: If the name is empty, malformed or unknown.

        Examples:
            >>> utc = Instant(2026, 6, 15, 12, 0, 0)
            >>> utc.in_timezone("Europe/Berlin").hour
            14
        """
        if timezone is None or (isinstance(timezone, str) and not timezone.strip()):
            raise InvalidTimezoneError("" if timezone is None else timezone, "timezone name is empty")
        tz = resolve_timezone(timezone)
        try:
            converted = self._dt.astimezone(tz)
        except OverflowError as exc:
            raise DateOverflowError(
                f"{self} cannot be expressed in {zone_name(tz)}"
            ) from exc
        return Instant._from_internal(converted, self._nanos, self._lang)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        *,
        nanosecond: int | None = None,
    ) -> Instant:
        """Return a new Instant with wall-clock components replaced.

        The zone and language are kept.

        Raises:
            ValidationError: If the resulting components are invalid.

        Examples:
            >>> Instant(2026, 2, 9, 14, 30).replace(hour=9)
            Instant(2026, 2, 9, 9, 30, 0, nanosecond=0, timezone='UTC')
        """
        return Instant(
            self.year if year is None else year,
            self.month if month is None else month,
            self.day if day is None else day,
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            nanosecond=self._nanos if nanosecond is None else nanosecond,
            timezone=self.timezone,
            lang=self._lang,
        )

    # Arithmetic, boundaries and search

    def add(self, value: int, unit: Unit) -> Instant:
        """Add a signed count of a unit. See ``datewise.arithmetic.add``."""
        from datewise.arithmetic.ops import add

        return add(self, value, unit)

    def subtract(self, value: int, unit: Unit) -> Instant:
        """Subtract a signed count of a unit. See ``datewise.arithmetic.subtract``."""
        from datewise.arithmetic.ops import subtract

        return subtract(self, value, unit)

    def start_of(self, unit: Unit) -> Instant:
        """Snap to the start of the week, month, quarter or year."""
        from datewise.arithmetic.snap_ops import start_of

        return start_of(self, unit)

    def end_of(self, unit: Unit) -> Instant:
        """Snap to the end of the week, month, quarter or year."""
        from datewise.arithmetic.snap_ops import end_of

        return end_of(self, unit)

    def next_weekday(self, weekday: Weekday) -> Instant:
        """Return the next occurrence of a weekday, 1-7 days ahead."""
        from datewise.arithmetic.snap_ops import next_weekday

        return next_weekday(self, weekday)

    def prev_weekday(self, weekday: Weekday) -> Instant:
        """Return the previous occurrence of a weekday, 1-7 days back."""
        from datewise.arithmetic.snap_ops import prev_weekday

        return prev_weekday(self, weekday)

    def diff(self, other: Instant) -> Duration:
        """Return the Duration from this instant to ``other``."""
        from datewise.core.duration import diff

        return diff(self, other)

    # Inspection

    def week_number(self) -> int:
        """Return the ISO 8601 week number (1-53)."""
        from datewise.core.info import week_number

        return week_number(self)

    def quarter(self) -> int:
        """Return the quarter (1-4)."""
        from datewise.core.info import quarter

        return quarter(self)

    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        from datewise.core.info import day_of_year

        return day_of_year(self)

    def is_weekend(self) -> bool:
        """Return True on Saturday and Sunday."""
        return self.weekday.is_weekend

    def is_leap_year(self) -> bool:
        """Return True when the instant's year is a leap year."""
        from datewise.core.info import is_leap_year

        return is_leap_year(self)

    def info(self) -> DateInfo:
        """Return the aggregated inspection record."""
        from datewise.core.info import info

        return info(self)

    # Rendering

    def format(self, fmt: Format) -> str:
        """Render with a preset format. See ``datewise.format.format_preset``."""
        from datewise.format.presets import format_preset

        return format_preset(self, fmt)

    def format_layout(self, layout: str) -> str:
        """Render with a strftime-style layout in this instant's language."""
        from datewise.format.layout import format_layout

        return format_layout(self, layout)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.unix_nanos() == other.unix_nanos()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.unix_nanos() < other.unix_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.unix_nanos() <= other.unix_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.unix_nanos() > other.unix_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.unix_nanos() >= other.unix_nanos()

    def __hash__(self) -> int:
        return hash(self.unix_nanos())

    def __repr__(self) -> str:
        return (
            f"Instant({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self._nanos}, timezone={self.zone_name!r})"
        )

    def __str__(self) -> str:
        """Return "YYYY-MM-DD HH:MM:SS" in the instant's own zone."""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


__all__ = ["Instant"]
