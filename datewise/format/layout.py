"""strftime-style layouts: rendering and parsing.

This module turns a layout string into text for an Instant, and matches
text against a layout to build an Instant. Rendering uses the month and
weekday names of the instant's language; parsing matches English names,
case-insensitively.

Supported Directives:
    %Y - 4-digit year (e.g., 2026)
    %y - 2-digit year (00-68 is 2000-2068, 69-99 is 1969-1999)
    %m - Month (01-12; parsing also accepts one digit)
    %d - Day of month (01-31; parsing also accepts one digit)
    %H - Hour, 24-hour clock (00-23)
    %I - Hour, 12-hour clock (01-12)
    %M - Minute (00-59)
    %S - Second (00-59)
    %f - Fraction of a second (renders 9 digits, parses 1-9 digits)
    %p - AM or PM
    %b - Abbreviated month name (Feb)
    %B - Full month name (February)
    %a - Abbreviated weekday name (Mon)
    %A - Full weekday name (Monday)
    %z - UTC offset (+0100; parsing also accepts +01:00 and Z)
    %Z - Zone name (UTC, Europe/Berlin, +05:30)
    %% - Literal %

Functions:
    format_layout: Render an Instant with a layout.
    parse_layout: Parse text with a layout into an Instant.

Examples:
    >>> from datewise.core.instant import Instant
    >>> format_layout(Instant(2026, 2, 9, 14, 30, 45), "%Y-%m-%d %H:%M:%S")
    '2026-02-09 14:30:45'

    >>> format_layout(Instant(2026, 2, 9, lang="de"), "%A, %d. %B %Y")
    'Montag, 09. Februar 2026'

    >>> parse_layout("9 Feb 2026 3:04 PM", "%d %b %Y %I:%M %p")
    Instant(2026, 2, 9, 15, 4, 0, nanosecond=0, timezone='UTC')
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import TYPE_CHECKING

from datewise._internal.constants import DEFAULT_TIMEZONE
from datewise.errors import (
    DateOverflowError,
    InvalidFormatError,
    InvalidTimezoneError,
    ValidationError,
)
from datewise.units.lang import Lang
from datewise.units.timezone import parse_offset, resolve_timezone

if TYPE_CHECKING:
    from datewise.core.instant import Instant

_SUPPORTED = "%Y, %y, %m, %d, %H, %I, %M, %S, %f, %p, %b, %B, %a, %A, %z, %Z, %%"


def _names(values: tuple[str, ...]) -> str:
    # Longest first so "Sept" is never cut short by "Sep"
    return "|".join(re.escape(v) for v in sorted(values, key=len, reverse=True))


_EN_MONTHS = tuple(Lang.EN.month_name(m) for m in range(1, 13))
_EN_MONTHS_SHORT = tuple(Lang.EN.month_name_short(m) for m in range(1, 13))
_EN_WEEKDAYS = tuple(Lang.EN.weekday_name(d) for d in range(1, 8))
_EN_WEEKDAYS_SHORT = tuple(Lang.EN.weekday_name_short(d) for d in range(1, 8))

# Mapping of directives to (field, pattern) for parsing
_PARSE_PATTERNS: dict[str, tuple[str, str]] = {
    "%Y": ("year", r"[0-9]{4}"),
    "%y": ("year2", r"[0-9]{2}"),
    "%m": ("month", r"[0-9]{1,2}"),
    "%d": ("day", r"[0-9]{1,2}"),
    "%H": ("hour", r"[0-9]{1,2}"),
    "%I": ("hour12", r"[0-9]{1,2}"),
    "%M": ("minute", r"[0-9]{1,2}"),
    "%S": ("second", r"[0-9]{1,2}"),
    "%f": ("fraction", r"[0-9]{1,9}"),
    "%p": ("ampm", r"AM|PM"),
    "%b": ("month_short", _names(_EN_MONTHS_SHORT)),
    "%B": ("month_name", _names(_EN_MONTHS)),
    "%a": ("weekday_short", _names(_EN_WEEKDAYS_SHORT)),
    "%A": ("weekday_name", _names(_EN_WEEKDAYS)),
    "%z": ("offset", r"[+-][0-9]{2}:?[0-9]{2}|Z"),
    "%Z": ("zone", r"[A-Za-z][A-Za-z0-9_+-]*(?:/[A-Za-z0-9_+-]+)*|[+-][0-9]{2}:?[0-9]{2}"),
}


def _format_offset(offset: _datetime.timedelta, separator: str = "") -> str:
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def format_layout(instant: Instant, layout: str) -> str:
    """Render an Instant using a strftime-style layout.

    Names (%b %B %a %A) are taken from the instant's language. A lone
    trailing "%" is copied as-is.

    Args:
        instant: The instant to render, in its own zone.
        layout: Layout string with %-directives.

    Returns:
        The rendered string.

    Raises:
        ValueError: If the layout contains an unsupported directive.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> format_layout(Instant(2026, 2, 9, 15, 4), "%I:%M %p")
        '03:04 PM'
    """
    result = []
    i = 0
    while i < len(layout):
        if layout[i] == "%" and i + 1 < len(layout):
            result.append(_format_directive(instant, layout[i : i + 2]))
            i += 2
        else:
            result.append(layout[i])
            i += 1

    return "".join(result)


def _format_directive(instant: Instant, directive: str) -> str:
    lang = instant.lang

    if directive == "%%":
        return "%"
    elif directive == "%Y":
        return f"{instant.year:04d}"
    elif directive == "%y":
        return f"{instant.year % 100:02d}"
    elif directive == "%m":
        return f"{instant.month:02d}"
    elif directive == "%d":
        return f"{instant.day:02d}"
    elif directive == "%H":
        return f"{instant.hour:02d}"
    elif directive == "%I":
        return f"{(instant.hour % 12) or 12:02d}"
    elif directive == "%M":
        return f"{instant.minute:02d}"
    elif directive == "%S":
        return f"{instant.second:02d}"
    elif directive == "%f":
        return f"{instant.nanosecond:09d}"
    elif directive == "%p":
        return "AM" if instant.hour < 12 else "PM"
    elif directive == "%b":
        return lang.month_name_short(instant.month)
    elif directive == "%B":
        return lang.month_name(instant.month)
    elif directive == "%a":
        return lang.weekday_name_short(instant.weekday)
    elif directive == "%A":
        return lang.weekday_name(instant.weekday)
    elif directive == "%z":
        return _format_offset(instant.utc_offset)
    elif directive == "%Z":
        return instant.zone_name
    else:
        raise ValueError(
            f"unsupported layout directive: {directive}. Supported: {_SUPPORTED}"
        )


def _layout_to_regex(text: str, layout: str) -> tuple[re.Pattern[str], list[tuple[str, str]]]:
    """Convert a layout into a compiled regex and its (group, field) list.

    Every directive gets its own numbered group, so a field may appear
    more than once; the last occurrence wins.

    Raises:
        InvalidFormatError: If the layout contains an unsupported directive.
    """
    parts = []
    groups: list[tuple[str, str]] = []
    i = 0
    while i < len(layout):
        if layout[i] == "%" and i + 1 < len(layout):
            directive = layout[i : i + 2]
            if directive == "%%":
                parts.append("%")
            elif directive in _PARSE_PATTERNS:
                field, pattern = _PARSE_PATTERNS[directive]
                group = f"g{len(groups)}"
                groups.append((group, field))
                parts.append(f"(?P<{group}>{pattern})")
            else:
                raise InvalidFormatError(
                    text, f"unsupported layout directive {directive}"
                )
            i += 2
        else:
            parts.append(re.escape(layout[i]))
            i += 1

    return re.compile("".join(parts), re.IGNORECASE), groups


def _index_of(name: str, names: tuple[str, ...]) -> int:
    """Return the 1-based position of a case-insensitive name."""
    lowered = name.lower()
    for position, candidate in enumerate(names, start=1):
        if candidate.lower() == lowered:
            return position
    raise ValueError(f"unknown name {name!r}")


def parse_layout(
    text: str,
    layout: str,
    *,
    timezone: str | _datetime.tzinfo | None = DEFAULT_TIMEZONE,
    lang: Lang | str = Lang.EN,
) -> Instant:
    """Parse text that follows a strftime-style layout.

    The whole text must match the layout. Missing time fields default to
    zero; year, month and day are required. When the layout carries no
    zone (%z or %Z), the result is placed in ``timezone``.

    Args:
        text: The string to parse.
        layout: Layout string with %-directives.
        timezone: Zone for results without a zone of their own.
        lang: Language tag of the result.

    Returns:
        The parsed Instant.

    Raises:
        InvalidFormatError: If the text is empty or does not match the
            layout, the layout has an unsupported directive, a field is
            out of range or the date does not exist.

    Examples:
        >>> parse_layout("2026-02-09 14:30", "%Y-%m-%d %H:%M")
        Instant(2026, 2, 9, 14, 30, 0, nanosecond=0, timezone='UTC')

        >>> parse_layout("2026-02-09T14:30:00+01:00", "%Y-%m-%dT%H:%M:%S%z").hour
        14
    """
    from datewise.core.instant import Instant

    if not text:
        raise InvalidFormatError(text, "empty string")

    pattern, groups = _layout_to_regex(text, layout)
    match = pattern.fullmatch(text)
    if match is None:
        raise InvalidFormatError(text, f"does not match layout {layout!r}")

    fields = {field: match.group(group) for group, field in groups}

    year = int(fields["year"]) if "year" in fields else None
    if "year2" in fields:
        short = int(fields["year2"])
        year = 2000 + short if short < 69 else 1900 + short

    month = int(fields["month"]) if "month" in fields else None
    if "month_short" in fields:
        month = _index_of(fields["month_short"], _EN_MONTHS_SHORT)
    if "month_name" in fields:
        month = _index_of(fields["month_name"], _EN_MONTHS)

    day = int(fields["day"]) if "day" in fields else None

    if year is None or month is None or day is None:
        raise InvalidFormatError(text, "layout must provide year, month and day")

    hour = int(fields.get("hour") or 0)
    if "hour12" in fields:
        hour12 = int(fields["hour12"])
        if not 1 <= hour12 <= 12:
            raise InvalidFormatError(text, f"12-hour clock hour out of range: {hour12}")
        hour = hour12
    ampm = fields.get("ampm")
    if ampm is not None:
        if hour > 12:
            raise InvalidFormatError(text, f"hour {hour} cannot take {ampm}")
        hour = hour % 12 + (12 if ampm.upper() == "PM" else 0)

    minute = int(fields.get("minute") or 0)
    second = int(fields.get("second") or 0)

    nanosecond = 0
    if "fraction" in fields:
        nanosecond = int(fields["fraction"].ljust(9, "0"))

    zone: str | _datetime.tzinfo | None = timezone
    try:
        if "offset" in fields:
            zone = parse_offset(fields["offset"])
        elif "zone" in fields:
            zone = resolve_timezone(fields["zone"])
    except InvalidTimezoneError as exc:
        raise InvalidFormatError(text, str(exc)) from exc

    try:
        return Instant(
            year, month, day, hour, minute, second,
            nanosecond=nanosecond, timezone=zone, lang=lang,
        )
    except (ValidationError, DateOverflowError) as exc:
        raise InvalidFormatError(text, str(exc)) from exc


__all__ = ["format_layout", "parse_layout"]
