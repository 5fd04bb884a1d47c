"""Timezone resolution backed by the IANA database.

Zones are plain ``tzinfo`` objects: ``zoneinfo.ZoneInfo`` for named zones
and ``datetime.timezone`` for UTC and fixed offsets. Datewise never
implements zone rules itself; it only resolves names.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
import zoneinfo

from datewise.errors import InvalidTimezoneError

logger = logging.getLogger(__name__)

UTC: _datetime.tzinfo = _datetime.timezone.utc

# Maximum offset is +/- 14 hours (Pacific/Kiritimati is UTC+14)
_MAX_OFFSET_SECONDS = 14 * 60 * 60

# +HH:MM, -HH:MM, +HHMM, -HHMM, +HH, -HH
_OFFSET_PATTERN = re.compile(r"^([+-])([0-9]{1,2})(?::?([0-9]{2}))?$")

_UTC_ALIASES = frozenset({"UTC", "Z", "GMT", "UT"})


def parse_offset(s: str) -> _datetime.timezone:
    """Parse a numeric UTC offset string into a fixed-offset zone.

    Supported formats: "Z", "+HH:MM", "-HH:MM", "+HHMM", "-HHMM", "+HH", "-HH".

    Args:
        s: String representation of the offset.

    Returns:
        A ``datetime.timezone`` with that offset.

    Raises:
        InvalidTimezoneError: If the string cannot be parsed or the offset
            is outside +/-14:00.

    Examples:
        >>> parse_offset("+05:30").utcoffset(None)
        datetime.timedelta(seconds=19800)

        >>> parse_offset("-0500").utcoffset(None)
        datetime.timedelta(days=-1, seconds=68400)
    """
    s = s.strip()
    if s.upper() == "Z":
        return _datetime.timezone.utc

    match = _OFFSET_PATTERN.match(s)
    if not match:
        raise InvalidTimezoneError(s, "malformed UTC offset")

    sign_str, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0

    if minutes > 59:
        raise InvalidTimezoneError(s, "offset minutes out of range")

    offset_seconds = hours * 3600 + minutes * 60
    if offset_seconds > _MAX_OFFSET_SECONDS:
        raise InvalidTimezoneError(s, "offset hours out of range")

    if sign_str == "-":
        offset_seconds = -offset_seconds
    if offset_seconds == 0:
        return _datetime.timezone.utc
    return _datetime.timezone(_datetime.timedelta(seconds=offset_seconds))


def resolve_timezone(zone: str | _datetime.tzinfo | None) -> _datetime.tzinfo:
    """Resolve a zone name or tzinfo into a tzinfo.

    Accepts an existing ``tzinfo`` unchanged, the UTC aliases ("UTC", "Z",
    "GMT", "UT"), numeric offsets ("+02:00") and IANA names
    ("Europe/Berlin"). ``None`` means UTC.

    Args:
        zone: The zone to resolve.

    Returns:
        A tzinfo usable with ``datetime.datetime``.

    Raises:
        InvalidTimezoneError: If the name is empty, malformed or not in the
            timezone database.
        TypeError: If zone is neither a string, a tzinfo nor None.

    Examples:
        >>> resolve_timezone("Europe/Berlin")
        zoneinfo.ZoneInfo(key='Europe/Berlin')

        >>> resolve_timezone(None) is UTC
        True
    """
    if zone is None:
        return UTC
    if isinstance(zone, _datetime.tzinfo):
        return zone
    if not isinstance(zone, str):
        raise TypeError(
            f"timezone must be a string or tzinfo, got {type(zone).__name__}"
        )

    name = zone.strip()
    if not name:
        raise InvalidTimezoneError(zone, "timezone name is empty")
    if name.upper() in _UTC_ALIASES:
        return UTC
    if name[0] in "+-":
        return parse_offset(name)

    try:
        resolved = zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, OSError):
        raise InvalidTimezoneError(name, "not found in the timezone database") from None
    except ValueError as exc:
        raise InvalidTimezoneError(name, f"malformed timezone name ({exc})") from None

    logger.debug("Resolved timezone %s", name)
    return resolved


def zone_name(tz: _datetime.tzinfo) -> str:
    """Return a display name for a zone.

    IANA zones report their key, UTC reports "UTC" and fixed offsets report
    "+HH:MM".
    """
    if isinstance(tz, zoneinfo.ZoneInfo):
        return tz.key
    offset = tz.utcoffset(None)
    if offset is None or offset == _datetime.timedelta(0):
        return "UTC"

    total_minutes = abs(int(offset.total_seconds())) // 60
    sign = "+" if offset >= _datetime.timedelta(0) else "-"
    return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"


__all__ = ["UTC", "parse_offset", "resolve_timezone", "zone_name"]
