"""Relative date expressions.

Handles "today", "tomorrow", "yesterday" and signed offsets such as
"+2 days" or "-1 quarter". Every result is midnight of the computed day
in the clock's zone.

Internal module - use parse_relative() from datewise.infer instead.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from datewise.errors import InvalidFormatError
from datewise.units.lang import Lang
from datewise.units.unit import Unit

if TYPE_CHECKING:
    from datewise.clock import Clock
    from datewise.core.instant import Instant

logger = logging.getLogger(__name__)

_KEYWORD_OFFSETS: dict[str, int] = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}

_OFFSET_PATTERN = re.compile(r"[+-][0-9]+")

# Relative offsets count whole calendar days or more
_RELATIVE_UNITS = frozenset(
    {Unit.DAYS, Unit.WEEKS, Unit.MONTHS, Unit.QUARTERS, Unit.YEARS}
)


def _midnight_today(clock: Clock, lang: Lang) -> Instant:
    from datewise.core.instant import Instant

    now = clock.now()
    return Instant._from_wall(
        now.year, now.month, now.day, 0, 0, 0, 0, now.timezone, lang
    )


def _parse_unit(text: str, name: str) -> Unit:
    try:
        unit = Unit.from_name(name)
    except ValueError:
        unit = None
    if unit not in _RELATIVE_UNITS:
        raise InvalidFormatError(
            text,
            f"unknown unit {name!r} (supported: day, week, month, quarter, year)",
        )
    return unit


def parse_relative(text: str, clock: Clock, lang: Lang = Lang.EN) -> Instant:
    """Resolve a relative expression against a clock.

    Args:
        text: "today", "tomorrow", "yesterday" (any case), or "<sign><int>
            <unit>" with unit one of day(s), week(s), month(s), quarter(s),
            year(s).
        clock: Source of the current moment; its zone is the result zone.
        lang: Language tag of the result.

    Returns:
        Midnight today, moved by the offset with calendar arithmetic (so
        "+1 month" on Jan 31 lands on the last day of February).

    Raises:
        InvalidFormatError: For empty input, a wrong number of tokens, a
            missing sign, a decimal or non-integer offset, or an
            unsupported unit.
    """
    from datewise.arithmetic.ops import add

    s = text.strip()
    if not s:
        raise InvalidFormatError(s, "empty string")

    keyword = s.lower()
    if keyword in _KEYWORD_OFFSETS:
        logger.debug("Relative keyword %r", keyword)
        return add(_midnight_today(clock, lang), _KEYWORD_OFFSETS[keyword], Unit.DAYS)

    parts = s.split()
    if len(parts) != 2:
        raise InvalidFormatError(
            s, 'expected "today", "tomorrow", "yesterday" or "+/-N unit"'
        )

    offset_text, unit_text = parts
    if len(offset_text) < 2 or offset_text[0] not in "+-":
        raise InvalidFormatError(s, 'offset must start with + or - (e.g. "+2" or "-1")')
    if "." in offset_text:
        raise InvalidFormatError(s, "offset must be an integer, not a float")
    if not _OFFSET_PATTERN.fullmatch(offset_text):
        raise InvalidFormatError(s, f"invalid offset number {offset_text!r}")

    unit = _parse_unit(s, unit_text)
    offset = int(offset_text)

    logger.debug("Relative offset %d %s", offset, unit.value)
    return add(_midnight_today(clock, lang), offset, unit)


__all__ = ["parse_relative"]
