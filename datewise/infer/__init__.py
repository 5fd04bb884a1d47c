"""Parsing dates from text.

This module turns strings into Instants. Automatic detection only
accepts formats that cannot be misread; anything that could mean two
different dates is refused rather than guessed.

Public API:
    parse: Parse a string with automatic format detection.
    must_parse: parse() for static data, raising RuntimeError on failure.
    parse_with_layout: Parse a string with an explicit layout.
    parse_relative: Resolve "today", "tomorrow", "+2 weeks" and the like.
    ParseOptions: Zone and language for parse results.

Detected formats, in order:
    - ISO 8601 date ("2026-02-09")
    - ISO date with slashes ("2026/02/09")
    - European date ("09.02.2026")
    - RFC 1123 with numeric zone ("Mon, 09 Feb 2026 12:30:45 +0100")
    - RFC 1123 with zone name ("Mon, 09 Feb 2026 12:30:45 GMT")

Examples:
    >>> parse("2026-02-09")
    Instant(2026, 2, 9, 0, 0, 0, nanosecond=0, timezone='UTC')

    >>> parse("01/02/2026")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    InvalidFormatError: parsing date '01/02/2026': ambiguous format ...

    >>> parse_with_layout("02/01/2026", "%m/%d/%Y").day
    1
"""

from __future__ import annotations

import datetime as _datetime
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from datewise._internal.constants import DEFAULT_TIMEZONE
from datewise.errors import InvalidFormatError
from datewise.format.layout import parse_layout
from datewise.infer import _relative
from datewise.infer._formats import CANDIDATES, is_ambiguous_slash_date
from datewise.units.lang import Lang

if TYPE_CHECKING:
    from datewise.clock import Clock
    from datewise.core.instant import Instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOptions:
    """Configuration for parsing.

    Attributes:
        timezone: Zone for results whose text carries no zone (date-only
            formats and layouts without %z or %Z). Relative parsing uses
            the clock's zone instead.
        lang: Language tag given to every result.

    Examples:
        >>> opts = ParseOptions(timezone="Europe/Berlin")
        >>> parse("2026-02-09", opts).zone_name
        'Europe/Berlin'
    """

    timezone: str | _datetime.tzinfo = DEFAULT_TIMEZONE
    lang: Lang = Lang.EN


_DEFAULT_OPTIONS = ParseOptions()


def parse(text: str, options: ParseOptions | None = None) -> Instant:
    """Parse a date string with automatic format detection.

    Surrounding whitespace is ignored. Slash dates without a leading
    year ("01/02/2026") are rejected as ambiguous; use
    parse_with_layout() for those.

    Args:
        text: The string to parse.
        options: Zone and language of the result. Defaults to UTC and
            English.

    Returns:
        The parsed Instant. Date-only formats give midnight in
        ``options.timezone``.

    Raises:
        InvalidFormatError: If the input is empty, ambiguous, matches no
            known format, or matches one structurally but is not a real
            date (such as "2026-02-30").

    Examples:
        >>> parse("2026/02/09") == parse("2026-02-09")
        True

        >>> parse("Mon, 09 Feb 2026 12:30:45 +0100").hour
        12
    """
    opts = options or _DEFAULT_OPTIONS
    s = text.strip()

    if not s:
        raise InvalidFormatError(s, "empty string")

    if is_ambiguous_slash_date(s):
        logger.debug("Rejecting ambiguous slash date %r", s)
        raise InvalidFormatError(
            s,
            "ambiguous format (use parse_with_layout for slash dates without year prefix)",
        )

    last_error: InvalidFormatError | None = None
    for candidate in CANDIDATES:
        if not candidate.validator(s):
            continue

        try:
            result = parse_layout(
                s, candidate.layout, timezone=opts.timezone, lang=opts.lang
            )
        except InvalidFormatError as exc:
            logger.debug("Candidate %s rejected %r: %s", candidate.name, s, exc.reason)
            last_error = exc
            continue

        logger.debug("Parsed %r as %s", s, candidate.name)
        return result

    if last_error is not None:
        raise InvalidFormatError(s, last_error.reason) from last_error
    raise InvalidFormatError(s, "no matching format")


def must_parse(text: str, options: ParseOptions | None = None) -> Instant:
    """Parse like parse(), raising RuntimeError on failure.

    Meant for literals in tests and static configuration, where a bad
    value is a programming error. Never use it on user input.

    Raises:
        RuntimeError: Wrapping the InvalidFormatError from parse().
    """
    try:
        return parse(text, options)
    except InvalidFormatError as exc:
        raise RuntimeError(f"must_parse({text!r}): {exc}") from exc


def parse_with_layout(
    text: str,
    layout: str,
    options: ParseOptions | None = None,
) -> Instant:
    """Parse a date string with an explicit strftime-style layout.

    Surrounding whitespace in the text is ignored. See
    ``datewise.format.layout`` for the supported directives.

    Args:
        text: The string to parse.
        layout: Layout string with %-directives.
        options: Zone and language of the result.

    Returns:
        The parsed Instant.

    Raises:
        InvalidFormatError: If the text is empty, does not match the
            layout, or does not name a real date.

    Examples:
        >>> parse_with_layout("09/02/2026", "%d/%m/%Y").month
        2
    """
    opts = options or _DEFAULT_OPTIONS
    s = text.strip()
    if not s:
        raise InvalidFormatError(s, f"empty input for layout {layout!r}")

    return parse_layout(s, layout, timezone=opts.timezone, lang=opts.lang)


def parse_relative(
    text: str,
    clock: Clock | None = None,
    options: ParseOptions | None = None,
) -> Instant:
    """Parse a relative expression such as "today" or "+2 weeks".

    The result is midnight of the computed day in the clock's zone.

    Args:
        text: "today", "tomorrow", "yesterday", or "<+|-><int> <unit>"
            with unit one of day(s), week(s), month(s), quarter(s),
            year(s). Case-insensitive.
        clock: Source of the current moment. Defaults to a SystemClock.
        options: Only ``lang`` is used.

    Raises:
        InvalidFormatError: If the expression is not understood.

    Examples:
        >>> from datewise.clock import FixedClock
        >>> from datewise.core.instant import Instant
        >>> clock = FixedClock(Instant(2026, 1, 31, 15, 30))
        >>> parse_relative("+1 month", clock)
        Instant(2026, 2, 28, 0, 0, 0, nanosecond=0, timezone='UTC')
    """
    from datewise.clock import SystemClock

    opts = options or _DEFAULT_OPTIONS
    return _relative.parse_relative(text, clock or SystemClock(), opts.lang)


__all__ = [
    "ParseOptions",
    "parse",
    "must_parse",
    "parse_with_layout",
    "parse_relative",
]
