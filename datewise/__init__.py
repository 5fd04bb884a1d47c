"""Datewise: calendar arithmetic for zone-aware instants.

Datewise adds calendar units to instants without losing the wall clock
across DST changes, measures the time between two instants in mixed
units, snaps instants to period boundaries and parses dates only when the
text cannot be misread.

Core Types:
    Instant: Zone-aware moment with nanosecond precision and a language tag
    Duration: Elapsed amount between two Instants
    DateInfo: Aggregated calendar facts about an Instant

Units:
    Unit: Arithmetic granularities (SECONDS through YEARS)
    Weekday: ISO weekday (MONDAY=1 .. SUNDAY=7)
    Lang: Language used for month, weekday and unit names

Functions:
    add, subtract: Unit arithmetic with month-end clamping
    start_of, end_of: Week, month, quarter and year boundaries
    next_weekday, prev_weekday: Weekday search
    diff: Build a Duration
    parse, must_parse, parse_with_layout, parse_relative: Parsing
    format_preset, format_layout: Rendering

Exceptions:
    DatewiseError: Base exception
    ValidationError: Invalid input values
    InvalidFormatError: Failed to parse string
    InvalidTimezoneError: Invalid timezone
    DateOverflowError: Result outside years 1-9999

Example:
    >>> from datewise import Instant, Unit
    >>> jan31 = Instant(2026, 1, 31, timezone="Europe/Berlin")
    >>> jan31.add(1, Unit.MONTHS).day
    28
    >>> jan31.diff(Instant(2026, 11, 17, timezone="Europe/Berlin")).human()
    '9 months, 17 days'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from datewise.core.duration import Duration, diff
from datewise.core.info import DateInfo
from datewise.core.instant import Instant

# Units
from datewise.units.lang import Lang
from datewise.units.unit import Unit
from datewise.units.weekday import Weekday

# Operations
from datewise.arithmetic import (
    add,
    end_of,
    next_weekday,
    prev_weekday,
    start_of,
    subtract,
)
from datewise.clock import Clock, FixedClock, SystemClock
from datewise.format import Format, format_layout, format_preset
from datewise.infer import (
    ParseOptions,
    must_parse,
    parse,
    parse_relative,
    parse_with_layout,
)

# Exceptions
from datewise.errors import (
    DateOverflowError,
    DatewiseError,
    InvalidFormatError,
    InvalidTimezoneError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateInfo",
    "Duration",
    "Instant",
    # Units
    "Lang",
    "Unit",
    "Weekday",
    # Operations
    "add",
    "subtract",
    "start_of",
    "end_of",
    "next_weekday",
    "prev_weekday",
    "diff",
    # Parsing
    "ParseOptions",
    "parse",
    "must_parse",
    "parse_with_layout",
    "parse_relative",
    # Rendering
    "Format",
    "format_preset",
    "format_layout",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    # Exceptions
    "DatewiseError",
    "ValidationError",
    "InvalidFormatError",
    "InvalidTimezoneError",
    "DateOverflowError",
]
