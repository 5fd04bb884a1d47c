"""Internal constants for Datewise.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MONTHS_PER_QUARTER: int = 3
MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Year limits (the range of datetime.datetime)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

MAX_NANOSECOND: int = NANOS_PER_SECOND - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# First month of each quarter, indexed by quarter number
QUARTER_START_MONTHS: tuple[int, ...] = (0, 1, 4, 7, 10)

DEFAULT_TIMEZONE: str = "UTC"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MONTHS_PER_QUARTER",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_NANOSECOND",
    "DAYS_IN_MONTH",
    "QUARTER_START_MONTHS",
    "DEFAULT_TIMEZONE",
]
