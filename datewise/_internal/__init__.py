"""Internal utilities for Datewise.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar primitives (leap years, month lengths, ordinals, ISO weeks)
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.validation import (
    validate_components,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "validate_components",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
