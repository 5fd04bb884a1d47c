"""Temporal units and enumerations.

This module provides:
    - Unit: Arithmetic granularities (SECONDS through YEARS)
    - Weekday: ISO weekday enum (MONDAY=1 .. SUNDAY=7)
    - Lang: Language tag with month/weekday/unit name tables
    - resolve_timezone: Zone name to tzinfo resolution
"""

from __future__ import annotations

from datewise.units.lang import Lang
from datewise.units.timezone import UTC, resolve_timezone
from datewise.units.unit import Unit
from datewise.units.weekday import Weekday

__all__: list[str] = [
    "Lang",
    "UTC",
    "Unit",
    "Weekday",
    "resolve_timezone",
]
