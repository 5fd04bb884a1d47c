"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: Zone-aware moment with nanosecond precision and a language tag
    - Duration: Elapsed amount between two Instants
    - DateInfo: Aggregated calendar facts about an Instant
"""

from __future__ import annotations

from datewise.core.duration import Duration, diff
from datewise.core.info import DateInfo
from datewise.core.instant import Instant

__all__: list[str] = [
    "DateInfo",
    "Duration",
    "Instant",
    "diff",
]
