"""Calendar arithmetic on Instants.

Arithmetic Operations (from datewise.arithmetic.ops):
    - add: Add a signed count of a Unit
    - subtract: Subtract a signed count of a Unit

Boundary and Search Operations (from datewise.arithmetic.snap_ops):
    - start_of, end_of: Snap to week/month/quarter/year boundaries
    - next_weekday, prev_weekday: Find the nearest other weekday occurrence
"""

from __future__ import annotations

from datewise.arithmetic.ops import add, subtract
from datewise.arithmetic.snap_ops import (
    end_of,
    next_weekday,
    prev_weekday,
    start_of,
)

__all__ = [
    # Arithmetic operations
    "add",
    "subtract",
    # Boundaries and search
    "start_of",
    "end_of",
    "next_weekday",
    "prev_weekday",
]
