"""Known input formats for automatic detection.

Each candidate pairs a cheap structural check with a layout. parse()
tries the candidates in order and only runs the full layout parse when
the structural check passes.

Internal module - use parse() from datewise.infer instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class FormatCandidate:
    """A recognizable input format.

    Attributes:
        name: Short name used in debug logging.
        layout: strftime-style layout passed to parse_layout.
        validator: Structural check run before the full parse.
    """

    name: str
    layout: str
    validator: Callable[[str], bool]


def is_year_prefix(s: str) -> bool:
    """Return True when s looks like a four-digit year not starting with 0.

    Examples:
        >>> is_year_prefix("2026")
        True
        >>> is_year_prefix("01/0")
        False
    """
    return len(s) == 4 and s.isascii() and s.isdigit() and s[0] != "0"


def is_ambiguous_slash_date(s: str) -> bool:
    """Return True for "NN/NN/NNNN" shaped input without a year prefix.

    Such input reads as day-first in some regions and month-first in
    others, so it is refused instead of guessed.
    """
    return (
        len(s) == 10
        and s[2] == "/"
        and s[5] == "/"
        and s.count("/") == 2
        and not is_year_prefix(s[:4])
    )


def _looks_iso(s: str) -> bool:
    return len(s) == 10 and s[4] == "-" and s[7] == "-" and s.count("-") == 2


def _looks_iso_slash(s: str) -> bool:
    return (
        len(s) == 10
        and s[4] == "/"
        and s[7] == "/"
        and s.count("/") == 2
        and is_year_prefix(s[:4])
    )


def _looks_eu(s: str) -> bool:
    return len(s) == 10 and s[2] == "." and s[5] == "." and s.count(".") == 2


def _looks_rfc1123(s: str) -> bool:
    return "," in s and len(s) > 20


CANDIDATES: tuple[FormatCandidate, ...] = (
    FormatCandidate("iso", "%Y-%m-%d", _looks_iso),
    FormatCandidate("iso_slash", "%Y/%m/%d", _looks_iso_slash),
    FormatCandidate("eu", "%d.%m.%Y", _looks_eu),
    FormatCandidate("rfc1123z", "%a, %d %b %Y %H:%M:%S %z", _looks_rfc1123),
    FormatCandidate("rfc1123", "%a, %d %b %Y %H:%M:%S %Z", _looks_rfc1123),
)


__all__ = [
    "FormatCandidate",
    "CANDIDATES",
    "is_year_prefix",
    "is_ambiguous_slash_date",
]
