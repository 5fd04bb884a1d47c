"""Rendering and layout parsing.

This module provides functions for converting Instants to and from
string representations:
    - Preset formats (ISO, EU, US, long, RFC 2822)
    - strftime-style layouts with localized month and weekday names

Functions:
    format_preset: Render an Instant in a preset Format.
    format_layout: Render an Instant with a strftime-style layout.
    parse_layout: Parse text with a strftime-style layout.

Examples:
    >>> from datewise import Instant
    >>> from datewise.format import Format, format_preset

    >>> format_preset(Instant(2026, 2, 9, lang="de"), Format.LONG)
    '9. Februar 2026'
"""

from __future__ import annotations

from datewise.format.layout import format_layout, parse_layout
from datewise.format.presets import Format, format_preset

__all__: list[str] = [
    "Format",
    "format_preset",
    "format_layout",
    "parse_layout",
]
