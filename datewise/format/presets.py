"""Preset output formats.

Functions:
    format_preset: Render an Instant in one of the Format presets.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from datewise.format.layout import format_layout
from datewise.units.lang import Lang

if TYPE_CHECKING:
    from datewise.core.instant import Instant


class Format(Enum):
    """Preset output formats.

    ISO, EU, US and RFC2822 are language-independent. LONG spells the
    month out in the instant's language.

    Examples:
        >>> from datewise.core.instant import Instant
        >>> i = Instant(2026, 2, 9, 12, 30, 45)
        >>> i.format(Format.EU)
        '09.02.2026'
        >>> i.format(Format.RFC2822)
        'Mon, 09 Feb 2026 12:30:45 +0000'
    """

    ISO = "iso"
    EU = "eu"
    US = "us"
    LONG = "long"
    RFC2822 = "rfc2822"


_LAYOUTS: dict[Format, str] = {
    Format.ISO: "%Y-%m-%d",
    Format.EU: "%d.%m.%Y",
    Format.US: "%m/%d/%Y",
    Format.RFC2822: "%a, %d %b %Y %H:%M:%S %z",
}


def _format_long(instant: Instant) -> str:
    lang = instant.lang
    month = lang.month_name(instant.month)
    if lang is Lang.DE:
        return f"{instant.day}. {month} {instant.year}"
    elif lang is Lang.FR:
        return f"{instant.day} {month} {instant.year}"
    elif lang is Lang.ES:
        return f"{instant.day} de {month} de {instant.year}"
    return f"{month} {instant.day}, {instant.year}"


def format_preset(instant: Instant, fmt: Format) -> str:
    """Render an Instant in a preset format.

    Args:
        instant: The instant to render, in its own zone.
        fmt: The preset.

    Returns:
        The rendered string, for example "2026-02-09" (ISO), "09.02.2026"
        (EU), "02/09/2026" (US), "February 9, 2026" (LONG in English) or
        "Mon, 09 Feb 2026 12:30:45 +0000" (RFC2822).

    Raises:
        TypeError: If fmt is not a Format.
    """
    if not isinstance(fmt, Format):
        raise TypeError(f"fmt must be a Format, not {type(fmt).__name__}")

    if fmt is Format.LONG:
        return _format_long(instant)
    if fmt is Format.RFC2822:
        # Mail headers are always English
        return format_layout(instant.with_lang(Lang.EN), _LAYOUTS[fmt])
    return format_layout(instant, _LAYOUTS[fmt])


__all__ = ["Format", "format_preset"]
