"""Language tags and the month/weekday/unit name tables.

Every lookup falls back to English when the language or the key is not
known; this is the only place in Datewise that recovers from a bad input
instead of raising.
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Lang(str, Enum):
    """Language used when rendering names.

    The tag only affects month and weekday names in long and custom
    layouts, and the unit names of ``Duration.human()``. Numeric formats
    are language-independent.

    Examples:
        >>> Lang.DE.month_name(3)
        'März'
        >>> Lang.parse("de-AT")
        <Lang.DE: 'de'>
        >>> Lang.EN.duration_unit("day", plural=True)
        'days'
    """

    EN = "en"
    DE = "de"
    FR = "fr"
    ES = "es"

    @classmethod
    def parse(cls, tag: str | Lang | None) -> Lang:
        """Map a language tag to a Lang, falling back to English.

        The region part of the tag ("de-AT", "es_MX") is ignored.
        """
        if isinstance(tag, Lang):
            return tag
        if not tag:
            return cls.EN

        primary = tag.strip().replace("_", "-").split("-", 1)[0].lower()
        try:
            return cls(primary)
        except ValueError:
            logger.debug("Unknown language tag %r, using English", tag)
            return cls.EN

    def month_name(self, month: int) -> str:
        """Return the full month name (month 1-12)."""
        return _lookup(_MONTH_NAMES, self)[month - 1]

    def month_name_short(self, month: int) -> str:
        """Return the abbreviated month name (month 1-12)."""
        return _lookup(_MONTH_NAMES_SHORT, self)[month - 1]

    def weekday_name(self, weekday: int) -> str:
        """Return the full weekday name (ISO weekday, Monday=1)."""
        return _lookup(_WEEKDAY_NAMES, self)[weekday - 1]

    def weekday_name_short(self, weekday: int) -> str:
        """Return the abbreviated weekday name (ISO weekday, Monday=1)."""
        return _lookup(_WEEKDAY_NAMES_SHORT, self)[weekday - 1]

    def duration_unit(self, unit: str, plural: bool) -> str:
        """Return the singular or plural name of a duration unit.

        Args:
            unit: One of "year", "month", "week", "day", "hour", "minute",
                "second".
            plural: Whether to return the plural form.

        Returns:
            The localized name, the English name when this language lacks
            the key, or the key itself when English lacks it too.
        """
        forms = _DURATION_UNITS.get(self, {}).get(unit)
        if forms is None:
            forms = _DURATION_UNITS[Lang.EN].get(unit)
        if forms is None:
            return unit
        return forms[1] if plural else forms[0]


def _lookup(table: dict[Lang, tuple[str, ...]], lang: Lang) -> tuple[str, ...]:
    return table.get(lang) or table[Lang.EN]


_MONTH_NAMES: dict[Lang, tuple[str, ...]] = {
    Lang.EN: (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    Lang.DE: (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    Lang.FR: (
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    Lang.ES: (
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
}

_MONTH_NAMES_SHORT: dict[Lang, tuple[str, ...]] = {
    Lang.EN: ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    Lang.DE: ("Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"),
    Lang.FR: (
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    Lang.ES: ("ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic"),
}

# ISO order: Monday first
_WEEKDAY_NAMES: dict[Lang, tuple[str, ...]] = {
    Lang.EN: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    Lang.DE: ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
    Lang.FR: ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
    Lang.ES: ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"),
}

_WEEKDAY_NAMES_SHORT: dict[Lang, tuple[str, ...]] = {
    Lang.EN: ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    Lang.DE: ("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
    Lang.FR: ("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
    Lang.ES: ("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
}

# (singular, plural)
_DURATION_UNITS: dict[Lang, dict[str, tuple[str, str]]] = {
    Lang.EN: {
        "year": ("year", "years"),
        "month": ("month", "months"),
        "week": ("week", "weeks"),
        "day": ("day", "days"),
        "hour": ("hour", "hours"),
        "minute": ("minute", "minutes"),
        "second": ("second", "seconds"),
    },
    Lang.DE: {
        "year": ("Jahr", "Jahre"),
        "month": ("Monat", "Monate"),
        "week": ("Woche", "Wochen"),
        "day": ("Tag", "Tage"),
        "hour": ("Stunde", "Stunden"),
        "minute": ("Minute", "Minuten"),
        "second": ("Sekunde", "Sekunden"),
    },
    Lang.FR: {
        "year": ("an", "ans"),
        "month": ("mois", "mois"),
        "week": ("semaine", "semaines"),
        "day": ("jour", "jours"),
        "hour": ("heure", "heures"),
        "minute": ("minute", "minutes"),
        "second": ("seconde", "secondes"),
    },
    Lang.ES: {
        "year": ("año", "años"),
        "month": ("mes", "meses"),
        "week": ("semana", "semanas"),
        "day": ("día", "días"),
        "hour": ("hora", "horas"),
        "minute": ("minuto", "minutos"),
        "second": ("segundo", "segundos"),
    },
}


__all__ = ["Lang"]
