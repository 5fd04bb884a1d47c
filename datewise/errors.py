"""Datewise exception hierarchy.

All Datewise-specific exceptions inherit from DatewiseError.
"""

from __future__ import annotations


class DatewiseError(Exception):
    """Base exception for all Datewise errors."""

    pass


class ValidationError(DatewiseError):
    """Invalid input values.

    Raised when an Instant is constructed from out-of-range components.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Nanosecond value outside 0-999999999
    """

    pass


class InvalidFormatError(DatewiseError):
    """Failed to parse a string representation.

    Every parsing failure is reported with this exception, whatever the
    cause: unrecognized structure, an ambiguous slash date without a year
    prefix, empty input, or a calendrically invalid date such as Feb 30.

    Attributes:
        text: The (trimmed) input that failed to parse.
        reason: Short description of why parsing failed.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"parsing date {text!r}: {reason}")


class InvalidTimezoneError(DatewiseError):
    """Invalid or unknown timezone.

    Raised when a zone name is empty, malformed, or absent from the
    IANA timezone database.

    Attributes:
        name: The zone name that could not be resolved.
    """

    def __init__(self, name: str, reason: str = "unknown timezone") -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"loading timezone {name!r}: {reason}")


class DateOverflowError(DatewiseError):
    """Arithmetic operation exceeded the representable range.

    Raised when a calculation produces an instant outside years 1-9999.

    Examples:
        - Adding 1 year to 9999-12-31
        - Subtracting 1 day from 0001-01-01
    """

    pass


__all__ = [
    "DatewiseError",
    "ValidationError",
    "InvalidFormatError",
    "InvalidTimezoneError",
    "DateOverflowError",
]
