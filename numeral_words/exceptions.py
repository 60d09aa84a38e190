"""
Exception hierarchy for numeral conversion.

Each exception type carries a machine-readable code plus details, so the
HTTP layer and the demo can report failures without parsing messages.
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(NumeralError):
    """The input cannot be turned into an integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class NumberTooLargeError(NumeralError):
    """The number needs a scale name beyond vigintillion."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMBER_TOO_LARGE", message, details)


class InvalidStyleError(NumeralError):
    """The requested numeral style is not one of NumeralStyle."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_STYLE", message, details)
