"""
Numeral Words — spell integers as English cardinal and ordinal numerals.

    cardinalize(1234)             → "one thousand, two hundred thirty four"
    ordinalize(21)                → "twenty first"
    ordinalize(102, short=True)   → "102nd"
"""

from .exceptions import (
    InvalidNumberError,
    InvalidStyleError,
    NumberTooLargeError,
    NumeralError,
)
from .models import NumeralResult, NumeralStyle
from .numeral import (
    cardinalise,
    cardinalize,
    ordinalise,
    ordinalize,
    short_ordinalize,
    spell,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidNumberError",
    "InvalidStyleError",
    "NumberTooLargeError",
    "NumeralError",
    "NumeralResult",
    "NumeralStyle",
    "cardinalise",
    "cardinalize",
    "ordinalise",
    "ordinalize",
    "short_ordinalize",
    "spell",
]
