"""
Convert integers to English cardinal and ordinal numerals.

    cardinalize(1234)              → "one thousand, two hundred thirty four"
    ordinalize(1234)               → "one thousand, two hundred thirty fourth"
    ordinalize(1234, short=True)   → "1234th"
    cardinalize(-5)                → "negative five"

The number is split into periods of three digits. Each period is spelled
on its own, followed by its scale name (thousand, million, ...), and the
non-empty periods are joined most-significant first.

Floats and Decimals are truncated toward zero before conversion.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidNumberError, InvalidStyleError, NumberTooLargeError
from .lexicon import (
    CARDINAL_TO_ORDINAL,
    CARDINAL_TO_SHORT_ORDINAL,
    CARDINALS,
    MAX_MAGNITUDE,
    SCALES,
)
from .models import NumeralResult, NumeralStyle

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ", "
NEGATIVE_WORD = "negative"

_LAST_WORD = re.compile(r"(\w+)$")


# ─── Input Normalization ─────────────────────────────────────────────


def to_integer(num: object) -> int:
    """Truncate a number (or numeric string) toward zero.

    Raises:
        InvalidNumberError: If the value has no integer part (None, "abc",
            NaN, infinity).
    """
    try:
        if isinstance(num, str):
            return int(Decimal(num.strip()))
        return int(num)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError, InvalidOperation) as exc:
        raise InvalidNumberError(
            f"Cannot convert {num!r} to an integer",
            details={"value": repr(num), "type": type(num).__name__},
        ) from exc


# ─── Period Formatting ───────────────────────────────────────────────


def convert_tens(num: int) -> str:
    """Spell a number in the 0..99 range, e.g. 34 → "thirty four"."""
    tens = num % 100

    if tens <= 20:
        return CARDINALS[tens]

    words = [CARDINALS[(tens // 10) * 10]]
    if tens % 10:
        words.append(CARDINALS[tens % 10])
    return " ".join(words)


def convert_hundreds(num: int) -> str:
    """Spell a three digit group, e.g. 234 → "two hundred thirty four".

    Returns "" for a group of zeros.
    """
    words: list[str] = []
    hundreds = (num % 1000) // 100
    tens = num % 100

    if hundreds:
        words.append(convert_tens(hundreds))
        words.append("hundred")

    if tens:
        words.append(convert_tens(tens))

    return " ".join(words)


# ─── Numeral Assembly ────────────────────────────────────────────────


def convert_to_words(n: int) -> list[str]:
    """Split a non-negative integer into spelled periods.

    Returns one entry per period, most-significant first. A period of
    zeros is an empty string and carries no scale name:

        convert_to_words(1_000_001) → ["one million", "", "one"]

    Raises:
        NumberTooLargeError: If the number needs more periods than there
            are scale names.
    """
    if n < 0:
        raise ValueError(f"convert_to_words expects a non-negative integer, got {n}")

    words: list[str] = []

    for i, scale in enumerate(SCALES):
        word = convert_hundreds(n % 1000)
        if word and i:
            word = f"{word} {scale}"
        words.insert(0, word)

        n //= 1000
        if n == 0:
            return words

    raise NumberTooLargeError(
        f"Numbers with more than {len(SCALES)} periods have no scale name",
        details={"max_scale": SCALES[-1], "periods": len(SCALES)},
    )


def _check_magnitude(n: int) -> None:
    """Reject numbers with no scale name, whatever form they are spelled in."""
    if abs(n) >= MAX_MAGNITUDE:
        raise NumberTooLargeError(
            f"{n} exceeds the largest named scale ({SCALES[-1]})",
            details={"number": str(n), "max_scale": SCALES[-1]},
        )


def _periods(n: int) -> list[str]:
    """Non-empty period words for the absolute value of ``n``."""
    _check_magnitude(n)
    return [word for word in convert_to_words(abs(n)) if word]


def convert_numeral(num: object, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Spell ``num`` as a cardinal numeral, periods joined by ``delimiter``."""
    n = to_integer(num)
    periods = _periods(n)

    if not periods:
        return "zero"

    sentence = delimiter.join(periods)
    if n < 0:
        sentence = f"{NEGATIVE_WORD} {sentence}"

    logger.debug("Converted %d to %r", n, sentence)
    return sentence


# ─── Public API ──────────────────────────────────────────────────────


def cardinalize(num: object, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Convert a number to a cardinal numeral.

    Example:
        cardinalize(1234) → "one thousand, two hundred thirty four"
    """
    return convert_numeral(num, delimiter=delimiter)


def ordinalize(
    num: object, short: bool = False, delimiter: str = DEFAULT_DELIMITER
) -> str:
    """Convert a number to an ordinal numeral.

    Example:
        ordinalize(1234)              → "one thousand, two hundred thirty fourth"
        ordinalize(12, short=True)    → "12th"
    """
    if short:
        return f"{to_integer(num)}{short_ordinalize(num)}"

    sentence = convert_numeral(num, delimiter=delimiter)
    match = _LAST_WORD.search(sentence)
    if match is None:
        return sentence

    last_word = match.group(1)
    ordinal = CARDINAL_TO_ORDINAL.get(last_word)
    if ordinal is None:
        logger.warning("No ordinal form for %r in %r", last_word, sentence)
        return sentence

    return sentence[: match.start(1)] + ordinal


def short_ordinalize(num: object) -> str:
    """Pick the two-letter ordinal suffix: 1 → "st", 12 → "th", 22 → "nd".

    The sign is ignored, so -3 → "rd".

    Raises:
        NumberTooLargeError: Past vigintillion, as for the spelled forms.
    """
    n = to_integer(num)
    _check_magnitude(n)
    num_abs = abs(n)

    return (
        CARDINAL_TO_SHORT_ORDINAL.get(num_abs % 100)
        or CARDINAL_TO_SHORT_ORDINAL[num_abs % 10]
    )


def spell(
    num: object,
    style: NumeralStyle = NumeralStyle.CARDINAL,
    delimiter: str = DEFAULT_DELIMITER,
) -> NumeralResult:
    """Spell ``num`` in the requested style and return a typed result."""
    n = to_integer(num)
    try:
        style = NumeralStyle(style)
    except ValueError as exc:
        raise InvalidStyleError(
            f"Unknown numeral style {style!r}",
            details={"style": str(style), "choices": [s.value for s in NumeralStyle]},
        ) from exc

    if style is NumeralStyle.SHORT_ORDINAL:
        text = ordinalize(n, short=True)
    elif style is NumeralStyle.ORDINAL:
        text = ordinalize(n, delimiter=delimiter)
    else:
        text = cardinalize(n, delimiter=delimiter)

    return NumeralResult(number=n, style=style, text=text, periods=_periods(n))


# British spellings
cardinalise = cardinalize
ordinalise = ordinalize
