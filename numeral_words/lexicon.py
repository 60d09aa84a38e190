"""
Word tables for English numerals.

All tables are built once at import time and exposed read-only
(MappingProxyType / tuple). Nothing in the package mutates them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── Cardinal Words ──────────────────────────────────────────────────

# 0 maps to "" so an empty group contributes no word.
CARDINALS: Mapping[int, str] = MappingProxyType({
    0: "",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
})

# ─── Short Ordinal Suffixes ──────────────────────────────────────────

# Keyed by the last two digits first (11-13), then by the last digit.
CARDINAL_TO_SHORT_ORDINAL: Mapping[int, str] = MappingProxyType({
    0: "th",
    1: "st",
    11: "th",
    2: "nd",
    12: "th",
    3: "rd",
    13: "th",
    4: "th",
    5: "th",
    6: "th",
    7: "th",
    8: "th",
    9: "th",
})

# ─── Ordinal Words ───────────────────────────────────────────────────

_BASE_ORDINALS: dict[str, str] = {
    "zero": "zeroth",
    "one": "first",
    "two": "second",
    "three": "third",
    "four": "fourth",
    "five": "fifth",
    "six": "sixth",
    "seven": "seventh",
    "eight": "eighth",
    "nine": "ninth",
    "ten": "tenth",
    "eleven": "eleventh",
    "twelve": "twelfth",
    "thirteen": "thirteenth",
    "fourteen": "fourteenth",
    "fifteen": "fifteenth",
    "sixteen": "sixteenth",
    "seventeen": "seventeenth",
    "eighteen": "eighteenth",
    "nineteen": "nineteenth",
    "twenty": "twentieth",
    "thirty": "thirtieth",
    "forty": "fortieth",
    "fifty": "fiftieth",
    "sixty": "sixtieth",
    "seventy": "seventieth",
    "eighty": "eightieth",
    "ninety": "ninetieth",
}

# ─── Scale Names ─────────────────────────────────────────────────────

# Indexed by period position; index 0 is the hundreds-tens-ones group.
SCALES: tuple[str, ...] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septemdecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
)

# Smallest magnitude that has no scale name.
MAX_MAGNITUDE: int = 1000 ** len(SCALES)

# Any word a cardinal sentence can end with: base words, "hundred", scales.
CARDINAL_TO_ORDINAL: Mapping[str, str] = MappingProxyType({
    **_BASE_ORDINALS,
    "hundred": "hundredth",
    **{scale: f"{scale}th" for scale in SCALES[1:]},
})
