#!/usr/bin/env python3
"""
Numeral Words — Entry Point
===========================

Prints the cardinal, ordinal and short ordinal forms of some numbers.

Usage:
    python main.py                          # Built-in samples
    python main.py 42 1000001 -7            # Your own numbers
    NUMERAL_LOG_LEVEL=DEBUG python main.py  # Show conversion logging
"""

from __future__ import annotations

import logging
import os
import sys

from numeral_words.exceptions import NumeralError
from numeral_words.numeral import cardinalize, ordinalize

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


SAMPLE_NUMBERS = [0, 1, 12, 21, 102, 1234, 1_000_000, 1_000_001, -5, 10**63]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_numeral(raw: str | int) -> bool:
    """Print all three forms of one number.

    Returns:
        True if the number could be spelled.
    """
    try:
        cardinal = cardinalize(raw)
        ordinal = ordinalize(raw)
        short = ordinalize(raw, short=True)
    except NumeralError as exc:
        print(f"  {_RED}[{exc.code}]{_RESET} {raw}: {exc}", file=sys.stderr)
        return False

    print(f"  {_BOLD}{raw}{_RESET}")
    print(f"    Cardinal:  {cardinal}")
    print(f"    Ordinal:   {ordinal}")
    print(f"    Short:     {_DIM}{short}{_RESET}")
    return True


# ─── Main ────────────────────────────────────────────────────────────


def log_level(name: str) -> int:
    """Map a level name like "debug" to its number; unknown names mean WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Spell each argument (or the samples) and return an exit code."""
    logging.basicConfig(
        level=log_level(os.environ.get("NUMERAL_LOG_LEVEL", "WARNING")),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args = sys.argv[1:] if argv is None else argv
    numbers: list[str | int] = list(args) if args else list(SAMPLE_NUMBERS)

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMERAL WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    results = [print_numeral(n) for n in numbers]

    print(f"{'=' * _WIDTH}\n")
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
