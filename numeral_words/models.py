"""
Pydantic models for spelled-out numbers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NumeralStyle(str, Enum):
    """Which register to spell a number in."""

    CARDINAL = "cardinal"  # "twenty one"
    ORDINAL = "ordinal"  # "twenty first"
    SHORT_ORDINAL = "short_ordinal"  # "21st"


class NumeralResult(BaseModel):
    """A number together with its spelling and the period words behind it."""

    number: int  # After truncation to an integer
    style: NumeralStyle
    text: str
    periods: list[str] = Field(default_factory=list)  # Most-significant first, no sign
