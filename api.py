"""
Numeral Words — FastAPI Server
==============================

Read-only HTTP access to the numeral converter.

Endpoints:
    GET /cardinal/{number}              Cardinal numeral
    GET /ordinal/{number}?short=false   Ordinal numeral (or "21st" style)
    GET /health                         Health check / readiness probe

Configuration (environment or .env):
    NUMERAL_DELIMITER    Separator between periods (default ", ")

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from numeral_words import __version__
from numeral_words.exceptions import NumeralError
from numeral_words.models import NumeralResult, NumeralStyle
from numeral_words.numeral import DEFAULT_DELIMITER, spell

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)

DELIMITER = os.environ.get("NUMERAL_DELIMITER", DEFAULT_DELIMITER)


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Words API",
    description="Spell integers as English cardinal and ordinal numerals.",
    version=__version__,
)


# ─── Response Schemas ────────────────────────────────────────────────


class NumeralOut(NumeralResult):
    """API-facing numeral (inherits all fields from NumeralResult)."""

    model_config = {"json_schema_extra": {"example": {
        "number": 1234,
        "style": "cardinal",
        "text": "one thousand, two hundred thirty four",
        "periods": ["one thousand", "two hundred thirty four"],
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    delimiter: str = Field(description="Separator placed between periods")


# ─── Helpers ─────────────────────────────────────────────────────────


def _spell(number: int, style: NumeralStyle) -> NumeralOut:
    """Run the converter, mapping library errors to HTTP 422."""
    try:
        result = spell(number, style=style, delimiter=DELIMITER)
    except NumeralError as exc:
        logger.info("Rejected %s for %s: %s", number, style.value, exc)
        raise HTTPException(
            status_code=422,
            detail={"code": exc.code, "message": str(exc), "details": exc.details},
        ) from exc
    return NumeralOut.model_validate(result, from_attributes=True)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    "/cardinal/{number}",
    summary="Spell a number as a cardinal numeral",
    tags=["Numerals"],
    responses={422: {"description": "Number cannot be spelled"}},
)
def get_cardinal(number: int) -> NumeralOut:
    """Return e.g. **"one thousand, two hundred thirty four"** for 1234."""
    return _spell(number, NumeralStyle.CARDINAL)


@app.get(
    "/ordinal/{number}",
    summary="Spell a number as an ordinal numeral",
    tags=["Numerals"],
    responses={422: {"description": "Number cannot be spelled"}},
)
def get_ordinal(
    number: int,
    short: bool = Query(False, description='Return "21st" instead of "twenty first"'),
) -> NumeralOut:
    """Return e.g. **"twenty first"** for 21, or **"21st"** with `short=true`."""
    style = NumeralStyle.SHORT_ORDINAL if short else NumeralStyle.ORDINAL
    return _spell(number, style)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(status="healthy", version=__version__, delimiter=DELIMITER)
