"""
Number Words — FastAPI Server
=============================

RESTful API for spelling numbers out and reading them back.

Endpoints:
    POST /to-words          Convert a number to words
    POST /to-number         Convert words to a number
    POST /verify            Cross-check a number against its written form
    GET  /health            Health check / readiness probe

Configuration (environment or .env):
    NUMBER_WORDS_DEFAULT_LANG   Language used when a request omits one (default: fa)

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from number_words import __version__
from number_words.decoder import words_to_number
from number_words.encoder import number_to_words
from number_words.exceptions import MagnitudeOutOfRange
from number_words.lexicon import get_reverse_lexicon
from number_words.models import ConsistencyReport, Language, Severity
from number_words.validators import check_consistency

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LANG_ENV = "NUMBER_WORDS_DEFAULT_LANG"


# ─── Application Lifespan (resolve config, pre-warm lexicons) ───────

_default_language: Language | None = None


def load_default_language() -> Language:
    """Read the default language from the environment (fails on a bad tag)."""
    return Language.parse(os.environ.get(DEFAULT_LANG_ENV, Language.PERSIAN.value))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve the default language and build the reverse lexicons on startup."""
    global _default_language  # noqa: PLW0603
    _default_language = load_default_language()
    for language in Language:
        get_reverse_lexicon(language)
    logger.info("Number Words API ready (default language: %s)", _default_language.value)
    yield
    _default_language = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Words API",
    description=(
        "Bidirectional conversion between integers and their spoken-word form "
        "in Persian, English and Arabic."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ToWordsRequest(BaseModel):
    number: Union[int, float] = Field(
        ...,
        description="The number to spell out; any fractional part is discarded.",
        json_schema_extra={"example": 1234},
    )
    lang: Optional[Language] = None


class ToWordsResponse(BaseModel):
    number: Union[int, float]
    lang: Language
    words: str


class ToNumberRequest(BaseModel):
    text: str = Field(
        ...,
        description="Spoken-word text to read back as a number.",
        json_schema_extra={"example": "one thousand two hundred thirty four"},
    )
    lang: Optional[Language] = None


class ToNumberResponse(BaseModel):
    text: str
    lang: Language
    number: Optional[int] = Field(description="null when no number word was recognised")


class VerifyRequest(BaseModel):
    number: int
    words: str = Field(..., min_length=1)
    lang: Optional[Language] = None


class VerifyResponse(ConsistencyReport):
    """API-facing report (inherits all fields from ConsistencyReport)."""

    error_count: int
    warning_count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    default_language: Language
    languages: list[Language]


# ─── Helpers ─────────────────────────────────────────────────────────


def _resolve_language(lang: Language | None) -> Language:
    if _default_language is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return lang or _default_language


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/to-words",
    summary="Convert a number to words",
    tags=["Conversion"],
    responses={
        422: {"description": "Number out of range (|n| > 999,999,999,999,999)"},
        503: {"description": "Service not yet initialised"},
    },
)
def to_words(request: ToWordsRequest) -> ToWordsResponse:
    lang = _resolve_language(request.lang)
    try:
        words = number_to_words(request.number, lang)
    except MagnitudeOutOfRange as e:
        raise HTTPException(
            status_code=422,
            detail={"code": e.code, "message": str(e), "details": e.details},
        ) from e
    return ToWordsResponse(number=request.number, lang=lang, words=words)


@app.post(
    "/to-number",
    summary="Convert words to a number",
    tags=["Conversion"],
    responses={503: {"description": "Service not yet initialised"}},
)
def to_number(request: ToNumberRequest) -> ToNumberResponse:
    """Read spoken-word text back as an integer.

    Unknown words are skipped; `number` is `null` only when nothing in the
    text was recognised.
    """
    lang = _resolve_language(request.lang)
    return ToNumberResponse(text=request.text, lang=lang, number=words_to_number(request.text, lang))


@app.post(
    "/verify",
    summary="Cross-check a number against its written form",
    tags=["Validation"],
    responses={503: {"description": "Service not yet initialised"}},
)
def verify(request: VerifyRequest) -> VerifyResponse:
    """Returns a report with:
    - **is_valid**: `true` if the words and the number agree
    - **findings**: errors, warnings and info items
    - **canonical_words**: how the number is spelled in the requested language
    """
    lang = _resolve_language(request.lang)
    report = check_consistency(request.number, request.words, lang)
    return VerifyResponse(
        **report.model_dump(),
        error_count=sum(1 for f in report.findings if f.severity == Severity.ERROR),
        warning_count=sum(1 for f in report.findings if f.severity == Severity.WARNING),
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    lang = _resolve_language(None)
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_language=lang,
        languages=list(Language),
    )
