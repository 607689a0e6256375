"""
Pydantic models for lexicons and consistency reports.

Lexicons are frozen records validated at construction: a table with the
wrong number of entries fails loudly at import, not silently at render time.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .exceptions import UnsupportedLanguage


# ─── Languages ──────────────────────────────────────────────────────


class Language(str, Enum):
    """The closed set of supported languages, valued by their tag."""

    PERSIAN = "fa"
    ENGLISH = "en"
    ARABIC = "ar"

    @classmethod
    def parse(cls, tag: Language | str) -> Language:
        """Resolve a tag such as ``"en"`` (or a Language) to a Language.

        Raises:
            UnsupportedLanguage: If the tag is not fa, en or ar.
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            for language in cls:
                if language.value == tag.strip().lower():
                    return language
        supported = ", ".join(lang.value for lang in cls)
        raise UnsupportedLanguage(
            f"Unsupported language {tag!r}; expected one of: {supported}",
            details={"language": str(tag), "supported": [lang.value for lang in cls]},
        )


# ─── Lexicon ────────────────────────────────────────────────────────


class Lexicon(BaseModel):
    """Fixed word tables and grammar switches for one language.

    The five tables are indexed by digit: ``units[3]`` is "three",
    ``teens[2]`` is "twelve", ``hundreds[4]`` is "four hundred" (or the fused
    Persian/Arabic word), ``scales[2]`` is the million-tier word.
    Empty strings are placeholders for "no word needed".
    """

    model_config = ConfigDict(frozen=True)

    language: Language
    units: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    scales: tuple[str, ...]

    zero: str
    minus: str
    conjunction: Optional[str] = None  # Filler "and" word skipped when decoding
    compound_separator: str = " "  # Between tens and units: "thirty-four"
    group_separator: str = " "  # Between rendered chunks
    capitalize: bool = False
    singular_scale_elision: bool = False  # Arabic "ألف", not "واحد ألف"
    hundred_is_multiplier: bool = False  # English "hundred" multiplies the group
    case_insensitive: bool = False
    token_pattern: str = r"\s+"
    compound_scales: tuple[tuple[str, str], ...] = ()  # (phrase, replacement)
    aliases: tuple[tuple[str, int], ...] = ()  # Extra decoder vocabulary

    @field_validator("units", "teens", "tens", "hundreds")
    @classmethod
    def _ten_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != 10:
            raise ValueError(f"expected 10 entries, got {len(value)}")
        return value

    @field_validator("scales")
    @classmethod
    def _five_scales(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != 5:
            raise ValueError(f"expected 5 scale entries, got {len(value)}")
        return value

    @model_validator(mode="after")
    def _placeholders_are_empty(self) -> Lexicon:
        # Positions that never produce a word must stay empty
        if self.units[0] or self.tens[0] or self.tens[1] or self.hundreds[0] or self.scales[0]:
            raise ValueError(
                "units[0], tens[0], tens[1], hundreds[0] and scales[0] must be empty"
            )
        return self


# ─── Consistency Findings ───────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a consistency finding."""

    ERROR = "ERROR"  # Number and words disagree
    WARNING = "WARNING"  # Words could not be checked
    INFO = "INFO"  # Informational observation


class ValidationFinding(BaseModel):
    """A single finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # Machine-readable, e.g. "AMOUNT_MISMATCH"
    field: str  # "number" or "words"
    message: str  # Human-readable explanation
    details: dict = Field(default_factory=dict)


class ConsistencyReport(BaseModel):
    """Result of cross-checking a number against its written form."""

    language: Language
    number: int
    words: str
    is_valid: bool
    words_value: Optional[int] = None  # What the words decode to
    canonical_words: Optional[str] = None  # How the number is spelled
    findings: list[ValidationFinding] = Field(default_factory=list)
