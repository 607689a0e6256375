"""
Convert integers to their spoken-word form in Persian, English or Arabic.

Supported patterns:
    number_to_words(1234, "fa")   → "یک هزار و دویست و سی و چهار"
    number_to_words(1234, "en")   → "One thousand, two hundred thirty-four"
    number_to_words(1000, "ar")   → "ألف"
    number_to_words(-5, "en")     → "Minus five"
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal

from .chunks import render_chunk
from .exceptions import MagnitudeOutOfRange
from .lexicon import get_lexicon
from .models import Language, Lexicon

logger = logging.getLogger(__name__)

# Largest magnitude with a scale word (999 trillion)
MAX_MAGNITUDE = 999_999_999_999_999


def number_to_words(number: int | float | Decimal, lang: Language | str = "fa") -> str:
    """Convert a number to words.

    Args:
        number: The value to spell out. Any fractional part is discarded
            (truncated toward zero, never rounded).
        lang: "fa", "en" or "ar".

    Returns:
        The spoken-word form, e.g. "One thousand, two hundred thirty-four".

    Raises:
        UnsupportedLanguage: If lang is not a supported tag.
        MagnitudeOutOfRange: If |number| exceeds 999,999,999,999,999 or is
            not finite.
        TypeError: If number is not an int, float or Decimal.

    Algorithm:
        The magnitude is split into base-1000 chunks, least significant
        first. Each non-zero chunk is rendered and followed by the scale
        word of its position; phrases are collected most significant first
        and joined with the language's group separator.
    """
    lexicon = get_lexicon(lang)
    value = _truncate(number)

    if value == 0:
        return _capitalize(lexicon.zero, lexicon)

    magnitude = abs(value)
    if magnitude > MAX_MAGNITUDE:
        raise MagnitudeOutOfRange(
            f"{value} is beyond the largest supported magnitude ({MAX_MAGNITUDE:,})",
            details={"number": str(value), "max_magnitude": MAX_MAGNITUDE},
        )

    phrases: list[str] = []
    index = 0
    while magnitude > 0:
        magnitude, chunk = divmod(magnitude, 1000)
        if chunk:
            phrases.insert(0, _chunk_phrase(chunk, index, lexicon))
        index += 1

    result = lexicon.group_separator.join(phrases)
    if value < 0:
        result = f"{lexicon.minus} {result}"
    result = _capitalize(result, lexicon)

    logger.debug("Encoded %s (%s) as %r", value, lexicon.language.value, result)
    return result


# ─── Helpers ─────────────────────────────────────────────────────────


def _chunk_phrase(chunk: int, index: int, lexicon: Lexicon) -> str:
    """Render one chunk with the scale word for its position."""
    scale = lexicon.scales[index]
    if lexicon.singular_scale_elision and chunk == 1 and index > 0:
        return scale
    words = render_chunk(chunk, lexicon)
    return f"{words} {scale}" if scale else words


def _capitalize(text: str, lexicon: Lexicon) -> str:
    if not lexicon.capitalize:
        return text
    return text[:1].upper() + text[1:]


def _truncate(number: int | float | Decimal) -> int:
    """Drop any fractional part without rounding."""
    if isinstance(number, bool) or not isinstance(number, (int, float, Decimal)):
        raise TypeError(f"Expected an int, float or Decimal, got {type(number).__name__}")
    if isinstance(number, int):
        return number
    finite = number.is_finite() if isinstance(number, Decimal) else math.isfinite(number)
    if not finite:
        raise MagnitudeOutOfRange(
            f"{number} is not a finite number",
            details={"number": str(number), "max_magnitude": MAX_MAGNITUDE},
        )
    return int(number)
