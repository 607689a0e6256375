"""Render a single three-digit group (0-999) as words."""

from __future__ import annotations

from .models import Lexicon


def render_chunk(chunk: int, lexicon: Lexicon) -> str:
    """Convert an integer in [0, 999] to words.

    Examples (English):
        7   → "seven"
        15  → "fifteen"
        234 → "two hundred thirty-four"

    Persian and Arabic join the hundreds and the tens/units with the
    conjunction word ("دویست و سی و چهار"). Zero renders as an empty string;
    callers must not attach a scale word to it.

    Raises:
        ValueError: If chunk is outside [0, 999].
    """
    if not 0 <= chunk <= 999:
        raise ValueError(f"Chunk must be in [0, 999], got {chunk}")

    hundreds, remainder = divmod(chunk, 100)
    tens, units = divmod(remainder, 10)
    parts: list[str] = []

    if hundreds:
        parts.append(lexicon.hundreds[hundreds])

    if remainder:
        if remainder < 10:
            parts.append(lexicon.units[units])
        elif remainder < 20:
            parts.append(lexicon.teens[remainder - 10])
        elif units:
            parts.append(
                f"{lexicon.tens[tens]}{lexicon.compound_separator}{lexicon.units[units]}"
            )
        else:
            parts.append(lexicon.tens[tens])

    if len(parts) > 1 and lexicon.conjunction:
        return f" {lexicon.conjunction} ".join(parts)
    return " ".join(parts)
