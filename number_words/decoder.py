"""
Convert spoken-word numbers back to integers.

Supported patterns:
    "one thousand two hundred thirty four"  (en) → 1234
    "One thousand, two hundred thirty-four" (en) → 1234
    "یک هزار و دویست و سی و چهار"           (fa) → 1234
    "ألف و مائتان و أربعة و ثلاثون"          (ar) → 1234
    "thousand billion"                      (en) → 1,000,000,000,000

Decoding is lenient: unknown tokens are skipped, and only text with no
recognised token at all fails.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache, reduce

from .exceptions import EmptyOrBlankInput, NoValidNumber, UnsupportedLanguage
from .lexicon import get_lexicon, get_reverse_lexicon
from .models import Language, Lexicon

logger = logging.getLogger(__name__)


# ─── Parse State ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class ParseState:
    """Accumulator threaded through the token fold."""

    total: int = 0  # Completed scale groups
    current_group: int = 0  # Partial sum waiting for the next scale word
    has_valid_number: bool = False  # At least one token was recognised

    @property
    def value(self) -> int:
        return self.total + self.current_group


def apply_value(state: ParseState, value: int, lexicon: Lexicon) -> ParseState:
    """Fold one recognised token value into the running state.

    - scale word (>= 1000) → flush ``group * scale`` into total (a bare scale
      word counts as one of it), reset the group
    - hundred              → multiply the group, or start it at the hundred
      value. English "hundred" is a bare multiplier (== 100); Persian and
      Arabic hundreds are already fused values (دویست = 200), so every
      value in [100, 999] takes this branch for them
    - anything else        → add to the group
    """
    group = state.current_group
    if value >= 1000:
        multiplier = group if group > 0 else 1
        return ParseState(state.total + multiplier * value, 0, True)
    if _is_hundred(value, lexicon):
        return ParseState(state.total, group * value if group > 0 else value, True)
    return ParseState(state.total, group + value, True)


def fold_values(values: Iterable[int], lexicon: Lexicon) -> ParseState:
    """Left-fold token values over a fresh ParseState."""
    return reduce(lambda state, value: apply_value(state, value, lexicon), values, ParseState())


def _is_hundred(value: int, lexicon: Lexicon) -> bool:
    if lexicon.hundred_is_multiplier:
        return value == 100
    return value >= 100


# ─── Text Preparation ────────────────────────────────────────────────


def normalize_compound_scales(text: str, lang: Language | str) -> str:
    """Collapse "thousand billion" → "trillion" and "thousand million" →
    "billion" in the language's own vocabulary, tolerating any whitespace
    between the two words."""
    lexicon = get_lexicon(lang)
    for pattern, replacement in _compound_patterns(lexicon.language):
        text = pattern.sub(replacement, text)
    return text


def tokenize(text: str, lang: Language | str) -> list[str]:
    """Normalise compound scales, split into tokens and rejoin multi-word
    lexicon entries (e.g. Arabic "ثلاثة عشر")."""
    lexicon = get_lexicon(lang)
    text = normalize_compound_scales(text, lexicon.language)
    if lexicon.case_insensitive:
        text = text.lower()
    tokens = [t for t in re.split(lexicon.token_pattern, text) if t]
    return _merge_phrases(tokens, get_reverse_lexicon(lexicon.language))


@lru_cache(maxsize=None)
def _compound_patterns(language: Language) -> tuple[tuple[re.Pattern[str], str], ...]:
    lexicon = get_lexicon(language)
    flags = re.IGNORECASE if lexicon.case_insensitive else 0
    return tuple(
        (re.compile(r"\s+".join(re.escape(w) for w in phrase.split()), flags), replacement)
        for phrase, replacement in lexicon.compound_scales
    )


def _merge_phrases(tokens: list[str], reverse: Mapping[str, int]) -> list[str]:
    """Greedily join adjacent tokens that form a known phrase, longest first."""
    longest = max(len(word.split()) for word in reverse)
    merged: list[str] = []
    i = 0
    while i < len(tokens):
        for size in range(min(longest, len(tokens) - i), 1, -1):
            phrase = " ".join(tokens[i : i + size])
            if phrase in reverse:
                merged.append(phrase)
                i += size
                break
        else:
            merged.append(tokens[i])
            i += 1
    return merged


# ─── Main Converters ─────────────────────────────────────────────────


def parse_words(text: str | None, lang: Language | str = "fa") -> int:
    """Convert spoken-word text to an integer, raising on failure.

    Args:
        text: e.g. "one thousand two hundred thirty four"
        lang: "fa", "en" or "ar".

    Returns:
        1234

    Raises:
        UnsupportedLanguage: If lang is not a supported tag.
        EmptyOrBlankInput: If the text is empty or whitespace only.
        NoValidNumber: If no token in the text is a number word.

    Algorithm:
        A leading minus word marks the result negative. Every other token is
        looked up in the reverse lexicon; conjunctions and unknown tokens are
        skipped, and the recognised values are folded into a ParseState
        (see apply_value). The answer is ``total + current_group``.
    """
    lexicon = get_lexicon(lang)
    if text is None or not str(text).strip():
        raise EmptyOrBlankInput("Empty text cannot be converted to a number")

    source = str(text).strip()
    tokens = tokenize(source, lexicon.language)
    reverse = get_reverse_lexicon(lexicon.language)

    minus = lexicon.minus.lower() if lexicon.case_insensitive else lexicon.minus
    negative = bool(tokens) and tokens[0] == minus
    if negative:
        tokens = tokens[1:]

    values: list[int] = []
    for token in tokens:
        if token == lexicon.conjunction:
            continue
        value = reverse.get(token)
        if value is None:
            logger.debug("Skipping unrecognized token %r in %r", token, source)
            continue
        values.append(value)

    state = fold_values(values, lexicon)
    if not state.has_valid_number:
        raise NoValidNumber(
            f"No number words found in: {source!r}",
            details={"text": source, "language": lexicon.language.value},
        )

    return -state.value if negative else state.value


def words_to_number(text: str | None, lang: Language | str = "fa") -> int | None:
    """Convert spoken-word text to an integer, or None if nothing was found.

    Never raises for empty input, gibberish or an unknown language; those
    all come back as None.
    """
    try:
        return parse_words(text, lang)
    except UnsupportedLanguage as e:
        logger.warning("Cannot decode %r: %s", text, e)
        return None
    except (EmptyOrBlankInput, NoValidNumber) as e:
        logger.debug("Cannot decode %r: %s", text, e)
        return None
