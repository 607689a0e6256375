"""
The fixed word tables for every supported language.

Forward lexicons drive the encoder; reverse lexicons (word → value) drive the
decoder. Both are built once and never mutated, so they can be shared freely
across threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from .models import Language, Lexicon

# ─── Persian ────────────────────────────────────────────────────────

PERSIAN = Lexicon(
    language=Language.PERSIAN,
    units=("", "یک", "دو", "سه", "چهار", "پنج", "شش", "هفت", "هشت", "نه"),
    teens=(
        "ده", "یازده", "دوازده", "سیزده", "چهارده",
        "پانزده", "شانزده", "هفده", "هجده", "نوزده",
    ),
    tens=("", "", "بیست", "سی", "چهل", "پنجاه", "شصت", "هفتاد", "هشتاد", "نود"),
    hundreds=(
        "", "یکصد", "دویست", "سیصد", "چهارصد",
        "پانصد", "ششصد", "هفتصد", "هشتصد", "نهصد",
    ),
    # The trillion tier is spoken as "thousand billion"
    scales=("", "هزار", "میلیون", "میلیارد", "هزار میلیارد"),
    zero="صفر",
    minus="منفی",
    conjunction="و",
    compound_separator=" و ",
    group_separator=" و ",
    compound_scales=(
        ("هزار میلیارد", "تریلیون"),
        ("هزار میلیون", "میلیارد"),
    ),
    aliases=(
        ("صد", 100),
        ("تریلیون", 1_000_000_000_000),
    ),
)

# ─── English ────────────────────────────────────────────────────────

ENGLISH = Lexicon(
    language=Language.ENGLISH,
    units=("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"),
    teens=(
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    ),
    tens=("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"),
    hundreds=(
        "", "one hundred", "two hundred", "three hundred", "four hundred",
        "five hundred", "six hundred", "seven hundred", "eight hundred", "nine hundred",
    ),
    scales=("", "thousand", "million", "billion", "trillion"),
    zero="zero",
    minus="minus",
    compound_separator="-",
    group_separator=", ",
    capitalize=True,
    hundred_is_multiplier=True,
    case_insensitive=True,
    token_pattern=r"[,\s-]+",
    compound_scales=(
        ("thousand billion", "trillion"),
        ("thousand million", "billion"),
    ),
    aliases=(("hundred", 100),),
)

# ─── Arabic ─────────────────────────────────────────────────────────

ARABIC = Lexicon(
    language=Language.ARABIC,
    units=("", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة"),
    teens=(
        "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
        "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
    ),
    tens=("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"),
    hundreds=(
        "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة",
        "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
    ),
    scales=("", "ألف", "مليون", "مليار", "ترليون"),
    zero="صفر",
    minus="سالب",
    conjunction="و",
    compound_separator=" و ",
    group_separator=" و ",
    singular_scale_elision=True,
    compound_scales=(
        ("ألف مليار", "ترليون"),
        ("ألف مليون", "مليار"),
    ),
)

_LEXICONS: dict[Language, Lexicon] = {
    Language.PERSIAN: PERSIAN,
    Language.ENGLISH: ENGLISH,
    Language.ARABIC: ARABIC,
}


# ─── Public API ──────────────────────────────────────────────────────


def get_lexicon(lang: Language | str) -> Lexicon:
    """Return the fixed lexicon for a language tag.

    Raises:
        UnsupportedLanguage: If the tag is not fa, en or ar.
    """
    return _LEXICONS[Language.parse(lang)]


def get_reverse_lexicon(lang: Language | str) -> Mapping[str, int]:
    """Return the read-only word → value mapping used by the decoder.

    Lookups for unknown words return None from ``.get``, which keeps them
    distinguishable from a recognised zero.
    """
    return _build_reverse(Language.parse(lang))


@lru_cache(maxsize=None)
def _build_reverse(language: Language) -> Mapping[str, int]:
    lexicon = _LEXICONS[language]
    entries: dict[str, int] = {lexicon.zero: 0}

    for digit in range(1, 10):
        entries[lexicon.units[digit]] = digit
    for digit, word in enumerate(lexicon.teens):
        entries[word] = 10 + digit
    for digit in range(2, 10):
        entries[lexicon.tens[digit]] = digit * 10
    # English hundreds are "<unit> hundred"; the bare "hundred" alias covers them
    if not lexicon.hundred_is_multiplier:
        for digit in range(1, 10):
            entries[lexicon.hundreds[digit]] = digit * 100
    for index, word in enumerate(lexicon.scales):
        if word:
            entries[word] = 1000**index
    entries.update(lexicon.aliases)

    if lexicon.case_insensitive:
        entries = {word.lower(): value for word, value in entries.items()}
    return MappingProxyType(entries)
