"""
Consistency checks between a number and its written-out form.

Documents such as cheques and contracts carry an amount twice, as digits
and as words, and the two must agree. These validators compare them with
pure code and report typed findings.

Each validator function:
  - Takes the number, the words, and the language
  - Returns a list of ValidationFinding objects (empty = all clear)
  - Is independently testable

validate_all() runs every check; check_consistency() wraps it in a report.
"""

from __future__ import annotations

from .decoder import tokenize, words_to_number
from .encoder import MAX_MAGNITUDE, number_to_words
from .lexicon import get_lexicon, get_reverse_lexicon
from .models import ConsistencyReport, Language, Severity, ValidationFinding


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_all(number: int, words: str, lang: Language | str = "fa") -> list[ValidationFinding]:
    """Run ALL validators and collect findings."""
    language = Language.parse(lang)
    findings: list[ValidationFinding] = []
    findings.extend(validate_range(number))
    findings.extend(validate_words_parseable(words, language))
    findings.extend(validate_amount_match(number, words, language))
    findings.extend(validate_unrecognized_tokens(words, language))
    return findings


def check_consistency(number: int, words: str, lang: Language | str = "fa") -> ConsistencyReport:
    """Cross-check a number against its words and build a report."""
    language = Language.parse(lang)
    findings = validate_all(number, words, language)
    canonical = number_to_words(number, language) if abs(number) <= MAX_MAGNITUDE else None

    return ConsistencyReport(
        language=language,
        number=number,
        words=words,
        is_valid=not any(f.severity == Severity.ERROR for f in findings),
        words_value=words_to_number(words, language),
        canonical_words=canonical,
        findings=findings,
    )


# ─── Individual Validators ───────────────────────────────────────────


def validate_range(number: int) -> list[ValidationFinding]:
    """The number must fit under the largest scale word (999 trillion)."""
    if abs(number) <= MAX_MAGNITUDE:
        return []
    return [
        ValidationFinding(
            severity=Severity.ERROR,
            code="MAGNITUDE_OUT_OF_RANGE",
            field="number",
            message=(
                f"{number:,} cannot be written out: the largest supported "
                f"magnitude is {MAX_MAGNITUDE:,}."
            ),
            details={"number": str(number), "max_magnitude": MAX_MAGNITUDE},
        )
    ]


def validate_words_parseable(words: str, lang: Language | str = "fa") -> list[ValidationFinding]:
    """Flag words that contain no recognisable number at all."""
    if words_to_number(words, lang) is not None:
        return []
    return [
        ValidationFinding(
            severity=Severity.WARNING,
            code="WORDS_UNPARSEABLE",
            field="words",
            message=f"Could not parse written number: '{words}'",
            details={"raw_words": words, "language": Language.parse(lang).value},
        )
    ]


def validate_amount_match(number: int, words: str, lang: Language | str = "fa") -> list[ValidationFinding]:
    """The number and the value of its words must agree exactly.

    Unparseable words are reported by validate_words_parseable, not here.
    """
    words_value = words_to_number(words, lang)
    if words_value is None or words_value == number:
        return []

    discrepancy = abs(number - words_value)
    return [
        ValidationFinding(
            severity=Severity.ERROR,
            code="AMOUNT_MISMATCH",
            field="number",
            message=(
                f"DISCREPANCY: {number:,} does not match the written form "
                f"\"{words}\" (={words_value:,}). Difference: {discrepancy:,}."
            ),
            details={
                "number": str(number),
                "words": words,
                "words_value": str(words_value),
                "discrepancy": str(discrepancy),
            },
        )
    ]


def validate_unrecognized_tokens(words: str, lang: Language | str = "fa") -> list[ValidationFinding]:
    """Report tokens the lenient decoder silently skipped.

    A stray word does not change the decoded value, but it may be an OCR
    artifact or a typo hiding a real number word.
    """
    if not words or not words.strip():
        return []

    lexicon = get_lexicon(lang)
    reverse = get_reverse_lexicon(lexicon.language)
    minus = lexicon.minus.lower() if lexicon.case_insensitive else lexicon.minus
    skipped = [
        token
        for token in tokenize(words, lexicon.language)
        if token not in reverse and token not in (lexicon.conjunction, minus)
    ]
    if not skipped:
        return []

    return [
        ValidationFinding(
            severity=Severity.INFO,
            code="UNRECOGNIZED_TOKENS",
            field="words",
            message=(
                f"Ignored {len(skipped)} unrecognized token(s) in '{words}': "
                f"{', '.join(skipped)}."
            ),
            details={"tokens": skipped, "count": len(skipped)},
        )
    ]
