"""
Custom exception hierarchy for number/word conversion.

Each exception type carries a machine-readable code so callers (and the
HTTP layer) can report failures precisely without parsing messages.
"""

from __future__ import annotations


class NumberWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnsupportedLanguage(NumberWordsError, ValueError):
    """The language tag is not one of the supported lexicons."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LANGUAGE", message, details)


class EmptyOrBlankInput(NumberWordsError):
    """The text to decode is empty or whitespace only."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("EMPTY_INPUT", message, details)


class NoValidNumber(NumberWordsError):
    """The text contains no token the reverse lexicon recognises."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NO_VALID_NUMBER", message, details)


class MagnitudeOutOfRange(NumberWordsError, ValueError):
    """The number needs a scale word beyond the largest one defined."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OUT_OF_RANGE", message, details)
