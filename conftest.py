"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_language_env(monkeypatch):
    """Keep a developer's .env default language out of the tests."""
    monkeypatch.delenv("NUMBER_WORDS_DEFAULT_LANG", raising=False)
    yield
