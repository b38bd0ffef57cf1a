"""Shared test fixtures."""
import pytest
import structlog

from fraction_words.locales.en import ENGLISH


@pytest.fixture
def english():
    return ENGLISH


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()
