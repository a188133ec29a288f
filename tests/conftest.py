"""Shared test fixtures for numprompt.

Provides in-memory streams and a factory for validators wired to them.
"""

import io

import pytest

from numprompt.models.config import PromptConfig
from numprompt.validator import InputValidator

PROMPT = "Please enter a number above 10: "
INVALID = "Invalid input. Please enter a valid number.\n"
TOO_LOW = "That doesn't fit! Try again!\n"


def success(rendered: str) -> str:
    return f"Thanks, that works! {rendered} is a great choice!\n"


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_validator(stdout: io.StringIO):
    """Build an InputValidator reading ``text`` and writing to ``stdout``."""

    def _make(text: str, config: PromptConfig | None = None) -> InputValidator:
        return InputValidator(stdin=io.StringIO(text), stdout=stdout, config=config)

    return _make
