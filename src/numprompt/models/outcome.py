"""Outcome types for the prompt loop.

Verdict classifies a single read attempt.
Attempt records one rejected or accepted read.
PromptResult is what InputValidator.run() returns once a value is accepted.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Verdict(str, enum.Enum):
    """How one read attempt was judged."""

    ACCEPTED = "accepted"
    TOO_LOW = "too_low"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Attempt:
    """One pass through the prompt loop.

    Attributes:
        number: 1-based attempt index.
        verdict: How the input was judged.
        raw: The numeric text that was read, or the discarded text for
            an invalid attempt.
        value: The parsed number, None when the input was invalid.
    """

    number: int
    verdict: Verdict
    raw: str
    value: float | None = None


@dataclass(frozen=True)
class PromptResult:
    """Result of a completed prompt loop.

    Attributes:
        value: The accepted number.
        attempts: Total attempts (1 = first input accepted).
        history: Rejected attempts in order (None if the first input was accepted).
    """

    value: float
    attempts: int
    history: list[Attempt] | None = None
