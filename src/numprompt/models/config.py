"""Configuration model for numprompt.

PromptConfig holds the acceptance threshold and every message the prompt
loop writes. The defaults are the strings the ``numprompt`` command uses.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, field_validator


class PromptConfig(BaseModel):
    """Threshold, output strings and number formatting for the prompt loop."""

    model_config = {"frozen": True}

    threshold: float = 10.0
    prompt: str = "Please enter a number above 10: "
    invalid_message: str = "Invalid input. Please enter a valid number.\n"
    too_low_message: str = "That doesn't fit! Try again!\n"
    # ``{value}`` is replaced by the accepted number rendered with ``precision`` digits
    success_message: str = "Thanks, that works! {value} is a great choice!\n"
    precision: int = 2

    @field_validator("threshold")
    @classmethod
    def _finite_threshold(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"threshold must be finite, got {v}")
        return v

    @field_validator("precision")
    @classmethod
    def _non_negative_precision(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"precision must be >= 0, got {v}")
        return v

    @field_validator("success_message")
    @classmethod
    def _has_value_placeholder(cls, v: str) -> str:
        if "{value}" not in v:
            raise ValueError("success_message must contain a '{value}' placeholder")
        return v
