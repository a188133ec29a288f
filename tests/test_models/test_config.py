"""Tests for PromptConfig defaults and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from numprompt.models.config import PromptConfig


class TestPromptConfigDefaults:
    def test_threshold_is_ten(self) -> None:
        assert PromptConfig().threshold == 10.0

    def test_default_messages(self) -> None:
        config = PromptConfig()
        assert config.prompt == "Please enter a number above 10: "
        assert config.invalid_message == "Invalid input. Please enter a valid number.\n"
        assert config.too_low_message == "That doesn't fit! Try again!\n"
        assert config.success_message == "Thanks, that works! {value} is a great choice!\n"

    def test_precision_is_two(self) -> None:
        assert PromptConfig().precision == 2


class TestPromptConfigValidation:
    def test_frozen(self) -> None:
        config = PromptConfig()
        with pytest.raises(ValidationError):
            config.threshold = 5.0

    def test_negative_precision_rejected(self) -> None:
        with pytest.raises(ValidationError, match="precision"):
            PromptConfig(precision=-1)

    @pytest.mark.parametrize("threshold", [float("inf"), float("nan")])
    def test_non_finite_threshold_rejected(self, threshold: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            PromptConfig(threshold=threshold)

    def test_success_message_needs_placeholder(self) -> None:
        with pytest.raises(ValidationError, match="placeholder"):
            PromptConfig(success_message="Thanks!\n")
