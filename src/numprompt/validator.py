"""The read-validate-reprompt loop.

InputValidator asks for a number, rejects anything that does not parse,
reprompts on values at or below the threshold, and stops at the first
value strictly above it.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import click

from numprompt.exceptions import InputExhaustedError, InvalidNumberError
from numprompt.models.config import PromptConfig
from numprompt.models.outcome import Attempt, PromptResult, Verdict
from numprompt.reader import NumberReader

logger = logging.getLogger(__name__)


class InputValidator:
    """Prompts on ``stdout`` and reads from ``stdin`` until a value is accepted.

    Both streams default to the process streams, looked up when the
    validator is built, so the loop runs unchanged under
    ``click.testing.CliRunner``.

    Example::

        from numprompt import InputValidator
        result = InputValidator().run()
        print(result.value, result.attempts)
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        config: Optional[PromptConfig] = None,
    ) -> None:
        self.config = config or PromptConfig()
        self._reader = NumberReader(stdin if stdin is not None else sys.stdin)
        self._stdout = stdout

    def _emit(self, text: str) -> None:
        click.echo(text, file=self._stdout, nl=False)

    def evaluate(self, value: float) -> Verdict:
        """Judge a parsed value against the threshold. NaN is never accepted."""
        if value > self.config.threshold:
            return Verdict.ACCEPTED
        return Verdict.TOO_LOW

    def format_success(self, value: float) -> str:
        """Render the confirmation message for an accepted value."""
        rendered = "%.*f" % (self.config.precision, value)
        return self.config.success_message.replace("{value}", rendered)

    def run(self) -> PromptResult:
        """Prompt until a value above the threshold is entered.

        Invalid input discards the rest of its line and reprompts.

        Returns:
            PromptResult with the accepted value, the attempt count and
            the rejected attempts.

        Raises:
            InputExhaustedError: The input stream ended first.
        """
        history: list[Attempt] = []
        attempt_num = 0

        while True:
            attempt_num += 1
            self._emit(self.config.prompt)
            try:
                value, raw = self._reader.read_number()
            except InvalidNumberError as exc:
                discarded = self._reader.discard_line()
                logger.debug("Attempt %d rejected: %s", attempt_num, exc)
                history.append(
                    Attempt(attempt_num, Verdict.INVALID, discarded.rstrip("\r\n"))
                )
                self._emit(self.config.invalid_message)
                continue
            except InputExhaustedError:
                logger.debug("Input exhausted after %d attempt(s)", attempt_num - 1)
                raise InputExhaustedError(attempts=attempt_num - 1) from None

            verdict = self.evaluate(value)
            logger.debug("Attempt %d: %r -> %s", attempt_num, raw, verdict)

            if verdict is Verdict.ACCEPTED:
                self._emit(self.format_success(value))
                return PromptResult(
                    value=value,
                    attempts=attempt_num,
                    history=history if history else None,
                )

            history.append(Attempt(attempt_num, verdict, raw, value))
            self._emit(self.config.too_low_message)
