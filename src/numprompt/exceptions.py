"""numprompt exception hierarchy.

All numprompt-specific exceptions inherit from NumPromptError.
"""


class NumPromptError(Exception):
    """Base exception for all numprompt errors."""


class InvalidNumberError(NumPromptError):
    """Raised when the next token on the stream is not a decimal number.

    Recovered inside the prompt loop: the rest of the line is discarded
    and the user is asked again.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Not a valid number: {text!r}")


class InputExhaustedError(NumPromptError):
    """Raised when the input stream ends before a number could be read."""

    def __init__(self, attempts: int = 0) -> None:
        self.attempts = attempts
        super().__init__(
            f"Input ended before an accepted number was entered (attempts: {attempts})"
        )
