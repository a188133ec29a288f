"""numprompt: ask for a number above a threshold until one is entered.

Invalid input is rejected and the user is asked again; the first value
strictly above the threshold ends the loop.
"""

from numprompt._version import __version__

# Core entry point
from numprompt.validator import InputValidator
from numprompt.reader import NumberReader

# Configuration and outcome types
from numprompt.models.config import PromptConfig
from numprompt.models.outcome import Attempt, PromptResult, Verdict

# Exceptions
from numprompt.exceptions import (
    InputExhaustedError,
    InvalidNumberError,
    NumPromptError,
)

__all__ = [
    "__version__",
    "InputValidator",
    "NumberReader",
    "PromptConfig",
    "Attempt",
    "PromptResult",
    "Verdict",
    "InputExhaustedError",
    "InvalidNumberError",
    "NumPromptError",
]
