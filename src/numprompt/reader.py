"""Decimal number reader with scanf ``%f`` semantics.

NumberReader pulls characters one at a time from a text stream so that
nothing past the number it returns is consumed. Characters that follow
a numeric prefix (``abc`` in ``12abc``) stay pending for the next read.

Scanning is a small state machine over ASCII characters only, so the
cost of a read is linear in the length of the token.
"""

from __future__ import annotations

import logging
from typing import TextIO

from numprompt.exceptions import InputExhaustedError, InvalidNumberError

logger = logging.getLogger(__name__)

# isspace() for the C locale; Unicode spaces are not skipped.
_WHITESPACE = frozenset(" \t\n\v\f\r")

_CHAR_CLASSES = {
    **{d: "digit" for d in "0123456789"},
    "+": "sign",
    "-": "sign",
    ".": "dot",
    "e": "exp",
    "E": "exp",
}

# (state, character class) -> next state, for the numeric (non-word) spelling.
_TRANSITIONS = {
    ("start", "sign"): "sign",
    ("start", "digit"): "int",
    ("start", "dot"): "dot",
    ("sign", "digit"): "int",
    ("sign", "dot"): "dot",
    ("int", "digit"): "int",
    ("int", "dot"): "frac",
    ("int", "exp"): "exp",
    ("dot", "digit"): "frac",
    ("frac", "digit"): "frac",
    ("frac", "exp"): "exp",
    ("exp", "sign"): "exp_sign",
    ("exp", "digit"): "exp_int",
    ("exp_sign", "digit"): "exp_int",
    ("exp_int", "digit"): "exp_int",
}

_ACCEPTING = frozenset({"int", "frac", "exp_int"})

_WORDS = ("infinity", "nan")
_ACCEPTED_WORDS = frozenset({"inf", "infinity", "nan"})


class NumberReader:
    """Reads whitespace-separated decimal numbers from a text stream.

    The stream only needs a ``read(1)`` method. It is never closed here.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: list[str] = []

    def _getc(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1)

    def _ungetc(self, text: str) -> None:
        self._pushback.extend(reversed(text))

    def read_number(self) -> tuple[float, str]:
        """Read the next number from the stream.

        Leading whitespace (newlines included) is skipped. The longest
        prefix that forms a number is consumed; anything after it is left
        on the stream.

        Returns:
            The parsed value and the text it was parsed from.

        Raises:
            InputExhaustedError: The stream ended before a token started.
            InvalidNumberError: The next token does not start with a number.
                Nothing is consumed in that case, so the caller decides
                what to discard.
        """
        ch = self._getc()
        while ch in _WHITESPACE:
            ch = self._getc()
        if not ch:
            raise InputExhaustedError()

        state = "start"
        chars: list[str] = []
        # length of the longest prefix of chars that is a complete number
        accepted = 0
        while ch:
            if state == "word" or (state in ("start", "sign") and ch in "iInN"):
                word = "".join(chars).lstrip("+-").lower() + ch.lower()
                if not any(w.startswith(word) for w in _WORDS):
                    break
                state = "word"
            else:
                state = _TRANSITIONS.get((state, _CHAR_CLASSES.get(ch)))
                if state is None:
                    break
            chars.append(ch)
            if state in _ACCEPTING or (state == "word" and word in _ACCEPTED_WORDS):
                accepted = len(chars)
            ch = self._getc()

        self._ungetc(ch)
        self._ungetc("".join(chars[accepted:]))
        if not accepted:
            raise InvalidNumberError("".join(chars) or ch)

        number = "".join(chars[:accepted])
        return float(number), number

    def discard_line(self) -> str:
        """Consume up to and including the next newline, or to end-of-stream.

        Returns the discarded text.
        """
        chars: list[str] = []
        ch = self._getc()
        while ch:
            chars.append(ch)
            if ch == "\n":
                break
            ch = self._getc()
        discarded = "".join(chars)
        logger.debug("Discarded %r", discarded)
        return discarded
