"""Line-oriented console that reads whitespace-separated values."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_WORD = re.compile(r"\S+")
_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class Console:
    """Reads words, integers and floats from a text stream and writes prompts.

    Values are taken the way ``scanf`` takes them: leading whitespace, newlines
    included, is skipped, and a number is read from the start of the input,
    leaving any trailing characters for the next read.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text and flush it so prompts show before input is read."""
        self._stdout.write(text)
        self._stdout.flush()

    def _fill(self) -> str:
        """Return pending input with leading whitespace removed, reading lines as needed."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                return stripped
            line = self._stdin.readline()
            if not line:
                self._pending = ""
                raise EOFError("end of input")
            self._pending = line

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        text = self._fill()
        match = pattern.match(text)
        if match is None:
            raise ValueError(f"expected {what}, got {text.split()[0]!r}")
        self._pending = text[match.end():]
        return match.group()

    def read_token(self) -> str:
        """Read the next whitespace-delimited word."""
        return self._take(_WORD, "a word")

    def read_int(self) -> int:
        """Read a decimal integer from the start of the pending input."""
        return int(self._take(_INT, "an integer"))

    def read_float(self) -> float:
        """Read a floating-point number from the start of the pending input."""
        return float(self._take(_FLOAT, "a number"))


def init_io(console: Console) -> None:
    """Announce that the I/O subsystem is ready."""
    console.write("I/O inicializado.\n")


def update_io(console: Console) -> None:
    """Announce an I/O update."""
    console.write("Actualizando I/O.\n")