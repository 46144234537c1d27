"""Line-oriented prompting over a pair of text streams."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Console:
    """Asks questions on one stream and reads answers from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def _readline(self) -> str:
        if self._pending:
            line, self._pending = self._pending, ""
            return line
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line

    def write(self, text: str) -> None:
        """Write text as it is."""
        self.stdout.write(text)

    def say(self, text: str = "") -> None:
        """Write text followed by a newline."""
        self.stdout.write(text + "\n")

    def ask(self, prompt: str) -> str:
        """Show the prompt and return the next line without its newline."""
        self.write(prompt)
        line = self._readline()
        return line[:-1] if line.endswith("\n") else line

    def ask_int(self, prompt: str) -> int:
        """Show the prompt and read an integer.

        Blank lines are skipped. One character after the number is consumed;
        anything beyond it is kept for the next question.
        """
        self.write(prompt)
        line = self._readline()
        while not line.strip():
            line = self._readline()
        match = _LEADING_INT.match(line)
        if match is None:
            raise ValueError(f"expected an integer, got {line.rstrip()!r}")
        self._pending = line[match.end() + 1:]
        return int(match.group(1))