"""Line-oriented console input and output for the interactive menus."""

from __future__ import annotations

import sys
from typing import TextIO

INVALID_INPUT = "invalid input!, try again\n"


class Console:
    """Reads answers from one stream and writes prompts to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as is."""
        self.stdout.write(text)

    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and return the next line without its line ending.

        Raises EOFError when the input is exhausted.
        """
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        """Ask until the answer is a whole number and return it."""
        while True:
            answer = self.read_line(prompt)
            try:
                return int(answer.strip())
            except ValueError:
                self.write(INVALID_INPUT)

    def choose_index(self, prompt: str, count: int) -> int:
        """Ask for a number from 1 to count and return it as a zero-based index."""
        if count <= 0:
            raise ValueError("nothing to choose from")
        while True:
            choice = self.read_int(prompt)
            if 1 <= choice <= count:
                return choice - 1
            self.write(INVALID_INPUT)