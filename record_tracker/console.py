"""
Line-oriented console used by the activity manager and the activities.

Writes go through `typer.echo` so output behaves the same as the rest of
the CLI; reads pull one line at a time from a text stream. Any pair of
text streams works, which keeps the REPL testable with `io.StringIO`.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

import typer


class Console:
    """
    Read lines from `stdin` and write text to `stdout`.

    Parameters
    ----------
    stdin : TextIO | None
        Source of input lines. Defaults to `sys.stdin` at call time.
    stdout : TextIO | None
        Destination for prompts and messages. Defaults to `sys.stdout` at call time.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self.at_eof = False

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str = "", nl: bool = True) -> None:
        typer.echo(text, file=self.stdout, nl=nl)

    def prompt(self, text: str) -> None:
        """Write `text` with no trailing newline and flush it."""
        self.write(text, nl=False)
        self.stdout.flush()

    def read_line(self) -> str:
        """
        Read one line without its line terminator.

        End-of-input yields an empty string and sets `at_eof`.
        """
        line = self.stdin.readline()
        self.at_eof = line == ""
        return line.rstrip("\r\n")


__all__ = ["Console"]
