"""
Terminal collaborators of the session loop: screen clear, prompt marker,
line input, progress spinner and raw output.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from rich.console import Console
from rich.markup import escape

PROMPT_MARKER = "> "
CLEAR_SCREEN = "\x1bc"
SPINNER_NAME = "dots12"
SPINNER_LABEL = "\t\tOpenAI is Thinking..."


class InputClosedError(Exception):
    """The operator's input stream is closed or unreadable."""


class Terminal:
    def __init__(
        self,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self._stdin = stdin or sys.stdin

    def clear(self) -> None:
        self.console.file.write(CLEAR_SCREEN)
        self.console.file.flush()

    def prompt(self) -> None:
        self.console.file.write(PROMPT_MARKER)
        self.console.file.flush()

    def read_line(self) -> str:
        """Block for one line; a CRLF terminator is normalised to LF and kept."""
        try:
            line = self._stdin.readline()
        except (OSError, ValueError) as exc:
            raise InputClosedError(f"Failed to read line: {exc}") from exc
        if not line:
            raise InputClosedError("Input stream closed")
        if line.endswith("\r\n"):
            line = line[:-2] + "\n"
        return line

    @contextmanager
    def thinking(self) -> Iterator[None]:
        with self.console.status(SPINNER_LABEL, spinner=SPINNER_NAME):
            yield

    def blank_line(self) -> None:
        self.console.line()

    def show(self, text: str) -> None:
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error:[/bold red] {escape(message)}", highlight=False)
