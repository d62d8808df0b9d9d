"""
Canary Diagnostics
==================

A small sink for user-facing diagnostics. Each message has a severity
and is written to a caller-chosen stream as ``[TAG] message``:

    [INFO] tests/ops.cn passed!
    [ERROR] failed to read next token
    [CONTEXT] main.cn: unknown character `$`

With colour enabled the tag is styled using the 256-colour palette
(green, yellow, red and cyan for info, warning, error and context).
Messages take printf-style arguments, like logging calls do.
"""

from enum import Enum
from typing import IO, Optional

import click

from canary.errors import CanaryError, LexerError, ParserError


class Severity(Enum):
    """Diagnostic severity with its tag and 256-colour code."""

    INFO = ("INFO", 40)
    WARNING = ("WARNING", 226)
    ERROR = ("ERROR", 196)
    CONTEXT = ("CONTEXT", 87)

    @property
    def tag(self) -> str:
        return self.value[0]

    @property
    def color(self) -> int:
        return self.value[1]


class Diagnostics:
    """
    Writes severity-tagged messages to a stream.

    Args:
        stream: Output stream; None means click's default stream
        color: Force colour on or off; None lets click decide from the
            stream (no colour when it is not a terminal)
        err: Write to stderr instead of stdout when no stream is given
    """

    def __init__(
        self,
        stream: Optional[IO[str]] = None,
        color: Optional[bool] = None,
        err: bool = False,
    ):
        self.stream = stream
        self.color = color
        self.err = err
        self.counts = {severity: 0 for severity in Severity}

    def format(self, severity: Severity, message: str) -> str:
        tag = click.style(severity.tag, fg=severity.color)
        return f"[{tag}] {message}"

    def emit(self, severity: Severity, message: str, *args: object) -> None:
        """Write one message; args are %-interpolated into message."""
        if args:
            message = message % args
        self.counts[severity] += 1
        click.echo(
            self.format(severity, message),
            file=self.stream,
            err=self.err,
            color=self.color,
        )

    def info(self, message: str, *args: object) -> None:
        self.emit(Severity.INFO, message, *args)

    def warning(self, message: str, *args: object) -> None:
        self.emit(Severity.WARNING, message, *args)

    def error(self, message: str, *args: object) -> None:
        self.emit(Severity.ERROR, message, *args)

    def context(self, message: str, *args: object) -> None:
        self.emit(Severity.CONTEXT, message, *args)


def report_error(error: CanaryError, diagnostics: Diagnostics) -> None:
    """
    Print a Canary error as ERROR, followed by its context lines.

    Lexer errors print their location-prefixed first line as the error
    and the source excerpt and hint as context. Parser errors print
    their attached context, if any.
    """
    if isinstance(error, LexerError):
        first, *rest = str(error).split("\n")
        diagnostics.error("%s", first)
        for line in rest:
            diagnostics.context("%s", line)
    elif isinstance(error, ParserError):
        diagnostics.error("%s", error.message)
        if error.context:
            diagnostics.context("%s", error.context)
        cause = error.__cause__
        if isinstance(cause, LexerError) and cause.location is not None:
            diagnostics.context("at %s", cause.location)
    else:
        diagnostics.error("%s", error)
