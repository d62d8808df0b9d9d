"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes across all CLI commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn, Optional

import click

from canary.diagnostics import Diagnostics, report_error
from canary.errors import CanaryError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Lexer, parser or golden test failure
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    diagnostics: Optional[Diagnostics] = None,
    verbose: bool = False,
) -> NoReturn:
    """
    Unified exception handler for all CLI commands.

    Canary errors are reported through the diagnostics sink (error plus
    context lines); other errors are echoed to stderr.

    Args:
        error: The exception that was raised
        diagnostics: Sink for Canary errors (default: stderr)
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if diagnostics is None:
        diagnostics = Diagnostics(err=True)

    if isinstance(error, CanaryError):
        report_error(error, diagnostics)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, ValueError):
        # Unreadable source or malformed golden file
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
