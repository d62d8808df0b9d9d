"""
canary - Canary Language Command-Line Interface
===============================================

This module implements the command-line driver for the Canary toolchain.
The driver reads the whole source file into memory and hands it to the
lexer; the lexer itself performs no I/O.

Usage Examples
--------------
Parse a source file:
    $ canary run main.cn

Dump the token stream:
    $ canary tokens main.cn

Regenerate the golden token file from tests/golden/:
    $ canary build-tests

Regenerate the golden token file and check it in one step:
    $ canary build-tests --check

Check the lexer against the golden token file:
    $ canary test --expected tests/golden/expected.json
"""

import logging
from pathlib import Path
from typing import Optional

import click

from canary import __version__
from canary.cli.errors import ExitCode, handle_cli_exception
from canary.config import CanaryConfig
from canary.diagnostics import Diagnostics
from canary.golden import build_expected, run_expected
from canary.lexer import Lexer
from canary.parser import Parser

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Holds the effective configuration and the two diagnostics sinks
    (stdout for progress, stderr for failures).
    """

    def __init__(self, config: Optional[CanaryConfig] = None) -> None:
        self.config = config or CanaryConfig()
        self.out = Diagnostics(color=self.config.color)
        self.err = Diagnostics(color=self.config.color, err=True)

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.config.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(name)s: %(message)s",
        )

    def fail(self, error: Exception) -> None:
        handle_cli_exception(error, self.err, verbose=self.config.verbose)


pass_context = click.make_pass_decorator(Context, ensure=True)


def read_source(path: Path) -> str:
    """Load a whole source file into memory."""
    return path.read_text(encoding="utf-8")


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Debug logging and tracebacks for internal errors",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force coloured diagnostics on or off (default: auto)",
)
@click.version_option(__version__, "--version", "-V", prog_name="canary")
@click.pass_context
def main(ctx: click.Context, verbose: bool, color: Optional[bool]) -> None:
    """
    Canary language toolchain.

    \b
    Commands:
      run          Parse a source file
      tokens       Print the token stream of a source file
      build-tests  Regenerate the golden token file
      test         Check the lexer against the golden token file

    \b
    Environment:
      CANARY_COLOR, NO_COLOR, CANARY_VERBOSE,
      CANARY_EXPECTED_FILE, CANARY_TEST_DIR
    """
    config = CanaryConfig.from_env()
    if verbose:
        config.verbose = True
    if color is not None:
        config.color = color

    ctx.obj = Context(config)
    ctx.obj.setup_logging()


# =============================================================================
# Run Command
# =============================================================================

@main.command("run")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@pass_context
def cmd_run(ctx: Context, input_file: Path) -> None:
    """
    Parse INPUT_FILE.

    Lexer failures are reported with the offending source line. The
    parser does not build a syntax tree yet and reports so once the
    first tokens have been read.
    """
    try:
        source = read_source(input_file)
        parser = Parser(Lexer(source, str(input_file)))
        parser.parse()
    except Exception as e:
        ctx.fail(e)


# =============================================================================
# Tokens Command
# =============================================================================

@main.command("tokens")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@pass_context
def cmd_tokens(ctx: Context, input_file: Path) -> None:
    """
    Print every token of INPUT_FILE, one per line.

    \b
    Output format:
      line:column: Token KIND => lexeme
    """
    try:
        lexer = Lexer(read_source(input_file), str(input_file))
        count = 0
        for token in lexer.tokenize():
            click.echo(f"{token.line}:{token.column}: {token}")
            count += 1
        logger.debug("%s: %d tokens", input_file, count)
    except Exception as e:
        ctx.fail(e)


# =============================================================================
# Golden Test Commands
# =============================================================================

@main.command("build-tests")
@click.option(
    "-d", "--dir", "test_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory of source files (default: tests/golden/)",
)
@click.option(
    "-e", "--expected",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Golden file to write (default: tests/golden/expected.json)",
)
@click.option(
    "--check",
    is_flag=True,
    help="Run the golden tests against the rebuilt file",
)
@pass_context
def cmd_build_tests(
    ctx: Context,
    test_dir: Optional[Path],
    expected: Optional[Path],
    check: bool,
) -> None:
    """
    Regenerate the golden token file.

    Every regular file in the test directory is tokenized and the kinds
    of its tokens (without EOF) are recorded. With --check the new file
    is then run as by the test command.
    """
    test_dir = test_dir or ctx.config.test_dir
    expected = expected or ctx.config.expected_file

    try:
        count = build_expected(test_dir, expected)
    except Exception as e:
        ctx.fail(e)
        return

    ctx.out.info("Built %d tests into %s", count, expected)

    if check:
        _run_golden(ctx, expected)


@main.command("test")
@click.option(
    "-e", "--expected",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Golden file to check (default: tests/golden/expected.json)",
)
@pass_context
def cmd_test(ctx: Context, expected: Optional[Path]) -> None:
    """Check the lexer against the golden token file."""
    _run_golden(ctx, expected or ctx.config.expected_file)


def _run_golden(ctx: Context, expected: Path) -> None:
    """Run the golden tests in expected and report each result."""
    try:
        results = run_expected(expected)
    except Exception as e:
        ctx.fail(e)
        return

    failed = 0
    for result in results:
        if result.passed:
            ctx.out.info("%s passed!", result.file)
        else:
            failed += 1
            ctx.err.error("%s: %s", result.file, result.message)

    if failed:
        ctx.err.error("%d of %d tests failed", failed, len(results))
        raise SystemExit(ExitCode.BUILD_ERROR)

    ctx.out.info("%d tests passed", len(results))


if __name__ == "__main__":
    main()
