"""
Golden Token Tests
==================

Regression tests for the lexer driven by a JSON file that lists, for
each source file, the kinds of the tokens it must produce:

    {
      "tests": [
        {"file": "tests/ops.cn", "expected": ["IDENT", "ASSIGN", "NUMBER"]}
      ]
    }

EOF is not recorded. A source that stops on a scan failure also records
the failure message under "error". build_expected() regenerates the file
from the current lexer output; run_expected() compares the lexer against
it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union
import json
import logging

from canary.errors import LexerError
from canary.lexer import Lexer
from canary.tokens import TokenKind

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class GoldenResult:
    """Outcome of one golden test."""
    file: str
    passed: bool
    message: str = ""


def scan_kinds(source: str, source_name: str) -> Tuple[List[str], LexerError | None]:
    """
    Tokenize source and return the kind names before EOF.

    Returns:
        (kind names, error) where error is the LexerError that stopped
        the scan, or None when EOF was reached
    """
    kinds: List[str] = []
    lexer = Lexer(source, source_name)
    try:
        for token in lexer.tokenize():
            if token.kind is TokenKind.EOF:
                break
            kinds.append(token.kind.name)
    except LexerError as error:
        return kinds, error
    return kinds, None


def build_expected(test_dir: PathLike, expected_file: PathLike) -> int:
    """
    Write the golden file from every regular file in test_dir.

    The golden file itself and subdirectories are skipped. Sources that
    fail to scan record the kinds produced before the failure and the
    failure message.

    Returns:
        Number of tests written
    """
    test_dir = Path(test_dir)
    expected_file = Path(expected_file)

    tests = []
    for path in sorted(test_dir.iterdir()):
        if not path.is_file():
            continue
        if path.resolve() == expected_file.resolve():
            continue

        kinds, error = scan_kinds(path.read_text(encoding="utf-8"), str(path))
        entry = {"file": str(path), "expected": kinds}
        if error is not None:
            logger.warning("%s: recorded tokens up to error: %s", path, error.message)
            entry["error"] = error.message
        tests.append(entry)
        logger.info("Test %s built", path)

    expected_file.write_text(
        json.dumps({"tests": tests}, indent=2) + "\n", encoding="utf-8"
    )
    return len(tests)


def load_expected(expected_file: PathLike) -> List[dict]:
    """
    Read the test entries from a golden file.

    Raises:
        ValueError: If the file does not have the expected structure
    """
    data = json.loads(Path(expected_file).read_text(encoding="utf-8"))
    tests = data.get("tests") if isinstance(data, dict) else None
    if not isinstance(tests, list):
        raise ValueError(f"{expected_file}: missing 'tests' list")
    for entry in tests:
        if not isinstance(entry, dict) or "file" not in entry or "expected" not in entry:
            raise ValueError(f"{expected_file}: malformed test entry {entry!r}")
    return tests


def check_file(
    file: str,
    expected: List[str],
    expected_error: Optional[str] = None,
) -> GoldenResult:
    """
    Tokenize one file and compare its kinds against expected.

    A scan failure passes only when its message equals expected_error,
    the failure recorded when the golden file was built.
    """
    try:
        source = Path(file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return GoldenResult(file, False, f"cannot read source: {exc}")

    kinds, error = scan_kinds(source, file)

    for index, (want, got) in enumerate(zip(expected, kinds)):
        if want != got:
            return GoldenResult(
                file, False, f"Token mismatch at {index}: expected {want}, got {got}"
            )

    message = error.message if error is not None else None
    if message != expected_error:
        if message is None:
            return GoldenResult(
                file, False, f"Expected scan failure: {expected_error}"
            )
        return GoldenResult(file, False, message)

    if len(kinds) != len(expected):
        return GoldenResult(
            file,
            False,
            f"Token count mismatch: expected {len(expected)}, got {len(kinds)}",
        )

    return GoldenResult(file, True)


def run_expected(expected_file: PathLike) -> List[GoldenResult]:
    """Run every golden test in expected_file."""
    return [
        check_file(entry["file"], list(entry["expected"]), entry.get("error"))
        for entry in load_expected(expected_file)
    ]
