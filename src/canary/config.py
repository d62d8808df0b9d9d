"""
Canary Configuration
====================

Settings shared by the command-line tools. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the environment)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os


TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> Optional[bool]:
    """Parse an environment flag; None for unrecognised values."""
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


@dataclass
class CanaryConfig:
    """
    Configuration for the canary tools.

    Attributes:
        color: Force coloured diagnostics on/off (None: auto-detect)
        verbose: Enable debug logging and tracebacks for internal errors
        expected_file: Golden file with expected token kinds per source
        test_dir: Directory of sources the golden file is built from
    """

    color: Optional[bool] = None
    verbose: bool = False
    expected_file: Path = field(default_factory=lambda: Path("tests/golden/expected.json"))
    test_dir: Path = field(default_factory=lambda: Path("tests/golden"))

    @classmethod
    def from_env(cls) -> "CanaryConfig":
        """
        Create CanaryConfig from environment variables.

        Environment variables (all optional):
            CANARY_COLOR: "1"/"0" (also true/false, yes/no, on/off)
            NO_COLOR: any non-empty value disables colour
            CANARY_VERBOSE: same values as CANARY_COLOR
            CANARY_EXPECTED_FILE: golden file path
            CANARY_TEST_DIR: golden source directory

        Invalid values are ignored.
        """
        config = cls()

        if os.environ.get("NO_COLOR"):
            config.color = False

        if color := os.environ.get("CANARY_COLOR"):
            parsed = _parse_bool(color)
            if parsed is not None:
                config.color = parsed

        if verbose := os.environ.get("CANARY_VERBOSE"):
            parsed = _parse_bool(verbose)
            if parsed is not None:
                config.verbose = parsed

        if expected_file := os.environ.get("CANARY_EXPECTED_FILE"):
            config.expected_file = Path(expected_file)

        if test_dir := os.environ.get("CANARY_TEST_DIR"):
            config.test_dir = Path(test_dir)

        return config
