"""
Configuration Test Suite
========================

Tests for CanaryConfig defaults and environment loading.
"""

from pathlib import Path

import pytest
from canary.config import CanaryConfig


ENV_VARS = (
    "CANARY_COLOR",
    "NO_COLOR",
    "CANARY_VERBOSE",
    "CANARY_EXPECTED_FILE",
    "CANARY_TEST_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestCanaryConfig:

    def test_defaults(self):
        config = CanaryConfig.from_env()
        assert config.color is None
        assert config.verbose is False
        assert config.expected_file == Path("tests/golden/expected.json")
        assert config.test_dir == Path("tests/golden")

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("true", True), ("YES", True), ("on", True),
        ("0", False), ("false", False), ("No", False), ("off", False),
    ])
    def test_color(self, monkeypatch, value, expected):
        monkeypatch.setenv("CANARY_COLOR", value)
        assert CanaryConfig.from_env().color is expected

    def test_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert CanaryConfig.from_env().color is False

    def test_canary_color_overrides_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("CANARY_COLOR", "yes")
        assert CanaryConfig.from_env().color is True

    def test_invalid_values_ignored(self, monkeypatch):
        monkeypatch.setenv("CANARY_COLOR", "sometimes")
        monkeypatch.setenv("CANARY_VERBOSE", "maybe")
        config = CanaryConfig.from_env()
        assert config.color is None
        assert config.verbose is False

    def test_verbose(self, monkeypatch):
        monkeypatch.setenv("CANARY_VERBOSE", "1")
        assert CanaryConfig.from_env().verbose is True

    def test_paths(self, monkeypatch):
        monkeypatch.setenv("CANARY_EXPECTED_FILE", "golden/tokens.json")
        monkeypatch.setenv("CANARY_TEST_DIR", "golden")
        config = CanaryConfig.from_env()
        assert config.expected_file == Path("golden/tokens.json")
        assert config.test_dir == Path("golden")
