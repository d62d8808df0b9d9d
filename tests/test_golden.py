"""
Golden Token Test Suite
=======================

Tests for building and checking the golden token file.
"""

import json
from pathlib import Path

import pytest
from canary.golden import (
    build_expected,
    check_file,
    load_expected,
    run_expected,
    scan_kinds,
)


@pytest.fixture
def sources(tmp_path):
    """A test directory with two sources, one of which fails to scan."""
    test_dir = tmp_path / "cases"
    test_dir.mkdir()
    (test_dir / "assign.cn").write_text("x := 1;\n")
    (test_dir / "broken.cn").write_text("fn $\n")
    (test_dir / "nested").mkdir()
    return test_dir


class TestScanKinds:

    def test_kinds_without_eof(self):
        kinds, error = scan_kinds("if x := 1;", "<test>")
        assert kinds == ["KEYWORD", "IDENT", "ASSIGN", "NUMBER", "SEMI_COLON"]
        assert error is None

    def test_stops_at_error(self):
        kinds, error = scan_kinds("a b .. c", "<test>")
        assert kinds == ["IDENT", "IDENT"]
        assert error.message == "malformed ellipsis, expected 3 dots, found 2"


class TestBuildExpected:

    def test_writes_one_entry_per_file(self, sources):
        expected = sources / "expected.json"
        assert build_expected(sources, expected) == 2

        data = json.loads(expected.read_text())
        assert data == {
            "tests": [
                {
                    "file": str(sources / "assign.cn"),
                    "expected": ["IDENT", "ASSIGN", "NUMBER", "SEMI_COLON"],
                },
                {
                    "file": str(sources / "broken.cn"),
                    "expected": ["KEYWORD"],
                    "error": "unknown character `$`",
                },
            ]
        }

    def test_skips_expected_file_on_rebuild(self, sources):
        expected = sources / "expected.json"
        build_expected(sources, expected)
        assert build_expected(sources, expected) == 2


class TestRunExpected:

    def test_all_pass_after_build(self, sources, tmp_path):
        expected = tmp_path / "expected.json"
        build_expected(sources, expected)
        results = run_expected(expected)
        assert [r.passed for r in results] == [True, True]

    def test_mismatch(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_text("x + y")
        result = check_file(str(source), ["IDENT", "PLUS_EQL", "IDENT"])
        assert not result.passed
        assert result.message == "Token mismatch at 1: expected PLUS_EQL, got PLUS"

    def test_count_mismatch(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_text("x + y")
        result = check_file(str(source), ["IDENT", "PLUS"])
        assert not result.passed
        assert result.message == "Token count mismatch: expected 2, got 3"

    def test_error_before_expected_tokens(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_text('x "open')
        result = check_file(str(source), ["IDENT", "STRING"])
        assert not result.passed
        assert result.message == "unterminated string literal"

    def test_error_after_expected_tokens(self, tmp_path):
        """A scan failure past the last expected kind is still a failure."""
        source = tmp_path / "a.cn"
        source.write_text("x $")
        result = check_file(str(source), ["IDENT"])
        assert not result.passed
        assert result.message == "unknown character `$`"

    def test_recorded_error_passes(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_text("x $")
        result = check_file(str(source), ["IDENT"], "unknown character `$`")
        assert result.passed

    def test_different_error_fails(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_text("x ..")
        result = check_file(str(source), ["IDENT"], "unknown character `$`")
        assert not result.passed
        assert result.message == "malformed ellipsis, expected 3 dots, found 2"

    def test_recorded_error_no_longer_raised(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_text("x")
        result = check_file(str(source), ["IDENT"], "unknown character `$`")
        assert not result.passed
        assert result.message == "Expected scan failure: unknown character `$`"

    def test_undecodable_source(self, tmp_path):
        source = tmp_path / "a.cn"
        source.write_bytes(b"\xff\xfe")
        result = check_file(str(source), [])
        assert not result.passed
        assert result.message.startswith("cannot read source")

    def test_missing_source(self, tmp_path):
        result = check_file(str(tmp_path / "gone.cn"), [])
        assert not result.passed
        assert result.message.startswith("cannot read source")

    def test_malformed_golden_file(self, tmp_path):
        expected = tmp_path / "expected.json"
        expected.write_text(json.dumps({"cases": []}))
        with pytest.raises(ValueError):
            load_expected(expected)

    def test_malformed_entry(self, tmp_path):
        expected = tmp_path / "expected.json"
        expected.write_text(json.dumps({"tests": [{"file": "a.cn"}]}))
        with pytest.raises(ValueError):
            run_expected(expected)


class TestShippedCorpus:
    """The golden corpus in tests/golden/ matches the current lexer."""

    def test_corpus_passes(self, monkeypatch):
        project_root = Path(__file__).resolve().parent.parent
        monkeypatch.chdir(project_root)
        results = run_expected("tests/golden/expected.json")
        assert len(results) == 2
        failures = [(r.file, r.message) for r in results if not r.passed]
        assert failures == []
