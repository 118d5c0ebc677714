"""Tests for pathextract.cli — CLI entrypoint and output."""

import json

import pytest

from pathextract.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_no_args(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_missing_pattern(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["/users/42"])
        assert exc_info.value.code == 2

    def test_bad_output_choice(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["/a", "S", "--output", "yaml"])
        assert exc_info.value.code == 2

    def test_path_required_without_explain(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["S"])
        assert exc_info.value.code == 2
        assert "path" in capsys.readouterr().err


class TestCLIExtract:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["/x/users/42/TWFu/1000/1412172938/", "X^users^IBdE"])
        out = capsys.readouterr().out
        assert json.loads(out) == [None, True, 42, "4d616e", 1000, "2014-10-01T14:15:38Z"]

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["/files/a/b/", "^files^P", "--output", "text"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["bool\ttrue", 'string\t"a/b/"']

    def test_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["/users/abc", "^users^I"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Could not extract int at offset 7")

    def test_unknown_directive(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["a", "Q"])
        assert exc_info.value.code == 1
        assert "Unrecognized pattern 'Q'" in capsys.readouterr().err


class TestCLIExplain:
    def test_lists_directives(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-", "X^users^I", "--explain"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["OFFSET", "WIDTH", "TAG", "LITERAL"]
        assert lines[2].split() == ["0", "1", "X"]
        assert lines[3].split() == ["1", "7", "^", "'users'"]
        assert lines[4].split() == ["8", "1", "I"]

    def test_malformed_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-", "S^oops", "--explain"])
        assert exc_info.value.code == 1
        assert "no ending ^ delimiter" in capsys.readouterr().err

    def test_pattern_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--explain", "^files^P"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[2].split() == ["0", "7", "^", "'files'"]
        assert lines[3].split() == ["7", "1", "P"]


class TestCLIConfigErrors:
    def test_invalid_env_log_level(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("PATHEXTRACT_LOG_LEVEL", "verbose")
        with pytest.raises(SystemExit) as exc_info:
            main(["/a", "S"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: log_level must be one of")

    def test_invalid_env_log_level_explain(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("PATHEXTRACT_LOG_LEVEL", "verbose")
        with pytest.raises(SystemExit) as exc_info:
            main(["--explain", "S"])
        assert exc_info.value.code == 1
        assert "log_level" in capsys.readouterr().err

    def test_explicit_flag_overrides_bad_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("PATHEXTRACT_LOG_LEVEL", "verbose")
        main(["/a", "S", "--log-level", "error"])
        assert capsys.readouterr().out.strip() == '["a"]'
