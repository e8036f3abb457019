"""Tests for zh.output -- stdout/stderr discipline and colour control."""

from __future__ import annotations

import pytest

from zh.output import OutputManager, error, get_output, print_data, reset_output, set_output


class TestOutputManager:
    def test_print_data_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True).print_data("moved")
        captured = capsys.readouterr()
        assert captured.out == "moved\n"
        assert captured.err == ""

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True).error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: boom\n"

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert OutputManager().no_color is True

    def test_term_dumb(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert OutputManager().no_color is True

    def test_color_enabled_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert OutputManager().no_color is False


class TestGlobalOutput:
    def test_get_output_creates_default(self) -> None:
        reset_output()
        assert isinstance(get_output(), OutputManager)

    def test_set_output_is_used(self, capsys: pytest.CaptureFixture[str]) -> None:
        set_output(OutputManager(no_color=True))
        print_data("hello")
        error("bad [thing]")
        captured = capsys.readouterr()
        assert captured.out == "hello\n"
        assert captured.err == "Error: bad [thing]\n"
