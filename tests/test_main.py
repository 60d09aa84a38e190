"""Tests for the demo entry point."""

from __future__ import annotations

import logging

from main import log_level, main


class TestMain:
    def test_samples_exit_zero(self, capsys) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "one thousand, two hundred thirty four" in out
        assert "102nd" in out

    def test_custom_numbers(self, capsys) -> None:
        assert main(["42", "-7"]) == 0
        out = capsys.readouterr().out
        assert "forty second" in out
        assert "negative seven" in out

    def test_bad_input_exit_one(self, capsys) -> None:
        assert main(["banana", "3"]) == 1
        captured = capsys.readouterr()
        assert "INVALID_NUMBER" in captured.err
        assert "third" in captured.out

    def test_unknown_log_level_does_not_crash(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("NUMERAL_LOG_LEVEL", "chatty")
        assert main(["5"]) == 0
        assert "fifth" in capsys.readouterr().out


class TestLogLevel:
    def test_known_name(self) -> None:
        assert log_level("debug") == logging.DEBUG

    def test_surrounding_whitespace(self) -> None:
        assert log_level(" Info ") == logging.INFO

    def test_unknown_name_falls_back_to_warning(self) -> None:
        assert log_level("chatty") == logging.WARNING
