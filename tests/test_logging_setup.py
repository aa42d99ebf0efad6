"""Tests for CLI logging configuration (cli/logging_setup.py)."""

from __future__ import annotations

import logging

import pytest

from swifty_gr.cli.logging_setup import configure_logging


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger("swifty_gr").level == logging.DEBUG

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging("info")
        configure_logging("error")
        logger = logging.getLogger("swifty_gr")
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("loud")

    def test_core_records_reach_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        from swifty_gr.core.models import ArgumentKind, ArgumentSpec
        from swifty_gr.core.parser import parse_arguments
        from swifty_gr.core.schema import build_schema

        configure_logging("debug")
        schema = build_schema([ArgumentSpec("verbose", ArgumentKind.FLAG)], name="tool")
        parse_arguments(schema, ["--verbose"])

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "DEBUG swifty_gr.core.parser: matched '--verbose'" in captured.err
