"""Tests for the ``swifty-gr doctor`` command (cli/doctor.py).

Coverage:
* Individual check functions return correct tuples.
* Doctor returns SUCCESS when everything is present.
* Doctor returns GENERAL_ERROR when the Python version check fails.
* Plain-text rendering when Rich is unavailable.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from swifty_gr.cli import exit_codes


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from swifty_gr.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("swifty_gr.cli.doctor.MIN_PYTHON", (99, 0))
    def test_too_old(self) -> None:
        from swifty_gr.cli.doctor import _python_version_check

        _label, _value, status = _python_version_check()
        assert "FAIL (>=99.0 required)" in status


class TestRichCheck:
    def test_installed(self) -> None:
        from swifty_gr.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert label == "rich"
        assert "OK" in status

    @patch.dict("sys.modules", {"rich": None, "rich.console": None})
    def test_not_installed_is_warning(self) -> None:
        from swifty_gr.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestOsCheck:
    def test_returns_tuple(self) -> None:
        from swifty_gr.cli.doctor import _os_check

        label, value, status = _os_check()
        assert label == "OS"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("swifty_gr.cli.doctor.platform.machine", return_value="arm64")
    @patch("swifty_gr.cli.doctor.platform.release", return_value="23.4.0")
    @patch("swifty_gr.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from swifty_gr.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


class TestSwiftyGrVersionCheck:
    def test_returns_current_version(self) -> None:
        from swifty_gr.cli.doctor import _swifty_gr_version_check
        from swifty_gr.version import __version__

        label, value, status = _swifty_gr_version_check()
        assert label == "swifty-gr"
        assert value == __version__
        assert "OK" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("other", "other"),
        ],
    )
    def test_strips_markup(self, status: str, expected: str) -> None:
        from swifty_gr.cli.doctor import _status_plain

        assert _status_plain(status) == expected


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_ok(self, capsys: pytest.CaptureFixture[str]) -> None:
        from swifty_gr.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "swifty-gr doctor" in out
        assert "All checks passed." in out

    @patch(
        "swifty_gr.cli.doctor._python_version_check",
        return_value=("Python", "2.7.18", "[red]FAIL (>=3.10 required)[/red]"),
    )
    def test_failure_returns_general_error(
        self, _mock_py: MagicMock, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from swifty_gr.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in capsys.readouterr().out

    def test_plain_table_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from swifty_gr.cli.doctor import run_doctor

        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        monkeypatch.setitem(sys.modules, "rich.table", None)

        assert run_doctor() == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "Component" in out
        assert "NOT INSTALLED" in out
        assert "All checks passed." in out
