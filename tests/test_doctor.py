"""Tests for the ``solo-ui doctor`` command (cli/doctor.py).

git detection is mocked — no system dependency.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from solo_ui.cli import exit_codes
from solo_ui.infra.git_detector import GitStatus


def _git_found() -> GitStatus:
    return GitStatus(
        found=True,
        path=Path("/usr/bin/git"),
        version_hint="found at /usr/bin/git",
        install_commands=(),
    )


def _git_missing() -> GitStatus:
    return GitStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=("sudo apt install git",),
    )


class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from solo_ui.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestGitCheck:
    @patch("solo_ui.cli.doctor.detect_git")
    def test_found(self, mock_detect: MagicMock) -> None:
        from solo_ui.cli.doctor import _git_check

        mock_detect.return_value = _git_found()
        label, value, status = _git_check()
        assert label == "git"
        assert value == str(Path("/usr/bin/git"))
        assert "OK" in status

    @patch("solo_ui.cli.doctor.detect_git")
    def test_missing_is_failure(self, mock_detect: MagicMock) -> None:
        from solo_ui.cli.doctor import _git_check

        mock_detect.return_value = _git_missing()
        _, value, status = _git_check()
        assert value == "not found"
        assert "FAIL" in status


class TestQuestionaryCheck:
    @patch.dict("sys.modules", {"questionary": None})
    def test_not_installed(self) -> None:
        from solo_ui.cli.doctor import _questionary_check

        label, value, status = _questionary_check()
        assert label == "questionary"
        assert value == "NOT INSTALLED"
        assert "WARN" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("markup", "plain"),
        [
            ("[green]OK[/green]", "OK"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("[yellow]WARN[/yellow]", "WARN"),
        ],
    )
    def test_conversion(self, markup: str, plain: str) -> None:
        from solo_ui.cli.doctor import _status_plain

        assert _status_plain(markup) == plain


class TestRunDoctor:
    @patch("solo_ui.cli.doctor.detect_git")
    def test_all_ok(self, mock_detect: MagicMock) -> None:
        from solo_ui.cli.doctor import run_doctor

        mock_detect.return_value = _git_found()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("solo_ui.cli.doctor.detect_git")
    def test_git_missing_fails(self, mock_detect: MagicMock) -> None:
        from solo_ui.cli.doctor import run_doctor

        mock_detect.return_value = _git_missing()
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("solo_ui.cli.doctor.detect_git")
    def test_plain_output_without_rich(
        self,
        mock_detect: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from solo_ui.cli.doctor import run_doctor

        monkeypatch.setitem(sys.modules, "rich.table", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        mock_detect.return_value = _git_missing()

        assert run_doctor() == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "solo-ui doctor" in err
        assert "sudo apt install git" in err
