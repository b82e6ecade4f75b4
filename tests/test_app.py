"""End-to-end tests for the CLI wiring (cli/app.py).

git is replaced by a fetcher that copies a fake clone; the spinner,
logging and picker run for real except for questionary.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from conftest import CopyFetcher
from solo_ui.cli import exit_codes
from solo_ui.cli.app import NEXT_STEPS, _build_parser, _render_result, _resolve_settings, cli, main
from solo_ui.core.models import CommandResult
from solo_ui.exceptions import FailureKind, NotAProjectError
from solo_ui.utils.constants import DEFAULT_REPO_URL, REPO_URL_ENV_VAR


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestResolveSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv(REPO_URL_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        settings = _resolve_settings(_build_parser().parse_args(["list"]))
        assert settings.repo_url == DEFAULT_REPO_URL
        assert settings.project_dir == tmp_path.resolve()

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(REPO_URL_ENV_VAR, "https://example.invalid/env.git")
        settings = _resolve_settings(_build_parser().parse_args(["list"]))
        assert settings.repo_url == "https://example.invalid/env.git"

    def test_flag_beats_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv(REPO_URL_ENV_VAR, "https://example.invalid/env.git")
        args = _build_parser().parse_args(
            ["--repo", "https://example.invalid/flag.git", "--cwd", str(tmp_path), "list"],
        )
        settings = _resolve_settings(args)
        assert settings.repo_url == "https://example.invalid/flag.git"
        assert settings.project_dir == tmp_path.resolve()


# ---------------------------------------------------------------------------
# Result rendering
# ---------------------------------------------------------------------------

class TestRenderResult:
    def test_failure_maps_to_general_error(self) -> None:
        result = CommandResult.failed("add", "Failed", FailureKind.NETWORK, hint="retry")
        assert _render_result(result) == exit_codes.GENERAL_ERROR

    def test_init_success_prints_next_steps(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _render_result(CommandResult.success("init", "ok")) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        for step in NEXT_STEPS:
            assert step in err

    def test_warnings_are_printed_on_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = CommandResult.success("init", "ok", warnings=("Unable to check versions",))
        assert _render_result(result) == exit_codes.SUCCESS
        assert "Warning: Unable to check versions" in capsys.readouterr().err

    def test_warnings_are_printed_on_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = CommandResult.failed(
            "add", "Failed", FailureKind.COMPONENT_NOT_FOUND, warnings=("version differs",),
        )
        assert _render_result(result) == exit_codes.GENERAL_ERROR
        assert "Warning: version differs" in capsys.readouterr().err

    def test_installed_component_path_is_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = CommandResult.success("add", "ok", installed=("button",))
        assert _render_result(result) == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "components/button" in err
        assert "Next steps" not in err



# ---------------------------------------------------------------------------
# Full commands with a fake clone
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_git(clone_dir: Path) -> Iterator[MagicMock]:
    with patch(
        "solo_ui.infra.git_fetcher.GitSourceFetcher",
        side_effect=lambda: CopyFetcher(clone_dir),
    ) as mock_cls:
        yield mock_cls


class TestCommands:
    def test_init(self, fake_git: object, project_dir: Path) -> None:
        code = main(["--cwd", str(project_dir), "init", "--src-dir", "src"])

        assert code == exit_codes.SUCCESS
        manifest = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
        assert manifest["devDependencies"]["tailwindcss"] == "^3.4.0"
        assert "./src/**/*" in (project_dir / "tailwind.config.js").read_text(encoding="utf-8")

    def test_add(self, fake_git: object, project_dir: Path) -> None:
        code = main(["--cwd", str(project_dir), "add", "button"])
        assert code == exit_codes.SUCCESS
        assert (project_dir / "components" / "button" / "types.ts").exists()

    def test_add_unknown_returns_error(self, fake_git: object, project_dir: Path) -> None:
        code = main(["--cwd", str(project_dir), "add", "ghost"])
        assert code == exit_codes.GENERAL_ERROR
        assert not (project_dir / "components" / "ghost").exists()

    def test_add_outside_project(self, fake_git: object, tmp_path: Path) -> None:
        code = main(["--cwd", str(tmp_path), "add", "button"])
        assert code == exit_codes.GENERAL_ERROR
        assert not (tmp_path / "components").exists()

    @patch("solo_ui.cli.component_prompt.prompt_component_selection", return_value="card")
    def test_list(self, _prompt: MagicMock, fake_git: object, project_dir: Path) -> None:
        code = main(["--cwd", str(project_dir), "-v", "list"])
        assert code == exit_codes.SUCCESS
        assert (project_dir / "components" / "card" / "index.tsx").exists()


# ---------------------------------------------------------------------------
# Process-level error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    @patch("solo_ui.cli.app.main", side_effect=NotAProjectError("nope", hint="init first"))
    def test_known_error(self, _main: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "nope" in err
        assert "init first" in err

    @patch("solo_ui.cli.app.main", side_effect=KeyboardInterrupt)
    def test_interrupt(self, _main: MagicMock) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    @patch("solo_ui.cli.app.main", side_effect=ValueError("bug"))
    def test_unexpected(self, _main: MagicMock) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR

    @patch("solo_ui.cli.app.main", return_value=exit_codes.SUCCESS)
    def test_success(self, _main: MagicMock) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
