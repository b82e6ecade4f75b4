"""CLI application entry point and command routing for solo-ui.

Commands
--------
* ``solo-ui init [--src-dir DIR]`` — install styles, config and dev deps
* ``solo-ui add <component>``      — install one component
* ``solo-ui list``                 — browse the catalog and install one
* ``solo-ui doctor``               — environment diagnostics

Architecture notes
------------------
* No business logic lives here — the pipelines live in
  :class:`~solo_ui.core.scaffold_service.ScaffoldService`, which turns
  stage failures into a :class:`~solo_ui.core.models.CommandResult`.
* :func:`cli` is the process-level error boundary for anything that
  escapes a pipeline (missing UI libraries, Ctrl+C, bugs).
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from solo_ui.cli import exit_codes
from solo_ui.cli.console import configure_logging, console
from solo_ui.core.models import CommandResult, ScaffoldSettings
from solo_ui.exceptions import SoloUIError
from solo_ui.utils.constants import COMPONENTS_DIR, DEFAULT_REPO_URL, REPO_URL_ENV_VAR
from solo_ui.version import __version__

logger = logging.getLogger(__name__)

NEXT_STEPS: tuple[str, ...] = (
    "1. Run 'npm install' or 'pnpm install' to install dependencies",
    "2. Import 'styles/globals.css' in your main application file",
    "3. Start using solo-ui components with 'solo-ui add <component>'",
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="solo-ui",
        description="CLI tool for managing solo-ui components.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    parser.add_argument(
        "--repo",
        default=None,
        metavar="URL",
        help=f"Component source repository (default: ${REPO_URL_ENV_VAR} or {DEFAULT_REPO_URL}).",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        type=Path,
        metavar="DIR",
        help="Target project directory (default: current directory).",
    )

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    init_parser = sub.add_parser("init", help="Initialize solo-ui configuration and styles.")
    init_parser.add_argument(
        "--src-dir",
        default=None,
        metavar="DIR",
        help="Point the Tailwind content globs at this source directory.",
    )

    add_parser = sub.add_parser("add", help="Add a component to your project.")
    add_parser.add_argument("component", help="Name of the component to add.")

    sub.add_parser("list", help="List available components.")
    sub.add_parser("doctor", help="Check the local environment.")
    return parser


def _resolve_settings(args: argparse.Namespace) -> ScaffoldSettings:
    """Merge CLI flags and environment into :class:`ScaffoldSettings`."""
    repo_url = args.repo or os.environ.get(REPO_URL_ENV_VAR) or DEFAULT_REPO_URL
    project_dir = args.cwd if args.cwd is not None else Path.cwd()
    return ScaffoldSettings(repo_url=repo_url, project_dir=project_dir.resolve())


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _run_scaffold(command: str, settings: ScaffoldSettings, args: argparse.Namespace) -> int:
    """Wire infra adapters into the scaffold service and run *command*."""
    from solo_ui.cli.component_prompt import QuestionaryPicker
    from solo_ui.cli.progress import RichStatusReporter
    from solo_ui.core.scaffold_service import ScaffoldService
    from solo_ui.infra.catalog import FetchedCatalog
    from solo_ui.infra.git_fetcher import GitSourceFetcher
    from solo_ui.infra.project import LocalProject
    from solo_ui.infra.workspace import scratch_workspace

    logger.debug("running %s against %s", command, settings.project_dir)

    with RichStatusReporter() as reporter:
        service = ScaffoldService(
            settings,
            fetcher=GitSourceFetcher(),
            workspaces=scratch_workspace,
            catalog_factory=FetchedCatalog,
            project=LocalProject(settings.project_dir),
            reporter=reporter,
            picker=QuestionaryPicker(),
        )
        if command == "init":
            result = service.init(src_dir=args.src_dir)
        elif command == "add":
            result = service.add(args.component)
        else:
            result = service.browse()

    return _render_result(result)


def _render_result(result: CommandResult) -> int:
    """Print follow-up output for *result* and map it to an exit code."""
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    if not result.ok:
        if result.hint:
            console.print(f"[yellow]Hint:[/yellow] {result.hint}")
        return exit_codes.GENERAL_ERROR

    for name in result.installed:
        console.print(f"  [dim]{COMPONENTS_DIR}/{name}[/dim]")

    if result.command == "init":

        console.print("\n[bold]Next steps:[/bold]")
        for step in NEXT_STEPS:
            console.print(step)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from solo_ui.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the solo-ui CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)

    if args.command == "doctor":
        return _handle_doctor()

    return _run_scaffold(args.command, _resolve_settings(args), args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SoloUIError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
