"""``solo-ui doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can fetch and install components.

This module lives in the CLI layer — it may import from ``infra`` and
``core``, and it renders via Rich.  It only collects and displays
diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from solo_ui.cli import exit_codes
from solo_ui.cli.console import console
from solo_ui.infra.git_detector import detect_git
from solo_ui.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _git_check() -> Check:
    """Return (label, value, status) for the git row.

    git is required by every command that fetches the catalog.
    """
    status_obj = detect_git()
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "git", path_str, "[green]OK[/green]"
    return "git", "not found", "[red]FAIL[/red]"


def _questionary_check() -> Check:
    """Return (label, value, status) for the questionary row."""
    try:
        import questionary
    except ImportError:
        return "questionary", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    return "questionary", getattr(questionary, "__version__", "unknown"), "[green]OK[/green]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _solo_ui_version_check() -> Check:
    return "solo-ui", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nsolo-ui doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _emit(markup: str, plain: str, *, rich_available: bool) -> None:
    if rich_available:
        console.print(markup)
    else:
        print(plain, file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _solo_ui_version_check(),
        _python_version_check(),
        _git_check(),
        _questionary_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="solo-ui doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    git_status = detect_git()
    if not git_status.found and git_status.install_commands:
        _emit("[yellow]git is not installed.[/yellow]", "git is not installed.",
              rich_available=rich_available)
        _emit("Install using one of the following commands:\n",
              "Install using one of the following commands:\n",
              rich_available=rich_available)
        for cmd in git_status.install_commands:
            _emit(f"  [bold]{cmd}[/bold]", f"  {cmd}", rich_available=rich_available)

    if has_failure:
        _emit("[bold red]Some checks failed.[/bold red]", "Some checks failed.",
              rich_available=rich_available)
        return exit_codes.GENERAL_ERROR

    _emit("[bold green]All checks passed.[/bold green]", "All checks passed.",
          rich_available=rich_available)
    return exit_codes.SUCCESS
