"""Rich-based status spinner for the command pipelines.

:class:`RichStatusReporter` satisfies
:class:`~solo_ui.core.protocols.StatusReporter`: a transient spinner
while a stage runs, then a single marked line when it succeeds, fails
or has something to report.

Design
------
* One Rich :class:`~rich.progress.Progress` with a spinner column.
* ``succeed`` / ``fail`` stop the spinner before printing.
* ``info`` prints above a running spinner without stopping it.
* Stop is idempotent; messages are markup-escaped.
"""

from __future__ import annotations

from typing import Any

from solo_ui.cli.console import get_rich_console
from solo_ui.exceptions import EnvironmentError


class RichStatusReporter:
    """Spinner-style status indicator.

    Usage::

        with RichStatusReporter() as reporter:
            service = ScaffoldService(..., reporter=reporter)
            service.add("button")
    """

    def __init__(self) -> None:
        try:
            from rich.markup import escape
            from rich.progress import Progress, SpinnerColumn, TextColumn
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._escape = escape
        self._progress: Any = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            console=get_rich_console(),
            transient=True,
        )
        self._task_id: Any = None
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichStatusReporter:
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # StatusReporter protocol
    # ------------------------------------------------------------------

    def start(self, text: str) -> None:
        """Show the spinner with *text*, or relabel a running one."""
        description = self._escape(text)
        if self._task_id is None:
            self._task_id = self._progress.add_task(description, total=None)
        else:
            self._progress.update(self._task_id, description=description)
        if not self._started:
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Hide the spinner (idempotent)."""
        if self._task_id is not None:
            self._progress.remove_task(self._task_id)
            self._task_id = None
        if self._started:
            self._progress.stop()
            self._started = False

    def succeed(self, text: str) -> None:
        self.stop()
        self._print(f"[bold green]✔[/bold green] {self._escape(text)}")

    def fail(self, text: str) -> None:
        self.stop()
        self._print(f"[bold red]✖[/bold red] {self._escape(text)}")

    def info(self, text: str) -> None:
        self._print(f"[bold blue]ℹ[/bold blue] {self._escape(text)}")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _print(self, markup: str) -> None:
        self._progress.console.print(markup)
