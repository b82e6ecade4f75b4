"""Interactive component selection UI for the CLI layer.

This module is responsible for:

* Rendering a Rich table of the catalog's components.
* Prompting the user to select one via questionary arrow keys.
* Returning the selected component name, or ``None`` on cancel.

All display-related logic lives here — no copying, no fetching.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from solo_ui.cli.console import console
from solo_ui.core.models import ComponentDescriptor
from solo_ui.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for catalog rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _format_flag(present: bool) -> str:
    return "yes" if present else "—"


def _format_file_count(count: int) -> str:
    return "1 file" if count == 1 else f"{count} files"


def _build_choice_label(index: int, component: ComponentDescriptor) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  1.  button        3 files  +styles"``
    """
    extras = " +styles" if component.has_styles else ""
    files = _format_file_count(len(component.files))
    return f"  {index + 1}.  {component.name:<20} {files:>8}{extras}"


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def _display_component_table(components: Sequence[ComponentDescriptor]) -> None:
    """Print a Rich table summarising the catalog."""
    table_class = _import_rich_table()

    table = table_class(
        title="Available Components",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Component", justify="left", min_width=16)
    table.add_column("Files", justify="right", min_width=5)
    table.add_column("Styles", justify="center", min_width=6)
    table.add_column("Types", justify="center", min_width=5)

    for i, component in enumerate(components, start=1):
        table.add_row(
            str(i),
            component.name,
            str(len(component.files)),
            _format_flag(component.has_styles),
            _format_flag(component.has_types),
        )

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public prompt
# ---------------------------------------------------------------------------

def prompt_component_selection(components: Sequence[ComponentDescriptor]) -> str | None:
    """Display the catalog and prompt for at most one component.

    Returns
    -------
    str | None
        The chosen component name, or ``None`` when the user cancels
        (Esc / Ctrl+C inside the prompt).
    """
    questionary = _import_questionary()

    _display_component_table(components)

    choices = [
        questionary.Choice(
            title=_build_choice_label(i, component),
            value=component.name,
        )
        for i, component in enumerate(components)
    ]

    selected: str | None = questionary.select(
        "Select a component to add",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    return selected or None


class QuestionaryPicker:
    """:class:`~solo_ui.core.protocols.ComponentPicker` backed by questionary."""

    def pick(self, components: Sequence[ComponentDescriptor]) -> str | None:
        return prompt_component_selection(components)
