"""Interactive demo picker for the CLI layer.

This module is responsible for:

* Rendering a Rich table listing the available demos.
* Prompting the user to select one via questionary arrow keys.
* Returning the selected command name as a string.

No demo runs here — dispatch is the caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cli_playground.cli.console import console
from cli_playground.exceptions import EnvironmentError, SelectionCancelledError

DEMOS: tuple[tuple[str, str], ...] = (
    ("guess", "Guess a number between 1 and 100"),
    ("convert", "Convert Celsius to Fahrenheit"),
    ("greet", "Print a greeting banner"),
    ("first-word", "Extract the first word of a sentence"),
    ("countdown", "Count down to liftoff"),
)
"""``(command, description)`` pairs, in menu order."""


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
    """Import rich table lazily for menu rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _build_choice_label(index: int, command: str, description: str) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  1.  guess        Guess a number between 1 and 100"``
    """
    return f"  {index + 1}.  {command:<12} {description}"


def _display_demo_table(demos: Sequence[tuple[str, str]]) -> None:
    table_class = _import_rich_table()

    table = table_class(
        title="Available Demos",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Command", justify="left", min_width=12)
    table.add_column("Description", justify="left")

    for i, (command, description) in enumerate(demos, start=1):
        table.add_row(str(i), command, description)

    console.print()
    console.print(table)
    console.print()


def prompt_demo_selection(
    demos: Sequence[tuple[str, str]] = DEMOS,
) -> str:
    """Display the demos and prompt the user for an interactive selection.

    Returns
    -------
    str
        The command name of the chosen demo.

    Raises
    ------
    SelectionCancelledError
        If the user cancels the prompt (Esc / Ctrl+C make ``ask()``
        return ``None``).
    """
    questionary = _import_questionary()

    _display_demo_table(demos)

    choices = [
        questionary.Choice(
            title=_build_choice_label(i, command, description),
            value=command,
        )
        for i, (command, description) in enumerate(demos)
    ]

    selected: str | None = questionary.select(
        "Pick a demo to run:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()

    if selected is None:
        raise SelectionCancelledError(
            "No demo selected.",
            hint="Use arrow keys to pick a demo, then press Enter.",
        )

    return selected
