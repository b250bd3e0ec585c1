"""``cli-playground doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies cli-playground's
requirements.  Falls back to a plain-text table when Rich is missing.
"""

from __future__ import annotations

import platform
import sys

from cli_playground.cli import exit_codes
from cli_playground.cli.console import console
from cli_playground.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rich row.

    Output still works without rich (plain text), so a miss is a WARN.
    """
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"

    try:
        from importlib.metadata import PackageNotFoundError, version

        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _questionary_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the questionary row."""
    try:
        from questionary.version import __version__ as q_ver

        return "questionary", q_ver, "[green]OK[/green]"
    except ImportError:
        pass

    # Fallback: installed but version submodule unavailable.
    try:
        import questionary  # noqa: F401

        return "questionary", "unknown", "[green]OK[/green]"
    except ImportError:
        return "questionary", "NOT INSTALLED", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _playground_version_check() -> tuple[str, str, str]:
    return "cli-playground", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich, on stdout like the Rich table."""
    print("\ncli-playground doctor")
    print("=" * 60)
    print(f"{'Component':<16} {'Value':<32} {'Status':<8}")
    print("-" * 60)
    for label, value, status in checks:
        print(f"{label:<16} {value:<32} {_status_plain(status):<8}")
    print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  WARN rows do not
        fail the run.
    """
    checks = [
        _playground_version_check(),
        _python_version_check(),
        _rich_check(),
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
            title="cli-playground doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=16)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
