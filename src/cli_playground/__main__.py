"""Allow ``python -m cli_playground`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cli_playground`` behaves identically to the
``cli-playground`` console script.
"""

from __future__ import annotations

from cli_playground.cli.app import cli

if __name__ == "__main__":
    cli()
