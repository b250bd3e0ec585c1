"""CLI application entry point and command routing for cli-playground.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cli_playground.exceptions.PlaygroundError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the console proxies
  are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from cli_playground.cli import exit_codes
from cli_playground.cli.console import console, err_console, escape_markup
from cli_playground.exceptions import PlaygroundError
from cli_playground.utils.logging_utils import configure_logging, level_for
from cli_playground.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-command per demo."""
    parser = argparse.ArgumentParser(
        prog="cli-playground",
        description="Small interactive command-line demos.",
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
        help="Write debug logs to stderr.",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    guess = sub.add_parser("guess", help="Guess the hidden number.")
    guess.add_argument("--seed", type=int, default=None, help="Seed for the target draw.")
    guess.add_argument("--low", type=int, default=1, help="Smallest possible target (default: 1).")
    guess.add_argument("--high", type=int, default=100, help="Largest possible target (default: 100).")

    convert = sub.add_parser("convert", help="Convert Celsius to Fahrenheit.")
    convert.add_argument(
        "value",
        nargs="?",
        default=None,
        help=(
            "Degrees Celsius. Read from stdin when omitted. "
            "Put -- before negative exponent forms: convert -- -3.5e2"
        ),
    )

    greet = sub.add_parser("greet", help="Print a greeting banner.")
    greet.add_argument("--message", default="Hello Fellow Pythonistas!")
    greet.add_argument(
        "--width",
        type=int,
        default=None,
        help="Bubble width in characters (default: message length).",
    )

    first = sub.add_parser("first-word", help="Print the first word of a sentence.")
    first.add_argument(
        "words",
        nargs="*",
        help="Sentence to slice. Read from stdin when omitted.",
    )

    count = sub.add_parser("countdown", help="Count down to liftoff.")
    count.add_argument("--from", dest="start", type=int, default=3)

    sub.add_parser("menu", help="Pick a demo interactively.")
    sub.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_guess(seed: int | None, low: int, high: int) -> int:
    """Run the guessing loop until the target is found.

    Flow:
    1. Validate the range.
    2. Build a dedicated random source and draw the target.
    3. Read guesses from stdin, re-prompting on malformed lines.
    """
    from cli_playground.cli.guess_view import GuessReporter
    from cli_playground.core.guessing import GuessingLoop
    from cli_playground.core.models import GuessRange
    from cli_playground.infra.stdin_source import StdinLineSource

    bounds = GuessRange(low=low, high=high)
    loop = GuessingLoop(random.Random(seed), bounds)
    reporter = GuessReporter(bounds)

    reporter.intro()
    loop.run(StdinLineSource(), on_prompt=reporter.prompt, on_event=reporter)
    return exit_codes.SUCCESS


def _handle_convert(value: str | None) -> int:
    """Convert one Celsius reading; a malformed value is fatal."""
    from cli_playground.core.converter import convert_text, run_conversion
    from cli_playground.core.evaluate import format_number
    from cli_playground.infra.stdin_source import StdinLineSource

    if value is None:
        console.print("Please input current Celsius degree (°C):")
        conversion = run_conversion(StdinLineSource())
    else:
        conversion = convert_text(value)

    console.print(
        f"Current Fahrenheit degree: {format_number(conversion.fahrenheit)}°F",
    )
    return exit_codes.SUCCESS


def _handle_greet(message: str, width: int | None) -> int:
    from cli_playground.core.speech_bubble import render_speech_bubble
    from cli_playground.core.text_tools import GREETINGS

    for line in render_speech_bubble(message, width):
        console.print(line, markup=False)
    for greeting in GREETINGS:
        console.print(greeting, markup=False)
    return exit_codes.SUCCESS


def _handle_first_word(words: list[str]) -> int:
    from cli_playground.core.text_tools import first_word
    from cli_playground.infra.stdin_source import StdinLineSource

    if words:
        sentence = " ".join(words)
    else:
        console.print("Please input a sentence:")
        sentence = StdinLineSource().read_line()

    console.print(f"The first word is: {first_word(sentence)}", markup=False)
    return exit_codes.SUCCESS


def _handle_countdown(start: int) -> int:
    from cli_playground.core.text_tools import countdown

    for line in countdown(start):
        console.print(line, markup=False)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from cli_playground.cli.doctor import run_doctor

    return run_doctor()


def _handle_menu(parser: argparse.ArgumentParser) -> int:
    """Let the user pick a demo, then run it with default options."""
    from cli_playground.cli.menu import prompt_demo_selection

    command = prompt_demo_selection()
    logger.debug("Menu selected %r", command)
    return _dispatch(parser, parser.parse_args([command]))


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    command: str | None = args.command

    if command is None:
        parser.print_help()
        return exit_codes.SUCCESS
    if command == "guess":
        return _handle_guess(args.seed, args.low, args.high)
    if command == "convert":
        return _handle_convert(args.value)
    if command == "greet":
        return _handle_greet(args.message, args.width)
    if command == "first-word":
        return _handle_first_word(args.words)
    if command == "countdown":
        return _handle_countdown(args.start)
    if command == "menu":
        return _handle_menu(parser)
    if command == "doctor":
        return _handle_doctor()

    parser.error(f"unknown command: {command}")
    return exit_codes.GENERAL_ERROR  # pragma: no cover


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cli-playground CLI.

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
    configure_logging(level_for(args.verbose))
    logger.debug("Dispatching command %r", args.command)
    return _dispatch(parser, args)


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
    except PlaygroundError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
