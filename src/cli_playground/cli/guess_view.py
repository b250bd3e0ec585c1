"""Rendering for the guessing game.

:class:`GuessReporter` bridges the core loop's ``on_prompt`` /
``on_event`` callbacks with the console.  The core loop never prints;
all wording lives here.
"""

from __future__ import annotations

from cli_playground.cli.console import console
from cli_playground.core.models import GuessEvent, GuessRange, Outcome

_OUTCOME_MESSAGES: dict[Outcome, str] = {
    Outcome.TOO_SMALL: "[yellow]Too small![/yellow]",
    Outcome.TOO_BIG: "[yellow]Too big![/yellow]",
    Outcome.CORRECT: "[bold green]You win![/bold green]",
}


def outcome_message(outcome: Outcome) -> str:
    """Return the markup line shown for *outcome*."""
    return _OUTCOME_MESSAGES[outcome]


class GuessReporter:
    """Callable pair of hooks passed to :meth:`GuessingLoop.run`.

    Usage::

        reporter = GuessReporter(loop.bounds)
        reporter.intro()
        loop.run(source, on_prompt=reporter.prompt, on_event=reporter)
    """

    def __init__(self, bounds: GuessRange) -> None:
        self._bounds = bounds

    def intro(self) -> None:
        console.print("[bold]Guess the number![/bold]")
        console.print(
            f"[dim]I'm thinking of a number between "
            f"{self._bounds.low} and {self._bounds.high}.[/dim]"
        )

    def prompt(self) -> None:
        console.print("Please input your guess.")

    def __call__(self, event: GuessEvent) -> None:
        # Rejected lines are dropped silently; the next prompt follows.
        if event.rejected or event.outcome is None:
            return
        console.print(f"You guessed: {event.value}")
        if event.value not in self._bounds:
            console.print(
                f"[dim]That is outside {self._bounds.low}..{self._bounds.high}.[/dim]"
            )
        console.print(outcome_message(event.outcome))
        if event.outcome is Outcome.CORRECT:
            noun = "guess" if event.attempts == 1 else "guesses"
            console.print(f"[dim]Found it in {event.attempts} {noun}.[/dim]")
