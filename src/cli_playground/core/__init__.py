"""Core / service layer — pure logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct access to ``sys.stdin`` / ``sys.stdout``.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed; randomness is injected.
"""

from cli_playground.core.converter import convert_text, run_conversion
from cli_playground.core.evaluate import celsius_to_fahrenheit, compare_guess
from cli_playground.core.guessing import GuessingLoop
from cli_playground.core.models import (
    Conversion,
    GuessEvent,
    GuessRange,
    LoopState,
    Outcome,
)
from cli_playground.core.parsing import parse_guess, parse_temperature
from cli_playground.core.protocols import LineSource, TargetSource

__all__: list[str] = [
    "Conversion",
    "GuessEvent",
    "GuessRange",
    "GuessingLoop",
    "LineSource",
    "LoopState",
    "Outcome",
    "TargetSource",
    "celsius_to_fahrenheit",
    "compare_guess",
    "convert_text",
    "parse_guess",
    "parse_temperature",
    "run_conversion",
]
