"""Domain models for cli-playground.

All records are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and self-validation.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from cli_playground.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Guessing game
# ---------------------------------------------------------------------------

class Outcome(enum.Enum):
    """Result of comparing a guess with the target value."""

    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    CORRECT = "correct"


class LoopState(enum.Enum):
    """States of the guessing loop.

    ``PROMPTING`` is initial and ``WON`` is terminal.  ``PARSING`` and
    ``COMPARING`` are transient: they are only observable on the event
    describing the line that was just processed.
    """

    PROMPTING = "prompting"
    PARSING = "parsing"
    COMPARING = "comparing"
    WON = "won"


@dataclass(frozen=True, slots=True)
class GuessRange:
    """Inclusive bounds the target value is drawn from."""

    low: int = 1
    """Smallest possible target."""

    high: int = 100
    """Largest possible target."""

    def __post_init__(self) -> None:
        if self.low < 0:
            raise ConfigurationError(
                f"Lower bound must not be negative (got {self.low}).",
                hint="Guesses are non-negative whole numbers.",
            )
        if self.low > self.high:
            raise ConfigurationError(
                f"Empty range: low={self.low} is greater than high={self.high}.",
                hint="Pass --low smaller than or equal to --high.",
            )

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high


@dataclass(frozen=True, slots=True)
class GuessEvent:
    """What happened to one line submitted to the guessing loop."""

    state: LoopState
    """Where the line was resolved: ``PARSING`` for a rejected line,
    ``COMPARING`` for a miss, ``WON`` for the winning guess."""

    line: str
    """The raw line as read, without its trailing newline."""

    value: int | None
    """Parsed guess, or ``None`` when the line was rejected."""

    outcome: Outcome | None
    """Comparison result, or ``None`` when the line was rejected."""

    attempts: int
    """Number of successfully parsed guesses so far, this one included."""

    @property
    def rejected(self) -> bool:
        return self.value is None


# ---------------------------------------------------------------------------
# Converter
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Conversion:
    """A Celsius reading and its Fahrenheit equivalent."""

    celsius: float
    fahrenheit: float
