"""Guessing-game state machine and read-evaluate loop.

The loop draws its target once, at construction, from a random source
injected by the caller and never touches the process-wide generator.
It performs no rendering: callers observe progress through the
``on_prompt`` / ``on_event`` callbacks passed to :meth:`GuessingLoop.run`.

Transitions
-----------
PROMPTING ─line─▶ PARSING ─parse error─▶ PROMPTING
                          └─parsed──────▶ COMPARING ─too small/big─▶ PROMPTING
                                                    └─correct──────▶ WON
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cli_playground.core.evaluate import compare_guess
from cli_playground.core.models import GuessEvent, GuessRange, LoopState, Outcome
from cli_playground.core.parsing import parse_guess
from cli_playground.core.protocols import LineSource, TargetSource
from cli_playground.exceptions import GameOverError, ValueParseError

logger = logging.getLogger(__name__)


class GuessingLoop:
    """Interactive loop comparing guesses against a hidden target.

    Parameters
    ----------
    rng:
        Random source owned by this loop, typically a
        :class:`random.Random` instance.  Only :meth:`randint` is used,
        exactly once.
    bounds:
        Inclusive range the target is drawn from.
    """

    def __init__(
        self,
        rng: TargetSource,
        bounds: GuessRange | None = None,
    ) -> None:
        self._bounds: GuessRange = bounds if bounds is not None else GuessRange()
        self._target: int = rng.randint(self._bounds.low, self._bounds.high)
        self._state: LoopState = LoopState.PROMPTING
        self._attempts: int = 0
        logger.debug(
            "Target drawn from [%d, %d]: %d",
            self._bounds.low,
            self._bounds.high,
            self._target,
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def bounds(self) -> GuessRange:
        return self._bounds

    @property
    def target(self) -> int:
        return self._target

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def finished(self) -> bool:
        return self._state is LoopState.WON

    # ------------------------------------------------------------------
    # Single step
    # ------------------------------------------------------------------

    def submit(self, line: str) -> GuessEvent:
        """Feed one input line through the state machine.

        A malformed line is discarded and the loop returns to
        ``PROMPTING``; it never terminates the game.

        Raises
        ------
        GameOverError
            If the game has already been won.
        """
        if self.finished:
            raise GameOverError("The game is already over.")

        self._state = LoopState.PARSING
        try:
            value = parse_guess(line)
        except ValueParseError as exc:
            logger.debug("Discarding unparsable input %r", exc.text)
            self._state = LoopState.PROMPTING
            return GuessEvent(
                state=LoopState.PARSING,
                line=line,
                value=None,
                outcome=None,
                attempts=self._attempts,
            )

        self._state = LoopState.COMPARING
        self._attempts += 1
        outcome = compare_guess(value, self._target)
        self._state = LoopState.WON if outcome is Outcome.CORRECT else LoopState.PROMPTING
        return GuessEvent(
            state=LoopState.WON if self.finished else LoopState.COMPARING,
            line=line,
            value=value,
            outcome=outcome,
            attempts=self._attempts,
        )

    # ------------------------------------------------------------------
    # Full loop
    # ------------------------------------------------------------------

    def run(
        self,
        source: LineSource,
        *,
        on_prompt: Callable[[], None] | None = None,
        on_event: Callable[[GuessEvent], None] | None = None,
    ) -> int:
        """Read and evaluate lines from *source* until the target is hit.

        Returns the number of parsed guesses it took.  Read failures
        (:class:`~cli_playground.exceptions.InputReadError`) propagate
        unchanged; the loop never retries them.
        """
        while not self.finished:
            if on_prompt is not None:
                on_prompt()
            line = source.read_line()
            event = self.submit(line)
            if on_event is not None:
                on_event(event)
        logger.debug("Game won after %d attempt(s)", self._attempts)
        return self._attempts
