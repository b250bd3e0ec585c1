"""Tests for the guessing-game state machine (core/guessing.py).

The target is pinned with a fixed random source; lines come from an
in-memory source.  No terminal, no global random state.
"""

from __future__ import annotations

import random
from typing import Any

import pytest

from cli_playground.core.guessing import GuessingLoop
from cli_playground.core.models import GuessEvent, GuessRange, LoopState, Outcome
from cli_playground.exceptions import (
    ConfigurationError,
    GameOverError,
    InputClosedError,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_target_drawn_once_from_default_range(self, fixed_random: Any) -> None:
        rng = fixed_random(50)
        loop = GuessingLoop(rng)
        assert loop.target == 50
        assert rng.calls == [(1, 100)]

    def test_custom_bounds_passed_to_rng(self, fixed_random: Any) -> None:
        rng = fixed_random(4)
        loop = GuessingLoop(rng, GuessRange(low=3, high=9))
        assert rng.calls == [(3, 9)]
        assert loop.bounds == GuessRange(3, 9)

    def test_initial_state_is_prompting(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        assert loop.state is LoopState.PROMPTING
        assert loop.attempts == 0
        assert not loop.finished

    def test_seeded_random_is_reproducible(self) -> None:
        a = GuessingLoop(random.Random(1234))
        b = GuessingLoop(random.Random(1234))
        assert a.target == b.target
        assert a.target in GuessRange()

    def test_does_not_touch_global_random(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _boom(*_args: object) -> int:
            raise AssertionError("global random used")

        monkeypatch.setattr(random, "randint", _boom)
        GuessingLoop(random.Random(0))


class TestGuessRange:
    def test_defaults(self) -> None:
        assert (GuessRange().low, GuessRange().high) == (1, 100)

    def test_single_value_range(self) -> None:
        assert 5 in GuessRange(5, 5)

    def test_empty_range_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            GuessRange(low=10, high=1)

    def test_negative_low_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            GuessRange(low=-1, high=1)

    def test_contains_only_ints_in_bounds(self) -> None:
        bounds = GuessRange(1, 10)
        assert 1 in bounds
        assert 10 in bounds
        assert 11 not in bounds
        assert "5" not in bounds


# ---------------------------------------------------------------------------
# submit() transitions
# ---------------------------------------------------------------------------

class TestSubmit:
    def test_parse_failure_returns_to_prompting(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        event = loop.submit("abc")
        assert event.rejected
        assert event.state is LoopState.PARSING
        assert event.outcome is None
        assert loop.state is LoopState.PROMPTING
        assert loop.attempts == 0

    def test_miss_returns_to_prompting(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        event = loop.submit("10")
        assert event.value == 10
        assert event.outcome is Outcome.TOO_SMALL
        assert event.state is LoopState.COMPARING
        assert loop.state is LoopState.PROMPTING
        assert loop.attempts == 1

    def test_hit_is_terminal(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        event = loop.submit(" 50 ")
        assert event.outcome is Outcome.CORRECT
        assert event.state is LoopState.WON
        assert loop.finished

    def test_submit_after_win_raises(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        loop.submit("50")
        with pytest.raises(GameOverError):
            loop.submit("50")

    def test_repeated_garbage_never_changes_target(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        for text in ["abc", "", "-1", "5.5", "x" * 100] * 20:
            loop.submit(text)
            assert loop.target == 50
            assert not loop.finished
        assert loop.attempts == 0

    def test_event_keeps_raw_line(self, fixed_random: Any) -> None:
        loop = GuessingLoop(fixed_random(50))
        assert loop.submit("  90").line == "  90"


# ---------------------------------------------------------------------------
# run() end-to-end
# ---------------------------------------------------------------------------

class TestRun:
    def test_scenario_reprompt_small_big_correct(
        self, fixed_random: Any, make_source: Any,
    ) -> None:
        loop = GuessingLoop(fixed_random(50))
        source = make_source(["abc", "10", "90", "50", "unused"])
        prompts: list[int] = []
        events: list[GuessEvent] = []

        attempts = loop.run(
            source,
            on_prompt=lambda: prompts.append(1),
            on_event=events.append,
        )

        assert [e.outcome for e in events] == [
            None,
            Outcome.TOO_SMALL,
            Outcome.TOO_BIG,
            Outcome.CORRECT,
        ]
        assert events[0].rejected
        assert source.reads == 4
        assert len(prompts) == 4
        assert attempts == 3
        assert loop.state is LoopState.WON

    def test_callbacks_are_optional(
        self, fixed_random: Any, make_source: Any,
    ) -> None:
        loop = GuessingLoop(fixed_random(7))
        assert loop.run(make_source(["7"])) == 1

    def test_closed_input_propagates(
        self, fixed_random: Any, make_source: Any,
    ) -> None:
        loop = GuessingLoop(fixed_random(50))
        with pytest.raises(InputClosedError):
            loop.run(make_source(["1", "2"]))
        assert loop.target == 50
        assert not loop.finished
