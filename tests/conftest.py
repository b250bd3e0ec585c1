"""Shared pytest fixtures and configuration for the cli-playground test suite.

Guidelines
----------
* No terminal interaction in any test: stdin is an ``io.StringIO``.
* questionary must be mocked at the ``_import_questionary`` seam.
* Core tests must be pure — no side effects.
* Randomness is always injected, never drawn from the global generator.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Iterable

import pytest

from cli_playground.exceptions import InputClosedError


class ListLineSource:
    """In-memory :class:`LineSource` fed from a list of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    def read_line(self) -> str:
        if not self._lines:
            raise InputClosedError("Input stream closed before the program finished.")
        self.reads += 1
        return self._lines.pop(0)


class FixedRandom:
    """Random source whose ``randint`` always returns *value*."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Replace ``sys.stdin`` with a StringIO holding *text*."""

    def _feed(text: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed


@pytest.fixture
def make_source() -> type[ListLineSource]:
    """Factory for in-memory line sources: ``make_source(["1", "2"])``."""
    return ListLineSource


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    """Factory for deterministic random sources: ``fixed_random(50)``."""
    return FixedRandom
