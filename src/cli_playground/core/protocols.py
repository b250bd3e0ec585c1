"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Contract for line-oriented input backends.

    Any object that implements :meth:`read_line` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def read_line(self) -> str:
        """Block until one line is available and return it.

        The trailing newline is stripped; surrounding whitespace is
        otherwise preserved.  Trimming is the parser's job.

        Raises
        ------
        InputClosedError
            When the stream is exhausted.
        InputReadError
            When the underlying stream reports a read failure.
        """
        ...  # pragma: no cover


class TargetSource(Protocol):
    """The subset of :class:`random.Random` the guessing loop needs."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniformly drawn integer in ``[a, b]``."""
        ...  # pragma: no cover
