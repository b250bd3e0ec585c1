"""Custom exception hierarchy for cli-playground.

All exceptions that cross layer boundaries must inherit from
:class:`PlaygroundError`.  Raw stream exceptions (``OSError``,
``UnicodeDecodeError``) must NEVER propagate beyond the infrastructure
layer — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
PlaygroundError
├── InputReadError
│   └── InputClosedError
├── ValueParseError
├── ConfigurationError
├── GameOverError
├── SelectionCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class PlaygroundError(Exception):
    """Base exception for all cli-playground errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input stream ----------------------------------------------------------

class InputReadError(PlaygroundError):
    """Raised when standard input reports a read failure."""


class InputClosedError(InputReadError):
    """Raised when standard input reaches end-of-stream."""


# --- Parsing ---------------------------------------------------------------

class ValueParseError(PlaygroundError):
    """Raised when an input line is not valid numeric text."""

    def __init__(
        self,
        message: str,
        *,
        text: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.text: str = text
        """The trimmed text that failed to parse."""


# --- Options / game flow ---------------------------------------------------

class ConfigurationError(PlaygroundError):
    """Raised when command-line options are inconsistent or out of range."""


class GameOverError(PlaygroundError):
    """Raised when a guess is submitted after the game has been won."""


class SelectionCancelledError(PlaygroundError):
    """Raised when the interactive demo menu is cancelled."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PlaygroundError):
    """Raised when a required runtime dependency is not available."""
