"""Infrastructure layer — external system integration.

This layer wraps all interaction with the process's standard streams.
Every raw stream exception must be caught here and re-raised as a
:class:`~cli_playground.exceptions.PlaygroundError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cli_playground.infra.stdin_source import StdinLineSource

__all__: list[str] = [
    "StdinLineSource",
]
