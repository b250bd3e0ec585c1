"""Pure evaluation functions: guess comparison and unit conversion."""

from __future__ import annotations

from cli_playground.core.models import Outcome


def compare_guess(value: int, target: int) -> Outcome:
    """Compare *value* against *target*."""
    if value < target:
        return Outcome.TOO_SMALL
    if value > target:
        return Outcome.TOO_BIG
    return Outcome.CORRECT


def celsius_to_fahrenheit(celsius: float) -> float:
    """Apply ``f = c * 9/5 + 32``."""
    return celsius * 9.0 / 5.0 + 32.0


def format_number(value: float) -> str:
    """Render *value* without a trailing ``.0`` when it is integral.

    >>> format_number(32.0)
    '32'
    >>> format_number(99.5)
    '99.5'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)
