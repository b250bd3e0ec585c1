"""Small string and loop helpers used by the ``first-word``, ``countdown``
and ``greet`` commands."""

from __future__ import annotations

from cli_playground.exceptions import ConfigurationError

GREETINGS: tuple[str, ...] = ("你好，世界！", "Hello World!")
"""One hello line per region, printed in this order."""


def first_word(text: str) -> str:
    """Return *text* up to, not including, its first space.

    The whole string is returned when it contains no space.  Only the
    ASCII space counts as a separator.
    """
    index = text.find(" ")
    if index == -1:
        return text
    return text[:index]


def countdown(start: int) -> list[str]:
    """Build the countdown lines ``start!`` … ``1!`` then ``LIFTOFF!!!``."""
    if start < 0:
        raise ConfigurationError(
            f"Countdown must start at zero or above (got {start}).",
        )
    lines: list[str] = []
    number = start
    while number != 0:
        lines.append(f"{number}!")
        number -= 1
    lines.append("LIFTOFF!!!")
    return lines
