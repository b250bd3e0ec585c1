"""Cowsay-style speech bubble with a crab mascot.

Pure text layout — the function returns lines and never prints.
"""

from __future__ import annotations

import textwrap

from cli_playground.exceptions import ConfigurationError

MASCOT: tuple[str, ...] = (
    "        \\",
    "         \\",
    "            _~^~^~_",
    "        \\) /  o o  \\ (/",
    "          '_   -   _'",
    "          / '-----' \\",
)


def _wrap(message: str, width: int) -> list[str]:
    lines: list[str] = []
    for paragraph in message.splitlines() or [""]:
        wrapped = textwrap.wrap(
            paragraph,
            width=width,
            break_long_words=True,
            replace_whitespace=False,
        )
        lines.extend(wrapped or [""])
    return lines


def render_speech_bubble(message: str, width: int | None = None) -> list[str]:
    """Draw *message* inside a bubble, followed by the mascot.

    Parameters
    ----------
    message:
        Text to display.  Embedded newlines start new paragraphs.
    width:
        Maximum characters per bubble line.  Defaults to the number of
        characters in *message*, which keeps a one-line message on one
        line.

    Raises
    ------
    ConfigurationError
        If *width* is not positive.
    """
    if width is None:
        width = max(len(message), 1)
    if width < 1:
        raise ConfigurationError(
            f"Bubble width must be positive (got {width}).",
        )

    body = _wrap(message, width)
    inner = max(len(line) for line in body)

    out = [" " + "_" * (inner + 2)]
    if len(body) == 1:
        out.append(f"< {body[0]:<{inner}} >")
    else:
        last = len(body) - 1
        for i, line in enumerate(body):
            if i == 0:
                left, right = "/", "\\"
            elif i == last:
                left, right = "\\", "/"
            else:
                left, right = "|", "|"
            out.append(f"{left} {line:<{inner}} {right}")
    out.append(" " + "-" * (inner + 2))
    out.extend(MASCOT)
    return out
