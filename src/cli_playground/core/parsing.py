"""Pure parsers turning an input line into a typed value.

Every function in this module is a **pure** transformation — no I/O,
no side effects.  Failures are reported as
:class:`~cli_playground.exceptions.ValueParseError`; whether to retry
is the caller's decision.
"""

from __future__ import annotations

import math
import re

from cli_playground.exceptions import ValueParseError

# ASCII digits only, optional leading '+'.  Rejects '1_000' and
# non-ASCII digits that int() would otherwise accept.
_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
    re.ASCII,
)


def parse_guess(line: str) -> int:
    """Parse *line* as a non-negative whole number.

    >>> parse_guess(" 42\\n")
    42
    """
    text = line.strip()
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueParseError(
            f"Not a whole number: {text!r}",
            text=text,
            hint="Type digits only, e.g. 42.",
        )
    return int(text)


def parse_temperature(line: str) -> float:
    """Parse *line* as a finite decimal number.

    Accepts signs, a fractional part and an exponent.  ``inf`` and
    ``nan`` are rejected.
    """
    text = line.strip()
    if not _FLOAT_RE.fullmatch(text):
        raise ValueParseError(
            f"Not a number: {text!r}",
            text=text,
            hint="Type a number such as 21 or -3.5.",
        )
    value = float(text)
    if not math.isfinite(value):
        # e.g. '1e999'
        raise ValueParseError(f"Number out of range: {text!r}", text=text)
    return value
