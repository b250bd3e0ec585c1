"""Single-pass Celsius → Fahrenheit conversion.

Unlike the guessing loop, the converter gets exactly one chance: a
malformed line is fatal and the
:class:`~cli_playground.exceptions.ValueParseError` propagates to the
CLI error boundary.
"""

from __future__ import annotations

import math

from cli_playground.core.evaluate import celsius_to_fahrenheit
from cli_playground.core.models import Conversion
from cli_playground.core.parsing import parse_temperature
from cli_playground.core.protocols import LineSource
from cli_playground.exceptions import ValueParseError


def convert_text(text: str) -> Conversion:
    """Parse *text* as degrees Celsius and convert it.

    Raises :class:`ValueParseError` when the input is malformed or the
    result does not fit a float.
    """
    celsius = parse_temperature(text)
    fahrenheit = celsius_to_fahrenheit(celsius)
    if not math.isfinite(fahrenheit):
        stripped = text.strip()
        raise ValueParseError(
            f"Temperature out of range: {stripped!r}",
            text=stripped,
            hint="Use a value below 1e307 in magnitude.",
        )
    return Conversion(celsius=celsius, fahrenheit=fahrenheit)


def run_conversion(source: LineSource) -> Conversion:
    """Read one line from *source* and convert it.

    Raises
    ------
    InputReadError
        If the line cannot be read.
    ValueParseError
        If the line is not a number.  Never retried.
    """
    return convert_text(source.read_line())
