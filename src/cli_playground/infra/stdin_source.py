"""Infrastructure: line source backed by a text stream.

Rules
-----
* The stream is looked up at read time so that tests (and pytest's
  capture) can swap ``sys.stdin``.
* ``OSError`` / ``UnicodeDecodeError`` are re-raised as
  :class:`~cli_playground.exceptions.InputReadError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from cli_playground.exceptions import InputClosedError, InputReadError

logger = logging.getLogger(__name__)


class StdinLineSource:
    """Blocking line reader over ``sys.stdin`` or an explicit stream.

    Satisfies :class:`~cli_playground.core.protocols.LineSource`.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> str:
        """Read one line, stripping only the line terminator.

        Raises
        ------
        InputClosedError
            On end-of-stream (Ctrl+D, closed pipe).
        InputReadError
            When the stream reports a read or decode failure.
        """
        try:
            raw = self.stream.readline()
        except UnicodeDecodeError as exc:
            raise InputReadError(
                "Failed to read line: input is not valid UTF-8.",
            ) from exc
        except (OSError, ValueError) as exc:
            # ValueError: I/O operation on closed file.
            raise InputReadError(f"Failed to read line: {exc}") from exc

        if raw == "":
            raise InputClosedError(
                "Input stream closed before the program finished.",
                hint="Provide input interactively or pipe enough lines.",
            )

        line = raw.rstrip("\r\n")
        logger.debug("Read line %r", line)
        return line
