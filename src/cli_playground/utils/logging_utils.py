"""Logging helpers for cli-playground."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure default logging if no handlers are present.

    Records go to stderr so they never interleave with program output
    on stdout.
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
