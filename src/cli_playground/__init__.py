"""cli-playground — small interactive command-line demos.

Guessing game, unit converter, greeter and string helpers behind one
console script with a strict layered architecture.
"""

from cli_playground.version import __version__

__all__: list[str] = ["__version__"]
