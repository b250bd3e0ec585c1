"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two proxies are exposed: :data:`console` writes program output to
stdout, :data:`err_console` writes errors and hints to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from cli_playground.exceptions import EnvironmentError

_MARKUP_TAG_RE = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


def escape_markup(text: str) -> str:
	"""Escape square brackets in user-supplied text for Rich markup."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


def strip_markup(text: str) -> str:
	"""Remove simple Rich style tags such as ``[bold red]`` / ``[/bold red]``."""
	return _MARKUP_TAG_RE.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def _plain_file(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print.

		With ``markup=False`` the text is printed verbatim: no markup,
		no emoji codes, no wrapping at the console width.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			if markup:
				objects = tuple(
					strip_markup(obj) if isinstance(obj, str) else obj
					for obj in objects
				)
			print(*objects, file=self._plain_file())
			return
		if markup:
			rich_console.print(*objects)
			return
		rich_console.print(*objects, markup=False, emoji=False, soft_wrap=True)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
