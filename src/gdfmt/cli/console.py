"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

The console always targets **stderr**; stdout is reserved for formatted
source text and the check-mode success line.
"""

from __future__ import annotations

import sys
from typing import Any

from gdfmt.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr.

	Soft wrapping keeps long paths and parser messages on one line;
	automatic highlighting is off so messages render verbatim.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True, highlight=False)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in user-controlled *text* (paths, messages)."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, plain: str | None = None) -> None:
		"""Render with Rich when available, else plain stderr print.

		*plain* replaces the markup-bearing *objects* on the fallback path.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			if plain is not None:
				print(plain, file=sys.stderr)
			else:
				print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render ``Error: <message>`` and an optional ``Hint:`` line."""
		self.print(
			f"[bold red]Error:[/bold red] {escape_markup(message)}",
			plain=f"Error: {message}",
		)
		if hint:
			self.print(
				f"[yellow]Hint:[/yellow] {escape_markup(hint)}",
				plain=f"Hint: {hint}",
			)


console = _ConsoleProxy()
