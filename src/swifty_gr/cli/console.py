"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

``console`` writes to stderr (diagnostics, usage, errors);
``out_console`` writes to stdout (normal command output).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from swifty_gr.exceptions import SwiftyGrError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``SwiftyGrError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise SwiftyGrError(
			"rich is not installed.",
			hint="Install with: pip install rich",
		) from exc
	return Console


def rich_available() -> bool:
	"""Return ``True`` when Rich can be imported."""
	try:
		_load_rich_console_class()
	except SwiftyGrError:
		return False
	return True


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	A fresh Rich console is created per call so the proxy always writes
	to the *current* ``sys.stdout``/``sys.stderr``.
	"""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _stream(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich markup when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except SwiftyGrError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects)

	def print_text(self, text: str) -> None:
		"""Print *text* literally: no markup, no highlighting, no wrapping."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except SwiftyGrError:
			print(text, file=self._stream())
			return
		rich_console.print(
			text, markup=False, highlight=False, soft_wrap=True,
		)

	def print_error(self, message: str, hint: str | None = None) -> None:
		"""Print ``Error: <message>`` and an optional ``Hint:`` line.

		User-supplied text is escaped so tokens like ``[x]`` stay literal.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except SwiftyGrError:
			print(f"Error: {message}", file=self._stream())
			if hint:
				print(f"Hint: {hint}", file=self._stream())
			return

		from rich.markup import escape

		rich_console.print(
			f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True,
		)
		if hint:
			rich_console.print(
				f"[yellow]Hint:[/yellow] {escape(hint)}", soft_wrap=True,
			)


console = _ConsoleProxy(stderr=True)
out_console = _ConsoleProxy(stderr=False)
