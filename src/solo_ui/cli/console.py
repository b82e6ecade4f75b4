"""CLI console and logging helpers.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
remain functional even when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from solo_ui.exceptions import EnvironmentError

LOG_FORMAT: str = "%(name)s: %(message)s"


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
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def configure_logging(*, verbose: bool = False) -> None:
	"""Route stdlib logging through a Rich handler on stderr.

	WARNING and above by default; DEBUG with *verbose*.  Calling it
	again replaces the previously installed handler.
	"""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc

	handler = RichHandler(
		console=get_rich_console(),
		show_time=verbose,
		show_path=False,
		markup=False,
		rich_tracebacks=verbose,
	)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))

	logger = logging.getLogger("solo_ui")
	for existing in list(logger.handlers):
		logger.removeHandler(existing)
	logger.addHandler(handler)
	logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	logger.propagate = False


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
