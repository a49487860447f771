"""Logging setup and summary panels for check-commit."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

console = Console(stderr=True)


def setup_logging(*, is_verbose: bool) -> None:
	"""
	Configure logging based on verbosity.

	In verbose mode everything down to DEBUG is shown, otherwise the level
	comes from LOG_LEVEL and defaults to WARNING.

	Args:
	    is_verbose: Whether to enable debug logging.

	"""
	log_level = "DEBUG" if is_verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
	if log_level not in logging.getLevelNamesMapping():
		log_level = "WARNING"

	logging.basicConfig(
		level=log_level,
		format="%(message)s",
		datefmt="[%X]",
		handlers=[RichHandler(console=console, rich_tracebacks=True, show_time=True, show_path=is_verbose)],
		force=True,
	)

	if not is_verbose:
		logging.getLogger("urllib3").setLevel(logging.WARNING)
		logging.getLogger("requests").setLevel(logging.WARNING)


def display_error_summary(message: str, title: str = "Error") -> None:
	"""Print an error panel."""
	console.print(Panel(message, title=f"[bold red]{title}", border_style="red", expand=False))


def display_warning_summary(message: str, title: str = "Warning") -> None:
	"""Print a warning panel."""
	console.print(Panel(message, title=f"[bold yellow]{title}", border_style="yellow", expand=False))
