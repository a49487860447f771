"""Utility functions for CLI operations in check-commit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from checkcommit.utils.log_setup import display_error_summary, display_warning_summary

if TYPE_CHECKING:
	from checkcommit.config.policy_schema import Policy
	from checkcommit.linter.checker import CheckReport

console = Console()
logger = logging.getLogger(__name__)


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(escape(error_text))


def show_warning(message: str) -> None:
	"""
	Display a warning summary with standardized formatting.

	Args:
	        message: The warning message to display

	"""
	display_warning_summary(escape(message))


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def print_report(report: CheckReport, help_text: str = "") -> None:
	"""
	Print the failing subjects of a report, or a success line.

	Args:
	        report: Results of a check run
	        help_text: Policy help text shown after the failures

	"""
	if report.ok:
		console.print(f"[green]check completed without errors[/green] ({len(report.results)} subjects)")
		return

	for result in report.failures:
		if result.error is None:
			continue
		console.print(f"[red]FAIL[/red] {escape(result.error.describe())}")
		console.print(f"  original subject message '{escape(result.subject)}'", highlight=False)

	console.print(f"[red]encountered {len(report.failures)} commit message error(s)[/red]")
	if help_text:
		console.print(escape(help_text), highlight=False)


def render_policy(policy: Policy) -> Table:
	"""
	Build a table describing the tag positions of a policy.

	Args:
	        policy: Policy to describe

	Returns:
	        Table: One row per patch type of every tag position

	"""
	table = Table(title="Commit policy", show_lines=False)
	table.add_column("Position", justify="right")
	table.add_column("Optional")
	table.add_column("Patch type")
	table.add_column("Tags")
	table.add_column("Severities")

	for index, position in enumerate(policy.tag_order, start=1):
		for name in position.patch_types:
			patch_type = policy.patch_types[name]
			table.add_row(
				str(index),
				"yes" if position.optional else "no",
				escape(name),
				", ".join(sorted(patch_type.values)),
				", ".join(sorted(policy.severities_for(name))) or "-",
			)
	return table
