"""Command for checking commit subjects given on the command line."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from .cli_types import ConfigOpt

logger = logging.getLogger(__name__)

SubjectsArg = Annotated[
	list[str],
	typer.Argument(help="Commit subjects to check, or '-' to read one subject per line from stdin"),
]


def register_command(app: typer.Typer) -> None:
	"""Register the lint command with the CLI app."""

	@app.command(name="lint")
	def lint_command(subjects: SubjectsArg, config: ConfigOpt = None) -> None:
		"""Check commit subjects against the commit policy."""
		_lint_command_impl(subjects=subjects, config=config)


def _read_subjects(subjects: list[str]) -> list[str]:
	if subjects != ["-"]:
		return subjects
	stdin = typer.get_text_stream("stdin")
	return [line.rstrip("\r\n") for line in stdin if line.strip()]


def _lint_command_impl(subjects: list[str], config: Path | None) -> None:
	"""Actual implementation of the lint command."""
	from checkcommit.config import ConfigError
	from checkcommit.linter import create_checker
	from checkcommit.utils.cli_utils import exit_with_error, print_report, show_warning

	try:
		checker = create_checker(config_path=config)
	except ConfigError as e:
		exit_with_error("Error reading configuration", exception=e)

	if checker.policy.is_empty():
		show_warning("Using empty configuration (i.e. no verification)")

	report = checker.evaluate_all(_read_subjects(subjects))
	print_report(report, checker.policy.help_text)
	if not report.ok:
		raise typer.Exit(1)
