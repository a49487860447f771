"""Command-line interface package for check-commit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from checkcommit import __version__
from checkcommit.utils.log_setup import setup_logging

from .lint_cmd import register_command as register_lint_command
from .policy_cmd import register_command as register_policy_command
from .run_cmd import register_command as register_run_command

logger = logging.getLogger(__name__)

# Load environment variables (e.g. API_TOKEN) from .env files
env_local = Path(".env.local")
if env_local.exists():
	load_dotenv(dotenv_path=env_local)
	logger.debug("Loaded environment variables from %s", env_local)
else:
	env_file = Path(".env")
	if env_file.exists():
		load_dotenv(dotenv_path=env_file)
		logger.debug("Loaded environment variables from %s", env_file)

app = typer.Typer(
	help=f"check-commit - validate commit subjects against a patch tag policy\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"check-commit version: {__version__}")
		raise typer.Exit


@app.callback()
def global_options(
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	setup_logging(is_verbose=is_verbose)


register_run_command(app)
register_lint_command(app)
register_policy_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
