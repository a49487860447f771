"""Command for validating and displaying the commit policy."""

from pathlib import Path

import typer

from .cli_types import ConfigOpt


def register_command(app: typer.Typer) -> None:
	"""Register the policy command with the CLI app."""

	@app.command(name="policy")
	def policy_command(config: ConfigOpt = None) -> None:
		"""Validate the commit policy and show its tag positions."""
		_policy_command_impl(config=config)


def _policy_command_impl(config: Path | None) -> None:
	"""Actual implementation of the policy command."""
	from checkcommit.config import ConfigError, ConfigLoader
	from checkcommit.utils.cli_utils import console, exit_with_error, render_policy, show_warning

	try:
		loader = ConfigLoader(config)
	except ConfigError as e:
		exit_with_error("Error reading configuration", exception=e)

	policy = loader.get
	source = "built-in defaults" if loader.used_defaults else str(loader.config_file)
	console.print(f"Policy loaded from {source}", highlight=False)

	if policy.is_empty():
		show_warning("Using empty configuration (i.e. no verification)")
		return

	console.print(render_policy(policy))
	if policy.help_text:
		console.print(policy.help_text, highlight=False)
