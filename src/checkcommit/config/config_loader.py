"""
Configuration loader for check-commit.

This module resolves the policy file, parses it and turns it into an
immutable Policy. When no file can be read the built-in policy is used.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from checkcommit.config.defaults import CONFIG_FILE_NAME, DEFAULT_POLICY_YAML, XDG_APP_NAME
from checkcommit.config.policy_schema import Policy

logger = logging.getLogger(__name__)


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


def parse_policy(text: str, source: str = "<string>") -> Policy:
	"""
	Parse a YAML policy document.

	Args:
		text: YAML document
		source: Where the document came from, used in error messages

	Returns:
		Policy: The validated policy

	Raises:
		ConfigParsingError: If the document is not valid YAML or not a valid policy

	"""
	try:
		content = yaml.safe_load(text)
	except yaml.YAMLError as e:
		msg = f"Error loading commit policy from {source}: {e}"
		raise ConfigParsingError(msg) from e

	if content is None:
		content = {}
	if not isinstance(content, dict):
		msg = f"Commit policy in {source} must be a YAML mapping"
		raise ConfigParsingError(msg)

	return _build_policy(content, source)


def _build_policy(content: dict[str, Any], source: str) -> Policy:
	try:
		return Policy.model_validate(content)
	except ValidationError as e:
		msg = f"Invalid commit policy in {source}: {e}"
		raise ConfigParsingError(msg) from e


def load_default_policy() -> Policy:
	"""Return the built-in policy."""
	return parse_policy(DEFAULT_POLICY_YAML, source="built-in defaults")


class ConfigLoader:
	"""
	Loads the commit policy for check-commit.

	The loader only resolves and parses the policy file; the resulting
	Policy is handed to the linter explicitly.

	"""

	def __init__(self, config_file: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
			config_file: Path to configuration file (optional)

		"""
		self._config_file = config_file
		self._resolved_config_file = self._resolve_config_file(config_file)
		self.used_defaults = False
		self._policy = self._load_policy()

	@property
	def config_file(self) -> Path | None:
		"""Path of the configuration file that was looked up, if any."""
		return self._resolved_config_file

	@staticmethod
	def _resolve_config_file(config_file: Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.check-commit.yml in the current directory
		2. $XDG_CONFIG_HOME/check-commit/config.yml

		Args:
			config_file: Explicitly provided config file path (optional)

		Returns:
			Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = config_file.expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path  # handled in _load_policy

		local_config = Path(CONFIG_FILE_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / XDG_APP_NAME / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	def _load_policy(self) -> Policy:
		"""
		Load the policy from the resolved file, or fall back to the built-in policy.

		Returns:
			Policy: Loaded policy

		Raises:
			ConfigParsingError: If the file exists but is not a valid policy

		"""
		path = self._resolved_config_file
		if path is None:
			logger.info("No configuration file found, using built-in fallback policy (HAProxy defaults)")
			return self._defaults()

		try:
			text = path.read_text(encoding="utf-8")
		except UnicodeDecodeError as e:
			msg = f"Error loading commit policy from {path}: not valid UTF-8 ({e})"
			raise ConfigParsingError(msg) from e
		except OSError as e:
			logger.warning("Error reading config (%s), using built-in fallback policy (HAProxy defaults)", e)
			return self._defaults()

		policy = parse_policy(text, source=str(path))
		logger.info("Loaded commit policy from %s", path)
		return policy

	def _defaults(self) -> Policy:
		self.used_defaults = True
		return load_default_policy()

	@property
	def get(self) -> Policy:
		"""
		Get the loaded policy.

		Returns:
			Policy: The current policy
		"""
		return self._policy
