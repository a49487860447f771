"""Detect the CI platform and the refs of the change being checked."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from collections.abc import Mapping

logger = logging.getLogger(__name__)


class GitEnvironmentError(Exception):
	"""Raised when no supported CI environment can be detected."""


@dataclass(frozen=True)
class GitEnvironment:
	"""Source and target refs of a pull or merge request."""

	name: str
	ref: str
	base: str


@dataclass(frozen=True)
class _KnownVars:
	name: str
	ref_var: str
	base_var: str


KNOWN_ENVIRONMENTS = (
	_KnownVars("GitHub", "GITHUB_REF", "GITHUB_BASE_REF"),
	_KnownVars("GitLab", "CI_MERGE_REQUEST_SOURCE_BRANCH_NAME", "CI_MERGE_REQUEST_TARGET_BRANCH_NAME"),
)


def detect_git_environment(environ: Mapping[str, str] | None = None) -> GitEnvironment:
	"""
	Detect the running CI environment from its variables.

	Args:
		environ: Environment to inspect, defaults to os.environ

	Returns:
		GitEnvironment: The detected platform with its refs

	Raises:
		GitEnvironmentError: If no known set of variables is present

	"""
	env = os.environ if environ is None else environ
	for known in KNOWN_ENVIRONMENTS:
		ref = env.get(known.ref_var, "")
		base = env.get(known.base_var, "")
		if ref and base:
			logger.info("Detected %s environment", known.name)
			return GitEnvironment(name=known.name, ref=ref, base=base)

	names = ", ".join(f"{k.ref_var}/{k.base_var}" for k in KNOWN_ENVIRONMENTS)
	msg = f"No suitable git environment variables found (expected one of {names})"
	raise GitEnvironmentError(msg)
