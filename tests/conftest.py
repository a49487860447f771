"""Global test fixtures and configuration."""

from __future__ import annotations

from textwrap import dedent

import pytest

from checkcommit.config import Policy, load_default_policy, parse_policy
from checkcommit.linter import SubjectChecker

# Default policy with an optional leading SPEC tag position
CUSTOM_POLICY_YAML = dedent(
	"""\
	---
	HelpText: "Please refer to https://github.com/haproxy/haproxy/blob/master/CONTRIBUTING#L632"
	PatchScopes:
	  HAProxy Standard Scope:
	    - MINOR
	    - MEDIUM
	    - MAJOR
	    - CRITICAL
	PatchTypes:
	  SPECIAL patch:
	    Values:
	      - SPEC
	  HAProxy Standard Patch:
	    Values:
	      - BUG
	      - BUILD
	      - CLEANUP
	      - DOC
	      - LICENSE
	      - OPTIM
	      - RELEASE
	      - REORG
	      - TEST
	      - REVERT
	    Scope: HAProxy Standard Scope
	  HAProxy Standard Feature Commit:
	    Values:
	      - MINOR
	      - MEDIUM
	      - MAJOR
	      - CRITICAL
	TagOrder:
	  - PatchTypes:
	      - SPECIAL patch
	    Optional: true
	  - PatchTypes:
	      - HAProxy Standard Patch
	      - HAProxy Standard Feature Commit
	"""
)


@pytest.fixture
def default_policy() -> Policy:
	"""The built-in HAProxy policy."""
	return load_default_policy()


@pytest.fixture
def custom_policy() -> Policy:
	"""A policy with an optional SPEC position before the standard one."""
	return parse_policy(CUSTOM_POLICY_YAML)


@pytest.fixture
def checker(default_policy: Policy) -> SubjectChecker:
	"""Checker using the built-in policy."""
	return SubjectChecker(default_policy)


@pytest.fixture
def custom_checker(custom_policy: Policy) -> SubjectChecker:
	"""Checker using the custom policy."""
	return SubjectChecker(custom_policy)
