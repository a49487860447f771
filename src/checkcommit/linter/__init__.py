"""
Subject linter package for validating commit subjects against a patch tag policy.

This package provides the tag prefix matcher, the subject text validator
and the checker that combines them.

"""

from pathlib import Path

from checkcommit.config import ConfigLoader, Policy

from .checker import CheckReport, SubjectChecker, SubjectResult
from .errors import SubjectError, SubjectFormatError, TagScopeError
from .matcher import ParsedTag, PolicyMatcher, parse_tag
from .text import SubjectBounds, TextValidator

__all__ = [
	"CheckReport",
	"ParsedTag",
	"PolicyMatcher",
	"SubjectBounds",
	"SubjectChecker",
	"SubjectError",
	"SubjectFormatError",
	"SubjectResult",
	"TagScopeError",
	"TextValidator",
	"create_checker",
	"parse_tag",
]


def create_checker(
	policy: Policy | None = None,
	config_path: Path | None = None,
	bounds: SubjectBounds | None = None,
) -> SubjectChecker:
	"""
	Create a SubjectChecker, loading the policy when none is given.

	Args:
	    policy: Pre-loaded policy
	    config_path: Path to a policy file, used when policy is None
	    bounds: Override subject text bounds

	Returns:
	    SubjectChecker: Configured checker

	"""
	if policy is None:
		policy = ConfigLoader(config_path).get
	return SubjectChecker(policy, bounds=bounds)
