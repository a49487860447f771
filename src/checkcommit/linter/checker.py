"""Run the full subject check and collect results for a set of commits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .errors import SubjectError, TagScopeError
from .matcher import PolicyMatcher
from .text import SubjectBounds, TextValidator

if TYPE_CHECKING:
	from collections.abc import Iterable

	from checkcommit.config.policy_schema import Policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubjectResult:
	"""Outcome of checking one subject."""

	subject: str
	remainder: str | None = None
	error: SubjectError | None = None

	@property
	def ok(self) -> bool:
		"""Whether the subject passed."""
		return self.error is None

	@property
	def kind(self) -> str | None:
		"""Error kind of a failed subject."""
		return self.error.kind if self.error is not None else None


@dataclass
class CheckReport:
	"""Results for every checked subject, in input order."""

	results: list[SubjectResult] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		"""Whether every subject passed."""
		return all(result.ok for result in self.results)

	@property
	def failures(self) -> list[SubjectResult]:
		"""The subjects that failed."""
		return [result for result in self.results if not result.ok]


class SubjectChecker:
	"""Checks commit subjects against a policy and the subject text rules."""

	def __init__(self, policy: Policy, bounds: SubjectBounds | None = None) -> None:
		self.policy = policy
		self.matcher = PolicyMatcher(policy)
		self.text_validator = TextValidator(bounds)

	def check(self, subject: str) -> str:
		"""
		Check one subject.

		Args:
			subject: First line of a commit message

		Returns:
			str: The subject text without its tag prefixes

		Raises:
			TagScopeError: If the subject is not ASCII or its tags do not satisfy the policy
			SubjectFormatError: If the remaining text breaks the text rules

		"""
		if not subject.isascii():
			msg = "subject contains non-ASCII characters"
			raise TagScopeError(msg, literal=next(c for c in subject if not c.isascii()))

		remainder = self.matcher.classify(subject)
		self.text_validator.validate(remainder)
		return remainder

	def evaluate(self, subject: str) -> SubjectResult:
		"""Check one subject and capture the outcome instead of raising."""
		try:
			remainder = self.check(subject)
		except SubjectError as e:
			logger.debug("Subject '%s' failed: %s", subject, e.describe())
			return SubjectResult(subject=subject, error=e)
		return SubjectResult(subject=subject, remainder=remainder)

	def evaluate_all(self, subjects: Iterable[str]) -> CheckReport:
		"""
		Check every subject; a failing subject never stops the others.

		Args:
			subjects: Commit subjects to check

		Returns:
			CheckReport: One result per subject

		"""
		report = CheckReport()
		for subject in subjects:
			report.results.append(self.evaluate(subject))
		logger.info("Checked %d subjects, %d failed", len(report.results), len(report.failures))
		return report
