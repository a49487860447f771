"""Match the tag prefixes of a commit subject against a policy."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import TagScopeError

if TYPE_CHECKING:
	from checkcommit.config.policy_schema import Policy, TagPosition

logger = logging.getLogger(__name__)

# TAG, optionally followed by /SEVERITY, then ": " - anchored at the start of the text
TAG_PREFIX_RE = re.compile(r"^(?P<tag>[A-Z]+)(?:/(?P<severity>[A-Z]+))?: ")


@dataclass(frozen=True)
class ParsedTag:
	"""A tag prefix found at the start of a subject."""

	tag: str
	severity: str
	literal: str


def parse_tag(text: str) -> ParsedTag | None:
	"""
	Match the tag prefix grammar at the start of text.

	Args:
		text: Subject text, or what is left of it

	Returns:
		The parsed prefix, or None if text does not start with a tag

	"""
	match = TAG_PREFIX_RE.match(text)
	if match is None:
		return None
	return ParsedTag(tag=match.group("tag"), severity=match.group("severity") or "", literal=match.group(0))


def _candidate(text: str) -> str:
	"""Return the leading word of text, shown when no tag prefix matched."""
	return text.split(" ", 1)[0]


class PolicyMatcher:
	"""
	Strips the tag prefixes a policy requires from commit subjects.

	Positions are walked in policy order. At each position a single prefix
	is parsed from the remaining text and tried against the position's patch
	types in declared order; the first one that accepts it wins and the
	prefix is consumed. A mandatory position nothing accepts fails the whole
	subject.

	"""

	def __init__(self, policy: Policy) -> None:
		self.policy = policy

	def accepts(self, patch_type_name: str, parsed: ParsedTag) -> bool:
		"""
		Check a parsed prefix against one patch type.

		Args:
			patch_type_name: Name of the patch type in the policy
			parsed: The prefix found in the subject

		Returns:
			True if the tag is in the vocabulary and the severity, if any, is allowed

		"""
		patch_type = self.policy.patch_types[patch_type_name]
		if parsed.tag not in patch_type.values:
			return False

		if not parsed.severity:
			return True

		if not patch_type.scope:
			logger.warning(
				"cannot verify severity %s without a scope definition for patch type '%s'",
				parsed.severity,
				patch_type_name,
			)
			return False

		return parsed.severity in self.policy.severities_for(patch_type_name)

	def _match_position(self, position: TagPosition, remainder: str) -> str:
		parsed = parse_tag(remainder)
		if parsed is not None:
			for name in position.patch_types:
				if self.accepts(name, parsed):
					logger.debug("'%s' accepted by patch type '%s'", parsed.literal.rstrip(), name)
					return remainder[len(parsed.literal) :]

		if position.optional:
			return remainder

		literal = parsed.literal.rstrip() if parsed is not None else _candidate(remainder)
		msg = "invalid tag or no tag found"
		raise TagScopeError(msg, literal=literal, searched=position.patch_types)

	def classify(self, subject: str) -> str:
		"""
		Strip the policy's tag prefixes from a subject.

		Args:
			subject: Commit subject line

		Returns:
			str: The subject text left after all recognized prefixes

		Raises:
			TagScopeError: If a mandatory position is not satisfied or a tag is left over

		"""
		if not self.policy.tag_order:
			return subject

		remainder = subject
		for position in self.policy.tag_order:
			remainder = self._match_position(position, remainder)

		leftover = parse_tag(remainder)
		if leftover is not None:
			msg = "unconsumed tag remains"
			raise TagScopeError(msg, literal=leftover.literal.rstrip())

		return remainder
