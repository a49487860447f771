"""Checks for the free text of a commit subject."""

from __future__ import annotations

from dataclasses import dataclass

from checkcommit.config.defaults import (
	MAX_SUBJECT_LENGTH,
	MAX_SUBJECT_WORDS,
	MIN_SUBJECT_LENGTH,
	MIN_SUBJECT_WORDS,
)

from .errors import SubjectFormatError


@dataclass(frozen=True)
class SubjectBounds:
	"""Inclusive word count and length bounds for subject text."""

	min_words: int = MIN_SUBJECT_WORDS
	max_words: int = MAX_SUBJECT_WORDS
	min_length: int = MIN_SUBJECT_LENGTH
	max_length: int = MAX_SUBJECT_LENGTH


class TextValidator:
	"""Validates the text left once tag prefixes are stripped."""

	def __init__(self, bounds: SubjectBounds | None = None) -> None:
		self.bounds = bounds or SubjectBounds()

	def validate(self, remainder: str) -> None:
		"""
		Validate subject text.

		Args:
			remainder: Subject text without its tag prefixes

		Raises:
			SubjectFormatError: If the text is not ASCII, is badly spaced, or is out of bounds

		"""
		if not remainder.isascii():
			msg = "subject contains non-ASCII characters"
			raise SubjectFormatError(msg, literal=next(c for c in remainder if not c.isascii()))

		words = remainder.split()
		if " ".join(words) != remainder:
			msg = "malformatted subject string (trailing or double spaces?)"
			raise SubjectFormatError(msg, literal=remainder)

		bounds = self.bounds
		if not bounds.min_words <= len(words) <= bounds.max_words:
			msg = f"subject word count out of bounds [words {bounds.min_words} <= {len(words)} <= {bounds.max_words}]"
			raise SubjectFormatError(msg, literal=remainder)

		if not bounds.min_length <= len(remainder) <= bounds.max_length:
			msg = f"subject length out of bounds [len {bounds.min_length} <= {len(remainder)} <= {bounds.max_length}]"
			raise SubjectFormatError(msg, literal=remainder)
