"""Errors raised while checking a commit subject."""

from __future__ import annotations


class SubjectError(Exception):
	"""Base class for subject validation failures."""

	kind = "SubjectError"

	def __init__(self, message: str, literal: str = "") -> None:
		super().__init__(message)
		self.message = message
		self.literal = literal

	def describe(self) -> str:
		"""Render the error kind, message and offending text for humans."""
		text = f"{self.kind}: {self.message}"
		if self.literal:
			text += f" (at '{self.literal}')"
		return text


class TagScopeError(SubjectError):
	"""Raised when the tag prefixes of a subject do not satisfy the policy."""

	kind = "TagScopeError"

	def __init__(self, message: str, literal: str = "", searched: tuple[str, ...] = ()) -> None:
		super().__init__(message, literal)
		self.searched = tuple(searched)

	def describe(self) -> str:
		"""Render the error, including the patch types searched at the failing position."""
		text = super().describe()
		if self.searched:
			text += f", searched patch types: {', '.join(self.searched)}"
		return text


class SubjectFormatError(SubjectError):
	"""Raised when the subject text fails the whitespace, word count or length rules."""

	kind = "FormatError"
