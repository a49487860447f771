"""Pydantic schema for commit policies."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

# Tags and severities must be matchable by the subject prefix grammar
TOKEN_PATTERN = re.compile(r"[A-Z]+")


def _check_tokens(tokens: frozenset[str], what: str) -> frozenset[str]:
	"""Reject tokens the subject prefix grammar could never match."""
	invalid = sorted(token for token in tokens if not TOKEN_PATTERN.fullmatch(token))
	if invalid:
		msg = f"{what} must be upper-case ASCII letters only, got: {', '.join(repr(t) for t in invalid)}"
		raise ValueError(msg)
	return tokens


class PatchType(BaseModel):
	"""A named vocabulary of allowed tags, optionally bound to a severity scope."""

	model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

	values: frozenset[str] = Field(default_factory=frozenset, alias="Values")
	scope: str = Field(default="", alias="Scope")

	@field_validator("values", "scope", mode="before")
	@classmethod
	def _none_as_empty(cls, value: Any, info: ValidationInfo) -> Any:  # noqa: ANN401
		if value is None:
			return "" if info.field_name == "scope" else frozenset()
		return value

	@field_validator("values")
	@classmethod
	def _valid_tags(cls, value: frozenset[str]) -> frozenset[str]:
		return _check_tokens(value, "patch type values")


class TagPosition(BaseModel):
	"""One slot in the left-to-right sequence of tag prefixes."""

	model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

	patch_types: tuple[str, ...] = Field(alias="PatchTypes")
	optional: bool = Field(default=False, alias="Optional")

	@field_validator("patch_types")
	@classmethod
	def _not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
		if not value:
			msg = "a tag position must list at least one patch type"
			raise ValueError(msg)
		return value


class Policy(BaseModel):
	"""
	Commit policy: scopes, patch types and the ordered tag positions.

	The policy is immutable once built. References between its parts are
	checked when the model is created, so a dangling patch type or scope
	name is a load error rather than a tag that can never match.

	"""

	model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

	patch_scopes: dict[str, frozenset[str]] = Field(default_factory=dict, alias="PatchScopes")
	patch_types: dict[str, PatchType] = Field(default_factory=dict, alias="PatchTypes")
	tag_order: tuple[TagPosition, ...] = Field(default=(), alias="TagOrder")
	help_text: str = Field(default="", alias="HelpText")

	@field_validator("patch_scopes", "patch_types", "tag_order", "help_text", mode="before")
	@classmethod
	def _none_as_empty(cls, value: Any, info: ValidationInfo) -> Any:  # noqa: ANN401
		if value is not None:
			return value
		return {"patch_scopes": {}, "patch_types": {}, "tag_order": (), "help_text": ""}[info.field_name]

	@field_validator("patch_scopes")
	@classmethod
	def _valid_severities(cls, value: dict[str, frozenset[str]]) -> dict[str, frozenset[str]]:
		for name, severities in value.items():
			_check_tokens(severities, f"severities of scope '{name}'")
		return value

	@model_validator(mode="after")
	def _check_references(self) -> Policy:
		for name, patch_type in self.patch_types.items():
			if patch_type.scope and patch_type.scope not in self.patch_scopes:
				msg = f"patch type '{name}' references unknown scope '{patch_type.scope}'"
				raise ValueError(msg)

		for index, position in enumerate(self.tag_order):
			missing = [name for name in position.patch_types if name not in self.patch_types]
			if missing:
				msg = f"tag position {index + 1} references unknown patch types: {', '.join(missing)}"
				raise ValueError(msg)
		return self

	def is_empty(self) -> bool:
		"""Return True if the policy defines nothing to verify."""
		return self == Policy()

	def severities_for(self, patch_type_name: str) -> frozenset[str]:
		"""Return the severities allowed for a patch type, empty when it has no scope."""
		scope = self.patch_types[patch_type_name].scope
		if not scope:
			return frozenset()
		return self.patch_scopes[scope]
