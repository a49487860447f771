"""Configuration for check-commit: policy schema, defaults and loader."""

from .config_loader import ConfigError, ConfigLoader, ConfigParsingError, load_default_policy, parse_policy
from .policy_schema import PatchType, Policy, TagPosition

__all__ = [
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"PatchType",
	"Policy",
	"TagPosition",
	"load_default_policy",
	"parse_policy",
]
