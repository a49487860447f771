"""Default settings for check-commit."""

from textwrap import dedent

# Name of the per-repository policy file
CONFIG_FILE_NAME = ".check-commit.yml"

# Directory name used under $XDG_CONFIG_HOME
XDG_APP_NAME = "check-commit"

# Subject text bounds, applied to the text left after tag prefixes are stripped
MIN_SUBJECT_WORDS = 3
MAX_SUBJECT_WORDS = 15
MIN_SUBJECT_LENGTH = 15
MAX_SUBJECT_LENGTH = 100

# Built-in policy used when no configuration file can be read (HAProxy conventions)
DEFAULT_POLICY_YAML = dedent(
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
	    - HAProxy Standard Patch
	    - HAProxy Standard Feature Commit
	"""
)
