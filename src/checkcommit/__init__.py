"""check-commit - validate commit subjects against a patch tag policy."""

__version__ = "0.3.0"
