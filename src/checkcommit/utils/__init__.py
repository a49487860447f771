"""Utility modules for check-commit."""
