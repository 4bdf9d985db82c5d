"""Shared CLI constants."""

VALIDATION_EXIT_CODE = 2
