"""Accumulating validation results and issues."""

from pygeodepth.validation.result import ValidationIssue, ValidationResult

__all__ = [
    "ValidationIssue",
    "ValidationResult",
]
