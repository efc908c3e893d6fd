"""Exceptions raised by the depth operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from pygeodepth.validation.result import ValidationIssue


class DepthError(ValueError):
    """Base class for all pygeodepth errors."""


class StructuralError(DepthError):
    """Input is not a non-empty sequence or record of the required shape."""


class DepthValidationError(DepthError):
    """One or more field values failed numeric or ordering checks.

    Every offending element is collected before this is raised, so
    :attr:`issues` holds the complete defect set and the message joins
    all of them with ``"; "``.

    Args:
        issues: The accumulated :class:`ValidationIssue` entries.
    """

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(str(i) for i in self.issues))

    @property
    def messages(self) -> list[str]:
        return [str(i) for i in self.issues]
