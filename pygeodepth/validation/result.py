"""Accumulating validation results.

Depth checks never stop at the first bad element.  Each check produces a
:class:`ValidationResult` holding either the validated value or every
:class:`ValidationIssue` found, and results chain with
:meth:`ValidationResult.then` so a pipeline aborts only between stages.

Example::

    result = ValidationResult.collect(rows, check_row).then(sort_rows)
    rows = result.unwrap()      # raises DepthValidationError on failure
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, TypeVar

from pygeodepth.errors import DepthValidationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ValidationIssue:
    """A single defect found in a record.

    Args:
        message: Human-readable description, shown to end users verbatim.
        index: Position of the offending record in the caller's input.
        field: Name of the offending field.
        value: The raw offending value.
    """

    message: str
    index: int | None = None
    field: str | None = None
    value: Any = None

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationResult(Generic[T]):
    """Either a validated value or the list of issues that prevented it."""

    value: T | None = None
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @classmethod
    def success(cls, value: T) -> ValidationResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, issues: Iterable[ValidationIssue]) -> ValidationResult[Any]:
        return cls(value=None, issues=list(issues))

    @classmethod
    def collect(
        cls,
        items: Iterable[T],
        check: Callable[[int, T], Iterable[ValidationIssue]],
    ) -> ValidationResult[list[T]]:
        """Run *check* on every item and accumulate all issues.

        Args:
            items: Records to check.
            check: ``check(index, item)`` returning the issues for one
                item (empty when the item is valid).

        Returns:
            A successful result holding the items as a list, or a failed
            result holding the issues of every item.
        """
        items = list(items)
        issues: list[ValidationIssue] = []
        for i, item in enumerate(items):
            issues.extend(check(i, item))
        if issues:
            return cls.failure(issues)
        return cls.success(items)

    def then(self, fn: Callable[[T], ValidationResult[U]]) -> ValidationResult[U]:
        """Apply the next stage only if this one passed."""
        if not self.ok:
            return ValidationResult.failure(self.issues)
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> ValidationResult[U]:
        if not self.ok:
            return ValidationResult.failure(self.issues)
        return ValidationResult.success(fn(self.value))

    def messages(self) -> list[str]:
        return [i.message for i in self.issues]

    def unwrap(self) -> T:
        """Return the value, or raise :class:`DepthValidationError`."""
        if not self.ok:
            raise DepthValidationError(self.issues)
        return self.value
