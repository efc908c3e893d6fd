"""Depth and interval checks.

Functions
---------
check_depth
    Report unparsable depths and non-increasing adjacent depths in a
    depth-sorted batch of samples.
check_depth_start_end
    Report numeric, inverted-interval and continuity defects in a batch
    of intervals.  Never raises.
validate_depth_start_end
    Raising counterpart of :func:`check_depth_start_end`.
sort_samples
    Validate sample depths and sort them, the shared first stage of the
    interval derivation and the range grouping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from pygeodepth.config import DepthKeys, DepthKeysLike
from pygeodepth.errors import StructuralError
from pygeodepth.utils.logging import get_logger
from pygeodepth.utils.numeric import (
    depth_array,
    field_value,
    format_number,
    format_raw,
    is_nonempty_list,
    to_float,
)
from pygeodepth.validation.result import ValidationIssue, ValidationResult

logger = get_logger(__name__)


@dataclass
class SortedSamples:
    """Samples in ascending depth order.

    Args:
        rows: The sample records, sorted.
        depths: Coerced depth of each sorted record.
        positions: Index of each sorted record in the caller's input.
    """

    rows: list[Any]
    depths: np.ndarray
    positions: np.ndarray

    def __len__(self) -> int:
        return len(self.rows)


# ----------------------------------------------------------------------
# Per-record issues
# ----------------------------------------------------------------------

def depth_issue(index: int, row: Any, key: str) -> list[ValidationIssue]:
    """Issue for a sample whose depth does not parse, else ``[]``."""
    raw = field_value(row, key)
    if to_float(raw) is not None:
        return []
    return [ValidationIssue(
        f"sample {index} depth {key}[{format_raw(raw)}] is not a valid number",
        index=index, field=key, value=raw,
    )]


def _order_issues(
    depths: np.ndarray, positions: Sequence[int], key: str
) -> list[ValidationIssue]:
    # Pairs involving an unparsable depth are reported elsewhere.
    issues: list[ValidationIssue] = []
    for k in range(1, len(depths)):
        d0, d1 = depths[k - 1], depths[k]
        if np.isnan(d0) or np.isnan(d1):
            continue
        if d0 >= d1:
            i, j = int(positions[k - 1]), int(positions[k])
            issues.append(ValidationIssue(
                f"depth {key}[{format_number(float(d0))}] of sample {i} is not "
                f"less than depth {key}[{format_number(float(d1))}] of sample {j}",
                index=j, field=key, value=float(d1),
            ))
    return issues


# ----------------------------------------------------------------------
# Samples
# ----------------------------------------------------------------------

def sort_samples(rows: Sequence[Any], key: str) -> ValidationResult[SortedSamples]:
    """Validate and sort samples by center depth.

    Stage one collects every unparsable depth.  Only if all depths parse
    are the samples sorted (stable) and re-scanned; any adjacent pair
    that is not strictly increasing (duplicates included) fails stage two.
    Stage two is the same ordering scan that :func:`check_depth` runs.

    Args:
        rows: Sample records.
        key: Center-depth field name.

    Returns:
        A result holding :class:`SortedSamples`, or the issues of the
        first failing stage.
    """
    def _sort(valid: list[Any]) -> ValidationResult[SortedSamples]:
        depths = depth_array(valid, key)
        order = np.argsort(depths, kind="stable")
        batch = SortedSamples(
            rows=[valid[i] for i in order],
            depths=depths[order],
            positions=order,
        )
        issues = _order_issues(batch.depths, batch.positions, key)
        if issues:
            return ValidationResult.failure(issues)
        return ValidationResult.success(batch)

    return ValidationResult.collect(
        rows, lambda i, row: depth_issue(i, row, key)
    ).then(_sort)


def check_depth(rows: Any, opt: DepthKeysLike = None) -> list[str]:
    """Check a depth-sorted batch of samples.

    Args:
        rows: Sample records, expected in ascending depth order.
        opt: Field-name configuration (see :class:`DepthKeys`).

    Returns:
        One message per unparsable depth and per adjacent pair whose
        depths do not strictly increase.  Empty when the batch is valid
        or not a non-empty sequence.
    """
    if not is_nonempty_list(rows):
        return []
    key = DepthKeys.resolve(opt).key_depth
    issues: list[ValidationIssue] = []
    for i, row in enumerate(rows):
        issues.extend(depth_issue(i, row, key))
    issues.extend(_order_issues(depth_array(rows, key), range(len(rows)), key))
    return [i.message for i in issues]


# ----------------------------------------------------------------------
# Intervals
# ----------------------------------------------------------------------

def interval_issues(rows: Sequence[Any], keys: DepthKeys) -> list[ValidationIssue]:
    """Collect every numeric, inverted-interval and continuity defect.

    All three classes are reported in one pass: unparsable values do not
    stop the sort or the later comparisons, they are only excluded from
    the comparisons they take part in.
    """
    ks, ke = keys.key_depth_start, keys.key_depth_end
    issues: list[ValidationIssue] = []

    for i, row in enumerate(rows):
        for key, label in ((ks, "start"), (ke, "end")):
            raw = field_value(row, key)
            if to_float(raw) is None:
                issues.append(ValidationIssue(
                    f"sample {i} {label} depth {key}[{format_raw(raw)}] "
                    "is not a valid number",
                    index=i, field=key, value=raw,
                ))

    starts = depth_array(rows, ks)
    ends = depth_array(rows, ke)
    # NaN starts sort last
    order = np.argsort(starts, kind="stable")

    for pos, i in enumerate(order):
        s, e = float(starts[i]), float(ends[i])
        if s > e:
            issues.append(ValidationIssue(
                f"start {format_number(s)} of sample {i} is greater than "
                f"end {format_number(e)}",
                index=int(i), field=ks, value=s,
            ))
        if pos == 0:
            continue
        p = order[pos - 1]
        e0 = float(ends[p])
        if np.isnan(e0) or np.isnan(s):
            continue
        if e0 != s:
            issues.append(ValidationIssue(
                f"end {format_number(e0)} of sample {p} does not equal "
                f"start {format_number(s)} of sample {i}",
                index=int(i), field=ks, value=s,
            ))
    return issues


def check_depth_start_end(rows: Any, opt: DepthKeysLike = None) -> list[str]:
    """Check that intervals are numeric, upright and contiguous.

    Intervals are sorted by start depth before comparison.  Contiguity
    means the end of each interval equals the start of the next one
    exactly; gaps and overlaps are both reported.

    Args:
        rows: Interval records carrying start and end depths.
        opt: Field-name configuration (see :class:`DepthKeys`).

    Returns:
        Human-readable violation messages, empty when valid.  Input that
        is not a non-empty sequence yields ``[]``.

    Example::

        check_depth_start_end([
            {"depthStart": 0, "depthEnd": 5},
            {"depthStart": 10, "depthEnd": 20},
        ])
        # => ["end 5 of sample 0 does not equal start 10 of sample 1"]
    """
    if not is_nonempty_list(rows):
        return []
    issues = interval_issues(rows, DepthKeys.resolve(opt))
    if issues:
        logger.debug("%d interval violations in %d rows", len(issues), len(rows))
    return [i.message for i in issues]


def validate_depth_start_end(rows: Any, opt: DepthKeysLike = None) -> list[dict]:
    """Like :func:`check_depth_start_end` but raise on any violation.

    Returns:
        Copies of the rows when all intervals are valid.

    Raises:
        StructuralError: If *rows* is not a non-empty sequence.
        DepthValidationError: Listing every violation.
    """
    if not is_nonempty_list(rows):
        raise StructuralError("no valid interval data")
    issues = interval_issues(rows, DepthKeys.resolve(opt))
    result = ValidationResult(value=rows, issues=issues)
    return result.map(lambda valid: [dict(r) for r in valid]).unwrap()
