"""Grouping of samples into caller-given depth ranges.

Ranges are processed in the order given.  Each range claims the samples
whose center depth lies in ``[start, end]`` (both ends inclusive) from a
shared pool, and claimed samples are removed from the pool at once, so a
sample sitting on a boundary shared by two ranges belongs to whichever
range comes first.  Samples outside every range are dropped.
"""

from __future__ import annotations

import copy
from typing import Any

from pygeodepth.config import DepthKeys, DepthKeysLike
from pygeodepth.depth.checks import sort_samples
from pygeodepth.errors import DepthValidationError, StructuralError
from pygeodepth.utils.logging import get_logger
from pygeodepth.utils.numeric import (
    field_value,
    format_number,
    format_raw,
    is_nonempty_list,
    is_nonempty_mapping,
    to_float,
)
from pygeodepth.validation.result import ValidationIssue, ValidationResult

logger = get_logger(__name__)


# ----------------------------------------------------------------------
# Range validation
# ----------------------------------------------------------------------

def _range_number_issues(index: int, rng: Any, keys: DepthKeys) -> list[ValidationIssue]:
    issues = []
    for key, label in ((keys.key_depth_start, "start"), (keys.key_depth_end, "end")):
        raw = field_value(rng, key)
        if to_float(raw) is None:
            issues.append(ValidationIssue(
                f"range {index} {label} depth {key}[{format_raw(raw)}] is not a valid number",
                index=index, field=key, value=raw,
            ))
    return issues


def _bounds(ranges: list[Any], keys: DepthKeys) -> list[tuple[float, float]]:
    return [
        (to_float(field_value(r, keys.key_depth_start)),
         to_float(field_value(r, keys.key_depth_end)))
        for r in ranges
    ]


def _range_order_issues(ranges: list[Any], keys: DepthKeys) -> ValidationResult[list]:
    """Each range upright, and no range ending past the start of the next.

    Ranges may leave gaps between them.  They are never re-sorted, so
    the given order must already be non-overlapping.
    """
    ks, ke = keys.key_depth_start, keys.key_depth_end
    bounds = _bounds(ranges, keys)
    issues: list[ValidationIssue] = []
    for k, (ds, de) in enumerate(bounds):
        if ds > de:
            issues.append(ValidationIssue(
                f"range {k} start depth {ks}[{format_number(ds)}] is greater "
                f"than end depth {ke}[{format_number(de)}]",
                index=k, field=ks, value=ds,
            ))
        if k == 0:
            continue
        de0 = bounds[k - 1][1]
        if de0 > ds:
            issues.append(ValidationIssue(
                f"range {k - 1} end depth {ke}[{format_number(de0)}] is greater "
                f"than range {k} start depth {ks}[{format_number(ds)}]",
                index=k, field=ks, value=ds,
            ))
    if issues:
        return ValidationResult.failure(issues)
    return ValidationResult.success(ranges)


def validate_ranges(ranges: Any, opt: DepthKeysLike = None) -> list[Any]:
    """Normalise and validate target ranges.

    Args:
        ranges: A single range mapping or a sequence of them.
        opt: Field-name configuration (see :class:`DepthKeys`).

    Returns:
        The ranges as a list, in the given order.

    Raises:
        StructuralError: If *ranges* is neither a non-empty mapping nor
            a non-empty sequence.
        DepthValidationError: Listing every unparsable bound, or else
            every inverted range and every out-of-order pair.
    """
    if is_nonempty_mapping(ranges):
        ranges = [ranges]
    elif not is_nonempty_list(ranges):
        raise StructuralError("no valid depth ranges")
    keys = DepthKeys.resolve(opt)
    return ValidationResult.collect(
        ranges, lambda k, r: _range_number_issues(k, r, keys)
    ).then(lambda rs: _range_order_issues(rs, keys)).unwrap()


# ----------------------------------------------------------------------
# Grouping
# ----------------------------------------------------------------------

def group_by_depth_start_end(
    rows: Any,
    ranges: Any,
    opt: DepthKeysLike = None,
) -> list[dict]:
    """Group samples by the depth ranges they fall in.

    Args:
        rows: Sample records, each a mapping with a center depth.
        ranges: A single range mapping or a sequence of range mappings,
            each with a start and an end depth.  Ranges must not overlap
            in the given order but may leave gaps.
        opt: Field-name configuration (see :class:`DepthKeys`).  Uses all
            four keys; matched samples go under ``key_group``.

    Returns:
        One new mapping per range, in the given order: a copy of the
        range with the list of matched sample copies (possibly empty)
        under ``key_group``.  Samples in the lists are in ascending
        depth order.

    Raises:
        StructuralError: If *rows* or *ranges* has the wrong shape.
        DepthValidationError: If sample depths are unparsable or
            duplicated, or the ranges are invalid.

    Example::

        rows = [{"depth": 0}, {"depth": 1}, {"depth": 3}, {"depth": 10}]
        ranges = [{"depthStart": 0, "depthEnd": 1},
                  {"depthStart": 1, "depthEnd": 4}]
        group_by_depth_start_end(rows, ranges)
        # => [{"depthStart": 0, "depthEnd": 1,
        #      "rows": [{"depth": 0}, {"depth": 1}]},
        #     {"depthStart": 1, "depthEnd": 4, "rows": [{"depth": 3}]}]
    """
    if not is_nonempty_list(rows):
        raise StructuralError("no valid sample data")
    if not is_nonempty_list(ranges) and not is_nonempty_mapping(ranges):
        raise StructuralError("no valid depth ranges")
    keys = DepthKeys.resolve(opt)

    # Same gap/duplicate scan as check_depth
    samples = sort_samples(rows, keys.key_depth)
    if not samples.ok:
        logger.debug("rejected %d samples: %s", len(rows), "; ".join(samples.messages()))
        raise DepthValidationError(samples.issues)
    batch = samples.value
    ranges = validate_ranges(ranges, keys)

    # Pool of (depth, record); shrinks as ranges claim samples.
    pool = [
        (float(d), copy.deepcopy(r)) for d, r in zip(batch.depths, batch.rows)
    ]

    groups = []
    for rng, (ds, de) in zip(ranges, _bounds(ranges, keys)):
        claimed = []
        for k, (depth, _) in enumerate(pool):
            if ds <= depth <= de:
                claimed.append(k)
            if depth > de:
                break

        group = copy.deepcopy(dict(rng))
        group[keys.key_group] = [pool[k][1] for k in claimed]
        for k in reversed(claimed):
            del pool[k]
        groups.append(group)

    if pool:
        logger.debug("%d of %d samples outside every range", len(pool), len(batch))
    return groups
