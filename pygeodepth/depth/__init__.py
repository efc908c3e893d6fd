"""Depth intervals, interval checks, and grouping by depth range.

Workflow::

    # Tag each sample with the depth span it represents
    rows = calc_depth_start_end_from_center(samples)

    # Verify third-party intervals before trusting them
    errs = check_depth_start_end(layers)

    # Bucket samples by stratum
    groups = group_by_depth_start_end(samples, strata)
"""

from pygeodepth.depth.checks import (
    check_depth,
    check_depth_start_end,
    validate_depth_start_end,
)
from pygeodepth.depth.grouping import group_by_depth_start_end, validate_ranges
from pygeodepth.depth.intervals import (
    calc_depth_start_end_from_center,
    interval_bounds,
)

__all__ = [
    "calc_depth_start_end_from_center",
    "interval_bounds",
    "check_depth",
    "check_depth_start_end",
    "validate_depth_start_end",
    "group_by_depth_start_end",
    "validate_ranges",
]
