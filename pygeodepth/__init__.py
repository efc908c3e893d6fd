"""
pygeodepth: depth intervals and depth-range grouping for geotechnical
borehole samples.

Subpackages
-----------
depth
    Interval derivation from center depths, interval continuity checks,
    and grouping of samples by depth range.
stratigraphy
    Object view of one borehole's samples.
validation
    Accumulating validation results.
utils
    Numeric coercion and logging helpers.
"""

from pygeodepth import depth, stratigraphy, utils, validation
from pygeodepth.config import DepthKeys
from pygeodepth.depth import (
    calc_depth_start_end_from_center,
    check_depth,
    check_depth_start_end,
    group_by_depth_start_end,
    validate_depth_start_end,
)
from pygeodepth.errors import DepthError, DepthValidationError, StructuralError

__version__ = "0.1.0"

__all__ = [
    "depth",
    "stratigraphy",
    "utils",
    "validation",
    "DepthKeys",
    "DepthError",
    "DepthValidationError",
    "StructuralError",
    "calc_depth_start_end_from_center",
    "check_depth",
    "check_depth_start_end",
    "group_by_depth_start_end",
    "validate_depth_start_end",
]
