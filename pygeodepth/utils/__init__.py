"""Shared helpers: numeric coercion, shape predicates, logging."""

from pygeodepth.utils.logging import configure_logging, get_logger
from pygeodepth.utils.numeric import (
    depth_array,
    field_value,
    format_number,
    format_raw,
    is_nonempty_list,
    is_nonempty_mapping,
    is_nonempty_str,
    is_number,
    to_float,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "depth_array",
    "field_value",
    "format_number",
    "format_raw",
    "is_nonempty_list",
    "is_nonempty_mapping",
    "is_nonempty_str",
    "is_number",
    "to_float",
]
