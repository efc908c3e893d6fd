"""Numeric coercion and shape predicates for sample records.

Sample depths arrive from spreadsheets and hand-typed logs, so a depth
may be a number or a numeric string.  These helpers turn such values into
finite floats (or ``None``) and answer the shape questions the depth
operations ask before doing any work.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

import numpy as np


def to_float(value: Any) -> float | None:
    """Coerce *value* to a finite float.

    Numbers and numeric strings (surrounding whitespace allowed) are
    accepted.  Booleans, empty strings, non-finite values, integers too
    large for a float and anything else return ``None``.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        try:
            out = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            out = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(out):
        return None
    return out


def is_number(value: Any) -> bool:
    """Return ``True`` if *value* coerces to a finite float."""
    return to_float(value) is not None


def is_nonempty_str(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_nonempty_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


def is_nonempty_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) and len(value) > 0


def field_value(record: Any, key: str) -> Any:
    """Return ``record[key]`` for mappings, ``None`` otherwise."""
    if isinstance(record, Mapping):
        return record.get(key)
    return None


def format_number(x: float) -> str:
    """Render a depth for messages (``5.0`` -> ``"5"``, ``2.5`` -> ``"2.5"``)."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return repr(x) if isinstance(x, float) else str(x)


def format_raw(value: Any) -> str:
    """Render a raw field value for messages."""
    try:
        return str(value)
    except ValueError:
        # int above the interpreter's str-conversion digit limit
        return f"<{type(value).__name__} of {value.bit_length()} bits>"


def depth_array(rows: Any, key: str) -> np.ndarray:
    """Coerced depths of *rows* as a float array, NaN where unparsable."""
    vals = [to_float(field_value(r, key)) for r in rows]
    return np.array([np.nan if v is None else v for v in vals], dtype=float)
