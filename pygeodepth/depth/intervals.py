"""Depth intervals from sample center depths.

Each sample in a borehole log is taken at a nominal center depth.  The
interval a sample represents is bounded by the midpoints to its
neighbours: the shallowest sample extends up to the surface (or to its
own depth if that lies above the surface) and the deepest sample stops
at its own depth.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pygeodepth.config import DepthKeys, DepthKeysLike
from pygeodepth.depth.checks import sort_samples
from pygeodepth.errors import DepthValidationError, StructuralError
from pygeodepth.utils.logging import get_logger
from pygeodepth.utils.numeric import is_nonempty_list

logger = get_logger(__name__)


def interval_bounds(depths: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Start and end depths for strictly increasing center depths.

    Args:
        depths: Center depths, shape ``(n,)``, sorted ascending.

    Returns:
        ``(starts, ends)`` arrays of shape ``(n,)``.  Each interior
        midpoint is computed once and used as both the end of one sample
        and the start of the next.
    """
    depths = np.asarray(depths, dtype=float)
    mids = (depths[:-1] + depths[1:]) / 2.0
    starts = np.concatenate([[min(0.0, depths[0])], mids])
    ends = np.concatenate([mids, [depths[-1]]])
    return starts, ends


def calc_depth_start_end_from_center(
    rows: Any, opt: DepthKeysLike = None
) -> list[dict]:
    """Derive start/end depths for samples from their center depths.

    For sample *i* of *n* in ascending depth order:

    * start = ``min(0, depth[0])`` for the first sample, otherwise the
      midpoint ``(depth[i-1] + depth[i]) / 2``;
    * end = ``depth[n-1]`` for the last sample, otherwise the midpoint
      ``(depth[i] + depth[i+1]) / 2``.

    Args:
        rows: Sample records, each a mapping with a center depth.
        opt: Field-name configuration (see :class:`DepthKeys`).  Uses
            ``key_depth``, ``key_depth_start`` and ``key_depth_end``.

    Returns:
        New records (the inputs are not modified) in ascending depth
        order, each a copy of its sample with start and end added.

    Raises:
        StructuralError: If *rows* is not a non-empty sequence.
        DepthValidationError: If any depth is not a number, or two
            samples share a depth.  All offending samples are listed.

    Example::

        calc_depth_start_end_from_center([{"depth": 4}, {"depth": 6}, {"depth": 20}])
        # => [{"depth": 4, "depthStart": 0.0, "depthEnd": 5.0},
        #     {"depth": 6, "depthStart": 5.0, "depthEnd": 13.0},
        #     {"depth": 20, "depthStart": 13.0, "depthEnd": 20.0}]
    """
    if not is_nonempty_list(rows):
        raise StructuralError("no valid sample data")
    keys = DepthKeys.resolve(opt)

    result = sort_samples(rows, keys.key_depth)
    if not result.ok:
        logger.debug("rejected %d samples: %s", len(rows), "; ".join(result.messages()))
        raise DepthValidationError(result.issues)
    batch = result.value

    starts, ends = interval_bounds(batch.depths)
    out = []
    for row, ds, de in zip(batch.rows, starts.tolist(), ends.tolist()):
        rec = dict(row)
        rec[keys.key_depth_start] = ds
        rec[keys.key_depth_end] = de
        out.append(rec)

    logger.debug(
        "derived %d intervals spanning [%s, %s]", len(batch), starts[0], ends[-1]
    )
    return out
