"""Borehole sample containers.

Provides :class:`DepthInterval` and :class:`SampleLog`, an object view
over the record-based functions in :mod:`pygeodepth.depth` for callers
that prefer to carry one borehole's samples around as a unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

import numpy as np

from pygeodepth.config import DepthKeys, DepthKeysLike
from pygeodepth.depth.checks import check_depth_start_end
from pygeodepth.depth.grouping import group_by_depth_start_end
from pygeodepth.depth.intervals import calc_depth_start_end_from_center
from pygeodepth.utils.numeric import depth_array, field_value, to_float


@dataclass
class DepthInterval:
    """A depth span of a borehole.

    Depths are measured downward from the surface, so
    ``depth_start <= depth_end``.

    Args:
        depth_start: Top of the interval (m).
        depth_end: Bottom of the interval (m).
        properties: Remaining fields of the record the interval came from.
    """

    depth_start: float
    depth_end: float
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def thickness(self) -> float:
        return self.depth_end - self.depth_start

    @property
    def depth_mid(self) -> float:
        return (self.depth_start + self.depth_end) / 2.0

    def contains(self, depth: float) -> bool:
        """Return ``True`` if *depth* lies in the interval, ends included."""
        return self.depth_start <= depth <= self.depth_end


class SampleLog:
    """The samples of one borehole.

    Args:
        rows: Sample records (mappings).  They are copied, never modified.
        keys: Field-name configuration (see :class:`DepthKeys`).
        id: Borehole identifier.
    """

    def __init__(
        self,
        rows: Sequence[Any],
        keys: DepthKeysLike = None,
        id: str = "",
    ) -> None:
        self.rows = [dict(r) for r in rows]
        self.keys = DepthKeys.resolve(keys)
        self.id = id

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[dict]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, idx: int) -> dict:
        return self.rows[idx]

    @property
    def depths(self) -> np.ndarray:
        """Center depths as floats, NaN where a depth does not parse."""
        return depth_array(self.rows, self.keys.key_depth)

    # ------------------------------------------------------------------
    # Depth operations
    # ------------------------------------------------------------------

    def with_intervals(self) -> SampleLog:
        """New log with start/end depths derived from center depths."""
        rows = calc_depth_start_end_from_center(self.rows, self.keys)
        return SampleLog(rows, keys=self.keys, id=self.id)

    def check_intervals(self) -> list[str]:
        """Continuity violations of the start/end depths carried by the rows."""
        return check_depth_start_end(self.rows, self.keys)

    def group(self, ranges: Any) -> list[dict]:
        """Group the samples by *ranges* (see :func:`group_by_depth_start_end`)."""
        return group_by_depth_start_end(self.rows, ranges, self.keys)

    def intervals(self) -> list[DepthInterval]:
        """Rows carrying numeric start/end depths, as :class:`DepthInterval`.

        Rows without both depths are skipped.
        """
        ks, ke = self.keys.key_depth_start, self.keys.key_depth_end
        out = []
        for row in self.rows:
            ds = to_float(field_value(row, ks))
            de = to_float(field_value(row, ke))
            if ds is None or de is None:
                continue
            props = {k: v for k, v in row.items() if k not in (ks, ke)}
            out.append(DepthInterval(depth_start=ds, depth_end=de, properties=props))
        return out

    def interval_at(self, depth: float) -> DepthInterval | None:
        """Return the first interval containing *depth*, or ``None``."""
        for interval in self.intervals():
            if interval.contains(depth):
                return interval
        return None

    def __repr__(self) -> str:
        return f"SampleLog(id={self.id!r}, n_samples={len(self.rows)})"
