"""Tests for the stratigraphy subpackage.

Covers the DepthInterval container and the SampleLog view over the
depth operations.
"""

from __future__ import annotations

import numpy as np
import pytest

from pygeodepth.stratigraphy.borehole import DepthInterval, SampleLog


# ======================================================================
# Fixtures — synthetic sample data
# ======================================================================

def _make_log():
    """A borehole with four SPT samples, given out of depth order."""
    return SampleLog([
        {"depth": 6.0, "N_SPT": 12, "soil": "CL"},
        {"depth": 1.5, "N_SPT": 4, "soil": "ML"},
        {"depth": 20.0, "N_SPT": 38, "soil": "SP"},
        {"depth": 3.0, "N_SPT": 7, "soil": "ML"},
    ], id="BH-1")


# ======================================================================
# DepthInterval
# ======================================================================

class TestDepthInterval:
    def test_thickness(self):
        iv = DepthInterval(depth_start=2.0, depth_end=5.0)
        assert iv.thickness == pytest.approx(3.0)

    def test_depth_mid(self):
        iv = DepthInterval(depth_start=2.0, depth_end=6.0)
        assert iv.depth_mid == pytest.approx(4.0)

    def test_contains_inclusive(self):
        iv = DepthInterval(depth_start=2.0, depth_end=6.0)
        assert iv.contains(2.0)
        assert iv.contains(6.0)
        assert not iv.contains(6.01)


# ======================================================================
# SampleLog
# ======================================================================

class TestSampleLog:
    def test_len_iter_getitem(self):
        log = _make_log()
        assert len(log) == 4
        assert sum(1 for _ in log) == 4
        assert log[0]["soil"] == "CL"

    def test_repr(self):
        assert repr(_make_log()) == "SampleLog(id='BH-1', n_samples=4)"

    def test_depths(self):
        log = SampleLog([{"depth": 1}, {"depth": "x"}, {"depth": "2.5"}])
        d = log.depths
        assert d[0] == pytest.approx(1.0)
        assert np.isnan(d[1])
        assert d[2] == pytest.approx(2.5)

    def test_rows_copied(self):
        rows = [{"depth": 1}]
        log = SampleLog(rows)
        log[0]["depth"] = 9
        assert rows[0]["depth"] == 1

    def test_with_intervals(self):
        log = _make_log()
        tagged = log.with_intervals()
        assert tagged is not log
        assert tagged.id == "BH-1"
        assert [r["soil"] for r in tagged] == ["ML", "ML", "CL", "SP"]
        assert tagged[0]["depthStart"] == pytest.approx(0.0)
        assert tagged[0]["depthEnd"] == pytest.approx(2.25)
        assert "depthStart" not in log[0]

    def test_derived_intervals_are_contiguous(self):
        assert _make_log().with_intervals().check_intervals() == []

    def test_check_intervals_reports_gap(self):
        log = SampleLog([
            {"depthStart": 0, "depthEnd": 2},
            {"depthStart": 3, "depthEnd": 4},
        ])
        assert log.check_intervals() == [
            "end 2 of sample 0 does not equal start 3 of sample 1"
        ]

    def test_intervals(self):
        ivs = _make_log().with_intervals().intervals()
        assert len(ivs) == 4
        assert ivs[-1].depth_end == pytest.approx(20.0)
        assert ivs[-1].properties["N_SPT"] == 38
        assert "depthStart" not in ivs[-1].properties

    def test_intervals_skip_rows_without_bounds(self):
        log = SampleLog([{"depth": 1}, {"depthStart": 0, "depthEnd": 1}])
        assert len(log.intervals()) == 1

    def test_interval_at(self):
        tagged = _make_log().with_intervals()
        assert tagged.interval_at(10.0).properties["soil"] == "CL"
        assert tagged.interval_at(25.0) is None

    def test_group(self):
        groups = _make_log().group([
            {"depthStart": 0, "depthEnd": 4, "unit": "silt"},
            {"depthStart": 4, "depthEnd": 25, "unit": "sand"},
        ])
        assert [len(g["rows"]) for g in groups] == [2, 2]
        assert groups[1]["unit"] == "sand"

    def test_custom_keys(self):
        log = SampleLog([{"dc": 2}, {"dc": 4}], keys={"keyDepth": "dc"})
        tagged = log.with_intervals()
        assert tagged[1]["depthStart"] == pytest.approx(3.0)
        assert tagged.keys.key_depth == "dc"
