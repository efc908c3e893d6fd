# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # 01 — Sample Depth Intervals and Stratum Grouping
#
# This example demonstrates the depth workflow for one borehole:
#
# 1. **Derive** the depth span of each SPT sample from its center depth
# 2. **Check** that the spans are contiguous
# 3. **Group** samples by stratum for a downstream calculation
#
# **Module**: `pygeodepth.depth`

# %%
from pygeodepth import (
    DepthValidationError,
    calc_depth_start_end_from_center,
    check_depth_start_end,
    group_by_depth_start_end,
)
from pygeodepth.stratigraphy import SampleLog
from pygeodepth.utils.logging import configure_logging

configure_logging(level="DEBUG")

# %% [markdown]
# ## 1. SPT samples
#
# Center depths in metres below ground, as logged in the field.

# %%
samples = [
    {"depth": 1.5, "N_SPT": 4, "soil": "ML"},
    {"depth": 3.0, "N_SPT": 7, "soil": "ML"},
    {"depth": 6.0, "N_SPT": 12, "soil": "CL"},
    {"depth": 9.0, "N_SPT": 15, "soil": "CL"},
    {"depth": 12.0, "N_SPT": 28, "soil": "SM"},
    {"depth": 20.0, "N_SPT": 38, "soil": "SP"},
]

# %% [markdown]
# ## 2. Derive intervals
#
# Each sample extends halfway to its neighbours; the first one reaches
# the surface and the last one stops at its own depth.

# %%
rows = calc_depth_start_end_from_center(samples)
for r in rows:
    print(f"{r['soil']:>3}  {r['depthStart']:6.2f} - {r['depthEnd']:6.2f} m")

assert check_depth_start_end(rows) == []

# %% [markdown]
# ## 3. Group by stratum
#
# Strata boundaries come from the borehole log.  A sample on a shared
# boundary belongs to the upper stratum.

# %%
strata = [
    {"depthStart": 0.0, "depthEnd": 4.0, "unit": "silt"},
    {"depthStart": 4.0, "depthEnd": 10.0, "unit": "clay"},
    {"depthStart": 10.0, "depthEnd": 25.0, "unit": "sand"},
]
for group in group_by_depth_start_end(samples, strata):
    n_spt = [r["N_SPT"] for r in group["rows"]]
    print(f"{group['unit']:>5}: N_SPT = {n_spt}")

# %% [markdown]
# ## 4. Object view and error reporting
#
# `SampleLog` wraps the same operations.  Bad depths are reported all at
# once.

# %%
log = SampleLog(samples, id="BH-1").with_intervals()
print(log, log.interval_at(7.5))

try:
    calc_depth_start_end_from_center([{"depth": "n/a"}, {"depth": 2}, {"depth": 2}])
except DepthValidationError as err:
    print("rejected:", err)
