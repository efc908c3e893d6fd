"""Stratigraphy: borehole sample containers.

Workflow::

    log = SampleLog(samples, id="BH-1")

    # Tag samples with the span they represent
    tagged = log.with_intervals()
    assert tagged.check_intervals() == []

    # Query
    interval = tagged.interval_at(7.5)
"""

from pygeodepth.stratigraphy.borehole import DepthInterval, SampleLog

__all__ = [
    "DepthInterval",
    "SampleLog",
]
