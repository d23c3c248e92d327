# motion_acceptance/dataset/segmenter.py
"""
Partitioning of a recording into pre-move, during-move and post-move windows.
"""

import logging
from typing import NamedTuple

from ..exceptions import DatasetError
from .timeseries import TimeSeries

logger = logging.getLogger(__name__)


class Segments(NamedTuple):
    """The three disjoint windows of a recording around a commanded move."""
    pre: TimeSeries
    test: TimeSeries
    post: TimeSeries


def normalize(series: TimeSeries) -> TimeSeries:
    """
    Rebase timestamps so the first sample is at 0.

    Row count, order and inter-sample deltas are preserved.

    Raises:
        DatasetError: If the series is empty.
    """
    if not series:
        raise DatasetError("Cannot normalize an empty time series.")
    base_time = series[0].timestamp
    return TimeSeries(
        tuple(s._replace(timestamp=s.timestamp - base_time) for s in series)
    )


def segment(series: TimeSeries, start_time: float, duration: float) -> Segments:
    """
    Split `series` around the move window [start_time, start_time + duration].

    Samples strictly before the start are "pre", strictly after the end are
    "post", everything else (boundaries included) is "test". Any window may
    be empty.
    """
    end_time = start_time + duration
    pre = series.select(lambda s: s.timestamp < start_time)
    post = series.select(lambda s: s.timestamp > end_time)
    test = series.select(
        lambda s: not s.timestamp < start_time and not s.timestamp > end_time
    )
    logger.debug(
        f"Segmented {len(series)} samples: pre={len(pre)}, test={len(test)}, post={len(post)}"
    )
    return Segments(pre=pre, test=test, post=post)


def split_dataset(series: TimeSeries, start_time: float, duration: float) -> Segments:
    """Normalize `series`, then segment it around the move window."""
    return segment(normalize(series), start_time, duration)
