"""
Recorded time-series handling: typed rows, text parsing and segmentation.
"""

from .parsing import format_time_series, parse_time_series
from .segmenter import Segments, normalize, segment, split_dataset
from .timeseries import AXIS_TO_COLUMN, Column, Sample, TimeSeries

__all__ = [
    "AXIS_TO_COLUMN",
    "Column",
    "Sample",
    "Segments",
    "TimeSeries",
    "format_time_series",
    "normalize",
    "parse_time_series",
    "segment",
    "split_dataset",
]
