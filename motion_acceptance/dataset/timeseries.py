# motion_acceptance/dataset/timeseries.py
"""
Typed time-series table for recorded device motion.

A TimeSeries is an ordered, immutable sequence of Sample rows. Columns are
addressed through the Column enum, so a lookup is a fixed tuple index rather
than a runtime name resolution.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Iterator, NamedTuple, Sequence, Tuple

from ..constants import AXIS_COLUMNS
from ..exceptions import DatasetError


class Column(IntEnum):
    """Position of each field in a Sample row."""
    TIMESTAMP = 0
    GYRO_X = 1
    GYRO_Y = 2
    GYRO_Z = 3
    ACC_X = 4
    ACC_Y = 5
    ACC_Z = 6

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "Column":
        return cls[label.upper()]


class Sample(NamedTuple):
    """Single recorded sample: timestamp (ms) and six sensor readings."""
    timestamp: float
    gyro_x: float
    gyro_y: float
    gyro_z: float
    acc_x: float
    acc_y: float
    acc_z: float


# Logical axis name -> physical column
AXIS_TO_COLUMN = {
    axis: Column.from_label(label) for axis, label in AXIS_COLUMNS.items()
}


@dataclass(frozen=True)
class TimeSeries:
    """Time-ordered samples of one recording"""
    samples: Tuple[Sample, ...] = ()

    def __post_init__(self):
        previous = None
        for row, sample in enumerate(self.samples):
            if not math.isfinite(sample.timestamp):
                raise DatasetError(f"Row {row}: timestamp {sample.timestamp!r} is not finite.")
            if previous is not None and sample.timestamp < previous:
                raise DatasetError(
                    f"Row {row}: timestamp {sample.timestamp!r} is earlier than {previous!r}."
                )
            previous = sample.timestamp

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "TimeSeries":
        """Build a series from 7-field rows (timestamp, gyro x/y/z, acc x/y/z)."""
        return cls(tuple(Sample(*row) for row in rows))

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __getitem__(self, position: int) -> Sample:
        return self.samples[position]

    def __bool__(self) -> bool:
        return bool(self.samples)

    def column(self, column: Column) -> Tuple[float, ...]:
        return tuple(sample[column] for sample in self.samples)

    def pairs(self, column: Column) -> Iterator[Tuple[float, float]]:
        """Yield (timestamp, value) for one column."""
        for sample in self.samples:
            yield sample.timestamp, sample[column]

    @property
    def timestamps(self) -> Tuple[float, ...]:
        return self.column(Column.TIMESTAMP)

    def select(self, predicate: Callable[[Sample], bool]) -> "TimeSeries":
        """Return the samples matching `predicate`, order preserved."""
        return TimeSeries(tuple(s for s in self.samples if predicate(s)))
