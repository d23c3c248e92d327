# motion_acceptance/evaluation/metrics.py
"""
Error metrics comparing recorded values against expected values.
"""

import math
import numbers
from typing import Any, Iterable, NamedTuple, Tuple

from ..exceptions import ComparisonError, DatasetError
from ..kinematics import ExpectedFunction


class MetricRecord(NamedTuple):
    """One metric of one axis over one portion of one test/version pair."""
    test_name: str
    version: str
    axis_name: str
    portion: str
    metric_kind: str
    value: float

    def as_row(self) -> Tuple[Any, ...]:
        return tuple(self)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def absolute_error(expected: float, actual: float) -> float:
    """
    Get the absolute error |expected - actual|.

    Raises:
        ComparisonError: If either operand is not a real number.
    """
    if not (_is_number(expected) and _is_number(actual)):
        raise ComparisonError(
            f"Cannot compare non-numeric values: expected={expected!r}, actual={actual!r}"
        )
    return abs(expected - actual)


def relative_error(expected: float, actual: float) -> float:
    """
    Get the relative error 100 * absolute_error / expected, in percent.

    When `expected` is exactly zero the absolute error is returned instead.
    """
    abs_err = absolute_error(expected, actual)
    if expected == 0:
        return abs_err
    return 100 * (abs_err / expected)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0 for an empty collection."""
    values = list(values)
    if not values:
        return 0
    return sum(values) / len(values)


def rms(efn: ExpectedFunction, pairs: Iterable[Tuple[float, float]]) -> float:
    """
    Root-mean-squared error of (timestamp, actual) pairs against `efn`.

    Raises:
        DatasetError: If `pairs` is empty.
    """
    squares = [(actual - efn(timestamp)) ** 2 for timestamp, actual in pairs]
    if not squares:
        raise DatasetError("RMS of an empty window is undefined.")
    return math.sqrt(mean(squares))
