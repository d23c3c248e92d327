# motion_acceptance/dataset/parsing.py
"""
Text reading and writing of time series.

Recordings travel as delimited text, one sample per line. Parsing is a pure
function of its input: it takes a string or an open text stream plus the
header list naming the fields of each line.
"""

import io
import logging
import math
from typing import Optional, Sequence, TextIO, Union

from ..constants import DEFAULT_HEADERS
from ..exceptions import DatasetError
from .timeseries import Column, Sample, TimeSeries

logger = logging.getLogger(__name__)


def _column_order(headers: Sequence[str]) -> Sequence[int]:
    """Map each Sample field to its position in a line laid out as `headers`."""
    if len(headers) != len(DEFAULT_HEADERS) or set(headers) != set(DEFAULT_HEADERS):
        raise DatasetError(
            f"Headers must name each of {', '.join(DEFAULT_HEADERS)} once, got {list(headers)}."
        )
    positions = {Column.from_label(name): i for i, name in enumerate(headers)}
    return [positions[column] for column in Column]


def parse_time_series(
    source: Union[str, TextIO],
    headers: Sequence[str] = DEFAULT_HEADERS,
    delimiter: Optional[str] = None,
) -> TimeSeries:
    """
    Parse delimited text into a TimeSeries.

    Args:
        source: The text itself, or a readable text stream.
        headers: Field names of each line, in line order.
        delimiter: Field separator; None splits on any whitespace.

    Returns:
        The parsed series, in line order. Blank lines are skipped.

    Raises:
        DatasetError: On a wrong field count, a non-numeric field, bad headers,
                      or a timestamp that is not finite or goes backwards.
    """
    order = _column_order(headers)
    stream = io.StringIO(source) if isinstance(source, str) else source

    samples = []
    for line_number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        fields = line.strip().split(delimiter)
        if len(fields) != len(order):
            raise DatasetError(
                f"Line {line_number}: expected {len(order)} fields, got {len(fields)}."
            )
        try:
            values = [float(field) for field in fields]
        except ValueError as exc:
            raise DatasetError(f"Line {line_number}: {exc}") from exc
        sample = Sample(*(values[i] for i in order))
        if not math.isfinite(sample.timestamp):
            raise DatasetError(
                f"Line {line_number}: timestamp {sample.timestamp!r} is not finite."
            )
        if samples and sample.timestamp < samples[-1].timestamp:
            raise DatasetError(
                f"Line {line_number}: timestamp {sample.timestamp!r} is earlier than "
                f"{samples[-1].timestamp!r}."
            )
        samples.append(sample)

    logger.debug(f"Parsed {len(samples)} samples.")
    return TimeSeries(tuple(samples))


def format_time_series(series: TimeSeries, delimiter: str = " ") -> str:
    """Write a series as delimited text in DEFAULT_HEADERS order, one line per sample."""
    return "".join(
        delimiter.join(repr(value) for value in sample) + "\n" for sample in series
    )
