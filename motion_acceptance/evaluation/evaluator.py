# motion_acceptance/evaluation/evaluator.py
"""
Error evaluation of one axis over one portion of a recording.
"""

import logging
from typing import List, Optional

from ..constants import METRIC_ABS, METRIC_ACT, METRIC_EXP, METRIC_RMS
from ..dataset import AXIS_TO_COLUMN, TimeSeries
from ..exceptions import ConfigurationError
from ..kinematics import ExpectedFunction
from .metrics import MetricRecord, absolute_error, rms

logger = logging.getLogger(__name__)


class ErrorEvaluator:
    """
    Compares the recorded values of one axis against an expected-value function.

    For a non-empty segment four metrics are produced, in this order:

    - RMS: root-mean-squared error over every sample in the segment.
    - ABS: absolute error at the last sample.
    - EXP: expected value at the last sample.
    - ACT: recorded value at the last sample.
    """

    @classmethod
    def evaluate(
        cls,
        test_name: str,
        version: str,
        segment: TimeSeries,
        expected_fn: ExpectedFunction,
        portion: str,
        axis_name: str,
    ) -> Optional[List[MetricRecord]]:
        """
        Generate the metrics for one portion of a test/version/axis combination.

        Args:
            test_name: Name of the test case.
            version: Device/software version the recording came from.
            segment: Samples of the portion, on the normalized time base.
            expected_fn: Expected values for this axis over the portion.
            portion: Portion label ("pre", "test" or "post").
            axis_name: Logical axis, one of constants.AXES.

        Returns:
            Four MetricRecords, or None when the segment holds no samples.

        Raises:
            ConfigurationError: If `axis_name` is not a known axis.
        """
        if axis_name not in AXIS_TO_COLUMN:
            raise ConfigurationError(f"Unknown axis '{axis_name}'.")
        if not segment:
            logger.debug(f"{test_name}/{version}: no {portion} samples for {axis_name}")
            return None

        column = AXIS_TO_COLUMN[axis_name]
        end_sample = segment[-1]
        end_ts = end_sample.timestamp
        end_actual = end_sample[column]
        end_expected = expected_fn(end_ts)

        metrics = [
            (METRIC_RMS, rms(expected_fn, segment.pairs(column))),
            (METRIC_ABS, absolute_error(end_expected, end_actual)),
            (METRIC_EXP, end_expected),
            (METRIC_ACT, end_actual),
        ]
        return [
            MetricRecord(test_name, version, axis_name, portion, kind, value)
            for kind, value in metrics
        ]
