# motion_acceptance/evaluation/orchestrator.py
"""
Evaluation of recorded test cases against their commanded moves.

Results are emitted in nesting order test case -> version -> axis -> portion,
four metrics per non-empty portion.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..config import EvaluationConfig
from ..constants import MS_PER_SECOND, PORTIONS
from ..dataset import TimeSeries, split_dataset
from ..exceptions import AcceptanceError, BatchEvaluationError
from ..kinematics import MotionModel
from .description import TestDescription, load_test_description
from .evaluator import ErrorEvaluator
from .metrics import MetricRecord

logger = logging.getLogger(__name__)


@dataclass
class TestCase:
    """
    One test case: a commanded move and its recordings, keyed by version.

    `description` may be an already parsed TestDescription or the path of a
    description file, which is loaded when the case is evaluated.
    """
    name: str
    description: Union[TestDescription, str, Path]
    recordings: Dict[str, TimeSeries] = field(default_factory=dict)

    __test__ = False

    def resolve_description(self) -> TestDescription:
        if isinstance(self.description, TestDescription):
            return self.description
        return load_test_description(self.description)


def process_test(
    test_name: str,
    version: str,
    dataset: TimeSeries,
    description: TestDescription,
    time_scale: float = MS_PER_SECOND,
) -> List[MetricRecord]:
    """
    Evaluate one test/version pair across all six axes and three portions.

    Args:
        test_name: Name of the test case.
        version: Version that produced `dataset`.
        dataset: Recorded samples, timestamps in ms (not yet normalized).
        description: Commanded move, times in seconds.
        time_scale: Factor converting description times to dataset times.

    Returns:
        The metric records, axis-major then portion. Empty portions contribute
        nothing.
    """
    start_time = description.start_time_ms(time_scale)
    duration = description.duration_ms(time_scale)
    segments = split_dataset(dataset, start_time, duration)
    by_portion = dict(zip(PORTIONS, segments))

    results: List[MetricRecord] = []
    for axis_name, distance in description.axis_distances():
        model = MotionModel(start_time, duration, distance)
        for portion in PORTIONS:
            records = ErrorEvaluator.evaluate(
                test_name,
                version,
                by_portion[portion],
                model.for_portion(portion),
                portion,
                axis_name,
            )
            if records:
                results.extend(records)

    for portion, seg in by_portion.items():
        if not seg:
            logger.warning(f"{test_name}/{version}: no samples in the {portion} window")
    logger.info(f"Evaluated {test_name}/{version}: {len(results)} metric records")
    return results


def evaluate_batch(
    test_cases: Iterable[TestCase], config: Optional[EvaluationConfig] = None
) -> List[MetricRecord]:
    """
    Evaluate every (test case, version) pair.

    By default the first failure aborts the batch and propagates. With
    `config.isolate_failures` each failing pair is logged and skipped; a
    BatchEvaluationError carrying the failures and the partial results is
    raised once every pair has run. A description that fails to load fails
    every version of its test case, recorded under version None.
    """
    config = config or EvaluationConfig()
    results: List[MetricRecord] = []
    failures: Dict[Tuple[str, Optional[str]], AcceptanceError] = {}

    for case in test_cases:
        try:
            description = case.resolve_description()
        except AcceptanceError as exc:
            if not config.isolate_failures:
                raise
            logger.warning(f"Skipping test case {case.name}: {exc}")
            failures[(case.name, None)] = exc
            continue

        for version, dataset in case.recordings.items():
            try:
                results.extend(
                    process_test(case.name, version, dataset, description, config.time_scale)
                )
            except AcceptanceError as exc:
                exc.test_name = exc.test_name or case.name
                exc.version = exc.version or version
                if not config.isolate_failures:
                    raise
                logger.warning(f"Skipping {case.name}/{version}: {exc}")
                failures[(case.name, version)] = exc

    if failures:
        raise BatchEvaluationError(
            f"{len(failures)} test/version pair(s) failed", failures, results
        )
    return results
