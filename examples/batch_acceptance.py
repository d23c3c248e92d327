"""
Example script running an acceptance batch over synthetic recordings.

Two test cases are evaluated against two device versions. Version "1.1"
tracks the commanded moves exactly; version "1.0" lags during the move and
overshoots after it, which shows up in the RMS and ABS metrics.
"""
import logging

from motion_acceptance import (
    EvaluationConfig,
    TestCase,
    TestDescription,
    TimeSeries,
    evaluate_batch,
    relative_error,
)
from motion_acceptance.constants import RESULT_HEADER

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("BatchAcceptanceExample")

SAMPLE_PERIOD_MS = 100
CLOCK_OFFSET_MS = 123456  # Devices report an arbitrary clock


def synthetic_recording(description: TestDescription, axis_column: int, lag: float = 0.0,
                        overshoot: float = 0.0, total_s: float = 5.0) -> TimeSeries:
    """Simulate a device following `description` on one column."""
    start = description.start_time_ms()
    end = start + description.duration_ms()
    distance = dict(description.axis_distances())
    target = next(d for d in distance.values() if d != 0)

    rows = []
    for t in range(0, int(total_s * 1000) + 1, SAMPLE_PERIOD_MS):
        if t < start:
            value = 0.0
        elif t <= end:
            value = target * (t - start) / (end - start) * (1.0 - lag)
        else:
            value = target * (1.0 + overshoot)
        row = [float(t + CLOCK_OFFSET_MS), 0.0, 0.0, 0.0, 0.0, 0.0, 0.0]
        row[axis_column] = value
        rows.append(row)
    return TimeSeries.from_rows(rows)


def main():
    slide = TestDescription(start_time=1.0, duration=2.0, x_translation=10.0)
    spin = TestDescription(start_time=0.5, duration=3.0, z_rotation=90.0)

    cases = [
        TestCase("slide", slide, {
            "1.0": synthetic_recording(slide, axis_column=4, lag=0.1, overshoot=0.02),
            "1.1": synthetic_recording(slide, axis_column=4),
        }),
        TestCase("spin", spin, {
            "1.0": synthetic_recording(spin, axis_column=3, lag=0.05, overshoot=0.01),
            "1.1": synthetic_recording(spin, axis_column=3),
        }),
    ]

    records = evaluate_batch(cases, EvaluationConfig(isolate_failures=True))
    print(" ".join(RESULT_HEADER))
    for record in records:
        if record.axis_name in ("x_translation", "z_rotation"):
            print(" ".join(str(field) for field in record.as_row()))

    # Endpoint error of the moving axis after the move, as a percentage
    for record in records:
        if record.portion == "post" and record.metric_kind == "ACT" and record.value != 0:
            expected = next(
                r.value for r in records
                if r[:4] == record[:4] and r.metric_kind == "EXP"
            )
            logger.info(
                f"{record.test_name}@{record.version} {record.axis_name}: "
                f"{relative_error(expected, record.value):.2f}% final error"
            )


if __name__ == "__main__":
    main()
