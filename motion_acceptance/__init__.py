"""
Motion Acceptance Library
=========================

Acceptance testing of motion-sensing devices against a reference kinematic
model. It decodes per-device calibration from raw capture files, splits a
recorded motion time series around a commanded move, and computes error
metrics of the recorded values against the constant-velocity expectation.
"""

# Import the constants module and alias it as 'const' for patterned access
from . import constants as const

from .capture import (
    Calibration,
    CalibrationEntry,
    CaptureDecoder,
    CaptureRecord,
    decode_window,
    extract_calibration,
)
from .config import EvaluationConfig
from .dataset import (
    Column,
    Sample,
    Segments,
    TimeSeries,
    format_time_series,
    normalize,
    parse_time_series,
    segment,
    split_dataset,
)
from .evaluation import (
    ErrorEvaluator,
    MetricRecord,
    TestCase,
    TestDescription,
    absolute_error,
    evaluate_batch,
    load_test_description,
    mean,
    parse_test_description,
    process_test,
    relative_error,
)
from .kinematics import ConstantAt, ExpectedFunction, LinearRamp, MotionModel, ZeroFunction

from .exceptions import (
    AcceptanceError,
    BatchEvaluationError,
    CaptureReadError,
    ComparisonError,
    ConfigurationError,
    CorruptDataError,
    DatasetError,
    DescriptionLoadError,
    KinematicsError,
)

__version__ = "0.1.0"

__all__ = [
    "const",

    # Capture decoding
    "Calibration",
    "CalibrationEntry",
    "CaptureDecoder",
    "CaptureRecord",
    "decode_window",
    "extract_calibration",

    # Time series
    "Column",
    "Sample",
    "Segments",
    "TimeSeries",
    "format_time_series",
    "normalize",
    "parse_time_series",
    "segment",
    "split_dataset",

    # Kinematics
    "ExpectedFunction",
    "ZeroFunction",
    "LinearRamp",
    "ConstantAt",
    "MotionModel",

    # Evaluation
    "ErrorEvaluator",
    "EvaluationConfig",
    "MetricRecord",
    "TestCase",
    "TestDescription",
    "absolute_error",
    "evaluate_batch",
    "load_test_description",
    "mean",
    "parse_test_description",
    "process_test",
    "relative_error",

    # Exceptions
    "AcceptanceError",
    "BatchEvaluationError",
    "CaptureReadError",
    "ComparisonError",
    "ConfigurationError",
    "CorruptDataError",
    "DatasetError",
    "DescriptionLoadError",
    "KinematicsError",
]
