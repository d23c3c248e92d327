"""
Evaluation of recorded motion against the kinematic model.
"""

from .description import TestDescription, load_test_description, parse_test_description
from .evaluator import ErrorEvaluator
from .metrics import MetricRecord, absolute_error, mean, relative_error, rms
from .orchestrator import TestCase, evaluate_batch, process_test

__all__ = [
    "ErrorEvaluator",
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
    "rms",
]
