"""
Capture file decoding.

Extracts per-device calibration records from the two fixed-offset windows of
a raw sensor capture file.
"""

from .calibration import Calibration, extract_calibration
from .decoder import CaptureDecoder, decode_window
from .records import CalibrationEntry, CaptureRecord

__all__ = [
    "Calibration",
    "CalibrationEntry",
    "CaptureDecoder",
    "CaptureRecord",
    "decode_window",
    "extract_calibration",
]
