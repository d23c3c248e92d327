# motion_acceptance/capture/calibration.py
"""
Calibration extraction: the pair of capture windows stored in one capture file.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from .decoder import CaptureDecoder, PathLike
from .records import CaptureRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calibration:
    """Both calibration records of a device capture, in file order"""
    first: CaptureRecord
    second: CaptureRecord

    def to_dict(self) -> Dict[str, Any]:
        return {"first": self.first.to_dict(), "second": self.second.to_dict()}


def extract_calibration(path: PathLike, verify_magic: bool = True) -> Calibration:
    """
    Read the two calibration windows of the capture file at `path`.

    Raises:
        CaptureReadError: If the file is missing, unreadable or truncated.
        CorruptDataError: If either window fails to decode.
    """
    first, second = CaptureDecoder(verify_magic=verify_magic).decode_all(path)
    logger.info(
        f"Extracted calibration from {path}: {len(first.entries)} + "
        f"{len(second.entries)} entries."
    )
    return Calibration(first=first, second=second)
