"""
Data structures for decoded capture windows.

A capture window holds a fixed header followed by a length-prefixed list of
calibration entries. The decoded records are immutable and never persisted.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class CalibrationEntry:
    """One indexed set of six calibration values (offsets/sensitivities)"""
    index: int
    values: Tuple[float, float, float, float, float, float]


@dataclass(frozen=True)
class CaptureRecord:
    """One decoded 640-byte capture window with the padding dropped"""
    magic: int
    cap_idx: int
    image_idx: int
    img_checksum: int
    img_timestamp: int
    entries: Tuple[CalibrationEntry, ...]

    def entry(self, index: int) -> CalibrationEntry:
        """Return the entry carrying the given index."""
        for candidate in self.entries:
            if candidate.index == index:
                return candidate
        raise KeyError(f"No calibration entry with index {index}")

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation, suitable for JSON output."""
        data = asdict(self)
        data["entries"] = [
            {"index": e.index, "values": list(e.values)} for e in self.entries
        ]
        return data
