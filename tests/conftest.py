"""
Shared test fixtures for the motion acceptance library.

Provides builders for synthetic capture windows and capture files, and small
recorded time series used across the evaluation tests.
"""

import struct
from typing import Callable, Iterable, Sequence, Tuple

import pytest

from motion_acceptance.constants import (
    CALIBRATION_OFFSETS,
    CAPTURE_WINDOW_SIZE,
    MAGIC_HEADER,
)
from motion_acceptance.dataset import TimeSeries

# Large enough to hold the window at the last calibration offset
CAPTURE_FILE_SIZE = 0x200000

Entry = Tuple[int, Sequence[float]]


def pack_window(
    magic: int = MAGIC_HEADER,
    cap_idx: int = 1,
    image_idx: int = 2,
    img_checksum: int = 3,
    img_timestamp: int = 4,
    entries: Iterable[Entry] = ((0, (0.1, 0.2, 0.3, 0.4, 0.5, 0.6)),),
    padding: bytes = b"\x00",
) -> bytes:
    """Build one big-endian capture window, padded to CAPTURE_WINDOW_SIZE."""
    entries = list(entries)
    data = struct.pack(">IIIII", magic, cap_idx, image_idx, img_checksum, img_timestamp)
    data += struct.pack(">B", len(entries))
    for index, values in entries:
        data += struct.pack(">Iffffff", index, *values)
    return data + padding * (CAPTURE_WINDOW_SIZE - len(data))


def as_float32(value: float) -> float:
    """The value a float32 field actually stores."""
    return struct.unpack(">f", struct.pack(">f", value))[0]


@pytest.fixture
def window_factory() -> Callable[..., bytes]:
    return pack_window


@pytest.fixture
def capture_file_factory(tmp_path):
    """Write a capture file holding the given windows at CALIBRATION_OFFSETS."""
    def _write(first: bytes = None, second: bytes = None, size: int = CAPTURE_FILE_SIZE, name="capture.bin"):
        content = bytearray(size)
        for offset, window in zip(CALIBRATION_OFFSETS, (first, second)):
            if window is not None:
                content[offset:offset + len(window)] = window
        path = tmp_path / name
        path.write_bytes(bytes(content[:size]))
        return path
    return _write


@pytest.fixture
def capture_file(capture_file_factory):
    """A valid capture file with distinct records in each window."""
    return capture_file_factory(
        pack_window(cap_idx=1, image_idx=2, img_checksum=3, img_timestamp=4),
        pack_window(
            cap_idx=5,
            image_idx=6,
            img_checksum=7,
            img_timestamp=8,
            entries=[(0, (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)), (1, (-1.5, 0.0, 0.25, 8.0, 16.0, 32.0))],
        ),
    )


@pytest.fixture
def ramp_series() -> TimeSeries:
    """
    Recording of a 10-unit x translation over 2 s starting at t = 0, sampled
    once per second and offset to a non-zero clock.
    """
    base = 5000.0
    return TimeSeries.from_rows([
        (base + 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (base + 1000.0, 0.0, 0.0, 0.0, 5.0, 0.0, 0.0),
        (base + 2000.0, 0.0, 0.0, 0.0, 10.0, 0.0, 0.0),
    ])


@pytest.fixture
def full_series() -> TimeSeries:
    """Recording with samples before, during and after a 1 s move starting at 1 s."""
    return TimeSeries.from_rows([
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (500.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (1000.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (1500.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0),
        (2000.0, 0.0, 0.0, 4.0, 0.0, 0.0, 0.0),
        (2500.0, 0.0, 0.0, 4.0, 0.0, 0.0, 0.0),
        (3000.0, 0.0, 0.0, 4.5, 0.0, 0.0, 0.0),
    ])
