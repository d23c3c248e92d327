# motion_acceptance/capture/decoder.py
"""
Decoder for the fixed-layout calibration windows of a capture file.

Each window is 640 bytes, big-endian:

    magic (uint32) | cap_idx (uint32) | image_idx (uint32)
    img_checksum (uint32) | img_timestamp (uint32)
    entry_count (uint8) | entry_count x {index: uint32, values: float32 x 6}
    padding up to 640 bytes

Two windows exist per capture file, at CALIBRATION_OFFSETS.
"""

import logging
import mmap
import os
import struct
from typing import List, Union

from ..constants import (
    CALIBRATION_OFFSETS,
    CAPTURE_HEADER_FORMAT,
    CAPTURE_WINDOW_SIZE,
    ENTRY_COUNT_FORMAT,
    ENTRY_FORMAT,
    ENTRY_VALUE_COUNT,
    MAGIC_HEADER,
)
from ..exceptions import CaptureReadError, CorruptDataError
from .records import CalibrationEntry, CaptureRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

_HEADER = struct.Struct(CAPTURE_HEADER_FORMAT)
_ENTRY_COUNT = struct.Struct(ENTRY_COUNT_FORMAT)
_ENTRY = struct.Struct(ENTRY_FORMAT)


def decode_window(
    window: bytes, offset: int = 0, verify_magic: bool = True
) -> CaptureRecord:
    """
    Decode one capture window from an in-memory buffer.

    Args:
        window: Exactly CAPTURE_WINDOW_SIZE bytes (bytes, bytearray or memoryview).
        offset: Absolute offset the window was read from. Only used in errors.
        verify_magic: Reject windows whose magic header is not MAGIC_HEADER.

    Returns:
        The decoded CaptureRecord. Padding after the entries is discarded.

    Raises:
        CorruptDataError: If the magic header does not match, the buffer has the
                          wrong size, or the entry list overruns the window.
    """
    if len(window) != CAPTURE_WINDOW_SIZE:
        raise CorruptDataError(
            f"Capture window must be {CAPTURE_WINDOW_SIZE} bytes, got {len(window)}.",
            offset=offset,
        )

    magic, cap_idx, image_idx, img_checksum, img_timestamp = _HEADER.unpack_from(
        window, 0
    )
    if verify_magic and magic != MAGIC_HEADER:
        raise CorruptDataError(
            f"Magic header mismatch, expected 0x{MAGIC_HEADER:08X}",
            offset=offset,
            found=magic,
        )

    position = _HEADER.size
    (entry_count,) = _ENTRY_COUNT.unpack_from(window, position)
    position += _ENTRY_COUNT.size

    end = position + entry_count * _ENTRY.size
    if end > CAPTURE_WINDOW_SIZE:
        raise CorruptDataError(
            f"{entry_count} entries need {end} bytes, window holds {CAPTURE_WINDOW_SIZE}.",
            offset=offset,
        )

    entries = []
    for _ in range(entry_count):
        index, *values = _ENTRY.unpack_from(window, position)
        entries.append(CalibrationEntry(index=index, values=tuple(values)))
        position += _ENTRY.size

    logger.debug(
        f"Decoded window at 0x{offset:X}: {entry_count} entries, "
        f"{CAPTURE_WINDOW_SIZE - position} padding bytes dropped."
    )
    return CaptureRecord(
        magic=magic,
        cap_idx=cap_idx,
        image_idx=image_idx,
        img_checksum=img_checksum,
        img_timestamp=img_timestamp,
        entries=tuple(entries),
    )


class CaptureDecoder:
    """
    Reads calibration windows from a capture file through a read-only memory map.

    The file is opened for reading only for the duration of a `decode` or
    `decode_all` call and is released on every exit path.
    """

    def __init__(self, verify_magic: bool = True):
        """
        Initialize the decoder.

        Args:
            verify_magic: When True, a window whose first word is not MAGIC_HEADER
                          raises CorruptDataError instead of being returned.
        """
        self.verify_magic = verify_magic

    def decode(self, path: PathLike, offset: int) -> CaptureRecord:
        """
        Decode the window starting at `offset` of the file at `path`.

        Raises:
            CaptureReadError: If the file cannot be opened or is shorter than
                              offset + CAPTURE_WINDOW_SIZE.
            CorruptDataError: See `decode_window`.
        """
        return self._decode_offsets(path, [offset])[0]

    def decode_all(self, path: PathLike) -> List[CaptureRecord]:
        """
        Decode both calibration windows of a capture file, in CALIBRATION_OFFSETS order.

        A single file handle is shared by both reads.
        """
        return self._decode_offsets(path, CALIBRATION_OFFSETS)

    def _decode_offsets(self, path: PathLike, offsets) -> List[CaptureRecord]:
        try:
            with open(path, "rb") as handle:
                size = os.fstat(handle.fileno()).st_size
                for offset in offsets:
                    self._check_bounds(path, offset, size)
                with mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
                    return [self._read_at(mapped, offset) for offset in offsets]
        except CaptureReadError:
            raise
        except OSError as exc:
            raise CaptureReadError(
                f"Unable to read capture file {path}: {exc}", path=path
            ) from exc

    def _read_at(self, mapped: mmap.mmap, offset: int) -> CaptureRecord:
        # Slicing copies the window so no view outlives the mapping.
        window = mapped[offset:offset + CAPTURE_WINDOW_SIZE]
        return decode_window(window, offset=offset, verify_magic=self.verify_magic)

    @staticmethod
    def _check_bounds(path: PathLike, offset: int, size: int) -> None:
        if offset < 0 or offset + CAPTURE_WINDOW_SIZE > size:
            raise CaptureReadError(
                f"Capture file {path} is {size} bytes, window at 0x{offset:X} "
                f"needs {offset + CAPTURE_WINDOW_SIZE}.",
                path=path,
                offset=offset,
            )
