"""Unit tests for capture window decoding and calibration extraction.

These tests build synthetic capture files with `struct` and check that the
decoder reads the fixed header, the length-prefixed entry list and drops the
padding, and that every failure mode surfaces as a library exception.
"""

import pytest

from conftest import as_float32, pack_window
from motion_acceptance.capture import (
    Calibration,
    CalibrationEntry,
    CaptureDecoder,
    CaptureRecord,
    decode_window,
    extract_calibration,
)
from motion_acceptance.constants import (
    CALIBRATION_OFFSETS,
    CAPTURE_WINDOW_SIZE,
    MAGIC_HEADER,
)
from motion_acceptance.exceptions import CaptureReadError, CorruptDataError

EXPECTED_FIRST = CaptureRecord(
    magic=MAGIC_HEADER,
    cap_idx=1,
    image_idx=2,
    img_checksum=3,
    img_timestamp=4,
    entries=(
        CalibrationEntry(
            index=0,
            values=tuple(as_float32(v) for v in (0.1, 0.2, 0.3, 0.4, 0.5, 0.6)),
        ),
    ),
)


class TestDecodeWindow:
    """Decoding of an in-memory window."""

    def test_decodes_header_and_entries(self):
        record = decode_window(pack_window())
        assert record == EXPECTED_FIRST

    def test_entry_count_matches_prefix(self):
        entries = [(i, (float(i),) * 6) for i in range(5)]
        record = decode_window(pack_window(entries=entries))
        assert len(record.entries) == 5
        assert [e.index for e in record.entries] == [0, 1, 2, 3, 4]
        assert record.entries[3].values == (3.0,) * 6

    def test_no_entries(self):
        record = decode_window(pack_window(entries=[]))
        assert record.entries == ()

    def test_padding_is_dropped(self):
        # Non-zero padding must not leak into the decoded record
        padded = pack_window(padding=b"\xAB")
        assert decode_window(padded) == EXPECTED_FIRST

    def test_largest_entry_list_that_fits(self):
        # 21 header bytes + 22 entries * 28 bytes = 637 <= 640
        entries = [(i, (0.0,) * 6) for i in range(22)]
        record = decode_window(pack_window(entries=entries))
        assert len(record.entries) == 22

    def test_entry_list_overrunning_window_is_corrupt(self):
        header = pack_window(entries=[])[:20]
        window = header + bytes([23]) + b"\x00" * (CAPTURE_WINDOW_SIZE - 21)
        with pytest.raises(CorruptDataError, match="23 entries"):
            decode_window(window)

    def test_unsigned_fields(self):
        record = decode_window(pack_window(cap_idx=0xFFFFFFFF, img_timestamp=0x80000000))
        assert record.cap_idx == 0xFFFFFFFF
        assert record.img_timestamp == 0x80000000

    def test_magic_mismatch_is_rejected(self):
        with pytest.raises(CorruptDataError) as excinfo:
            decode_window(pack_window(magic=0xDEADBEEF), offset=0x1FF800)
        assert excinfo.value.found == 0xDEADBEEF
        assert excinfo.value.offset == 0x1FF800
        assert "0xDEADBEEF" in str(excinfo.value)

    def test_magic_mismatch_allowed_when_not_verifying(self):
        record = decode_window(pack_window(magic=0), verify_magic=False)
        assert record.magic == 0
        assert record.cap_idx == 1

    def test_wrong_window_size(self):
        with pytest.raises(CorruptDataError, match="must be 640 bytes"):
            decode_window(pack_window()[:100])

    def test_decoding_is_deterministic(self):
        window = pack_window(entries=[(7, (1.0, -2.0, 3.5, 0.0, 1e-3, 42.0))])
        assert decode_window(window) == decode_window(window)


class TestCaptureDecoder:
    """Decoding windows from capture files."""

    def test_decode_at_first_offset(self, capture_file):
        record = CaptureDecoder().decode(capture_file, 0x1FF800)
        assert record == EXPECTED_FIRST

    def test_decode_all_returns_windows_in_offset_order(self, capture_file):
        first, second = CaptureDecoder().decode_all(capture_file)
        assert first == EXPECTED_FIRST
        assert (second.cap_idx, second.image_idx, second.img_checksum, second.img_timestamp) == (5, 6, 7, 8)
        assert second.entry(1).values == (-1.5, 0.0, 0.25, 8.0, 16.0, 32.0)

    def test_offsets_constant(self):
        assert CALIBRATION_OFFSETS == (0x1FF800, 0x1FFC00)

    def test_missing_file_raises_ioerror(self, tmp_path):
        with pytest.raises(IOError):
            CaptureDecoder().decode(tmp_path / "missing.bin", 0x1FF800)

    def test_short_file_raises_capture_read_error(self, capture_file_factory):
        # File ends one byte before the second window is complete
        path = capture_file_factory(
            pack_window(), pack_window(), size=CALIBRATION_OFFSETS[1] + CAPTURE_WINDOW_SIZE - 1
        )
        with pytest.raises(CaptureReadError) as excinfo:
            CaptureDecoder().decode_all(path)
        assert excinfo.value.offset == CALIBRATION_OFFSETS[1]
        assert isinstance(excinfo.value, OSError)

    def test_exact_size_file_is_accepted(self, capture_file_factory):
        path = capture_file_factory(
            pack_window(), pack_window(), size=CALIBRATION_OFFSETS[1] + CAPTURE_WINDOW_SIZE
        )
        assert len(CaptureDecoder().decode_all(path)) == 2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.bin"
        path.write_bytes(b"")
        with pytest.raises(CaptureReadError):
            CaptureDecoder().decode(path, 0)

    def test_zeroed_window_fails_magic_check(self, capture_file_factory):
        path = capture_file_factory(pack_window(), None)
        with pytest.raises(CorruptDataError):
            CaptureDecoder().decode_all(path)

    def test_zeroed_window_without_verification(self, capture_file_factory):
        path = capture_file_factory(pack_window(), None)
        first, second = CaptureDecoder(verify_magic=False).decode_all(path)
        assert first == EXPECTED_FIRST
        assert second.magic == 0
        assert second.entries == ()

    def test_file_is_closed_after_failure(self, capture_file_factory, mocker):
        path = capture_file_factory(pack_window(magic=1), None)
        real_open = open
        handles = []

        def tracking_open(*args, **kwargs):
            handle = real_open(*args, **kwargs)
            handles.append(handle)
            return handle

        mocker.patch("builtins.open", side_effect=tracking_open)
        with pytest.raises(CorruptDataError):
            CaptureDecoder().decode_all(path)
        assert handles and all(h.closed for h in handles)


class TestCalibration:
    """Extraction of the calibration pair of a capture file."""

    def test_extract_calibration(self, capture_file):
        calibration = extract_calibration(capture_file)
        assert isinstance(calibration, Calibration)
        assert calibration.first == EXPECTED_FIRST
        assert calibration.second.cap_idx == 5

    def test_to_dict_is_plain_data(self, capture_file):
        data = extract_calibration(capture_file).to_dict()
        assert data["first"]["magic"] == MAGIC_HEADER
        assert data["second"]["entries"][1] == {
            "index": 1,
            "values": [-1.5, 0.0, 0.25, 8.0, 16.0, 32.0],
        }

    def test_missing_entry_index(self):
        with pytest.raises(KeyError):
            EXPECTED_FIRST.entry(9)
