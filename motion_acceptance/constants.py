# motion_acceptance/constants.py
"""
Constants for the motion acceptance library.
Includes the capture file binary layout, the logical axis names and their
physical sensor columns, and the labels used in emitted metric records.
"""

# Capture file layout (big-endian)
CAPTURE_WINDOW_SIZE = 640     # Bytes per calibration window
MAGIC_HEADER = 0x711AD917

# Absolute byte offsets of the two calibration windows in a capture file
CALIBRATION_OFFSETS = (0x1FF800, 0x1FFC00)

# struct formats for one window
CAPTURE_HEADER_FORMAT = ">IIIII"   # magic, cap_idx, image_idx, img_checksum, img_timestamp
ENTRY_COUNT_FORMAT = ">B"
ENTRY_FORMAT = ">Iffffff"          # index + six float32 values
ENTRY_VALUE_COUNT = 6
MAX_ENTRY_COUNT = 0xFF

# Time units
MS_PER_SECOND = 1000

# Logical axes, in evaluation order
X_ROTATION = "x_rotation"
Y_ROTATION = "y_rotation"
Z_ROTATION = "z_rotation"
X_TRANSLATION = "x_translation"
Y_TRANSLATION = "y_translation"
Z_TRANSLATION = "z_translation"

AXES = (
    X_ROTATION,
    Y_ROTATION,
    Z_ROTATION,
    X_TRANSLATION,
    Y_TRANSLATION,
    Z_TRANSLATION,
)

# Time-series columns, in input row order
TIMESTAMP = "timestamp"
GYRO_X = "gyro_x"
GYRO_Y = "gyro_y"
GYRO_Z = "gyro_z"
ACC_X = "acc_x"
ACC_Y = "acc_y"
ACC_Z = "acc_z"

DEFAULT_HEADERS = (TIMESTAMP, GYRO_X, GYRO_Y, GYRO_Z, ACC_X, ACC_Y, ACC_Z)

AXIS_COLUMNS = {
    X_ROTATION: GYRO_X,
    Y_ROTATION: GYRO_Y,
    Z_ROTATION: GYRO_Z,
    X_TRANSLATION: ACC_X,
    Y_TRANSLATION: ACC_Y,
    Z_TRANSLATION: ACC_Z,
}

# Portions of a recording relative to the commanded move
PORTION_PRE = "pre"
PORTION_TEST = "test"
PORTION_POST = "post"
PORTIONS = (PORTION_PRE, PORTION_TEST, PORTION_POST)

# Metric kinds, in emission order
METRIC_RMS = "RMS"
METRIC_ABS = "ABS"
METRIC_EXP = "EXP"
METRIC_ACT = "ACT"
METRIC_KINDS = (METRIC_RMS, METRIC_ABS, METRIC_EXP, METRIC_ACT)

# Header of the flat result table handed to reporters
RESULT_HEADER = ("test", "version", "device_axis", "portion", "metric", "value")
