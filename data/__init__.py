"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    CURRENT_VERSION,
)

from .utils import (
    read_file_to_bytes,
    write_bytes_to_file,
    write_json_file,
    is_positive_int,
    normalize_string,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
    SETTINGS_FILE_NAME,
    MIN_TARGET_SIZE,
    MIN_GRID_SIZE,
    MIN_TOLERANCE,
    MAX_TOLERANCE,
    MIN_EROSION,
    MAX_EROSION,
    MIN_FPS,
    MAX_FPS,
    MIN_PALETTE_COLORS,
    MAX_PALETTE_COLORS,
    DEFAULT_SETTINGS,
    DEFAULT_OUTPUT_COLS,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TOLERANCE,
    DEFAULT_EROSION,
    DEFAULT_SAMPLING_QUALITY,
    EMPTY_ALPHA_CUTOFF,
    EMPTY_FRAME_THRESHOLD,
    GIF_BATCH_SIZE,
    VIDEO_BATCH_SIZE,
    FRAME_GENERATION_BATCH_SIZE,
    VIDEO_ASSUMED_FPS,
    SAMPLING_CONFIGS,
)

__all__ = [
    # Config
    "DEBUG",
    "CURRENT_VERSION",
    # Utils
    "read_file_to_bytes",
    "write_bytes_to_file",
    "write_json_file",
    "is_positive_int",
    "normalize_string",
    # Constants
    "SEPARATOR_LINE_LENGTH",
    "SETTINGS_FILE_NAME",
    "MIN_TARGET_SIZE",
    "MIN_GRID_SIZE",
    "MIN_TOLERANCE",
    "MAX_TOLERANCE",
    "MIN_EROSION",
    "MAX_EROSION",
    "MIN_FPS",
    "MAX_FPS",
    "MIN_PALETTE_COLORS",
    "MAX_PALETTE_COLORS",
    "DEFAULT_SETTINGS",
    "DEFAULT_OUTPUT_COLS",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_TOLERANCE",
    "DEFAULT_EROSION",
    "DEFAULT_SAMPLING_QUALITY",
    "EMPTY_ALPHA_CUTOFF",
    "EMPTY_FRAME_THRESHOLD",
    "GIF_BATCH_SIZE",
    "VIDEO_BATCH_SIZE",
    "FRAME_GENERATION_BATCH_SIZE",
    "VIDEO_ASSUMED_FPS",
    "SAMPLING_CONFIGS",
]
