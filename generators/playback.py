"""
Preview playback over a packed sheet.
"""

from typing import Tuple
from raster import OutputSheet, RasterBuffer, EmptyInput
from image_ops import frame_rect, extract_frame
from .utils import validate_fps


def frame_interval_ms(fps: int) -> float:
    validate_fps(fps)
    return 1000.0 / fps


def _require_frames(frame_count: int) -> None:
    if frame_count <= 0:
        raise EmptyInput("Nothing to play back: the sheet has no frames")


def playback_frame_rect(
    step: int,
    frame_count: int,
    frame_width: int,
    frame_height: int,
    output_cols: int = 0,
) -> Tuple[int, int, int, int]:
    """Sheet rectangle shown at playback ``step``; playback loops forever.

    Uses the same layout as packing, so the preview never drifts from the
    sheet.

    Raises:
        EmptyInput: If there are no frames to show
    """
    _require_frames(frame_count)
    return frame_rect(step % frame_count, frame_count, frame_width, frame_height, output_cols)


def playback_frame(sheet: OutputSheet, step: int) -> RasterBuffer:
    _require_frames(sheet.frame_count)
    return extract_frame(sheet, step % sheet.frame_count)


def frame_at_time(elapsed_ms: float, fps: int, frame_count: int) -> int:
    """Index of the frame on screen ``elapsed_ms`` after playback started."""
    _require_frames(frame_count)
    return int(elapsed_ms // frame_interval_ms(fps)) % frame_count
