"""
Grid layout and compositing of same-size frames into one sheet.
"""

import math
from typing import Optional, Sequence, Tuple

from raster import RasterBuffer, OutputSheet, InvalidDimension


def compute_layout(frame_count: int, output_cols: int = 0) -> Tuple[int, int]:
    """Grid size for ``frame_count`` frames.

    A positive ``output_cols`` is used as is, otherwise the grid is as close
    to square as possible.
    """
    if frame_count <= 0:
        return 0, 0
    cols = output_cols if output_cols > 0 else math.ceil(math.sqrt(frame_count))
    rows = math.ceil(frame_count / cols)
    return cols, rows


def grid_position(index: int, cols: int) -> Tuple[int, int]:
    """Row-major (col, row) of frame ``index``."""
    return index % cols, index // cols


def frame_rect(
    index: int,
    frame_count: int,
    frame_width: int,
    frame_height: int,
    output_cols: int = 0,
) -> Tuple[int, int, int, int]:
    """Pixel rectangle (x, y, w, h) of frame ``index`` inside a packed sheet."""
    if not 0 <= index < frame_count:
        raise IndexError(f"Frame {index} out of range for {frame_count} frame(s)")
    cols, _ = compute_layout(frame_count, output_cols)
    col, row = grid_position(index, cols)
    return col * frame_width, row * frame_height, frame_width, frame_height


def pack_frames(
    frames: Sequence[RasterBuffer],
    frame_width: int,
    frame_height: int,
    output_cols: int = 0,
) -> Optional[OutputSheet]:
    """Composite pre-scaled frames into one sheet, row-major with no gaps.

    Returns:
        OutputSheet, or None when there are no frames
    """
    if not frames:
        return None

    for frame_idx, frame in enumerate(frames):
        if frame.size != (frame_width, frame_height):
            raise InvalidDimension(
                f"Frame {frame_idx} is {frame.width}x{frame.height}, "
                f"expected {frame_width}x{frame_height}"
            )

    cols, rows = compute_layout(len(frames), output_cols)
    canvas = RasterBuffer.blank(cols * frame_width, rows * frame_height)

    for frame_idx, frame in enumerate(frames):
        col, row = grid_position(frame_idx, cols)
        canvas.alpha_composite(frame, col * frame_width, row * frame_height)

    return OutputSheet(
        raster=canvas,
        cols=cols,
        rows=rows,
        frame_width=frame_width,
        frame_height=frame_height,
        frame_count=len(frames),
    )


def extract_frame(sheet: OutputSheet, index: int) -> RasterBuffer:
    """Crop frame ``index`` back out of a packed sheet."""
    if not 0 <= index < sheet.frame_count:
        raise IndexError(f"Frame {index} out of range for {sheet.frame_count} frame(s)")
    col, row = grid_position(index, sheet.cols)
    return sheet.raster.crop(
        col * sheet.frame_width, row * sheet.frame_height, sheet.frame_width, sheet.frame_height
    )
