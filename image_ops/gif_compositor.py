"""
Replay decoded GIF patches against their disposal methods.
"""

from typing import Callable, List, Optional, Sequence

from data import DEBUG, EMPTY_ALPHA_CUTOFF, EMPTY_FRAME_THRESHOLD, GIF_BATCH_SIZE
from raster import (
    RasterBuffer,
    GifFrameDescriptor,
    DisposalMethod,
    DecodeFailure,
)


def validate_descriptor(
    descriptor: GifFrameDescriptor, frame_idx: int, canvas_width: int, canvas_height: int
) -> None:
    """Reject descriptors a well-formed GIF could not produce."""
    if descriptor.disposal not in DisposalMethod.VALID:
        raise DecodeFailure(
            f"Frame {frame_idx}: invalid disposal method {descriptor.disposal}"
        )

    if descriptor.left < 0 or descriptor.top < 0:
        raise DecodeFailure(
            f"Frame {frame_idx}: negative patch offset ({descriptor.left}, {descriptor.top})"
        )

    if descriptor.left >= canvas_width or descriptor.top >= canvas_height:
        raise DecodeFailure(
            f"Frame {frame_idx}: patch at ({descriptor.left}, {descriptor.top}) "
            f"lies outside the {canvas_width}x{canvas_height} canvas"
        )


def composite_gif_frames(
    descriptors: Sequence[GifFrameDescriptor],
    canvas_width: int,
    canvas_height: int,
    empty_threshold: float = EMPTY_FRAME_THRESHOLD,
    on_progress: Optional[Callable[[int, int], None]] = None,
    batch_size: int = GIF_BATCH_SIZE,
) -> List[RasterBuffer]:
    """Flatten GIF patches into one full RGBA frame per GIF frame.

    For every descriptor, in order:
        1. disposal 3 snapshots the canvas before drawing
        2. the patch is source-over composited at its offset
        3. the canvas is emitted unless it is empty
        4. disposal runs: 2 clears the patch rectangle, 3 restores the
           snapshot, 0 and 1 keep the canvas

    Empty frames (fewer than ``empty_threshold`` of pixels with alpha above
    10) are dropped, so the output can be shorter than the input.

    Args:
        descriptors: Decoded frames in display order
        canvas_width: Logical GIF screen width
        canvas_height: Logical GIF screen height
        empty_threshold: Minimum opaque pixel fraction for a frame to be kept
        on_progress: Called as ``on_progress(done, total)`` after each batch
        batch_size: Frames processed between progress callbacks

    Returns:
        List of composited frames, each a new buffer

    Raises:
        DecodeFailure: On a malformed descriptor. Nothing is returned for the
            source in that case.
    """
    total = len(descriptors)
    if total == 0:
        return []

    canvas = RasterBuffer.blank(canvas_width, canvas_height)
    previous = RasterBuffer.blank(canvas_width, canvas_height)
    frames: List[RasterBuffer] = []
    dropped = 0

    for batch_start in range(0, total, batch_size):
        batch_end = min(batch_start + batch_size, total)

        for frame_idx in range(batch_start, batch_end):
            descriptor = descriptors[frame_idx]
            validate_descriptor(descriptor, frame_idx, canvas_width, canvas_height)

            if descriptor.disposal == DisposalMethod.RESTORE_TO_PREVIOUS:
                previous.pixels[:] = canvas.pixels

            canvas.alpha_composite(descriptor.patch, descriptor.left, descriptor.top)

            if canvas.is_empty(empty_threshold, EMPTY_ALPHA_CUTOFF):
                dropped += 1
            else:
                frames.append(canvas.copy())

            if descriptor.disposal == DisposalMethod.RESTORE_TO_BACKGROUND:
                canvas.clear_rect(
                    descriptor.left, descriptor.top, descriptor.width, descriptor.height
                )
            elif descriptor.disposal == DisposalMethod.RESTORE_TO_PREVIOUS:
                canvas.pixels[:] = previous.pixels

        if on_progress is not None:
            on_progress(batch_end, total)

    if DEBUG:
        print(
            f"[INFO] Composited {total} GIF frame(s) on a "
            f"{canvas_width}x{canvas_height} canvas, dropped {dropped} empty"
        )

    return frames
