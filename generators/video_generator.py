"""
Video sources: timestamp sampling and packing of decoded frames.

Decoding itself is left to a ``VideoDecoder`` supplied by the caller.
"""

from typing import Callable, List, Optional, Protocol, Sequence
from data import (
    DEFAULT_SAMPLING_QUALITY,
    SAMPLING_CONFIGS,
    VIDEO_ASSUMED_FPS,
    VIDEO_BATCH_SIZE,
)
from raster import RasterBuffer, SourceSheet, SourceType, DecodeFailure
from .gif_generator import create_sprite_sheet
from .utils import batched


class VideoDecoder(Protocol):
    def read_frames(self, data: bytes, timestamps: Sequence[float]) -> List[RasterBuffer]:
        """Return one RGBA frame at native resolution per timestamp."""
        ...


def sampling_timestamps(duration: float, quality: str = DEFAULT_SAMPLING_QUALITY) -> List[float]:
    """Seconds at which to capture frames for a sampling quality.

    The clip is treated as 30 fps; every ``sample_interval``-th frame is
    taken, up to ``max_frames`` frames.
    """
    if quality not in SAMPLING_CONFIGS:
        raise ValueError(f"Unknown sampling quality: {quality}")
    if duration <= 0:
        return []

    config = SAMPLING_CONFIGS[quality]
    interval = config["sample_interval"]
    total_frames = int(duration * VIDEO_ASSUMED_FPS)
    count = min(total_frames // interval, config["max_frames"])

    return [i * interval / VIDEO_ASSUMED_FPS for i in range(count)]


def extract_video_frames(
    decoder: VideoDecoder,
    data: bytes,
    duration: float,
    quality: str,
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> List[RasterBuffer]:
    """Sample frames from a clip in small batches.

    Raises:
        DecodeFailure: If the decoder returns the wrong number of frames or
            frames of differing sizes
    """
    timestamps = sampling_timestamps(duration, quality)
    frames: List[RasterBuffer] = []

    if on_progress is not None:
        on_progress(0, len(timestamps))

    for batch in batched(timestamps, VIDEO_BATCH_SIZE):
        decoded = decoder.read_frames(data, batch)
        if len(decoded) != len(batch):
            raise DecodeFailure(
                f"Decoder returned {len(decoded)} frame(s) for {len(batch)} timestamp(s)"
            )
        frames.extend(decoded)
        if on_progress is not None:
            on_progress(len(frames), len(timestamps))

    sizes = {frame.size for frame in frames}
    if len(sizes) > 1:
        raise DecodeFailure(f"Decoded frames differ in size: {sorted(sizes)}")

    return frames


def video_to_source_sheet(
    decoder: VideoDecoder,
    data: bytes,
    duration: float,
    quality: str,
    sheet_id: str,
    name: str = "",
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> SourceSheet:
    """Sample a clip and pack the frames into a SourceSheet.

    Raises:
        EmptyInput: If the clip is too short to yield a frame
    """
    frames = extract_video_frames(decoder, data, duration, quality, on_progress)
    packed = create_sprite_sheet(frames)
    return SourceSheet(
        id=sheet_id,
        raster=packed.raster,
        cols=packed.cols,
        rows=packed.rows,
        name=name,
        source_type=SourceType.VIDEO,
    )
