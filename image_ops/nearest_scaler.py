"""
Aspect-preserving nearest-neighbor scaling with transparent letterboxing.
"""

import math
import numpy as np
from typing import Tuple

from raster import RasterBuffer, InvalidDimension


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_letterbox(
    src_width: int, src_height: int, target_width: int, target_height: int
) -> Tuple[int, int, int, int]:
    """Where the scaled source lands inside the target.

    Returns:
        (offset_x, offset_y, draw_width, draw_height)
    """
    source_aspect = src_width / src_height
    target_aspect = target_width / target_height

    if source_aspect > target_aspect:
        draw_width = target_width
        draw_height = min(target_height, max(1, _round_half_up(target_width / source_aspect)))
        return 0, (target_height - draw_height) // 2, draw_width, draw_height

    if source_aspect < target_aspect:
        draw_height = target_height
        draw_width = min(target_width, max(1, _round_half_up(target_height * source_aspect)))
        return (target_width - draw_width) // 2, 0, draw_width, draw_height

    return 0, 0, target_width, target_height


def nearest_indices(src_len: int, dst_len: int) -> np.ndarray:
    """Source index sampled by each destination index (pixel centers)."""
    idx = ((np.arange(dst_len, dtype=np.float64) + 0.5) * src_len / dst_len).astype(np.int64)
    return np.clip(idx, 0, src_len - 1)


def scale_nearest(raster: RasterBuffer, target_width: int, target_height: int) -> RasterBuffer:
    """Resize to exactly ``target_width`` x ``target_height``.

    Every destination pixel copies exactly one source pixel. The source
    aspect ratio is kept; the shorter axis is padded with transparent pixels
    and the image is centered.
    """
    if target_width <= 0 or target_height <= 0:
        raise InvalidDimension(
            f"Target size must be positive, got {target_width}x{target_height}"
        )

    offset_x, offset_y, draw_width, draw_height = compute_letterbox(
        raster.width, raster.height, target_width, target_height
    )

    rows = nearest_indices(raster.height, draw_height)
    cols = nearest_indices(raster.width, draw_width)

    result = RasterBuffer.blank(target_width, target_height)
    result.pixels[
        offset_y : offset_y + draw_height, offset_x : offset_x + draw_width
    ] = raster.pixels[rows[:, None], cols[None, :]]
    return result
