"""
Chroma-key style background removal: flood fill from the border in L*a*b* space.
"""

import numpy as np
from collections import Counter, deque
from typing import Tuple

from data import DEBUG, DEFAULT_TOLERANCE
from raster import RasterBuffer, BackgroundColorSource
from .color_space import rgb_to_lab, delta_e76

RGB = Tuple[int, int, int]

MAX_DELTA_E = 100.0


def tolerance_to_delta_e(tolerance: float) -> float:
    """Map a 0-255 tolerance onto a 0-100 CIE76 threshold."""
    return tolerance / 255.0 * MAX_DELTA_E


def _border_colors(pixels: np.ndarray):
    """Border RGB tuples in scan order: top/bottom per column, then left/right per row."""
    height, width = pixels.shape[:2]
    top = pixels[0, :, :3]
    bottom = pixels[height - 1, :, :3]
    for x in range(width):
        yield tuple(int(c) for c in top[x])
        yield tuple(int(c) for c in bottom[x])

    left = pixels[:, 0, :3]
    right = pixels[:, width - 1, :3]
    for y in range(height):
        yield tuple(int(c) for c in left[y])
        yield tuple(int(c) for c in right[y])


def detect_background_color(
    raster: RasterBuffer, source: str = BackgroundColorSource.AUTO
) -> RGB:
    """Pick the background color of ``raster``.

    Corner sources return that corner's RGB. ``auto`` returns the most
    frequent exact RGB on the border; ties go to the color seen first.
    """
    pixels = raster.pixels
    last_x = raster.width - 1
    last_y = raster.height - 1

    corners = {
        BackgroundColorSource.TOP_LEFT: (0, 0),
        BackgroundColorSource.TOP_RIGHT: (last_x, 0),
        BackgroundColorSource.BOTTOM_LEFT: (0, last_y),
        BackgroundColorSource.BOTTOM_RIGHT: (last_x, last_y),
    }
    if source in corners:
        x, y = corners[source]
        return tuple(int(c) for c in pixels[y, x, :3])

    if source != BackgroundColorSource.AUTO:
        raise ValueError(f"Unknown background color source: {source}")

    # most_common is stable, so equal counts keep first-seen order
    counts = Counter(_border_colors(pixels))
    return counts.most_common(1)[0][0]


def background_like_mask(raster: RasterBuffer, bg_color: RGB, tolerance: float) -> np.ndarray:
    """True where a pixel's ΔE to ``bg_color`` is within the tolerance."""
    lab = rgb_to_lab(raster.pixels[:, :, :3])
    bg_lab = rgb_to_lab(np.array(bg_color, dtype=np.uint8))
    return delta_e76(lab, bg_lab) <= tolerance_to_delta_e(tolerance)


def flood_fill_from_border(bg_like: np.ndarray) -> np.ndarray:
    """4-connected flood fill seeded from every border pixel.

    Returns a mask of the background-like pixels reachable from the border.
    """
    height, width = bg_like.shape
    reached = np.zeros((height, width), dtype=np.bool_)
    queue = deque()

    def push(y: int, x: int):
        if 0 <= y < height and 0 <= x < width and not reached[y, x] and bg_like[y, x]:
            reached[y, x] = True
            queue.append((y, x))

    for x in range(width):
        push(0, x)
        push(height - 1, x)
    for y in range(height):
        push(y, 0)
        push(y, width - 1)

    while queue:
        y, x = queue.popleft()
        push(y - 1, x)
        push(y + 1, x)
        push(y, x - 1)
        push(y, x + 1)

    return reached


def erode_edges(raster: RasterBuffer, iterations: int) -> RasterBuffer:
    """Binary erosion of the alpha channel, run exactly ``iterations`` times.

    Each pass makes an opaque pixel transparent when any of its 8 neighbors
    is transparent. Out-of-bounds neighbors count as transparent. Works on a
    copy; ``raster`` is left untouched.
    """
    if iterations < 0:
        raise ValueError(f"Erosion iterations must be >= 0, got {iterations}")

    result = raster.copy()
    alpha = result.alpha

    for _ in range(iterations):
        opaque = alpha > 0
        p = np.pad(opaque, 1, mode="constant", constant_values=False)
        neighbors_opaque = (
            p[0:-2, 0:-2]
            & p[0:-2, 1:-1]
            & p[0:-2, 2:]
            & p[1:-1, 0:-2]
            & p[1:-1, 2:]
            & p[2:, 0:-2]
            & p[2:, 1:-1]
            & p[2:, 2:]
        )
        eroded = opaque & ~neighbors_opaque
        if not eroded.any():
            # Nothing left to shrink, further passes are no-ops
            break
        alpha[eroded] = 0

    return result


def remove_background(
    raster: RasterBuffer,
    tolerance: float = DEFAULT_TOLERANCE,
    erosion: int = 0,
    source: str = BackgroundColorSource.AUTO,
    fill_interior: bool = False,
) -> RasterBuffer:
    """Make the background reachable from the border transparent.

    Args:
        raster: Input image, not modified
        tolerance: 0-255, rescaled to a 0-100 ΔE threshold
        erosion: Alpha erosion passes applied after removal
        source: ``auto`` or one of the four corners
        fill_interior: Also clear background-like pixels not connected to
            the border

    Returns:
        New RasterBuffer. Removed pixels keep their RGB with alpha 0.
    """
    bg_color = detect_background_color(raster, source)
    bg_like = background_like_mask(raster, bg_color, tolerance)

    if fill_interior:
        removed = bg_like
    else:
        removed = flood_fill_from_border(bg_like)

    result = raster.copy()
    result.alpha[removed] = 0

    if DEBUG:
        print(
            f"[INFO] Background {bg_color} ({source}): removed "
            f"{int(np.count_nonzero(removed))} of {raster.width * raster.height} pixel(s)"
        )

    if erosion > 0:
        result = erode_edges(result, erosion)

    return result
