"""
Median-cut palette reduction with optional Floyd-Steinberg dithering.
"""

import numpy as np
from collections import deque
from typing import Optional, Tuple

from data import DEBUG
from raster import RasterBuffer, Palette

# Rows per block when matching pixels against the palette
_MATCH_BLOCK = 65536

# (dx, dy, weight) of the Floyd-Steinberg kernel
_FS_KERNEL = (
    (1, 0, 7.0 / 16.0),
    (-1, 1, 3.0 / 16.0),
    (0, 1, 5.0 / 16.0),
    (1, 1, 1.0 / 16.0),
)


def _bucket_average(colors: np.ndarray, counts: np.ndarray) -> Tuple[int, int, int]:
    mean = (colors * counts[:, None]).sum(axis=0) / counts.sum()
    return tuple(int(c) for c in np.floor(mean + 0.5))


def _split_bucket(colors: np.ndarray, counts: np.ndarray):
    """Split on the channel with the largest range, at the pixel median."""
    channel = int(np.argmax(colors.max(axis=0) - colors.min(axis=0)))
    order = np.argsort(colors[:, channel], kind="stable")
    colors = colors[order]
    counts = counts[order]

    cumulative = np.cumsum(counts)
    split = int(np.searchsorted(cumulative, cumulative[-1] / 2.0, side="left")) + 1
    split = min(max(split, 1), len(colors) - 1)

    return (colors[:split], counts[:split]), (colors[split:], counts[split:])


def median_cut_palette(raster: RasterBuffer, max_colors: int) -> Palette:
    """Build a palette of at most ``max_colors`` colors.

    Buckets hold the distinct opaque colors weighted by pixel count. The
    first bucket in the queue is either accepted (averaged into a palette
    entry) or split in two and both halves are queued again. Entries come
    out in split order, not sorted.
    """
    if max_colors < 1:
        raise ValueError(f"Palette size must be at least 1, got {max_colors}")

    opaque = raster.alpha > 0
    if not opaque.any():
        return []

    rgb = raster.pixels[:, :, :3][opaque].astype(np.int64)
    colors, counts = np.unique(rgb, axis=0, return_counts=True)

    palette: Palette = []
    queue = deque([(colors, counts)])

    while queue and len(palette) < max_colors:
        bucket_colors, bucket_counts = queue.popleft()

        if len(palette) + len(queue) + 1 >= max_colors or len(bucket_colors) == 1:
            palette.append(_bucket_average(bucket_colors, bucket_counts))
            continue

        low, high = _split_bucket(bucket_colors, bucket_counts)
        queue.append(low)
        queue.append(high)

    if DEBUG:
        print(
            f"[INFO] Median cut: {len(colors)} distinct color(s) -> "
            f"{len(palette)} palette entries"
        )

    return palette


def nearest_palette_indices(rgb: np.ndarray, palette: Palette) -> np.ndarray:
    """Index of the closest palette color (Euclidean RGB) for each row of ``rgb``."""
    pal = np.asarray(palette, dtype=np.float64)
    flat = np.asarray(rgb, dtype=np.float64).reshape(-1, 3)
    indices = np.empty(len(flat), dtype=np.int64)

    for start in range(0, len(flat), _MATCH_BLOCK):
        block = flat[start : start + _MATCH_BLOCK]
        dist = ((block[:, None, :] - pal[None, :, :]) ** 2).sum(axis=2)
        indices[start : start + _MATCH_BLOCK] = np.argmin(dist, axis=1)

    return indices


def apply_floyd_steinberg(raster: RasterBuffer, palette: Palette) -> None:
    """Quantize ``raster`` to ``palette`` with error diffusion (in place).

    Pixels are visited row by row. Error only flows into neighbors that are
    not transparent, and diffused values are clamped to 0-255. Alpha is left
    alone.
    """
    pal = np.asarray(palette, dtype=np.float64)
    height, width = raster.height, raster.width
    opaque = raster.alpha > 0
    work = raster.pixels[:, :, :3].astype(np.float64)
    out = raster.pixels

    for y in range(height):
        for x in range(width):
            if not opaque[y, x]:
                continue

            old = work[y, x]
            idx = int(np.argmin(((pal - old) ** 2).sum(axis=1)))
            new = pal[idx]
            out[y, x, :3] = new.astype(np.uint8)

            error = old - new
            if not error.any():
                continue

            for dx, dy, weight in _FS_KERNEL:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and ny < height and opaque[ny, nx]:
                    work[ny, nx] = np.clip(work[ny, nx] + error * weight, 0.0, 255.0)


def quantize(
    raster: RasterBuffer,
    max_colors: int,
    dither: bool = False,
    palette: Optional[Palette] = None,
) -> Tuple[RasterBuffer, Palette]:
    """Reduce ``raster`` to at most ``max_colors`` colors.

    Args:
        raster: Input image, not modified
        max_colors: Palette size limit
        dither: Apply Floyd-Steinberg error diffusion
        palette: Use this palette instead of building one with median cut

    Returns:
        Tuple of (quantized copy, palette used)
    """
    if palette is None:
        palette = median_cut_palette(raster, max_colors)
    elif len(palette) > max_colors:
        raise ValueError(
            f"Palette has {len(palette)} colors, more than the limit of {max_colors}"
        )

    result = raster.copy()
    if not palette:
        return result, palette

    if dither:
        apply_floyd_steinberg(result, palette)
        return result, palette

    opaque = result.alpha > 0
    indices = nearest_palette_indices(result.pixels[:, :, :3][opaque], palette)
    result.pixels[:, :, :3][opaque] = np.asarray(palette, dtype=np.uint8)[indices]
    return result, palette
