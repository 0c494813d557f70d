#!/usr/bin/env python3
"""
Tests for nearest-neighbor scaling and letterboxing.

Usage:
    python tests/test_nearest_scaler.py
"""

import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from raster import RasterBuffer, InvalidDimension
from image_ops import scale_nearest, compute_letterbox
from utils import RED, BLUE, distinct_colors, pixel, exit_with_results


def gradient(width: int, height: int) -> RasterBuffer:
    """Every pixel a different opaque color."""
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 0] = xs * 7 % 256
    pixels[:, :, 1] = ys * 11 % 256
    pixels[:, :, 2] = (xs + ys) * 3 % 256
    pixels[:, :, 3] = 255
    return RasterBuffer(pixels)


def padding_rows(raster: RasterBuffer):
    """(top, bottom) counts of fully transparent rows."""
    empty = ~raster.alpha.any(axis=1)
    top = int(np.argmax(~empty))
    bottom = int(np.argmax(~empty[::-1]))
    return top, bottom


def test_output_has_exact_target_size():
    for src, target in (((16, 16), (8, 8)), ((7, 3), (32, 32)), ((3, 9), (10, 20))):
        scaled = scale_nearest(gradient(*src), *target)
        assert scaled.size == target
        assert scaled.pixels.size == target[0] * target[1] * 4


def test_downscale_only_copies_source_pixels():
    src = gradient(16, 16)
    scaled = scale_nearest(src, 8, 8)
    assert distinct_colors(scaled) <= distinct_colors(src)
    assert (scaled.alpha == 255).all()


def test_integer_upscale_repeats_pixels():
    src = RasterBuffer.blank(2, 2)
    src.pixels[0, 0] = RED
    src.pixels[1, 1] = BLUE
    scaled = scale_nearest(src, 4, 4)
    assert (scaled.pixels[0:2, 0:2] == RED).all()
    assert (scaled.pixels[2:4, 2:4] == BLUE).all()
    assert not scaled.pixels[0:2, 2:4].any()


def test_wide_source_is_centered_vertically():
    scaled = scale_nearest(gradient(16, 8), 8, 8)
    top, bottom = padding_rows(scaled)
    assert top == bottom == 2
    assert (scaled.alpha[2:6] == 255).all()


def test_odd_remainder_is_within_one_pixel():
    scaled = scale_nearest(gradient(3, 1), 8, 8)
    top, bottom = padding_rows(scaled)
    assert abs(top - bottom) <= 1
    assert compute_letterbox(3, 1, 8, 8) == (0, 2, 8, 3)


def test_tall_source_is_centered_horizontally():
    assert compute_letterbox(8, 16, 8, 8) == (2, 0, 4, 8)
    scaled = scale_nearest(gradient(8, 16), 8, 8)
    assert not scaled.pixels[:, :2].any()
    assert not scaled.pixels[:, 6:].any()
    assert (scaled.alpha[:, 2:6] == 255).all()


def test_equal_aspect_fills_target():
    assert compute_letterbox(10, 5, 20, 10) == (0, 0, 20, 10)
    assert (scale_nearest(gradient(10, 5), 20, 10).alpha == 255).all()


def test_source_corners_survive():
    src = gradient(5, 5)
    scaled = scale_nearest(src, 15, 15)
    assert pixel(scaled, 0, 0) == pixel(src, 0, 0)
    assert pixel(scaled, 14, 14) == pixel(src, 4, 4)


def test_zero_target_rejected():
    try:
        scale_nearest(gradient(4, 4), 0, 8)
    except InvalidDimension:
        pass
    else:
        raise AssertionError("zero width should be rejected")


if __name__ == "__main__":
    exit_with_results(globals())
