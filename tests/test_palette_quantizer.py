#!/usr/bin/env python3
"""
Tests for median-cut palettes and Floyd-Steinberg dithering.

Usage:
    python tests/test_palette_quantizer.py
"""

import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from raster import RasterBuffer
from image_ops import median_cut_palette, nearest_palette_indices, quantize
from utils import RED, GREEN, BLUE, WHITE, distinct_colors, pixel, exit_with_results


def four_color_image() -> RasterBuffer:
    img = RasterBuffer.blank(4, 4)
    img.pixels[0:2, 0:2] = RED
    img.pixels[0:2, 2:4] = GREEN
    img.pixels[2:4, 0:2] = BLUE
    img.pixels[2:4, 2:3] = WHITE
    # one transparent pixel with a color that must not enter the palette
    img.pixels[3, 3] = (12, 34, 56, 0)
    return img


def noisy_image(seed: int = 7) -> RasterBuffer:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(12, 12, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    pixels[0, :, 3] = 0
    return RasterBuffer(pixels)


def test_palette_never_exceeds_limit():
    img = noisy_image()
    for max_colors in (1, 2, 5, 16, 64):
        palette = median_cut_palette(img, max_colors)
        assert 1 <= len(palette) <= max_colors
        quantized, _ = quantize(img, max_colors)
        assert len(distinct_colors(quantized)) <= max_colors


def test_enough_colors_means_no_error():
    img = four_color_image()
    for max_colors in (4, 8, 256):
        quantized, palette = quantize(img, max_colors)
        assert quantized == img
        assert set(palette) == distinct_colors(img)

        dithered, _ = quantize(img, max_colors, dither=True)
        assert dithered == img


def test_single_color_average():
    img = four_color_image()
    palette = median_cut_palette(img, 1)
    # 4 red, 4 green, 4 blue and 2 white opaque pixels
    assert palette == [(109, 109, 109)]


def test_nearest_palette_is_euclidean_rgb():
    palette = [(0, 0, 0), (255, 255, 255), (255, 0, 0)]
    rgb = np.array([[10, 10, 10], [200, 200, 200], [200, 30, 30]])
    assert list(nearest_palette_indices(rgb, palette)) == [0, 1, 2]


def test_alpha_passes_through():
    img = noisy_image()
    for dither in (False, True):
        quantized, _ = quantize(img, 4, dither=dither)
        assert np.array_equal(quantized.alpha, img.alpha)
        # transparent pixels are not recolored
        assert np.array_equal(quantized.pixels[0], img.pixels[0])


def test_dither_uses_only_palette_colors():
    img = noisy_image(11)
    quantized, palette = quantize(img, 6, dither=True)
    assert distinct_colors(quantized) <= set(palette)


def test_dither_spreads_error():
    # mid gray between black and white dithers into a mix of both
    img = RasterBuffer.filled(8, 8, (128, 128, 128, 255))
    palette = [(0, 0, 0), (255, 255, 255)]
    plain, _ = quantize(img, 2, palette=palette)
    dithered, _ = quantize(img, 2, dither=True, palette=palette)

    assert distinct_colors(plain) == {(255, 255, 255)}
    assert distinct_colors(dithered) == {(0, 0, 0), (255, 255, 255)}
    white_share = np.count_nonzero(dithered.pixels[:, :, 0] == 255) / 64
    assert 0.3 <= white_share <= 0.7


def test_input_is_not_mutated():
    img = noisy_image()
    before = img.copy()
    quantize(img, 3, dither=True)
    assert img == before


def test_fully_transparent_image():
    img = RasterBuffer.blank(3, 3)
    quantized, palette = quantize(img, 8)
    assert palette == []
    assert quantized == img
    assert pixel(quantized, 1, 1) == (0, 0, 0, 0)


if __name__ == "__main__":
    exit_with_results(globals())
