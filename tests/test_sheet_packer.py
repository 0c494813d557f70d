#!/usr/bin/env python3
"""
Tests for sheet layout, packing and playback lookup.

Usage:
    python tests/test_sheet_packer.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from raster import RasterBuffer, InvalidDimension
from image_ops import compute_layout, grid_position, frame_rect, pack_frames, extract_frame
from generators import playback_frame_rect
from utils import RED, GREEN, BLUE, CLEAR, solid, pixel, exit_with_results


def test_layout_auto_and_fixed_columns():
    assert compute_layout(10, 0) == (4, 3)
    assert compute_layout(10, 5) == (5, 2)
    assert compute_layout(1, 0) == (1, 1)
    assert compute_layout(4, 0) == (2, 2)
    assert compute_layout(5, 0) == (3, 2)
    assert compute_layout(3, 8) == (8, 1)
    assert compute_layout(0, 0) == (0, 0)


def test_grid_position_is_row_major():
    assert grid_position(0, 4) == (0, 0)
    assert grid_position(5, 4) == (1, 1)
    assert grid_position(9, 4) == (1, 2)


def test_pack_places_frames_without_gaps():
    frames = [solid(2, 2, RED), solid(2, 2, GREEN), solid(2, 2, BLUE)]
    sheet = pack_frames(frames, 2, 2)

    assert (sheet.cols, sheet.rows) == (2, 2)
    assert sheet.raster.size == (4, 4)
    assert pixel(sheet.raster, 0, 0) == RED
    assert pixel(sheet.raster, 3, 1) == GREEN
    assert pixel(sheet.raster, 1, 3) == BLUE
    assert pixel(sheet.raster, 3, 3) == CLEAR


def test_pack_with_fixed_columns():
    frames = [solid(3, 2, RED) for _ in range(10)]
    sheet = pack_frames(frames, 3, 2, output_cols=5)
    assert (sheet.cols, sheet.rows) == (5, 2)
    assert sheet.raster.size == (15, 4)


def test_pack_keeps_frame_transparency():
    frame = RasterBuffer.blank(2, 2)
    frame.pixels[0, 0] = BLUE
    sheet = pack_frames([frame], 2, 2)
    assert pixel(sheet.raster, 0, 0) == BLUE
    assert pixel(sheet.raster, 1, 1) == CLEAR


def test_pack_rejects_wrong_frame_size():
    try:
        pack_frames([solid(2, 2, RED), solid(3, 2, RED)], 2, 2)
    except InvalidDimension:
        pass
    else:
        raise AssertionError("mismatched frame size should be rejected")


def test_pack_nothing_returns_none():
    assert pack_frames([], 8, 8) is None


def test_playback_lookup_matches_packing():
    colors = [(i * 20, 255 - i * 20, i, 255) for i in range(7)]
    frames = [solid(4, 4, color) for color in colors]

    for output_cols in (0, 3):
        sheet = pack_frames(frames, 4, 4, output_cols)
        for index, color in enumerate(colors):
            x, y, w, h = frame_rect(index, len(frames), 4, 4, output_cols)
            assert pixel(sheet.raster, x, y) == color
            assert extract_frame(sheet, index) == frames[index]

        # playback wraps around
        assert playback_frame_rect(len(colors) + 1, len(colors), 4, 4, output_cols) == frame_rect(
            1, len(colors), 4, 4, output_cols
        )


if __name__ == "__main__":
    exit_with_results(globals())
