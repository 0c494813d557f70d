#!/usr/bin/env python3
"""
Tests for GIF frame compositing and disposal handling.

Usage:
    python tests/test_gif_compositor.py
"""

import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from raster import RasterBuffer, GifFrameDescriptor, DecodeFailure
from image_ops import composite_gif_frames
from utils import RED, GREEN, BLUE, CLEAR, solid, pixel, exit_with_results


def desc(patch, left=0, top=0, disposal=0):
    return GifFrameDescriptor(patch=patch, left=left, top=top, disposal=disposal)


def test_patches_accumulate_without_disposal():
    frames = composite_gif_frames(
        [desc(solid(4, 4, RED), disposal=1), desc(solid(1, 1, BLUE), 3, 3, disposal=0)],
        4,
        4,
    )
    assert len(frames) == 2
    assert pixel(frames[0], 3, 3) == RED
    assert pixel(frames[1], 3, 3) == BLUE
    assert pixel(frames[1], 0, 0) == RED


def test_disposal_2_clears_exactly_the_patch_rect():
    frames = composite_gif_frames(
        [
            desc(solid(4, 4, RED), disposal=1),
            desc(solid(2, 2, BLUE), 1, 1, disposal=2),
            desc(solid(1, 1, GREEN), 0, 0, disposal=0),
        ],
        4,
        4,
    )
    assert len(frames) == 3
    assert pixel(frames[1], 1, 1) == BLUE

    last = frames[2]
    hole = last.pixels[1:3, 1:3]
    assert not hole.any()

    outside = np.ones((4, 4), dtype=bool)
    outside[1:3, 1:3] = False
    outside[0, 0] = False
    assert (last.pixels[outside] == RED).all()
    assert pixel(last, 0, 0) == GREEN


def test_disposal_3_restores_pre_frame_canvas():
    invisible = RasterBuffer.blank(1, 1)
    frames = composite_gif_frames(
        [
            desc(solid(4, 4, RED), disposal=1),
            desc(solid(2, 2, BLUE), 0, 0, disposal=3),
            desc(invisible, 0, 0, disposal=1),
        ],
        4,
        4,
    )
    assert len(frames) == 3
    assert pixel(frames[1], 0, 0) == BLUE
    assert frames[2] == frames[0]


def test_disposal_3_snapshot_includes_earlier_frames():
    frames = composite_gif_frames(
        [
            desc(solid(2, 2, RED), 0, 0, disposal=1),
            desc(solid(2, 2, GREEN), 2, 2, disposal=1),
            desc(solid(4, 4, BLUE), 0, 0, disposal=3),
            desc(RasterBuffer.blank(1, 1), 0, 0, disposal=0),
        ],
        4,
        4,
    )
    restored = frames[3]
    assert restored == frames[1]
    assert pixel(restored, 0, 0) == RED
    assert pixel(restored, 3, 3) == GREEN
    assert pixel(restored, 3, 0) == CLEAR


def test_empty_frames_are_dropped():
    canvas = 20
    one_pixel = RasterBuffer.blank(1, 1)
    one_pixel.pixels[0, 0] = RED

    frames = composite_gif_frames(
        [
            desc(RasterBuffer.blank(canvas, canvas), disposal=1),
            desc(one_pixel, 5, 5, disposal=2),
            desc(solid(canvas, canvas, BLUE), disposal=1),
        ],
        canvas,
        canvas,
    )
    # 1 pixel out of 400 is below the 1% threshold
    assert len(frames) == 1
    assert pixel(frames[0], 0, 0) == BLUE


def test_compositing_is_deterministic():
    sequence = [
        desc(solid(3, 3, RED), 1, 1, disposal=2),
        desc(solid(2, 4, GREEN), 0, 0, disposal=3),
        desc(solid(4, 1, BLUE), 0, 3, disposal=0),
    ]
    first = composite_gif_frames(sequence, 4, 4)
    second = composite_gif_frames(sequence, 4, 4)
    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert a == b


def test_emitted_frames_are_snapshots():
    frames = composite_gif_frames(
        [desc(solid(2, 2, RED), disposal=2), desc(solid(2, 2, BLUE), disposal=1)], 2, 2
    )
    assert pixel(frames[0], 0, 0) == RED
    assert pixel(frames[1], 0, 0) == BLUE


def test_invalid_disposal_is_a_decode_failure():
    try:
        composite_gif_frames([desc(solid(2, 2, RED), disposal=1), desc(solid(2, 2, RED), disposal=4)], 2, 2)
    except DecodeFailure:
        pass
    else:
        raise AssertionError("disposal 4 should be rejected")


def test_patch_outside_canvas_is_a_decode_failure():
    try:
        composite_gif_frames([desc(solid(2, 2, RED), 5, 0)], 4, 4)
    except DecodeFailure:
        pass
    else:
        raise AssertionError("patch outside the canvas should be rejected")


def test_progress_reported_per_batch():
    calls = []
    composite_gif_frames(
        [desc(solid(2, 2, RED)) for _ in range(25)],
        2,
        2,
        on_progress=lambda done, total: calls.append((done, total)),
    )
    assert calls == [(10, 25), (20, 25), (25, 25)]


def test_no_descriptors_no_frames():
    assert composite_gif_frames([], 4, 4) == []


if __name__ == "__main__":
    exit_with_results(globals())
