"""Common utility functions for test scripts."""

import inspect
import sys
import tempfile
from pathlib import Path

import numpy as np

from data import SEPARATOR_LINE_LENGTH
from raster import RasterBuffer

STEP_SEPARATOR = "-" * SEPARATOR_LINE_LENGTH
SECTION_SEPARATOR = "=" * SEPARATOR_LINE_LENGTH

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


def solid(width: int, height: int, rgba) -> RasterBuffer:
    """Raster filled with one color."""
    return RasterBuffer.filled(width, height, rgba)


def pixel(raster: RasterBuffer, x: int, y: int):
    return tuple(int(c) for c in raster.pixels[y, x])


def distinct_colors(raster: RasterBuffer, opaque_only: bool = True):
    """Set of RGB tuples used by the raster."""
    pixels = raster.pixels
    if opaque_only:
        rgb = pixels[:, :, :3][pixels[:, :, 3] > 0]
    else:
        rgb = pixels[:, :, :3].reshape(-1, 3)
    return {tuple(int(c) for c in color) for color in np.unique(rgb, axis=0)} if len(rgb) else set()


def run_tests(module_globals) -> int:
    """Run every ``test_*`` function of a module when executed as a script.

    Functions taking a ``tmp_path`` argument get a fresh temporary directory.

    Returns:
        Process exit code: 0 if all tests passed, 1 otherwise
    """
    tests = [
        (name, func)
        for name, func in module_globals.items()
        if name.startswith("test_") and callable(func)
    ]

    print(SECTION_SEPARATOR)
    print(f"[START] Running {len(tests)} test(s)")
    print(SECTION_SEPARATOR)

    failures = 0
    for name, func in tests:
        try:
            if "tmp_path" in inspect.signature(func).parameters:
                with tempfile.TemporaryDirectory() as tmp:
                    func(tmp_path=Path(tmp))
            else:
                func()
            print(f"    [OK] {name}")
        except Exception as e:
            failures += 1
            print(f"    [FAIL] {name}: {type(e).__name__}: {e}")

    print(STEP_SEPARATOR)
    if failures:
        print(f"[FAIL] {failures}/{len(tests)} test(s) failed")
    else:
        print(f"[OK] All {len(tests)} test(s) passed")
    return 1 if failures else 0


def exit_with_results(module_globals) -> None:
    sys.exit(run_tests(module_globals))
