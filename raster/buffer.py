"""
RGBA raster buffer shared by every processing stage.
"""

import numpy as np
from typing import Tuple

from .constants import CHANNELS, MAX_SURFACE_AREA, MAX_SURFACE_DIMENSION
from .errors import InvalidDimension, SurfaceAllocationFailure


def _allocate_pixels(width: int, height: int) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise SurfaceAllocationFailure(
            f"Cannot allocate a {width}x{height} surface: dimensions must be positive"
        )
    if (
        width > MAX_SURFACE_DIMENSION
        or height > MAX_SURFACE_DIMENSION
        or width * height > MAX_SURFACE_AREA
    ):
        raise SurfaceAllocationFailure(
            f"Cannot allocate a {width}x{height} surface: exceeds surface limits"
        )
    try:
        return np.zeros((height, width, CHANNELS), dtype=np.uint8)
    except MemoryError as e:
        raise SurfaceAllocationFailure(
            f"Cannot allocate a {width}x{height} surface: {e}"
        ) from e


class RasterBuffer:
    """Row-major RGBA image.

    ``pixels`` has shape (height, width, 4) and dtype uint8. Alpha 0 means
    fully transparent. Methods that mutate the buffer say so; everything
    else returns a new buffer.
    """

    __slots__ = ("pixels",)

    def __init__(self, pixels: np.ndarray):
        if pixels.dtype != np.uint8:
            raise InvalidDimension(f"Raster pixels must be uint8, got {pixels.dtype}")
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise InvalidDimension(
                f"Raster pixels must have shape (height, width, 4), got {pixels.shape}"
            )
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise InvalidDimension(f"Raster must not be empty, got {pixels.shape}")
        self.pixels = pixels

    @classmethod
    def blank(cls, width: int, height: int) -> "RasterBuffer":
        """Create a fully transparent buffer."""
        return cls(_allocate_pixels(width, height))

    @classmethod
    def from_array(cls, array, width: int = None, height: int = None) -> "RasterBuffer":
        """Build a buffer from a (h, w, 4) array or a flat w*h*4 sequence."""
        arr = np.asarray(array)
        if arr.ndim == 1:
            if width is None or height is None:
                raise InvalidDimension("Flat pixel data needs explicit width and height")
            if arr.size != width * height * CHANNELS:
                raise InvalidDimension(
                    f"Pixel data has {arr.size} values, expected "
                    f"{width * height * CHANNELS} for {width}x{height}"
                )
            arr = arr.reshape(height, width, CHANNELS)
        elif width is not None and height is not None and arr.shape[:2] != (height, width):
            raise InvalidDimension(
                f"Pixel array is {arr.shape[1]}x{arr.shape[0]}, expected {width}x{height}"
            )
        if arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)
        return cls(np.ascontiguousarray(arr))

    @classmethod
    def filled(cls, width: int, height: int, rgba: Tuple[int, int, int, int]) -> "RasterBuffer":
        buf = cls.blank(width, height)
        buf.pixels[:, :] = rgba
        return buf

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[:, :, 3]

    def copy(self) -> "RasterBuffer":
        return RasterBuffer(self.pixels.copy())

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def crop(self, x: int, y: int, width: int, height: int) -> "RasterBuffer":
        """Return a copy of the given rectangle. The rectangle must fit."""
        if (
            width <= 0
            or height <= 0
            or x < 0
            or y < 0
            or x + width > self.width
            or y + height > self.height
        ):
            raise InvalidDimension(
                f"Crop ({x}, {y}, {width}x{height}) is outside the "
                f"{self.width}x{self.height} raster"
            )
        return RasterBuffer(self.pixels[y : y + height, x : x + width].copy())

    def _clip_rect(self, left: int, top: int, width: int, height: int):
        x0 = max(left, 0)
        y0 = max(top, 0)
        x1 = min(left + width, self.width)
        y1 = min(top + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return None
        return x0, y0, x1, y1

    def alpha_composite(self, patch: "RasterBuffer", left: int = 0, top: int = 0) -> None:
        """Draw ``patch`` over this buffer with source-over blending (in place).

        Parts of the patch outside this buffer are clipped.
        """
        rect = self._clip_rect(left, top, patch.width, patch.height)
        if rect is None:
            return
        x0, y0, x1, y1 = rect
        src = patch.pixels[y0 - top : y1 - top, x0 - left : x1 - left]
        dst = self.pixels[y0:y1, x0:x1]

        src_a = src[:, :, 3:4].astype(np.float32) / 255.0
        dst_a = dst[:, :, 3:4].astype(np.float32) / 255.0
        out_a = src_a + dst_a * (1.0 - src_a)

        src_rgb = src[:, :, :3].astype(np.float32)
        dst_rgb = dst[:, :, :3].astype(np.float32)
        with np.errstate(divide="ignore", invalid="ignore"):
            out_rgb = np.where(
                out_a > 0,
                (src_rgb * src_a + dst_rgb * dst_a * (1.0 - src_a)) / out_a,
                0.0,
            )

        blended = np.empty_like(dst)
        blended[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
        blended[:, :, 3] = np.clip(np.rint(out_a[:, :, 0] * 255.0), 0, 255).astype(np.uint8)

        # Fully opaque source pixels replace, fully transparent ones leave dst alone
        opaque = src[:, :, 3] == 255
        clear = src[:, :, 3] == 0
        blended[opaque] = src[opaque]
        blended[clear] = dst[clear]
        dst[:] = blended

    def clear_rect(self, left: int, top: int, width: int, height: int) -> None:
        """Set a rectangle to fully transparent black (in place)."""
        rect = self._clip_rect(left, top, width, height)
        if rect is None:
            return
        x0, y0, x1, y1 = rect
        self.pixels[y0:y1, x0:x1] = 0

    def clear(self) -> None:
        self.pixels[:] = 0

    def opaque_fraction(self, alpha_cutoff: int = 10) -> float:
        """Fraction of pixels whose alpha is above ``alpha_cutoff``."""
        return float(np.count_nonzero(self.alpha > alpha_cutoff)) / (self.width * self.height)

    def is_empty(self, threshold: float = 0.01, alpha_cutoff: int = 10) -> bool:
        return self.opaque_fraction(alpha_cutoff) < threshold

    def __eq__(self, other) -> bool:
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"RasterBuffer({self.width}x{self.height})"
