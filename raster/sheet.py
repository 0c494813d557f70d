"""
Source sheets, logical frames and packed output sheets.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .buffer import RasterBuffer
from .constants import DisposalMethod, SourceType
from .errors import DecodeFailure, InvalidDimension

Palette = List[Tuple[int, int, int]]


@dataclass(frozen=True)
class Frame:
    """One cell of a source sheet. Holds no pixels."""

    index: int
    local_index: int
    source_id: str
    col: int
    row: int
    selected: bool = False

    def toggled(self) -> "Frame":
        return replace(self, selected=not self.selected)

    def with_selected(self, selected: bool) -> "Frame":
        if self.selected == selected:
            return self
        return replace(self, selected=selected)


@dataclass(frozen=True)
class SourceSheet:
    """A loaded image cut into a ``cols`` x ``rows`` grid of frames."""

    id: str
    raster: RasterBuffer
    cols: int
    rows: int
    name: str = ""
    source_type: str = SourceType.IMAGE

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise InvalidDimension(
                f"Sheet '{self.id}' grid must be at least 1x1, got {self.cols}x{self.rows}"
            )
        if self.cols > self.raster.width or self.rows > self.raster.height:
            raise InvalidDimension(
                f"Sheet '{self.id}' grid {self.cols}x{self.rows} is larger than its "
                f"{self.raster.width}x{self.raster.height} image"
            )
        if self.source_type not in SourceType.ALL:
            raise ValueError(f"Unknown source type: {self.source_type}")

    @property
    def frame_count(self) -> int:
        return self.cols * self.rows

    @property
    def frame_size(self) -> Tuple[int, int]:
        return self.raster.width // self.cols, self.raster.height // self.rows

    def with_grid(self, cols: int, rows: int) -> "SourceSheet":
        """Reinterpret the grid. The image itself is not resized."""
        return replace(self, cols=cols, rows=rows)

    def frame_rect(self, col: int, row: int) -> Tuple[int, int, int, int]:
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise InvalidDimension(
                f"Cell ({col}, {row}) is outside the {self.cols}x{self.rows} grid "
                f"of sheet '{self.id}'"
            )
        frame_width, frame_height = self.frame_size
        return col * frame_width, row * frame_height, frame_width, frame_height


@dataclass(frozen=True)
class GifFrameDescriptor:
    """A decoded GIF patch, its placement on the canvas and its disposal code."""

    patch: RasterBuffer
    left: int
    top: int
    disposal: int = DisposalMethod.UNSPECIFIED
    delay_ms: Optional[int] = None

    @property
    def width(self) -> int:
        return self.patch.width

    @property
    def height(self) -> int:
        return self.patch.height

    @classmethod
    def from_patch_data(
        cls,
        patch_pixels,
        width: int,
        height: int,
        left: int,
        top: int,
        disposal: int,
        delay_ms: Optional[int] = None,
    ) -> "GifFrameDescriptor":
        """Build a descriptor from the raw fields a GIF decoder reports."""
        if width <= 0 or height <= 0:
            raise DecodeFailure(f"Malformed GIF patch dimensions {width}x{height}")
        try:
            patch = RasterBuffer.from_array(patch_pixels, width, height)
        except InvalidDimension as e:
            raise DecodeFailure(f"Malformed GIF patch: {e}") from e
        return cls(patch=patch, left=left, top=top, disposal=disposal, delay_ms=delay_ms)


@dataclass(frozen=True)
class OutputSheet:
    """Packed frames plus the grid they were packed into."""

    raster: RasterBuffer
    cols: int
    rows: int
    frame_width: int
    frame_height: int
    frame_count: int
    palette: Optional[Palette] = None
