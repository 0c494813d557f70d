"""
Raster module: the RGBA buffer, frame sources and error kinds shared by all stages.
"""

from .buffer import RasterBuffer
from .sheet import (
    Frame,
    SourceSheet,
    GifFrameDescriptor,
    OutputSheet,
    Palette,
)
from .errors import (
    SpriteRemixError,
    DecodeFailure,
    SurfaceAllocationFailure,
    InvalidDimension,
    EmptyInput,
)
from .constants import (
    CHANNELS,
    MAX_SURFACE_DIMENSION,
    MAX_SURFACE_AREA,
    DisposalMethod,
    BackgroundColorSource,
    SourceType,
    OutputFormat,
)

__all__ = [
    # Buffer
    "RasterBuffer",
    # Sheets and frames
    "Frame",
    "SourceSheet",
    "GifFrameDescriptor",
    "OutputSheet",
    "Palette",
    # Errors
    "SpriteRemixError",
    "DecodeFailure",
    "SurfaceAllocationFailure",
    "InvalidDimension",
    "EmptyInput",
    # Constants
    "CHANNELS",
    "MAX_SURFACE_DIMENSION",
    "MAX_SURFACE_AREA",
    "DisposalMethod",
    "BackgroundColorSource",
    "SourceType",
    "OutputFormat",
]
