"""
Error kinds raised by the raster core and the frame pipelines.
"""


class SpriteRemixError(Exception):
    """Base class for every error raised by this project."""


class DecodeFailure(SpriteRemixError, ValueError):
    """Malformed GIF, video or image input. Aborts that source only."""


class SurfaceAllocationFailure(SpriteRemixError, MemoryError):
    """A working buffer of the requested size could not be created."""


class InvalidDimension(SpriteRemixError, ValueError):
    """A size, grid or limit is outside what the configuration allows."""


class EmptyInput(SpriteRemixError):
    """Nothing to process. Callers treat this as a no-op, not a failure."""
