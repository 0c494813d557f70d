"""
Raster and frame source constants.
"""

CHANNELS = 4

# Largest surface a working buffer may have
MAX_SURFACE_DIMENSION = 32767
MAX_SURFACE_AREA = 268_435_456


class DisposalMethod:
    UNSPECIFIED = 0
    DO_NOT_DISPOSE = 1
    RESTORE_TO_BACKGROUND = 2
    RESTORE_TO_PREVIOUS = 3

    VALID = (UNSPECIFIED, DO_NOT_DISPOSE, RESTORE_TO_BACKGROUND, RESTORE_TO_PREVIOUS)


class BackgroundColorSource:
    AUTO = "auto"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    CORNERS = (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)
    ALL = (AUTO,) + CORNERS


class SourceType:
    IMAGE = "image"
    VIDEO = "video"
    GIF = "gif"

    ALL = (IMAGE, VIDEO, GIF)


class OutputFormat:
    PNG = "png"
    WEBP = "webp"

    ALL = (PNG, WEBP)
