"""
Image loading and encoding between Pillow and RasterBuffer.
"""

import io
import numpy as np
from pathlib import Path
from typing import Union
from PIL import Image, UnidentifiedImageError
from data import write_bytes_to_file
from raster import RasterBuffer, OutputFormat, DecodeFailure
from .constants import PIL_FORMATS


def image_to_raster(img: Image.Image) -> RasterBuffer:
    """Convert any Pillow image to an RGBA RasterBuffer."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return RasterBuffer(np.array(img, dtype=np.uint8))


def raster_to_image(raster: RasterBuffer) -> Image.Image:
    return Image.fromarray(raster.pixels)


def load_raster(source: Union[Path, bytes]) -> RasterBuffer:
    """Decode an image file (or its bytes) into a RasterBuffer.

    Raises:
        DecodeFailure: If Pillow cannot read the input
    """
    stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        with Image.open(stream) as img:
            img.load()
            return image_to_raster(img)
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeFailure(f"Could not decode image: {e}") from e


def encode_raster(raster: RasterBuffer, output_format: str) -> bytes:
    """Encode a raster as PNG (lossless) or WebP (lossless, maximum quality)."""
    if output_format not in OutputFormat.ALL:
        raise ValueError(f"Unsupported output format: {output_format}")

    img = raster_to_image(raster)
    buffer = io.BytesIO()

    if output_format == OutputFormat.WEBP:
        img.save(buffer, PIL_FORMATS[output_format], lossless=True, quality=100, method=6)
    else:
        img.save(buffer, PIL_FORMATS[output_format])

    return buffer.getvalue()


def save_raster(raster: RasterBuffer, output_path: Path, output_format: str) -> None:
    write_bytes_to_file(output_path, encode_raster(raster, output_format))
    print(f"[OK] {raster.width}x{raster.height} image saved to: {output_path}")
