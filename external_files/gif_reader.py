"""
GIF decoding adapter: turns a GIF file into GifFrameDescriptors using Pillow.
"""

import io
from pathlib import Path
from typing import List, Tuple, Union
from PIL import Image, ImageSequence, UnidentifiedImageError
from data import DEBUG
from raster import GifFrameDescriptor, DecodeFailure
from .images import image_to_raster


def read_gif_descriptors(
    source: Union[Path, bytes],
) -> Tuple[List[GifFrameDescriptor], int, int]:
    """Decode every frame of a GIF into a patch, its offset and disposal code.

    Pillow does the LZW and palette work. The patch of each frame is the
    frame's update rectangle cropped from Pillow's RGBA rendering.

    Args:
        source: Path to a .gif file or the raw GIF bytes

    Returns:
        Tuple of (descriptors, canvas_width, canvas_height)

    Raises:
        DecodeFailure: If the input is not a readable GIF
    """
    stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source

    try:
        with Image.open(stream) as img:
            if img.format != "GIF":
                raise DecodeFailure(f"Expected a GIF, got {img.format}")

            canvas_width, canvas_height = img.size
            descriptors = []

            for frame_idx, frame in enumerate(ImageSequence.Iterator(img)):
                left, top, right, bottom = getattr(
                    frame, "dispose_extent", (0, 0, canvas_width, canvas_height)
                )
                if right <= left or bottom <= top:
                    raise DecodeFailure(
                        f"Frame {frame_idx}: empty update rectangle {left, top, right, bottom}"
                    )

                rgba = image_to_raster(frame)
                patch = rgba.crop(
                    left, top, min(right, canvas_width) - left, min(bottom, canvas_height) - top
                )
                descriptors.append(
                    GifFrameDescriptor(
                        patch=patch,
                        left=left,
                        top=top,
                        disposal=getattr(frame, "disposal_method", 0),
                        delay_ms=frame.info.get("duration"),
                    )
                )
    except (UnidentifiedImageError, OSError, EOFError, SyntaxError) as e:
        raise DecodeFailure(f"Could not decode GIF: {e}") from e

    if DEBUG:
        print(f"[INFO] Decoded {len(descriptors)} GIF frame(s), {canvas_width}x{canvas_height}")

    return descriptors, canvas_width, canvas_height
