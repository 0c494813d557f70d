"""
Image processing core: GIF compositing, background removal, nearest-neighbor
scaling, sheet packing and palette quantization.
"""

from .gif_compositor import composite_gif_frames, validate_descriptor
from .background_remover import (
    detect_background_color,
    remove_background,
    erode_edges,
    flood_fill_from_border,
    background_like_mask,
    tolerance_to_delta_e,
)
from .color_space import rgb_to_lab, delta_e76
from .nearest_scaler import (
    scale_nearest,
    compute_letterbox,
)
from .sheet_packer import (
    compute_layout,
    grid_position,
    frame_rect,
    pack_frames,
    extract_frame,
)
from .palette_quantizer import (
    median_cut_palette,
    nearest_palette_indices,
    apply_floyd_steinberg,
    quantize,
)

__all__ = [
    # GIF compositor
    "composite_gif_frames",
    "validate_descriptor",
    # Background remover
    "detect_background_color",
    "remove_background",
    "erode_edges",
    "flood_fill_from_border",
    "background_like_mask",
    "tolerance_to_delta_e",
    "rgb_to_lab",
    "delta_e76",
    # Nearest scaler
    "scale_nearest",
    "compute_letterbox",
    # Sheet packer
    "compute_layout",
    "grid_position",
    "frame_rect",
    "pack_frames",
    "extract_frame",
    # Palette quantizer
    "median_cut_palette",
    "nearest_palette_indices",
    "apply_floyd_steinberg",
    "quantize",
]
