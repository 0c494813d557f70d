"""
Sprite Remixer Generators Module

This module turns source sheets, GIFs and video clips into packed pixel-art sheets
"""

from .sheet_generator import (
    process_frame,
    check_palette_fits,
    process_sprites,
    encode_output,
    load_source_sheets,
    generate_sheet_main,
)

from .frames_generator import (
    generate_frames,
    toggle_frame,
    select_all,
    deselect_all,
    select_indices,
    selected_frames,
    build_sheet_lookup,
    resolve_frame,
)

from .gif_generator import (
    create_sprite_sheet,
    gif_to_source_sheet,
    gif_process_single,
    gif_process_multiple,
)

from .video_generator import (
    VideoDecoder,
    sampling_timestamps,
    extract_video_frames,
    video_to_source_sheet,
)

from .playback import (
    frame_interval_ms,
    playback_frame_rect,
    playback_frame,
    frame_at_time,
)

from .options import ProcessingOptions

from .utils import batched, validate_grid, validate_fps

__all__ = [
    # Sheet Generator functions
    "process_frame",
    "check_palette_fits",
    "process_sprites",
    "encode_output",
    "load_source_sheets",
    "generate_sheet_main",
    # Frames Generator functions
    "generate_frames",
    "toggle_frame",
    "select_all",
    "deselect_all",
    "select_indices",
    "selected_frames",
    "build_sheet_lookup",
    "resolve_frame",
    # GIF Generator functions
    "create_sprite_sheet",
    "gif_to_source_sheet",
    "gif_process_single",
    "gif_process_multiple",
    # Video Generator functions
    "VideoDecoder",
    "sampling_timestamps",
    "extract_video_frames",
    "video_to_source_sheet",
    # Playback functions
    "frame_interval_ms",
    "playback_frame_rect",
    "playback_frame",
    "frame_at_time",
    # Options
    "ProcessingOptions",
    # Utils functions
    "batched",
    "validate_grid",
    "validate_fps",
]
