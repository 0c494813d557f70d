"""
External files module for loading source images and GIFs, encoding output
sheets, and reading and writing settings and palette files.
"""

from .files_io import (
    read_source_sheet,
    write_output_sheet,
)
from .images import (
    image_to_raster,
    raster_to_image,
    load_raster,
    encode_raster,
    save_raster,
)
from .gif_reader import read_gif_descriptors
from .palette import read_palette, write_palette
from .settings import (
    AppSettings,
    get_default_settings,
    settings_from_dict,
    settings_to_dict,
    settings_from_json,
    settings_to_json,
    read_settings_file,
    write_settings_file,
)
from .constants import ExternalFiles

__all__ = [
    "read_source_sheet",
    "write_output_sheet",
    "image_to_raster",
    "raster_to_image",
    "load_raster",
    "encode_raster",
    "save_raster",
    "read_gif_descriptors",
    "read_palette",
    "write_palette",
    "AppSettings",
    "get_default_settings",
    "settings_from_dict",
    "settings_to_dict",
    "settings_from_json",
    "settings_to_json",
    "read_settings_file",
    "write_settings_file",
    "ExternalFiles",
]
