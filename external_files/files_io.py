"""
Wrapper functions for reading source images and writing output sheets.
"""

from pathlib import Path
from typing import Optional
from data import normalize_string
from raster import OutputSheet, SourceSheet, SourceType, Palette
from .constants import ExternalFiles, FORMAT_EXTENSIONS
from .images import load_raster, save_raster
from .palette import write_palette


def read_source_sheet(image_path: Path, cols: int, rows: int) -> SourceSheet:
    """Load an image file as a sprite sheet cut into ``cols`` x ``rows`` frames.

    Args:
        image_path: Path to the sheet image
        cols: Grid columns
        rows: Grid rows

    Returns:
        SourceSheet whose id is derived from the file name
    """
    raster = load_raster(image_path)
    return SourceSheet(
        id=normalize_string(image_path.stem),
        raster=raster,
        cols=cols,
        rows=rows,
        name=image_path.name,
        source_type=SourceType.IMAGE,
    )


def write_output_sheet(
    sheet: OutputSheet,
    output_dir: Path,
    output_format: str,
    stem: str = ExternalFiles.DEFAULT_OUTPUT_STEM,
    palette: Optional[Palette] = None,
) -> Path:
    """Write the packed sheet and, when given, its palette.

    Args:
        sheet: Packed output
        output_dir: Output directory path
        output_format: ``png`` or ``webp``
        stem: File name without extension
        palette: Quantizer palette to export next to the image

    Returns:
        Path of the written image
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / f"{stem}{FORMAT_EXTENSIONS[output_format]}"
    save_raster(sheet.raster, output_path, output_format)

    if palette:
        write_palette(palette, output_dir / ExternalFiles.PALETTE_FILE)

    return output_path
