"""
Sprite pipeline: selected frames -> background removal -> scaling -> packing
-> optional palette reduction -> encoded sheet.
"""

from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence
from data import DEBUG, SEPARATOR_LINE_LENGTH
from raster import (
    Frame,
    OutputSheet,
    RasterBuffer,
    SourceSheet,
    SpriteRemixError,
)
from image_ops import remove_background, scale_nearest, pack_frames, quantize
from external_files import (
    encode_raster,
    read_palette,
    read_source_sheet,
    write_output_sheet,
)
from .frames_generator import (
    build_sheet_lookup,
    generate_frames,
    resolve_frame,
    select_indices,
    selected_frames,
)
from .options import ProcessingOptions
from .utils import batched, validate_grid

PIPELINE_BATCH_SIZE = 10


def process_frame(raster: RasterBuffer, options: ProcessingOptions) -> RasterBuffer:
    """Run one frame through background removal and scaling."""
    if options.remove_background:
        raster = remove_background(
            raster,
            tolerance=options.background_tolerance,
            erosion=options.edge_erosion,
            source=options.bg_color_source,
            fill_interior=options.fill_interior,
        )
    return scale_nearest(raster, options.target_width, options.target_height)


def check_palette_fits(palette, options: ProcessingOptions) -> None:
    if palette and options.palette_colors and len(palette) > options.palette_colors:
        raise ValueError(
            f"Palette has {len(palette)} colors but at most {options.palette_colors} are allowed"
        )


def process_sprites(
    sheets: Sequence[SourceSheet],
    frames: Iterable[Frame],
    options: ProcessingOptions,
    palette=None,
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> Optional[OutputSheet]:
    """Build the output sheet from the selected frames.

    Args:
        sheets: Source sheets the frames refer to
        frames: Frames in output order; only selected ones are used
        options: Validated processing options
        palette: Fixed palette for quantization instead of median cut
        on_progress: Called as ``on_progress(done, total)`` after each batch

    Returns:
        OutputSheet, or None when nothing is selected

    Raises:
        InvalidDimension: If the options are out of range
        ValueError: If ``palette`` has more colors than ``options.palette_colors``
        SpriteRemixError: On failures inside the image core; no partial
            sheet is returned
    """
    options.validate()
    check_palette_fits(palette, options)

    chosen = selected_frames(frames)
    if not sheets or not chosen:
        print("[INFO] No frames selected, nothing to do")
        return None

    lookup = build_sheet_lookup(sheets)
    processed: List[RasterBuffer] = []

    for batch in batched(chosen, PIPELINE_BATCH_SIZE):
        for frame in batch:
            processed.append(process_frame(resolve_frame(frame, lookup), options))
        if on_progress is not None:
            on_progress(len(processed), len(chosen))

    sheet = pack_frames(
        processed, options.target_width, options.target_height, options.output_cols
    )

    if options.palette_colors or palette:
        max_colors = options.palette_colors or len(palette)
        quantized, used_palette = quantize(
            sheet.raster, max_colors, dither=options.dither, palette=palette
        )
        sheet = replace(sheet, raster=quantized, palette=used_palette)

    if DEBUG:
        print(
            f"[INFO] Packed {sheet.frame_count} frame(s) into a {sheet.cols}x{sheet.rows} "
            f"grid ({sheet.raster.width}x{sheet.raster.height})"
        )

    return sheet


def encode_output(sheet: OutputSheet, output_format: str) -> bytes:
    return encode_raster(sheet.raster, output_format)


def load_source_sheets(paths: Iterable[Path], cols: int, rows: int) -> List[SourceSheet]:
    """Load every readable image as a sheet. Unreadable ones are reported and skipped."""
    validate_grid(cols, rows)

    sheets = []
    for path in paths:
        try:
            sheets.append(read_source_sheet(path, cols, rows))
            print(f"[OK] Loaded source sheet: {path.name} ({cols}x{rows} frames)")
        except SpriteRemixError as e:
            print(f"[ERROR] {path.name}: {e}")
        except OSError as e:
            print(f"[ERROR] {path.name}: could not read file: {e}")
    return sheets


def generate_sheet_main(
    image_paths: Sequence[Path],
    cols: int,
    rows: int,
    output_dir: Path,
    options: ProcessingOptions,
    frame_indices: Optional[Iterable[int]] = None,
    palette_path: Optional[Path] = None,
) -> Optional[Path]:
    """Load sheets, select frames, run the pipeline and write the result.

    Args:
        image_paths: Source sheet images
        cols: Grid columns of every source
        rows: Grid rows of every source
        output_dir: Directory for the output sheet
        options: Processing options
        frame_indices: Global frame indices to use; all frames when None
        palette_path: Optional JASC-PAL palette to quantize against

    Returns:
        Path of the written sheet, or None if nothing was produced
    """
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[START] Remixing {len(image_paths)} source sheet(s)")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    options.validate()
    palette = read_palette(palette_path) if palette_path is not None else None
    check_palette_fits(palette, options)

    sheets = load_source_sheets(image_paths, cols, rows)
    frames = generate_frames(sheets)

    if frame_indices is None:
        frame_indices = [frame.index for frame in frames]
    frames = select_indices(frames, frame_indices)

    sheet = process_sprites(sheets, frames, options, palette=palette)
    if sheet is None:
        return None

    output_path = write_output_sheet(
        sheet, output_dir, options.output_format, palette=sheet.palette
    )
    print(
        f"\n[OK] Sprite sheet with {sheet.frame_count} frame(s) "
        f"({sheet.cols}x{sheet.rows}) generated at: {output_path}"
    )
    return output_path
