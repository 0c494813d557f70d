"""
GIF sources: composite frames and pack them into a source sheet.
"""

from pathlib import Path
from typing import Callable, List, Optional, Sequence
from data import SEPARATOR_LINE_LENGTH, normalize_string
from raster import (
    GifFrameDescriptor,
    OutputFormat,
    RasterBuffer,
    SourceSheet,
    SourceType,
    EmptyInput,
    SpriteRemixError,
)
from image_ops import composite_gif_frames, pack_frames
from external_files import read_gif_descriptors, save_raster


def create_sprite_sheet(frames: Sequence[RasterBuffer]):
    """Pack full-size frames into an auto-layout sheet.

    Returns:
        OutputSheet

    Raises:
        EmptyInput: If there are no frames
    """
    if not frames:
        raise EmptyInput("No frames to pack")
    frame_width, frame_height = frames[0].size
    return pack_frames(frames, frame_width, frame_height)


def gif_to_source_sheet(
    descriptors: Sequence[GifFrameDescriptor],
    canvas_width: int,
    canvas_height: int,
    sheet_id: str,
    name: str = "",
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> SourceSheet:
    """Composite a GIF and turn its frames into a SourceSheet.

    Raises:
        DecodeFailure: On malformed descriptors
        EmptyInput: If every frame was empty
    """
    frames = composite_gif_frames(
        descriptors, canvas_width, canvas_height, on_progress=on_progress
    )
    packed = create_sprite_sheet(frames)
    return SourceSheet(
        id=sheet_id,
        raster=packed.raster,
        cols=packed.cols,
        rows=packed.rows,
        name=name,
        source_type=SourceType.GIF,
    )


def gif_process_single(gif_path: Path, output_dir: Optional[Path] = None) -> Optional[SourceSheet]:
    """Load one GIF as a source sheet, optionally saving it as PNG.

    Failures are reported and yield None so other sources can continue.
    """
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Processing GIF: {gif_path}")
    print("=" * SEPARATOR_LINE_LENGTH)

    try:
        descriptors, width, height = read_gif_descriptors(gif_path)

        def report(done: int, total: int):
            print(f"    [INFO] {done}/{total} frame(s) composited")

        sheet = gif_to_source_sheet(
            descriptors,
            width,
            height,
            sheet_id=normalize_string(gif_path.stem),
            name=gif_path.name,
            on_progress=report,
        )
    except EmptyInput:
        print(f"[WARNING] {gif_path.name}: no visible frames, skipped\n")
        return None
    except (SpriteRemixError, OSError) as e:
        print(f"[ERROR] {gif_path.name}: {e}\n")
        return None

    print(
        f"[OK] {gif_path.name}: {sheet.frame_count} cell(s) in a "
        f"{sheet.cols}x{sheet.rows} grid, {sheet.frame_size[0]}x{sheet.frame_size[1]} each"
    )

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        save_raster(sheet.raster, output_dir / f"{gif_path.stem}_sheet.png", OutputFormat.PNG)

    print()
    return sheet


def gif_process_multiple(
    gif_paths: Sequence[Path], output_dir: Optional[Path] = None
) -> List[SourceSheet]:
    """Load several GIFs. A broken GIF never stops the others."""
    sheets = []
    for gif_path in gif_paths:
        sheet = gif_process_single(gif_path, output_dir)
        if sheet is not None:
            sheets.append(sheet)

    print(f"[OK] {len(sheets)}/{len(gif_paths)} GIF(s) loaded")
    return sheets
