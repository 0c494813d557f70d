#!/usr/bin/env python3
"""
Remix frames from one or more sprite sheets into a pixel-art sprite sheet.

Usage:
    python remix_sheet.py <sheet.png>                          # All frames, saved settings
    python remix_sheet.py <a.png> <b.png> --frames 0 2 4 6     # Selected global frames
    python remix_sheet.py <sheet.png> --cols 4 --rows 2 --width 8 --height 8
    python remix_sheet.py <sheet.png> --remove-bg --tolerance 20 --erosion 1
    python remix_sheet.py <sheet.png> --colors 16 --dither --format png
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from data import CURRENT_VERSION, SETTINGS_FILE_NAME, DEFAULT_OUTPUT_FORMAT, DEFAULT_TOLERANCE
from raster import BackgroundColorSource, OutputFormat, SpriteRemixError
from external_files import AppSettings, read_settings_file, write_settings_file
from generators import ProcessingOptions, generate_sheet_main


def main():
    parser = argparse.ArgumentParser(
        description="Remix sprite sheet frames into a pixel-art sprite sheet"
    )
    parser.add_argument("paths", nargs="+", help="Source sprite sheet image(s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {CURRENT_VERSION}")
    parser.add_argument(
        "--settings",
        default=SETTINGS_FILE_NAME,
        help=f"Settings JSON file (default: {SETTINGS_FILE_NAME})",
    )
    parser.add_argument("--save-settings", action="store_true", help="Write the effective settings back")
    parser.add_argument("--cols", type=int, help="Source grid columns")
    parser.add_argument("--rows", type=int, help="Source grid rows")
    parser.add_argument("--width", type=int, help="Target frame width")
    parser.add_argument("--height", type=int, help="Target frame height")
    parser.add_argument("--output-cols", type=int, default=0, help="Output columns (default: 0 = auto)")
    parser.add_argument("--frames", type=int, nargs="*", help="Global frame indices (default: all)")
    parser.add_argument(
        "--format",
        choices=list(OutputFormat.ALL),
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    parser.add_argument("--remove-bg", action="store_true", help="Remove the background")
    parser.add_argument("--tolerance", type=int, default=DEFAULT_TOLERANCE, help="Background tolerance 0-255")
    parser.add_argument("--erosion", type=int, default=0, help="Edge erosion passes 0-10")
    parser.add_argument(
        "--bg-source",
        choices=list(BackgroundColorSource.ALL),
        default=BackgroundColorSource.AUTO,
        help="Where to read the background color",
    )
    parser.add_argument("--fill-interior", action="store_true", help="Also clear enclosed background")
    parser.add_argument("--colors", type=int, default=0, help="Palette size (default: 0 = no quantization)")
    parser.add_argument("--dither", action="store_true", help="Floyd-Steinberg dithering")
    parser.add_argument("--palette", help="JASC-PAL palette to quantize against")
    parser.add_argument("--output-dir", default=".", help="Output directory")

    args = parser.parse_args()

    settings_path = Path(args.settings)
    settings = read_settings_file(settings_path)

    cols = args.cols or settings.srcCols
    rows = args.rows or settings.srcRows
    target_width = args.width or settings.targetWidth
    target_height = args.height or settings.targetHeight

    image_paths = []
    for path_str in args.paths:
        input_path = Path(path_str).resolve()
        if not input_path.is_file():
            print(f"[ERROR] File does not exist: {input_path}")
            continue
        image_paths.append(input_path)

    options = ProcessingOptions(
        target_width=target_width,
        target_height=target_height,
        output_cols=args.output_cols,
        output_format=args.format,
        remove_background=args.remove_bg,
        background_tolerance=args.tolerance,
        edge_erosion=args.erosion,
        bg_color_source=args.bg_source,
        fill_interior=args.fill_interior,
        palette_colors=args.colors,
        dither=args.dither,
    )

    try:
        options.validate()
        output_path = generate_sheet_main(
            image_paths,
            cols,
            rows,
            Path(args.output_dir),
            options,
            frame_indices=args.frames,
            palette_path=Path(args.palette) if args.palette else None,
        )
    except (SpriteRemixError, ValueError, KeyError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    if args.save_settings:
        write_settings_file(
            settings_path,
            AppSettings(
                srcCols=cols,
                srcRows=rows,
                targetWidth=target_width,
                targetHeight=target_height,
                fps=settings.fps,
            ),
        )

    if output_path is None:
        sys.exit(1)


if __name__ == "__main__":
    main()
