#!/usr/bin/env python3
"""
Convert animated GIF(s) into source sprite sheets.

Usage:
    python gif_to_sheet.py <file.gif>                # Single GIF
    python gif_to_sheet.py <a.gif> <b.gif>           # Multiple GIFs
    python gif_to_sheet.py <folder>                  # All GIFs in folder
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from data import CURRENT_VERSION
from generators import gif_process_single, gif_process_multiple


def main():
    parser = argparse.ArgumentParser(description="Convert animated GIF(s) into sprite sheets")
    parser.add_argument("paths", nargs="+", help="GIF file(s) or folder(s) of GIFs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {CURRENT_VERSION}")
    parser.add_argument("--output-dir", help="Output directory (default: next to each GIF)")

    args = parser.parse_args()

    gif_paths = []
    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            continue

        if input_path.is_dir():
            gif_paths.extend(sorted(input_path.glob("*.gif")))
        elif input_path.suffix.lower() == ".gif":
            gif_paths.append(input_path)
        else:
            print(f"[ERROR] File is not a GIF: {input_path}")

    if not gif_paths:
        print("[ERROR] No GIF files found")
        sys.exit(1)

    if args.output_dir:
        gif_process_multiple(gif_paths, Path(args.output_dir))
        return

    for gif_path in gif_paths:
        gif_process_single(gif_path, gif_path.parent)


if __name__ == "__main__":
    main()
