"""
JASC-PAL palette reading and writing for quantizer palettes.
"""

from pathlib import Path
from raster import Palette
from data import (
    MAX_PALETTE_COLORS,
    read_file_to_bytes,
    write_bytes_to_file,
)


def write_palette(palette: Palette, output_path: Path) -> None:
    """Export palette to JASC-PAL format.

    Args:
        palette: List of (r, g, b) tuples
        output_path: Path to output palette file
    """
    if len(palette) > MAX_PALETTE_COLORS:
        raise ValueError(
            f"Palette has {len(palette)} colors, JASC-PAL allows at most {MAX_PALETTE_COLORS}"
        )

    lines = ["JASC-PAL", "0100", str(len(palette))]
    for r, g, b in palette:
        lines.append(f"{r} {g} {b} 255")

    content = "\n".join(lines) + "\n"
    write_bytes_to_file(output_path, content.encode("ascii"))
    print(f"[OK] {len(palette)} color palette saved to: {output_path}")


def read_palette(palette_path: Path) -> Palette:
    """Import palette from JASC-PAL format.

    Args:
        palette_path: Path to palette file

    Returns:
        List of (r, g, b) tuples in file order
    """
    data = read_file_to_bytes(palette_path)
    text = data.decode("ascii").strip()
    lines = text.splitlines()

    if len(lines) < 3:
        raise ValueError("Invalid JASC-PAL file: too few lines")

    if lines[0].strip() != "JASC-PAL":
        raise ValueError("Invalid JASC-PAL file: missing header")

    if lines[1].strip() != "0100":
        raise ValueError(f"Unsupported JASC-PAL version: {lines[1].strip()}")

    num_colors = int(lines[2].strip())

    if num_colors > MAX_PALETTE_COLORS:
        raise ValueError(
            f"Invalid palette: {num_colors} colors exceeds maximum of {MAX_PALETTE_COLORS}"
        )

    if len(lines) < 3 + num_colors:
        raise ValueError(
            f"Invalid JASC-PAL file: expected {num_colors} colors, got {len(lines) - 3}"
        )

    colors = []
    for i in range(num_colors):
        line_num = 4 + i
        parts = lines[3 + i].strip().split()
        if len(parts) < 3 or len(parts) > 4:
            raise ValueError(
                f"Invalid color entry at line {line_num}: expected 3 or 4 values"
            )

        try:
            r, g, b = int(parts[0]), int(parts[1]), int(parts[2])
        except ValueError:
            raise ValueError(
                f"Invalid color entry at line {line_num}: values must be integers, got '{parts[0]} {parts[1]} {parts[2]}'"
            )

        if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
            raise ValueError(
                f"Invalid color entry at line {line_num}: values must be 0-255, got '{r} {g} {b}'"
            )

        # Alpha (parts[3]) is ignored, palettes only carry RGB
        colors.append((r, g, b))

    return colors
