"""
Processing options and their validation at the configuration boundary.
"""

from dataclasses import dataclass
from data import (
    MIN_TARGET_SIZE,
    MIN_TOLERANCE,
    MAX_TOLERANCE,
    MIN_EROSION,
    MAX_EROSION,
    MIN_PALETTE_COLORS,
    MAX_PALETTE_COLORS,
    DEFAULT_SETTINGS,
    DEFAULT_OUTPUT_COLS,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TOLERANCE,
    DEFAULT_EROSION,
)
from raster import BackgroundColorSource, OutputFormat, InvalidDimension


@dataclass(frozen=True)
class ProcessingOptions:
    """Everything the sprite pipeline needs besides the frames themselves."""

    target_width: int = DEFAULT_SETTINGS["targetWidth"]
    target_height: int = DEFAULT_SETTINGS["targetHeight"]
    output_cols: int = DEFAULT_OUTPUT_COLS
    output_format: str = DEFAULT_OUTPUT_FORMAT
    remove_background: bool = False
    background_tolerance: int = DEFAULT_TOLERANCE
    edge_erosion: int = DEFAULT_EROSION
    bg_color_source: str = BackgroundColorSource.AUTO
    fill_interior: bool = False
    palette_colors: int = 0  # 0 = keep all colors
    dither: bool = False

    def validate(self) -> "ProcessingOptions":
        """Reject out-of-range values before they reach the image core.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidDimension: For sizes, grids or limits out of range
            ValueError: For unknown format or background source names
        """
        if self.target_width < MIN_TARGET_SIZE or self.target_height < MIN_TARGET_SIZE:
            raise InvalidDimension(
                f"Target size must be at least {MIN_TARGET_SIZE}x{MIN_TARGET_SIZE}, "
                f"got {self.target_width}x{self.target_height}"
            )

        if self.output_cols < 0:
            raise InvalidDimension(
                f"Output columns must be 0 (auto) or positive, got {self.output_cols}"
            )

        if self.output_format not in OutputFormat.ALL:
            raise ValueError(f"Unsupported output format: {self.output_format}")

        if not MIN_TOLERANCE <= self.background_tolerance <= MAX_TOLERANCE:
            raise InvalidDimension(
                f"Tolerance must be {MIN_TOLERANCE}-{MAX_TOLERANCE}, "
                f"got {self.background_tolerance}"
            )

        if not MIN_EROSION <= self.edge_erosion <= MAX_EROSION:
            raise InvalidDimension(
                f"Edge erosion must be {MIN_EROSION}-{MAX_EROSION}, got {self.edge_erosion}"
            )

        if self.bg_color_source not in BackgroundColorSource.ALL:
            raise ValueError(f"Unknown background color source: {self.bg_color_source}")

        if self.palette_colors and not (
            MIN_PALETTE_COLORS <= self.palette_colors <= MAX_PALETTE_COLORS
        ):
            raise InvalidDimension(
                f"Palette size must be 0 or {MIN_PALETTE_COLORS}-{MAX_PALETTE_COLORS}, "
                f"got {self.palette_colors}"
            )

        return self
