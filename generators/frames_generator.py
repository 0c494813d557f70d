"""
Frame generation, selection and resolution against source sheets.
"""

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence
from data import DEBUG, FRAME_GENERATION_BATCH_SIZE
from raster import Frame, RasterBuffer, SourceSheet


def generate_frames(
    sheets: Sequence[SourceSheet],
    on_batch: Optional[Callable[[int], None]] = None,
) -> List[Frame]:
    """Regenerate every frame of every sheet, unselected.

    Frames are numbered globally across sheets in sheet order and locally
    within each sheet in row-major order. This is always a full rebuild;
    callers run it again whenever the sheet set or a grid changes.

    Args:
        sheets: Source sheets in display order
        on_batch: Called with the running frame count every
            FRAME_GENERATION_BATCH_SIZE frames

    Returns:
        List of Frame objects
    """
    frames: List[Frame] = []
    global_index = 0

    for sheet in sheets:
        for local_index in range(sheet.frame_count):
            frames.append(
                Frame(
                    index=global_index,
                    local_index=local_index,
                    source_id=sheet.id,
                    col=local_index % sheet.cols,
                    row=local_index // sheet.cols,
                )
            )
            global_index += 1

            if on_batch is not None and global_index % FRAME_GENERATION_BATCH_SIZE == 0:
                on_batch(global_index)

    if DEBUG:
        print(f"[INFO] Generated {len(frames)} frame(s) from {len(sheets)} sheet(s)")

    return frames


def toggle_frame(frames: Iterable[Frame], index: int) -> List[Frame]:
    return [frame.toggled() if frame.index == index else frame for frame in frames]


def select_all(frames: Iterable[Frame]) -> List[Frame]:
    return [frame.with_selected(True) for frame in frames]


def deselect_all(frames: Iterable[Frame]) -> List[Frame]:
    return [frame.with_selected(False) for frame in frames]


def select_indices(frames: Iterable[Frame], indices: Iterable[int]) -> List[Frame]:
    """Select exactly the frames whose global index is in ``indices``."""
    wanted = set(indices)
    return [frame.with_selected(frame.index in wanted) for frame in frames]


def selected_frames(frames: Iterable[Frame]) -> List[Frame]:
    return [frame for frame in frames if frame.selected]


def build_sheet_lookup(sheets: Iterable[SourceSheet]) -> Dict[str, SourceSheet]:
    lookup = {}
    for sheet in sheets:
        if sheet.id in lookup:
            raise ValueError(f"Duplicate source sheet id: {sheet.id}")
        lookup[sheet.id] = sheet
    return lookup


def resolve_frame(frame: Frame, lookup: Mapping[str, SourceSheet]) -> RasterBuffer:
    """Cut the pixels of ``frame`` out of its source sheet.

    Raises:
        KeyError: If the frame's sheet is not in ``lookup``
    """
    sheet = lookup.get(frame.source_id)
    if sheet is None:
        raise KeyError(f"Frame {frame.index} refers to unknown sheet '{frame.source_id}'")

    x, y, width, height = sheet.frame_rect(frame.col, frame.row)
    return sheet.raster.crop(x, y, width, height)
