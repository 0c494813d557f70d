from typing import Iterator, List, Sequence, TypeVar
from data import MIN_GRID_SIZE, MIN_FPS, MAX_FPS
from raster import InvalidDimension

T = TypeVar("T")


def batched(items: Sequence[T], batch_size: int) -> Iterator[List[T]]:
    """Yield consecutive slices of ``items``.

    Callers do one batch of work per iteration and hand control back to the
    host loop in between.
    """
    if batch_size < 1:
        raise ValueError(f"Batch size must be positive, got {batch_size}")
    for start in range(0, len(items), batch_size):
        yield list(items[start : start + batch_size])


def validate_grid(cols: int, rows: int) -> None:
    if cols < MIN_GRID_SIZE or rows < MIN_GRID_SIZE:
        raise InvalidDimension(
            f"Source grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {cols}x{rows}"
        )


def validate_fps(fps: int) -> None:
    if not MIN_FPS <= fps <= MAX_FPS:
        raise InvalidDimension(f"FPS must be {MIN_FPS}-{MAX_FPS}, got {fps}")
