"""Map pair counts to grayscale pixels."""

from __future__ import annotations

import math
from typing import Tuple

from pairvis.grid import Grid


RGBA = Tuple[int, int, int, int]

SCALES = ("linear", "sqrt", "log")


def average_reference(total_bytes: int, grid: Grid[int]) -> int:
    """Return the count every cell would hold if pairs were spread evenly."""

    cells = grid.width * grid.height
    return total_bytes // cells if cells else 0


def intensity(count: int, reference: int, scale: str = "linear", gamma: float = 1.0) -> int:
    """Convert a count to a grayscale value (0-255) relative to ``reference``.

    A count equal to the reference maps to full white; anything brighter is
    clamped.
    """

    if scale not in SCALES:
        raise ValueError(f"unknown scale {scale!r}, expected one of {', '.join(SCALES)}")
    if count <= 0:
        return 0
    if reference <= 0:
        return 255

    if scale == "log":
        ratio = math.log1p(count) / math.log1p(reference)
    else:
        ratio = count / reference
        if scale == "sqrt":
            ratio = math.sqrt(ratio)

    if gamma > 0 and gamma != 1:
        ratio = ratio ** gamma

    return int(max(0.0, min(255.0, ratio * 256)))


def to_rgba(
    grid: Grid[int], reference: int, scale: str = "linear", gamma: float = 1.0
) -> Grid[RGBA]:
    """Return an opaque gray pixel for every count in ``grid``."""

    def pixel(count: int) -> RGBA:
        value = intensity(count, reference, scale, gamma)
        return (value, value, value, 255)

    return grid.map(pixel)


def rgba_bytes(grid: Grid[RGBA]) -> bytes:
    """Flatten a pixel grid to four bytes per pixel in row-major order."""

    return bytes(channel for pixel in grid.values() for channel in pixel)
