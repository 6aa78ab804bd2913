"""Count overlapping byte pairs into a 256x256 grid."""

from __future__ import annotations

import logging
from collections import Counter
from itertools import islice
from typing import Sequence

from pairvis.grid import Grid, Pos2


logger = logging.getLogger(__name__)

PAIR_GRID_SIZE = 256


def build_frequency_grid(data: Sequence[int]) -> Grid[int]:
    """Return a grid where cell ``(x, y)`` counts byte ``x`` followed by byte ``y``.

    Pairs overlap: ``b"abc"`` contributes ``(a, b)`` and ``(b, c)``. Inputs
    shorter than two bytes have no pairs and give an all-zero grid.
    """

    grid = Grid(PAIR_GRID_SIZE, PAIR_GRID_SIZE, 0)
    pairs = Counter(zip(data, islice(data, 1, None)))
    for (first, second), count in pairs.items():
        grid.set(Pos2(first, second), count)

    logger.debug(
        "counted %d pairs over %d distinct cells", max(len(data) - 1, 0), len(pairs)
    )
    return grid


def peak_count(grid: Grid[int]) -> int:
    """Return the maximum frequency present in the grid."""

    return max(grid.values(), default=0)
