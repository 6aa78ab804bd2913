"""Reorder square grids between row-major and Hilbert curve order."""

from __future__ import annotations

from typing import TypeVar

from pairvis.grid import Grid
from pairvis.hilbert import HilbertCurve


T = TypeVar("T")


class NotSquareError(ValueError):
    """Raised when a curve remap is asked for on a non-square grid."""


def _curve_for(grid: Grid[T]) -> HilbertCurve:
    if grid.width != grid.height:
        raise NotSquareError(
            f"curve remapping needs a square grid, got {grid.width}x{grid.height}"
        )
    return HilbertCurve(grid.width)


def to_curve_order(grid: Grid[T]) -> Grid[T]:
    """Move every cell to the linear index of its position along the curve.

    Afterwards reading the grid in row-major order walks the original cells in
    Hilbert curve order. The grid is modified in place and returned.
    """

    curve = _curve_for(grid)
    grid.permute(lambda index: curve.point_to_value(grid.pos_of(index)))
    return grid


def to_natural_order(grid: Grid[T]) -> Grid[T]:
    """Undo :func:`to_curve_order`, treating each linear index as a curve value."""

    curve = _curve_for(grid)
    grid.permute(lambda index: grid.index_of(curve.value_to_point(index)))
    return grid
