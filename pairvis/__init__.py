"""Byte-pair fingerprints of binary files.

Every overlapping pair of bytes in a file is treated as a coordinate on a
256x256 plane. Counting the pairs gives a frequency grid that can be rendered
as a grayscale image and, optionally, reordered along a Hilbert curve.
"""

from pairvis.frequency import PAIR_GRID_SIZE, build_frequency_grid, peak_count
from pairvis.grid import Grid, Pos2
from pairvis.hilbert import HilbertCurve, InvalidLatticeSize
from pairvis.remap import NotSquareError, to_curve_order, to_natural_order

__all__ = [
    "PAIR_GRID_SIZE",
    "Grid",
    "HilbertCurve",
    "InvalidLatticeSize",
    "NotSquareError",
    "Pos2",
    "build_frequency_grid",
    "peak_count",
    "to_curve_order",
    "to_natural_order",
]
