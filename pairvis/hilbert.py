"""Discrete Hilbert curve over a ``2**order`` x ``2**order`` lattice.

The curve is a bijection between a position along the curve (``0`` up to
``size * size - 1``) and a lattice point. Neighbouring curve positions are
always neighbouring points, which is what makes the ordering useful for laying
out 2-D data in one dimension and back.
"""

from __future__ import annotations

from typing import Iterator

from pairvis.grid import Pos2


class InvalidLatticeSize(ValueError):
    """Raised when a lattice side length is not a power of two."""


def is_power_of_two(size: int) -> bool:
    return size > 0 and size & (size - 1) == 0


class HilbertCurve:
    """Encode and decode Hilbert curve positions for a square lattice."""

    __slots__ = ("_order",)

    def __init__(self, size: int) -> None:
        if not is_power_of_two(size):
            raise InvalidLatticeSize(f"invalid lattice size {size}: must be a power of two")
        self._order = size.bit_length() - 1

    @property
    def order(self) -> int:
        return self._order

    @property
    def size(self) -> int:
        return 1 << self._order

    def __len__(self) -> int:
        return self.size * self.size

    def __iter__(self) -> Iterator[Pos2]:
        for value in range(len(self)):
            yield self.value_to_point(value)

    def __repr__(self) -> str:
        return f"HilbertCurve(size={self.size})"

    @staticmethod
    def _rotate(pos: Pos2, rx: int, ry: int, side: int) -> Pos2:
        # Only the lower quadrants are transformed: swap x and y, and when
        # the point is in the lower-right quadrant reflect it first.
        if ry != 0:
            return pos
        x, y = pos
        if rx == 1:
            x = side - 1 - x
            y = side - 1 - y
        return Pos2(y, x)

    def point_to_value(self, pos: Pos2) -> int:
        """Return the curve position of lattice point ``pos``."""

        n = self.size
        if not (0 <= pos[0] < n and 0 <= pos[1] < n):
            raise ValueError(f"point {tuple(pos)} is outside a {n}x{n} lattice")

        pos = Pos2(*pos)
        value = 0
        for bit in reversed(range(self._order)):
            s = 1 << bit
            rx = 1 if pos.x & s else 0
            ry = 1 if pos.y & s else 0
            value += s * s * ((3 * rx) ^ ry)
            pos = self._rotate(pos, rx, ry, n)
        return value

    def value_to_point(self, value: int) -> Pos2:
        """Return the lattice point at curve position ``value``."""

        if not 0 <= value < len(self):
            raise ValueError(f"curve value {value} is outside [0, {len(self)})")

        pos = Pos2(0, 0)
        for bit in range(self._order):
            s = 1 << bit
            rx = (value // 2) & 1
            ry = (value ^ rx) & 1
            pos = self._rotate(pos, rx, ry, s)
            pos = Pos2(pos.x + s * rx, pos.y + s * ry)
            value //= 4
        return pos
