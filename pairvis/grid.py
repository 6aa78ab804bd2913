"""Fixed-size 2-D grid with row-major storage.

Cells are addressed either by a :class:`Pos2` or by their linear row-major
index (``y * width + x``). The backing list never changes length after
construction; :meth:`Grid.permute` swaps in a freshly built list instead of
shuffling cells in place.
"""

from __future__ import annotations

import copy
from typing import Callable, Generic, Iterator, List, NamedTuple, Sequence, TypeVar


T = TypeVar("T")
U = TypeVar("U")


class Pos2(NamedTuple):
    x: int
    y: int


class Grid(Generic[T]):
    """A ``width`` x ``height`` table of cells stored row by row."""

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, fill: T) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        # Each cell gets its own copy so mutable fills are not shared.
        self._data: List[T] = [copy.copy(fill) for _ in range(width * height)]

    @classmethod
    def from_values(cls, width: int, height: int, values: Sequence[T]) -> Grid[T]:
        """Build a grid from an existing row-major sequence of cells."""

        if len(values) != width * height:
            raise ValueError(
                f"expected {width * height} values for a {width}x{height} grid, "
                f"got {len(values)}"
            )
        grid: Grid[T] = cls.__new__(cls)
        grid._width = width
        grid._height = height
        grid._data = list(values)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    def index_of(self, pos: Pos2) -> int:
        """Return the row-major index of ``pos``, checking it lies on the grid."""

        x, y = pos
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"position ({x}, {y}) is outside a {self._width}x{self._height} grid"
            )
        return y * self._width + x

    def pos_of(self, index: int) -> Pos2:
        """Return the position stored at row-major ``index``."""

        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} is outside a grid of {len(self._data)} cells")
        return Pos2(index % self._width, index // self._width)

    def get(self, pos: Pos2) -> T:
        return self._data[self.index_of(pos)]

    def set(self, pos: Pos2, value: T) -> None:
        self._data[self.index_of(pos)] = value

    def values(self) -> List[T]:
        """Return a row-major copy of every cell."""

        return list(self._data)

    def rows(self) -> Iterator[List[T]]:
        for y in range(self._height):
            start = y * self._width
            yield self._data[start:start + self._width]

    def map(self, func: Callable[[T], U]) -> Grid[U]:
        """Return a new grid of the same shape holding ``func(cell)`` for each cell."""

        return Grid.from_values(self._width, self._height, [func(value) for value in self._data])

    def permute(self, destination: Callable[[int], int]) -> None:
        """Move the cell at linear index ``i`` to ``destination(i)``.

        ``destination`` must be a bijection on ``range(len(self))``; the grid
        cannot detect a mapping that sends two cells to the same slot. The new
        buffer is filled from a snapshot of the old one and then replaces it.
        """

        source = self._data
        output = list(source)
        for index, value in enumerate(source):
            output[destination(index)] = value
        self._data = output
