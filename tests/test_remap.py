import pytest

from pairvis.grid import Grid, Pos2
from pairvis.hilbert import HilbertCurve, InvalidLatticeSize
from pairvis.remap import NotSquareError, to_curve_order, to_natural_order


@pytest.mark.parametrize("size", [1, 2, 4, 16, 256])
def test_round_trip_restores_grid(size: int) -> None:
    original = Grid.from_values(size, size, list(range(size * size)))
    grid = Grid.from_values(size, size, original.values())

    to_natural_order(to_curve_order(grid))

    assert grid == original


def test_inverse_direction_round_trip() -> None:
    original = Grid.from_values(8, 8, [value * 3 for value in range(64)])
    grid = original.map(lambda value: value)

    to_curve_order(to_natural_order(grid))

    assert grid == original


def test_curve_order_reads_cells_along_curve() -> None:
    size = 8
    curve = HilbertCurve(size)
    grid = Grid(size, size, None)
    for y in range(size):
        for x in range(size):
            grid.set(Pos2(x, y), (x, y))

    to_curve_order(grid)

    assert grid.values() == [tuple(point) for point in curve]


def test_rejects_non_square_grid_without_touching_it() -> None:
    grid = Grid.from_values(4, 2, list(range(8)))

    with pytest.raises(NotSquareError):
        to_curve_order(grid)

    assert grid.values() == list(range(8))


def test_rejects_non_power_of_two_grid() -> None:
    grid = Grid.from_values(3, 3, list(range(9)))

    with pytest.raises(InvalidLatticeSize):
        to_natural_order(grid)

    assert grid.values() == list(range(9))
