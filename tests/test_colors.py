import pytest

from pairvis.colors import average_reference, intensity, rgba_bytes, to_rgba
from pairvis.grid import Grid, Pos2


def test_average_reference() -> None:
    grid = Grid(256, 256, 0)

    assert average_reference(65536 * 3, grid) == 3
    assert average_reference(100, grid) == 0
    assert average_reference(100, Grid(0, 0, 0)) == 0


def test_linear_intensity_scales_and_clamps() -> None:
    assert intensity(0, 4) == 0
    assert intensity(1, 4) == 64
    assert intensity(2, 4) == 128
    assert intensity(4, 4) == 255
    assert intensity(40, 4) == 255


def test_zero_reference_saturates_nonzero_counts() -> None:
    assert intensity(0, 0) == 0
    assert intensity(1, 0) == 255


def test_log_and_sqrt_brighten_rare_pairs() -> None:
    linear = intensity(1, 100)

    assert intensity(1, 100, "sqrt") > linear
    assert intensity(1, 100, "log") > linear
    assert intensity(100, 100, "log") == 255


def test_gamma_below_one_brightens() -> None:
    assert intensity(1, 4, gamma=0.5) > intensity(1, 4)


def test_unknown_scale() -> None:
    with pytest.raises(ValueError, match="unknown scale"):
        intensity(1, 1, "cubic")


def test_rgba_grid_and_bytes() -> None:
    counts = Grid(2, 1, 0)
    counts.set(Pos2(1, 0), 2)
    pixels = to_rgba(counts, 2)

    assert pixels.get(Pos2(0, 0)) == (0, 0, 0, 255)
    assert pixels.get(Pos2(1, 0)) == (255, 255, 255, 255)
    assert rgba_bytes(pixels) == bytes([0, 0, 0, 255, 255, 255, 255, 255])
