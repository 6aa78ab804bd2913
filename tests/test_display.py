from pathlib import Path

import pytest
from PIL import Image

from pairvis import display
from pairvis.grid import Grid, Pos2


def checker() -> Grid:
    pixels = Grid(2, 2, (0, 0, 0, 255))
    pixels.set(Pos2(1, 0), (255, 255, 255, 255))
    return pixels


def test_to_image_zooms_without_smoothing() -> None:
    image = display.to_image(checker(), zoom=3)

    assert image.mode == "RGBA"
    assert image.size == (6, 6)
    assert image.getpixel((3, 0)) == (255, 255, 255, 255)
    assert image.getpixel((5, 2)) == (255, 255, 255, 255)
    assert image.getpixel((2, 2)) == (0, 0, 0, 255)
    assert image.getpixel((3, 3)) == (0, 0, 0, 255)


def test_to_image_rejects_bad_zoom() -> None:
    with pytest.raises(ValueError):
        display.to_image(checker(), zoom=0)


@pytest.mark.parametrize("name", ["out.png", "out.ppm"])
def test_save_image(tmp_path: Path, name: str) -> None:
    target = tmp_path / name
    display.save_image(display.to_image(checker()), target)

    with Image.open(target) as saved:
        assert saved.mode == "RGB"
        assert saved.size == (2, 2)
        assert saved.convert("RGB").getpixel((1, 0)) == (255, 255, 255)


def test_show_image_blocks_on_window(monkeypatch: pytest.MonkeyPatch) -> None:
    shown = []
    monkeypatch.setattr(display.plt, "show", lambda: shown.append(True))

    display.show_image(display.to_image(checker(), zoom=2))

    assert shown == [True]
