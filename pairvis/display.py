"""Turn pixel grids into Pillow images, files and windows."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
from PIL import Image

from pairvis.colors import RGBA, rgba_bytes
from pairvis.grid import Grid


logger = logging.getLogger(__name__)

WINDOW_TITLE = "binary visualizer!"


def to_image(pixels: Grid[RGBA], zoom: int = 1) -> Image.Image:
    """Build an RGBA image from ``pixels``, enlarged ``zoom`` times without smoothing."""

    if zoom < 1:
        raise ValueError(f"zoom must be at least 1, got {zoom}")
    image = Image.frombytes("RGBA", (pixels.width, pixels.height), rgba_bytes(pixels))
    if zoom > 1:
        image = image.resize(
            (pixels.width * zoom, pixels.height * zoom), resample=Image.Resampling.NEAREST
        )
    return image


def save_image(image: Image.Image, output: Path) -> None:
    """Write ``image`` in the format implied by the file extension."""

    # Pixels are always opaque, so dropping alpha loses nothing.
    image = image.convert("RGB")
    image.save(output)
    logger.info("saved %dx%d image to %s", image.width, image.height, output)


def show_image(image: Image.Image, title: str = WINDOW_TITLE) -> None:
    """Display ``image`` in a window and block until the user closes it."""

    fig, ax = plt.subplots(figsize=(image.width / 100, image.height / 100), dpi=100)
    fig.canvas.manager.set_window_title(title)
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
    ax.imshow(image, interpolation="nearest")
    ax.set_axis_off()
    plt.show()
    plt.close(fig)
