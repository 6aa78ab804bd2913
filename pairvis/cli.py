"""Command-line entry point for the byte-pair visualizer.

The input file is scanned with a sliding two-byte window; each pair is a
coordinate on a 256x256 plane and more frequent pairs appear brighter. The
result is shown in a window or written to an image file.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from pairvis.colors import SCALES, average_reference, to_rgba
from pairvis.display import save_image, show_image, to_image
from pairvis.frequency import build_frequency_grid, peak_count
from pairvis.remap import to_curve_order


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pairvis",
        description=(
            "Scan a binary file with a sliding byte window and render a 256x256 "
            "image where brighter pixels represent more frequent pairs."
        ),
    )
    parser.add_argument("input", type=Path, help="Path to the input binary file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the image here (format follows the extension) instead of opening a window",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a window even when --output is given",
    )
    parser.add_argument(
        "--curve",
        action="store_true",
        help="Lay the cells out in Hilbert curve order before rendering",
    )
    parser.add_argument(
        "--scale",
        choices=SCALES,
        default="linear",
        help=(
            "Tone-mapping curve for brightness. 'linear' (default) matches the raw "
            "counts, 'sqrt' is softer and 'log' highlights rare pairs."
        ),
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma correction applied after the tone-mapping curve (default: 1, disabled)",
    )
    parser.add_argument(
        "--reference",
        choices=("average", "peak"),
        default="average",
        help=(
            "Count that maps to full white: the average count per cell (default) "
            "or the most frequent pair"
        ),
    )
    parser.add_argument(
        "--zoom",
        type=int,
        default=2,
        help="Integer magnification of the 256x256 image (default: 2)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.zoom < 1:
        parser.error("--zoom must be at least 1")
    return args


def read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as err:
        raise SystemExit(f"provide a valid file, cannot open {path}: {err}") from err


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    data = read_input(args.input)
    logger.info("read %d bytes from %s", len(data), args.input)

    counts = build_frequency_grid(data)
    if args.reference == "peak":
        reference = peak_count(counts)
    else:
        reference = average_reference(len(data), counts)
    logger.debug("reference count for full brightness: %d", reference)

    if args.curve:
        to_curve_order(counts)

    image = to_image(to_rgba(counts, reference, args.scale, args.gamma), args.zoom)
    if args.output is not None:
        try:
            save_image(image, args.output)
        except (OSError, ValueError) as err:
            raise SystemExit(f"cannot write {args.output}: {err}") from err
    if args.output is None or args.show:
        show_image(image)


if __name__ == "__main__":
    main()
