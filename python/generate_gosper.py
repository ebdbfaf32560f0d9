"""generate_gosper.py — draw a Gosper (flowsnake) curve as a PNG or SVG.

Usage:
  python generate_gosper.py [-n ORDER] [-o OUT.png|OUT.svg] [--size 1024] [--stroke 1.6]
Examples:
  python generate_gosper.py
  python generate_gosper.py -n 4 -o gosper.svg --size 1600 --stroke 2.0
"""

import argparse
import logging
import time
from pathlib import Path

from gosper import GosperError, generate, path_array
from gosper.bounds import array_bounds
from gosper.log import configure_logging
from gosper.raster import canvas_size, rasterize, save_png
from gosper.svg import curve_to_svg

logger = logging.getLogger("generate_gosper")

LARGE_ORDER = 8


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Generate a Gosper curve as a PNG (one pixel per segment) or SVG."
    )
    ap.add_argument(
        "-n",
        "--order",
        type=int,
        default=6,
        help="number of rewriting generations (default 6)",
    )
    ap.add_argument(
        "-o",
        "--output",
        default="gosper.png",
        help="output path; .svg writes SVG, anything else PNG",
    )
    ap.add_argument(
        "--size", type=int, default=1024, help="SVG canvas size in px (default 1024)"
    )
    ap.add_argument(
        "--stroke", type=float, default=1.6, help="SVG stroke width in px (default 1.6)"
    )
    return ap


def main(argv=None) -> int:
    """Generate the curve and write it to ``--output``."""
    args = build_parser().parse_args(argv)
    configure_logging()

    if args.order > LARGE_ORDER:
        logger.warning(
            "Order %d needs memory for about %d symbols", args.order, 2 * 7**args.order
        )

    start = time.perf_counter()
    try:
        curve = generate(args.order)
    except GosperError as e:
        raise SystemExit(str(e)) from e
    logger.info("Generated order %d in %.3fs", args.order, time.perf_counter() - start)

    segments = curve.segment_count()
    logger.info("Segments: %d", segments)

    start = time.perf_counter()
    path = path_array(curve)
    output = Path(args.output)
    if output.suffix.lower() == ".svg":
        svg = curve_to_svg(curve, size=args.size, stroke=args.stroke, path=path)
        output.write_text(svg, encoding="utf-8")
    else:
        width, height = canvas_size(array_bounds(path))
        logger.info("Canvas: %d x %d", width, height)
        save_png(rasterize(curve, path=path), output)
    logger.info("Rendered in %.3fs", time.perf_counter() - start)

    logger.info("Wrote %s (order=%d, points=%d)", output, args.order, segments)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
