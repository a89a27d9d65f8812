#!/usr/bin/env python3
"""Plot a projectile's trajectory onto a canvas and save it as PPM.

The projectile starts at (0, 1, 0) with velocity normalize(1, 1.8, 0) * 11.25
under gravity (0, -0.1, 0) and wind (-0.01, 0, 0). Every position it passes
through is painted red, with canvas y flipped so the ground is the bottom row.

Two files are written: an ASCII PPM (P3) and a binary PPM (P6).

Usage:
    python -m examples.chapter02_projectile_canvas [options]

Options:
    --width WIDTH        Canvas width in pixels (default: 900)
    --height HEIGHT      Canvas height in pixels (default: 550)
    --speed SPEED        Launch speed (default: 11.25)
    --output-dir DIR     Directory for the output files (default: .)
    --png                Also save a PNG copy
    --show               Open a Matplotlib preview window
    --quiet              Suppress progress output

Example:
    python -m examples.chapter02_projectile_canvas --output-dir renders --png
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from pathlib import Path

from examples.projectile import Environment, Projectile, simulate
from rtlib.core.tuple import Tuple, point, vector
from rtlib.image.canvas import Canvas
from rtlib.image.color import Color
from rtlib.image.coord import Coord2D
from rtlib.preview.display import show_canvas
from rtlib.preview.export import save_png
from rtlib.preview.ppm import save_ppm

ASCII_FILENAME = "chapter02.ppm"
BINARY_FILENAME = "chapter02_binary.ppm"
PNG_FILENAME = "chapter02.png"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Plot a projectile's trajectory onto a canvas.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=900,
        help="Canvas width in pixels (default: 900)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=550,
        help="Canvas height in pixels (default: 550)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=11.25,
        help="Launch speed (default: 11.25)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for the output files (default: .)",
    )
    parser.add_argument(
        "--png",
        action="store_true",
        help="Also save a PNG copy",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a Matplotlib preview window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def _saturating_pixel(value: float, limit: int) -> int:
    """Truncate a world coordinate to a pixel index in [0, limit]."""
    if not value > 0.0:
        return 0
    if value >= limit:
        return limit
    return int(value)


def to_canvas_coord(position: Tuple, canvas: Canvas) -> Coord2D | None:
    """Map a world position to the canvas pixel it falls in.

    World y grows upward while canvas rows grow downward, so y is flipped
    against the bottom row. Coordinates are truncated toward zero, and
    negative or NaN world coordinates saturate at 0, so a landing just below
    the ground is drawn on the bottom row.

    Returns:
        The pixel coordinate, or None if the position lies off the canvas.
    """
    x = _saturating_pixel(float(position.x), canvas.width)
    y = canvas.height - 1 - _saturating_pixel(float(position.y), canvas.height)
    if 0 <= x < canvas.width and 0 <= y < canvas.height:
        return Coord2D(x, y)
    return None


def plot_trajectory(canvas: Canvas, positions: Iterable[Tuple], color: Color) -> int:
    """Paint each position onto the canvas.

    Args:
        canvas: Target canvas, modified in place.
        positions: World positions to plot.
        color: Color to paint with.

    Returns:
        The number of positions that fell outside the canvas and were skipped.
    """
    skipped = 0
    for position in positions:
        coord = to_canvas_coord(position, canvas)
        if coord is None:
            skipped += 1
            continue
        canvas[coord] = color
    return skipped


def render_trajectory(
    width: int = 900,
    height: int = 550,
    speed: float = 11.25,
    output_dir: str = ".",
    png: bool = False,
    show: bool = False,
    quiet: bool = False,
) -> list[Path]:
    """Simulate the launch, plot it and save the canvas.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        speed: Launch speed along normalize(1, 1.8, 0).
        output_dir: Directory for the output files (created if missing).
        png: If True, also save a PNG copy.
        show: If True, open a Matplotlib preview window.
        quiet: If True, suppress progress output.

    Returns:
        Paths of the files written.
    """
    projectile = Projectile(
        position=point(0.0, 1.0, 0.0),
        velocity=vector(1.0, 1.8, 0.0).normalize() * speed,
    )
    environment = Environment(
        gravity=vector(0.0, -0.1, 0.0),
        wind=vector(-0.01, 0.0, 0.0),
    )

    if not quiet:
        print(f"Plotting trajectory on a {width}x{height} canvas...")

    start_time = time.time()

    canvas = Canvas(width, height)
    positions = [state.position for state in simulate(environment, projectile)]
    skipped = plot_trajectory(canvas, positions, Color(1.0, 0.0, 0.0))

    if not quiet:
        print(f"  {len(positions)} positions, {skipped} outside the canvas")

    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    written = [
        save_ppm(canvas, directory / ASCII_FILENAME),
        save_ppm(canvas, directory / BINARY_FILENAME, binary=True),
    ]
    if png:
        written.append(save_png(canvas, directory / PNG_FILENAME))

    if not quiet:
        for path in written:
            print(f"Saved to: {path.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if show:
        show_canvas(canvas, title="Projectile trajectory")

    return written


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        render_trajectory(
            width=args.width,
            height=args.height,
            speed=args.speed,
            output_dir=args.output_dir,
            png=args.png,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
