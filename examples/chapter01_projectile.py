#!/usr/bin/env python3
"""Fire a projectile and report where it lands.

The projectile starts at (0, 1, 0) moving along normalize(1, 1, 0), pulled
down by gravity (0, -0.1, 0) and pushed back by wind (-0.01, 0, 0). The
simulation runs until the projectile reaches the ground.

Usage:
    python -m examples.chapter01_projectile [options]

Options:
    --speed SPEED   Launch speed multiplier (default: 1.0)
    --verbose       Print every tick
    --quiet         Suppress all output

Example:
    python -m examples.chapter01_projectile --speed 2 --verbose
"""

from __future__ import annotations

import argparse
import sys

from examples.projectile import Environment, Projectile, simulate
from rtlib.core.tuple import point, vector


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Fire a projectile and report where it lands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Launch speed multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every tick",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all output",
    )
    return parser.parse_args(argv)


def run_projectile(speed: float = 1.0, verbose: bool = False, quiet: bool = False) -> Projectile:
    """Simulate one launch until the projectile lands.

    Args:
        speed: Multiplier applied to the unit launch velocity.
        verbose: If True, print the position after every tick.
        quiet: If True, suppress all output.

    Returns:
        The final projectile state.
    """
    projectile = Projectile(
        position=point(0.0, 1.0, 0.0),
        velocity=vector(1.0, 1.0, 0.0).normalize() * speed,
    )
    environment = Environment(
        gravity=vector(0.0, -0.1, 0.0),
        wind=vector(-0.01, 0.0, 0.0),
    )

    ticks = 0
    for projectile in simulate(environment, projectile):
        ticks += 1
        if verbose and not quiet:
            print(f"  tick {ticks}: {projectile.position}")

    if not quiet:
        print(f"projectile: {projectile.position}")
        print(f"velocity: {projectile.velocity}")
        print(f"ticks: {ticks}")

    return projectile


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        run_projectile(speed=args.speed, verbose=args.verbose, quiet=args.quiet)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
