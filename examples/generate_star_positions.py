#!/usr/bin/env python3
"""Generate a star shell and save the positions.

This script places stars on the radius-40 shell, either on the host or on
the device through the Taichi kernel, and writes the positions to a file
a 3D scene can load.

Usage:
    python -m examples.generate_star_positions [options]

Options:
    --size SIZE         Number of stars (default: 30)
    --seed SEED         Seed for the jitter (default: random)
    --output OUTPUT     Output file path, .json/.npy/.csv (default: stars.json)
    --device            Evaluate the shell in a Taichi kernel
    --quiet             Suppress progress output

Example:
    python -m examples.generate_star_positions --size 60 --seed 7 --output stars.npy
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate star positions on a spherical shell.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=30,
        help="Number of stars (default: 30)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the jitter (default: random)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="stars.json",
        help="Output file path, .json/.npy/.csv (default: stars.json)",
    )
    parser.add_argument(
        "--device",
        action="store_true",
        help="Evaluate the shell in a Taichi kernel",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def generate_star_positions(
    size: int = 30,
    seed: int | None = None,
    output_path: str = "stars.json",
    device: bool = False,
    quiet: bool = False,
) -> Path:
    """Generate a star shell and save it to file.

    Args:
        size: Number of stars.
        seed: Seed for the jitter source, or None for OS entropy.
        output_path: Output file path.
        device: If True, evaluate the shell with the Taichi kernel.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.starfield.core.point import Point3D
    from src.starfield.core.random_source import NumpyRandomSource
    from src.starfield.export.positions import save_positions
    from src.starfield.shell.positions import generate_positions

    source = NumpyRandomSource(seed=seed)
    start_time = time.time()

    if device:
        from src.starfield.shell.kernels import get_positions_numpy, upload_positions

        if not quiet:
            print(f"Evaluating {size} stars on the device...")
        upload_positions(size, source=source)
        points = [Point3D(float(x), float(y), float(z)) for x, y, z in get_positions_numpy()]
    else:
        if not quiet:
            print(f"Generating {size} stars...")
        points = generate_positions(size, source=source)

    output_file = save_positions(points, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.3f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.device:
        # Use GPU if available, fall back to CPU
        try:
            ti.init(arch=ti.gpu)
            if not args.quiet:
                print("Using GPU backend")
        except Exception:
            ti.init(arch=ti.cpu)
            if not args.quiet:
                print("Using CPU backend")

    try:
        generate_star_positions(
            size=args.size,
            seed=args.seed,
            output_path=args.output,
            device=args.device,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
