#!/usr/bin/env python
"""Fractal Jigsaw Generator.

Generates a jigsaw partition and writes the preview (multi-path) and cutting
(single-path) SVG documents.

Usage:
    python scripts/generate_jigsaw.py --ncols 20 --nrows 15 --seed 123 --output-dir out
"""

import argparse
import logging
import os

from fractal_jigsaw import ArcShape, generate_jigsaw


def write_documents(result, output_dir: str) -> None:
    """Write design and laser documents for a generation result.

    Args:
        result: The JigsawResult to write.
        output_dir: Directory to write the SVG files into.
    """
    os.makedirs(output_dir, exist_ok=True)
    documents = {
        f"design_{result.seed}.svg": result.design_svg,
        f"laser_{result.seed}.svg": result.laser_svg,
    }
    for filename, content in documents.items():
        path = os.path.join(output_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        print(f"Wrote {path}")


def main():
    """Process command-line arguments and run the jigsaw generator."""
    parser = argparse.ArgumentParser(description="Generate a fractal jigsaw as SVG")
    parser.add_argument("--ncols", type=int, default=20, help="Number of tile columns")
    parser.add_argument("--nrows", type=int, default=15, help="Number of tile rows")
    parser.add_argument("--seed", type=int, default=123, help="Random seed")
    parser.add_argument("--min-piece-length", type=int, default=1, help="Minimum tiles per grown piece")
    parser.add_argument("--max-piece-length", type=int, default=3, help="Maximum target tiles per piece")
    parser.add_argument("--radius", type=float, default=15, help="Tile corner radius in output units")
    parser.add_argument("--frame", type=float, default=10, help="Margin around the preview document")
    parser.add_argument(
        "--shape",
        choices=[shape.name.lower() for shape in ArcShape],
        default="circle",
        help="Corner style",
    )
    parser.add_argument("--output-dir", default=".", help="Directory to save the SVG files")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    result = generate_jigsaw(
        args.ncols,
        args.nrows,
        args.seed,
        args.min_piece_length,
        args.max_piece_length,
        radius=args.radius,
        frame=args.frame,
        shape=args.shape,
    )
    write_documents(result, os.path.abspath(args.output_dir))
    print(f"Generated {result.piece_count} pieces ({result.difficulty})")


if __name__ == "__main__":
    main()
