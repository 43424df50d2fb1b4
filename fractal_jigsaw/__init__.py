"""Fractal jigsaw - procedural puzzle piece generator.

This package partitions a tile lattice into interlocking pieces using
randomized diagonal connections, traces each piece into a closed contour and
exports the contours as SVG path geometry.
"""

from .errors import EmptyGridSelection, InvalidDimensions, InvalidPieceBounds, JigsawError
from .export import (
    document_size,
    export_svg,
    export_svg_single_path,
    piece_arcs,
    piece_paths,
    single_path_data,
)
from .generator import DEFAULT_FILL_ITERATIONS, FractalJigsaw, validate_inputs
from .grid import CellGrid
from .models import Arc, ArcShape, Cell, DiagonalConnection, Piece, Point, Tile
from .rendering import TAN_22_5, format_number, render_arc
from .result import JigsawResult, difficulty_for, generate_jigsaw
from .rng import SeededRandom
from .tracer import add_arcs, trace_piece

__all__ = [
    # Models
    "Arc",
    "ArcShape",
    "Cell",
    "DiagonalConnection",
    "Piece",
    "Point",
    "Tile",
    # Errors
    "JigsawError",
    "InvalidDimensions",
    "InvalidPieceBounds",
    "EmptyGridSelection",
    # Generation
    "SeededRandom",
    "CellGrid",
    "FractalJigsaw",
    "DEFAULT_FILL_ITERATIONS",
    "validate_inputs",
    # Tracing and rendering
    "add_arcs",
    "trace_piece",
    "render_arc",
    "format_number",
    "TAN_22_5",
    # Export
    "document_size",
    "piece_arcs",
    "piece_paths",
    "export_svg",
    "export_svg_single_path",
    "single_path_data",
    "JigsawResult",
    "difficulty_for",
    "generate_jigsaw",
]
