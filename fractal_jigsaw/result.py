"""One-call generation: build, partition and export a jigsaw."""

from dataclasses import asdict, dataclass
from typing import Any, List

from .export import ShapeLike, document_size, export_svg, export_svg_single_path, piece_paths
from .generator import DEFAULT_FILL_ITERATIONS, FractalJigsaw
from .models import ArcShape

# Piece count thresholds, highest first
DIFFICULTY_TIERS = (
    (200, "very_hard"),
    (120, "hard"),
    (80, "medium"),
)


def difficulty_for(piece_count: int) -> str:
    """Difficulty label used for pricing tiers."""
    for threshold, label in DIFFICULTY_TIERS:
        if piece_count > threshold:
            return label
    return "easy"


@dataclass
class JigsawResult:
    """Everything a caller needs from one generation run."""

    seed: int
    ncols: int
    nrows: int
    shape: str
    piece_count: int
    difficulty: str
    width: float
    height: float
    # Multi-path preview document
    design_svg: str
    # Single de-duplicated path for cutting
    laser_svg: str
    paths: List[str]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def generate_jigsaw(
    ncols: int,
    nrows: int,
    seed: int,
    min_piece_length: int,
    max_piece_length: int,
    radius: float = 15,
    frame: float = 10,
    shape: ShapeLike = ArcShape.CIRCLE,
    laser_frame: float = 0,
    fill_iterations: int = DEFAULT_FILL_ITERATIONS,
) -> JigsawResult:
    """Generate a jigsaw and export every document format.

    Args:
        ncols: Number of tile columns (>= 2).
        nrows: Number of tile rows (>= 2).
        seed: Seed of the generator's random stream.
        min_piece_length: Minimum tile count of a grown piece.
        max_piece_length: Maximum target tile count of a piece.
        radius: Tile corner radius; defines the output units.
        frame: Margin around the lattice in the design document and paths.
        shape: Corner style.
        laser_frame: Margin used for the cutting document.
        fill_iterations: Bound on non-partial hole filling passes.

    Returns:
        The populated JigsawResult.

    Raises:
        InvalidDimensions: If ncols or nrows is invalid.
        InvalidPieceBounds: If the piece bounds are invalid.
        ValueError: If the shape is unknown.
    """
    arc_shape = ArcShape.parse(shape)
    jigsaw = FractalJigsaw(
        ncols,
        nrows,
        min_piece_length,
        max_piece_length,
        seed=seed,
        fill_iterations=fill_iterations,
    )
    piece_count = jigsaw.generate()
    width, height = document_size(jigsaw, frame, radius)
    return JigsawResult(
        seed=seed,
        ncols=ncols,
        nrows=nrows,
        shape=arc_shape.name.lower(),
        piece_count=piece_count,
        difficulty=difficulty_for(piece_count),
        width=width,
        height=height,
        design_svg=export_svg(jigsaw, frame, radius, arc_shape),
        laser_svg=export_svg_single_path(jigsaw, laser_frame, radius, arc_shape),
        paths=piece_paths(jigsaw, frame, radius, arc_shape),
    )
