"""Shared fixtures and helpers for the test suite."""

import sys
from pathlib import Path
from typing import Iterable, List, Set, Tuple

import pytest

# Add the repository root to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

from fractal_jigsaw import Arc, FractalJigsaw  # noqa: E402

# (ncols, nrows, seed, min_piece_length, max_piece_length), strips included
GRID_CASES = [
    (4, 4, 123, 1, 3),
    (10, 8, 7, 2, 5),
    (20, 15, 123, 1, 3),
    (12, 12, 99, 3, 6),
    (2, 9, 5, 1, 4),
    (9, 2, 11, 2, 3),
    (6, 5, 0, 4, 4),
    (20, 15, 31, 5, 12),
]


def assert_closed_contour(arcs: List[Arc]) -> None:
    """Assert that consecutive arcs join and the last arc returns to the first."""
    assert arcs, "contour has no arcs"
    for current, following in zip(arcs, arcs[1:] + arcs[:1]):
        assert current.end == following.start, f"{current!r} ends at {current.end}, {following!r} starts at {following.start}"


def _orientation(a, b, c) -> int:
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    return (cross > 0) - (cross < 0)


def _on_segment(a, b, p) -> bool:
    return min(a[0], b[0]) <= p[0] <= max(a[0], b[0]) and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])


def segments_touch(a, b, c, d) -> bool:
    """Whether closed segments ab and cd share at least one point."""
    o1, o2 = _orientation(a, b, c), _orientation(a, b, d)
    o3, o4 = _orientation(c, d, a), _orientation(c, d, b)
    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == 0 and _on_segment(a, b, c))
        or (o2 == 0 and _on_segment(a, b, d))
        or (o3 == 0 and _on_segment(c, d, a))
        or (o4 == 0 and _on_segment(c, d, b))
    )


def assert_simple_polygon(vertices: List[Tuple[float, float]]) -> None:
    """Assert the closed polygon through ``vertices`` never meets itself."""
    n = len(vertices)
    assert len(set(vertices)) == n, f"repeated vertex in {vertices}"
    edges = [(vertices[i], vertices[(i + 1) % n]) for i in range(n)]
    for i in range(n):
        for j in range(i + 2, n):
            # The first and last edges share a vertex
            if i == 0 and j == n - 1:
                continue
            assert not segments_touch(*edges[i], *edges[j]), f"edges {edges[i]} and {edges[j]} cross"


def piece_tile_keys(jigsaw: FractalJigsaw) -> List[Set[Tuple[int, int]]]:
    """Tile coordinate sets of every piece."""
    return [{tile.key for tile in piece.tiles()} for piece in jigsaw.pieces]


def all_tile_keys(ncols: int, nrows: int) -> Set[Tuple[int, int]]:
    return {(x, y) for y in range(nrows) for x in range(ncols)}


def pairwise_disjoint(sets: Iterable[Set]) -> bool:
    seen: Set = set()
    for s in sets:
        if seen & s:
            return False
        seen |= s
    return True


@pytest.fixture
def generated_4x4() -> FractalJigsaw:
    """The 4x4 reference scenario (seed 123, pieces of 1 to 3 tiles)."""
    jigsaw = FractalJigsaw(4, 4, 1, 3, seed=123)
    jigsaw.generate()
    return jigsaw
