"""Tests for boundary tracing."""

import pytest
from conftest import GRID_CASES, assert_closed_contour, assert_simple_polygon

from fractal_jigsaw import Arc, DiagonalConnection, FractalJigsaw, Piece, Tile, add_arcs, trace_piece


def arc_summary(arcs):
    """(centre, quadrant, sign) for each arc."""
    return [(tuple(arc.center), arc.quadrant, arc.sign) for arc in arcs]


class TestTracePiece:
    """Contour order and closure for hand-built pieces."""

    def test_single_connection(self) -> None:
        connection = DiagonalConnection(Tile(0, 1), Tile(1, 0), True)
        arcs = trace_piece(Piece(origin=Tile(0, 1), connections=[connection]), radius=1, frame=0)
        assert arc_summary(arcs) == [
            ((3, 3), 1, 1),
            ((3, 1), 3, 0),
            ((3, 1), 0, 0),
            ((3, 1), 1, 0),
            ((1, 1), 3, 1),
            ((1, 3), 1, 0),
            ((1, 3), 2, 0),
            ((1, 3), 3, 0),
        ]
        assert_closed_contour(arcs)

    def test_partial_connection(self) -> None:
        connection = DiagonalConnection(Tile(0, 0), Tile(1, 1), False)
        arcs = trace_piece(Piece(origin=Tile(0, 0), connections=[connection]), radius=1, frame=0)
        assert arcs == [
            Arc(Tile(0, 1), 1, 0, 0, 1),
            Arc(Tile(1, 1), 1, 0, 1, 1),
            Arc(Tile(1, 0), 1, 0, 2, 1),
            Arc(Tile(0, 0), 1, 0, 0, 0),
            Arc(Tile(0, 0), 1, 0, 1, 0),
            Arc(Tile(0, 0), 1, 0, 2, 0),
        ]
        assert [arc.sign for arc in arcs] == [1, 1, 1, 0, 0, 0]
        assert_closed_contour(arcs)

    def test_single_tile(self) -> None:
        arcs = trace_piece(Piece(origin=Tile(2, 1)), radius=15, frame=10)
        assert [arc.quadrant for arc in arcs] == [0, 1, 2, 3]
        assert all(arc.sign == 0 and arc.center == (85, 55) for arc in arcs)
        assert_closed_contour(arcs)

    def test_deep_chain_does_not_recurse(self) -> None:
        n = 3000
        connections = [DiagonalConnection(Tile(i, i), Tile(i + 1, i + 1), True) for i in range(n)]
        arcs = trace_piece(Piece(origin=Tile(0, 0), connections=connections), radius=1, frame=0)
        assert len(arcs) == 4 * n + 4
        assert_closed_contour(arcs)

    def test_connection_direction_is_ignored(self) -> None:
        forward = [DiagonalConnection(Tile(0, 0), Tile(1, 1), True), DiagonalConnection(Tile(1, 1), Tile(2, 0), True)]
        reversed_child = [forward[0], DiagonalConnection(Tile(2, 0), Tile(1, 1), True)]
        a = trace_piece(Piece(origin=Tile(0, 0), connections=forward), radius=1, frame=0)
        b = trace_piece(Piece(origin=Tile(0, 0), connections=reversed_child), radius=1, frame=0)
        assert arc_summary(a) == arc_summary(b)

    def test_add_arcs_extends_output(self) -> None:
        connection = DiagonalConnection(Tile(0, 1), Tile(1, 0), True)
        arcs = [Arc(Tile(5, 5), 1, 0, 0, 0)]
        add_arcs(connection, [connection], arcs, radius=1, frame=0)
        assert len(arcs) == 9
        assert arcs[0] == Arc(Tile(5, 5), 1, 0, 0, 0)


class TestGeneratedContours:
    """Every generated piece traces to a closed contour."""

    @pytest.mark.parametrize(
        "ncols,nrows,seed,min_len,max_len",
        [(4, 4, 123, 1, 3), (20, 15, 123, 1, 3), (10, 10, 42, 3, 8), (2, 7, 9, 1, 2), (16, 12, 5, 5, 12)],
    )
    def test_contours_close(self, ncols: int, nrows: int, seed: int, min_len: int, max_len: int) -> None:
        jigsaw = FractalJigsaw(ncols, nrows, min_len, max_len, seed=seed)
        jigsaw.generate()
        for piece in jigsaw.pieces:
            arcs = trace_piece(piece, radius=15, frame=10)
            assert_closed_contour(arcs)
            assert len(arcs) == len(set(arcs))


class TestSimpleContours:
    """Straight-edged piece outlines never touch themselves."""

    @pytest.mark.parametrize("ncols,nrows,seed,min_len,max_len", GRID_CASES)
    def test_square_outlines_are_simple(self, ncols: int, nrows: int, seed: int, min_len: int, max_len: int) -> None:
        jigsaw = FractalJigsaw(ncols, nrows, min_len, max_len, seed=seed)
        jigsaw.generate()
        for piece in jigsaw.pieces:
            assert_simple_polygon([arc.start for arc in trace_piece(piece, radius=15, frame=10)])

    def test_crossing_outline_is_detected(self) -> None:
        with pytest.raises(AssertionError):
            assert_simple_polygon([(0, 0), (2, 2), (2, 0), (0, 2)])
