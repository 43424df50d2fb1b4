"""Boundary tracing: turn a piece's connection tree into an ordered arc list.

The walk starts at the piece's first connection and follows the tree across
shared vertices. Every connection contributes two arcs beside its first tile
and either continues into the connections leaving its second tile or caps it
with corner arcs. The concatenated arcs form one closed contour.

The walk uses an explicit work stack so deep pieces do not hit the
interpreter's recursion limit; the emission order is the same as the
depth-first recursive definition.
"""

from typing import Collection, Dict, List, Tuple, Union

from .models import Arc, DiagonalConnection, Piece, Tile

# Quadrant -> (offset of the neighbouring tile from p1, arc quadrant), first arc
LEADING_ARCS: Dict[int, Tuple[Tuple[int, int], int]] = {
    0: ((1, 0), 1),
    1: ((0, -1), 2),
    2: ((-1, 0), 3),
    3: ((0, 1), 0),
}

# Mirror of LEADING_ARCS, emitted after the far end has been handled
TRAILING_ARCS: Dict[int, Tuple[Tuple[int, int], int]] = {
    0: ((0, -1), 3),
    1: ((-1, 0), 0),
    2: ((0, 1), 1),
    3: ((1, 0), 2),
}


class _Visit:
    __slots__ = ("connection", "is_root")

    def __init__(self, connection: DiagonalConnection, is_root: bool):
        self.connection = connection
        self.is_root = is_root


_WorkItem = Union[Arc, _Visit]


def _around(
    tile: Tile,
    quadrants: Tuple[int, ...],
    connections: Collection[DiagonalConnection],
    radius: float,
    frame: float,
) -> List[_WorkItem]:
    """Continue into the piece's connections at ``tile`` or cap each quadrant."""
    items: List[_WorkItem] = []
    for quadrant in quadrants:
        taken = DiagonalConnection.from_point_and_quadrant(tile, quadrant, True)
        untaken = DiagonalConnection.from_point_and_quadrant(tile, quadrant, False)
        if taken in connections:
            items.append(_Visit(taken, False))
        elif untaken in connections:
            items.append(_Visit(untaken, False))
        else:
            items.append(Arc(tile, radius, frame, quadrant, 0))
    return items


def _expand(
    connection: DiagonalConnection,
    is_root: bool,
    connections: Collection[DiagonalConnection],
    radius: float,
    frame: float,
) -> List[_WorkItem]:
    q = connection.quadrant
    p1 = connection.p1
    items: List[_WorkItem] = []

    (dx, dy), arc_quadrant = LEADING_ARCS[q]
    items.append(Arc(p1.offset(dx, dy), radius, frame, arc_quadrant, 1))

    if connection.p2_taken:
        quadrants = ((q + 3) % 4, (q + 4) % 4, (q + 5) % 4)
        items.extend(_around(connection.p2, quadrants, connections, radius, frame))
    else:
        items.append(Arc(connection.p2, radius, frame, (q + 2) % 4, 1))

    (dx, dy), arc_quadrant = TRAILING_ARCS[q]
    items.append(Arc(p1.offset(dx, dy), radius, frame, arc_quadrant, 1))

    # Only the root expands around p1; everywhere else p1 is handled by the parent
    if is_root:
        quadrants = ((q + 1) % 4, (q + 2) % 4, (q + 3) % 4)
        items.extend(_around(p1, quadrants, connections, radius, frame))
    return items


def add_arcs(
    connection: DiagonalConnection,
    connections: Collection[DiagonalConnection],
    arcs: List[Arc],
    radius: float,
    frame: float,
    is_root: bool = True,
) -> None:
    """Append the boundary arcs reachable from ``connection`` to ``arcs``.

    Args:
        connection: Connection to start the walk from.
        connections: All connections of the piece (membership is structural).
        arcs: Output list, extended in contour order.
        radius: Tile corner radius in output units.
        frame: Offset of the lattice from the document origin.
        is_root: Whether ``connection`` is the start of the walk.
    """
    lookup = connections if isinstance(connections, (set, frozenset)) else set(connections)
    stack: List[_WorkItem] = [_Visit(connection, is_root)]
    while stack:
        item = stack.pop()
        if isinstance(item, Arc):
            arcs.append(item)
            continue
        stack.extend(reversed(_expand(item.connection, item.is_root, lookup, radius, frame)))


def trace_piece(piece: Piece, radius: float, frame: float) -> List[Arc]:
    """Ordered arcs forming the closed contour of ``piece``.

    A piece without connections is a single tile and traces to the four
    convex quarters around it.
    """
    if not piece.connections:
        return [Arc(piece.origin, radius, frame, quadrant, 0) for quadrant in range(4)]
    arcs: List[Arc] = []
    add_arcs(piece.connections[0], piece.connections, arcs, radius, frame, is_root=True)
    return arcs
