"""Data models for the fractal jigsaw generator.

Tiles are lattice vertices, cells are the unit squares between four tiles, and
pieces are trees of diagonal connections between tiles. Arcs are the quarter
boundary segments the tracer produces from a piece.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, NamedTuple, Set, Tuple, Union


class Point(NamedTuple):
    """A point in output (SVG user) units."""

    x: float
    y: float


@dataclass
class Tile:
    """A lattice vertex addressed by integer coordinates."""

    x: int
    y: int
    # Still offers unused diagonal slots during growth
    open: bool = field(default=False, compare=False)

    @property
    def key(self) -> Tuple[int, int]:
        """Coordinate tuple used for membership tests."""
        return (self.x, self.y)

    def offset(self, dx: int, dy: int) -> "Tile":
        """Return a new tile displaced by (dx, dy)."""
        return Tile(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Cell:
    """Unit square addressed by its min corner. Hosts at most one connection."""

    x: int
    y: int


# Direction of p2 relative to p1 for each quadrant
QUADRANT_OFFSETS: Dict[int, Tuple[int, int]] = {
    0: (1, -1),
    1: (-1, -1),
    2: (-1, 1),
    3: (1, 1),
}

# (slope sign > 0, p2 below p1) -> quadrant
QUADRANT_TABLE: Dict[Tuple[bool, bool], int] = {
    (True, True): 3,
    (True, False): 1,
    (False, True): 2,
    (False, False): 0,
}


class DiagonalConnection:
    """Directed edge p1 -> p2 between two diagonally adjacent tiles.

    ``p2_taken`` is True when p2 was unvisited and is claimed by this
    connection, and False for a partial connection into a tile that already
    belongs to another piece.

    Equality is structural: same owning cell, same slope and same
    ``p2_taken``. Direction is ignored, so a connection built from either end
    matches the stored one.
    """

    __slots__ = ("p1", "p2", "p2_taken", "slope", "quadrant", "cell")

    def __init__(self, p1: Tile, p2: Tile, p2_taken: bool):
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        if abs(dx) != 1 or abs(dy) != 1:
            raise ValueError(f"Tiles {p1.key} and {p2.key} are not diagonal neighbours")
        self.p1 = p1
        self.p2 = p2
        self.p2_taken = p2_taken
        self.slope = dy // dx
        self.cell = Cell(min(p1.x, p2.x), min(p1.y, p2.y))
        self.quadrant = QUADRANT_TABLE[(self.slope > 0, p2.y > p1.y)]

    @classmethod
    def from_point_and_quadrant(cls, p1: Tile, quadrant: int, p2_taken: bool) -> "DiagonalConnection":
        """Build the connection leaving p1 toward the given quadrant."""
        dx, dy = QUADRANT_OFFSETS[quadrant]
        return cls(p1, p1.offset(dx, dy), p2_taken)

    @property
    def key(self) -> Tuple[Cell, int, bool]:
        return (self.cell, self.slope, self.p2_taken)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiagonalConnection):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"DiagonalConnection({self.p1.key} -> {self.p2.key}, q={self.quadrant}, taken={self.p2_taken})"


@dataclass
class Piece:
    """One connected group of tiles.

    Attributes:
        origin: Seed tile the piece was grown from.
        connections: Diagonal connections in the order they were added.
        adopted: True when the piece was created to cover tiles no other
            piece could reach, regardless of the minimum piece length.
    """

    origin: Tile
    connections: List[DiagonalConnection] = field(default_factory=list)
    adopted: bool = False

    def tiles(self) -> List[Tile]:
        """Member tiles in discovery order, each marked open.

        Tiles reached through partial connections belong to other pieces and
        are not included.
        """
        seen: Set[Tuple[int, int]] = set()
        tiles: List[Tile] = []
        candidates = [self.origin]
        for connection in self.connections:
            candidates.append(connection.p1)
            if connection.p2_taken:
                candidates.append(connection.p2)
        for tile in candidates:
            if tile.key not in seen:
                seen.add(tile.key)
                tiles.append(Tile(tile.x, tile.y, open=True))
        return tiles

    def cells(self) -> List[Cell]:
        """Cells occupied by this piece's connections."""
        return [connection.cell for connection in self.connections]

    def __len__(self) -> int:
        return len(self.tiles())


class ArcShape(IntEnum):
    """Corner style used when rendering arcs."""

    CIRCLE = 0
    SQUARE = 1
    OCTAGON = 2

    @classmethod
    def parse(cls, value: Union["ArcShape", int, str]) -> "ArcShape":
        """Accept an ArcShape, its integer value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown arc shape: {value!r}") from None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown arc shape: {value!r}") from None


# Quadrant -> the two corner offsets (pa, pb) as multiples of the radius
ARC_CORNERS: Dict[int, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    0: ((1, 0), (0, -1)),
    1: ((0, -1), (-1, 0)),
    2: ((-1, 0), (0, 1)),
    3: ((0, 1), (1, 0)),
}


class Arc:
    """A quarter boundary segment around the centre of a tile.

    ``sign`` 0 runs from corner pa to corner pb (convex, around the tile),
    ``sign`` 1 runs from pb to pa.
    """

    __slots__ = ("center", "quadrant", "radius", "sign", "pa", "pb")

    def __init__(self, tile: Tile, radius: float, frame: float, quadrant: int, sign: int):
        self.center = Point(tile.x * 2 * radius + radius + frame, tile.y * 2 * radius + radius + frame)
        self.quadrant = quadrant
        self.radius = radius
        self.sign = sign
        (ax, ay), (bx, by) = ARC_CORNERS[quadrant]
        self.pa = Point(self.center.x + ax * radius, self.center.y + ay * radius)
        self.pb = Point(self.center.x + bx * radius, self.center.y + by * radius)

    @property
    def start(self) -> Point:
        return self.pa if self.sign == 0 else self.pb

    @property
    def end(self) -> Point:
        return self.pb if self.sign == 0 else self.pa

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return self.quadrant == other.quadrant and self.center == other.center

    def __hash__(self) -> int:
        return hash((self.quadrant, self.center))

    def __repr__(self) -> str:
        return f"Arc(center={tuple(self.center)}, q={self.quadrant}, sign={self.sign})"
