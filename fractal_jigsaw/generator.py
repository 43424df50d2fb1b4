"""Procedural partition of a tile lattice into jigsaw pieces.

Pieces grow from random seed tiles through diagonal connections. Because a
cell hosts at most one diagonal, pieces never overlap. After growth the grid
is replayed from the committed pieces and holes are filled. Leftover tiles join
a neighbouring piece where a free cell allows it, and any tile that is still
unreachable is adopted as a piece of its own, so the lattice always ends fully
covered.
"""

import logging
import math
from typing import List, Optional, Set, Tuple

from .errors import InvalidDimensions, InvalidPieceBounds
from .grid import CellGrid
from .models import DiagonalConnection, Piece, Tile
from .rng import SeededRandom

logger = logging.getLogger(__name__)

# Neighbour offsets, in candidate order
DIAGONAL_NEIGHBORS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

DEFAULT_FILL_ITERATIONS = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def validate_inputs(ncols: int, nrows: int, min_piece_length: int, max_piece_length: int) -> None:
    """Check grid dimensions and piece bounds.

    Raises:
        InvalidDimensions: If ncols or nrows is not an integer >= 2.
        InvalidPieceBounds: If a bound is not a positive integer or min > max.
    """
    for name, value in (("ncols", ncols), ("nrows", nrows)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 2:
            raise InvalidDimensions(f"{name} must be an integer >= 2, got {value!r}")
    for name, value in (("min_piece_length", min_piece_length), ("max_piece_length", max_piece_length)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidPieceBounds(f"{name} must be a positive integer, got {value!r}")
    if min_piece_length > max_piece_length:
        raise InvalidPieceBounds(
            f"min_piece_length ({min_piece_length}) is greater than max_piece_length ({max_piece_length})"
        )


class FractalJigsaw:
    """Generate a jigsaw partition for one (seed, dimensions, bounds) tuple.

    Instances own all of their random state and are not shared between
    requests.
    """

    def __init__(
        self,
        ncols: int,
        nrows: int,
        min_piece_length: int,
        max_piece_length: int,
        seed: int = 0,
        fill_iterations: int = DEFAULT_FILL_ITERATIONS,
    ):
        """Initialize the generator.

        Args:
            ncols: Number of tile columns (>= 2).
            nrows: Number of tile rows (>= 2).
            min_piece_length: Smallest tile count a grown piece may keep.
            max_piece_length: Largest target tile count for a piece.
            seed: Seed for the generator's private random stream.
            fill_iterations: Upper bound on non-partial hole filling passes.

        Raises:
            InvalidDimensions: If the grid dimensions are invalid.
            InvalidPieceBounds: If the piece bounds are invalid.
        """
        validate_inputs(ncols, nrows, min_piece_length, max_piece_length)
        self.ncols = ncols
        self.nrows = nrows
        self.min_piece_length = min_piece_length
        self.max_piece_length = max_piece_length
        self.seed = seed
        self.fill_iterations = fill_iterations
        self.rng = SeededRandom(seed)
        self.grid = CellGrid(ncols, nrows)
        self.pieces: List[Piece] = []
        self._generated = False

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    def possible_connections(self, tiles: List[Tile], allow_partial: bool) -> List[DiagonalConnection]:
        """Candidate connections leaving the given member tiles.

        A member whose ``open`` flag is cleared is skipped unless
        ``allow_partial`` is set; the flag is re-set only when the member
        still offers a candidate. Without ``allow_partial`` only unvisited
        neighbours are proposed.
        """
        members: Set[Tuple[int, int]] = {tile.key for tile in tiles}
        candidates: List[DiagonalConnection] = []
        for tile in tiles:
            if not (tile.open or allow_partial):
                continue
            tile.open = False
            for dx, dy in DIAGONAL_NEIGHBORS:
                neighbor = tile.offset(dx, dy)
                if not self.grid.is_tile_valid(neighbor) or neighbor.key in members:
                    continue
                visited = self.grid.is_tile_visited(neighbor)
                connection = DiagonalConnection(tile, neighbor, not visited)
                if not self.grid.is_cell_empty(connection.cell):
                    continue
                if allow_partial or not visited:
                    candidates.append(connection)
                    tile.open = True
        return candidates

    def _choose(self, candidates: List[DiagonalConnection]) -> DiagonalConnection:
        return candidates[math.floor(self.rng.uniform(0, len(candidates)))]

    def create_piece(self, force: bool = False) -> Optional[Piece]:
        """Grow one piece from a random unvisited tile.

        Args:
            force: Commit the piece even if it is shorter than the minimum
                length. Used to adopt otherwise unreachable tiles.

        Returns:
            The committed piece, or None if it was discarded.

        Raises:
            EmptyGridSelection: If the grid is already fully visited.
        """
        target = round_half_up(self.rng.uniform(self.min_piece_length, self.max_piece_length))
        origin = self.grid.random_empty_tile(self.rng)
        origin.open = True
        self.grid.visit_tile(origin)
        tiles = [origin]
        connections: List[DiagonalConnection] = []

        while self.grid.unvisited_count > 0 and len(tiles) < target:
            candidates = self.possible_connections(tiles, allow_partial=False)
            if not candidates:
                break
            chosen = self._choose(candidates)
            connections.append(chosen)
            chosen.p2.open = True
            tiles.append(chosen.p2)
            self.grid.occupy_cell(chosen.cell)
            self.grid.visit_tile(chosen.p2)

        if force or len(tiles) >= self.min_piece_length:
            piece = Piece(origin=Tile(origin.x, origin.y), connections=connections, adopted=force)
            self.pieces.append(piece)
            logger.debug("Committed piece at %s with %d tiles (target %d)", origin.key, len(tiles), target)
            return piece

        for connection in connections:
            self.grid.liberate_cell(connection.cell)
        logger.debug("Discarded piece at %s: %d tiles < minimum %d", origin.key, len(tiles), self.min_piece_length)
        return None

    def fill_holes(self, allow_partial: bool) -> bool:
        """Grow every piece by at most one connection.

        Candidates are computed from each piece's entire member set. With
        ``allow_partial`` a piece may also connect into a neighbour tile that
        is already visited.

        Returns:
            True if any piece grew.
        """
        growth = False
        for piece in self.pieces:
            candidates = self.possible_connections(piece.tiles(), allow_partial)
            if not candidates:
                continue
            chosen = self._choose(candidates)
            piece.connections.append(chosen)
            self.grid.occupy_cell(chosen.cell)
            self.grid.visit_tile(chosen.p2)
            growth = True
        return growth

    def replay(self) -> None:
        """Rebuild visited and occupied state from the committed pieces only.

        Tiles left visited by discarded pieces become available again.
        """
        self.grid.reset()
        for piece in self.pieces:
            self.grid.visit_tile(piece.origin)
            for connection in piece.connections:
                self.grid.visit_tile(connection.p1)
                if connection.p2_taken:
                    self.grid.visit_tile(connection.p2)
                self.grid.occupy_cell(connection.cell)

    def absorb_orphans(self) -> int:
        """Attach unvisited tiles to a diagonally adjacent piece.

        An orphan joins a piece when one of its diagonal neighbours is a
        member and the cell between them is empty. Passes repeat until no
        orphan can be attached, since an absorbed tile can open the way for
        the next one.

        Returns:
            Number of absorbed tiles.
        """
        absorbed = 0
        while True:
            owners = {tile.key: piece for piece in self.pieces for tile in piece.tiles()}
            grew = False
            for orphan in self.grid.unvisited_tiles():
                candidates: List[DiagonalConnection] = []
                for dx, dy in DIAGONAL_NEIGHBORS:
                    neighbor = orphan.offset(dx, dy)
                    if neighbor.key not in owners:
                        continue
                    connection = DiagonalConnection(neighbor, orphan, True)
                    if self.grid.is_cell_empty(connection.cell):
                        candidates.append(connection)
                if not candidates:
                    continue
                chosen = self._choose(candidates)
                owner = owners[chosen.p1.key]
                owner.connections.append(chosen)
                owners[orphan.key] = owner
                self.grid.occupy_cell(chosen.cell)
                self.grid.visit_tile(orphan)
                absorbed += 1
                grew = True
            if not grew:
                break
        if absorbed:
            logger.debug("Absorbed %d orphan tiles into neighbouring pieces", absorbed)
        return absorbed

    def adopt_orphans(self) -> int:
        """Turn every remaining unvisited tile into an adopted piece.

        Returns:
            Number of adopted pieces.
        """
        adopted = 0
        while self.grid.unvisited_count > 0:
            self.create_piece(force=True)
            adopted += 1
        if adopted:
            logger.debug("Adopted %d pieces for unreachable tiles", adopted)
        return adopted

    def generate(self) -> int:
        """Run the full partition: growth, replay, hole filling, absorption, adoption.

        Calling it again on the same instance is a no-op.

        Returns:
            The number of pieces.
        """
        if self._generated:
            return self.piece_count

        while self.grid.unvisited_count > 0:
            self.create_piece()
        self.replay()

        iterations = 0
        while self.fill_holes(allow_partial=False) and iterations < self.fill_iterations:
            iterations += 1
        logger.debug("Hole filling stopped after %d iterations", iterations)
        self.fill_holes(allow_partial=True)
        absorbed = self.absorb_orphans()
        adopted = self.adopt_orphans()

        self._generated = True
        logger.info(
            "Generated %d pieces on a %dx%d grid (seed=%s, absorbed=%d, adopted=%d)",
            self.piece_count,
            self.ncols,
            self.nrows,
            self.seed,
            absorbed,
            adopted,
        )
        return self.piece_count
