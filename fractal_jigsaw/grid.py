"""Occupancy bookkeeping for the tile lattice and its cells."""

import math
from typing import List

from .errors import EmptyGridSelection
from .models import Cell, Tile
from .rng import SeededRandom


class CellGrid:
    """Visited flags for an ncols x nrows tile lattice and occupied flags for
    the (ncols - 1) x (nrows - 1) cells between the tiles.

    Tiles are stored in row-major order (index = y * ncols + x).
    """

    def __init__(self, ncols: int, nrows: int):
        self.ncols = ncols
        self.nrows = nrows
        self.visited: List[bool] = [False] * (ncols * nrows)
        self.occupied: List[bool] = [False] * ((ncols - 1) * (nrows - 1))
        self._unvisited = ncols * nrows

    @property
    def unvisited_count(self) -> int:
        return self._unvisited

    def reset(self) -> None:
        """Clear every visited and occupied flag."""
        self.visited = [False] * (self.ncols * self.nrows)
        self.occupied = [False] * ((self.ncols - 1) * (self.nrows - 1))
        self._unvisited = self.ncols * self.nrows

    def _tile_index(self, tile: Tile) -> int:
        return tile.y * self.ncols + tile.x

    def _cell_index(self, cell: Cell) -> int:
        return cell.y * (self.ncols - 1) + cell.x

    def is_tile_valid(self, tile: Tile) -> bool:
        return 0 <= tile.x < self.ncols and 0 <= tile.y < self.nrows

    def is_tile_visited(self, tile: Tile) -> bool:
        return self.visited[self._tile_index(tile)]

    def is_cell_empty(self, cell: Cell) -> bool:
        return not self.occupied[self._cell_index(cell)]

    def visit_tile(self, tile: Tile) -> None:
        index = self._tile_index(tile)
        if not self.visited[index]:
            self.visited[index] = True
            self._unvisited -= 1

    def occupy_cell(self, cell: Cell) -> None:
        self.occupied[self._cell_index(cell)] = True

    def liberate_cell(self, cell: Cell) -> None:
        self.occupied[self._cell_index(cell)] = False

    def unvisited_tiles(self) -> List[Tile]:
        """Unvisited tiles in row-major order."""
        return [Tile(i % self.ncols, i // self.ncols) for i, seen in enumerate(self.visited) if not seen]

    def random_empty_tile(self, rng: SeededRandom) -> Tile:
        """Pick an unvisited tile uniformly with a single draw from ``rng``.

        Raises:
            EmptyGridSelection: If every tile is already visited.
        """
        empty = self.unvisited_tiles()
        if not empty:
            raise EmptyGridSelection("random_empty_tile called on a fully visited grid")
        index = min(math.floor(rng.next() * len(empty)), len(empty) - 1)
        return empty[index]
