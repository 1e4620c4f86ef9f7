"""Tile grid model for the maze."""
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Sequence, Tuple


class TileType(Enum):
    """Every state a maze cell can hold."""

    WALL = "wall"
    EMPTY = "empty"
    MONSTER = "monster"
    WEAPON = "weapon"
    POTION = "potion"
    EXIT = "exit"


MIN_DIMENSION = 3


class Maze:
    """Fixed-size grid of tiles indexed as (x, y) = (column, row).

    Reads outside the grid report ``TileType.WALL`` and writes outside the grid
    are ignored, so the border behaves as an endless wall.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
            raise ValueError(f"Maze must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{cols}.")
        self._rows = rows
        self._cols = cols
        self._grid: List[List[TileType]] = [[TileType.WALL] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._cols and 0 <= y < self._rows

    def get_tile(self, x: int, y: int) -> TileType:
        """Return the tile at (x, y); out-of-range coordinates are walls."""
        if not self.in_bounds(x, y):
            return TileType.WALL
        return self._grid[y][x]

    def set_tile(self, x: int, y: int, tile: TileType) -> None:
        """Overwrite the tile at (x, y); out-of-range writes are dropped."""
        if self.in_bounds(x, y):
            self._grid[y][x] = tile

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._grid[y][x] is not TileType.WALL

    def fill(self, tile: TileType) -> None:
        for row in self._grid:
            for x in range(self._cols):
                row[x] = tile

    def iter_rows(self) -> Iterator[Sequence[TileType]]:
        """Yield each row top to bottom as a read-only snapshot."""
        for row in self._grid:
            yield tuple(row)

    def find(self, tile: TileType) -> List[Tuple[int, int]]:
        """Return the coordinates of every cell holding ``tile`` in row-major order."""
        return [(x, y) for y, row in enumerate(self._grid) for x, cell in enumerate(row) if cell is tile]

    def count(self, tile: TileType) -> int:
        return sum(row.count(tile) for row in self._grid)

    def snapshot(self) -> Tuple[Tuple[TileType, ...], ...]:
        """Return an immutable copy of the grid, handy for comparisons."""
        return tuple(tuple(row) for row in self._grid)
