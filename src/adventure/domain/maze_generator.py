"""Procedural maze generation: recursive-backtracking carve plus entity placement."""
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from adventure.core.rng import RNG
from adventure.core.types import Direction
from adventure.domain.maze import Maze, TileType

logger = logging.getLogger(__name__)

START: Tuple[int, int] = (1, 1)
CARDINALS: Tuple[Direction, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

EXIT_ATTEMPTS = 100
ATTEMPTS_PER_ENTITY = 20
START_CLEARANCE = 2

# Inclusive ranges for how many of each entity a maze receives.
MONSTER_COUNT = (5, 9)
WEAPON_COUNT = (3, 6)
POTION_COUNT = (3, 6)


class MazeGenerator:
    """Builds mazes from a single random source.

    All randomness (direction shuffles, exit spot, entity counts and spots) is
    drawn from ``rng`` in a fixed order, so a seeded RNG reproduces the grid.
    """

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def generate(self, rows: int, cols: int) -> Maze:
        maze = Maze(rows, cols)
        maze.fill(TileType.WALL)
        self.carve_passages(maze, *START)
        self.place_exit(maze)
        monsters = self.place_entities(maze, TileType.MONSTER, self._rng.randint(*MONSTER_COUNT))
        weapons = self.place_entities(maze, TileType.WEAPON, self._rng.randint(*WEAPON_COUNT))
        potions = self.place_entities(maze, TileType.POTION, self._rng.randint(*POTION_COUNT))
        logger.debug(
            "Generated %dx%d maze: %d monsters, %d weapons, %d potions",
            rows,
            cols,
            monsters,
            weapons,
            potions,
        )
        return maze

    # -----------------------
    # Carving
    # -----------------------
    def carve_passages(self, maze: Maze, x: int, y: int) -> None:
        """Carve a perfect maze on odd cells reachable from (x, y).

        Walks depth-first with an explicit stack. Each cell shuffles its
        directions when it is entered and resumes where it left off after a
        child finishes, which matches the recursive formulation step for step.
        """
        stack: List[Tuple[int, int, Iterator[Direction]]] = [(x, y, self._enter(maze, x, y))]
        while stack:
            cx, cy, directions = stack[-1]
            for dx, dy in directions:
                nx, ny = cx + dx * 2, cy + dy * 2
                if self._is_interior(maze, nx, ny) and maze.get_tile(nx, ny) is TileType.WALL:
                    maze.set_tile(cx + dx, cy + dy, TileType.EMPTY)
                    stack.append((nx, ny, self._enter(maze, nx, ny)))
                    break
            else:
                stack.pop()

    def _enter(self, maze: Maze, x: int, y: int) -> Iterator[Direction]:
        directions = list(CARDINALS)
        self._rng.shuffle(directions)
        maze.set_tile(x, y, TileType.EMPTY)
        return iter(directions)

    @staticmethod
    def _is_interior(maze: Maze, x: int, y: int) -> bool:
        return 0 < x < maze.cols - 1 and 0 < y < maze.rows - 1

    # -----------------------
    # Placement
    # -----------------------
    def place_exit(self, maze: Maze) -> Tuple[int, int] | None:
        """Put the exit in the bottom-right third, falling back to a reverse scan."""
        min_x, min_y = maze.cols * 2 // 3, maze.rows * 2 // 3
        if min_x < maze.cols - 1 and min_y < maze.rows - 1:
            for _ in range(EXIT_ATTEMPTS):
                x = self._rng.randrange(min_x, maze.cols - 1)
                y = self._rng.randrange(min_y, maze.rows - 1)
                if maze.get_tile(x, y) is TileType.EMPTY:
                    maze.set_tile(x, y, TileType.EXIT)
                    return (x, y)

        for y in range(maze.rows - 2, 0, -1):
            for x in range(maze.cols - 2, 0, -1):
                if maze.get_tile(x, y) is TileType.EMPTY:
                    logger.debug("Exit placed by fallback scan at (%d, %d)", x, y)
                    maze.set_tile(x, y, TileType.EXIT)
                    return (x, y)
        logger.warning("No empty cell available for the exit in a %dx%d maze", maze.rows, maze.cols)
        return None

    def place_entities(self, maze: Maze, tile: TileType, count: int) -> int:
        """Scatter up to ``count`` tiles on empty cells away from the start.

        Gives up after ``count * ATTEMPTS_PER_ENTITY`` samples and returns how
        many were actually placed.
        """
        placed = 0
        attempts = 0
        max_attempts = count * ATTEMPTS_PER_ENTITY
        while placed < count and attempts < max_attempts:
            x = self._rng.randrange(1, maze.cols - 1)
            y = self._rng.randrange(1, maze.rows - 1)
            if maze.get_tile(x, y) is TileType.EMPTY and not near_start(x, y):
                maze.set_tile(x, y, tile)
                placed += 1
            attempts += 1
        if placed < count:
            logger.debug("Placed %d/%d %s tiles before giving up", placed, count, tile.value)
        return placed


def near_start(x: int, y: int) -> bool:
    """True when (x, y) lies inside the clearance square around the start."""
    return abs(x - START[0]) <= START_CLEARANCE and abs(y - START[1]) <= START_CLEARANCE


def generate_maze(rows: int, cols: int, seed: int | None = None, *, rng: RNG | None = None) -> Maze:
    """Generate a fully carved and populated maze.

    ``rng`` takes precedence over ``seed`` so callers can share one random
    stream between the maze and the rest of a game.
    """
    return MazeGenerator(rng if rng is not None else RNG(seed)).generate(rows, cols)
