"""High level maze object combining generation, queries and solving."""

from __future__ import annotations

from typing import List

import numpy as np

from .errors import BrokenPreconditionError, OutOfRangeIndexError
from .generator import MazeGenerator
from .grid import Direction, MazeGrid
from .solver import MazeSolution, MazeSolver


class SquareMaze:
    """A perfect maze with its entrance in the top row and exit in the bottom row."""

    def __init__(self) -> None:
        self._grid: MazeGrid | None = None
        self._generated = False

    @property
    def width(self) -> int:
        return self._grid.width if self._grid is not None else 0

    @property
    def height(self) -> int:
        return self._grid.height if self._grid is not None else 0

    @property
    def grid(self) -> MazeGrid | None:
        return self._grid

    @property
    def is_generated(self) -> bool:
        return self._generated

    def make_maze(
        self,
        width: int,
        height: int,
        rng: int | np.random.Generator | None = None,
        use_tqdm: bool = False,
        verbose: bool = False,
    ) -> None:
        """Build a new random maze, replacing any previous one."""

        grid = MazeGrid(width, height)
        self._grid = None
        self._generated = False
        MazeGenerator(rng, use_tqdm=use_tqdm, verbose=verbose).generate(grid)
        self._grid = grid
        self._generated = True

    def can_travel(self, x: int, y: int, direction: Direction) -> bool:
        if self._grid is None:
            return False
        return self._grid.can_travel(x, y, direction)

    def set_wall(self, x: int, y: int, direction: Direction, present: bool) -> None:
        if self._grid is None:
            return
        self._grid.set_wall(x, y, direction, present)

    def wall_mask(self, x: int, y: int) -> int:
        if self._grid is None:
            raise OutOfRangeIndexError("maze has no cells; call make_maze first")
        return self._grid.wall_mask(x, y)

    def solve(self, start_x: int) -> MazeSolution:
        if self._grid is None or not self._generated:
            raise BrokenPreconditionError("maze has not been generated")
        if not 0 <= start_x < self._grid.width:
            raise BrokenPreconditionError(f"entrance column {start_x} outside 0..{self._grid.width - 1}")
        return MazeSolver(self._grid).solve(start_x)

    def solve_maze(self, start_x: int) -> List[Direction]:
        """Return the directions from ``(start_x, 0)`` to the farthest bottom-row cell."""

        return self.solve(start_x).path


__all__ = ["SquareMaze"]
