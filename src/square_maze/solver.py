"""Breadth-first maze solving."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .errors import BrokenPreconditionError
from .grid import Direction, MazeGrid


@dataclass
class MazeSolution:
    """Path from the entrance cell to the farthest bottom-row cell."""

    start: int
    exit: int
    path: List[Direction]
    distances: List[int] = field(repr=False)
    predecessors: List[int] = field(repr=False)

    @property
    def length(self) -> int:
        return len(self.path)


class MazeSolver:
    """Solve a generated :class:MazeGrid from a chosen start cell."""

    def __init__(self, grid: MazeGrid) -> None:
        self.grid = grid

    def solve(self, start: int) -> MazeSolution:
        grid = self.grid
        if not 0 <= start < len(grid):
            raise BrokenPreconditionError(f"start cell {start} is outside the grid")

        distances, predecessors = self._search(start)
        if any(distance < 0 for distance in distances):
            raise BrokenPreconditionError("maze is not connected; generate it before solving")

        exit_cell = self._pick_exit(distances)
        path = self._reconstruct(start, exit_cell, predecessors)
        return MazeSolution(
            start=start,
            exit=exit_cell,
            path=path,
            distances=distances,
            predecessors=predecessors,
        )

    def _search(self, start: int) -> Tuple[List[int], List[int]]:
        distances = [-1] * len(self.grid)
        predecessors = [-1] * len(self.grid)
        distances[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for _, neighbor in self.grid.neighbors(current):
                if distances[neighbor] == -1:
                    distances[neighbor] = distances[current] + 1
                    predecessors[neighbor] = current
                    queue.append(neighbor)
        return distances, predecessors

    def _pick_exit(self, distances: Sequence[int]) -> int:
        # Strictly greater only, so the leftmost cell wins a tie.
        width = self.grid.width
        bottom = (self.grid.height - 1) * width
        best = bottom
        for cell in range(bottom + 1, bottom + width):
            if distances[cell] > distances[best]:
                best = cell
        return best

    def _reconstruct(self, start: int, exit_cell: int, predecessors: Sequence[int]) -> List[Direction]:
        width = self.grid.width
        path: List[Direction] = []
        current = exit_cell
        while current != start:
            previous = predecessors[current]
            if previous < 0:
                raise BrokenPreconditionError(f"cell {current} has no predecessor on the way to {start}")
            dx = current % width - previous % width
            dy = current // width - previous // width
            path.append(Direction.from_delta(dx, dy))
            current = previous
        path.reverse()
        return path


def follow_path(grid: MazeGrid, start: int, path: Sequence[Direction]) -> int:
    """Walk `path` from `start` and return the cell it ends on."""

    x, y = grid.coordinates(start)
    for step, direction in enumerate(path):
        direction = Direction(direction)
        if not grid.can_travel(x, y, direction):
            raise BrokenPreconditionError(f"step {step} ({direction.name}) from ({x}, {y}) hits a wall")
        x, y = x + direction.dx, y + direction.dy
    return y * grid.width + x


__all__ = ["MazeSolution", "MazeSolver", "follow_path"]
