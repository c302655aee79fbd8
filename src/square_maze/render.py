"""Plain text drawing of a maze."""

from __future__ import annotations

from typing import List, Set

from .grid import Direction, MazeGrid
from .maze import SquareMaze
from .solver import MazeSolution


def render_text(
    maze: SquareMaze | MazeGrid,
    start_x: int | None = None,
    solution: MazeSolution | None = None,
) -> str:
    """Draw `maze` with ``+--+`` corners and ``|`` walls.

    The top border is left open above `start_x`. When `solution` is given its
    cells are marked ``**`` and the bottom border under its exit is opened.
    """

    grid = maze.grid if isinstance(maze, SquareMaze) else maze
    if grid is None:
        return ""

    on_path = _path_cells(grid, solution) if solution is not None else set()
    exit_cell = solution.exit if solution is not None else None

    top = "+" + "".join(("  " if x == start_x else "--") + "+" for x in range(grid.width))
    lines: List[str] = [top]
    for y in range(grid.height):
        row = ["|"]
        below = ["+"]
        for x in range(grid.width):
            cell = y * grid.width + x
            row.append("**" if cell in on_path else "  ")
            row.append("|" if grid.has_wall(x, y, Direction.RIGHT) else " ")
            closed = grid.has_wall(x, y, Direction.DOWN) and cell != exit_cell
            below.append("--+" if closed else "  +")
        lines.append("".join(row))
        lines.append("".join(below))
    return "\n".join(lines)


def _path_cells(grid: MazeGrid, solution: MazeSolution) -> Set[int]:
    x, y = grid.coordinates(solution.start)
    cells = {solution.start}
    for direction in solution.path:
        x, y = x + direction.dx, y + direction.dy
        cells.add(y * grid.width + x)
    return cells


__all__ = ["render_text"]
