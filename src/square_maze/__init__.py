"""Square maze library initialization."""

from .errors import BrokenPreconditionError, InvalidDimensionError, MazeError, OutOfRangeIndexError
from .generator import MazeGenerator, candidate_edges, make_rng
from .grid import Direction, MazeGrid
from .maze import SquareMaze
from .render import render_text
from .runner import MazeConfig, MazeRunResult, MazeStats, build_and_solve
from .solver import MazeSolution, MazeSolver, follow_path
from .structures import DisjointSet

__all__ = [
    "BrokenPreconditionError",
    "Direction",
    "DisjointSet",
    "InvalidDimensionError",
    "MazeConfig",
    "MazeError",
    "MazeGenerator",
    "MazeGrid",
    "MazeRunResult",
    "MazeSolution",
    "MazeSolver",
    "MazeStats",
    "OutOfRangeIndexError",
    "SquareMaze",
    "build_and_solve",
    "candidate_edges",
    "follow_path",
    "make_rng",
    "render_text",
]
