"""Convenience helpers for generating and solving a maze end-to-end."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Optional

from .maze import SquareMaze
from .solver import MazeSolution


@dataclass
class MazeConfig:
    """Configuration parameters for :func:build_and_solve."""

    width: int = 10
    height: int = 10
    start_x: int = 0
    seed: int | None = None
    use_tqdm: bool = False
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.seed is None and os.getenv("MAZE_SEED"):
            self.seed = int(os.environ["MAZE_SEED"])


@dataclass
class MazeStats:
    """Summary metrics for one generate-and-solve run."""

    width: int
    height: int
    cells: int
    removed_walls: int
    path_length: int
    exit: int
    runtime_seconds: float


@dataclass
class MazeRunResult:
    """Result bundle returned by :func:build_and_solve."""

    maze: SquareMaze
    solution: MazeSolution
    stats: MazeStats


def build_and_solve(config: Optional[MazeConfig] = None) -> MazeRunResult:
    """Generate a maze from `config` and solve it from its entrance column."""

    config = config or MazeConfig()
    verbose = config.verbose
    overall_start_time = time.time()
    if verbose:
        print("--- Maze Build Started ---")
        print(f"\n1. Generating a {config.width}x{config.height} maze (seed={config.seed})...")

    t0 = time.time()
    maze = SquareMaze()
    maze.make_maze(config.width, config.height, rng=config.seed, use_tqdm=config.use_tqdm, verbose=verbose)
    removed = maze.grid.removed_wall_count()
    if verbose:
        print(f"   Done in {time.time() - t0:.2f}s")

    t0 = time.time()
    if verbose:
        print(f"2. Solving from entrance column {config.start_x}...")
    solution = maze.solve(config.start_x)
    exit_x, exit_y = maze.grid.coordinates(solution.exit)
    if verbose:
        print(f"   Exit at ({exit_x}, {exit_y}), path length {solution.length}.")
        print(f"   Done in {time.time() - t0:.2f}s")

    elapsed = time.time() - overall_start_time
    stats = MazeStats(
        width=maze.width,
        height=maze.height,
        cells=maze.width * maze.height,
        removed_walls=removed,
        path_length=solution.length,
        exit=solution.exit,
        runtime_seconds=elapsed,
    )
    if verbose:
        print(f"\n--- Maze Build Finished in {elapsed:.2f} seconds ---")
    return MazeRunResult(maze=maze, solution=solution, stats=stats)
