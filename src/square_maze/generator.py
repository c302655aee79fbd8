"""Randomized Kruskal maze generation."""

from __future__ import annotations

import time
from typing import List, Tuple

import numpy as np
from tqdm import tqdm

from .errors import BrokenPreconditionError
from .grid import Direction, MazeGrid
from .structures import DisjointSet


def make_rng(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return `seed` if it already is a Generator, otherwise seed a new one."""

    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def candidate_edges(width: int, height: int) -> List[Tuple[int, int]]:
    """Every interior wall as a ``(cell, right or down neighbour)`` index pair."""

    edges: List[Tuple[int, int]] = []
    for y in range(height):
        for x in range(width):
            cell = y * width + x
            if x < width - 1:
                edges.append((cell, cell + 1))
            if y < height - 1:
                edges.append((cell, cell + width))
    return edges


class MazeGenerator:
    """Carve a spanning tree into a :class:MazeGrid."""

    def __init__(
        self,
        rng: int | np.random.Generator | None = None,
        use_tqdm: bool = False,
        verbose: bool = False,
    ) -> None:
        self.rng = make_rng(rng)
        self.use_tqdm = use_tqdm
        self.verbose = verbose

    def generate(self, grid: MazeGrid) -> int:
        """Remove walls from `grid` until it is a spanning tree; return how many."""

        if not grid.is_pristine():
            raise BrokenPreconditionError("maze generation needs a grid with every wall present")

        width, height = grid.width, grid.height
        verbose = self.verbose

        t0 = time.time()
        if verbose:
            print(f"   Building candidate walls for a {width}x{height} grid...")
        edges = candidate_edges(width, height)
        order = self.rng.permutation(len(edges))
        if verbose:
            print(f"   {len(edges)} candidate walls shuffled in {time.time() - t0:.2f}s")

        t0 = time.time()
        cells = DisjointSet(width * height)
        removed = 0
        for position in tqdm(order, desc="   Carving walls", unit="wall", disable=not self.use_tqdm):
            cell_a, cell_b = edges[position]
            if cells.find(cell_a) == cells.find(cell_b):
                continue
            x, y = cell_a % width, cell_a // width
            direction = Direction.DOWN if cell_b % width == x else Direction.RIGHT
            grid.set_wall(x, y, direction, False)
            cells.union(cell_a, cell_b)
            removed += 1

        opened = grid.removed_wall_count()
        if opened != width * height - 1:
            raise BrokenPreconditionError(
                f"generation opened {opened} walls, expected {width * height - 1}"
            )
        if verbose:
            print(f"   Removed {removed} walls. Done in {time.time() - t0:.2f}s")
        return removed


__all__ = ["MazeGenerator", "candidate_edges", "make_rng"]
