"""Wall storage and adjacency queries for a rectangular maze."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Tuple

import numpy as np

from .errors import InvalidDimensionError, OutOfRangeIndexError


RIGHT_WALL = 0x01
DOWN_WALL = 0x02
ALL_WALLS = RIGHT_WALL | DOWN_WALL

DX = (1, 0, -1, 0)
DY = (0, 1, 0, -1)


class Direction(IntEnum):
    """Movement directions in the order used everywhere in the package."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def dx(self) -> int:
        return DX[self]

    @property
    def dy(self) -> int:
        return DY[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Direction":
        for direction in cls:
            if direction.dx == dx and direction.dy == dy:
                return direction
        raise ValueError(f"({dx}, {dy}) is not a unit step")


class MazeGrid:
    """Right/down walls of a `width` x `height` grid packed two bits per cell.

    Left and up walls are never stored: the left wall of ``(x, y)`` is the
    right wall of ``(x - 1, y)`` and the up wall is the down wall of
    ``(x, y - 1)``.
    """

    def __init__(self, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDimensionError(f"{name} must be positive, got {value}")
        self.width = int(width)
        self.height = int(height)
        self.walls = np.full(self.width * self.height, ALL_WALLS, dtype=np.uint8)

    def __len__(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, height={self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfRangeIndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def coordinates(self, index: int) -> Tuple[int, int]:
        if not 0 <= index < len(self):
            raise OutOfRangeIndexError(f"cell index {index} outside 0..{len(self) - 1}")
        return index % self.width, index // self.width

    def set_wall(self, x: int, y: int, direction: Direction, present: bool) -> None:
        """Set or clear one side of ``(x, y)``; out-of-range cells are ignored."""

        direction = Direction(direction)
        if direction is Direction.LEFT:
            x, direction = x - 1, Direction.RIGHT
        elif direction is Direction.UP:
            y, direction = y - 1, Direction.DOWN
        if not self.in_bounds(x, y):
            return
        bit = RIGHT_WALL if direction is Direction.RIGHT else DOWN_WALL
        cell = y * self.width + x
        if present:
            self.walls[cell] |= bit
        else:
            self.walls[cell] &= ~bit & ALL_WALLS

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        """Return whether side `direction` of ``(x, y)`` is closed.

        The outer border always counts as a wall.
        """

        self.index(x, y)
        direction = Direction(direction)
        nx, ny = x + direction.dx, y + direction.dy
        if not self.in_bounds(nx, ny):
            return True
        if direction is Direction.RIGHT:
            return bool(self.walls[y * self.width + x] & RIGHT_WALL)
        if direction is Direction.DOWN:
            return bool(self.walls[y * self.width + x] & DOWN_WALL)
        if direction is Direction.LEFT:
            return bool(self.walls[ny * self.width + nx] & RIGHT_WALL)
        return bool(self.walls[ny * self.width + nx] & DOWN_WALL)

    def can_travel(self, x: int, y: int, direction: Direction) -> bool:
        if not self.in_bounds(x, y):
            return False
        return not self.has_wall(x, y, direction)

    def wall_mask(self, x: int, y: int) -> int:
        """Return the raw mask of ``(x, y)``: bit 0 right wall, bit 1 down wall."""

        return int(self.walls[self.index(x, y)])

    def neighbors(self, index: int) -> Iterator[Tuple[Direction, int]]:
        x, y = self.coordinates(index)
        for direction in Direction:
            if self.can_travel(x, y, direction):
                yield direction, (y + direction.dy) * self.width + x + direction.dx

    def removed_wall_count(self) -> int:
        """Count the interior walls that are currently open."""

        mask = self.walls.reshape(self.height, self.width)
        right_open = np.count_nonzero((mask[:, :-1] & RIGHT_WALL) == 0)
        down_open = np.count_nonzero((mask[:-1, :] & DOWN_WALL) == 0)
        return int(right_open + down_open)

    def is_pristine(self) -> bool:
        """Return True while every wall is still present."""

        return bool(np.all(self.walls == ALL_WALLS))


__all__ = [
    "ALL_WALLS",
    "DOWN_WALL",
    "DX",
    "DY",
    "Direction",
    "MazeGrid",
    "RIGHT_WALL",
]
