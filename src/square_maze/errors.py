"""Exceptions raised by the maze library."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error raised by :mod:square_maze."""


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class OutOfRangeIndexError(MazeError, IndexError):
    """Raised when an element or cell index lies outside the tracked universe."""


class BrokenPreconditionError(MazeError, RuntimeError):
    """Raised when an operation runs against a grid in the wrong state."""


__all__ = [
    "MazeError",
    "InvalidDimensionError",
    "OutOfRangeIndexError",
    "BrokenPreconditionError",
]
