import pytest

from square_maze.errors import InvalidDimensionError, OutOfRangeIndexError
from square_maze.grid import ALL_WALLS, DOWN_WALL, RIGHT_WALL, Direction, MazeGrid


def test_direction_deltas_and_opposites():
    assert [(d.dx, d.dy) for d in Direction] == [(1, 0), (0, 1), (-1, 0), (0, -1)]
    assert Direction.RIGHT.opposite is Direction.LEFT
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.from_delta(0, -1) is Direction.UP
    with pytest.raises(ValueError):
        Direction.from_delta(1, 1)


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-2, 2), (2.5, 2)])
def test_invalid_dimensions_rejected(width, height):
    with pytest.raises(InvalidDimensionError):
        MazeGrid(width, height)


def test_new_grid_has_every_wall():
    grid = MazeGrid(3, 2)
    assert grid.is_pristine()
    assert all(grid.wall_mask(x, y) == ALL_WALLS for x in range(3) for y in range(2))
    assert grid.removed_wall_count() == 0
    assert not any(grid.can_travel(x, y, d) for x in range(3) for y in range(2) for d in Direction)


def test_left_and_up_walls_map_to_neighbours():
    grid = MazeGrid(3, 3)
    grid.set_wall(1, 1, Direction.LEFT, False)
    assert grid.wall_mask(0, 1) == DOWN_WALL
    grid.set_wall(1, 1, Direction.UP, False)
    assert grid.wall_mask(1, 0) == RIGHT_WALL
    assert grid.can_travel(1, 1, Direction.LEFT)
    assert grid.can_travel(0, 1, Direction.RIGHT)
    assert grid.can_travel(1, 0, Direction.DOWN)
    assert grid.removed_wall_count() == 2

    grid.set_wall(0, 1, Direction.RIGHT, True)
    assert not grid.can_travel(1, 1, Direction.LEFT)


def test_out_of_bounds_set_wall_is_ignored():
    grid = MazeGrid(2, 2)
    grid.set_wall(5, 5, Direction.RIGHT, False)
    grid.set_wall(0, 0, Direction.LEFT, False)
    grid.set_wall(0, 0, Direction.UP, False)
    assert grid.is_pristine()


def test_border_blocks_travel_even_without_stored_wall():
    grid = MazeGrid(2, 1)
    grid.set_wall(1, 0, Direction.RIGHT, False)
    grid.set_wall(0, 0, Direction.DOWN, False)
    assert not grid.can_travel(1, 0, Direction.RIGHT)
    assert not grid.can_travel(0, 0, Direction.DOWN)
    assert grid.removed_wall_count() == 0


def test_can_travel_outside_grid_is_false():
    grid = MazeGrid(2, 2)
    assert not grid.can_travel(-1, 0, Direction.RIGHT)
    assert not grid.can_travel(0, 2, Direction.UP)


def test_index_queries_out_of_range_raise():
    grid = MazeGrid(2, 2)
    with pytest.raises(OutOfRangeIndexError):
        grid.wall_mask(2, 0)
    with pytest.raises(OutOfRangeIndexError):
        grid.index(0, -1)
    with pytest.raises(OutOfRangeIndexError):
        grid.coordinates(4)
    assert grid.index(1, 1) == 3
    assert grid.coordinates(2) == (0, 1)


def test_neighbors_follow_direction_order():
    grid = MazeGrid(3, 3)
    center = grid.index(1, 1)
    for direction in Direction:
        grid.set_wall(1, 1, direction, False)
    assert list(grid.neighbors(center)) == [
        (Direction.RIGHT, 5),
        (Direction.DOWN, 7),
        (Direction.LEFT, 3),
        (Direction.UP, 1),
    ]
