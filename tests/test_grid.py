import pytest

from gridpath import Coordinate, GridIndex, OutOfBoundsError


def test_one_cell_per_position():
    grid = GridIndex(4, 3)
    assert len(grid) == 12
    assert {(c.x, c.y) for c in grid.cells()} == {(x, y) for x in range(4) for y in range(3)}


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3), (9, 9)])
def test_lookup_outside_grid_is_absent(x: int, y: int):
    grid = GridIndex(4, 3)
    assert grid.lookup(x, y) is None
    assert not grid.contains((x, y))


def test_require_returns_indexed_cell():
    grid = GridIndex(2, 2)
    cell = grid.require((1, 1))
    assert cell is grid.lookup(1, 1)


def test_mark_obstacles_is_chainable():
    grid = GridIndex(3, 3)
    assert grid.mark_obstacles((1, 1)).mark_obstacles(Coordinate(2, 0)) is grid
    assert grid.obstacles == {Coordinate(1, 1), Coordinate(2, 0)}
    assert grid.is_obstacle(Coordinate(1, 1))
    assert not grid.is_obstacle(Coordinate(0, 0))


def test_mark_obstacles_outside_grid_raises_and_leaves_grid_untouched():
    grid = GridIndex(3, 3)
    with pytest.raises(OutOfBoundsError) as excinfo:
        grid.mark_obstacles((1, 1), (3, 0))
    assert excinfo.value.role == "obstacle"
    assert excinfo.value.cell == Coordinate(3, 0)
    assert grid.obstacles == frozenset()


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, -1)])
def test_dimensions_must_be_positive(width: int, height: int):
    with pytest.raises(ValueError):
        GridIndex(width, height)
