import logging

import pytest

from gridpath import Coordinate, GridIndex, OutOfBoundsError, ReconstructionMode, SearchState
from gridpath import Topology, run_search


def test_astar_open_square_grid():
    result = run_search(GridIndex(3, 3), (0, 0), (2, 2))
    assert result.state is SearchState.FOUND
    assert result.found
    assert result.path == (
        Coordinate(0, 0),
        Coordinate(0, 1),
        Coordinate(0, 2),
        Coordinate(1, 2),
        Coordinate(2, 2),
    )
    assert result.costs == (0, 1, 2, 3, 4)
    assert result.steps == 4


def test_astar_hex_straight_line():
    result = run_search(GridIndex(3, 3), (0, 0), (2, 0), topology=Topology.HEX)
    assert result.path == (Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0))
    assert result.steps == 2


def test_astar_wall_exhausts_frontier():
    grid = GridIndex(3, 3).mark_obstacles((0, 1), (1, 1), (2, 1))
    result = run_search(grid, (0, 0), (0, 2))
    assert result.state is SearchState.EXHAUSTED
    assert not result.found
    assert result.path == ()
    assert result.costs == ()
    assert result.steps == 0
    # only the bottom row is reachable
    assert result.expanded == 3


def test_astar_obstacle_goal_is_unreachable():
    grid = GridIndex(3, 3).mark_obstacles((2, 2))
    assert run_search(grid, (0, 0), (2, 2)).state is SearchState.EXHAUSTED


def test_astar_start_equals_goal():
    result = run_search(GridIndex(3, 3), (1, 1), (1, 1), topology=Topology.HEX)
    assert result.found
    assert result.path == (Coordinate(1, 1),)
    assert result.costs == (0,)


@pytest.mark.parametrize("role, start, goal", [("start", (3, 0), (0, 0)), ("end", (0, 0), (0, -1))])
def test_astar_rejects_endpoints_outside_grid(role, start, goal):
    with pytest.raises(OutOfBoundsError) as excinfo:
        run_search(GridIndex(3, 3), start, goal)
    assert excinfo.value.role == role


WALL_A = [(1, 2), (2, 1), (3, 0)]
WALL_B = [(1, 2), (3, 2), (3, 4), (4, 3)]

ROUTE_CASES = [
    (
        Topology.SQUARE,
        WALL_A,
        (0, 1),
        (5, 2),
        [(0, 1), (0, 2), (0, 3), (1, 3), (2, 3), (2, 2), (3, 2), (4, 2), (5, 2)],
        [(0, 1), (0, 2), (0, 3), (1, 3), (2, 3), (2, 2), (3, 2), (4, 2), (5, 2)],
    ),
    (
        Topology.SQUARE,
        WALL_B,
        (1, 3),
        (5, 2),
        [(1, 3), (2, 3), (2, 2), (2, 1), (3, 1), (4, 1), (4, 2), (5, 2)],
        [(1, 3), (2, 3), (2, 2), (2, 1), (3, 1), (4, 1), (4, 2), (5, 2)],
    ),
    (
        Topology.HEX,
        WALL_A,
        (0, 1),
        (5, 2),
        [(0, 1), (0, 2), (0, 3), (1, 3), (2, 3), (3, 3), (4, 3), (5, 2)],
        [(0, 1), (1, 1), (0, 2), (0, 3), (1, 3), (2, 3), (3, 3), (4, 3), (5, 2)],
    ),
    (
        Topology.HEX,
        WALL_B,
        (1, 3),
        (5, 2),
        [(1, 3), (2, 3), (3, 3), (4, 2), (5, 2)],
        [(1, 3), (2, 3), (3, 3), (4, 2), (5, 2)],
    ),
]


@pytest.mark.parametrize(
    ("topology", "blocked", "start", "goal", "walked", "linked"),
    ROUTE_CASES,
    ids=["square-a", "square-b", "hex-a", "hex-b"],
)
def test_astar_exact_routes_per_reconstruction(topology, blocked, start, goal, walked, linked):
    grid = GridIndex(7, 7).mark_obstacles(*blocked)
    by_walk = run_search(
        grid, start, goal, topology=topology, reconstruction=ReconstructionMode.MIN_G_WALK
    )
    by_parent = run_search(grid, start, goal, topology=topology)
    assert [(c.x, c.y) for c in by_walk.path] == walked
    assert [(c.x, c.y) for c in by_parent.path] == linked
    assert list(by_walk.costs) == sorted(set(by_walk.costs))
    assert list(by_parent.costs) == list(range(len(linked)))


def test_astar_min_g_walk_costs_may_skip_near_the_start():
    grid = GridIndex(7, 7).mark_obstacles(*WALL_A)
    result = run_search(
        grid, (0, 1), (5, 2), topology=Topology.HEX, reconstruction=ReconstructionMode.MIN_G_WALK
    )
    # (0, 2) was last reached through (1, 1), not from the start
    assert result.costs == (0, 2, 3, 4, 5, 6, 7, 8)


def test_astar_logs_outcome(caplog):
    with caplog.at_level(logging.DEBUG, logger="gridpath.astar"):
        run_search(GridIndex(3, 3), (0, 0), (2, 2))
    messages = [record.getMessage() for record in caplog.records]
    assert any("search 0:0 -> 2:2" in m for m in messages)
    assert any("4-step route" in m for m in messages)
