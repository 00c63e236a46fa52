from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import ExpansionPolicy, ReconstructionMode, Topology
from .coords import Coordinate, CoordinateLike
from .errors import FrontierExhaustedError
from .frontier import Frontier
from .grid import GridIndex
from .heuristics import heuristic_for
from .neighbors import resolver_for
from .reconstruct import from_parents, min_g_walk

logger = logging.getLogger(__name__)


class SearchState(Enum):
    SEEDED = "seeded"
    EXPANDING = "expanding"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one search.

    ``path`` runs from start to goal inclusive and ``costs`` holds the G value
    of each cell on it.  Both are empty when the search was exhausted.

    With parent links ``costs`` rises by exactly one per step.  The minimum-G
    walk only guarantees that it strictly increases: under the overwrite
    policy a cell next to the start can carry a G larger than 1, so a step may
    jump by more than one.
    """

    state: SearchState
    start: Coordinate
    goal: Coordinate
    path: Tuple[Coordinate, ...] = ()
    costs: Tuple[int, ...] = ()
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND

    @property
    def steps(self) -> int:
        return max(len(self.path) - 1, 0)


def run_search(
    grid: GridIndex,
    start: CoordinateLike,
    goal: CoordinateLike,
    *,
    topology: Topology = Topology.SQUARE,
    expansion: ExpansionPolicy = ExpansionPolicy.OVERWRITE,
    reconstruction: ReconstructionMode = ReconstructionMode.PARENT_LINKS,
) -> SearchResult:
    """A* from ``start`` to ``goal`` with unit step costs.

    Raises :class:`~gridpath.errors.OutOfBoundsError` if either endpoint is
    outside the grid.  An unreachable goal is reported through
    ``SearchState.EXHAUSTED`` rather than an exception.
    """
    topology = Topology(topology)
    start_cell = grid.require(start, "start")
    goal_cell = grid.require(goal, "end")
    frontier = Frontier(
        grid,
        goal_cell,
        resolver_for(grid, topology),
        heuristic_for(topology),
        policy=expansion,
    )
    frontier.seed(start_cell)
    state = SearchState.SEEDED
    logger.debug(
        "%s search %s -> %s on %s grid %dx%d",
        state.value,
        start_cell.key,
        goal_cell.key,
        topology.value,
        grid.width,
        grid.height,
    )

    state = SearchState.EXPANDING
    while state is SearchState.EXPANDING:
        try:
            current = frontier.select_best()
        except FrontierExhaustedError:
            state = SearchState.EXHAUSTED
            break
        if current == goal_cell:
            state = SearchState.FOUND
            break
        frontier.close(current)
        frontier.expand(current)

    if state is SearchState.EXHAUSTED:
        logger.debug("search exhausted after expanding %d cells", frontier.expanded)
        return SearchResult(state, start_cell, goal_cell, expanded=frontier.expanded)

    # the goal is closed without being expanded
    frontier.close(goal_cell)
    if reconstruction == ReconstructionMode.MIN_G_WALK:
        path = min_g_walk(frontier, start_cell, goal_cell)
    else:
        path = from_parents(frontier, start_cell, goal_cell)
    logger.debug(
        "search found %d-step route after expanding %d cells",
        len(path) - 1,
        frontier.expanded,
    )
    return SearchResult(
        state,
        start_cell,
        goal_cell,
        path=tuple(path),
        costs=tuple(frontier.g(cell) for cell in path),
        expanded=frontier.expanded,
    )
