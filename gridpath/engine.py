"""
Public entry point for grid path searches.

Usage:
    engine = SearchEngine.create("square", 7, 7).mark_obstacles((1, 2), (2, 1))
    route = engine.find_path((0, 1), (5, 2))
    for cell in route:
        print(cell.x, cell.y, cell.z)
"""

from __future__ import annotations

import logging
from typing import List

from .astar import SearchResult, run_search
from .config import ExpansionPolicy, ReconstructionMode, SearchConfig, Topology
from .coords import Coordinate, CoordinateLike
from .errors import NoPathFoundError
from .graph import PassabilityGraph, build_passability_graph
from .grid import GridIndex
from .heuristics import heuristic_for
from .neighbors import adjacent

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Grid path search facade.

    - Owns the grid and its obstacles.
    - Runs each search on fresh frontier state, so repeated calls agree.
    - Not safe to share between threads; use one engine per caller.
    """

    def __init__(
        self,
        topology: Topology | str,
        width: int,
        height: int,
        *,
        expansion: ExpansionPolicy | str = ExpansionPolicy.OVERWRITE,
        reconstruction: ReconstructionMode | str = ReconstructionMode.PARENT_LINKS,
    ) -> None:
        self.topology = Topology(topology)
        self.expansion = ExpansionPolicy(expansion)
        self.reconstruction = ReconstructionMode(reconstruction)
        self.grid = GridIndex(width, height)

    # --------- Construction ---------

    @classmethod
    def create(
        cls,
        topology: Topology | str,
        width: int,
        height: int,
        *,
        expansion: ExpansionPolicy | str = ExpansionPolicy.OVERWRITE,
        reconstruction: ReconstructionMode | str = ReconstructionMode.PARENT_LINKS,
    ) -> SearchEngine:
        return cls(topology, width, height, expansion=expansion, reconstruction=reconstruction)

    @classmethod
    def from_config(cls, config: SearchConfig) -> SearchEngine:
        engine = cls(
            config.topology,
            config.width,
            config.height,
            expansion=config.expansion,
            reconstruction=config.reconstruction,
        )
        return engine.mark_obstacles(*config.obstacles)

    def mark_obstacles(self, *cells: CoordinateLike) -> SearchEngine:
        """Flag ``cells`` as impassable. Raises ``OutOfBoundsError`` for cells off the grid."""
        self.grid.mark_obstacles(*cells)
        return self

    # --------- Public API ---------

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def search(self, start: CoordinateLike, end: CoordinateLike) -> SearchResult:
        return run_search(
            self.grid,
            start,
            end,
            topology=self.topology,
            expansion=self.expansion,
            reconstruction=self.reconstruction,
        )

    def find_path(self, start: CoordinateLike, end: CoordinateLike) -> List[Coordinate]:
        """
        Route from ``start`` to ``end``, both endpoints included.

        Raises ``OutOfBoundsError`` if either endpoint is off the grid and
        ``NoPathFoundError`` if the goal cannot be reached.
        """
        result = self.search(start, end)
        if not result.found:
            logger.info("no path from %s to %s", result.start.key, result.goal.key)
            raise NoPathFoundError(result.start, result.goal)
        return list(result.path)

    # --------- Helpers ---------

    def heuristic(self, a: CoordinateLike, b: CoordinateLike) -> int:
        return heuristic_for(self.topology)(Coordinate.of(a), Coordinate.of(b))

    def adjacent(self, cell: CoordinateLike) -> List[Coordinate]:
        return adjacent(self.grid, self.grid.require(cell), self.topology)

    def graph(self) -> PassabilityGraph:
        return build_passability_graph(self.grid, self.topology)

    def __repr__(self) -> str:
        return (
            f"SearchEngine(topology={self.topology.value!r}, width={self.width}, "
            f"height={self.height}, obstacles={len(self.grid.obstacles)})"
        )
