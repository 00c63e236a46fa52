"""Open/closed bookkeeping for a single A* search.

Cost-so-far (G) and parent links live in side tables keyed by coordinate,
so the coordinates themselves stay immutable and can be shared freely
between the open set, the closed set and the returned route.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Tuple

from .config import ExpansionPolicy
from .coords import Coordinate
from .errors import FrontierExhaustedError, GridInvariantError
from .grid import GridIndex
from .heuristics import Heuristic
from .neighbors import Resolver


class Frontier:
    """Open set, closed set and G table for one search towards ``goal``.

    ``select_best`` ranks open cells by ``F = G + H``; ties prefer the larger
    G (the cell closer to the goal), then the cell opened first.  A cell found
    again while still open keeps the rank of its first discovery.  The open set
    is a heap with lazy invalidation: every (re)discovery pushes a fresh entry
    and only the latest version per cell counts.
    """

    def __init__(
        self,
        grid: GridIndex,
        goal: Coordinate,
        neighbors: Resolver,
        heuristic: Heuristic,
        *,
        policy: ExpansionPolicy = ExpansionPolicy.OVERWRITE,
    ) -> None:
        self.grid = grid
        self.goal = goal
        self.neighbors = neighbors
        self.heuristic = heuristic
        self.policy = policy
        self._heap: List[Tuple[int, int, int, int, Coordinate]] = []
        self._latest: Dict[Coordinate, int] = {}
        self._rank: Dict[Coordinate, int] = {}
        self._push_id = 0
        self._version = 0
        self._g: Dict[Coordinate, int] = {}
        self._parent: Dict[Coordinate, Coordinate] = {}
        self._closed: Dict[Coordinate, None] = {}

    # --------- Open set -------------------------------------------------------

    def seed(self, start: Coordinate) -> None:
        self._g[start] = 0
        self._push(start)

    def _push(self, cell: Coordinate) -> None:
        g = self._g[cell]
        f = g + self.heuristic(cell, self.goal)
        if cell not in self._latest:
            self._push_id += 1
            self._rank[cell] = self._push_id
        self._version += 1
        self._latest[cell] = self._version
        heapq.heappush(self._heap, (f, -g, self._rank[cell], self._version, cell))

    def _discard_stale(self) -> None:
        while self._heap:
            _, _, _, version, cell = self._heap[0]
            if self._latest.get(cell) == version:
                return
            heapq.heappop(self._heap)

    def select_best(self) -> Coordinate:
        """Return the open cell with the lowest F without removing it."""
        self._discard_stale()
        if not self._heap:
            raise FrontierExhaustedError("open set is empty")
        return self._heap[0][4]

    def close(self, cell: Coordinate) -> None:
        self._latest.pop(cell, None)
        self._rank.pop(cell, None)
        self._closed[cell] = None

    def expand(self, cell: Coordinate) -> List[Coordinate]:
        """Open every passable, unclosed neighbor of ``cell``; return those touched."""
        if cell not in self._g:
            raise GridInvariantError(f"cannot expand ({cell.x}, {cell.y}) before it is reached")
        step = self._g[cell] + 1
        touched: List[Coordinate] = []
        for n in self.neighbors(cell):
            if self.grid.is_obstacle(n) or n in self._closed:
                continue
            if self.policy == ExpansionPolicy.RELAX and n in self._latest and self._g[n] <= step:
                continue
            self._g[n] = step
            self._parent[n] = cell
            self._push(n)
            touched.append(n)
        return touched

    # --------- Queries --------------------------------------------------------

    def g(self, cell: Coordinate) -> int:
        return self._g[cell]

    def parent(self, cell: Coordinate) -> Coordinate | None:
        return self._parent.get(cell)

    def is_open(self, cell: Coordinate) -> bool:
        return cell in self._latest

    def is_closed(self, cell: Coordinate) -> bool:
        return cell in self._closed

    def open_cells(self) -> List[Coordinate]:
        return list(self._latest)

    def closed_cells(self) -> List[Coordinate]:
        return list(self._closed)

    @property
    def expanded(self) -> int:
        return len(self._closed)

    def __len__(self) -> int:
        return len(self._latest)
