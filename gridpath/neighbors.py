from __future__ import annotations

from typing import Callable, Iterable, List

from .config import Topology
from .coords import Coordinate
from .grid import GridIndex

# up, down, left, right
_SQUARE_DIRS = (
    (0, +1),
    (0, -1),
    (-1, 0),
    (+1, 0),
)

# the six cube directions; z follows from x and y
# left, left-bottom, left-top, right, right-bottom, right-top
_HEX_DIRS = (
    (-1, 0),
    (0, -1),
    (-1, +1),
    (+1, 0),
    (+1, -1),
    (0, +1),
)

Resolver = Callable[[Coordinate], List[Coordinate]]


def neighbors_square(c: Coordinate) -> Iterable[Coordinate]:
    for dx, dy in _SQUARE_DIRS:
        yield c.offset(dx, dy)


def neighbors_hex(c: Coordinate) -> Iterable[Coordinate]:
    for dx, dy in _HEX_DIRS:
        yield c.offset(dx, dy)


def _unbounded(topology: Topology) -> Callable[[Coordinate], Iterable[Coordinate]]:
    if topology == Topology.SQUARE:
        return neighbors_square
    if topology == Topology.HEX:
        return neighbors_hex
    raise ValueError(f"Unknown topology: {topology!r}")


def adjacent(grid: GridIndex, c: Coordinate, topology: Topology) -> List[Coordinate]:
    """In-grid neighbors of ``c``, resolved through ``grid``.

    Obstacles and search state are not considered here.
    """
    return resolver_for(grid, topology)(c)


def resolver_for(grid: GridIndex, topology: Topology) -> Resolver:
    step = _unbounded(topology)

    def resolve(c: Coordinate) -> List[Coordinate]:
        out: List[Coordinate] = []
        for n in step(c):
            found = grid.lookup(n.x, n.y)
            if found is not None:
                out.append(found)
        return out

    return resolve
