from __future__ import annotations

from typing import Callable

from .config import Topology
from .coords import Coordinate

Heuristic = Callable[[Coordinate, Coordinate], int]


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def hex_distance(a: Coordinate, b: Coordinate) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


def heuristic_for(topology: Topology) -> Heuristic:
    if topology == Topology.SQUARE:
        return manhattan_distance
    if topology == Topology.HEX:
        return hex_distance
    raise ValueError(f"Unknown topology: {topology!r}")
