from __future__ import annotations

from typing import List

from .coords import Coordinate
from .errors import GridInvariantError
from .frontier import Frontier


def from_parents(frontier: Frontier, start: Coordinate, goal: Coordinate) -> List[Coordinate]:
    """Follow recorded parent links from ``goal`` back to ``start``."""
    rev = [goal]
    current = goal
    while current != start:
        prev = frontier.parent(current)
        if prev is None:
            raise GridInvariantError(
                f"({current.x}, {current.y}) has no parent on the way back to the start"
            )
        rev.append(prev)
        current = prev
    rev.reverse()
    return rev


def min_g_walk(frontier: Frontier, start: Coordinate, goal: Coordinate) -> List[Coordinate]:
    """Rebuild the route without parent links.

    From the goal, repeatedly step to the adjacent closed cell with the lowest
    G that is not already on the route, until the start is reached.  When
    several neighbors share the lowest G the first one in neighbor order wins,
    so the route is deterministic but not the only optimal one.
    """
    route = [goal]
    seen = {goal}
    current = goal
    while current != start:
        candidates = [
            n for n in frontier.neighbors(current) if frontier.is_closed(n) and n not in seen
        ]
        if not candidates:
            raise GridInvariantError(
                f"backward walk stalled at ({current.x}, {current.y})"
            )
        current = min(candidates, key=frontier.g)
        seen.add(current)
        route.append(current)
    # G strictly decreases along the walk
    route.sort(key=frontier.g)
    return route
