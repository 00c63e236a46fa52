"""Exceptions raised by the path search engine."""

from __future__ import annotations

from .coords import Coordinate


class PathfindingError(Exception):
    """Base class for every error raised by :mod:`gridpath`."""


class OutOfBoundsError(PathfindingError, ValueError):
    """A cell supplied by the caller lies outside the grid."""

    def __init__(self, cell: Coordinate, width: int, height: int, role: str = "cell") -> None:
        self.cell = cell
        self.width = width
        self.height = height
        self.role = role
        super().__init__(
            f"{role} ({cell.x}, {cell.y}) is outside the {width}x{height} grid"
        )


class NoPathFoundError(PathfindingError, LookupError):
    """The open set ran out before the goal was reached."""

    def __init__(self, start: Coordinate, end: Coordinate) -> None:
        self.start = start
        self.end = end
        super().__init__(f"no path from ({start.x}, {start.y}) to ({end.x}, {end.y})")


class FrontierExhaustedError(PathfindingError):
    """Raised by the frontier when asked for a cell while the open set is empty."""


class GridInvariantError(PathfindingError, RuntimeError):
    """Internal consistency failure; indicates a bug rather than bad input."""


__all__ = [
    "FrontierExhaustedError",
    "GridInvariantError",
    "NoPathFoundError",
    "OutOfBoundsError",
    "PathfindingError",
]
