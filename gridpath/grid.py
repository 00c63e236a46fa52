from __future__ import annotations

from typing import Dict, Iterator, Tuple

from .coords import Coordinate, CoordinateLike
from .errors import OutOfBoundsError


class GridIndex:
    """Dense index of every cell in a ``width x height`` rectangle.

    The index owns one :class:`Coordinate` per cell and the obstacle flags.
    Searches only hold references into it.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells: Dict[Tuple[int, int], Coordinate] = {}
        self._obstacles: set[Coordinate] = set()
        for x in range(width):
            for y in range(height):
                self._cells[(x, y)] = Coordinate(x, y)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        if isinstance(cell, Coordinate):
            return (cell.x, cell.y) in self._cells
        return False

    def lookup(self, x: int, y: int) -> Coordinate | None:
        return self._cells.get((x, y))

    def contains(self, cell: CoordinateLike) -> bool:
        return Coordinate.of(cell) in self

    def require(self, cell: CoordinateLike, role: str = "cell") -> Coordinate:
        """Return the indexed coordinate for ``cell`` or raise :class:`OutOfBoundsError`."""
        coord = Coordinate.of(cell)
        found = self._cells.get((coord.x, coord.y))
        if found is None:
            raise OutOfBoundsError(coord, self.width, self.height, role)
        return found

    def cells(self) -> Iterator[Coordinate]:
        return iter(self._cells.values())

    def mark_obstacles(self, *cells: CoordinateLike) -> GridIndex:
        # validate everything first so a bad cell leaves the grid untouched
        resolved = [self.require(cell, "obstacle") for cell in cells]
        self._obstacles.update(resolved)
        return self

    def is_obstacle(self, cell: Coordinate) -> bool:
        return cell in self._obstacles

    @property
    def obstacles(self) -> frozenset[Coordinate]:
        return frozenset(self._obstacles)

    def __repr__(self) -> str:
        return (
            f"GridIndex(width={self.width}, height={self.height}, "
            f"obstacles={len(self._obstacles)})"
        )
