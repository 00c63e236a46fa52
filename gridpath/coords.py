from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


def cell_key(x: int, y: int) -> str:
    return f"{x}:{y}"


@dataclass(frozen=True, slots=True)
class Coordinate:
    x: int
    y: int

    @property
    def z(self) -> int:
        # cube coordinates: x + y + z == 0
        return -self.x - self.y

    @property
    def key(self) -> str:
        return cell_key(self.x, self.y)

    def cube(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.z

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    @classmethod
    def of(cls, value: CoordinateLike) -> Coordinate:
        if isinstance(value, Coordinate):
            return value
        try:
            x, y = value
        except (TypeError, ValueError) as exc:
            raise TypeError("coordinates must be a Coordinate or an (x, y) pair") from exc
        for part in (x, y):
            if isinstance(part, bool) or not isinstance(part, int):
                raise TypeError(f"coordinate components must be integers, got {part!r}")
        return cls(x, y)


CoordinateLike = Union[Coordinate, Tuple[int, int]]
