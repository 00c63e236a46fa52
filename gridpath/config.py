"""Validated configuration models for grid searches."""

from __future__ import annotations

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Topology(str, Enum):
    """Connectivity of the grid."""

    SQUARE = "square"
    HEX = "hex"


class ExpansionPolicy(str, Enum):
    """How a rediscovered open cell has its cost-so-far updated."""

    OVERWRITE = "overwrite"
    RELAX = "relax"


class ReconstructionMode(str, Enum):
    """How the route is recovered once the goal is found."""

    PARENT_LINKS = "parent_links"
    MIN_G_WALK = "min_g_walk"


class SearchConfig(BaseModel):
    """Everything needed to build a :class:`~gridpath.engine.SearchEngine`."""

    model_config = ConfigDict(extra="forbid")

    topology: Topology = Field(default=Topology.SQUARE)
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    obstacles: list[tuple[int, int]] = Field(default_factory=list)
    expansion: ExpansionPolicy = Field(default=ExpansionPolicy.OVERWRITE)
    reconstruction: ReconstructionMode = Field(default=ReconstructionMode.PARENT_LINKS)

    @field_validator("obstacles", mode="before")
    @classmethod
    def _ensure_obstacle_list(cls, value: object) -> object:
        if value is None:
            return []
        return value

    @model_validator(mode="after")
    def _obstacles_within_bounds(self) -> SearchConfig:
        for x, y in self.obstacles:
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    f"obstacle ({x}, {y}) is outside the {self.width}x{self.height} grid"
                )
        return self


def load_config(path: str | Path) -> SearchConfig:
    """Read a :class:`SearchConfig` from a TOML file.

    The file may hold the settings at the top level or under a ``[search]``
    table.
    """

    with Path(path).open("rb") as handle:
        payload: dict[str, Any] = tomllib.load(handle)
    if "search" in payload:
        payload = payload["search"]
    return SearchConfig.model_validate(payload)


__all__ = [
    "ExpansionPolicy",
    "ReconstructionMode",
    "SearchConfig",
    "Topology",
    "load_config",
]
