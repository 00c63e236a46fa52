"""networkx views of a grid, used to cross-check search results."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

from .config import Topology
from .coords import Coordinate
from .grid import GridIndex
from .heuristics import Heuristic, heuristic_for
from .neighbors import resolver_for

if TYPE_CHECKING:  # pragma: no cover - typing only
    PassabilityGraph: TypeAlias = nx.Graph[Coordinate]
else:  # pragma: no cover - runtime alias without subscripting
    PassabilityGraph: TypeAlias = nx.Graph


def build_passability_graph(grid: GridIndex, topology: Topology) -> PassabilityGraph:
    """Return an undirected graph of passable cells joined by unit-cost edges."""

    graph: PassabilityGraph = nx.Graph()
    resolve = resolver_for(grid, topology)
    for cell in grid.cells():
        if grid.is_obstacle(cell):
            continue
        graph.add_node(cell, cube=cell.cube())
        for neighbor in resolve(cell):
            if grid.is_obstacle(neighbor):
                continue
            graph.add_edge(cell, neighbor, weight=1)
    return graph


def shortest_hop_count(
    graph: PassabilityGraph,
    start: Coordinate,
    goal: Coordinate,
    heuristic: Heuristic | None = None,
) -> int | None:
    """Number of steps on a shortest route, or ``None`` when ``goal`` is unreachable."""

    if start == goal:
        return 0
    if start not in graph or goal not in graph:
        return None
    try:
        path = nx.astar_path(graph, start, goal, heuristic=heuristic, weight="weight")
    except nx.NetworkXNoPath:
        return None
    return len(path) - 1


def topology_hop_count(
    grid: GridIndex, topology: Topology, start: Coordinate, goal: Coordinate
) -> int | None:
    graph = build_passability_graph(grid, topology)
    return shortest_hop_count(graph, start, goal, heuristic_for(topology))


__all__ = [
    "PassabilityGraph",
    "build_passability_graph",
    "shortest_hop_count",
    "topology_hop_count",
]
