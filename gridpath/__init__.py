"""Grid A* path search over square and hexagonal grids."""

from .astar import SearchResult, SearchState, run_search
from .config import ExpansionPolicy, ReconstructionMode, SearchConfig, Topology, load_config
from .coords import Coordinate, cell_key
from .engine import SearchEngine
from .errors import (
    FrontierExhaustedError,
    GridInvariantError,
    NoPathFoundError,
    OutOfBoundsError,
    PathfindingError,
)
from .frontier import Frontier
from .graph import build_passability_graph, shortest_hop_count, topology_hop_count
from .grid import GridIndex
from .heuristics import heuristic_for, hex_distance, manhattan_distance
from .neighbors import adjacent, neighbors_hex, neighbors_square, resolver_for

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "ExpansionPolicy",
    "Frontier",
    "FrontierExhaustedError",
    "GridIndex",
    "GridInvariantError",
    "NoPathFoundError",
    "OutOfBoundsError",
    "PathfindingError",
    "ReconstructionMode",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "SearchState",
    "Topology",
    "adjacent",
    "build_passability_graph",
    "cell_key",
    "heuristic_for",
    "hex_distance",
    "load_config",
    "manhattan_distance",
    "neighbors_hex",
    "neighbors_square",
    "resolver_for",
    "run_search",
    "shortest_hop_count",
    "topology_hop_count",
]
