"""Shortest-path algorithms."""

from spgraph.algorithms.dijkstra import shortest_paths, validate_sources
from spgraph.algorithms.parallel import shortest_paths_parallel
from spgraph.algorithms.path_utils import (
    all_shortest_paths,
    enumerate_paths,
    path_weight,
    reconstruct_path,
)
from spgraph.algorithms.state import PathState

__all__ = [
    "PathState",
    "shortest_paths",
    "shortest_paths_parallel",
    "validate_sources",
    "reconstruct_path",
    "enumerate_paths",
    "all_shortest_paths",
    "path_weight",
]
