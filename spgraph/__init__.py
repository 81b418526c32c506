"""spgraph: Dijkstra shortest-path states over weighted graphs.

Computes single- and multi-source shortest paths with parent pointers,
optional all-predecessor tracking and shortest-path counts, and fans
independent single-source searches out over a worker pool.

Primary API:
    shortest_paths() - One search from one or more sources
    shortest_paths_parallel() - One independent search per source, concurrently
    PathState - Result record of a search
    AdjacencyGraph - Bundled index-based graph
    from_networkx() - Convert a NetworkX graph to graph + weights

Example:
    from spgraph import AdjacencyGraph, shortest_paths

    g = AdjacencyGraph(4, [(0, 1), (1, 2), (2, 3)])
    state = shortest_paths(g, 0)
    state.distances  # (0, 1, 2, 3)
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
from spgraph.algorithms import (
    PathState,
    all_shortest_paths,
    enumerate_paths,
    path_weight,
    reconstruct_path,
    shortest_paths,
    shortest_paths_parallel,
)
from spgraph.config import PARALLEL_CONFIG, ParallelConfig
from spgraph.distance import (
    CallableDistance,
    DefaultDistance,
    EdgeWeightDistance,
    MatrixDistance,
    as_weight_lookup,
)
from spgraph.exceptions import (
    InvalidGraphAccess,
    InvalidSource,
    InvalidWeights,
    SPGraphError,
)
from spgraph.graph import AdjacencyGraph, Graph
from spgraph.nx import NodeMap, distances_by_name, from_networkx
from spgraph.types import INF, Backend

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "shortest_paths",
    "shortest_paths_parallel",
    "PathState",
    "reconstruct_path",
    "enumerate_paths",
    "all_shortest_paths",
    "path_weight",
    # Graph and weights
    "Graph",
    "AdjacencyGraph",
    "DefaultDistance",
    "MatrixDistance",
    "EdgeWeightDistance",
    "CallableDistance",
    "as_weight_lookup",
    # NetworkX
    "NodeMap",
    "from_networkx",
    "distances_by_name",
    # Types and config
    "INF",
    "Backend",
    "ParallelConfig",
    "PARALLEL_CONFIG",
    # Errors
    "SPGraphError",
    "InvalidSource",
    "InvalidGraphAccess",
    "InvalidWeights",
    # Utilities
    "logging",
]
