"""NetworkX graph conversion utilities.

Converts a NetworkX graph into the index-based graph and weights used by the
shortest-path algorithms, and maps results back to node names.

Example:
    >>> import networkx as nx
    >>> from spgraph import shortest_paths
    >>> from spgraph.nx import distances_by_name, from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>>
    >>> graph, weights, node_map = from_networkx(G)
    >>> state = shortest_paths(graph, node_map.to_index["A"], weights)
    >>> distances_by_name(state, node_map)
    {'A': 0, 'B': 10, 'C': 15}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Tuple, Union

import networkx as nx

from spgraph.algorithms.state import PathState
from spgraph.distance import EdgeWeightDistance
from spgraph.graph import AdjacencyGraph
from spgraph.types import Cost

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Node names (any hashable) are mapped to contiguous indices starting
    from 0.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "cost",
    default_weight: Cost = 1,
) -> Tuple[AdjacencyGraph, EdgeWeightDistance, NodeMap]:
    """Convert a NetworkX graph for use with the shortest-path algorithms.

    Undirected graphs become symmetric directed adjacency. Between any
    ordered pair of nodes, the weight is the minimum over parallel edges and
    each parallel edge at that minimum is kept as a separate neighbor entry,
    so path counts treat them as distinct paths.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        weight_attr: Edge attribute holding the weight (default: "cost")
        default_weight: Weight when the attribute is missing (default: 1)

    Returns:
        Tuple of (graph, weights, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    # Sorted for deterministic ordering
    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    to_index = node_map.to_index

    # (u, v) -> [min weight, number of parallel edges at that weight]
    best: Dict[Tuple[int, int], List[Any]] = {}

    def _offer(u: int, v: int, w: Cost) -> None:
        entry = best.get((u, v))
        if entry is None or w < entry[0]:
            best[(u, v)] = [w, 1]
        elif w == entry[0]:
            entry[1] += 1

    for u, v, data in G.edges(data=True):
        w = data.get(weight_attr, default_weight)
        iu, iv = to_index[u], to_index[v]
        _offer(iu, iv, w)
        if not G.is_directed() and iu != iv:
            _offer(iv, iu, w)

    edges = [pair for pair, (_, mult) in best.items() for _ in range(mult)]
    graph = AdjacencyGraph(len(node_map), edges, directed=True)
    weights = EdgeWeightDistance({pair: w for pair, (w, _) in best.items()})
    return graph, weights, node_map


def distances_by_name(state: PathState, node_map: NodeMap) -> Dict[Hashable, Cost]:
    """Map reached vertices of ``state`` to their distances, keyed by node name."""
    return {node_map.to_name[v]: state.distances[v] for v in state.reached()}
