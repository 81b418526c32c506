"""Sample graphs shared by the algorithm tests."""

import random

import networkx as nx
import pytest

from spgraph.distance import EdgeWeightDistance
from spgraph.graph import AdjacencyGraph


@pytest.fixture
def line4():
    #  0 ──► 1 ──► 2 ──► 3
    return AdjacencyGraph(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def line4_undirected():
    #  0 ◄──► 1 ◄──► 2 ◄──► 3
    return AdjacencyGraph(4, [(0, 1), (1, 2), (2, 3)], directed=False)


@pytest.fixture
def diamond():
    #       ┌──► 1 ──┐
    #   0 ──┤        ├──► 3
    #       └──► 2 ──┘
    return AdjacencyGraph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def line_with_island():
    #  0 ──► 1 ──► 2 ──► 3        4
    return AdjacencyGraph(5, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def detour():
    # Metric:
    #        [5]
    #   0 ────────► 1 ──► 3
    #   │           ▲  [1]
    #   │ [1]   [1] │
    #   └────► 2 ───┘
    #
    # 1 is first discovered at 5, then improved to 2 through 2.
    graph = AdjacencyGraph(4, [(0, 1), (0, 2), (2, 1), (1, 3)])
    weights = EdgeWeightDistance({(0, 1): 5, (0, 2): 1, (2, 1): 1, (1, 3): 1})
    return graph, weights


@pytest.fixture
def detour_with_tie():
    # Metric:
    #        [3]
    #   0 ────────► 1
    #   │ [1]       ▲ [1]
    #   ├────► 2 ───┤
    #   │ [1]       │ [1]
    #   └────► 4 ───┘
    #
    # 1 is discovered at 3, improved to 2, then tied at 2.
    graph = AdjacencyGraph(5, [(0, 1), (0, 2), (2, 1), (0, 4), (4, 1)])
    weights = EdgeWeightDistance(
        {(0, 1): 3, (0, 2): 1, (2, 1): 1, (0, 4): 1, (4, 1): 1}
    )
    return graph, weights


@pytest.fixture
def random_weighted():
    """Seeded random digraph with small integer weights (plenty of ties)."""
    rng = random.Random(7)
    G = nx.gnp_random_graph(30, 0.15, seed=7, directed=True)
    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, 4)
    graph = AdjacencyGraph(G.number_of_nodes(), list(G.edges()))
    weights = EdgeWeightDistance({(u, v): d["weight"] for u, v, d in G.edges(data=True)})
    return G, graph, weights
