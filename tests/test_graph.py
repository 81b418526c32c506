"""Tests for the bundled adjacency-list graph."""

import pickle

import numpy as np
import pytest

from spgraph.exceptions import InvalidGraphAccess
from spgraph.graph import AdjacencyGraph


class TestAdjacencyGraph:
    def test_directed_neighbors(self):
        g = AdjacencyGraph(3, [(0, 1), (0, 2), (1, 2)])
        assert g.vertex_count() == 3
        assert g.out_neighbors(0) == (1, 2)
        assert g.out_neighbors(1) == (2,)
        assert g.out_neighbors(2) == ()
        assert g.num_edges() == 3
        assert g.directed

    def test_undirected_stores_both_directions(self):
        g = AdjacencyGraph(3, [(0, 1), (1, 2)], directed=False)
        assert g.out_neighbors(0) == (1,)
        assert g.out_neighbors(1) == (0, 2)
        assert g.out_neighbors(2) == (1,)
        assert sorted(g.edges()) == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_undirected_self_loop_once(self):
        g = AdjacencyGraph(1, [(0, 0)], directed=False)
        assert g.out_neighbors(0) == (0,)

    def test_parallel_edges_kept(self):
        g = AdjacencyGraph(2, [(0, 1), (0, 1)])
        assert g.out_neighbors(0) == (1, 1)

    def test_empty_graph(self):
        g = AdjacencyGraph(0)
        assert g.vertex_count() == 0
        assert list(g.edges()) == []

    def test_negative_vertex_count(self):
        with pytest.raises(ValueError):
            AdjacencyGraph(-1)

    @pytest.mark.parametrize("edge", [(0, 3), (-1, 0), (0, "1")])
    def test_bad_edge_endpoint(self, edge):
        with pytest.raises(InvalidGraphAccess):
            AdjacencyGraph(3, [edge])

    @pytest.mark.parametrize("vertex", [3, -1, True])
    def test_out_neighbors_out_of_range(self, vertex):
        g = AdjacencyGraph(3, [(0, 1)])
        with pytest.raises(InvalidGraphAccess):
            g.out_neighbors(vertex)

    def test_invalid_graph_access_is_index_error(self):
        g = AdjacencyGraph(1)
        with pytest.raises(IndexError):
            g.out_neighbors(1)

    def test_pickle_round_trip(self):
        g = AdjacencyGraph(3, [(0, 1), (1, 2)], directed=False)
        clone = pickle.loads(pickle.dumps(g))
        assert list(clone.edges()) == list(g.edges())
        assert not clone.directed

    def test_repr(self):
        g = AdjacencyGraph(2, [(0, 1)], directed=False)
        assert repr(g) == "AdjacencyGraph(2 vertices, 1 edges, undirected)"

    def test_numpy_edge_array(self):
        """NumPy integer endpoints are accepted and stored as plain ints."""
        g = AdjacencyGraph(3, np.array([[0, 1], [1, 2]]))
        assert g.out_neighbors(np.int64(0)) == (1,)
        assert type(g.out_neighbors(1)[0]) is int
        assert repr(g) == "AdjacencyGraph(3 vertices, 2 edges, directed)"

    def test_repr_after_failed_build(self):
        """A rejected edge list leaves an empty but printable graph."""
        g = AdjacencyGraph.__new__(AdjacencyGraph)
        with pytest.raises(InvalidGraphAccess):
            g.__init__(3, [(0, 1), (0, 5)])
        assert repr(g) == "AdjacencyGraph(3 vertices, 0 edges, directed)"
