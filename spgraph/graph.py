"""Graph access layer consumed by the shortest-path algorithms.

Algorithms only need two operations from a graph, captured by the
:class:`Graph` protocol. :class:`AdjacencyGraph` is the bundled
implementation: an immutable adjacency list over integer vertices.
"""

from __future__ import annotations

from numbers import Integral
from typing import Iterable, Iterator, Protocol, Tuple

from spgraph.exceptions import InvalidGraphAccess
from spgraph.types import VertexID

EdgePair = Tuple[VertexID, VertexID]


class Graph(Protocol):
    """Read-only view of a graph over vertices ``0 .. vertex_count() - 1``."""

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        ...

    def out_neighbors(self, v: VertexID) -> Iterable[VertexID]:
        """Return the out-neighbors of ``v``, one entry per outgoing edge."""
        ...


class AdjacencyGraph:
    """
    Immutable adjacency-list graph over integer vertices.

    Edges are given once at construction time. Undirected graphs store each
    edge in both directions (a self-loop is stored once). Parallel edges are
    kept, so a neighbor may appear several times in ``out_neighbors``.

    Instances hold only tuples and are safe to share across threads and to
    pickle into worker processes.
    """

    def __init__(
        self,
        num_vertices: int,
        edges: Iterable[EdgePair] = (),
        directed: bool = True,
    ) -> None:
        """
        Build the graph.

        Args:
            num_vertices: Number of vertices; vertices are ``0 .. num_vertices - 1``.
            edges: Pairs ``(u, v)``.
            directed: If False, every edge is also added as ``(v, u)``.

        Raises:
            ValueError: If num_vertices is negative.
            InvalidGraphAccess: If an edge endpoint is out of range.
        """
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")

        self.directed = directed
        self._num_vertices = num_vertices
        self._adj: Tuple[Tuple[VertexID, ...], ...] = ()
        self._num_edges = 0
        adj = [[] for _ in range(num_vertices)]
        num_edges = 0
        for u, v in edges:
            self._check_vertex(u)
            self._check_vertex(v)
            u, v = int(u), int(v)
            adj[u].append(v)
            if not directed and u != v:
                adj[v].append(u)
            num_edges += 1
        self._adj = tuple(tuple(n) for n in adj)
        self._num_edges = num_edges

    def _check_vertex(self, v: VertexID) -> None:
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise InvalidGraphAccess(f"Vertex must be an integer, got {v!r}")
        if not 0 <= v < self._num_vertices:
            raise InvalidGraphAccess(
                f"Vertex {v} is out of range for a graph with "
                f"{self._num_vertices} vertices"
            )

    def vertex_count(self) -> int:
        return self._num_vertices

    def out_neighbors(self, v: VertexID) -> Tuple[VertexID, ...]:
        """
        Return the out-neighbors of ``v``.

        Raises:
            InvalidGraphAccess: If ``v`` is not a vertex of this graph.
        """
        self._check_vertex(v)
        return self._adj[v]

    def num_edges(self) -> int:
        """Number of edges as given at construction time."""
        return self._num_edges

    def edges(self) -> Iterator[EdgePair]:
        """Yield every stored directed edge ``(u, v)``."""
        for u, nbrs in enumerate(self._adj):
            for v in nbrs:
                yield u, v

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"AdjacencyGraph({self._num_vertices} vertices, "
            f"{self._num_edges} edges, {kind})"
        )
