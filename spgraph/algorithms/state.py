"""Result record of a Dijkstra search."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from spgraph.types import INF, Cost, VertexID


@dataclass(frozen=True, eq=False)
class PathState:
    """
    Shortest-path state produced by one single- or multi-source search.

    All sequences are indexed by vertex and have ``num_vertices`` entries.

    Attributes:
        parents: Predecessor of each vertex on some shortest path; None for
            sources and unreached vertices.
        distances: Shortest distance from the nearest source; ``INF`` for
            unreached vertices.
        predecessors: Every vertex immediately before each vertex on some
            shortest path, once per realizing edge. Only filled when the
            search tracked all paths; otherwise all entries are empty.
            Sources always have an empty entry.
        path_counts: Number of distinct shortest paths from the source set;
            1 for sources, 0 for unreached vertices.
        sources: The sources that seeded the search.
        all_paths: Whether ``predecessors`` were tracked.

    Equality compares parents, distances and path_counts exactly and
    predecessors entry-wise as multisets. ``sources`` and ``all_paths`` are
    informational and take no part in equality.
    """

    parents: Tuple[Optional[VertexID], ...]
    distances: Tuple[Cost, ...]
    predecessors: Tuple[Tuple[VertexID, ...], ...]
    path_counts: Tuple[int, ...]
    sources: Tuple[VertexID, ...] = field(default=())
    all_paths: bool = field(default=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathState):
            return NotImplemented
        return (
            self.parents == other.parents
            and self.distances == other.distances
            and self.path_counts == other.path_counts
            and len(self.predecessors) == len(other.predecessors)
            and all(
                a == b or Counter(a) == Counter(b)
                for a, b in zip(self.predecessors, other.predecessors)
            )
        )

    def __hash__(self) -> int:
        return hash((self.parents, self.distances, self.path_counts))

    @property
    def num_vertices(self) -> int:
        return len(self.distances)

    def is_reached(self, v: VertexID) -> bool:
        """True if ``v`` is a source or reachable from one."""
        return self.distances[v] != INF

    def reached(self) -> Iterator[VertexID]:
        """Yield reached vertices in index order."""
        for v, dist in enumerate(self.distances):
            if dist != INF:
                yield v
