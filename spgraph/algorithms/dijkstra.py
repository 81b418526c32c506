"""Multi-source Dijkstra search producing a :class:`PathState`."""

from __future__ import annotations

import logging
from collections import deque
from heapq import heappop, heappush
from numbers import Integral
from typing import Any, List, Optional, Sequence, Tuple, Union

from spgraph.algorithms.state import PathState
from spgraph.distance import as_weight_lookup
from spgraph.exceptions import InvalidGraphAccess, InvalidSource
from spgraph.graph import Graph
from spgraph.logging import get_logger
from spgraph.types import INF, Cost, VertexID

logger = get_logger(__name__)

SourceArg = Union[VertexID, Sequence[VertexID]]


def _add_cost(dist: Cost, weight: Cost) -> Cost:
    """Return ``dist + weight``; INF on either side yields INF."""
    if dist == INF or weight == INF:
        return INF
    return dist + weight


def validate_sources(sources: SourceArg, num_vertices: int) -> Tuple[VertexID, ...]:
    """
    Normalize and check the source argument of a search.

    Args:
        sources: A single vertex or a sequence of vertices.
        num_vertices: Vertex count of the graph being searched.

    Returns:
        Sources as a tuple of ints, in the given order.

    Raises:
        InvalidSource: If there are no sources, a source is not an integer or
            out of range, or a source is repeated.
    """
    if isinstance(sources, Integral) and not isinstance(sources, bool):
        sources = (sources,)
    try:
        items = iter(sources)
    except TypeError:
        raise InvalidSource(
            f"Source must be an integer vertex or a sequence of them, got {sources!r}"
        ) from None

    srcs: List[VertexID] = []
    seen = set()
    for src in items:
        if isinstance(src, bool) or not isinstance(src, Integral):
            raise InvalidSource(f"Source must be an integer vertex, got {src!r}")
        src = int(src)
        if not 0 <= src < num_vertices:
            raise InvalidSource(
                f"Source {src} is out of range for a graph with {num_vertices} vertices"
            )
        if src in seen:
            raise InvalidSource(f"Source {src} is listed more than once")
        seen.add(src)
        srcs.append(src)

    if not srcs:
        raise InvalidSource("At least one source vertex is required")
    return tuple(srcs)


def _count_paths(
    preds: List[List[VertexID]],
    settled: List[VertexID],
    source_set: frozenset,
) -> List[int]:
    """
    Count shortest paths over the tight-edge DAG given by ``preds``.

    Vertices are taken in topological order of the predecessor lists (Kahn),
    so zero-weight edges between equally distant vertices are counted in the
    right direction. A zero-weight cycle leaves no vertex ready; the earliest
    settled pending vertex is then counted from its finished predecessors,
    which breaks the cycle.

    Args:
        preds: Tight predecessors of every vertex, one entry per edge.
        settled: Reached vertices in the order the search settled them.
        source_set: The search sources.

    Returns:
        Path count per vertex; 1 for sources, 0 for unreached vertices.
    """
    # negative weights can settle a vertex twice
    settled = list(dict.fromkeys(settled))
    num_vertices = len(preds)
    counts = [0] * num_vertices
    done = [False] * num_vertices
    pending = [len(p) for p in preds]
    succ: List[List[VertexID]] = [[] for _ in range(num_vertices)]
    for node in settled:
        for pred in preds[node]:
            succ[pred].append(node)

    ready = deque(node for node in settled if not preds[node])
    next_forced = 0
    remaining = len(settled)
    while remaining:
        if ready:
            node = ready.popleft()
        else:
            while done[settled[next_forced]]:
                next_forced += 1
            node = settled[next_forced]
        if done[node]:
            continue

        if node in source_set:
            counts[node] = 1
        else:
            counts[node] = sum(counts[pred] for pred in preds[node] if done[pred])
        done[node] = True
        remaining -= 1

        for nxt in succ[node]:
            pending[nxt] -= 1
            if pending[nxt] == 0 and not done[nxt]:
                ready.append(nxt)

    return counts


def shortest_paths(
    graph: Graph,
    sources: SourceArg,
    weights: Any = None,
    all_paths: bool = False,
) -> PathState:
    """
    Run Dijkstra's algorithm from one or more sources.

    Multiple sources behave like a virtual origin joined to every source by
    a zero-weight edge: each vertex gets its distance from the nearest source
    and counts the shortest paths from all sources at that distance.

    The frontier is a binary heap without decrease-key. Every improvement
    pushes a new ``(distance, vertex)`` entry; entries whose distance is worse
    than the vertex's current distance are skipped when popped.

    Tight predecessors are collected during the traversal and path counts are
    summed over them afterwards in topological order, so counts stay exact
    with zero-weight edges. Zero-weight cycles would allow infinitely many
    paths; they are cut at the vertex settled first.

    Weights must be non-negative; this is not checked and negative weights
    give undefined results.

    Args:
        graph: Graph exposing ``vertex_count()`` and ``out_neighbors(v)``.
        sources: A source vertex, or a non-empty sequence of distinct vertices.
        weights: Edge weights; anything accepted by
            :func:`spgraph.distance.as_weight_lookup`. Defaults to unit weights.
        all_paths: If True, expose every predecessor on a shortest path in
            the result, not just the parent.

    Returns:
        A fully populated :class:`PathState`.

    Raises:
        InvalidSource: See :func:`validate_sources`.
        InvalidGraphAccess: If the graph yields a neighbor outside its vertex
            range, or raises it for an out-of-range query.
    """
    num_vertices = graph.vertex_count()
    srcs = validate_sources(sources, num_vertices)
    weight = as_weight_lookup(weights).weight

    logger.debug(
        f"Dijkstra from {len(srcs)} source(s) over {num_vertices} vertices "
        f"(all_paths={all_paths})"
    )

    dists: List[Cost] = [INF] * num_vertices
    parents: List[Optional[VertexID]] = [None] * num_vertices
    preds: List[List[VertexID]] = [[] for _ in range(num_vertices)]
    settled: List[VertexID] = []
    min_pq: List[Tuple[Cost, VertexID]] = []
    source_set = frozenset(srcs)

    for src in srcs:
        dists[src] = 0
        heappush(min_pq, (0, src))

    stale = 0
    while min_pq:
        current_cost, node = heappop(min_pq)
        if current_cost > dists[node]:
            stale += 1
            continue
        settled.append(node)

        for neighbor in graph.out_neighbors(node):
            if not 0 <= neighbor < num_vertices:
                raise InvalidGraphAccess(
                    f"Vertex {node} has neighbor {neighbor} outside the graph "
                    f"of {num_vertices} vertices"
                )

            alt = _add_cost(current_cost, weight(node, neighbor))
            if alt == INF:
                continue

            # First discovery or strictly shorter route: restart bookkeeping
            if alt < dists[neighbor]:
                dists[neighbor] = alt
                parents[neighbor] = node
                preds[neighbor] = [node]
                heappush(min_pq, (alt, neighbor))
            # Sources keep a single empty path even when another source ties them
            elif alt == dists[neighbor] and neighbor not in source_set:
                preds[neighbor].append(node)

    # A source is at distance 0 from itself via no edges
    for src in srcs:
        parents[src] = None
        preds[src] = []

    counts = _count_paths(preds, settled, source_set)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Dijkstra reached {len(settled)}/{num_vertices} vertices "
            f"({len(settled) + stale} heap pops, {stale} stale)"
        )

    if not all_paths:
        preds = [[] for _ in range(num_vertices)]

    return PathState(
        parents=tuple(parents),
        distances=tuple(dists),
        predecessors=tuple(tuple(p) for p in preds),
        path_counts=tuple(counts),
        sources=srcs,
        all_paths=all_paths,
    )
