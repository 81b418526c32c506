"""Path reconstruction from a :class:`PathState`."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

from spgraph.algorithms.state import PathState
from spgraph.distance import as_weight_lookup
from spgraph.types import Cost, VertexID

Path = List[VertexID]


def reconstruct_path(state: PathState, target: VertexID) -> Path:
    """
    Follow parent pointers from ``target`` back to a source.

    Args:
        state: Result of a search.
        target: Destination vertex.

    Returns:
        Vertices from a source to ``target``; ``[target]`` if it is a source,
        ``[]`` if it was not reached.
    """
    if not state.is_reached(target):
        return []

    path = [target]
    node: Optional[VertexID] = state.parents[target]
    while node is not None:
        path.append(node)
        node = state.parents[node]
    path.reverse()
    return path


def enumerate_paths(
    state: PathState, targets: Optional[Iterable[VertexID]] = None
) -> List[Path]:
    """Reconstruct one shortest path per target (every vertex by default)."""
    if targets is None:
        targets = range(state.num_vertices)
    return [reconstruct_path(state, t) for t in targets]


def all_shortest_paths(state: PathState, target: VertexID) -> Iterator[Path]:
    """
    Enumerate every shortest path from the source set to ``target``.

    Walks the predecessor lists depth-first. A predecessor listed twice
    (parallel edges) yields the same vertex path twice, so for positive
    weights the number of yielded paths equals ``path_counts[target]``.

    Args:
        state: Result of a search run with ``all_paths=True``.
        target: Destination vertex.

    Yields:
        Vertex lists from a source to ``target``.

    Raises:
        ValueError: If ``state`` was computed without all-paths tracking.
    """
    if not state.all_paths:
        raise ValueError("all_shortest_paths() needs a state computed with all_paths=True")
    if not state.is_reached(target):
        return

    # Each frame: (vertex, index of the next predecessor to try)
    stack: List[List[Any]] = [[target, 0]]
    on_path = {target}
    while stack:
        node, idx = stack[-1]
        preds = state.predecessors[node]
        if not preds:
            yield [frame[0] for frame in reversed(stack)]
        elif idx < len(preds):
            stack[-1][1] = idx + 1
            nxt = preds[idx]
            # zero-weight cycles can make a vertex its own ancestor
            if nxt not in on_path:
                on_path.add(nxt)
                stack.append([nxt, 0])
            continue
        on_path.discard(node)
        stack.pop()


def path_weight(path: Path, weights: Any = None) -> Cost:
    """Sum the edge weights along ``path`` (0 for paths of fewer than two vertices)."""
    weight = as_weight_lookup(weights).weight
    return sum(weight(u, v) for u, v in zip(path, path[1:]))
