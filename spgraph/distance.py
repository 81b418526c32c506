"""Edge weight lookups.

A weight lookup answers ``weight(u, v)`` for an ordered vertex pair. The
algorithms accept any object with that method; :func:`as_weight_lookup`
also adapts mappings, callables and 2-D matrices.

Weights must be non-negative. This is not checked: Dijkstra's results are
undefined for negative weights. An infinite weight means "no edge".
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from spgraph.exceptions import InvalidWeights
from spgraph.types import Cost, VertexID


class WeightLookup(Protocol):
    """Weight of the edge ``u -> v``."""

    def weight(self, u: VertexID, v: VertexID) -> Cost:
        ...


class DefaultDistance:
    """Unit weight for every edge."""

    def weight(self, u: VertexID, v: VertexID) -> int:
        return 1

    def __getitem__(self, key: Tuple[VertexID, VertexID]) -> int:
        return 1

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DefaultDistance)

    def __hash__(self) -> int:
        return hash(DefaultDistance)

    def __repr__(self) -> str:
        return "DefaultDistance()"


class MatrixDistance:
    """
    Dense square distance matrix indexed ``matrix[u][v]``.

    Accepts nested sequences or any array exposing ``tolist()`` (e.g. a NumPy
    array); arrays are converted to plain Python numbers once.
    """

    def __init__(self, matrix: Any) -> None:
        if hasattr(matrix, "tolist"):
            matrix = matrix.tolist()
        rows = [list(row) for row in matrix]
        size = len(rows)
        for idx, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Distance matrix must be square: row {idx} has {len(row)} "
                    f"entries, expected {size}"
                )
        self._rows = rows

    @property
    def size(self) -> int:
        return len(self._rows)

    def weight(self, u: VertexID, v: VertexID) -> Cost:
        return self._rows[u][v]

    def __getitem__(self, key: Tuple[VertexID, VertexID]) -> Cost:
        u, v = key
        return self._rows[u][v]

    def __repr__(self) -> str:
        return f"MatrixDistance(size={self.size})"


class EdgeWeightDistance:
    """
    Sparse weights keyed by ``(u, v)``.

    Pairs missing from the mapping use ``default``; without a default a
    missing pair raises KeyError.
    """

    def __init__(
        self,
        weights: Mapping,
        default: Optional[Cost] = None,
    ) -> None:
        self._weights: Dict[Tuple[VertexID, VertexID], Cost] = dict(weights)
        self.default = default

    def weight(self, u: VertexID, v: VertexID) -> Cost:
        try:
            return self._weights[(u, v)]
        except KeyError:
            if self.default is None:
                raise KeyError(f"No weight for edge ({u}, {v})") from None
            return self.default

    def __getitem__(self, key: Tuple[VertexID, VertexID]) -> Cost:
        return self.weight(*key)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"EdgeWeightDistance({len(self._weights)} edges, default={self.default!r})"


class CallableDistance:
    """Wrap a ``func(u, v) -> Cost``.

    The function must be picklable (module-level) to be used with the process
    backend of :func:`spgraph.algorithms.parallel.shortest_paths_parallel`.
    """

    def __init__(self, func: Callable[[VertexID, VertexID], Cost]) -> None:
        self.func = func

    def weight(self, u: VertexID, v: VertexID) -> Cost:
        return self.func(u, v)

    def __repr__(self) -> str:
        return f"CallableDistance({getattr(self.func, '__name__', self.func)!r})"


def as_weight_lookup(weights: Any = None) -> WeightLookup:
    """
    Adapt ``weights`` to a :class:`WeightLookup`.

    Args:
        weights: One of:
            - None: unit weights (:class:`DefaultDistance`).
            - An object with a ``weight(u, v)`` method: returned as is.
            - A mapping keyed by ``(u, v)``: :class:`EdgeWeightDistance`.
            - A callable ``f(u, v)``: :class:`CallableDistance`.
            - A 2-D matrix (nested sequences or array): :class:`MatrixDistance`.

    Returns:
        A weight lookup.

    Raises:
        InvalidWeights: If ``weights`` matches none of the above.
    """
    if weights is None:
        return DefaultDistance()
    if callable(getattr(weights, "weight", None)):
        return weights
    if isinstance(weights, Mapping):
        return EdgeWeightDistance(weights)
    if callable(weights):
        return CallableDistance(weights)
    if hasattr(weights, "tolist") or (
        isinstance(weights, Sequence) and not isinstance(weights, (str, bytes))
    ):
        return MatrixDistance(weights)
    raise InvalidWeights(
        f"Cannot use {type(weights).__name__} as edge weights; expected a weight "
        "lookup, mapping, callable or 2-D matrix"
    )
