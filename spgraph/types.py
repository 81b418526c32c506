"""Shared type aliases, constants and enums."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Vertex identifier: an index in ``0 .. vertex_count() - 1``.
VertexID = int

#: Numeric path cost. Follows the weights: int for unit or integer weights.
Cost = Union[int, float]

#: Distance of an unreached vertex. Greater than every finite cost.
INF: float = math.inf


class Backend(IntEnum):
    """Execution backends for fanning out independent searches."""

    #: Run every search in the calling thread.
    SERIAL = 1
    #: Threads of one process; graph and weights are shared read-only.
    THREAD = 2
    #: Worker processes; graph and weights are pickled once per worker.
    PROCESS = 3
