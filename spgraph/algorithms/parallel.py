"""Parallel fan-out of independent single-source Dijkstra searches.

Each source gets its own search with private state; the graph and weights
are only read. Threads share them directly. Worker processes receive one
pickled copy each through the pool initializer, so per-task traffic is a
single vertex id in and one :class:`PathState` out.

Error policy: results are collected in source order and the first failing
source (in that order) is re-raised. Searches not yet started are cancelled;
searches already running finish and their results are discarded. No partial
result list is returned.
"""

from __future__ import annotations

import logging
import os
import pickle
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from spgraph.algorithms.dijkstra import shortest_paths, validate_sources
from spgraph.algorithms.state import PathState
from spgraph.config import PARALLEL_CONFIG
from spgraph.distance import WeightLookup, as_weight_lookup
from spgraph.graph import Graph
from spgraph.logging import LOG_LEVEL_ENV, apply_env_log_level, get_logger
from spgraph.types import Backend, VertexID

logger = get_logger(__name__)

# Per-process search inputs installed by _worker_init
_shared_graph: Optional[Graph] = None
_shared_weights: Optional[WeightLookup] = None
_shared_all_paths: bool = False


def _worker_init(payload: bytes) -> None:
    """Install the pickled (graph, weights, all_paths) in a worker process.

    Called once per worker process lifetime via ProcessPoolExecutor's
    initializer.

    Args:
        payload: Pickled ``(graph, weights, all_paths)`` tuple.
    """
    global _shared_graph, _shared_weights, _shared_all_paths

    _shared_graph, _shared_weights, _shared_all_paths = pickle.loads(payload)

    # Respect parent-requested log level if provided
    apply_env_log_level()

    worker_logger = get_logger(f"{__name__}.worker")
    worker_logger.debug(f"Worker {os.getpid()} initialized with graph")


def _process_worker(source: VertexID) -> PathState:
    """Run one single-source search on the worker's shared inputs."""
    return shortest_paths(_shared_graph, source, _shared_weights, _shared_all_paths)


def _run_serial(
    graph: Graph,
    sources: Tuple[VertexID, ...],
    weights: WeightLookup,
    all_paths: bool,
) -> List[PathState]:
    """Run every search in the calling thread, in source order."""
    logger.debug(f"Running {len(sources)} searches serially")
    states: List[PathState] = []
    for src in sources:
        states.append(shortest_paths(graph, src, weights, all_paths))
    return states


def _make_executor(
    backend: Backend,
    workers: int,
    graph: Graph,
    weights: WeightLookup,
    all_paths: bool,
) -> Tuple[Executor, Callable[[VertexID], PathState]]:
    """Create the pool and the per-source task callable for ``backend``."""
    if backend == Backend.THREAD:
        task = partial(shortest_paths, graph, weights=weights, all_paths=all_paths)
        return ThreadPoolExecutor(max_workers=workers), task

    payload = pickle.dumps((graph, weights, all_paths))
    logger.debug(f"Serialized search inputs once: {len(payload)} bytes")

    # Propagate logging level to workers via environment
    parent_level = logging.getLogger("spgraph").getEffectiveLevel()
    os.environ[LOG_LEVEL_ENV] = logging.getLevelName(parent_level)

    pool = ProcessPoolExecutor(
        max_workers=workers,
        initializer=_worker_init,
        initargs=(payload,),
    )
    return pool, _process_worker


def shortest_paths_parallel(
    graph: Graph,
    sources: Sequence[VertexID],
    weights: Any = None,
    all_paths: bool = False,
    *,
    parallelism: Optional[int] = None,
    backend: Optional[Union[Backend, int]] = None,
) -> List[PathState]:
    """
    Run one independent single-source search per source, concurrently.

    ``result[i]`` equals ``shortest_paths(graph, sources[i], weights, all_paths)``;
    this is not a joint multi-source search.

    Args:
        graph: Graph exposing ``vertex_count()`` and ``out_neighbors(v)``.
            Must not be mutated during the call.
        sources: Non-empty sequence of distinct source vertices.
        weights: Edge weights, as for :func:`shortest_paths`. With the
            process backend the graph and weights must be picklable.
        all_paths: Track all shortest-path predecessors in every search.
        parallelism: Worker count. Defaults to ``PARALLEL_CONFIG.max_workers``,
            then to the CPU count; never more than the number of sources.
        backend: :class:`Backend` to use. Defaults to ``PARALLEL_CONFIG.backend``.

    Returns:
        One :class:`PathState` per source, in source order.

    Raises:
        InvalidSource: If the source list is empty, has an out-of-range
            vertex, or repeats a vertex. Checked before any search starts.
        InvalidGraphAccess: Re-raised from the first failing search.
    """
    srcs = validate_sources(sources, graph.vertex_count())
    distmx = as_weight_lookup(weights)
    backend = Backend(backend) if backend is not None else PARALLEL_CONFIG.backend

    num_tasks = len(srcs)
    workers = PARALLEL_CONFIG.resolve_workers(parallelism, num_tasks)

    if (
        backend == Backend.SERIAL
        or workers == 1
        or num_tasks < PARALLEL_CONFIG.min_parallel_sources
    ):
        return _run_serial(graph, srcs, distmx, all_paths)

    logger.info(
        f"Running {num_tasks} shortest-path searches on {workers} "
        f"{backend.name.lower()} workers"
    )
    chunksize = PARALLEL_CONFIG.chunksize(workers, num_tasks)
    logger.debug(f"Using chunksize={chunksize} for parallel execution")

    start_time = time.time()
    states: List[Optional[PathState]] = [None] * num_tasks
    pool, task = _make_executor(backend, workers, graph, distmx, all_paths)

    with pool:
        try:
            for idx, state in enumerate(pool.map(task, srcs, chunksize=chunksize)):
                states[idx] = state
                logger.debug(f"Search {idx + 1}/{num_tasks} from {srcs[idx]} collected")
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise

    elapsed_time = time.time() - start_time
    logger.info(f"Parallel searches completed in {elapsed_time:.2f} seconds")

    return states
