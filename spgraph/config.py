"""Configuration classes for spgraph components."""

import os
from dataclasses import dataclass
from typing import Optional

from spgraph.types import Backend


@dataclass
class ParallelConfig:
    """Configuration for parallel shortest-path dispatch."""

    # Worker count when the caller does not pass one; None means os.cpu_count()
    max_workers: Optional[int] = None

    # Backend used when the caller does not pass one
    backend: Backend = Backend.PROCESS

    # Fewer sources than this run serially in the calling process
    min_parallel_sources: int = 2

    # Target number of map chunks handed to each worker
    chunks_per_worker: int = 4

    def resolve_workers(self, requested: Optional[int], num_tasks: int) -> int:
        """Return the worker count for ``num_tasks`` searches.

        Args:
            requested: Explicit worker count from the caller, if any.
            num_tasks: Number of independent searches to run.

        Returns:
            A worker count in ``1 .. max(1, num_tasks)``.
        """
        workers = requested or self.max_workers or os.cpu_count() or 1
        return max(1, min(workers, num_tasks))

    def chunksize(self, workers: int, num_tasks: int) -> int:
        """Calculate a map chunksize that keeps IPC overhead low."""
        return max(1, num_tasks // (workers * self.chunks_per_worker))


# Global configuration instance
PARALLEL_CONFIG = ParallelConfig()
