"""Exception types raised by spgraph."""


class SPGraphError(Exception):
    """Base class for all spgraph errors."""


class InvalidSource(SPGraphError, ValueError):
    """Source list is empty, has an out-of-range vertex, or repeats a vertex."""


class InvalidGraphAccess(SPGraphError, IndexError):
    """A vertex index outside ``0 .. vertex_count() - 1`` reached the graph."""


class InvalidWeights(SPGraphError, TypeError):
    """An object could not be adapted to a weight lookup."""
