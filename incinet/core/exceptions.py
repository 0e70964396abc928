"""Error taxonomy shared by every graph store.

Each error also derives from the matching builtin family so callers that
only know ``KeyError``/``ValueError`` keep working.
"""


class GraphError(Exception):
    """Base class for all incinet errors."""


class InvalidArgumentError(GraphError, ValueError):
    """A required vertex, edge, predicate or callback was ``None`` or malformed."""


class VertexNotFoundError(GraphError, KeyError):
    """A query or insertion referenced a vertex absent from the vertex set."""

    def __init__(self, vertex):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self):
        return f"vertex {self.vertex!r} is not part of the graph"


class ParallelEdgeNotAllowedError(GraphError, ValueError):
    """An insertion collided with an occupied edge slot."""

    def __init__(self, source, target):
        super().__init__(f"an edge {source!r} -> {target!r} already exists")
        self.source = source
        self.target = target


class OperationNotSupportedError(GraphError, NotImplementedError):
    """The representation cannot perform the requested operation."""


class ClusterRemovedError(GraphError, RuntimeError):
    """A cluster handle was used after its cluster left the hierarchy."""
