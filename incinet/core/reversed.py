from ._helpers import _require
from ._Views import Views
from .edges import ReversedEdge


def _wrap(edges):
    return [ReversedEdge(edge) for edge in edges]


class ReversedBidirectionalGraph(Views):
    """Live view of a bidirectional graph with every edge pointing the other way.

    Nothing is copied: out-edge queries read the wrapped graph's in-edges and
    vice versa. Edges come back as ``ReversedEdge`` objects around the
    original edges.
    """

    is_directed = True

    def __init__(self, graph):
        self._original = _require(graph, "graph")

    def __repr__(self):
        return f"ReversedBidirectionalGraph({self._original!r})"

    @property
    def original_graph(self):
        return self._original

    @property
    def allow_parallel_edges(self) -> bool:
        return self._original.allow_parallel_edges

    @property
    def _version(self):
        return self._original._version

    # ==================== Vertices ====================

    @property
    def vertex_count(self) -> int:
        return self._original.vertex_count

    @property
    def is_vertices_empty(self) -> bool:
        return self._original.is_vertices_empty

    @property
    def vertices(self):
        return self._original.vertices

    def contains_vertex(self, vertex) -> bool:
        return self._original.contains_vertex(vertex)

    # ==================== Edges ====================

    @property
    def edge_count(self) -> int:
        return self._original.edge_count

    @property
    def is_edges_empty(self) -> bool:
        return self._original.is_edges_empty

    @property
    def edges(self):
        for edge in self._original.edges:
            yield ReversedEdge(edge)

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        if not isinstance(edge, ReversedEdge):
            return False
        return self._original.contains_edge(edge.original_edge)

    def has_edge(self, source, target) -> bool:
        return self._original.has_edge(target, source)

    def try_get_edge(self, source, target):
        edge = self._original.try_get_edge(target, source)
        return None if edge is None else ReversedEdge(edge)

    def try_get_edges(self, source, target):
        edges = self._original.try_get_edges(target, source)
        return None if edges is None else _wrap(edges)

    # ==================== Incidence ====================

    def out_edges(self, vertex):
        return iter(_wrap(self._original.in_edges(vertex)))

    def out_degree(self, vertex) -> int:
        return self._original.in_degree(vertex)

    def is_out_edges_empty(self, vertex) -> bool:
        return self._original.is_in_edges_empty(vertex)

    def out_edge(self, vertex, index):
        return ReversedEdge(self._original.in_edge(vertex, index))

    def try_get_out_edges(self, vertex):
        edges = self._original.try_get_in_edges(vertex)
        return None if edges is None else _wrap(edges)

    def in_edges(self, vertex):
        return iter(_wrap(self._original.out_edges(vertex)))

    def in_degree(self, vertex) -> int:
        return self._original.out_degree(vertex)

    def is_in_edges_empty(self, vertex) -> bool:
        return self._original.is_out_edges_empty(vertex)

    def in_edge(self, vertex, index):
        return ReversedEdge(self._original.out_edge(vertex, index))

    def try_get_in_edges(self, vertex):
        edges = self._original.try_get_out_edges(vertex)
        return None if edges is None else _wrap(edges)

    def degree(self, vertex) -> int:
        return self._original.degree(vertex)
