from ._EdgeList import EdgeList
from ._helpers import _require
from ._Incidence import InIncidence
from ._Index import VertexEdgeIndex
from ._Views import Views
from .edges import undirected_vertex_equality
from .exceptions import OperationNotSupportedError, VertexNotFoundError


class BidirectionalAdapterGraph(InIncidence, Views):
    """Adds in-edge queries to a forward-only graph.

    The in-edge index is built once, in a single pass over the wrapped
    graph's edges, and is not refreshed: mutate the wrapped graph and the
    in-edges go stale. Out-edge queries always read the wrapped graph.

    Parameters
    --
    graph : object
        Store exposing ``vertices``, ``edges`` and the out-edge queries.

    """

    is_directed = True

    def __init__(self, graph):
        self._base = _require(graph, "graph")
        self._in = VertexEdgeIndex((vertex, EdgeList()) for vertex in graph.vertices)
        for edge in graph.edges:
            target_in = self._in.get(edge.target)
            if target_in is None:
                raise VertexNotFoundError(edge.target)
            target_in.append(edge)

    def __repr__(self):
        return f"BidirectionalAdapterGraph({self._base!r})"

    @property
    def base_graph(self):
        return self._base

    @property
    def allow_parallel_edges(self) -> bool:
        return self._base.allow_parallel_edges

    @property
    def _version(self):
        return self._base._version

    def degree(self, vertex) -> int:
        return self._base.out_degree(vertex) + self.in_degree(vertex)

    # ==================== Delegated reads ====================

    @property
    def vertex_count(self) -> int:
        return self._base.vertex_count

    @property
    def is_vertices_empty(self) -> bool:
        return self._base.is_vertices_empty

    @property
    def vertices(self):
        return self._base.vertices

    def contains_vertex(self, vertex) -> bool:
        return self._base.contains_vertex(vertex)

    @property
    def edge_count(self) -> int:
        return self._base.edge_count

    @property
    def is_edges_empty(self) -> bool:
        return self._base.is_edges_empty

    @property
    def edges(self):
        return self._base.edges

    def contains_edge(self, edge) -> bool:
        return self._base.contains_edge(edge)

    def has_edge(self, source, target) -> bool:
        return self._base.has_edge(source, target)

    def try_get_edge(self, source, target):
        return self._base.try_get_edge(source, target)

    def try_get_edges(self, source, target):
        return self._base.try_get_edges(source, target)

    def out_edges(self, vertex):
        return self._base.out_edges(vertex)

    def out_degree(self, vertex) -> int:
        return self._base.out_degree(vertex)

    def is_out_edges_empty(self, vertex) -> bool:
        return self._base.is_out_edges_empty(vertex)

    def out_edge(self, vertex, index):
        return self._base.out_edge(vertex, index)

    def try_get_out_edges(self, vertex):
        return self._base.try_get_out_edges(vertex)


class UndirectedBidirectionalGraph(Views):
    """Undirected view of a bidirectional graph.

    The adjacent edges of ``v`` are its out-edges followed by its in-edges
    that are not self-edges, so a self-edge is listed once. Edges keep their
    original orientation.
    """

    is_directed = False
    _sorted_lookup = False

    def __init__(self, graph):
        self._graph = _require(graph, "graph")

    def __repr__(self):
        return f"UndirectedBidirectionalGraph({self._graph!r})"

    @property
    def visited_graph(self):
        return self._graph

    @property
    def allow_parallel_edges(self) -> bool:
        return self._graph.allow_parallel_edges

    @property
    def edge_equality(self):
        return undirected_vertex_equality

    @property
    def _version(self):
        return self._graph._version

    # ==================== Vertices / edges ====================

    @property
    def vertex_count(self) -> int:
        return self._graph.vertex_count

    @property
    def is_vertices_empty(self) -> bool:
        return self._graph.is_vertices_empty

    @property
    def vertices(self):
        return self._graph.vertices

    def contains_vertex(self, vertex) -> bool:
        return self._graph.contains_vertex(vertex)

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    @property
    def is_edges_empty(self) -> bool:
        return self._graph.is_edges_empty

    @property
    def edges(self):
        return self._graph.edges

    def contains_edge(self, edge) -> bool:
        return self._graph.contains_edge(edge)

    def try_get_edge(self, source, target):
        edge = self._graph.try_get_edge(source, target)
        if edge is None:
            edge = self._graph.try_get_edge(target, source)
        return edge

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None

    # ==================== Adjacency ====================

    def adjacent_edges(self, vertex):
        out = list(self._graph.out_edges(vertex))
        out.extend(edge for edge in self._graph.in_edges(vertex) if edge.source != edge.target)
        return iter(out)

    def adjacent_degree(self, vertex) -> int:
        """In-degree plus out-degree, so a self-edge contributes 2."""
        return self._graph.degree(vertex)

    def is_adjacent_edges_empty(self, vertex) -> bool:
        return self._graph.is_out_edges_empty(vertex) and self._graph.is_in_edges_empty(vertex)

    def adjacent_vertices(self, vertex):
        seen = {}
        for edge in self.adjacent_edges(vertex):
            other = edge.target if edge.source == vertex else edge.source
            seen.setdefault(other, None)
        return list(seen)

    def try_get_adjacent_edges(self, vertex):
        _require(vertex, "vertex")
        if not self._graph.contains_vertex(vertex):
            return None
        return list(self.adjacent_edges(vertex))

    def adjacent_edge(self, vertex, index):
        raise OperationNotSupportedError(
            "positional access is not available on an undirected view of a bidirectional graph"
        )
