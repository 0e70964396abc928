from ._helpers import _check_position, _require, _require_callable
from ._Views import Views
from .edges import undirected_vertex_equality
from .exceptions import VertexNotFoundError


class _Filtered(Views):
    # Shared predicate plumbing; subclasses add the incidence queries

    def __init__(self, graph, vertex_predicate, edge_predicate):
        self._base = _require(graph, "graph")
        self._vertex_predicate = _require_callable(vertex_predicate, "vertex_predicate")
        self._edge_predicate = _require_callable(edge_predicate, "edge_predicate")

    def __repr__(self):
        return f"{type(self).__name__}({self._base!r})"

    @property
    def base_graph(self):
        return self._base

    @property
    def vertex_predicate(self):
        return self._vertex_predicate

    @property
    def edge_predicate(self):
        return self._edge_predicate

    @property
    def allow_parallel_edges(self) -> bool:
        return self._base.allow_parallel_edges

    @property
    def _version(self):
        return self._base._version

    def _keeps(self, edge) -> bool:
        keep_vertex = self._vertex_predicate
        return keep_vertex(edge.source) and keep_vertex(edge.target) and self._edge_predicate(edge)

    def _visible(self, vertex):
        _require(vertex, "vertex")
        if not self._vertex_predicate(vertex):
            raise VertexNotFoundError(vertex)

    # ==================== Vertices ====================

    @property
    def vertices(self):
        keep_vertex = self._vertex_predicate
        for vertex in self._base.vertices:
            if keep_vertex(vertex):
                yield vertex

    @property
    def vertex_count(self) -> int:
        return sum(1 for _ in self.vertices)

    @property
    def is_vertices_empty(self) -> bool:
        return next(self.vertices, None) is None

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return bool(self._vertex_predicate(vertex)) and self._base.contains_vertex(vertex)

    # ==================== Edges ====================

    @property
    def edges(self):
        for edge in self._base.edges:
            if self._keeps(edge):
                yield edge

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges)

    @property
    def is_edges_empty(self) -> bool:
        return next(self.edges, None) is None

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        return bool(self._keeps(edge)) and self._base.contains_edge(edge)


class FilteredIncidenceGraph(_Filtered):
    """Live view of a directed graph restricted by two predicates.

    A vertex is visible when ``vertex_predicate(v)`` holds and the wrapped
    graph has it. An edge is visible when both endpoints are visible and
    ``edge_predicate(e)`` holds. Every query re-evaluates the predicates
    against the wrapped graph, so counts cost a full scan.

    Parameters
    --
    graph : object
        Directed store with out-edge queries.
    vertex_predicate, edge_predicate : callable
        ``vertex -> bool`` and ``edge -> bool``.

    Raises
    --
    InvalidArgumentError
        If ``graph`` is None or a predicate is not callable.

    """

    is_directed = True

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None

    def try_get_edge(self, source, target):
        found = self.try_get_edges(source, target)
        return found[0] if found else None

    def try_get_edges(self, source, target):
        """Visible edges ``source -> target``; None when ``source`` is hidden or unknown."""
        _require(target, "target")
        out = self.try_get_out_edges(source)
        if out is None:
            return None
        return [edge for edge in out if edge.target == target]

    # ==================== Out-edges ====================

    def _out(self, vertex):
        self._visible(vertex)
        return [edge for edge in self._base.out_edges(vertex) if self._keeps(edge)]

    def out_edges(self, vertex):
        return iter(self._out(vertex))

    def out_degree(self, vertex) -> int:
        return len(self._out(vertex))

    def is_out_edges_empty(self, vertex) -> bool:
        return not self._out(vertex)

    def out_edge(self, vertex, index):
        out = self._out(vertex)
        _check_position(index, len(out))
        return out[index]

    def try_get_out_edges(self, vertex):
        _require(vertex, "vertex")
        if not self.contains_vertex(vertex):
            return None
        return self._out(vertex)


class FilteredBidirectionalGraph(FilteredIncidenceGraph):
    """Filtered view that also answers in-edge queries.

    The wrapped graph must provide ``in_edges``. ``degree`` counts visible
    in-edges plus visible out-edges.
    """

    def _in(self, vertex):
        self._visible(vertex)
        return [edge for edge in self._base.in_edges(vertex) if self._keeps(edge)]

    def in_edges(self, vertex):
        return iter(self._in(vertex))

    def in_degree(self, vertex) -> int:
        return len(self._in(vertex))

    def is_in_edges_empty(self, vertex) -> bool:
        return not self._in(vertex)

    def in_edge(self, vertex, index):
        edges = self._in(vertex)
        _check_position(index, len(edges))
        return edges[index]

    def try_get_in_edges(self, vertex):
        _require(vertex, "vertex")
        if not self.contains_vertex(vertex):
            return None
        return self._in(vertex)

    def degree(self, vertex) -> int:
        return self.out_degree(vertex) + self.in_degree(vertex)


class FilteredUndirectedGraph(_Filtered):
    """Undirected counterpart of :class:`FilteredIncidenceGraph`.

    Edge lookup ignores orientation. As in the stores, a visible self-edge
    adds 2 to ``adjacent_degree``.
    """

    is_directed = False

    @property
    def edge_equality(self):
        return undirected_vertex_equality

    def _adjacent(self, vertex):
        self._visible(vertex)
        return [edge for edge in self._base.adjacent_edges(vertex) if self._keeps(edge)]

    def adjacent_edges(self, vertex):
        return iter(self._adjacent(vertex))

    def adjacent_degree(self, vertex) -> int:
        adj = self._adjacent(vertex)
        return len(adj) + sum(1 for edge in adj if edge.source == edge.target)

    def is_adjacent_edges_empty(self, vertex) -> bool:
        return not self._adjacent(vertex)

    def adjacent_edge(self, vertex, index):
        adj = self._adjacent(vertex)
        _check_position(index, len(adj))
        return adj[index]

    def adjacent_vertices(self, vertex):
        seen = {}
        for edge in self._adjacent(vertex):
            seen.setdefault(edge.target if edge.source == vertex else edge.source, None)
        return list(seen)

    def try_get_adjacent_edges(self, vertex):
        _require(vertex, "vertex")
        if not self.contains_vertex(vertex):
            return None
        return self._adjacent(vertex)

    def try_get_edge(self, source, target):
        _require(target, "target")
        adj = self.try_get_adjacent_edges(source)
        if adj is None or not self.contains_vertex(target):
            return None
        for edge in adj:
            if undirected_vertex_equality(edge, source, target):
                return edge
        return None

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None
