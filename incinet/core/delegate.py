"""Graphs whose incidence comes from caller-supplied callbacks.

A callback takes a vertex and returns an iterable of edges, or None when the
vertex is unknown. The graphs hold the callbacks and compose small
capability mixins on top of them. The vertex-list variants narrow the
callback at construction, so every query sees only edges that start at (or
touch) the queried vertex and whose other endpoint is a known vertex.
"""

from ._helpers import _check_position, _require, _require_all, _require_callable
from ._Views import Views
from .edges import undirected_vertex_equality
from .exceptions import VertexNotFoundError

# ==================== Callback narrowing ====================


def _restrict_out(callback, vertex_set):
    def try_get_out_edges(vertex):
        if vertex not in vertex_set:
            return None
        edges = callback(vertex)
        if edges is None:
            return None
        return [e for e in edges if e.source == vertex and e.target in vertex_set]

    return try_get_out_edges


def _restrict_adjacent(callback, vertex_set):
    def try_get_adjacent_edges(vertex):
        if vertex not in vertex_set:
            return None
        edges = callback(vertex)
        if edges is None:
            return None
        kept = []
        for e in edges:
            if e.source == vertex:
                other = e.target
            elif e.target == vertex:
                other = e.source
            else:
                continue
            if other in vertex_set:
                kept.append(e)
        return kept

    return try_get_adjacent_edges


def _materialize(edges):
    return None if edges is None else list(edges)


# ==================== Capability mixins ====================


class _OutCallbackReads:
    # ImplicitGraph over ``self._try_out``

    def try_get_out_edges(self, vertex):
        _require(vertex, "vertex")
        return _materialize(self._try_out(vertex))

    def _checked_out(self, vertex):
        edges = self.try_get_out_edges(vertex)
        if edges is None:
            raise VertexNotFoundError(vertex)
        return edges

    def out_edges(self, vertex):
        return iter(self._checked_out(vertex))

    def out_degree(self, vertex) -> int:
        return len(self._checked_out(vertex))

    def is_out_edges_empty(self, vertex) -> bool:
        return len(self._checked_out(vertex)) == 0

    def out_edge(self, vertex, index):
        edges = self._checked_out(vertex)
        _check_position(index, len(edges))
        return edges[index]


class _CallbackVertexProbe:
    # vertex membership answered by the callback itself

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return self._fetch(vertex) is not None


class _OutEdgeLookup:
    # IncidenceGraph on top of try_get_out_edges

    def try_get_edges(self, source, target):
        _require(source, "source")
        _require(target, "target")
        edges = self.try_get_out_edges(source)
        if edges is None:
            return None
        return [edge for edge in edges if edge.target == target]

    def try_get_edge(self, source, target):
        edges = self.try_get_edges(source, target)
        return edges[0] if edges else None

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None


class _InCallbackReads:
    # BidirectionalIncidenceGraph over ``self._try_in``

    def try_get_in_edges(self, vertex):
        _require(vertex, "vertex")
        return _materialize(self._try_in(vertex))

    def _checked_in(self, vertex):
        edges = self.try_get_in_edges(vertex)
        if edges is None:
            raise VertexNotFoundError(vertex)
        return edges

    def in_edges(self, vertex):
        return iter(self._checked_in(vertex))

    def in_degree(self, vertex) -> int:
        return len(self._checked_in(vertex))

    def is_in_edges_empty(self, vertex) -> bool:
        return len(self._checked_in(vertex)) == 0

    def in_edge(self, vertex, index):
        edges = self._checked_in(vertex)
        _check_position(index, len(edges))
        return edges[index]

    def degree(self, vertex) -> int:
        return self.out_degree(vertex) + self.in_degree(vertex)


class _AdjacentCallbackReads:
    # ImplicitUndirectedGraph over ``self._try_adjacent``

    edge_equality = staticmethod(undirected_vertex_equality)
    _sorted_lookup = False

    def try_get_adjacent_edges(self, vertex):
        _require(vertex, "vertex")
        return _materialize(self._try_adjacent(vertex))

    def _checked_adjacent(self, vertex):
        edges = self.try_get_adjacent_edges(vertex)
        if edges is None:
            raise VertexNotFoundError(vertex)
        return edges

    def adjacent_edges(self, vertex):
        return iter(self._checked_adjacent(vertex))

    def adjacent_degree(self, vertex) -> int:
        edges = self._checked_adjacent(vertex)
        return sum(2 if e.source == e.target else 1 for e in edges)

    def is_adjacent_edges_empty(self, vertex) -> bool:
        return len(self._checked_adjacent(vertex)) == 0

    def adjacent_edge(self, vertex, index):
        edges = self._checked_adjacent(vertex)
        _check_position(index, len(edges))
        return edges[index]

    def adjacent_vertices(self, vertex):
        seen = {}
        for e in self._checked_adjacent(vertex):
            seen.setdefault(e.target if e.source == vertex else e.source, None)
        return list(seen)

    def try_get_edge(self, source, target):
        _require(source, "source")
        _require(target, "target")
        edges = self.try_get_adjacent_edges(source)
        if edges is None:
            return None
        for edge in edges:
            if undirected_vertex_equality(edge, source, target):
                return edge
        return None

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None


class _FixedVertexSet:
    # VertexSet over ``self._vertices`` (list) and ``self._vertex_set``

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def is_vertices_empty(self) -> bool:
        return not self._vertices

    @property
    def vertices(self):
        return iter(self._vertices)

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return vertex in self._vertex_set


def _vertex_table(vertices):
    vertices = list(dict.fromkeys(_require_all(vertices, "vertices")))
    return vertices, frozenset(vertices)


# ==================== Graphs ====================


class DelegateImplicitGraph(_CallbackVertexProbe, _OutCallbackReads):
    """Directed graph known only through ``try_get_out_edges(vertex)``.

    Parameters
    --
    try_get_out_edges : callable
        ``f(vertex) -> iterable of edges | None``; None marks an unknown vertex.
    allow_parallel_edges : bool, default True

    """

    is_directed = True

    def __init__(self, try_get_out_edges, allow_parallel_edges: bool = True):
        self._try_out = _require_callable(try_get_out_edges, "try_get_out_edges")
        self._fetch = self._try_out
        self.allow_parallel_edges = bool(allow_parallel_edges)

    @property
    def out_edges_func(self):
        return self._try_out


class DelegateIncidenceGraph(_OutEdgeLookup, DelegateImplicitGraph):
    """DelegateImplicitGraph that also answers edge lookups between two vertices."""


class DelegateBidirectionalIncidenceGraph(_InCallbackReads, DelegateIncidenceGraph):
    """Delegate graph with an additional ``try_get_in_edges(vertex)`` callback."""

    def __init__(self, try_get_out_edges, try_get_in_edges, allow_parallel_edges: bool = True):
        super().__init__(try_get_out_edges, allow_parallel_edges)
        self._try_in = _require_callable(try_get_in_edges, "try_get_in_edges")

    @property
    def in_edges_func(self):
        return self._try_in


class DelegateVertexAndEdgeListGraph(
    _FixedVertexSet, _OutEdgeLookup, _OutCallbackReads, Views
):
    """Delegate graph over a fixed, enumerable vertex set.

    Out-edges reported by the callback are dropped unless they start at the
    queried vertex and end at a vertex of the set.

    Parameters
    --
    vertices : iterable
        The vertex set. Duplicates are collapsed, first occurrence wins.
    try_get_out_edges : callable
        ``f(vertex) -> iterable of edges | None``.
    allow_parallel_edges : bool, default True

    """

    is_directed = True
    _version = 0

    def __init__(self, vertices, try_get_out_edges, allow_parallel_edges: bool = True):
        self._vertices, self._vertex_set = _vertex_table(vertices)
        callback = _require_callable(try_get_out_edges, "try_get_out_edges")
        self._try_out = _restrict_out(callback, self._vertex_set)
        self.allow_parallel_edges = bool(allow_parallel_edges)

    @property
    def edges(self):
        for vertex in self._vertices:
            yield from self._try_out(vertex) or ()

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges)

    @property
    def is_edges_empty(self) -> bool:
        return next(iter(self.edges), None) is None

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        edges = self._try_out(edge.source)
        return edges is not None and edge in edges


class DelegateImplicitUndirectedGraph(_CallbackVertexProbe, _AdjacentCallbackReads):
    """Undirected graph known only through ``try_get_adjacent_edges(vertex)``."""

    is_directed = False

    def __init__(self, try_get_adjacent_edges, allow_parallel_edges: bool = True):
        self._try_adjacent = _require_callable(try_get_adjacent_edges, "try_get_adjacent_edges")
        self._fetch = self._try_adjacent
        self.allow_parallel_edges = bool(allow_parallel_edges)

    @property
    def adjacent_edges_func(self):
        return self._try_adjacent


class DelegateUndirectedGraph(_FixedVertexSet, _AdjacentCallbackReads, Views):
    """Undirected delegate graph over a fixed, enumerable vertex set.

    Adjacent edges are dropped unless they touch the queried vertex and
    their other endpoint belongs to the set. ``edges`` lists each edge once,
    from the adjacency of its source.
    """

    is_directed = False
    _version = 0

    def __init__(self, vertices, try_get_adjacent_edges, allow_parallel_edges: bool = True):
        self._vertices, self._vertex_set = _vertex_table(vertices)
        callback = _require_callable(try_get_adjacent_edges, "try_get_adjacent_edges")
        self._try_adjacent = _restrict_adjacent(callback, self._vertex_set)
        self.allow_parallel_edges = bool(allow_parallel_edges)

    @property
    def edges(self):
        for vertex in self._vertices:
            for edge in self._try_adjacent(vertex) or ():
                if edge.source == vertex:
                    yield edge

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges)

    @property
    def is_edges_empty(self) -> bool:
        return next(iter(self.edges), None) is None

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        edges = self._try_adjacent(edge.source)
        return edges is not None and edge in edges
