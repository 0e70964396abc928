from ._CacheManager import CacheAccess
from ._Events import EdgeEvents
from ._helpers import _require, _require_all, _require_callable
from ._History import History
from ._Views import Views


class EdgeListGraph(EdgeEvents, History, Views, CacheAccess):
    """Graph stored as a bare set of edges.

    There is no vertex index: the vertex set is whatever the edges touch, in
    first-seen order. Adding an edge already present (by the edge type's own
    equality) is refused.

    Parameters
    --
    is_directed : bool, default True
        Whether ``(s, t)`` and ``(t, s)`` are the same pair when checking for
        parallel edges.
    allow_parallel_edges : bool, default True
    history : bool, default False

    """

    def __init__(
        self, is_directed: bool = True, allow_parallel_edges: bool = True, *, history: bool = False
    ):
        self._is_directed = bool(is_directed)
        self._allow_parallel_edges = bool(allow_parallel_edges)
        self._edges = {}
        self._version = 0
        self._init_events()
        self._init_history(history)

    def __repr__(self):
        return f"EdgeListGraph(edges={len(self._edges)}, directed={self._is_directed})"

    @property
    def is_directed(self) -> bool:
        return self._is_directed

    @property
    def allow_parallel_edges(self) -> bool:
        return self._allow_parallel_edges

    # ==================== Vertices ====================

    @property
    def vertices(self):
        seen = {}
        for edge in self._edges:
            seen.setdefault(edge.source, None)
            seen.setdefault(edge.target, None)
        return iter(seen)

    @property
    def vertex_count(self) -> int:
        return sum(1 for _ in self.vertices)

    @property
    def is_vertices_empty(self) -> bool:
        return not self._edges

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return any(edge.source == vertex or edge.target == vertex for edge in self._edges)

    # ==================== Edges ====================

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def is_edges_empty(self) -> bool:
        return not self._edges

    @property
    def edges(self):
        return iter(self._edges)

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        return edge in self._edges

    def _connects(self, edge, source, target):
        if edge.source == source and edge.target == target:
            return True
        return not self._is_directed and edge.source == target and edge.target == source

    def try_get_edge(self, source, target):
        _require(source, "source")
        _require(target, "target")
        for edge in self._edges:
            if self._connects(edge, source, target):
                return edge
        return None

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None

    def add_edge(self, edge) -> bool:
        _require(edge, "edge")
        if edge in self._edges:
            return False
        if not self._allow_parallel_edges and self.has_edge(edge.source, edge.target):
            return False
        self._edges[edge] = None
        self._version += 1
        self.edge_added.fire(edge)
        return True

    def add_edge_range(self, edges) -> int:
        return sum(1 for edge in _require_all(edges, "edges") if self.add_edge(edge))

    # vertices exist only through edges
    add_vertices_and_edge = add_edge
    add_vertices_and_edge_range = add_edge_range

    def remove_edge(self, edge) -> bool:
        _require(edge, "edge")
        if edge not in self._edges:
            return False
        del self._edges[edge]
        self._version += 1
        self.edge_removed.fire(edge)
        return True

    def remove_edge_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [edge for edge in self._edges if predicate(edge)]
        for edge in doomed:
            self.remove_edge(edge)
        return len(doomed)

    def clear(self):
        old = list(self._edges)
        self._edges = {}
        self._version += 1
        self._notify_edges_removed(old)

    def clone(self):
        g = EdgeListGraph(self._is_directed, self._allow_parallel_edges)
        g._edges = dict(self._edges)
        return g
