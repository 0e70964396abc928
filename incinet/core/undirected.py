from enum import Enum

from ._CacheManager import CacheAccess
from ._EdgeList import EdgeList
from ._Events import MutationEvents
from ._helpers import _require, _require_all, _require_callable, _require_endpoints
from ._History import History
from ._Incidence import AdjacentIncidence
from ._Index import VertexEdgeIndex
from ._Views import Views
from .edges import sorted_vertex_equality, undirected_vertex_equality
from .exceptions import InvalidArgumentError, VertexNotFoundError


class EdgeLookup(Enum):
    """How an undirected store matches ``(source, target)`` queries.

    SYMMETRIC
        No ordering needed; an edge matches the pair in either orientation.
    SORTED
        Vertices must be totally ordered. Queries are reordered so that
        ``source <= target`` and compared exactly, and stored edges must
        already be sorted (e.g. ``UndirectedEdge``).
    """

    SYMMETRIC = "symmetric"
    SORTED = "sorted"


def _resolve_lookup(lookup, edge_equality):
    lookup = EdgeLookup(lookup)
    if edge_equality is not None:
        return lookup, _require_callable(edge_equality, "edge_equality")
    if lookup is EdgeLookup.SORTED:
        return lookup, sorted_vertex_equality
    return lookup, undirected_vertex_equality


class UndirectedGraph(AdjacentIncidence, MutationEvents, History, Views, CacheAccess):
    """Mutable undirected graph with one adjacency list per vertex.

    An edge between distinct vertices is listed at both endpoints; a
    self-edge is listed once and counts 2 towards ``adjacent_degree``.

    Parameters
    --
    allow_parallel_edges : bool, default True
        When False, ``add_edge`` refuses a second edge joining the same
        unordered pair of vertices.
    lookup : EdgeLookup or str, default EdgeLookup.SYMMETRIC
        Matching strategy for ``has_edge``/``try_get_edge``.
    edge_equality : callable, optional
        ``edge_equality(edge, source, target) -> bool`` replacing the
        strategy's default comparison.
    history : bool, default False
        Start recording the mutation history right away.

    """

    def __init__(
        self,
        allow_parallel_edges: bool = True,
        *,
        lookup=EdgeLookup.SYMMETRIC,
        edge_equality=None,
        history: bool = False,
    ):
        self._allow_parallel_edges = bool(allow_parallel_edges)
        self._lookup, self._edge_equality = _resolve_lookup(lookup, edge_equality)
        self._sorted_lookup = self._lookup is EdgeLookup.SORTED
        self._adjacent = VertexEdgeIndex()
        self._edges = EdgeList()
        self._version = 0
        self._init_events()
        self._init_history(history)

    def __repr__(self):
        return (
            f"UndirectedGraph(vertices={self.vertex_count}, edges={self.edge_count}, "
            f"lookup={self._lookup.value})"
        )

    @property
    def lookup(self) -> EdgeLookup:
        return self._lookup

    # ==================== Edge set ====================

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def is_edges_empty(self) -> bool:
        return len(self._edges) == 0

    @property
    def edges(self):
        return iter(self._edges)

    # ==================== Vertices ====================

    def add_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        if not self._adjacent.add_vertex(vertex):
            return False
        self._version += 1
        self.vertex_added.fire(vertex)
        return True

    def add_vertex_range(self, vertices) -> int:
        return sum(1 for vertex in _require_all(vertices, "vertices") if self.add_vertex(vertex))

    def _unlink(self, edge, vertex):
        # drop ``edge`` from the adjacency list of its endpoint opposite ``vertex``
        other = edge.target if edge.source == vertex else edge.source
        if other != vertex:
            self._adjacent[other].remove(edge)
        self._edges.remove(edge)

    def remove_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        if vertex not in self._adjacent:
            return False
        removed = list(self._adjacent.pop(vertex))
        for edge in removed:
            self._unlink(edge, vertex)
        self._version += 1
        self._notify_edges_removed(removed)
        self.vertex_removed.fire(vertex)
        return True

    def remove_vertex_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [vertex for vertex in self._adjacent if predicate(vertex)]
        for vertex in doomed:
            self.remove_vertex(vertex)
        return len(doomed)

    # ==================== Edges ====================

    def add_edge(self, edge) -> bool:
        """Add ``edge`` between two existing vertices.

        Raises
        --
        VertexNotFoundError
            If either endpoint is not in the graph.
        InvalidArgumentError
            With ``EdgeLookup.SORTED``, if ``edge.target < edge.source``.

        """
        _require(edge, "edge")
        source_adj = self._adjacent.get(edge.source)
        if source_adj is None:
            raise VertexNotFoundError(edge.source)
        target_adj = self._adjacent.get(edge.target)
        if target_adj is None:
            raise VertexNotFoundError(edge.target)
        if self._sorted_lookup and edge.target < edge.source:
            raise InvalidArgumentError(
                f"sorted lookup needs source <= target, got {edge.source!r} > {edge.target!r}"
            )
        if not self._allow_parallel_edges and self.has_edge(edge.source, edge.target):
            return False
        source_adj.append(edge)
        if edge.source != edge.target:
            target_adj.append(edge)
        self._edges.append(edge)
        self._version += 1
        self.edge_added.fire(edge)
        return True

    def add_edge_range(self, edges) -> int:
        """Add every edge in ``edges``; return how many were accepted.

        Endpoints are checked for the whole batch first, so a missing vertex
        raises VertexNotFoundError before any edge is inserted.
        """
        edges = _require_endpoints(self, _require_all(edges, "edges"))
        return sum(1 for edge in edges if self.add_edge(edge))

    def add_vertices_and_edge(self, edge) -> bool:
        _require(edge, "edge")
        self.add_vertex(edge.source)
        self.add_vertex(edge.target)
        return self.add_edge(edge)

    def add_vertices_and_edge_range(self, edges) -> int:
        return sum(
            1 for edge in _require_all(edges, "edges") if self.add_vertices_and_edge(edge)
        )

    def remove_edge(self, edge) -> bool:
        _require(edge, "edge")
        source_adj = self._adjacent.get(edge.source)
        if source_adj is None or not source_adj.remove(edge):
            return False
        self._unlink(edge, edge.source)
        self._version += 1
        self.edge_removed.fire(edge)
        return True

    def remove_edges(self, edges) -> int:
        return sum(1 for edge in _require_all(edges, "edges") if self.remove_edge(edge))

    def remove_edge_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [edge for edge in self._edges if predicate(edge)]
        for edge in doomed:
            self.remove_edge(edge)
        return len(doomed)

    def remove_adjacent_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [edge for edge in self._adjacent_list(vertex) if predicate(edge)]
        for edge in doomed:
            self.remove_edge(edge)
        return len(doomed)

    def clear_adjacent_edges(self, vertex):
        """Remove every edge touching ``vertex``; keep the vertex."""
        adj = self._adjacent_list(vertex)
        removed = list(adj)
        adj.clear()
        for edge in removed:
            self._unlink(edge, vertex)
        if removed:
            self._version += 1
            self._notify_edges_removed(removed)

    # ==================== Whole graph ====================

    def clear(self):
        old_vertices = list(self._adjacent)
        old_edges = self._edges
        self._adjacent = VertexEdgeIndex()
        self._edges = EdgeList()
        self._version += 1
        self._notify_edges_removed(old_edges)
        self._notify_vertices_removed(old_vertices)

    def trim_edge_excess(self):
        self._adjacent.trim_excess()
        self._edges.trim_excess()

    def clone(self):
        g = UndirectedGraph(
            self._allow_parallel_edges, lookup=self._lookup, edge_equality=self._edge_equality
        )
        g._adjacent = self._adjacent.clone()
        g._edges = self._edges.clone()
        return g
