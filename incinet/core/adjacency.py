from ._CacheManager import CacheAccess
from ._Events import MutationEvents
from ._helpers import _require, _require_all, _require_callable, _require_endpoints
from ._History import History
from ._Incidence import OutIncidence
from ._Index import VertexEdgeIndex
from ._Views import Views
from .exceptions import VertexNotFoundError


class AdjacencyGraph(OutIncidence, MutationEvents, History, Views, CacheAccess):
    """Mutable directed graph storing only out-edges.

    Parameters
    --
    allow_parallel_edges : bool, default True
        When False, ``add_edge`` refuses a second edge between the same
        ordered pair of vertices.
    history : bool, default False
        Start recording the mutation history right away.

    Notes
    -
    Only forward traversal is indexed. Removing a vertex therefore scans
    every out-edge list for edges targeting it; use ``BidirectionalGraph``
    when vertex removal is frequent.

    """

    def __init__(self, allow_parallel_edges: bool = True, *, history: bool = False):
        self._allow_parallel_edges = bool(allow_parallel_edges)
        self._out = VertexEdgeIndex()
        self._edge_count = 0
        self._version = 0
        self._init_events()
        self._init_history(history)

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={self.vertex_count}, edges={self.edge_count}, "
            f"allow_parallel_edges={self._allow_parallel_edges})"
        )

    # ==================== Vertices ====================

    def add_vertex(self, vertex) -> bool:
        """Add ``vertex``. Returns False if it is already present."""
        _require(vertex, "vertex")
        if not self._out.add_vertex(vertex):
            return False
        self._version += 1
        self.vertex_added.fire(vertex)
        return True

    def add_vertex_range(self, vertices) -> int:
        return sum(1 for vertex in _require_all(vertices, "vertices") if self.add_vertex(vertex))

    def remove_vertex(self, vertex) -> bool:
        """Remove ``vertex`` and every edge starting or ending at it.

        Returns
        ---
        bool
            False if the vertex was not present.

        Notes
        -
        Out-edges of the vertex go first, then every other out-edge list is
        scanned for edges targeting it. ``edge_removed`` fires once per edge,
        in that order, before ``vertex_removed``.

        """
        _require(vertex, "vertex")
        if vertex not in self._out:
            return False
        removed = list(self._out.pop(vertex))
        for out in self._out.values():
            removed.extend(out.remove_where(lambda e: e.target == vertex))
        self._edge_count -= len(removed)
        self._version += 1
        self._notify_edges_removed(removed)
        self.vertex_removed.fire(vertex)
        return True

    def remove_vertex_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [vertex for vertex in self._out if predicate(vertex)]
        for vertex in doomed:
            self.remove_vertex(vertex)
        return len(doomed)

    # ==================== Edges ====================

    def add_edge(self, edge) -> bool:
        """Add ``edge`` between two existing vertices.

        Returns
        ---
        bool
            False when parallel edges are disallowed and ``source -> target``
            already exists.

        Raises
        --
        VertexNotFoundError
            If either endpoint is not in the graph.

        """
        _require(edge, "edge")
        out = self._out.get(edge.source)
        if out is None:
            raise VertexNotFoundError(edge.source)
        if edge.target not in self._out:
            raise VertexNotFoundError(edge.target)
        if not self._allow_parallel_edges and self.has_edge(edge.source, edge.target):
            return False
        out.append(edge)
        self._edge_count += 1
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
        """Add ``edge``, adding its endpoints first when missing."""
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
        out = self._out.get(edge.source)
        if out is None or not out.remove(edge):
            return False
        self._edge_count -= 1
        self._version += 1
        self.edge_removed.fire(edge)
        return True

    def remove_edge_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [edge for edge in self.edges if predicate(edge)]
        for edge in doomed:
            self.remove_edge(edge)
        return len(doomed)

    def remove_out_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        removed = self._out_list(vertex).remove_where(predicate)
        self._after_bulk_removal(removed)
        return len(removed)

    def clear_out_edges(self, vertex):
        out = self._out_list(vertex)
        removed = list(out)
        out.clear()
        self._after_bulk_removal(removed)

    def clear_edges(self, vertex):
        """Remove every edge starting or ending at ``vertex``; keep the vertex."""
        out = self._out_list(vertex)
        removed = list(out)
        out.clear()
        for other in self._out.values():
            removed.extend(other.remove_where(lambda e: e.target == vertex))
        self._after_bulk_removal(removed)

    def _after_bulk_removal(self, removed):
        if not removed:
            return
        self._edge_count -= len(removed)
        self._version += 1
        self._notify_edges_removed(removed)

    # ==================== Whole graph ====================

    def clear(self):
        """Remove every vertex and edge.

        Removal events fire for every edge, then every vertex, only when a
        listener is attached.
        """
        old = self._out
        self._out = VertexEdgeIndex()
        self._edge_count = 0
        self._version += 1
        if self.edge_removed:
            self._notify_edges_removed([e for out in old.values() for e in out])
        self._notify_vertices_removed(old.keys())

    def trim_edge_excess(self):
        self._out.trim_excess()

    def clone(self):
        """Structural copy: new indices, same edge instances. Listeners are not copied."""
        g = AdjacencyGraph(self._allow_parallel_edges)
        g._out = self._out.clone()
        g._edge_count = self._edge_count
        return g
