from ._helpers import _require, _require_callable
from ._Incidence import InIncidence
from ._Index import VertexEdgeIndex
from .adjacency import AdjacencyGraph
from .exceptions import VertexNotFoundError


class BidirectionalGraph(InIncidence, AdjacencyGraph):
    """Mutable directed graph indexing both out-edges and in-edges.

    Every edge sits in the out-list of its source and the in-list of its
    target; both lists change within the same call. Vertex removal costs
    O(out-degree + in-degree) instead of a full scan.

    Parameters
    --
    allow_parallel_edges : bool, default True
        When False, ``add_edge`` refuses a second ``source -> target`` edge.
    history : bool, default False
        Start recording the mutation history right away.

    """

    def __init__(self, allow_parallel_edges: bool = True, *, history: bool = False):
        self._in = VertexEdgeIndex()
        super().__init__(allow_parallel_edges, history=history)

    # ==================== Vertices ====================

    def add_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        if not self._out.add_vertex(vertex):
            return False
        self._in.add_vertex(vertex)
        self._version += 1
        self.vertex_added.fire(vertex)
        return True

    def _detach_incident(self, vertex):
        # Empties both lists of ``vertex`` and unlinks its edges from the
        # neighbours' mirror lists. Self-edges are returned once.
        out = self._out[vertex]
        in_ = self._in[vertex]
        removed = []
        for edge in out:
            if edge.target != vertex:
                self._in[edge.target].remove(edge)
            removed.append(edge)
        for edge in in_:
            if edge.source != vertex:
                self._out[edge.source].remove(edge)
                removed.append(edge)
        out.clear()
        in_.clear()
        return removed

    def remove_vertex(self, vertex) -> bool:
        """Remove ``vertex`` and its incident edges.

        ``edge_removed`` fires for the out-edges, then the in-edges, then
        ``vertex_removed`` fires. A self-edge is reported once.
        """
        _require(vertex, "vertex")
        if vertex not in self._out:
            return False
        removed = self._detach_incident(vertex)
        del self._out[vertex]
        del self._in[vertex]
        self._edge_count -= len(removed)
        self._version += 1
        self._notify_edges_removed(removed)
        self.vertex_removed.fire(vertex)
        return True

    # ==================== Edges ====================

    def add_edge(self, edge) -> bool:
        _require(edge, "edge")
        out = self._out.get(edge.source)
        if out is None:
            raise VertexNotFoundError(edge.source)
        in_ = self._in.get(edge.target)
        if in_ is None:
            raise VertexNotFoundError(edge.target)
        if not self._allow_parallel_edges and self.has_edge(edge.source, edge.target):
            return False
        out.append(edge)
        in_.append(edge)
        self._edge_count += 1
        self._version += 1
        self.edge_added.fire(edge)
        return True

    def remove_edge(self, edge) -> bool:
        _require(edge, "edge")
        out = self._out.get(edge.source)
        if out is None or not out.remove(edge):
            return False
        self._in[edge.target].remove(edge)
        self._edge_count -= 1
        self._version += 1
        self.edge_removed.fire(edge)
        return True

    def remove_out_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        removed = self._out_list(vertex).remove_where(predicate)
        for edge in removed:
            self._in[edge.target].remove(edge)
        self._after_bulk_removal(removed)
        return len(removed)

    def remove_in_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        removed = self._in_list(vertex).remove_where(predicate)
        for edge in removed:
            self._out[edge.source].remove(edge)
        self._after_bulk_removal(removed)
        return len(removed)

    def clear_out_edges(self, vertex):
        out = self._out_list(vertex)
        removed = list(out)
        out.clear()
        for edge in removed:
            self._in[edge.target].remove(edge)
        self._after_bulk_removal(removed)

    def clear_in_edges(self, vertex):
        in_ = self._in_list(vertex)
        removed = list(in_)
        in_.clear()
        for edge in removed:
            self._out[edge.source].remove(edge)
        self._after_bulk_removal(removed)

    def clear_edges(self, vertex):
        """Remove every edge starting or ending at ``vertex``; keep the vertex."""
        _require(vertex, "vertex")
        if vertex not in self._out:
            raise VertexNotFoundError(vertex)
        removed = self._detach_incident(vertex)
        self._after_bulk_removal(removed)

    # ==================== Contraction ====================

    def merge_vertex(self, vertex, edge_factory):
        """Remove ``vertex`` and reconnect its predecessors to its successors.

        For each in-edge ``u -> vertex`` and out-edge ``vertex -> w`` a new
        edge ``edge_factory(u, w)`` is added. Pairs that would touch
        ``vertex`` again (its self-edges) are skipped.

        Parameters
        --
        vertex : hashable
            Vertex to contract.
        edge_factory : callable
            ``edge_factory(source, target) -> edge``.

        Raises
        --
        VertexNotFoundError
            If ``vertex`` is not in the graph; the graph is left unchanged.

        """
        _require(vertex, "vertex")
        _require_callable(edge_factory, "edge_factory")
        if vertex not in self._out:
            raise VertexNotFoundError(vertex)
        in_edges = list(self._in[vertex])
        out_edges = list(self._out[vertex])
        self.remove_vertex(vertex)
        for in_edge in in_edges:
            if in_edge.source == vertex:
                continue
            for out_edge in out_edges:
                if out_edge.target == vertex:
                    continue
                self.add_edge(edge_factory(in_edge.source, out_edge.target))

    def merge_vertices_if(self, predicate, edge_factory) -> int:
        """Contract every vertex matching ``predicate``. Returns how many were merged."""
        _require_callable(predicate, "predicate")
        _require_callable(edge_factory, "edge_factory")
        doomed = [vertex for vertex in self._out if predicate(vertex)]
        for vertex in doomed:
            self.merge_vertex(vertex, edge_factory)
        return len(doomed)

    # ==================== Whole graph ====================

    def clear(self):
        self._in = VertexEdgeIndex()
        super().clear()

    def trim_edge_excess(self):
        self._out.trim_excess()
        self._in.trim_excess()

    def clone(self):
        g = BidirectionalGraph(self._allow_parallel_edges)
        g._out = self._out.clone()
        g._in = self._in.clone()
        g._edge_count = self._edge_count
        return g
