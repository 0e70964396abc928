"""Read-side mixins shared by the stores.

``OutIncidence`` reads ``self._out`` (vertex -> sequence of out-edges) and
``self._edge_count``; ``InIncidence`` reads ``self._in``. The sequences can be
EdgeList objects (mutable stores) or tuples (snapshots).
"""

from ._helpers import _check_position, _require
from .exceptions import VertexNotFoundError


class OutIncidence:
    # VertexSet / EdgeSet / ImplicitGraph / IncidenceGraph over ``_out``

    is_directed = True

    @property
    def allow_parallel_edges(self) -> bool:
        return self._allow_parallel_edges

    # ==================== Vertices ====================

    @property
    def vertex_count(self) -> int:
        return len(self._out)

    @property
    def is_vertices_empty(self) -> bool:
        return not self._out

    @property
    def vertices(self):
        return iter(self._out)

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return vertex in self._out

    # ==================== Edges ====================

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def is_edges_empty(self) -> bool:
        return self._edge_count == 0

    @property
    def edges(self):
        for out in self._out.values():
            yield from out

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        out = self._out.get(edge.source)
        return out is not None and edge in out

    def has_edge(self, source, target) -> bool:
        """True if some out-edge of ``source`` targets ``target``."""
        return self.try_get_edge(source, target) is not None

    def try_get_edge(self, source, target):
        """Return the first edge ``source -> target``, or None."""
        _require(source, "source")
        _require(target, "target")
        out = self._out.get(source)
        if out is None:
            return None
        for edge in out:
            if edge.target == target:
                return edge
        return None

    def try_get_edges(self, source, target):
        """Return every edge ``source -> target``; None if ``source`` is unknown."""
        _require(source, "source")
        _require(target, "target")
        out = self._out.get(source)
        if out is None:
            return None
        return [edge for edge in out if edge.target == target]

    # ==================== Out-edges ====================

    def _out_list(self, vertex):
        _require(vertex, "vertex")
        try:
            return self._out[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def out_edges(self, vertex):
        return iter(self._out_list(vertex))

    def out_degree(self, vertex) -> int:
        return len(self._out_list(vertex))

    def is_out_edges_empty(self, vertex) -> bool:
        return len(self._out_list(vertex)) == 0

    def out_edge(self, vertex, index):
        out = self._out_list(vertex)
        _check_position(index, len(out))
        return out[index]

    def try_get_out_edges(self, vertex):
        _require(vertex, "vertex")
        out = self._out.get(vertex)
        return None if out is None else list(out)


class InIncidence:
    # BidirectionalIncidenceGraph over ``_in``

    def _in_list(self, vertex):
        _require(vertex, "vertex")
        try:
            return self._in[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def in_edges(self, vertex):
        return iter(self._in_list(vertex))

    def in_degree(self, vertex) -> int:
        return len(self._in_list(vertex))

    def is_in_edges_empty(self, vertex) -> bool:
        return len(self._in_list(vertex)) == 0

    def in_edge(self, vertex, index):
        in_ = self._in_list(vertex)
        _check_position(index, len(in_))
        return in_[index]

    def try_get_in_edges(self, vertex):
        _require(vertex, "vertex")
        in_ = self._in.get(vertex)
        return None if in_ is None else list(in_)

    def degree(self, vertex) -> int:
        """In-degree plus out-degree; a self-edge counts twice."""
        return len(self._out_list(vertex)) + len(self._in_list(vertex))


class AdjacentIncidence:
    # ImplicitUndirectedGraph over ``_adjacent``, with a lookup strategy
    # in ``_edge_equality`` and ``_sorted_lookup``

    is_directed = False

    @property
    def allow_parallel_edges(self) -> bool:
        return self._allow_parallel_edges

    @property
    def edge_equality(self):
        return self._edge_equality

    # ==================== Vertices ====================

    @property
    def vertex_count(self) -> int:
        return len(self._adjacent)

    @property
    def is_vertices_empty(self) -> bool:
        return not self._adjacent

    @property
    def vertices(self):
        return iter(self._adjacent)

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return vertex in self._adjacent

    # ==================== Adjacency ====================

    def _adjacent_list(self, vertex):
        _require(vertex, "vertex")
        try:
            return self._adjacent[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def adjacent_edges(self, vertex):
        return iter(self._adjacent_list(vertex))

    def adjacent_degree(self, vertex) -> int:
        """Number of edge ends at ``vertex``; a self-edge contributes 2."""
        adj = self._adjacent_list(vertex)
        return len(adj) + sum(1 for edge in adj if edge.source == edge.target)

    def is_adjacent_edges_empty(self, vertex) -> bool:
        return len(self._adjacent_list(vertex)) == 0

    def adjacent_edge(self, vertex, index):
        adj = self._adjacent_list(vertex)
        _check_position(index, len(adj))
        return adj[index]

    def adjacent_vertices(self, vertex):
        """Neighbours of ``vertex`` in adjacency order, without repeats."""
        seen = {}
        for edge in self._adjacent_list(vertex):
            other = edge.target if edge.source == vertex else edge.source
            seen.setdefault(other, None)
        return list(seen)

    def try_get_adjacent_edges(self, vertex):
        _require(vertex, "vertex")
        adj = self._adjacent.get(vertex)
        return None if adj is None else list(adj)

    # ==================== Edge lookup ====================

    def _lookup_key(self, source, target):
        if self._sorted_lookup and target < source:
            return target, source
        return source, target

    def try_get_edge(self, source, target):
        """Return an edge connecting ``source`` and ``target``, or None."""
        _require(source, "source")
        _require(target, "target")
        source, target = self._lookup_key(source, target)
        adj = self._adjacent.get(source)
        if adj is None:
            return None
        other = self._adjacent.get(target)
        if other is None:
            return None
        # scan the shorter side; both hold every non-self edge between them
        if len(other) < len(adj):
            adj = other
        for edge in adj:
            if self._edge_equality(edge, source, target):
                return edge
        return None

    def has_edge(self, source, target) -> bool:
        return self.try_get_edge(source, target) is not None

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        adj = self._adjacent.get(edge.source)
        return adj is not None and edge in adj
