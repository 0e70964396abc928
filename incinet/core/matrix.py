import numbers

import numpy as np
import scipy.sparse as sp

from ._CacheManager import CacheAccess
from ._Events import EdgeEvents
from ._helpers import _check_position, _require, _require_all, _require_callable
from ._History import History
from ._Views import Views
from .exceptions import (
    InvalidArgumentError,
    OperationNotSupportedError,
    ParallelEdgeNotAllowedError,
    VertexNotFoundError,
)


class BidirectionalMatrixGraph(EdgeEvents, History, Views, CacheAccess):
    """Directed graph over the fixed vertex domain ``[0, n)`` with one edge slot per pair.

    Slots live in an ``n x n`` object array alongside a boolean occupancy
    mask, so slot queries are O(1) and row/column queries O(n). A pair can
    hold at most one edge: a second insertion raises instead of returning
    False.

    Parameters
    --
    vertex_count : int
        Size of the vertex domain, must be positive.
    history : bool, default False

    """

    allow_parallel_edges = False
    is_directed = True

    def __init__(self, vertex_count: int, *, history: bool = False):
        if (
            vertex_count is None
            or isinstance(vertex_count, bool)
            or not isinstance(vertex_count, numbers.Integral)
            or vertex_count <= 0
        ):
            raise InvalidArgumentError(f"vertex_count must be a positive integer, got {vertex_count!r}")
        n = int(vertex_count)
        self._n = n
        self._slots = np.empty((n, n), dtype=object)
        self._occupied = np.zeros((n, n), dtype=bool)
        self._edge_count = 0
        self._version = 0
        self._init_events()
        self._init_history(history)

    def __repr__(self):
        return f"BidirectionalMatrixGraph(vertices={self._n}, edges={self._edge_count})"

    # ==================== Vertices ====================

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def is_vertices_empty(self) -> bool:
        return False

    @property
    def vertices(self):
        return iter(range(self._n))

    def _in_domain(self, vertex) -> bool:
        return (
            isinstance(vertex, numbers.Integral)
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._n
        )

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return self._in_domain(vertex)

    def _check_vertex(self, vertex):
        _require(vertex, "vertex")
        if not self._in_domain(vertex):
            raise VertexNotFoundError(vertex)
        return int(vertex)

    # ==================== Edges ====================

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def is_edges_empty(self) -> bool:
        return self._edge_count == 0

    @property
    def edges(self):
        rows, cols = np.nonzero(self._occupied)
        for s, t in zip(rows.tolist(), cols.tolist()):
            yield self._slots[s, t]

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        if not (self._in_domain(edge.source) and self._in_domain(edge.target)):
            return False
        stored = self._slots[edge.source, edge.target]
        return stored is not None and stored == edge

    def has_edge(self, source, target) -> bool:
        _require(source, "source")
        _require(target, "target")
        if not (self._in_domain(source) and self._in_domain(target)):
            return False
        return bool(self._occupied[source, target])

    def try_get_edge(self, source, target):
        _require(source, "source")
        _require(target, "target")
        if not (self._in_domain(source) and self._in_domain(target)):
            return None
        return self._slots[source, target]

    def try_get_edges(self, source, target):
        _require(source, "source")
        _require(target, "target")
        if not (self._in_domain(source) and self._in_domain(target)):
            return None
        edge = self._slots[source, target]
        return [] if edge is None else [edge]

    # ==================== Out-edges ====================

    def out_edges(self, vertex):
        v = self._check_vertex(vertex)
        row = self._slots[v]
        return iter([row[t] for t in np.flatnonzero(self._occupied[v]).tolist()])

    def out_degree(self, vertex) -> int:
        v = self._check_vertex(vertex)
        return int(np.count_nonzero(self._occupied[v]))

    def is_out_edges_empty(self, vertex) -> bool:
        return self.out_degree(vertex) == 0

    def out_edge(self, vertex, index):
        v = self._check_vertex(vertex)
        cols = np.flatnonzero(self._occupied[v])
        _check_position(index, len(cols))
        return self._slots[v, cols[index]]

    def try_get_out_edges(self, vertex):
        _require(vertex, "vertex")
        if not self._in_domain(vertex):
            return None
        return list(self.out_edges(vertex))

    # ==================== In-edges ====================

    def in_edges(self, vertex):
        v = self._check_vertex(vertex)
        col = self._slots[:, v]
        return iter([col[s] for s in np.flatnonzero(self._occupied[:, v]).tolist()])

    def in_degree(self, vertex) -> int:
        v = self._check_vertex(vertex)
        return int(np.count_nonzero(self._occupied[:, v]))

    def is_in_edges_empty(self, vertex) -> bool:
        return self.in_degree(vertex) == 0

    def in_edge(self, vertex, index):
        v = self._check_vertex(vertex)
        rows = np.flatnonzero(self._occupied[:, v])
        _check_position(index, len(rows))
        return self._slots[rows[index], v]

    def try_get_in_edges(self, vertex):
        _require(vertex, "vertex")
        if not self._in_domain(vertex):
            return None
        return list(self.in_edges(vertex))

    def degree(self, vertex) -> int:
        return self.in_degree(vertex) + self.out_degree(vertex)

    # ==================== Mutation ====================

    def add_edge(self, edge) -> bool:
        """Store ``edge`` in its ``(source, target)`` slot.

        Raises
        --
        VertexNotFoundError
            If an endpoint lies outside ``[0, n)``.
        ParallelEdgeNotAllowedError
            If the slot is already occupied.

        """
        _require(edge, "edge")
        s = self._check_vertex(edge.source)
        t = self._check_vertex(edge.target)
        if self._occupied[s, t]:
            raise ParallelEdgeNotAllowedError(s, t)
        self._slots[s, t] = edge
        self._occupied[s, t] = True
        self._edge_count += 1
        self._version += 1
        self.edge_added.fire(edge)
        return True

    def add_edge_range(self, edges) -> int:
        """Fill one slot per edge, all or nothing.

        Raises
        --
        VertexNotFoundError
            If any endpoint lies outside ``[0, n)``.
        ParallelEdgeNotAllowedError
            If any slot is occupied, or claimed twice within ``edges``.

        """
        edges = _require_all(edges, "edges")
        claimed = set()
        for edge in edges:
            slot = (self._check_vertex(edge.source), self._check_vertex(edge.target))
            if self._occupied[slot] or slot in claimed:
                raise ParallelEdgeNotAllowedError(*slot)
            claimed.add(slot)
        return sum(1 for edge in edges if self.add_edge(edge))

    def _clear_slot(self, s, t):
        edge = self._slots[s, t]
        self._slots[s, t] = None
        self._occupied[s, t] = False
        return edge

    def remove_edge(self, edge) -> bool:
        if not self.contains_edge(edge):
            return False
        self._clear_slot(edge.source, edge.target)
        self._edge_count -= 1
        self._version += 1
        self.edge_removed.fire(edge)
        return True

    def remove_edge_if(self, predicate):
        raise OperationNotSupportedError(
            "BidirectionalMatrixGraph does not support predicate removal over all edges; "
            "use remove_out_edge_if or remove_in_edge_if per vertex"
        )

    def _remove_slots(self, pairs):
        removed = [self._clear_slot(s, t) for s, t in pairs]
        if removed:
            self._edge_count -= len(removed)
            self._version += 1
            self._notify_edges_removed(removed)
        return removed

    def remove_out_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        v = self._check_vertex(vertex)
        pairs = [
            (v, t) for t in np.flatnonzero(self._occupied[v]).tolist() if predicate(self._slots[v, t])
        ]
        return len(self._remove_slots(pairs))

    def remove_in_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        v = self._check_vertex(vertex)
        pairs = [
            (s, v)
            for s in np.flatnonzero(self._occupied[:, v]).tolist()
            if predicate(self._slots[s, v])
        ]
        return len(self._remove_slots(pairs))

    def clear_out_edges(self, vertex):
        v = self._check_vertex(vertex)
        self._remove_slots([(v, t) for t in np.flatnonzero(self._occupied[v]).tolist()])

    def clear_in_edges(self, vertex):
        v = self._check_vertex(vertex)
        self._remove_slots([(s, v) for s in np.flatnonzero(self._occupied[:, v]).tolist()])

    def clear_edges(self, vertex):
        v = self._check_vertex(vertex)
        pairs = [(v, t) for t in np.flatnonzero(self._occupied[v]).tolist()]
        pairs += [(s, v) for s in np.flatnonzero(self._occupied[:, v]).tolist() if s != v]
        self._remove_slots(pairs)

    def clear(self):
        rows, cols = np.nonzero(self._occupied)
        self._remove_slots(list(zip(rows.tolist(), cols.tolist())))

    def clone(self):
        g = BidirectionalMatrixGraph(self._n)
        g._slots = self._slots.copy()
        g._occupied = self._occupied.copy()
        g._edge_count = self._edge_count
        return g

    # ==================== Matrix export ====================

    def adjacency_matrix(self):
        """Occupancy as a ``scipy.sparse.csr_matrix`` of int8 (1 where a slot holds an edge)."""
        return sp.csr_matrix(self._occupied.astype(np.int8))
