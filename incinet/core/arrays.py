"""Immutable snapshots of mutable stores.

Each snapshot copies its source's incidence lists into tuples at
construction and never observes later mutation of the source. ``clone``
returns the snapshot itself.
"""

from ._CacheManager import CacheAccess
from ._helpers import _require
from ._Incidence import AdjacentIncidence, InIncidence, OutIncidence
from ._Views import Views


class ArrayAdjacencyGraph(OutIncidence, Views, CacheAccess):
    """Frozen copy of a directed graph's out-edges."""

    _version = 0

    def __init__(self, graph):
        _require(graph, "graph")
        self._allow_parallel_edges = graph.allow_parallel_edges
        self._out = {vertex: tuple(graph.out_edges(vertex)) for vertex in graph.vertices}
        self._edge_count = sum(len(out) for out in self._out.values())

    def __repr__(self):
        return f"ArrayAdjacencyGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    def clone(self):
        return self


class ArrayBidirectionalGraph(InIncidence, OutIncidence, Views, CacheAccess):
    """Frozen copy of a bidirectional graph's out-edges and in-edges."""

    _version = 0

    def __init__(self, graph):
        _require(graph, "graph")
        self._allow_parallel_edges = graph.allow_parallel_edges
        vertices = list(graph.vertices)
        self._out = {vertex: tuple(graph.out_edges(vertex)) for vertex in vertices}
        self._in = {vertex: tuple(graph.in_edges(vertex)) for vertex in vertices}
        self._edge_count = sum(len(out) for out in self._out.values())

    def __repr__(self):
        return f"ArrayBidirectionalGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    def clone(self):
        return self


class ArrayUndirectedGraph(AdjacentIncidence, Views, CacheAccess):
    """Frozen copy of an undirected graph, keeping its lookup strategy."""

    _version = 0

    def __init__(self, graph):
        _require(graph, "graph")
        self._allow_parallel_edges = graph.allow_parallel_edges
        self._edge_equality = graph.edge_equality
        self._sorted_lookup = getattr(graph, "_sorted_lookup", False)
        self._adjacent = {vertex: tuple(graph.adjacent_edges(vertex)) for vertex in graph.vertices}
        self._edges = tuple(graph.edges)

    def __repr__(self):
        return f"ArrayUndirectedGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def is_edges_empty(self) -> bool:
        return not self._edges

    @property
    def edges(self):
        return iter(self._edges)

    def clone(self):
        return self
