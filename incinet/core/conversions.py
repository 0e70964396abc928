"""Builders and converters between representations."""

from ._helpers import _require, _require_callable
from .adapters import BidirectionalAdapterGraph
from .adjacency import AdjacencyGraph
from .arrays import ArrayAdjacencyGraph, ArrayBidirectionalGraph, ArrayUndirectedGraph
from .bidirectional import BidirectionalGraph
from .csr import CompressedSparseRowGraph
from .delegate import (
    DelegateIncidenceGraph,
    DelegateUndirectedGraph,
    DelegateVertexAndEdgeListGraph,
)
from .edges import EquatableEdge
from .exceptions import InvalidArgumentError
from .undirected import EdgeLookup, UndirectedGraph


def _as_edge(item):
    if isinstance(item, tuple):
        if len(item) != 2:
            raise InvalidArgumentError(f"vertex pairs must have two items, got {item!r}")
        return EquatableEdge(*item)
    return _require(item, "edge")


def _fill(graph, source):
    # ``source`` is either a graph (vertices + edges) or an iterable of edges/pairs
    _require(source, "source")
    if hasattr(source, "vertices") and hasattr(source, "edges"):
        graph.add_vertex_range(source.vertices)
        graph.add_edge_range(source.edges)
    else:
        graph.add_vertices_and_edge_range(_as_edge(item) for item in source)
    return graph


def to_adjacency_graph(source, allow_parallel_edges: bool = True):
    """Build an AdjacencyGraph from a graph, or from edges / ``(source, target)`` pairs.

    Pairs become ``EquatableEdge`` values; isolated vertices are kept only
    when ``source`` is a graph.
    """
    return _fill(AdjacencyGraph(allow_parallel_edges), source)


def to_bidirectional_graph(source, allow_parallel_edges: bool = True):
    return _fill(BidirectionalGraph(allow_parallel_edges), source)


def to_undirected_graph(source, allow_parallel_edges: bool = True, lookup=EdgeLookup.SYMMETRIC):
    return _fill(UndirectedGraph(allow_parallel_edges, lookup=lookup), source)


def as_bidirectional(graph):
    """Return ``graph`` if it already indexes in-edges, else a BidirectionalAdapterGraph."""
    _require(graph, "graph")
    if hasattr(graph, "in_edges") and hasattr(graph, "in_degree"):
        return graph
    return BidirectionalAdapterGraph(graph)


def to_array_adjacency_graph(graph):
    return ArrayAdjacencyGraph(graph)


def to_array_bidirectional_graph(graph):
    return ArrayBidirectionalGraph(graph)


def to_array_undirected_graph(graph):
    return ArrayUndirectedGraph(graph)


def to_compressed_row_graph(graph):
    return CompressedSparseRowGraph.from_graph(graph)


def to_try_func(func):
    """Wrap ``func(vertex) -> edges`` so unknown vertices yield None.

    ``func`` signals an unknown vertex by returning None or raising
    ``KeyError`` (which includes VertexNotFoundError).
    """
    _require_callable(func, "func")

    def try_func(vertex):
        try:
            return func(vertex)
        except KeyError:
            return None

    return try_func


def _mapping_callback(mapping):
    def lookup(vertex):
        return mapping.get(vertex)

    return lookup


def to_delegate_incidence_graph(func, allow_parallel_edges: bool = True):
    """Delegate graph over ``func(vertex) -> edges`` (None or KeyError for unknown vertices)."""
    return DelegateIncidenceGraph(to_try_func(func), allow_parallel_edges)


def to_delegate_vertex_and_edge_list_graph(mapping, allow_parallel_edges: bool = True):
    """Delegate graph over a mapping ``vertex -> out-edges``.

    The keys present at construction form the vertex set; edge lists are
    read from the mapping on every query.
    """
    _require(mapping, "mapping")
    return DelegateVertexAndEdgeListGraph(
        list(mapping.keys()), _mapping_callback(mapping), allow_parallel_edges
    )


def to_delegate_undirected_graph(mapping, allow_parallel_edges: bool = True):
    """Delegate undirected graph over a mapping ``vertex -> adjacent edges``."""
    _require(mapping, "mapping")
    return DelegateUndirectedGraph(
        list(mapping.keys()), _mapping_callback(mapping), allow_parallel_edges
    )


def edges_to_vertex_pairs(edges):
    """``[(source, target), ...]`` for the given edges."""
    _require(edges, "edges")
    return [(edge.source, edge.target) for edge in edges]
