"""Capability contracts consumed by graph algorithms.

Each store implements the subset it can support; algorithms should depend on
the narrowest protocol they need. All protocols are runtime checkable, so
``isinstance(g, ImplicitGraph)`` tests for the methods' presence.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class VertexSet(Protocol):
    @property
    def vertex_count(self) -> int: ...

    @property
    def is_vertices_empty(self) -> bool: ...

    @property
    def vertices(self) -> Iterator[Any]: ...

    def contains_vertex(self, vertex) -> bool: ...


@runtime_checkable
class EdgeSet(Protocol):
    @property
    def edge_count(self) -> int: ...

    @property
    def is_edges_empty(self) -> bool: ...

    @property
    def edges(self) -> Iterator[Any]: ...

    def contains_edge(self, edge) -> bool: ...


@runtime_checkable
class ImplicitGraph(Protocol):
    """Forward traversal from a vertex."""

    @property
    def is_directed(self) -> bool: ...

    @property
    def allow_parallel_edges(self) -> bool: ...

    def out_edges(self, vertex) -> Iterator[Any]: ...

    def out_degree(self, vertex) -> int: ...

    def out_edge(self, vertex, index: int) -> Any: ...

    def is_out_edges_empty(self, vertex) -> bool: ...

    def try_get_out_edges(self, vertex) -> Optional[list]: ...


@runtime_checkable
class IncidenceGraph(ImplicitGraph, Protocol):
    """Forward traversal plus edge lookup between two vertices."""

    def has_edge(self, source, target) -> bool: ...

    def try_get_edge(self, source, target) -> Optional[Any]: ...

    def try_get_edges(self, source, target) -> Optional[list]: ...


@runtime_checkable
class BidirectionalIncidenceGraph(IncidenceGraph, Protocol):
    """Traversal along and against edge direction."""

    def in_edges(self, vertex) -> Iterator[Any]: ...

    def in_degree(self, vertex) -> int: ...

    def in_edge(self, vertex, index: int) -> Any: ...

    def is_in_edges_empty(self, vertex) -> bool: ...

    def try_get_in_edges(self, vertex) -> Optional[list]: ...

    def degree(self, vertex) -> int: ...


@runtime_checkable
class ImplicitUndirectedGraph(Protocol):
    """Traversal over edges touching a vertex, regardless of orientation."""

    @property
    def edge_equality(self) -> Callable[[Any, Any, Any], bool]: ...

    def adjacent_edges(self, vertex) -> Iterator[Any]: ...

    def adjacent_degree(self, vertex) -> int: ...

    def adjacent_edge(self, vertex, index: int) -> Any: ...

    def is_adjacent_edges_empty(self, vertex) -> bool: ...

    def has_edge(self, source, target) -> bool: ...

    def try_get_edge(self, source, target) -> Optional[Any]: ...


@runtime_checkable
class UndirectedGraphProtocol(ImplicitUndirectedGraph, VertexSet, EdgeSet, Protocol):
    pass


@runtime_checkable
class VertexAndEdgeListGraph(IncidenceGraph, VertexSet, EdgeSet, Protocol):
    pass


@runtime_checkable
class MutableVertexSet(Protocol):
    def add_vertex(self, vertex) -> bool: ...

    def add_vertex_range(self, vertices: Iterable) -> int: ...

    def remove_vertex(self, vertex) -> bool: ...

    def remove_vertex_if(self, predicate) -> int: ...


@runtime_checkable
class MutableEdgeListGraph(Protocol):
    def add_edge(self, edge) -> bool: ...

    def add_edge_range(self, edges: Iterable) -> int: ...

    def remove_edge(self, edge) -> bool: ...

    def remove_edge_if(self, predicate) -> int: ...

    def clear(self) -> None: ...


@runtime_checkable
class MutableVertexAndEdgeListGraph(MutableVertexSet, MutableEdgeListGraph, Protocol):
    def add_vertices_and_edge(self, edge) -> bool: ...

    def add_vertices_and_edge_range(self, edges: Iterable) -> int: ...


@runtime_checkable
class MutableBidirectionalGraph(MutableVertexAndEdgeListGraph, Protocol):
    def remove_out_edge_if(self, vertex, predicate) -> int: ...

    def remove_in_edge_if(self, vertex, predicate) -> int: ...

    def clear_out_edges(self, vertex) -> None: ...

    def clear_in_edges(self, vertex) -> None: ...

    def clear_edges(self, vertex) -> None: ...

    def merge_vertex(self, vertex, edge_factory) -> None: ...


@runtime_checkable
class Cloneable(Protocol):
    def clone(self) -> Any: ...
