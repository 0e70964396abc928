"""Edge value types and small edge helpers.

Equality is chosen by class:

- ``Edge``, ``TaggedEdge``, ``UndirectedEdge`` compare by identity, so two
  instances between the same vertices are distinct parallel edges.
- ``EquatableEdge``, ``EquatableTaggedEdge`` compare by ``(source, target)``.
- ``ReversedEdge`` compares by the edge it wraps.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from ._helpers import _require
from .exceptions import InvalidArgumentError


class Edge:
    """Directed edge with read-only endpoints.

    Parameters
    --
    source : hashable
        Source vertex, must not be None.
    target : hashable
        Target vertex, must not be None.

    """

    __slots__ = ("_source", "_target")

    is_undirected = False

    def __init__(self, source, target):
        self._source = _require(source, "source")
        self._target = _require(target, "target")

    @property
    def source(self):
        return self._source

    @property
    def target(self):
        return self._target

    @property
    def is_self_edge(self) -> bool:
        return self._source == self._target

    def __repr__(self):
        return f"{type(self).__name__}({self._source!r} -> {self._target!r})"


class TaggedEdge(Edge):
    """Edge carrying a mutable payload. The payload is not structure."""

    __slots__ = ("tag",)

    def __init__(self, source, target, tag=None):
        super().__init__(source, target)
        self.tag = tag

    def __repr__(self):
        return f"{type(self).__name__}({self._source!r} -> {self._target!r}, tag={self.tag!r})"


class EquatableEdge(Edge):
    """Edge equal to any other EquatableEdge with the same endpoints."""

    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, EquatableEdge):
            return NotImplemented
        return self._source == other._source and self._target == other._target

    def __hash__(self):
        return hash((self._source, self._target))


class EquatableTaggedEdge(EquatableEdge):
    __slots__ = ("tag",)

    def __init__(self, source, target, tag=None):
        super().__init__(source, target)
        self.tag = tag

    def __repr__(self):
        return f"{type(self).__name__}({self._source!r} -> {self._target!r}, tag={self.tag!r})"


class UndirectedEdge(Edge):
    """Edge whose endpoints are stored in sorted order (``source <= target``)."""

    __slots__ = ()

    is_undirected = True

    def __init__(self, source, target):
        super().__init__(source, target)
        if target < source:
            raise InvalidArgumentError(
                f"undirected edge requires source <= target, got {source!r} > {target!r}"
            )

    def __repr__(self):
        return f"{type(self).__name__}({self._source!r} <-> {self._target!r})"


class TaggedUndirectedEdge(UndirectedEdge):
    __slots__ = ("tag",)

    def __init__(self, source, target, tag=None):
        super().__init__(source, target)
        self.tag = tag

    def __repr__(self):
        return f"{type(self).__name__}({self._source!r} <-> {self._target!r}, tag={self.tag!r})"


class ReversedEdge:
    """View of an edge with source and target swapped.

    Only the endpoint accessors change; equality and hashing follow the
    wrapped edge so a reversed edge can be mapped back to its original.
    """

    __slots__ = ("_original",)

    is_undirected = False

    def __init__(self, original_edge):
        self._original = _require(original_edge, "original_edge")

    @property
    def original_edge(self):
        return self._original

    @property
    def source(self):
        return self._original.target

    @property
    def target(self):
        return self._original.source

    @property
    def is_self_edge(self) -> bool:
        return self._original.source == self._original.target

    def __eq__(self, other):
        if not isinstance(other, ReversedEdge):
            return NotImplemented
        return self._original == other._original

    def __hash__(self):
        return hash(self._original)

    def __repr__(self):
        return f"ReversedEdge({self.source!r} -> {self.target!r})"


# ==================== Helpers ====================


def is_self_edge(edge) -> bool:
    _require(edge, "edge")
    return edge.source == edge.target


def other_vertex(edge, vertex):
    """Return the endpoint of ``edge`` that is not ``vertex``.

    For a self-edge this is ``vertex`` itself.
    """
    _require(edge, "edge")
    _require(vertex, "vertex")
    return edge.target if edge.source == vertex else edge.source


def is_adjacent(edge, vertex) -> bool:
    _require(edge, "edge")
    _require(vertex, "vertex")
    return edge.source == vertex or edge.target == vertex


def reverse_edges(edges: Iterable) -> Iterator[ReversedEdge]:
    _require(edges, "edges")
    for edge in edges:
        yield ReversedEdge(edge)


def undirected_vertex_equality(edge, source, target) -> bool:
    """True if ``edge`` connects ``source`` and ``target`` in either orientation."""
    s, t = edge.source, edge.target
    return (s == source and t == target) or (s == target and t == source)


def sorted_vertex_equality(edge, source, target) -> bool:
    """True if ``edge`` connects ``source`` to ``target`` exactly.

    Callers pass ``source``/``target`` already sorted.
    """
    return edge.source == source and edge.target == target


def is_path(edges: Iterable) -> bool:
    """True if each edge starts where the previous one ended."""
    _require(edges, "edges")
    last_target: Any = None
    first = True
    for edge in edges:
        if not first and edge.source != last_target:
            return False
        last_target = edge.target
        first = False
    return True


def has_cycles(path: Iterable) -> bool:
    """True if a path visits some vertex twice."""
    _require(path, "path")
    seen = set()
    first = True
    for edge in path:
        if first:
            seen.add(edge.source)
            first = False
        if edge.target in seen:
            return True
        seen.add(edge.target)
    return False


def vertex_pair(edge) -> tuple:
    _require(edge, "edge")
    return (edge.source, edge.target)
