import warnings

import numpy as np
import scipy.sparse as sp

from ._CacheManager import CacheAccess
from ._helpers import _check_position, _require
from ._Views import Views
from .edges import EquatableEdge
from .exceptions import InvalidArgumentError, VertexNotFoundError


class CompressedSparseRowGraph(Views, CacheAccess):
    """Immutable directed graph in compressed sparse row form.

    Vertex ``vertices[i]`` owns the target positions
    ``indices[indptr[i]:indptr[i + 1]]``. Edges are materialized on demand as
    ``EquatableEdge`` values, so only the two integer arrays are stored.

    Build one with ``CompressedSparseRowGraph.from_graph``.
    """

    allow_parallel_edges = False
    is_directed = True
    _version = 0

    def __init__(self, vertices, indptr, indices):
        self._vertices = list(vertices)
        self._index = {v: i for i, v in enumerate(self._vertices)}
        if len(self._index) != len(self._vertices):
            raise InvalidArgumentError("vertices must be unique")
        self._indptr = np.asarray(indptr, dtype=np.int64)
        self._indices = np.asarray(indices, dtype=np.int64)
        if self._indptr.shape != (len(self._vertices) + 1,):
            raise InvalidArgumentError("indptr must hold one entry per vertex plus one")
        if self._indptr[-1] != len(self._indices):
            raise InvalidArgumentError("indptr does not match the length of indices")

    @classmethod
    def from_graph(cls, graph):
        """Snapshot the out-edges of ``graph`` in its vertex enumeration order.

        Parameters
        --
        graph : object
            Any store exposing ``vertices`` and ``out_edges(v)``.

        Returns
        ---
        CompressedSparseRowGraph

        Notes
        -
        Parallel edges keep their duplicate targets but become
        indistinguishable; a warning is emitted when any are found.

        """
        _require(graph, "graph")
        vertices = list(graph.vertices)
        index = {v: i for i, v in enumerate(vertices)}
        indptr = np.zeros(len(vertices) + 1, dtype=np.int64)
        targets = []
        duplicated = False
        for i, vertex in enumerate(vertices):
            row = [index[edge.target] for edge in graph.out_edges(vertex)]
            if len(set(row)) != len(row):
                duplicated = True
            targets.extend(row)
            indptr[i + 1] = len(targets)
        if duplicated:
            warnings.warn(
                "source graph has parallel edges; they are kept as duplicate targets "
                "and can no longer be told apart",
                stacklevel=2,
            )
        return cls(vertices, indptr, np.asarray(targets, dtype=np.int64))

    def __repr__(self):
        return f"CompressedSparseRowGraph(vertices={self.vertex_count}, edges={self.edge_count})"

    # ==================== Raw arrays ====================

    @property
    def indptr(self):
        view = self._indptr.view()
        view.flags.writeable = False
        return view

    @property
    def indices(self):
        view = self._indices.view()
        view.flags.writeable = False
        return view

    def to_scipy(self):
        """Return the structure as an ``n x n`` ``scipy.sparse.csr_matrix`` of ones."""
        n = len(self._vertices)
        data = np.ones(len(self._indices), dtype=np.int8)
        return sp.csr_matrix((data, self._indices.copy(), self._indptr.copy()), shape=(n, n))

    # ==================== Vertices ====================

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def is_vertices_empty(self) -> bool:
        return not self._vertices

    @property
    def vertices(self):
        return iter(self._vertices)

    def contains_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        return vertex in self._index

    # ==================== Edges ====================

    @property
    def edge_count(self) -> int:
        return len(self._indices)

    @property
    def is_edges_empty(self) -> bool:
        return len(self._indices) == 0

    @property
    def edges(self):
        vertices = self._vertices
        for i, source in enumerate(vertices):
            start, end = self._indptr[i], self._indptr[i + 1]
            for t in self._indices[start:end].tolist():
                yield EquatableEdge(source, vertices[t])

    def _row(self, vertex):
        i = self._index.get(vertex)
        if i is None:
            return None
        return self._indices[self._indptr[i] : self._indptr[i + 1]]

    def has_edge(self, source, target) -> bool:
        _require(source, "source")
        _require(target, "target")
        row = self._row(source)
        t = self._index.get(target)
        if row is None or t is None:
            return False
        return bool(np.any(row == t))

    def contains_edge(self, edge) -> bool:
        _require(edge, "edge")
        return self.has_edge(edge.source, edge.target)

    def try_get_edge(self, source, target):
        if self.has_edge(source, target):
            return EquatableEdge(source, target)
        return None

    def try_get_edges(self, source, target):
        _require(source, "source")
        _require(target, "target")
        row = self._row(source)
        if row is None:
            return None
        t = self._index.get(target)
        if t is None:
            return []
        return [EquatableEdge(source, target) for _ in range(int(np.count_nonzero(row == t)))]

    # ==================== Out-edges ====================

    def _checked_row(self, vertex):
        _require(vertex, "vertex")
        row = self._row(vertex)
        if row is None:
            raise VertexNotFoundError(vertex)
        return row

    def out_degree(self, vertex) -> int:
        return len(self._checked_row(vertex))

    def is_out_edges_empty(self, vertex) -> bool:
        return len(self._checked_row(vertex)) == 0

    def out_edges(self, vertex):
        row = self._checked_row(vertex)
        vertices = self._vertices
        return iter([EquatableEdge(vertex, vertices[t]) for t in row.tolist()])

    def out_edge(self, vertex, index):
        row = self._checked_row(vertex)
        _check_position(index, len(row))
        return EquatableEdge(vertex, self._vertices[int(row[index])])

    def try_get_out_edges(self, vertex):
        _require(vertex, "vertex")
        if vertex not in self._index:
            return None
        return list(self.out_edges(vertex))

    def clone(self):
        return CompressedSparseRowGraph(self._vertices, self._indptr.copy(), self._indices.copy())
