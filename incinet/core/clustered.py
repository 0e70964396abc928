from ._CacheManager import CacheAccess
from ._helpers import _require, _require_all, _require_callable, _require_endpoints
from ._History import History
from ._Incidence import OutIncidence
from ._Views import Views
from .adjacency import AdjacencyGraph
from .exceptions import ClusterRemovedError, InvalidArgumentError, VertexNotFoundError


class _ClusterArena:
    """Tables for one cluster tree: stores, parent ids, child ids, flags.

    Cluster ids are never reused, so a handle whose id has left the tables
    is known to be stale.
    """

    __slots__ = ("graphs", "parent", "children", "collapsed", "handles", "_next_id")

    def __init__(self):
        self.graphs = {}
        self.parent = {}
        self.children = {}
        self.collapsed = {}
        self.handles = {}
        self._next_id = 0

    def new_cluster(self, graph, parent_id=None) -> int:
        cid = self._next_id
        self._next_id += 1
        self.graphs[cid] = graph
        self.parent[cid] = parent_id
        self.children[cid] = []
        self.collapsed[cid] = False
        if parent_id is not None:
            self.children[parent_id].append(cid)
        return cid

    def ancestry(self, cid):
        """``cid`` followed by its ancestors up to the root."""
        chain = []
        while cid is not None:
            chain.append(cid)
            cid = self.parent[cid]
        return chain

    def descendants(self, cid):
        """Strict descendants of ``cid`` in post-order (deepest first)."""
        order = []
        stack = [(child, False) for child in reversed(self.children[cid])]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                order.append(node)
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(self.children[node]))
        return order

    def drop(self, cid):
        """Forget ``cid`` and its whole subtree."""
        parent_id = self.parent[cid]
        if parent_id is not None:
            self.children[parent_id].remove(cid)
        for node in self.descendants(cid) + [cid]:
            del self.graphs[node]
            del self.parent[node]
            del self.children[node]
            del self.collapsed[node]
            self.handles.pop(node, None)


class ClusteredAdjacencyGraph(OutIncidence, History, Views, CacheAccess):
    """Tree of directed graphs where each cluster is a subgraph of its parent.

    Adding a vertex or edge to a cluster first adds it to every ancestor, root
    first. Removing one purges it from the cluster's descendants, the cluster
    itself, and then each ancestor together with that ancestor's descendants.

    Parameters
    --
    graph : AdjacencyGraph, optional
        Store backing the root cluster; a new empty one is created if omitted.
    allow_parallel_edges : bool, default True
        Used only when ``graph`` is omitted. Child clusters inherit the
        root's setting.
    history : bool, default False

    Examples
    --
    >>> from incinet.core.edges import Edge
    >>> root = ClusteredAdjacencyGraph()
    >>> child = root.add_cluster()
    >>> child.add_vertices_and_edge(Edge(1, 2))
    True
    >>> root.has_edge(1, 2)
    True

    """

    def __init__(self, graph=None, allow_parallel_edges: bool = True, *, history: bool = False):
        if graph is None:
            graph = AdjacencyGraph(allow_parallel_edges)
        elif not isinstance(graph, AdjacencyGraph):
            raise InvalidArgumentError("graph must be an AdjacencyGraph")
        self._arena = _ClusterArena()
        self._cid = self._arena.new_cluster(graph)
        self._arena.handles[self._cid] = self
        self._init_history(history)

    @classmethod
    def _handle(cls, arena, cid):
        handle = arena.handles.get(cid)
        if handle is None:
            handle = cls.__new__(cls)
            handle._arena = arena
            handle._cid = cid
            handle._init_history(False)
            arena.handles[cid] = handle
        return handle

    def __repr__(self):
        if self._cid not in self._arena.graphs:
            return f"ClusteredAdjacencyGraph(id={self._cid}, removed)"
        return (
            f"ClusteredAdjacencyGraph(id={self._cid}, vertices={self.vertex_count}, "
            f"edges={self.edge_count}, clusters={self.clusters_count})"
        )

    # ==================== Store access ====================

    @property
    def _store(self) -> AdjacencyGraph:
        self._check_alive()
        return self._arena.graphs[self._cid]

    def _check_alive(self):
        if self._cid not in self._arena.graphs:
            raise ClusterRemovedError(f"cluster {self._cid} was removed from its hierarchy")

    @property
    def _out(self):
        return self._store._out

    @property
    def _edge_count(self):
        return self._store._edge_count

    @property
    def _allow_parallel_edges(self):
        return self._store.allow_parallel_edges

    @property
    def _version(self):
        return self._store._version

    @property
    def vertex_added(self):
        return self._store.vertex_added

    @property
    def vertex_removed(self):
        return self._store.vertex_removed

    @property
    def edge_added(self):
        return self._store.edge_added

    @property
    def edge_removed(self):
        return self._store.edge_removed

    # ==================== Hierarchy ====================

    @property
    def cluster_id(self) -> int:
        return self._cid

    @property
    def parent(self):
        self._check_alive()
        parent_id = self._arena.parent[self._cid]
        return None if parent_id is None else self._handle(self._arena, parent_id)

    @property
    def root(self):
        self._check_alive()
        return self._handle(self._arena, self._arena.ancestry(self._cid)[-1])

    @property
    def clusters(self):
        self._check_alive()
        return [self._handle(self._arena, cid) for cid in self._arena.children[self._cid]]

    @property
    def clusters_count(self) -> int:
        self._check_alive()
        return len(self._arena.children[self._cid])

    @property
    def collapsed(self) -> bool:
        """Advisory flag for renderers; has no structural effect."""
        self._check_alive()
        return self._arena.collapsed[self._cid]

    @collapsed.setter
    def collapsed(self, value):
        self._check_alive()
        self._arena.collapsed[self._cid] = bool(value)

    def add_cluster(self):
        """Create an empty child cluster and return its handle."""
        child_graph = AdjacencyGraph(self._store.allow_parallel_edges)
        cid = self._arena.new_cluster(child_graph, self._cid)
        return self._handle(self._arena, cid)

    def remove_cluster(self, cluster) -> bool:
        """Detach a direct child cluster and its subtree.

        Vertices and edges stay in this cluster. The removed handles raise
        ClusterRemovedError afterwards.

        Returns
        ---
        bool
            False if ``cluster`` is not a direct child of this cluster.

        """
        _require(cluster, "cluster")
        self._check_alive()
        if not isinstance(cluster, ClusteredAdjacencyGraph) or cluster._arena is not self._arena:
            return False
        if cluster._cid not in self._arena.children[self._cid]:
            return False
        self._arena.drop(cluster._cid)
        return True

    # ==================== Vertices ====================

    def add_vertex(self, vertex) -> bool:
        """Add ``vertex`` here, completing the ancestor chain first."""
        _require(vertex, "vertex")
        store = self._store
        chain = self._arena.ancestry(self._cid)
        for cid in reversed(chain[1:]):
            self._arena.graphs[cid].add_vertex(vertex)
        return store.add_vertex(vertex)

    def add_vertex_range(self, vertices) -> int:
        return sum(1 for vertex in _require_all(vertices, "vertices") if self.add_vertex(vertex))

    def _purge(self, remove):
        # down-then-up: each level's descendants, then the level, then its parent
        for level in self._arena.ancestry(self._cid):
            for cid in self._arena.descendants(level):
                remove(self._arena.graphs[cid])
            remove(self._arena.graphs[level])

    def remove_vertex(self, vertex) -> bool:
        _require(vertex, "vertex")
        if not self._store.contains_vertex(vertex):
            return False
        self._purge(lambda g: g.remove_vertex(vertex))
        return True

    def remove_vertex_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [vertex for vertex in self._store.vertices if predicate(vertex)]
        for vertex in doomed:
            self.remove_vertex(vertex)
        return len(doomed)

    # ==================== Edges ====================

    def add_edge(self, edge) -> bool:
        """Add ``edge`` here, completing the ancestor chain first.

        Returns
        ---
        bool
            False when some level of the chain disallows parallel edges and
            already holds another ``source -> target`` edge. No level is
            changed in that case.

        Raises
        --
        VertexNotFoundError
            If an endpoint is missing from this cluster. Nothing is added to
            any ancestor in that case.

        """
        _require(edge, "edge")
        store = self._store
        for endpoint in (edge.source, edge.target):
            if not store.contains_vertex(endpoint):
                raise VertexNotFoundError(endpoint)
        levels = [self._arena.graphs[cid] for cid in reversed(self._arena.ancestry(self._cid))]
        for level in levels:
            if (
                not level.allow_parallel_edges
                and not level.contains_edge(edge)
                and level.has_edge(edge.source, edge.target)
            ):
                return False
        for ancestor in levels[:-1]:
            if not ancestor.contains_edge(edge):
                ancestor.add_edge(edge)
        return store.add_edge(edge)

    def add_edge_range(self, edges) -> int:
        edges = _require_endpoints(self._store, _require_all(edges, "edges"))
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
        if not self._store.contains_edge(edge):
            return False
        self._purge(lambda g: g.remove_edge(edge))
        return True

    def remove_edge_if(self, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [edge for edge in self._store.edges if predicate(edge)]
        for edge in doomed:
            self.remove_edge(edge)
        return len(doomed)

    def remove_out_edge_if(self, vertex, predicate) -> int:
        _require_callable(predicate, "predicate")
        doomed = [edge for edge in self._out_list(vertex) if predicate(edge)]
        for edge in doomed:
            self.remove_edge(edge)
        return len(doomed)

    def clear_out_edges(self, vertex):
        for edge in list(self._out_list(vertex)):
            self.remove_edge(edge)

    def clear(self):
        """Empty this cluster and drop its sub-clusters. Ancestors are untouched."""
        store = self._store
        for cid in list(self._arena.children[self._cid]):
            self._arena.drop(cid)
        store.clear()

    def trim_edge_excess(self):
        self._store.trim_edge_excess()
