import pytest

from conftest import pairs
from incinet.core.adjacency import AdjacencyGraph
from incinet.core.clustered import ClusteredAdjacencyGraph
from incinet.core.edges import Edge
from incinet.core.exceptions import ClusterRemovedError, InvalidArgumentError, VertexNotFoundError


@pytest.fixture
def tree():
    """root -> a -> a1, root -> b."""
    root = ClusteredAdjacencyGraph()
    a = root.add_cluster()
    a1 = a.add_cluster()
    b = root.add_cluster()
    return root, a, a1, b


def test_upward_completion_scenario():
    root = ClusteredAdjacencyGraph()
    child = root.add_cluster()
    e = Edge(1, 2)
    assert child.add_vertices_and_edge(e)
    assert root.contains_vertex(1)
    assert root.contains_vertex(2)
    assert root.has_edge(1, 2)
    assert root.contains_edge(e)


def test_vertex_completes_whole_chain(tree):
    root, a, a1, b = tree
    assert a1.add_vertex("x")
    assert root.contains_vertex("x")
    assert a.contains_vertex("x")
    assert not b.contains_vertex("x")
    # already present upwards, new locally
    assert b.add_vertex("x")
    assert not b.add_vertex("x")


def test_edge_needs_endpoints_in_cluster(tree):
    root, a, a1, _ = tree
    root.add_vertex_range([1, 2])
    with pytest.raises(VertexNotFoundError):
        a1.add_edge(Edge(1, 2))
    assert root.edge_count == 0
    a1.add_vertex_range([1, 2])
    a1.add_edge(Edge(1, 2))
    assert a.edge_count == 1
    assert root.edge_count == 1


def test_edge_range_validates_before_touching_ancestors(tree):
    root, a, a1, b = tree
    a1.add_vertex_range([1, 2])
    with pytest.raises(VertexNotFoundError):
        a1.add_edge_range([Edge(1, 2), Edge(2, 9)])
    assert root.is_edges_empty
    assert a1.is_edges_empty


def test_subset_invariant(tree):
    root, a, a1, b = tree
    a1.add_vertices_and_edge_range([Edge(1, 2), Edge(2, 3)])
    b.add_vertices_and_edge(Edge(3, 4))
    for child, parent in [(a1, a), (a, root), (b, root)]:
        assert set(child.vertices) <= set(parent.vertices)
        assert set(child.edges) <= set(parent.edges)


def test_parallel_edge_refused_by_ancestor_leaves_chain_untouched():
    root = ClusteredAdjacencyGraph(allow_parallel_edges=False)
    a = root.add_cluster()
    b = root.add_cluster()
    first = Edge(1, 2)
    assert a.add_vertices_and_edge(first)

    second = Edge(1, 2)
    b.add_vertex(1)
    b.add_vertex(2)
    versions = (root._version, b._version)
    assert not b.add_edge(second)
    assert not b.contains_edge(second)
    assert not root.contains_edge(second)
    assert b.is_edges_empty
    assert list(root.edges) == [first]
    assert (root._version, b._version) == versions
    for child in (a, b):
        assert set(child.edges) <= set(root.edges)


def test_remove_vertex_purges_down_and_up(tree):
    root, a, a1, b = tree
    a1.add_vertices_and_edge(Edge(1, 2))
    b.add_vertices_and_edge(Edge(2, 3))
    assert a.remove_vertex(2)
    for g in (root, a, a1, b):
        assert not g.contains_vertex(2)
        assert g.edge_count == 0
    assert root.contains_vertex(3)
    assert b.contains_vertex(3)
    assert not a.remove_vertex(2)


def test_remove_edge_cascades(tree):
    root, a, a1, b = tree
    e = Edge(1, 2)
    a1.add_vertices_and_edge(e)
    b.add_vertex_range([1, 2])
    b.add_edge(e)
    assert a1.remove_edge(e)
    assert not root.contains_edge(e)
    assert not b.contains_edge(e)
    assert root.contains_vertex(1)


def test_predicate_removals(tree):
    root, a, a1, _ = tree
    a1.add_vertices_and_edge_range([Edge(1, 2), Edge(1, 3), Edge(2, 3)])
    assert a.remove_out_edge_if(1, lambda e: e.target == 3) == 1
    assert pairs(a1.edges) == {(1, 2), (2, 3)}
    assert root.remove_edge_if(lambda e: e.source == 2) == 1
    assert pairs(a1.edges) == {(1, 2)}
    a.clear_out_edges(1)
    assert root.is_edges_empty
    assert a1.remove_vertex_if(lambda v: v > 1) == 2
    assert list(root.vertices) == [1]


def test_hierarchy_accessors(tree):
    root, a, a1, b = tree
    assert root.parent is None
    assert a1.parent is a
    assert a1.root is root
    assert root.clusters == [a, b]
    assert root.clusters_count == 2
    assert a.cluster_id != b.cluster_id
    a.collapsed = True
    assert a.collapsed
    assert not b.collapsed


def test_remove_cluster_invalidates_subtree(tree):
    root, a, a1, b = tree
    a1.add_vertex("v")
    assert not root.remove_cluster(a1)
    assert root.remove_cluster(a)
    assert root.clusters == [b]
    assert root.contains_vertex("v")
    with pytest.raises(ClusterRemovedError):
        a.vertex_count
    with pytest.raises(ClusterRemovedError):
        a1.add_vertex("w")
    assert "removed" in repr(a1)
    assert not root.remove_cluster(ClusteredAdjacencyGraph())


def test_clear_drops_subclusters_only(tree):
    root, a, a1, _ = tree
    a1.add_vertices_and_edge(Edge(1, 2))
    a.clear()
    assert a.is_vertices_empty
    assert a.clusters_count == 0
    assert root.has_edge(1, 2)
    with pytest.raises(ClusterRemovedError):
        a1.edge_count


def test_wraps_existing_store():
    store = AdjacencyGraph(allow_parallel_edges=False)
    store.add_vertices_and_edge(Edge(1, 2))
    root = ClusteredAdjacencyGraph(store)
    assert root.edge_count == 1
    assert not root.allow_parallel_edges
    child = root.add_cluster()
    assert not child.allow_parallel_edges
    with pytest.raises(InvalidArgumentError):
        ClusteredAdjacencyGraph(graph="not a graph")


def test_history_and_events_follow_store():
    root = ClusteredAdjacencyGraph(history=True)
    child = root.add_cluster()
    child.add_vertices_and_edge(Edge("p", "q"))
    ops = [evt["op"] for evt in root.history()]
    assert ops == ["vertex_added", "vertex_added", "edge_added"]
