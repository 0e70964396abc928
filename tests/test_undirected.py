import itertools

import pytest

from conftest import pairs
from incinet.core.edges import Edge, TaggedUndirectedEdge, UndirectedEdge
from incinet.core.exceptions import InvalidArgumentError, VertexNotFoundError
from incinet.core.undirected import EdgeLookup, UndirectedGraph


def test_symmetry(scenario_undirected):
    g = scenario_undirected
    for s, t in itertools.product(range(0, 6), repeat=2):
        assert g.has_edge(s, t) == g.has_edge(t, s)
    assert g.try_get_edge(2, 1) is g.try_get_edge(1, 2)


def test_adjacency_lists_and_self_edge_degree(scenario_undirected):
    g = scenario_undirected
    # 1: (1,2),(1,3),(1,4),(3,1)
    assert g.adjacent_degree(1) == 4
    # 3: (1,3),(3,1),(3,3) -> self-edge counted twice
    assert g.adjacent_degree(3) == 4
    assert len(list(g.adjacent_edges(3))) == 3
    assert g.adjacent_vertices(3) == [1, 3]
    assert not g.is_directed
    assert g.edge_count == 6


def test_adjacent_edge_positional(scenario_undirected):
    g = scenario_undirected
    assert (g.adjacent_edge(2, 0).source, g.adjacent_edge(2, 0).target) == (1, 2)
    with pytest.raises(IndexError):
        g.adjacent_edge(2, 5)
    assert g.try_get_adjacent_edges(99) is None
    with pytest.raises(VertexNotFoundError):
        g.adjacent_degree(99)


def test_remove_vertex(scenario_undirected):
    g = scenario_undirected
    assert g.remove_vertex(3)
    assert pairs(g.edges) == {(1, 2), (1, 4), (2, 4)}
    assert g.adjacent_degree(1) == 2
    assert not g.remove_vertex(3)
    assert g.edge_count == 3


def test_parallel_policy_uses_unordered_pair():
    g = UndirectedGraph(allow_parallel_edges=False)
    g.add_vertex_range([1, 2])
    assert g.add_edge(Edge(1, 2))
    assert not g.add_edge(Edge(2, 1))
    assert g.edge_count == 1

    g = UndirectedGraph()
    g.add_vertex_range([1, 2])
    assert g.add_edge(Edge(1, 2))
    assert g.add_edge(Edge(2, 1))
    assert g.edge_count == 2


def test_symmetric_lookup_without_ordering():
    # vertices without a natural order still work under the default lookup
    a, b = object(), object()
    g = UndirectedGraph()
    g.add_vertices_and_edge(Edge(a, b))
    assert g.has_edge(b, a)


def test_sorted_lookup():
    g = UndirectedGraph(lookup=EdgeLookup.SORTED)
    assert g.lookup is EdgeLookup.SORTED
    g.add_vertices_and_edge(UndirectedEdge(1, 2))
    g.add_vertices_and_edge(TaggedUndirectedEdge(2, 3, tag="t"))
    assert g.has_edge(2, 1)
    assert g.has_edge(3, 2)
    with pytest.raises(InvalidArgumentError):
        g.add_edge(Edge(3, 1))


def test_sorted_lookup_from_string():
    assert UndirectedGraph(lookup="sorted").lookup is EdgeLookup.SORTED
    with pytest.raises(ValueError):
        UndirectedGraph(lookup="alphabetical")


def test_custom_edge_equality():
    calls = []

    def exact(edge, s, t):
        calls.append((s, t))
        return edge.source == s and edge.target == t

    g = UndirectedGraph(edge_equality=exact)
    g.add_vertices_and_edge(Edge(1, 2))
    assert g.has_edge(1, 2)
    assert not g.has_edge(2, 1)
    assert g.edge_equality is exact
    assert calls


def test_remove_edge_and_predicates(scenario_undirected):
    g = scenario_undirected
    loop = g.try_get_edge(3, 3)
    assert g.remove_edge(loop)
    assert g.adjacent_degree(3) == 2
    assert g.remove_adjacent_edge_if(1, lambda e: 4 in (e.source, e.target)) == 1
    assert g.remove_edge_if(lambda e: e.source == 3) == 1
    assert pairs(g.edges) == {(1, 2), (1, 3), (2, 4)}
    assert g.remove_edges([g.try_get_edge(1, 2), Edge(7, 8)]) == 1


def test_clear_adjacent_edges(scenario_undirected, event_log):
    g = scenario_undirected
    event_log.attach(g, "edge_removed")
    g.clear_adjacent_edges(1)
    assert len(event_log.log) == 4
    assert pairs(g.edges) == {(2, 4), (3, 3)}
    assert g.adjacent_degree(2) == 1
    assert g.contains_vertex(1)


def test_clone_keeps_lookup(scenario_undirected):
    g = UndirectedGraph(lookup=EdgeLookup.SORTED)
    g.add_vertices_and_edge(UndirectedEdge(1, 2))
    copy = g.clone()
    assert copy.lookup is EdgeLookup.SORTED
    copy.clear()
    assert g.edge_count == 1

    copy = scenario_undirected.clone()
    copy.remove_vertex(1)
    assert scenario_undirected.edge_count == 6


def test_edge_range_rejects_batch_with_unknown_endpoint():
    g = UndirectedGraph()
    g.add_vertex_range([1, 2])
    with pytest.raises(VertexNotFoundError):
        g.add_edge_range([Edge(1, 2), Edge(3, 1)])
    assert g.is_edges_empty
    assert g.adjacent_degree(1) == 0
