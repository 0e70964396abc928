import pytest

from conftest import pairs
from incinet.core.delegate import (
    DelegateBidirectionalIncidenceGraph,
    DelegateImplicitGraph,
    DelegateImplicitUndirectedGraph,
    DelegateIncidenceGraph,
    DelegateUndirectedGraph,
    DelegateVertexAndEdgeListGraph,
)
from incinet.core.edges import Edge, EquatableEdge
from incinet.core.exceptions import InvalidArgumentError, VertexNotFoundError


@pytest.fixture
def out_table():
    return {
        1: [EquatableEdge(1, 2), EquatableEdge(1, 3)],
        2: [EquatableEdge(2, 3), EquatableEdge(7, 3)],  # second edge does not start at 2
        3: [EquatableEdge(3, 9)],  # 9 is outside the vertex set
    }


def test_implicit_graph(out_table):
    g = DelegateImplicitGraph(out_table.get)
    assert g.out_degree(1) == 2
    assert g.contains_vertex(3)
    assert not g.contains_vertex(4)
    assert g.try_get_out_edges(4) is None
    assert g.out_edge(1, 1) == EquatableEdge(1, 3)
    assert g.out_edges_func == out_table.get
    with pytest.raises(VertexNotFoundError):
        g.out_degree(4)
    with pytest.raises(IndexError):
        g.out_edge(3, 1)
    # no vertex list: callback answers are passed through
    assert g.out_degree(2) == 2


def test_incidence_graph_lookup(out_table):
    g = DelegateIncidenceGraph(out_table.get)
    assert g.has_edge(1, 3)
    assert g.try_get_edge(1, 4) is None
    assert g.try_get_edges(1, 2) == [EquatableEdge(1, 2)]
    assert g.try_get_edges(5, 2) is None


def test_bidirectional_delegate():
    in_table = {2: [Edge(1, 2)], 1: []}
    out_table = {1: [Edge(1, 2)], 2: []}
    g = DelegateBidirectionalIncidenceGraph(out_table.get, in_table.get)
    assert g.in_degree(2) == 1
    assert g.degree(2) == 1
    assert g.is_in_edges_empty(1)
    assert g.in_edge(2, 0).source == 1
    assert g.try_get_in_edges(3) is None
    assert g.in_edges_func == in_table.get


def test_vertex_list_filters(out_table):
    g = DelegateVertexAndEdgeListGraph([1, 2, 3], out_table.get)
    assert g.vertex_count == 3
    assert pairs(g.out_edges(2)) == {(2, 3)}
    assert g.out_degree(3) == 0
    assert pairs(g.edges) == {(1, 2), (1, 3), (2, 3)}
    assert g.edge_count == 3
    assert g.contains_edge(EquatableEdge(2, 3))
    assert not g.contains_edge(EquatableEdge(7, 3))
    assert g.try_get_out_edges(9) is None
    assert not g.is_edges_empty


def test_vertex_list_sees_callback_changes(out_table):
    g = DelegateVertexAndEdgeListGraph([1, 2, 3], out_table.get)
    out_table[3].append(EquatableEdge(3, 1))
    assert g.has_edge(3, 1)
    # vertex set is fixed at construction
    out_table[4] = []
    assert not g.contains_vertex(4)


def test_vertex_list_views(out_table):
    g = DelegateVertexAndEdgeListGraph([1, 2, 3], out_table.get)
    df = g.vertices_view()
    assert df["out_degree"].to_list() == [2, 1, 0]


def test_implicit_undirected():
    table = {1: [Edge(1, 2)], 2: [Edge(1, 2), Edge(2, 2)]}
    g = DelegateImplicitUndirectedGraph(table.get)
    assert g.adjacent_degree(2) == 3
    assert g.has_edge(2, 1)
    assert g.adjacent_vertices(2) == [1, 2]
    assert not g.is_directed
    assert not g.contains_vertex(3)


def test_undirected_vertex_list():
    e12, e23, e34 = Edge(1, 2), Edge(2, 3), Edge(3, 4)
    table = {1: [e12], 2: [e12, e23, Edge(5, 6)], 3: [e23, e34]}
    g = DelegateUndirectedGraph([1, 2, 3], table.get)
    assert g.adjacent_degree(2) == 2
    assert g.adjacent_degree(3) == 1  # (3,4) leaves the vertex set
    assert list(g.edges) == [e12, e23]
    assert g.edge_count == 2
    assert g.contains_edge(e23)
    assert g.has_edge(3, 2)
    assert g.try_get_adjacent_edges(4) is None


def test_arguments_validated():
    with pytest.raises(InvalidArgumentError):
        DelegateImplicitGraph(None)
    with pytest.raises(InvalidArgumentError):
        DelegateVertexAndEdgeListGraph([1, None], lambda v: [])
    with pytest.raises(InvalidArgumentError):
        DelegateUndirectedGraph([1], "not callable")
