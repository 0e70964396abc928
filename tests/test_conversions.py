import pytest

from conftest import SCENARIO_PAIRS, pairs
from incinet.core import interfaces as caps
from incinet.core.adapters import BidirectionalAdapterGraph
from incinet.core.adjacency import AdjacencyGraph
from incinet.core.arrays import ArrayAdjacencyGraph, ArrayBidirectionalGraph, ArrayUndirectedGraph
from incinet.core.bidirectional import BidirectionalGraph
from incinet.core.clustered import ClusteredAdjacencyGraph
from incinet.core.conversions import (
    as_bidirectional,
    edges_to_vertex_pairs,
    to_adjacency_graph,
    to_array_adjacency_graph,
    to_array_bidirectional_graph,
    to_array_undirected_graph,
    to_bidirectional_graph,
    to_compressed_row_graph,
    to_delegate_incidence_graph,
    to_delegate_undirected_graph,
    to_delegate_vertex_and_edge_list_graph,
    to_try_func,
    to_undirected_graph,
)
from incinet.core.csr import CompressedSparseRowGraph
from incinet.core.delegate import DelegateVertexAndEdgeListGraph
from incinet.core.edge_list import EdgeListGraph
from incinet.core.edges import Edge, EquatableEdge
from incinet.core.exceptions import InvalidArgumentError, VertexNotFoundError
from incinet.core.matrix import BidirectionalMatrixGraph
from incinet.core.undirected import EdgeLookup, UndirectedGraph


def test_builders_from_pairs():
    g = to_adjacency_graph(SCENARIO_PAIRS)
    assert isinstance(g, AdjacencyGraph)
    assert pairs(g.edges) == set(SCENARIO_PAIRS)
    assert all(isinstance(e, EquatableEdge) for e in g.edges)

    b = to_bidirectional_graph([(1, 2), (1, 2)], allow_parallel_edges=False)
    assert b.edge_count == 1

    u = to_undirected_graph([(2, 1)], lookup=EdgeLookup.SYMMETRIC)
    assert u.has_edge(1, 2)


def test_builders_from_graph_keep_isolated_vertices():
    src = AdjacencyGraph()
    src.add_vertex_range(["lonely", "a", "b"])
    src.add_edge(Edge("a", "b"))
    g = to_bidirectional_graph(src)
    assert list(g.vertices) == ["lonely", "a", "b"]
    assert g.in_degree("b") == 1


def test_builders_reject_bad_items():
    with pytest.raises(InvalidArgumentError):
        to_adjacency_graph([(1, 2, 3)])
    with pytest.raises(InvalidArgumentError):
        to_adjacency_graph(None)


def test_as_bidirectional(scenario_adjacency, scenario_bidirectional):
    assert as_bidirectional(scenario_bidirectional) is scenario_bidirectional
    adapted = as_bidirectional(scenario_adjacency)
    assert isinstance(adapted, BidirectionalAdapterGraph)
    assert adapted.in_degree(4) == 2


def test_snapshot_helpers(scenario_bidirectional, scenario_undirected):
    assert isinstance(to_array_adjacency_graph(scenario_bidirectional), ArrayAdjacencyGraph)
    assert isinstance(to_array_bidirectional_graph(scenario_bidirectional), ArrayBidirectionalGraph)
    assert isinstance(to_array_undirected_graph(scenario_undirected), ArrayUndirectedGraph)
    csr = to_compressed_row_graph(scenario_bidirectional)
    assert isinstance(csr, CompressedSparseRowGraph)
    assert pairs(csr.edges) == set(SCENARIO_PAIRS)


def test_to_try_func():
    table = {1: [Edge(1, 2)]}

    def strict(v):
        return table[v]

    try_func = to_try_func(strict)
    assert try_func(1) == table[1]
    assert try_func(2) is None
    with pytest.raises(InvalidArgumentError):
        to_try_func(None)


def test_delegate_helpers():
    table = {1: [Edge(1, 2)], 2: []}

    g = to_delegate_incidence_graph(lambda v: table[v])
    assert g.out_degree(1) == 1
    with pytest.raises(VertexNotFoundError):
        g.out_degree(3)

    g = to_delegate_vertex_and_edge_list_graph(table)
    assert isinstance(g, DelegateVertexAndEdgeListGraph)
    assert g.edge_count == 1

    u = to_delegate_undirected_graph({1: [Edge(1, 2)], 2: [Edge(1, 2)]})
    assert u.adjacent_degree(2) == 1
    assert u.edge_count == 1


def test_edges_to_vertex_pairs(scenario_adjacency):
    assert edges_to_vertex_pairs(scenario_adjacency.edges) == SCENARIO_PAIRS


@pytest.mark.parametrize(
    "factory,protocols",
    [
        (AdjacencyGraph, [caps.VertexAndEdgeListGraph, caps.MutableVertexAndEdgeListGraph]),
        (BidirectionalGraph, [caps.BidirectionalIncidenceGraph, caps.MutableBidirectionalGraph]),
        (UndirectedGraph, [caps.UndirectedGraphProtocol, caps.MutableVertexSet]),
        (EdgeListGraph, [caps.EdgeSet, caps.MutableEdgeListGraph, caps.Cloneable]),
        (ClusteredAdjacencyGraph, [caps.IncidenceGraph, caps.MutableVertexSet]),
        (lambda: BidirectionalMatrixGraph(2), [caps.BidirectionalIncidenceGraph, caps.Cloneable]),
    ],
)
def test_stores_satisfy_protocols(factory, protocols):
    g = factory()
    for protocol in protocols:
        assert isinstance(g, protocol), protocol.__name__


def test_csr_is_not_mutable(scenario_adjacency):
    csr = to_compressed_row_graph(scenario_adjacency)
    assert isinstance(csr, caps.VertexAndEdgeListGraph)
    assert not isinstance(csr, caps.MutableEdgeListGraph)
