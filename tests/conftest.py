"""Shared fixtures and helpers for store tests."""

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from incinet.core.adjacency import AdjacencyGraph  # noqa: E402
from incinet.core.bidirectional import BidirectionalGraph  # noqa: E402
from incinet.core.edges import Edge, EquatableEdge  # noqa: E402
from incinet.core.undirected import UndirectedGraph  # noqa: E402

SCENARIO_VERTICES = [1, 2, 3, 4]
SCENARIO_PAIRS = [(1, 2), (1, 3), (1, 4), (2, 4), (3, 1), (3, 3)]

# ======================================================================
# FIXTURES
# ======================================================================


def _fill(graph, pairs=SCENARIO_PAIRS, edge_type=Edge):
    graph.add_vertex_range(SCENARIO_VERTICES)
    for s, t in pairs:
        graph.add_edge(edge_type(s, t))
    return graph


@pytest.fixture
def scenario_adjacency():
    """Vertices 1..4 with edges (1,2),(1,3),(1,4),(2,4),(3,1),(3,3)."""
    return _fill(AdjacencyGraph())


@pytest.fixture
def scenario_bidirectional():
    return _fill(BidirectionalGraph())


@pytest.fixture(params=["adjacency", "bidirectional"])
def scenario_directed(request):
    """Same scenario in every directed mutable store."""
    cls = {"adjacency": AdjacencyGraph, "bidirectional": BidirectionalGraph}[request.param]
    return _fill(cls())


@pytest.fixture
def scenario_undirected():
    return _fill(UndirectedGraph())


@pytest.fixture
def equatable_bidirectional():
    return _fill(BidirectionalGraph(), edge_type=EquatableEdge)


@pytest.fixture
def event_log():
    """Recorder usable as a listener for any hook; ``log`` keeps (name, payload)."""

    class Recorder:
        def __init__(self):
            self.log = []

        def attach(self, graph, *names):
            for name in names:
                getattr(graph, name).subscribe(lambda payload, n=name: self.log.append((n, payload)))
            return self

    return Recorder()


# ======================================================================
# HELPERS
# ======================================================================


def pairs(edges):
    """``{(source, target), ...}`` for an edge iterable."""
    return {(e.source, e.target) for e in edges}


def pair_list(edges):
    return [(e.source, e.target) for e in edges]


def assert_mirror(graph):
    """Every out-list and in-list agrees with the edge set."""
    edges = list(graph.edges)
    assert graph.edge_count == len(edges)
    for v in graph.vertices:
        assert {id(e) for e in graph.out_edges(v)} == {id(e) for e in edges if e.source == v}
        assert {id(e) for e in graph.in_edges(v)} == {id(e) for e in edges if e.target == v}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
