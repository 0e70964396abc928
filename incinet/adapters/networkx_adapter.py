from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install incinet[networkx]"
    ) from e

import warnings
from typing import Any

from ..core.bidirectional import BidirectionalGraph
from ..core.adjacency import AdjacencyGraph
from ..core.edges import TaggedEdge
from ..core.exceptions import InvalidArgumentError
from ..core.undirected import UndirectedGraph

_KINDS = {
    "adjacency": AdjacencyGraph,
    "bidirectional": BidirectionalGraph,
    "undirected": UndirectedGraph,
}


def _edge_payload(edge) -> dict[str, Any]:
    tag = getattr(edge, "tag", None)
    if tag is None:
        return {}
    if isinstance(tag, dict):
        return {str(k): v for k, v in tag.items()}
    return {"tag": tag}


def _has_parallel_edges(graph) -> bool:
    seen = set()
    for edge in graph.edges:
        key = (edge.source, edge.target)
        if not graph.is_directed:
            key = frozenset(key)
        if key in seen:
            return True
        seen.add(key)
    return False


def to_nx(graph, multigraph: bool | None = None):
    """Export an incinet graph to networkx.

    Parameters
    --
    graph : object
        Any store exposing ``vertices``, ``edges`` and ``is_directed``.
    multigraph : bool, optional
        Force a (Multi)Graph type. Defaults to a multigraph when the store
        allows parallel edges.

    Returns
    ---
    networkx.Graph | networkx.DiGraph | networkx.MultiGraph | networkx.MultiDiGraph
        Dict tags become edge attributes; any other tag is stored as 'tag'.

    Notes
    -
    Exporting parallel edges to a simple graph keeps only the last edge of
    each pair and emits a warning.

    """
    if multigraph is None:
        multigraph = bool(graph.allow_parallel_edges)
    if graph.is_directed:
        nxG = nx.MultiDiGraph() if multigraph else nx.DiGraph()
    else:
        nxG = nx.MultiGraph() if multigraph else nx.Graph()

    if not multigraph and _has_parallel_edges(graph):
        warnings.warn(
            "graph has parallel edges; exporting to a simple networkx graph keeps one edge per pair",
            stacklevel=2,
        )

    nxG.add_nodes_from(graph.vertices)
    for edge in graph.edges:
        nxG.add_edge(edge.source, edge.target, **_edge_payload(edge))
    return nxG


def from_nx(nxG, kind: str | None = None, edge_factory=None, **kwargs):
    """Import a networkx graph.

    Parameters
    --
    nxG : networkx.Graph
    kind : {"adjacency", "bidirectional", "undirected"}, optional
        Target store. Defaults to "bidirectional" for directed inputs and
        "undirected" otherwise.
    edge_factory : callable, optional
        ``edge_factory(source, target, attrs) -> edge``. Defaults to
        ``TaggedEdge`` with the attribute dict (or None) as tag.
    **kwargs
        Forwarded to the store constructor. ``allow_parallel_edges`` defaults
        to ``nxG.is_multigraph()``.

    Returns
    ---
    AdjacencyGraph | BidirectionalGraph | UndirectedGraph

    """
    if kind is None:
        kind = "bidirectional" if nxG.is_directed() else "undirected"
    try:
        cls = _KINDS[kind]
    except KeyError:
        raise InvalidArgumentError(f"unknown kind {kind!r}; expected one of {sorted(_KINDS)}") from None
    if nxG.is_directed() and cls is UndirectedGraph:
        warnings.warn("importing a directed networkx graph as undirected drops orientation", stacklevel=2)
    if edge_factory is None:

        def edge_factory(source, target, attrs):
            return TaggedEdge(source, target, dict(attrs) or None)

    kwargs.setdefault("allow_parallel_edges", nxG.is_multigraph())
    graph = cls(**kwargs)
    graph.add_vertex_range(nxG.nodes)
    for u, v, attrs in nxG.edges(data=True):
        graph.add_edge(edge_factory(u, v, attrs))
    return graph
