# incinet/__init__.py
"""incinet: in-memory graph stores, single import."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "incinet.core",
    "adapters": "incinet.adapters",
    "edges": "incinet.core.edges",
    "interfaces": "incinet.core.interfaces",
    "conversions": "incinet.core.conversions",
    "exceptions": "incinet.core.exceptions",
    "networkx": "incinet.adapters.networkx_adapter",
}

_CORE = "incinet.core"

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Mutable stores
    "AdjacencyGraph": (f"{_CORE}.adjacency", "AdjacencyGraph"),
    "BidirectionalGraph": (f"{_CORE}.bidirectional", "BidirectionalGraph"),
    "UndirectedGraph": (f"{_CORE}.undirected", "UndirectedGraph"),
    "EdgeLookup": (f"{_CORE}.undirected", "EdgeLookup"),
    "EdgeListGraph": (f"{_CORE}.edge_list", "EdgeListGraph"),
    "ClusteredAdjacencyGraph": (f"{_CORE}.clustered", "ClusteredAdjacencyGraph"),
    "BidirectionalMatrixGraph": (f"{_CORE}.matrix", "BidirectionalMatrixGraph"),
    # Immutable snapshots and views
    "ArrayAdjacencyGraph": (f"{_CORE}.arrays", "ArrayAdjacencyGraph"),
    "ArrayBidirectionalGraph": (f"{_CORE}.arrays", "ArrayBidirectionalGraph"),
    "ArrayUndirectedGraph": (f"{_CORE}.arrays", "ArrayUndirectedGraph"),
    "CompressedSparseRowGraph": (f"{_CORE}.csr", "CompressedSparseRowGraph"),
    "ReversedBidirectionalGraph": (f"{_CORE}.reversed", "ReversedBidirectionalGraph"),
    "BidirectionalAdapterGraph": (f"{_CORE}.adapters", "BidirectionalAdapterGraph"),
    "UndirectedBidirectionalGraph": (f"{_CORE}.adapters", "UndirectedBidirectionalGraph"),
    "FilteredIncidenceGraph": (f"{_CORE}.filtered", "FilteredIncidenceGraph"),
    "FilteredBidirectionalGraph": (f"{_CORE}.filtered", "FilteredBidirectionalGraph"),
    "FilteredUndirectedGraph": (f"{_CORE}.filtered", "FilteredUndirectedGraph"),
    # Delegates
    "DelegateImplicitGraph": (f"{_CORE}.delegate", "DelegateImplicitGraph"),
    "DelegateIncidenceGraph": (f"{_CORE}.delegate", "DelegateIncidenceGraph"),
    "DelegateBidirectionalIncidenceGraph": (
        f"{_CORE}.delegate",
        "DelegateBidirectionalIncidenceGraph",
    ),
    "DelegateVertexAndEdgeListGraph": (f"{_CORE}.delegate", "DelegateVertexAndEdgeListGraph"),
    "DelegateImplicitUndirectedGraph": (f"{_CORE}.delegate", "DelegateImplicitUndirectedGraph"),
    "DelegateUndirectedGraph": (f"{_CORE}.delegate", "DelegateUndirectedGraph"),
    # Edges
    "Edge": (f"{_CORE}.edges", "Edge"),
    "TaggedEdge": (f"{_CORE}.edges", "TaggedEdge"),
    "EquatableEdge": (f"{_CORE}.edges", "EquatableEdge"),
    "EquatableTaggedEdge": (f"{_CORE}.edges", "EquatableTaggedEdge"),
    "UndirectedEdge": (f"{_CORE}.edges", "UndirectedEdge"),
    "TaggedUndirectedEdge": (f"{_CORE}.edges", "TaggedUndirectedEdge"),
    "ReversedEdge": (f"{_CORE}.edges", "ReversedEdge"),
    # Errors
    "GraphError": (f"{_CORE}.exceptions", "GraphError"),
    "InvalidArgumentError": (f"{_CORE}.exceptions", "InvalidArgumentError"),
    "VertexNotFoundError": (f"{_CORE}.exceptions", "VertexNotFoundError"),
    "ParallelEdgeNotAllowedError": (f"{_CORE}.exceptions", "ParallelEdgeNotAllowedError"),
    "OperationNotSupportedError": (f"{_CORE}.exceptions", "OperationNotSupportedError"),
    "ClusterRemovedError": (f"{_CORE}.exceptions", "ClusterRemovedError"),
    # Conversions
    "to_adjacency_graph": (f"{_CORE}.conversions", "to_adjacency_graph"),
    "to_bidirectional_graph": (f"{_CORE}.conversions", "to_bidirectional_graph"),
    "to_undirected_graph": (f"{_CORE}.conversions", "to_undirected_graph"),
    "as_bidirectional": (f"{_CORE}.conversions", "as_bidirectional"),
    "to_array_adjacency_graph": (f"{_CORE}.conversions", "to_array_adjacency_graph"),
    "to_array_bidirectional_graph": (f"{_CORE}.conversions", "to_array_bidirectional_graph"),
    "to_array_undirected_graph": (f"{_CORE}.conversions", "to_array_undirected_graph"),
    "to_compressed_row_graph": (f"{_CORE}.conversions", "to_compressed_row_graph"),
    "to_try_func": (f"{_CORE}.conversions", "to_try_func"),
    "to_delegate_incidence_graph": (f"{_CORE}.conversions", "to_delegate_incidence_graph"),
    "to_delegate_vertex_and_edge_list_graph": (
        f"{_CORE}.conversions",
        "to_delegate_vertex_and_edge_list_graph",
    ),
    "to_delegate_undirected_graph": (f"{_CORE}.conversions", "to_delegate_undirected_graph"),
    "edges_to_vertex_pairs": (f"{_CORE}.conversions", "edges_to_vertex_pairs"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("incinet.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("incinet.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("incinet")
except PackageNotFoundError:
    __version__ = "0.0.0"
