import json

import numpy as np
import polars as pl
import pytest

from incinet.core.adjacency import AdjacencyGraph
from incinet.core.bidirectional import BidirectionalGraph
from incinet.core.edges import Edge, TaggedEdge
from incinet.core.matrix import BidirectionalMatrixGraph
from incinet.core.undirected import UndirectedGraph

# ======================================================================
# History
# ======================================================================


class TestHistory:
    def test_off_by_default(self):
        g = AdjacencyGraph()
        g.add_vertex(1)
        assert not g.history_enabled
        assert g.history() == []
        assert not g.vertex_added

    def test_records_mutations(self):
        g = BidirectionalGraph(history=True)
        g.add_vertices_and_edge(TaggedEdge("a", "b", tag=1))
        g.remove_vertex("a")
        ops = [evt["op"] for evt in g.history()]
        assert ops == ["vertex_added", "vertex_added", "edge_added", "edge_removed", "vertex_removed"]
        evt = g.history()[2]
        assert evt["source"] == "a"
        assert evt["edge_type"] == "TaggedEdge"
        assert evt["version"] == 3
        assert evt["ts_utc"].endswith("Z")
        monos = [e["mono_ns"] for e in g.history()]
        assert monos == sorted(monos)

    def test_toggle_detaches_recorders(self):
        g = UndirectedGraph()
        g.enable_history()
        g.add_vertex(1)
        g.enable_history(False)
        g.add_vertex(2)
        assert len(g.history()) == 1
        assert not g.vertex_added
        g.enable_history(True)
        g.enable_history(True)
        assert len(g.vertex_added) == 1

    def test_mark_and_clear(self):
        g = AdjacencyGraph(history=True)
        g.mark("checkpoint")
        assert g.history()[-1] == {**g.history()[-1], "op": "mark", "label": "checkpoint"}
        g.clear_history()
        assert g.history() == []

    def test_jsonify_vertices(self):
        g = AdjacencyGraph(history=True)
        g.add_vertex(np.int64(7))
        g.add_vertex(frozenset({2, 1}))
        g.add_vertex(("t", 1))
        payloads = [evt["vertex"] for evt in g.history()]
        assert payloads == [7, [1, 2], ["t", 1]]
        g.add_vertex(object())
        assert g.history()[-1]["vertex"] == "<<object>>"

    def test_history_frame(self):
        g = AdjacencyGraph(history=True)
        g.add_vertices_and_edge(Edge(1, 2))
        df = g.history(as_df=True)
        assert isinstance(df, pl.DataFrame)
        assert df.height == 3
        assert {"version", "ts_utc", "mono_ns", "op"} <= set(df.columns)

    def test_export_formats(self, tmp_path):
        g = AdjacencyGraph(history=True)
        assert g.export_history(tmp_path / "empty.json") == 0
        g.add_vertices_and_edge(Edge(1, 2))

        assert g.export_history(tmp_path / "h.ndjson") == 3
        lines = (tmp_path / "h.ndjson").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["op"] == "edge_added"

        assert g.export_history(tmp_path / "h.json") == 3
        assert len(json.loads((tmp_path / "h.json").read_text(encoding="utf-8"))) == 3

        assert g.export_history(tmp_path / "h.csv") == 3
        assert pl.read_csv(tmp_path / "h.csv").height == 3

        assert g.export_history(tmp_path / "h.parquet") == 3
        assert pl.read_parquet(tmp_path / "h.parquet").height == 3

        assert g.export_history(tmp_path / "h.bin") == 3
        assert (tmp_path / "h.bin.parquet").exists()


# ======================================================================
# Sparse caches
# ======================================================================


class TestCache:
    def test_csr_counts_parallel_edges(self):
        g = AdjacencyGraph()
        g.add_vertices_and_edge_range([Edge("a", "b"), Edge("a", "b"), Edge("b", "c")])
        csr = g.cache.csr
        idx = g.cache.vertex_index
        assert csr.shape == (3, 3)
        assert csr[idx["a"], idx["b"]] == 2
        assert g.cache.csc[:, idx["c"]].sum() == 1
        assert g.cache.vertex_order == ["a", "b", "c"]

    def test_rebuilt_after_mutation(self):
        g = AdjacencyGraph()
        g.add_vertices_and_edge(Edge(1, 2))
        first = g.cache.csr
        assert g.cache.has_csr()
        assert g.cache.csr is first
        g.add_vertices_and_edge(Edge(2, 3))
        assert not g.cache.has_csr()
        assert g.cache.info()["csr"]["stale"]
        assert g.cache.csr.nnz == 2

    def test_undirected_adjacency_is_symmetric(self):
        g = UndirectedGraph()
        g.add_vertices_and_edge_range([Edge(1, 2), Edge(2, 2)])
        adj = g.cache.adjacency.toarray()
        np.testing.assert_array_equal(adj, adj.T)
        assert adj[0, 1] == 1
        assert adj[1, 1] == 1

    def test_build_invalidate_clear(self):
        g = BidirectionalMatrixGraph(2)
        g.add_edge(Edge(0, 1))
        g.cache.build()
        assert g.cache.has_csr() and g.cache.has_csc() and g.cache.has_adjacency()
        g.cache.invalidate(["csc"])
        assert not g.cache.has_csc()
        assert g.cache.has_csr()
        g.cache.clear()
        assert g.cache.info()["csr"] == {"cached": False}
        with pytest.raises(ValueError):
            g.cache.build(["dense"])
        with pytest.raises(ValueError):
            g.cache.invalidate(["dense"])
