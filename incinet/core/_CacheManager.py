import numpy as np
import scipy.sparse as sp

_FORMATS = ("csr", "csc", "adjacency")


class CacheManager:
    """Sparse snapshots of a store, rebuilt only when the store has changed.

    Rows and columns follow ``vertex_index``, i.e. the order in which the
    store enumerates its vertices. Entries are edge counts, so parallel edges
    add up. Each snapshot remembers the store ``_version`` it was built at.
    """

    def __init__(self, graph):
        self._G = graph
        self._order = None
        self._index = None
        self._order_version = None
        # format -> (matrix, version it was built at)
        self._slots = {}
        self._builders = {
            "csr": self._make_csr,
            "csc": self._make_csc,
            "adjacency": self._make_adjacency,
        }

    def _check(self, formats):
        formats = _FORMATS if formats is None else formats
        for fmt in formats:
            if fmt not in self._builders:
                raise ValueError(f"unknown cache format {fmt!r}")
        return formats

    def _fresh(self, fmt):
        slot = self._slots.get(fmt)
        return slot is not None and slot[1] == self._G._version

    def _get(self, fmt):
        if not self._fresh(fmt):
            version = self._G._version
            self._slots[fmt] = (self._builders[fmt](), version)
        return self._slots[fmt][0]

    # -- vertex order --

    def _sync_order(self):
        if self._order_version == self._G._version and self._order is not None:
            return
        self._order = list(self._G.vertices)
        self._index = dict(zip(self._order, range(len(self._order))))
        self._order_version = self._G._version

    @property
    def vertex_order(self):
        """Vertices in row order of the cached matrices."""
        self._sync_order()
        return list(self._order)

    @property
    def vertex_index(self):
        self._sync_order()
        return dict(self._index)

    # -- builders --

    def _make_csr(self):
        self._sync_order()
        pos = self._index
        size = len(self._order)
        mirror = not self._G.is_directed
        src, dst = [], []
        for edge in self._G.edges:
            i, j = pos[edge.source], pos[edge.target]
            src.append(i)
            dst.append(j)
            if mirror and i != j:
                src.append(j)
                dst.append(i)
        counts = np.ones(len(src), dtype=np.int64)
        coo = sp.coo_matrix(
            (counts, (np.array(src, dtype=np.int64), np.array(dst, dtype=np.int64))),
            shape=(size, size),
        )
        return coo.tocsr()

    def _make_csc(self):
        return self._get("csr").tocsc()

    def _make_adjacency(self):
        counts = self._get("csr")
        both = (counts + counts.T).tocsr()
        both.data = (both.data > 0).astype(np.int8)
        both.eliminate_zeros()
        return both

    # -- public views --

    @property
    def csr(self):
        """Row-compressed edge counts; row ``i`` holds the out-edges of vertex ``i``."""
        return self._get("csr")

    @property
    def csc(self):
        """Column-compressed edge counts; column slices give in-edges."""
        return self._get("csc")

    @property
    def adjacency(self):
        """0/1 neighbourhood matrix, symmetric whatever the store direction."""
        return self._get("adjacency")

    def has_csr(self) -> bool:
        return self._fresh("csr")

    def has_csc(self) -> bool:
        return self._fresh("csc")

    def has_adjacency(self) -> bool:
        return self._fresh("adjacency")

    # -- maintenance --

    def invalidate(self, formats=None):
        """Drop cached snapshots.

        Parameters
        --
        formats : iterable of str, optional
            Any of 'csr', 'csc', 'adjacency'. Defaults to every format.

        Raises
        --
        ValueError
            On an unknown format name; nothing is dropped in that case.

        """
        for fmt in self._check(formats):
            self._slots.pop(fmt, None)

    def build(self, formats=None):
        """Materialize snapshots ahead of use. Same ``formats`` as :meth:`invalidate`."""
        for fmt in self._check(formats):
            self._get(fmt)

    def clear(self):
        self._slots.clear()
        self._order = self._index = self._order_version = None

    def info(self):
        """Report what is cached.

        Returns
        ---
        dict
            One entry per format. Uncached formats map to ``{"cached": False}``;
            others carry the build version, a ``stale`` flag, ``nnz``, ``shape``
            and the footprint in megabytes.

        """
        report = {}
        for fmt in _FORMATS:
            slot = self._slots.get(fmt)
            if slot is None:
                report[fmt] = {"cached": False}
                continue
            matrix, version = slot
            nbytes = sum(a.nbytes for a in (matrix.data, matrix.indices, matrix.indptr))
            report[fmt] = {
                "cached": True,
                "version": version,
                "stale": version != self._G._version,
                "nnz": matrix.nnz,
                "shape": matrix.shape,
                "size_mb": nbytes / 2**20,
            }
        return report


class CacheAccess:
    # ``cache`` property for stores that keep a ``_version`` counter

    @property
    def cache(self) -> CacheManager:
        manager = self.__dict__.get("_cache_manager")
        if manager is None:
            manager = self.__dict__["_cache_manager"] = CacheManager(self)
        return manager
