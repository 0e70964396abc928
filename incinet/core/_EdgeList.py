class EdgeList:
    """Ordered, duplicate-tolerant sequence of edges for one (vertex, direction) slot."""

    __slots__ = ("_items",)

    def __init__(self, edges=None):
        self._items = [] if edges is None else list(edges)

    # ==================== Sequence protocol ====================

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, edge):
        return edge in self._items

    def __repr__(self):
        return f"EdgeList({self._items!r})"

    # ==================== Mutation ====================

    def append(self, edge):
        self._items.append(edge)

    def extend(self, edges):
        self._items.extend(edges)

    def remove(self, edge) -> bool:
        """Remove the first edge equal to ``edge``. Returns False if none matched."""
        try:
            self._items.remove(edge)
        except ValueError:
            return False
        return True

    def remove_at(self, index):
        return self._items.pop(index)

    def remove_where(self, predicate):
        """Drop every edge matching ``predicate``, keeping order of the rest.

        Returns
        ---
        list
            Removed edges in their original order.

        """
        kept, removed = [], []
        for edge in self._items:
            (removed if predicate(edge) else kept).append(edge)
        if removed:
            self._items = kept
        return removed

    def clear(self):
        self._items.clear()

    def trim_excess(self):
        # a fresh list is allocated at exactly the current length
        self._items = list(self._items)

    def clone(self):
        return EdgeList(self._items)
