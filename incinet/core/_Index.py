from ._EdgeList import EdgeList


class VertexEdgeIndex(dict):
    """Mapping vertex -> EdgeList, one per direction per store.

    Insertion order of vertices is the enumeration order of the store.
    """

    def add_vertex(self, vertex) -> bool:
        if vertex in self:
            return False
        self[vertex] = EdgeList()
        return True

    def edge_total(self) -> int:
        return sum(len(edges) for edges in self.values())

    def trim_excess(self):
        for edges in self.values():
            edges.trim_excess()

    def clone(self):
        """Structural copy: new lists, shared edge objects."""
        return VertexEdgeIndex((vertex, edges.clone()) for vertex, edges in self.items())
