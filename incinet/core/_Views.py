import polars as pl


def _column(name, values):
    # vertices and tags are arbitrary Python values; fall back to Object columns
    try:
        return pl.Series(name, values)
    except (TypeError, ValueError, OverflowError, pl.exceptions.PolarsError):
        return pl.Series(name, values, dtype=pl.Object)


class Views:
    # Tabular snapshots of the store

    def edges_view(self):
        """Return the edges as a Polars DataFrame.

        Returns
        ---
        polars.DataFrame
            Columns 'source', 'target', 'self_edge' and 'tag' (None for
            untagged edge types), one row per edge in enumeration order.

        """
        sources, targets, loops, tags = [], [], [], []
        for edge in self.edges:
            sources.append(edge.source)
            targets.append(edge.target)
            loops.append(edge.source == edge.target)
            tags.append(getattr(edge, "tag", None))
        return pl.DataFrame(
            [
                _column("source", sources),
                _column("target", targets),
                pl.Series("self_edge", loops, dtype=pl.Boolean),
                _column("tag", tags),
            ]
        )

    def vertices_view(self):
        """Return the vertices with their degrees as a Polars DataFrame.

        Degree columns follow the capabilities of the store: 'out_degree',
        'in_degree' and/or 'adjacent_degree'.
        """
        vertices = list(self.vertices)
        columns = [_column("vertex", vertices)]
        for attr in ("out_degree", "in_degree", "adjacent_degree"):
            fn = getattr(self, attr, None)
            if fn is None:
                continue
            columns.append(pl.Series(attr, [fn(v) for v in vertices], dtype=pl.Int64))
        return pl.DataFrame(columns)
