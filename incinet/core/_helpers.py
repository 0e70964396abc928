from .exceptions import InvalidArgumentError, VertexNotFoundError


def _require(value, name):
    """Raise InvalidArgumentError when ``value`` is None, else return it."""
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None")
    return value


def _require_callable(func, name):
    if func is None or not callable(func):
        raise InvalidArgumentError(f"'{name}' must be callable")
    return func


def _require_all(items, name):
    """Materialize ``items`` and reject any None entry before the caller mutates.

    Returns
    ---
    list
        The materialized items, in input order.

    """
    _require(items, name)
    items = list(items)
    for i, item in enumerate(items):
        if item is None:
            raise InvalidArgumentError(f"'{name}' contains None at position {i}")
    return items


def _check_position(index, degree):
    if not 0 <= index < degree:
        raise IndexError(f"edge index {index} out of range for degree {degree}")


def _require_endpoints(graph, edges):
    """Check every endpoint of ``edges`` against ``graph`` before a batch insert."""
    for edge in edges:
        for endpoint in (edge.source, edge.target):
            if not graph.contains_vertex(endpoint):
                raise VertexNotFoundError(endpoint)
    return edges
