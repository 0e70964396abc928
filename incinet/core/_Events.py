from ._helpers import _require_callable


class EventHook:
    """Ordered registry of listeners for one kind of mutation.

    Listeners run synchronously, in subscription order, inside the mutating
    call. A hook is truthy only while at least one listener is attached; stores
    test it before building removal notifications.
    """

    __slots__ = ("name", "_listeners")

    def __init__(self, name: str):
        self.name = name
        self._listeners = []

    def subscribe(self, listener):
        """Attach ``listener``. Returns it, so this also works as a decorator."""
        self._listeners.append(_require_callable(listener, "listener"))
        return listener

    def unsubscribe(self, listener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def fire(self, *args):
        for listener in tuple(self._listeners):
            listener(*args)

    def clear(self):
        self._listeners.clear()

    def __bool__(self):
        return bool(self._listeners)

    def __len__(self):
        return len(self._listeners)

    def __repr__(self):
        return f"EventHook({self.name!r}, listeners={len(self._listeners)})"


class MutationEvents:
    # Change notifications

    _event_names = ("vertex_added", "vertex_removed", "edge_added", "edge_removed")

    def _init_events(self):
        for name in self._event_names:
            setattr(self, name, EventHook(name))

    def _notify_edges_removed(self, edges):
        if self.edge_removed:
            for edge in edges:
                self.edge_removed.fire(edge)

    def _notify_vertices_removed(self, vertices):
        if self.vertex_removed:
            for vertex in vertices:
                self.vertex_removed.fire(vertex)


class EdgeEvents(MutationEvents):
    # Stores with a fixed vertex set only report edge changes

    _event_names = ("edge_added", "edge_removed")
