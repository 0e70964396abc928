import json
import time
from datetime import UTC, datetime

import numpy as np
import polars as pl

_HOOK_NAMES = ("vertex_added", "vertex_removed", "edge_added", "edge_removed")


def _plain(value):
    """Reduce an event payload to JSON-compatible values.

    Anything without a natural JSON form becomes ``"<<TypeName>>"``.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(map(_plain, value), key=repr)
    if isinstance(value, (list, tuple)):
        return list(map(_plain, value))
    return "<<" + type(value).__name__ + ">>"


def _stamp() -> str:
    now = datetime.now(UTC).isoformat(timespec="microseconds")
    return now[: -len("+00:00")] + "Z"


def _write_lines(events, path):
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(json.dumps(evt, ensure_ascii=False) + "\n" for evt in events)


def _write_json(events, path):
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(events, fh, ensure_ascii=False)


def _frame(events):
    return pl.DataFrame(events, infer_schema_length=None, strict=False)


# suffix -> writer(events, path)
_WRITERS = {
    ".ndjson": _write_lines,
    ".jsonl": _write_lines,
    ".json": _write_json,
    ".csv": lambda events, path: _frame(events).write_csv(path),
    ".parquet": lambda events, path: _frame(events).write_parquet(path),
}


class History:
    # Mutation log fed by the store's change events. Off until enabled;
    # enabling subscribes one recorder per hook.

    def _init_history(self, enabled: bool = False):
        self._history = []
        self._history_enabled = False
        self._history_t0 = time.perf_counter_ns()
        self._history_subs = {}
        if enabled:
            self.enable_history(True)

    def _record(self, op: str, **payload):
        if not self._history_enabled:
            return
        evt = {
            "version": self._version,
            "ts_utc": _stamp(),
            "mono_ns": time.perf_counter_ns() - self._history_t0,
            "op": op,
        }
        evt.update((k, _plain(v)) for k, v in payload.items())
        self._history.append(evt)

    def _recorder_for(self, op):
        if op.startswith("vertex"):
            return lambda vertex: self._record(op, vertex=vertex)
        return lambda edge: self._record(
            op,
            source=edge.source,
            target=edge.target,
            edge_type=type(edge).__name__,
        )

    def _hooks(self):
        for name in _HOOK_NAMES:
            hook = getattr(self, name, None)
            if hook is not None:
                yield name, hook

    def enable_history(self, flag: bool = True):
        """Turn mutation recording on or off.

        Parameters
        --
        flag : bool, default True
            Attach recorders to the change events when True, detach them
            when False. Events already logged stay in the history.

        """
        flag = bool(flag)
        if flag is self._history_enabled:
            return
        self._history_enabled = flag
        for name, hook in self._hooks():
            if flag:
                self._history_subs[name] = hook.subscribe(self._recorder_for(name))
            elif name in self._history_subs:
                hook.unsubscribe(self._history_subs.pop(name))

    @property
    def history_enabled(self) -> bool:
        return self._history_enabled

    def history(self, as_df: bool = False):
        """Logged mutation events, oldest first.

        Parameters
        --
        as_df : bool, default False
            Return a ``polars.DataFrame`` instead of a list of dicts.

        Returns
        ---
        list[dict] or polars.DataFrame
            Every event has 'version' (store version after the change),
            'ts_utc', 'mono_ns' (nanoseconds since the store was built)
            and 'op', plus the vertex or the edge endpoints and type.

        Notes
        -
        One call that removes several edges logs several events with the
        same 'version'; list position and 'mono_ns' give the order.

        """
        if as_df:
            return _frame(self._history)
        return self._history.copy()

    def export_history(self, path):
        """Save the history to ``path``; the format follows the suffix.

        '.ndjson'/'.jsonl', '.json', '.csv' and '.parquet' are understood.
        Any other suffix is written as Parquet to ``path + '.parquet'``.

        Returns
        ---
        int
            Events written; 0 (and no file) when the history is empty.

        """
        if not self._history:
            return 0
        path = str(path)
        lowered = path.lower()
        for suffix, writer in _WRITERS.items():
            if lowered.endswith(suffix):
                writer(self._history, path)
                break
        else:
            _WRITERS[".parquet"](self._history, path + ".parquet")
        return len(self._history)

    def clear_history(self):
        """Forget logged events. Exported files are left alone."""
        self._history.clear()

    def mark(self, label: str):
        """Append a ``mark`` event carrying ``label``; ignored while recording is off."""
        self._record("mark", label=label)
