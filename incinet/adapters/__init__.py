"""incinet.adapters: interop with other graph libraries (lazy)."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    "to_nx": ("incinet.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("incinet.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
