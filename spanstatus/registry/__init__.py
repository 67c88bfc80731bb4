"""StatusRegistry module."""

from .registry import ERROR, OK, UNSET, IStatusRegistry, StatusRegistry, get_registry

__all__ = [
    "UNSET",
    "OK",
    "ERROR",
    "IStatusRegistry",
    "StatusRegistry",
    "get_registry",
]
