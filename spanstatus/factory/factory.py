"""StatusFactory implementation."""

import threading
from typing import Protocol

from ..models import Status, StatusCode
from ..registry import IStatusRegistry, get_registry


class IStatusFactory(Protocol):
    """Single entry point for obtaining a Status."""

    def create(self, code: StatusCode, description: str | None = None) -> Status:
        """Return a Status for code, carrying description if given."""
        ...


class StatusFactory:
    """Creates Status values, reusing registry templates when possible."""

    def __init__(self, registry: IStatusRegistry):
        self._registry = registry

    def create(self, code: StatusCode, description: str | None = None) -> Status:
        """
        Return a Status for code.

        Args:
            code: Canonical code, a member of the registry's code set.
            description: Optional description. Only None selects the shared
                template; any string, including "", yields a new instance.

        Returns:
            Shared template, or a new Status owned by the caller
        """
        if description is None:
            return self._registry.get(code)
        return Status(code, description)


# Global factory instance
_factory: StatusFactory | None = None
_factory_lock = threading.Lock()


def get_factory() -> StatusFactory:
    """Get the process-wide factory bound to the global registry."""
    global _factory
    if _factory is None:
        with _factory_lock:
            if _factory is None:
                _factory = StatusFactory(get_registry())
    return _factory


def create_status(code: StatusCode, description: str | None = None) -> Status:
    """Create a Status using the process-wide factory."""
    return get_factory().create(code, description)
