"""Registry of description-less status templates."""

import threading
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Protocol

from ..logging_config import get_logger
from ..models import Status, StatusCode

logger = get_logger(__name__)


# The default status of every new span.
UNSET = Status(StatusCode.UNSET)
# Validated as successful by an application developer or operator.
OK = Status(StatusCode.OK)
# The operation contains an error.
ERROR = Status(StatusCode.ERROR)


class IStatusRegistry(Protocol):
    """Lookup of the shared template Status for each canonical code."""

    def get(self, code: StatusCode) -> Status:
        """Return the template for code."""
        ...


class StatusRegistry:
    """Maps every canonical code to a shared, description-less Status.

    The code set may be newer than this module: any member without a named
    template gets one synthesized at construction. The table is read-only
    afterwards.
    """

    def __init__(self, codes: Iterable[StatusCode] = StatusCode):
        templates: dict[StatusCode, Status] = {
            StatusCode.UNSET: UNSET,
            StatusCode.OK: OK,
            StatusCode.ERROR: ERROR,
        }

        for code in codes:
            if code not in templates:
                templates[code] = Status(code)
                logger.debug("Synthesized status template for code %r", code)

        self._templates: Mapping[StatusCode, Status] = MappingProxyType(templates)
        logger.debug("Status registry built with %d templates", len(templates))

    @property
    def templates(self) -> Mapping[StatusCode, Status]:
        """Read-only view of the code to template table."""
        return self._templates

    def get(self, code: StatusCode) -> Status:
        """Return the template for code."""
        return self._templates[code]

    def __contains__(self, code: object) -> bool:
        return code in self._templates

    def __iter__(self) -> Iterator[StatusCode]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


# Global registry instance
_registry: StatusRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> StatusRegistry:
    """Get the process-wide registry, building it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = StatusRegistry()
    return _registry
