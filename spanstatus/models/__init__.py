"""Status data models."""

from .codes import StatusCode
from .schemas import StatusSnapshot
from .status import Status

__all__ = [
    "StatusCode",
    "Status",
    "StatusSnapshot",
]
