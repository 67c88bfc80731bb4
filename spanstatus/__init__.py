"""Span status values for tracing."""

from .config import load_environment
from .factory import IStatusFactory, StatusFactory, create_status, get_factory
from .logging_config import get_logger, setup_logging
from .models import Status, StatusCode, StatusSnapshot
from .registry import ERROR, OK, UNSET, IStatusRegistry, StatusRegistry, get_registry

__all__ = [
    # Models
    "StatusCode",
    "Status",
    "StatusSnapshot",
    # Templates
    "UNSET",
    "OK",
    "ERROR",
    # Components
    "IStatusRegistry",
    "StatusRegistry",
    "get_registry",
    "IStatusFactory",
    "StatusFactory",
    "get_factory",
    "create_status",
    # Configuration
    "load_environment",
    # Logging
    "setup_logging",
    "get_logger",
]
