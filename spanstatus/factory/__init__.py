"""StatusFactory module."""

from .factory import IStatusFactory, StatusFactory, create_status, get_factory

__all__ = ["IStatusFactory", "StatusFactory", "create_status", "get_factory"]
