"""Canonical status codes."""

from enum import IntEnum


class StatusCode(IntEnum):
    """Canonical outcome of a span.

    Values match the tracing protocol, so a newer enumeration that keeps
    these three values compares and hashes equal to the members below.
    """

    UNSET = 0  # default, outcome not recorded
    OK = 1  # validated as successful by the application or operator
    ERROR = 2
