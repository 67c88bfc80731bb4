"""Span status value."""

from dataclasses import dataclass

from .codes import StatusCode
from .schemas import StatusSnapshot


@dataclass(frozen=True)
class Status:
    """Status of a span: a canonical code plus an optional description.

    Instances are immutable and compare by value. Description-less statuses
    are normally shared templates obtained from the registry; never rely on
    identity to compare them.
    """

    code: StatusCode
    description: str | None = None

    @property
    def is_unset(self) -> bool:
        return self.code == StatusCode.UNSET

    @property
    def is_ok(self) -> bool:
        return self.code == StatusCode.OK

    @property
    def is_error(self) -> bool:
        return self.code == StatusCode.ERROR

    def with_description(self, description: str | None) -> "Status":
        """
        Derive a status with the same code and the given description.

        Args:
            description: New description. None drops the description,
                returning the shared template when the process-wide registry
                knows this status's code.

        Returns:
            Status carrying the description
        """
        if description is not None:
            return Status(self.code, description)
        if self.description is None:
            return self

        from ..registry import get_registry

        registry = get_registry()
        if self.code in registry:
            return registry.get(self.code)
        return Status(self.code)

    def snapshot(self) -> StatusSnapshot:
        """Build a read-only view for display."""
        return StatusSnapshot(
            code=getattr(self.code, "name", str(self.code)),
            value=getattr(self.code, "value", self.code),
            description=self.description,
        )
