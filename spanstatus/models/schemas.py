"""Read-only views of status values for consumers."""

from pydantic import BaseModel, ConfigDict


class StatusSnapshot(BaseModel):
    """Snapshot of a Status as rendered by debugging tools."""

    model_config = ConfigDict(frozen=True)

    code: str  # member name, e.g. "ERROR"
    value: int
    description: str | None = None
