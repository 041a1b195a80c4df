"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; flag changes produce a new instance via
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


def utc_now() -> datetime:
    """Current time as an aware UTC timestamp, as the store reports it."""
    return datetime.now(timezone.utc)
