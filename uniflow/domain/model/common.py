"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Timezone-aware current time; all stored timestamps are UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )
