"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; changes produce a new instance via
    ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
