"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model for tag registry entities.

    Entities are never changed in place; updates go through ``model_copy``
    and produce a new instance.
    """

    model_config = ConfigDict(frozen=True)
