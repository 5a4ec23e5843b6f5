"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Read-only projection compared by value.

    The tag service returns these instead of entities so callers never hold
    a reference into the live registry.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
