"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and wire aliases.
    Models are parsed from the album service's JSON by alias and may be
    built in code by field name.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )
