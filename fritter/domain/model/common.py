"""Base model for Fritter entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Entities are frozen; services derive changed copies with ``model_copy``."""

    model_config = ConfigDict(frozen=True)
