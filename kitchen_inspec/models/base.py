"""Base model configuration for configuration and connection data."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that ignores keys it does not declare."""

    model_config = ConfigDict(frozen=True, extra="ignore")
