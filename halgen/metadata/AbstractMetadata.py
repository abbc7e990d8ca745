"""Base class for all metadata descriptors."""

from pydantic import BaseModel, ConfigDict


class AbstractMetadata(BaseModel):
    """Describes how a domain type is exposed as a HAL resource.

    Strategies are registered against concrete subclasses of this model.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
