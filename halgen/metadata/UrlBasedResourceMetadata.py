"""Metadata for resources exposed at a fixed URL."""

from pydantic import Field

from .AbstractResourceMetadata import AbstractResourceMetadata


class UrlBasedResourceMetadata(AbstractResourceMetadata):
    url: str = Field(..., description="Literal or templated URL used for the self link")
