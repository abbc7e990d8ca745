"""Metadata shared by single-resource descriptors."""

from pydantic import Field

from .AbstractMetadata import AbstractMetadata


class AbstractResourceMetadata(AbstractMetadata):
    resource_class: type[object] = Field(..., description="Domain class this descriptor applies to")
    extractor: str = Field(..., min_length=1, description="Name of the hydrator used to extract field data")
