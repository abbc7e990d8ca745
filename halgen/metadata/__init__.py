"""Metadata descriptors."""

from .AbstractMetadata import AbstractMetadata
from .AbstractResourceMetadata import AbstractResourceMetadata
from .MetadataMap import MetadataMap
from .RouteBasedResourceMetadata import RouteBasedResourceMetadata
from .UrlBasedResourceMetadata import UrlBasedResourceMetadata

__all__ = [
    "AbstractMetadata",
    "AbstractResourceMetadata",
    "MetadataMap",
    "RouteBasedResourceMetadata",
    "UrlBasedResourceMetadata",
]
