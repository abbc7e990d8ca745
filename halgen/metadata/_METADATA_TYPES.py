"""Built-in metadata types by configuration name."""

from .AbstractMetadata import AbstractMetadata
from .RouteBasedResourceMetadata import RouteBasedResourceMetadata
from .UrlBasedResourceMetadata import UrlBasedResourceMetadata

# Names accepted in GeneratorConfig.strategies keys
METADATA_TYPES: dict[str, type[AbstractMetadata]] = {
    "UrlBasedResourceMetadata": UrlBasedResourceMetadata,
    "RouteBasedResourceMetadata": RouteBasedResourceMetadata,
}
