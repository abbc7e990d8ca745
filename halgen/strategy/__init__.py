"""Resource strategies."""

from .ResourceStrategy import ResourceStrategy
from .RouteBasedResourceStrategy import RouteBasedResourceStrategy
from .UrlBasedResourceStrategy import UrlBasedResourceStrategy

__all__ = [
    "ResourceStrategy",
    "RouteBasedResourceStrategy",
    "UrlBasedResourceStrategy",
]
