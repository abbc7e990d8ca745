"""Built-in resource strategies by configuration name."""

from .ResourceStrategy import ResourceStrategy
from .RouteBasedResourceStrategy import RouteBasedResourceStrategy
from .UrlBasedResourceStrategy import UrlBasedResourceStrategy

# Names accepted in GeneratorConfig.strategies values
STRATEGIES: dict[str, type[ResourceStrategy]] = {
    "url": UrlBasedResourceStrategy,
    "route": RouteBasedResourceStrategy,
}
