"""Create HAL resources from plain data or from mapped domain objects."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .config.GeneratorConfig import GeneratorConfig
from .InvalidObjectError import InvalidObjectError
from .InvalidStrategyError import InvalidStrategyError
from .Link import Link
from .LinkGenerator import LinkGenerator
from .metadata._METADATA_TYPES import METADATA_TYPES
from .metadata.AbstractMetadata import AbstractMetadata
from .metadata.RouteBasedResourceMetadata import RouteBasedResourceMetadata
from .metadata.UrlBasedResourceMetadata import UrlBasedResourceMetadata
from .protocols import HydratorLocator, MetadataMapProtocol
from .Resource import Resource
from .strategy._STRATEGIES import STRATEGIES
from .strategy.ResourceStrategy import ResourceStrategy
from .strategy.RouteBasedResourceStrategy import RouteBasedResourceStrategy
from .strategy.UrlBasedResourceStrategy import UrlBasedResourceStrategy
from .UnknownMetadataTypeError import UnknownMetadataTypeError
from .utils.configure_logging import configure_logging
from .utils.get_logger import get_logger

logger = get_logger("ResourceGenerator")

# Values from_object refuses outright; everything else is treated as a domain object
_NON_OBJECT_TYPES = (str, bytes, bytearray, int, float, complex, list, tuple, dict, set, frozenset)


class ResourceGenerator:
    """Dispatches object-to-resource conversion to registered strategies.

    Strategies are keyed by metadata class. Register them during start-up;
    each registration publishes a fresh read-only snapshot of the registry,
    so lookups made while serving requests never see a partial update.
    """

    def __init__(
        self,
        metadata_map: MetadataMapProtocol,
        hydrators: HydratorLocator,
        link_generator: LinkGenerator,
    ):
        self._metadata_map = metadata_map
        self._hydrators = hydrators
        self._link_generator = link_generator
        self._strategies: Mapping[type[AbstractMetadata], ResourceStrategy] = MappingProxyType({})

        self.add_strategy(UrlBasedResourceMetadata, UrlBasedResourceStrategy())
        self.add_strategy(RouteBasedResourceMetadata, RouteBasedResourceStrategy())

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        metadata_map: MetadataMapProtocol,
        hydrators: HydratorLocator,
        link_generator: LinkGenerator,
    ) -> "ResourceGenerator":
        """Build a generator, configure logging and apply strategy overrides."""
        configure_logging(config.log)
        generator = cls(metadata_map, hydrators, link_generator)
        for metadata_name, strategy_name in config.strategies.items():
            generator.add_strategy(METADATA_TYPES[metadata_name], STRATEGIES[strategy_name])
        return generator

    @property
    def metadata_map(self) -> MetadataMapProtocol:
        return self._metadata_map

    @property
    def link_generator(self) -> LinkGenerator:
        return self._link_generator

    @property
    def strategies(self) -> Mapping[type[AbstractMetadata], ResourceStrategy]:
        """Read-only snapshot of the current registrations."""
        return self._strategies

    def add_strategy(
        self,
        metadata_type: type[AbstractMetadata],
        strategy: ResourceStrategy | type[ResourceStrategy],
    ) -> None:
        """Link a metadata type to the strategy that creates resources for it.

        Args:
            metadata_type: AbstractMetadata subclass
            strategy: Strategy instance, or a ResourceStrategy subclass to
                instantiate with no arguments

        Raises:
            UnknownMetadataTypeError: If metadata_type is not an AbstractMetadata subclass
            InvalidStrategyError: If strategy is not a ResourceStrategy (instance or subclass)
        """
        if not isinstance(metadata_type, type) or not issubclass(metadata_type, AbstractMetadata):
            raise UnknownMetadataTypeError.for_invalid_metadata_class(metadata_type)

        if isinstance(strategy, type):
            if not issubclass(strategy, ResourceStrategy):
                raise InvalidStrategyError.for_type(strategy)
            strategy = strategy()

        if not isinstance(strategy, ResourceStrategy):
            raise InvalidStrategyError.for_instance(strategy)

        logger.debug("Registering %s for %s", type(strategy).__name__, metadata_type.__name__)
        self._strategies = MappingProxyType({**self._strategies, metadata_type: strategy})

    def from_array(self, data: Mapping[str, Any], uri: str | None = None) -> Resource:
        """Wrap plain field data in a resource, with a self link when ``uri`` is given."""
        resource = Resource(data)

        if uri is not None:
            return resource.with_link(Link("self", uri))

        return resource

    def from_object(self, instance: Any, request: Any) -> Resource:
        """Create a resource for a domain object using its registered metadata.

        Args:
            instance: Object whose class is registered in the metadata map
            request: Current request, handed through to the strategy

        Returns:
            Resource produced by the strategy registered for the object's metadata

        Raises:
            InvalidObjectError: If instance is not an object or its class has no metadata
            UnknownMetadataTypeError: If no strategy handles the metadata's class
        """
        if instance is None or isinstance(instance, (type, *_NON_OBJECT_TYPES)):
            raise InvalidObjectError.for_non_object(instance)

        resource_class = type(instance)
        if not self._metadata_map.has(resource_class):
            raise InvalidObjectError.for_unknown_type(resource_class)

        metadata = self._metadata_map.get(resource_class)
        strategy = self._strategies.get(type(metadata))
        if strategy is None:
            raise UnknownMetadataTypeError.for_metadata(metadata)

        logger.debug(
            "Creating resource for %s with %s",
            resource_class.__name__,
            type(strategy).__name__,
        )
        return strategy.create_resource(
            instance,
            metadata,
            self._hydrators,
            self._link_generator,
            request,
        )
