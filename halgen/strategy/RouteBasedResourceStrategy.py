"""Strategy for resources whose self link comes from a named route."""

from typing import Any

from ..LinkGenerator import LinkGenerator
from ..metadata.AbstractMetadata import AbstractMetadata
from ..metadata.RouteBasedResourceMetadata import RouteBasedResourceMetadata
from ..protocols import HydratorLocator
from ..Resource import Resource
from ..UnexpectedMetadataTypeError import UnexpectedMetadataTypeError
from ._extract_instance import _extract_instance
from .ResourceStrategy import ResourceStrategy


class RouteBasedResourceStrategy(ResourceStrategy):
    def create_resource(
        self,
        instance: object,
        metadata: AbstractMetadata,
        hydrators: HydratorLocator,
        link_generator: LinkGenerator,
        request: Any,
    ) -> Resource:
        if not isinstance(metadata, RouteBasedResourceMetadata):
            raise UnexpectedMetadataTypeError.for_metadata(metadata, type(self), RouteBasedResourceMetadata)

        data = _extract_instance(instance, metadata, hydrators)

        route_params = dict(metadata.route_params)
        if metadata.identifier_name in data:
            route_params[metadata.route_identifier_placeholder] = data[metadata.identifier_name]

        link = link_generator.from_route("self", request, metadata.route, route_params)
        return Resource(data, (link,))
