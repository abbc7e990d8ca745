"""Strategy for resources exposed at a fixed URL."""

from typing import Any

from ..Link import Link
from ..LinkGenerator import LinkGenerator
from ..metadata.AbstractMetadata import AbstractMetadata
from ..metadata.UrlBasedResourceMetadata import UrlBasedResourceMetadata
from ..protocols import HydratorLocator
from ..Resource import Resource
from ..UnexpectedMetadataTypeError import UnexpectedMetadataTypeError
from ._extract_instance import _extract_instance
from .ResourceStrategy import ResourceStrategy


class UrlBasedResourceStrategy(ResourceStrategy):
    """Self link is the literal (or templated) URL from the metadata."""

    def create_resource(
        self,
        instance: object,
        metadata: AbstractMetadata,
        hydrators: HydratorLocator,
        link_generator: LinkGenerator,  # noqa: ARG002
        request: Any,  # noqa: ARG002
    ) -> Resource:
        if not isinstance(metadata, UrlBasedResourceMetadata):
            raise UnexpectedMetadataTypeError.for_metadata(metadata, type(self), UrlBasedResourceMetadata)

        data = _extract_instance(instance, metadata, hydrators)
        return Resource(data, (Link("self", metadata.url),))
