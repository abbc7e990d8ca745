"""Resource strategy base class."""

from abc import ABC, abstractmethod
from typing import Any

from ..LinkGenerator import LinkGenerator
from ..metadata.AbstractMetadata import AbstractMetadata
from ..protocols import HydratorLocator
from ..Resource import Resource


class ResourceStrategy(ABC):
    """Base class for strategies that turn an object into a Resource."""

    @abstractmethod
    def create_resource(
        self,
        instance: object,
        metadata: AbstractMetadata,
        hydrators: HydratorLocator,
        link_generator: LinkGenerator,
        request: Any,
    ) -> Resource:
        """Create a resource for ``instance``.

        Args:
            instance: Domain object whose class maps to ``metadata``
            metadata: Descriptor registered for the object's class
            hydrators: Resolves hydrators by name
            link_generator: Builds route-based links
            request: Current request context

        Returns:
            Resource with extracted data and links
        """
        pass
