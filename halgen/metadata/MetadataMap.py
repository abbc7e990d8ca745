"""In-memory map of domain classes to metadata descriptors."""

import logging

from .AbstractMetadata import AbstractMetadata
from .AbstractResourceMetadata import AbstractResourceMetadata

logger = logging.getLogger(__name__)


class MetadataMap:
    """Lookup table queried by ResourceGenerator.from_object."""

    def __init__(self, metadata: list[AbstractResourceMetadata] | None = None):
        self._map: dict[type, AbstractMetadata] = {}
        for item in metadata or []:
            self.add(item)

    def add(self, metadata: AbstractResourceMetadata) -> None:
        """Register a descriptor under its resource class.

        Raises:
            ValueError: If the class already has a descriptor
        """
        resource_class = metadata.resource_class
        if resource_class in self._map:
            raise ValueError(f"Metadata for {resource_class.__qualname__} is already registered")
        logger.debug("Registered %s for %s", type(metadata).__name__, resource_class.__qualname__)
        self._map[resource_class] = metadata

    def has(self, resource_class: type) -> bool:
        return resource_class in self._map

    def get(self, resource_class: type) -> AbstractMetadata:
        """Return the descriptor for ``resource_class``.

        Raises:
            KeyError: If the class has no descriptor
        """
        try:
            return self._map[resource_class]
        except KeyError:
            raise KeyError(f"No metadata registered for {resource_class.__qualname__}") from None

    def __len__(self) -> int:
        return len(self._map)
