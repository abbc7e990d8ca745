"""Interfaces of the collaborators ResourceGenerator works against.

Metadata-map construction, hydration and URI generation live outside this
package; anything matching these protocols can be plugged in.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from .metadata.AbstractMetadata import AbstractMetadata


@runtime_checkable
class MetadataMapProtocol(Protocol):
    def has(self, resource_class: type) -> bool: ...
    def get(self, resource_class: type) -> AbstractMetadata: ...


@runtime_checkable
class Hydrator(Protocol):
    """Extracts a field mapping from a domain object."""

    def extract(self, instance: object) -> Mapping[str, Any]: ...


# Resolves a hydrator by the name given in AbstractResourceMetadata.extractor
HydratorLocator = Callable[[str], Hydrator]


@runtime_checkable
class UrlGenerator(Protocol):
    """Generates a URI for a named route."""

    def generate(
        self,
        request: Any,
        route: str,
        route_params: Mapping[str, Any],
        query_params: Mapping[str, Any],
    ) -> str: ...
