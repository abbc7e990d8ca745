"""Metadata for resources whose self link comes from a named route."""

from typing import Any

from pydantic import Field

from .AbstractResourceMetadata import AbstractResourceMetadata


class RouteBasedResourceMetadata(AbstractResourceMetadata):
    """Self link is generated from ``route``.

    When the extracted data contains ``identifier_name``, its value is passed
    to the route as ``route_identifier_placeholder``.
    """

    route: str = Field(..., min_length=1, description="Route name")
    identifier_name: str = Field("id", description="Field holding the resource identifier")
    route_identifier_placeholder: str = Field("id", description="Route parameter receiving the identifier")
    route_params: dict[str, Any] = Field(default_factory=dict, description="Extra route parameters")
