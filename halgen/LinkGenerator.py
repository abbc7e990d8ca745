"""Route-based link construction."""

from collections.abc import Mapping
from typing import Any

from .Link import Link
from .protocols import UrlGenerator


class LinkGenerator:
    """Builds Link values for named routes.

    URI generation itself is delegated to the injected UrlGenerator.
    """

    def __init__(self, url_generator: UrlGenerator):
        self.url_generator = url_generator

    def from_route(
        self,
        rel: str,
        request: Any,
        route: str,
        route_params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> Link:
        """Create a link pointing at ``route``.

        Args:
            rel: Relation name
            request: Current request, passed through to the URL generator
            route: Route name
            route_params: Route placeholder values
            query_params: Query string values
            attributes: Extra link attributes (title, type, ...)

        Returns:
            Non-templated Link
        """
        return self._build(rel, request, route, route_params, query_params, attributes, templated=False)

    def templated_from_route(
        self,
        rel: str,
        request: Any,
        route: str,
        route_params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> Link:
        """Same as from_route, but flags the link as a URI template."""
        return self._build(rel, request, route, route_params, query_params, attributes, templated=True)

    def _build(self, rel, request, route, route_params, query_params, attributes, templated: bool) -> Link:
        href = self.url_generator.generate(request, route, dict(route_params or {}), dict(query_params or {}))
        return Link(rel, href, templated=templated, attributes=attributes or {})
