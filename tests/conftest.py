"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

import pytest

from halgen.LinkGenerator import LinkGenerator
from halgen.metadata.MetadataMap import MetadataMap
from halgen.metadata.RouteBasedResourceMetadata import RouteBasedResourceMetadata
from halgen.metadata.UrlBasedResourceMetadata import UrlBasedResourceMetadata
from halgen.ResourceGenerator import ResourceGenerator


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Domain objects and collaborator fakes
# =============================================================================


class Book:
    def __init__(self, id: int, title: str):
        self.id = id
        self.title = title


class Author:
    def __init__(self, name: str):
        self.name = name


class ObjectPropertyHydrator:
    """Extracts public instance attributes."""

    def extract(self, instance: object) -> dict[str, Any]:
        return {key: value for key, value in vars(instance).items() if not key.startswith("_")}


class RecordingUrlGenerator:
    """UrlGenerator that records its calls and builds '/<route>/<params>?<query>' URIs."""

    def __init__(self):
        self.calls: list[tuple[Any, str, dict, dict]] = []

    def generate(
        self,
        request: Any,
        route: str,
        route_params: Mapping[str, Any],
        query_params: Mapping[str, Any],
    ) -> str:
        self.calls.append((request, route, dict(route_params), dict(query_params)))
        uri = "/" + route
        for key in sorted(route_params):
            uri += f"/{route_params[key]}"
        if query_params:
            uri += "?" + "&".join(f"{key}={query_params[key]}" for key in sorted(query_params))
        return uri


def hydrator_locator(hydrators: dict[str, Any]):
    """Build a HydratorLocator over a plain dict."""

    def locate(name: str) -> Any:
        return hydrators[name]

    return locate


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def request_context() -> SimpleNamespace:
    return SimpleNamespace(method="GET", uri="http://example.com/books/42")


@pytest.fixture
def url_generator() -> RecordingUrlGenerator:
    return RecordingUrlGenerator()


@pytest.fixture
def link_generator(url_generator: RecordingUrlGenerator) -> LinkGenerator:
    return LinkGenerator(url_generator)


@pytest.fixture
def hydrators():
    return hydrator_locator({"ObjectPropertyHydrator": ObjectPropertyHydrator()})


@pytest.fixture
def metadata_map() -> MetadataMap:
    """Book is route-based, Author is URL-based."""
    return MetadataMap(
        [
            RouteBasedResourceMetadata(
                resource_class=Book,
                extractor="ObjectPropertyHydrator",
                route="book",
                identifier_name="id",
                route_identifier_placeholder="book_id",
            ),
            UrlBasedResourceMetadata(
                resource_class=Author,
                extractor="ObjectPropertyHydrator",
                url="/api/authors/{name}",
            ),
        ]
    )


@pytest.fixture
def generator(metadata_map: MetadataMap, hydrators, link_generator: LinkGenerator) -> ResourceGenerator:
    return ResourceGenerator(metadata_map, hydrators, link_generator)


@pytest.fixture
def book() -> Book:
    return Book(42, "Dune")


@pytest.fixture
def author() -> Author:
    return Author("frank")
