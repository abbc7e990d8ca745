"""HAL resource value object."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from .Link import Link


@dataclass(frozen=True)
class Resource:
    """Field data plus an ordered sequence of links.

    Instances never change after construction. The ``with_*`` methods return
    new resources and leave the original untouched.
    """

    data: Mapping[str, Any] = field(default_factory=dict, hash=False)
    links: tuple[Link, ...] = ()

    def __post_init__(self):
        if not isinstance(self.data, Mapping):
            raise TypeError(f"Resource data must be a mapping, got {type(self.data).__name__}")
        links = tuple(self.links) if isinstance(self.links, Iterable) else self.links
        if not isinstance(links, tuple) or not all(isinstance(link, Link) for link in links):
            raise TypeError("Resource links must be Link instances")
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
        object.__setattr__(self, "links", links)

    def with_link(self, link: Link) -> "Resource":
        """Return a copy with ``link`` appended to the link sequence."""
        if not isinstance(link, Link):
            raise TypeError(f"Expected Link, got {type(link).__name__}")
        return replace(self, links=(*self.links, link))

    def with_element(self, name: str, value: Any) -> "Resource":
        """Return a copy with one data field set."""
        return replace(self, data={**self.data, name: value})

    def without_element(self, name: str) -> "Resource":
        """Return a copy with one data field removed (no-op if absent)."""
        data = dict(self.data)
        data.pop(name, None)
        return replace(self, data=data)

    def get_link(self, rel: str) -> Link | None:
        """Return the first link registered for ``rel``, or None."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    def get_links_by_rel(self, rel: str) -> list[Link]:
        return [link for link in self.links if link.rel == rel]

    def to_dict(self) -> dict[str, Any]:
        """Render the HAL JSON document shape.

        Data values that are resources (or non-empty lists or tuples of resources) are
        moved under ``_embedded``. Links are grouped by relation under
        ``_links``; a relation used more than once renders as a list.
        """
        result: dict[str, Any] = {}
        embedded: dict[str, Any] = {}
        for name, value in self.data.items():
            if isinstance(value, Resource):
                embedded[name] = value.to_dict()
            elif isinstance(value, (list, tuple)) and value and all(isinstance(item, Resource) for item in value):
                embedded[name] = [item.to_dict() for item in value]
            else:
                result[name] = value

        links: dict[str, Any] = {}
        for link in self.links:
            rendered = link.to_dict()
            current = links.get(link.rel)
            if current is None:
                links[link.rel] = rendered
            elif isinstance(current, list):
                current.append(rendered)
            else:
                links[link.rel] = [current, rendered]

        if links:
            result["_links"] = links
        if embedded:
            result["_embedded"] = embedded
        return result
