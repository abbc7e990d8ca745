from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

# Keys owned by the link itself in its rendered form
RESERVED_ATTRIBUTES = frozenset({"href", "templated"})


@dataclass(frozen=True)
class Link:
    """Hypermedia relation value object.

    Holds a relation name and the URI (or URI template) it points to.
    """

    rel: str
    href: str
    templated: bool = False
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if not isinstance(self.rel, str):
            raise TypeError("Link relation must be a string")
        if not self.rel.strip():
            raise ValueError("Link relation must not be empty")
        if not isinstance(self.href, str):
            raise TypeError("Link href must be a string")
        reserved = RESERVED_ATTRIBUTES.intersection(self.attributes)
        if reserved:
            raise ValueError(f"Link attributes must not override {sorted(reserved)}")
        # Freeze a private copy so callers cannot mutate attributes afterwards
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __repr__(self):
        templated = ", templated=True" if self.templated else ""
        return f"Link({self.rel!r}, {self.href!r}{templated})"

    def with_attribute(self, name: str, value: Any) -> "Link":
        """Return a copy of this link with one attribute set."""
        return replace(self, attributes={**self.attributes, name: value})

    def to_dict(self) -> dict[str, Any]:
        """Render this link as a HAL link object."""
        result: dict[str, Any] = {"href": self.href}
        if self.templated:
            result["templated"] = True
        result.update(self.attributes)
        return result
