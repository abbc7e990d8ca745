"""Invalid object error."""

from typing import Any


class InvalidObjectError(Exception):
    """Raised when a value cannot be turned into a resource."""

    @classmethod
    def for_non_object(cls, value: Any) -> "InvalidObjectError":
        return cls(f"Cannot generate a resource from a non-object value of type {type(value).__name__}")

    @classmethod
    def for_unknown_type(cls, object_type: type) -> "InvalidObjectError":
        return cls(f"Cannot generate a resource for unknown type {object_type.__module__}.{object_type.__qualname__}")
