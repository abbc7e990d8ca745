"""Unexpected metadata type error."""

from typing import Any


class UnexpectedMetadataTypeError(Exception):
    """Raised when a strategy receives metadata it does not handle."""

    @classmethod
    def for_metadata(cls, metadata: Any, strategy: type, expected: type) -> "UnexpectedMetadataTypeError":
        return cls(
            f"Unexpected metadata of type {type(metadata).__qualname__} provided to {strategy.__qualname__}; "
            f"expected {expected.__qualname__}"
        )
