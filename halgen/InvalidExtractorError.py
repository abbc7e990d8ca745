"""Invalid extractor error."""

from typing import Any


class InvalidExtractorError(Exception):
    """Raised when a hydrator resolved by name cannot extract field data."""

    @classmethod
    def for_instance(cls, name: str, extractor: Any) -> "InvalidExtractorError":
        return cls(f"Extractor {name!r} resolved to {type(extractor).__qualname__}, which has no extract() method")
