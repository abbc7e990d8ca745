"""Unknown metadata type error."""

from typing import Any


class UnknownMetadataTypeError(Exception):
    """Raised when a metadata type cannot be used for resource generation."""

    @classmethod
    def for_invalid_metadata_class(cls, metadata_type: Any) -> "UnknownMetadataTypeError":
        name = getattr(metadata_type, "__qualname__", None) or repr(metadata_type)
        return cls(f"Unable to use {name} as a metadata type; it must be a subclass of AbstractMetadata")

    @classmethod
    def for_metadata(cls, metadata: Any) -> "UnknownMetadataTypeError":
        return cls(f"No strategy is registered for metadata of type {type(metadata).__qualname__}")
