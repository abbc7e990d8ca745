"""Extract field data from an instance using its named hydrator."""

from typing import Any

from ..InvalidExtractorError import InvalidExtractorError
from ..metadata.AbstractResourceMetadata import AbstractResourceMetadata
from ..protocols import HydratorLocator


def _extract_instance(
    instance: object,
    metadata: AbstractResourceMetadata,
    hydrators: HydratorLocator,
) -> dict[str, Any]:
    """Resolve ``metadata.extractor`` and extract ``instance`` with it.

    Raises:
        InvalidExtractorError: If the resolved hydrator cannot extract
    """
    extractor = hydrators(metadata.extractor)
    extract = getattr(extractor, "extract", None)
    if not callable(extract):
        raise InvalidExtractorError.for_instance(metadata.extractor, extractor)
    return dict(extract(instance))
