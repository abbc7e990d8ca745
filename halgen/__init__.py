"""halgen - HAL resource generation.

Turns domain objects into HAL resources by dispatching on the metadata
registered for their class.
"""

from .InvalidExtractorError import InvalidExtractorError
from .InvalidObjectError import InvalidObjectError
from .InvalidStrategyError import InvalidStrategyError
from .Link import Link
from .LinkGenerator import LinkGenerator
from .Resource import Resource
from .ResourceGenerator import ResourceGenerator
from .UnexpectedMetadataTypeError import UnexpectedMetadataTypeError
from .UnknownMetadataTypeError import UnknownMetadataTypeError

__all__ = [
    "InvalidExtractorError",
    "InvalidObjectError",
    "InvalidStrategyError",
    "Link",
    "LinkGenerator",
    "Resource",
    "ResourceGenerator",
    "UnexpectedMetadataTypeError",
    "UnknownMetadataTypeError",
]
