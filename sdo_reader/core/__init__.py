from sdo_reader.core.enums import (
    TopologyClass,
    ElementType,
    Interpretation,
    GeometryKind,
    DecodeErrorType,
    POLYGON_SHELL_TYPES,
    POLYGON_RING_TYPES,
    POLYGON_RING_INTERPRETATIONS,
)
from sdo_reader.core.sdo_constants import SDO_CONSTANTS, SdoGeometryConstants
from sdo_reader.core.exceptions import (
    SdoReaderException,
    DecodeError,
    DimensionError,
    MalformedEncodingError,
    UnsupportedElementTypeError,
    UnsupportedInterpretationError,
    UnsupportedGeometryTypeError,
)

__all__ = [
    "TopologyClass",
    "ElementType",
    "Interpretation",
    "GeometryKind",
    "DecodeErrorType",
    "POLYGON_SHELL_TYPES",
    "POLYGON_RING_TYPES",
    "POLYGON_RING_INTERPRETATIONS",
    "SDO_CONSTANTS",
    "SdoGeometryConstants",
    "SdoReaderException",
    "DecodeError",
    "DimensionError",
    "MalformedEncodingError",
    "UnsupportedElementTypeError",
    "UnsupportedInterpretationError",
    "UnsupportedGeometryTypeError",
]
