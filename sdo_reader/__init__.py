"""Decoder for Oracle-style SDO_GEOMETRY encodings into shapely geometries"""
from sdo_reader.components import SdoReader
from sdo_reader.models import GeometryEncoding, ElementInfo, ReaderConfig, DecodeResult
from sdo_reader.core import (
    DecodeError,
    DecodeErrorType,
    DimensionError,
    MalformedEncodingError,
    UnsupportedElementTypeError,
    UnsupportedInterpretationError,
    UnsupportedGeometryTypeError,
)

__all__ = [
    "SdoReader",
    "GeometryEncoding",
    "ElementInfo",
    "ReaderConfig",
    "DecodeResult",
    "DecodeError",
    "DecodeErrorType",
    "DimensionError",
    "MalformedEncodingError",
    "UnsupportedElementTypeError",
    "UnsupportedInterpretationError",
    "UnsupportedGeometryTypeError",
]
