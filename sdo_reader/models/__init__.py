from sdo_reader.models.geometry_encoding import GeometryEncoding, ElementInfo
from sdo_reader.models.type_descriptor import TypeDescriptor
from sdo_reader.models.decode_result import DecodeResult
from sdo_reader.models.reader_config import ReaderConfig

__all__ = [
    "GeometryEncoding",
    "ElementInfo",
    "TypeDescriptor",
    "DecodeResult",
    "ReaderConfig",
]
