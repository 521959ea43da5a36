from enum import Enum, IntEnum


class TopologyClass(IntEnum):
    """Geometry type from the last two digits of SDO_GTYPE"""
    UNKNOWN = 0
    POINT = 1
    LINE = 2
    POLYGON = 3
    COLLECTION = 4
    MULTIPOINT = 5
    MULTILINE = 6
    MULTIPOLYGON = 7
    SOLID = 8
    MULTISOLID = 9


class ElementType(IntEnum):
    """SDO_ETYPE codes found in element triplets"""
    END = -1  # sentinel past the last element
    CUSTOM = 0
    POINT = 1
    LINE = 2
    POLYGON = 3
    COMPOUND_LINE = 4
    POLYGON_EXTERIOR = 1003
    POLYGON_INTERIOR = 2003
    COMPOUND_POLYGON_EXTERIOR = 1005
    COMPOUND_POLYGON_INTERIOR = 2005


class Interpretation(IntEnum):
    """SDO_INTERPRETATION codes (point elements use values > 1 as a point count)"""
    END = -1
    SIMPLE = 1
    ARC = 2
    RECTANGLE = 3
    CIRCLE = 4


class GeometryKind(str, Enum):
    """Names of the geometries being read, used in error messages"""
    POINT = "Point"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


class DecodeErrorType(Enum):
    """Kinds of decode failure"""
    DIMENSION = "dimension"
    MALFORMED_ENCODING = "malformed_encoding"
    UNSUPPORTED_ELEMENT_TYPE = "unsupported_element_type"
    UNSUPPORTED_INTERPRETATION = "unsupported_interpretation"
    UNSUPPORTED_GEOMETRY_TYPE = "unsupported_geometry_type"


# Element types that may start a polygon (shell ring)
POLYGON_SHELL_TYPES = (ElementType.POLYGON, ElementType.POLYGON_EXTERIOR)

# Element types that may be read as any polygon ring
POLYGON_RING_TYPES = (
    ElementType.POLYGON,
    ElementType.POLYGON_EXTERIOR,
    ElementType.POLYGON_INTERIOR,
)

# Interpretations accepted for a polygon ring
POLYGON_RING_INTERPRETATIONS = (Interpretation.SIMPLE, Interpretation.RECTANGLE)
