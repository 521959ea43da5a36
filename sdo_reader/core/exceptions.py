"""
Custom exceptions for the SDO geometry reader.

This module defines the exception classes raised when an SDO_GEOMETRY
encoding cannot be decoded. Every decode error carries a DecodeErrorType
and, where one is involved, the index and raw codes of the offending element.
"""

from typing import Optional

from sdo_reader.core.enums import DecodeErrorType


class SdoReaderException(Exception):
    """Base exception class for all SDO reader errors"""
    pass


class DecodeError(SdoReaderException, ValueError):
    """
    Base exception for encodings that cannot be decoded.

    Subclasses set ``error_type`` so callers can branch on the kind of
    failure without matching on exception classes.
    """

    error_type: Optional[DecodeErrorType] = None

    def __init__(
        self,
        message: str,
        element_index: Optional[int] = None,
        element_type: Optional[int] = None,
        interpretation: Optional[int] = None,
        elem_info: Optional[str] = None
    ):
        """
        Initialize DecodeError.

        Args:
            message: Human-readable description of the failure
            element_index: Index of the offending element triplet (optional)
            element_type: Raw SDO_ETYPE of the offending element (optional)
            interpretation: Raw SDO_INTERPRETATION of the offending element (optional)
            elem_info: Rendered SDO_ELEM_INFO array for context (optional)
        """
        self.element_index = element_index
        self.element_type = element_type
        self.interpretation = interpretation
        self.elem_info = elem_info

        if element_index is not None:
            message += f" (Element {element_index}"
            if elem_info is not None:
                message += f" in SDO_ELEM_INFO {elem_info}"
            message += ")"

        super().__init__(message)


class DimensionError(DecodeError):
    """Exception raised when a native or requested dimension is not supported"""

    error_type = DecodeErrorType.DIMENSION

    def __init__(self, dimension: int, details: Optional[str] = None):
        """
        Initialize DimensionError.

        Args:
            dimension: The rejected dimension
            details: Additional details about where the dimension came from
        """
        self.dimension = dimension

        message = f"Dimension D = {dimension} is not supported"
        if details:
            message += f": {details}"

        super().__init__(message)


class MalformedEncodingError(DecodeError):
    """
    Exception raised when offsets, lengths or coordinate counts are inconsistent.
    """

    error_type = DecodeErrorType.MALFORMED_ENCODING


class UnsupportedElementTypeError(DecodeError):
    """Exception raised when an element has an SDO_ETYPE the reader cannot handle"""

    error_type = DecodeErrorType.UNSUPPORTED_ELEMENT_TYPE

    def __init__(
        self,
        element_type: int,
        geometry_kind: str,
        element_index: Optional[int] = None,
        interpretation: Optional[int] = None,
        elem_info: Optional[str] = None,
        details: Optional[str] = None
    ):
        """
        Initialize UnsupportedElementTypeError.

        Args:
            element_type: The rejected SDO_ETYPE
            geometry_kind: Name of the geometry being read
            element_index: Index of the offending element
            interpretation: SDO_INTERPRETATION of the offending element
            elem_info: Rendered SDO_ELEM_INFO array for context
            details: Additional details about the failure
        """
        self.geometry_kind = geometry_kind

        message = f"SDO_ETYPE {element_type} is not supported when reading a {geometry_kind}"
        if details:
            message += f". {details}"

        super().__init__(message, element_index, element_type, interpretation, elem_info)


class UnsupportedInterpretationError(DecodeError):
    """
    Exception raised when an element uses an interpretation (arcs, circles,
    compound segments) the reader does not support
    """

    error_type = DecodeErrorType.UNSUPPORTED_INTERPRETATION

    def __init__(
        self,
        interpretation: int,
        geometry_kind: str,
        element_index: Optional[int] = None,
        element_type: Optional[int] = None,
        elem_info: Optional[str] = None
    ):
        """
        Initialize UnsupportedInterpretationError.

        Args:
            interpretation: The rejected SDO_INTERPRETATION
            geometry_kind: Name of the geometry being read
            element_index: Index of the offending element
            element_type: SDO_ETYPE of the offending element
            elem_info: Rendered SDO_ELEM_INFO array for context
        """
        self.geometry_kind = geometry_kind

        message = f"SDO_INTERPRETATION {interpretation} is not supported when reading a {geometry_kind}"

        super().__init__(message, element_index, element_type, interpretation, elem_info)


class UnsupportedGeometryTypeError(DecodeError):
    """Exception raised when the SDO_GTYPE names a geometry type the reader cannot build"""

    error_type = DecodeErrorType.UNSUPPORTED_GEOMETRY_TYPE

    def __init__(self, gtype: int):
        """
        Initialize UnsupportedGeometryTypeError.

        Args:
            gtype: The rejected SDO_GTYPE
        """
        self.gtype = gtype
        super().__init__(f"SDO_GTYPE {gtype} is not supported")
