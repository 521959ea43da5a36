from typing import Any, Optional

from sdo_reader.core import DecodeError, DecodeErrorType


class DecodeResult:
    """Result of a decode operation: a geometry, or the error that stopped it"""

    def __init__(self, geometry: Optional[Any] = None, error: Optional[DecodeError] = None):
        """
        Initialize decode result.

        Args:
            geometry: Decoded geometry (None for absent input or on failure)
            error: Decode error if decoding failed
        """
        self._geometry = geometry
        self._error = error

    @property
    def is_valid(self) -> bool:
        """Check if decoding succeeded"""
        return self._error is None

    @property
    def geometry(self) -> Optional[Any]:
        """Get the decoded geometry"""
        return self._geometry

    @property
    def error(self) -> Optional[DecodeError]:
        """Get the decode error"""
        return self._error

    @property
    def error_type(self) -> Optional[DecodeErrorType]:
        """Get the kind of decode error, if any"""
        return self._error.error_type if self._error is not None else None

    def unwrap(self) -> Optional[Any]:
        """
        Get the geometry, raising the stored error if decoding failed

        Raises:
            DecodeError: If decoding failed
        """
        if self._error is not None:
            raise self._error
        return self._geometry
