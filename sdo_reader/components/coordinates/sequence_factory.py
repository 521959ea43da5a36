from abc import ABC, abstractmethod

from sdo_reader.core import SDO_CONSTANTS
from sdo_reader.components.coordinates.coordinate_sequence import CoordinateSequence


class ICoordinateSequenceFactory(ABC):
    """
    Abstract base class for coordinate sequence factories

    A factory may hand back a sequence with fewer ordinates than requested
    when its geometry library cannot store more.
    """

    @abstractmethod
    def create(self, count: int, dimension: int) -> CoordinateSequence:
        """
        Create a mutable sequence with every ordinate set to NaN

        Args:
            count: Number of coordinates
            dimension: Requested ordinates per coordinate

        Returns:
            CoordinateSequence
        """
        pass


class NumpyCoordinateSequenceFactory(ICoordinateSequenceFactory):
    """Factory for numpy-backed sequences capped at max_dimension ordinates"""

    def __init__(self, max_dimension: int = SDO_CONSTANTS.SHAPELY_MAX_DIMENSION):
        self._max_dimension = max_dimension

    @property
    def max_dimension(self) -> int:
        return self._max_dimension

    def create(self, count: int, dimension: int) -> CoordinateSequence:
        return CoordinateSequence(count, min(dimension, self._max_dimension))
