from typing import Tuple

import numpy as np

from sdo_reader.core import SDO_CONSTANTS


class CoordinateSequence:
    """
    Ordered coordinates backed by a (count, dimension) float array

    A sequence is filled through set_ordinate/set_column, then frozen.
    Frozen sequences are read-only and may be shared between geometries.
    """

    def __init__(self, count: int, dimension: int):
        """
        Initialize a sequence with every ordinate set to NaN

        Args:
            count: Number of coordinates
            dimension: Ordinates per coordinate
        """
        self._coords = np.full((count, dimension), SDO_CONSTANTS.MISSING_ORDINATE, dtype=np.float64)

    @classmethod
    def from_array(cls, coords: np.ndarray) -> "CoordinateSequence":
        """Wrap an existing (count, dimension) array and freeze it"""
        sequence = cls.__new__(cls)
        sequence._coords = np.asarray(coords, dtype=np.float64)
        return sequence.freeze()

    @property
    def size(self) -> int:
        """Get number of coordinates"""
        return self._coords.shape[0]

    @property
    def dimension(self) -> int:
        """Get ordinates per coordinate"""
        return self._coords.shape[1]

    @property
    def is_frozen(self) -> bool:
        return not self._coords.flags.writeable

    def __len__(self) -> int:
        return self.size

    def set_ordinate(self, index: int, ordinate: int, value: float) -> None:
        """
        Set one ordinate of one coordinate

        Raises:
            ValueError: If the sequence is frozen
        """
        self._coords[index, ordinate] = value

    def set_column(self, ordinate: int, values: np.ndarray) -> None:
        """
        Set one ordinate of every coordinate

        Raises:
            ValueError: If the sequence is frozen
        """
        self._coords[:, ordinate] = values

    def freeze(self) -> "CoordinateSequence":
        self._coords.flags.writeable = False
        return self

    def get_ordinate(self, index: int, ordinate: int) -> float:
        return float(self._coords[index, ordinate])

    def coordinate(self, index: int) -> Tuple[float, ...]:
        """Get one coordinate as a tuple"""
        return tuple(float(v) for v in self._coords[index])

    def to_array(self) -> np.ndarray:
        """Get the coordinates as a (count, dimension) array"""
        return self._coords

    def xy(self) -> np.ndarray:
        """Get the x and y ordinates as a (count, 2) array"""
        return self._coords[:, :2]

    def slice(self, start: int, end: int) -> "CoordinateSequence":
        """
        Get coordinates [start, end) as a sequence

        The sequence itself is returned when the range covers all of it;
        any other range is copied.
        """
        if start == 0 and end == self.size:
            return self
        return CoordinateSequence.from_array(self._coords[start:end].copy())

    def __repr__(self) -> str:
        return f"CoordinateSequence(size={self.size}, dimension={self.dimension})"
