"""Element checks shared by every shape reader (SRP: validates only element triplets)"""
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from sdo_reader.core import (
    SDO_CONSTANTS,
    DimensionError,
    MalformedEncodingError,
    UnsupportedElementTypeError,
    UnsupportedInterpretationError,
)

if TYPE_CHECKING:
    from sdo_reader.components.element_directory import ElementDirectory
    from sdo_reader.components.coordinates import CoordinateSequence


class ElementValidator:
    """
    Invariant checks raised while decoding.

    Stateless; every check raises a DecodeError subclass naming the element
    index and its raw codes, so all shape readers report failures the same way.
    """

    @staticmethod
    def check_dimension(dimension: int, details: Optional[str] = None) -> None:
        """
        Check that a dimension can hold at least x and y

        Raises:
            DimensionError: If dimension < 2
        """
        if dimension < SDO_CONSTANTS.MIN_DIMENSION:
            raise DimensionError(dimension, details)

    @staticmethod
    def check_ordinate_bounds(directory: "ElementDirectory", index: int, geometry_kind: str) -> None:
        """
        Check that an element's starting offset lies inside the ordinate array

        Raises:
            MalformedEncodingError: If the starting offset exceeds the ordinate count
        """
        offset = directory.starting_offset(index)
        ordinate_count = directory.ordinate_count
        if offset > ordinate_count:
            raise MalformedEncodingError(
                f"STARTING_OFFSET {offset} inconsistent with ORDINATES length {ordinate_count} "
                f"when reading a {geometry_kind}",
                element_index=index,
                element_type=directory.element_type(index),
                interpretation=directory.interpretation(index),
                elem_info=str(directory)
            )

    @staticmethod
    def check_element_type(
        directory: "ElementDirectory",
        index: int,
        allowed: Iterable[int],
        geometry_kind: str
    ) -> None:
        """
        Check that an element's SDO_ETYPE is one of the allowed codes

        Raises:
            UnsupportedElementTypeError: If the element type is not allowed
        """
        element_type = directory.element_type(index)
        if element_type not in tuple(allowed):
            raise UnsupportedElementTypeError(
                element_type,
                geometry_kind,
                element_index=index,
                interpretation=directory.interpretation(index),
                elem_info=str(directory)
            )

    @staticmethod
    def check_interpretation(
        directory: "ElementDirectory",
        index: int,
        allowed: Iterable[int],
        geometry_kind: str
    ) -> None:
        """
        Check that an element's SDO_INTERPRETATION is one of the allowed codes

        Raises:
            UnsupportedInterpretationError: If the interpretation is not allowed
        """
        interpretation = directory.interpretation(index)
        if interpretation not in tuple(allowed):
            ElementValidator.raise_interpretation(directory, index, geometry_kind)

    @staticmethod
    def check_point_cluster(directory: "ElementDirectory", index: int, geometry_kind: str) -> None:
        """
        Check that a point element carries a point count greater than one

        Raises:
            UnsupportedInterpretationError: If the interpretation is not a count > 1
        """
        if not directory.interpretation(index) > 1:
            ElementValidator.raise_interpretation(directory, index, geometry_kind)

    @staticmethod
    def raise_interpretation(directory: "ElementDirectory", index: int, geometry_kind: str) -> None:
        """Raise UnsupportedInterpretationError for an element"""
        raise UnsupportedInterpretationError(
            directory.interpretation(index),
            geometry_kind,
            element_index=index,
            element_type=directory.element_type(index),
            elem_info=str(directory)
        )

    @staticmethod
    def check_coordinate_count(
        directory: "ElementDirectory",
        index: int,
        count: int,
        geometry_kind: str,
        minimum: Optional[int] = None,
        exact: Optional[int] = None
    ) -> None:
        """
        Check the number of coordinates an element resolved to

        Args:
            directory: Element directory being read
            index: Element index
            count: Number of coordinates found
            geometry_kind: Name of the geometry being read
            minimum: Smallest acceptable count (optional)
            exact: Required count (optional)

        Raises:
            MalformedEncodingError: If the count is out of range
        """
        if exact is not None and count != exact:
            expected = f"exactly {exact}"
        elif minimum is not None and count < minimum:
            expected = f"at least {minimum}"
        else:
            return

        raise MalformedEncodingError(
            f"{geometry_kind} requires {expected} coordinates, found {count}",
            element_index=index,
            element_type=directory.element_type(index),
            interpretation=directory.interpretation(index),
            elem_info=str(directory)
        )

    @staticmethod
    def check_closed_ring(
        directory: "ElementDirectory",
        index: int,
        sequence: "CoordinateSequence",
        geometry_kind: str
    ) -> None:
        """
        Check that a ring ends where it starts (compared on x and y)

        Raises:
            MalformedEncodingError: If the ring is not closed
        """
        xy = sequence.xy()
        if not np.array_equal(xy[0], xy[-1]):
            raise MalformedEncodingError(
                f"{geometry_kind} is not closed: starts at ({xy[0][0]}, {xy[0][1]}) "
                f"and ends at ({xy[-1][0]}, {xy[-1][1]})",
                element_index=index,
                element_type=directory.element_type(index),
                interpretation=directory.interpretation(index),
                elem_info=str(directory)
            )
