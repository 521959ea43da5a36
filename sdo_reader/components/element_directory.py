from typing import Sequence

from sdo_reader.core import SDO_CONSTANTS, ElementType, Interpretation, MalformedEncodingError
from sdo_reader.models import ElementInfo


class ElementDirectory:
    """
    Read-only view over the SDO_ELEM_INFO triplets of one encoding.

    Probing past the last element returns a sentinel: element type and
    interpretation of -1 and a starting offset one past the ordinate array,
    so the coordinate range of the last element is [start(i), start(i + 1)).
    """

    def __init__(self, elements: Sequence[ElementInfo], ordinate_count: int, dimension: int):
        """
        Initialize element directory

        Args:
            elements: Element triplets in encoding order
            ordinate_count: Length of the ordinate array
            dimension: Ordinates per coordinate

        Raises:
            MalformedEncodingError: If a starting offset is below 1, decreases,
                lies past the ordinate array or is not on a coordinate boundary
        """
        self._elements = tuple(elements)
        self._ordinate_count = ordinate_count
        self._dimension = dimension
        self._check_offsets()

    def _check_offsets(self) -> None:
        previous = SDO_CONSTANTS.FIRST_STARTING_OFFSET
        for i, element in enumerate(self._elements):
            offset = element.starting_offset
            if offset < previous:
                expected = "at least 1" if i == 0 else f"not less than {previous}"
                message = f"STARTING_OFFSET {offset} must be {expected}"
            elif offset > self._ordinate_count:
                message = (
                    f"STARTING_OFFSET {offset} inconsistent with ORDINATES length "
                    f"{self._ordinate_count}"
                )
            elif (offset - SDO_CONSTANTS.FIRST_STARTING_OFFSET) % self._dimension != 0:
                message = (
                    f"STARTING_OFFSET {offset} does not start a coordinate "
                    f"of dimension {self._dimension}"
                )
            else:
                previous = offset
                continue

            raise MalformedEncodingError(
                message,
                element_index=i,
                element_type=element.element_type,
                interpretation=element.interpretation,
                elem_info=str(self)
            )

    @property
    def count(self) -> int:
        """Get the number of element triplets"""
        return len(self._elements)

    @property
    def ordinate_count(self) -> int:
        """Get the length of the ordinate array"""
        return self._ordinate_count

    @property
    def dimension(self) -> int:
        """Get the number of ordinates per coordinate"""
        return self._dimension

    def starting_offset(self, index: int) -> int:
        """Get the 1-based starting offset of an element"""
        if index >= self.count:
            return self._ordinate_count + 1
        return self._elements[index].starting_offset

    def element_type(self, index: int) -> int:
        """Get the SDO_ETYPE of an element, or -1 past the end"""
        if index >= self.count:
            return ElementType.END.value
        return self._elements[index].element_type

    def interpretation(self, index: int) -> int:
        """Get the SDO_INTERPRETATION of an element, or -1 past the end"""
        if index >= self.count:
            return Interpretation.END.value
        return self._elements[index].interpretation

    def coordinate_index(self, index: int) -> int:
        """Get the 0-based index of an element's first coordinate"""
        return SDO_CONSTANTS.coordinate_index(self.starting_offset(index), self._dimension)

    def coordinate_range(self, index: int) -> tuple:
        """Get the [start, end) coordinate range of an element"""
        return (self.coordinate_index(index), self.coordinate_index(index + 1))

    def __str__(self) -> str:
        triplets = ", ".join(
            f"{e.starting_offset},{e.element_type},{e.interpretation}" for e in self._elements
        )
        return f"({triplets})"
