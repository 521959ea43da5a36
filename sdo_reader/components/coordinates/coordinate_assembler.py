from typing import Sequence

import numpy as np

from sdo_reader.core import MalformedEncodingError
from sdo_reader.components.coordinates.coordinate_sequence import CoordinateSequence
from sdo_reader.components.coordinates.sequence_factory import ICoordinateSequenceFactory


class CoordinateAssembler:
    """
    Converts a flat ordinate array into a CoordinateSequence

    Only the first min(sequence dimension, native dimension) ordinates of each
    coordinate are copied; any further ordinates of the output stay NaN.
    """

    def __init__(self, sequence_factory: ICoordinateSequenceFactory):
        self._sequence_factory = sequence_factory

    def assemble(
        self,
        ordinates: Sequence[float],
        native_dimension: int,
        output_dimension: int,
        check_length: bool = True
    ) -> CoordinateSequence:
        """
        Build the frozen coordinate sequence for an ordinate array

        Args:
            ordinates: Flat ordinates, native_dimension values per coordinate
            native_dimension: Ordinates per coordinate in the input
            output_dimension: Ordinates per coordinate wanted in the output
            check_length: Reject arrays that are not whole coordinates

        Returns:
            Frozen CoordinateSequence with len(ordinates) // native_dimension coordinates

        Raises:
            MalformedEncodingError: If check_length is set and the length is not
                a multiple of native_dimension
        """
        values = np.asarray(ordinates, dtype=np.float64)

        if len(values) == 0:
            return self._sequence_factory.create(0, output_dimension).freeze()

        if check_length and len(values) % native_dimension != 0:
            raise MalformedEncodingError(
                f"SDO_GTYPE Dimension {native_dimension} is inconsistent with "
                f"SDO_ORDINATES length {len(values)}"
            )

        count = len(values) // native_dimension
        sequence = self._sequence_factory.create(count, output_dimension)
        read_dimension = min(sequence.dimension, native_dimension)

        grid = values[:count * native_dimension].reshape(count, native_dimension)
        for ordinate in range(read_dimension):
            sequence.set_column(ordinate, grid[:, ordinate])

        return sequence.freeze()
