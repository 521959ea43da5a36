"""
Coordinate handling for SDO ordinate arrays.

This module provides the numpy-backed coordinate sequence, the factory
interface used to allocate sequences, and the assembler that turns flat
SDO_ORDINATES into coordinates.
"""

from sdo_reader.components.coordinates.coordinate_sequence import CoordinateSequence
from sdo_reader.components.coordinates.sequence_factory import (
    ICoordinateSequenceFactory,
    NumpyCoordinateSequenceFactory,
)
from sdo_reader.components.coordinates.coordinate_assembler import CoordinateAssembler

__all__ = [
    'CoordinateSequence',
    'ICoordinateSequenceFactory',
    'NumpyCoordinateSequenceFactory',
    'CoordinateAssembler',
]
