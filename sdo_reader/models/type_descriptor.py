from dataclasses import dataclass

from sdo_reader.core import TopologyClass


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Decoded SDO_GTYPE

    dimension is the number of ordinates per coordinate, measure_position the
    1-based position of the measure ordinate (0 when there is none).
    """
    gtype: int
    dimension: int
    measure_position: int
    topology_class: TopologyClass

    @property
    def has_measure(self) -> bool:
        """Check if coordinates carry a measure ordinate"""
        return self.measure_position != 0
