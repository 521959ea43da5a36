"""
SDO Geometry Constants

Centralized location for the fixed numbers of the SDO_GEOMETRY layout.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SdoGeometryConstants:
    """
    Immutable constants for reading SDO_GEOMETRY values (Immutable Object Pattern)
    """

    # SDO_GTYPE digit layout: DLTT
    DIMENSION_DIVISOR: int = 1000
    MEASURE_DIVISOR: int = 100
    TOPOLOGY_MODULUS: int = 100

    MIN_DIMENSION: int = 2
    MAX_DIMENSION: int = 4

    # SDO_ELEM_INFO is a flat array of (offset, etype, interpretation) triplets
    ELEMENT_TRIPLET_SIZE: int = 3

    # SDO_POINT_TYPE always carries x, y, z
    COMPACT_POINT_SIZE: int = 3

    # Starting offsets in SDO_ELEM_INFO are 1-based
    FIRST_STARTING_OFFSET: int = 1

    # Shapely coordinates carry x, y and an optional z
    SHAPELY_MAX_DIMENSION: int = 3

    MIN_LINE_COORDINATES: int = 2
    MIN_RING_COORDINATES: int = 4
    RECTANGLE_CORNERS: int = 2

    # Value left in ordinates that were requested but not present in the input
    MISSING_ORDINATE: float = float("nan")

    # Environment variables read by ReaderConfig.from_env
    ENV_DIMENSION: str = "SDO_READER_DIMENSION"
    ENV_STRICT_DIMENSION: str = "SDO_READER_STRICT_DIMENSION"

    @classmethod
    def coordinate_index(cls, starting_offset: int, dimension: int) -> int:
        """
        Convert a 1-based ordinate offset into a 0-based coordinate index

        Args:
            starting_offset: SDO_STARTING_OFFSET value
            dimension: Number of ordinates per coordinate

        Returns:
            Index of the coordinate the offset points at
        """
        return (starting_offset - cls.FIRST_STARTING_OFFSET) // dimension


# Singleton instance for easy access
SDO_CONSTANTS = SdoGeometryConstants()
