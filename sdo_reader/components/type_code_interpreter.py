from sdo_reader.core import (
    SDO_CONSTANTS,
    TopologyClass,
    DimensionError,
    MalformedEncodingError,
    UnsupportedGeometryTypeError,
)
from sdo_reader.models import TypeDescriptor


class TypeCodeInterpreter:
    """
    Decodes SDO_GTYPE values of the form DLTT

    D is the number of ordinates per coordinate, L the position of the
    measure ordinate (0 for none) and TT the topology class.
    """

    @classmethod
    def dimension(cls, gtype: int) -> int:
        return gtype // SDO_CONSTANTS.DIMENSION_DIVISOR

    @classmethod
    def measure_position(cls, gtype: int) -> int:
        return (gtype % SDO_CONSTANTS.DIMENSION_DIVISOR) // SDO_CONSTANTS.MEASURE_DIVISOR

    @classmethod
    def topology_code(cls, gtype: int) -> int:
        return gtype % SDO_CONSTANTS.TOPOLOGY_MODULUS

    @classmethod
    def interpret(cls, gtype: int) -> TypeDescriptor:
        """
        Decode an SDO_GTYPE

        Args:
            gtype: SDO_GTYPE value (e.g. 2003, 3302)

        Returns:
            TypeDescriptor

        Raises:
            DimensionError: If D is below 2 or above 4
            MalformedEncodingError: If L does not point inside the coordinate
            UnsupportedGeometryTypeError: If TT is not a known topology code
        """
        dimension = cls.dimension(gtype)
        if dimension < SDO_CONSTANTS.MIN_DIMENSION:
            raise DimensionError(
                dimension,
                f"SDO_GTYPE {gtype} has fewer than {SDO_CONSTANTS.MIN_DIMENSION} ordinates per coordinate"
            )
        if dimension > SDO_CONSTANTS.MAX_DIMENSION:
            raise DimensionError(
                dimension,
                f"SDO_GTYPE {gtype} has more than {SDO_CONSTANTS.MAX_DIMENSION} ordinates per coordinate"
            )

        measure_position = cls.measure_position(gtype)
        # measures follow x and y
        if measure_position != 0 and not 3 <= measure_position <= dimension:
            raise MalformedEncodingError(
                f"SDO_GTYPE {gtype} places the measure at ordinate {measure_position} "
                f"of a {dimension}-dimensional coordinate"
            )

        try:
            topology_class = TopologyClass(cls.topology_code(gtype))
        except ValueError:
            raise UnsupportedGeometryTypeError(gtype)

        return TypeDescriptor(
            gtype=gtype,
            dimension=dimension,
            measure_position=measure_position,
            topology_class=topology_class
        )
