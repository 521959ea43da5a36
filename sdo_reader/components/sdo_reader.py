import logging
from typing import Any, Optional

from sdo_reader.core import SDO_CONSTANTS, DecodeError
from sdo_reader.components.type_code_interpreter import TypeCodeInterpreter
from sdo_reader.components.element_directory import ElementDirectory
from sdo_reader.components.coordinates import (
    CoordinateAssembler,
    ICoordinateSequenceFactory,
    NumpyCoordinateSequenceFactory,
)
from sdo_reader.components.geometry import GeometryBuilder, IGeometryFactory, ShapelyGeometryFactory
from sdo_reader.models import GeometryEncoding, ReaderConfig, DecodeResult, TypeDescriptor
from sdo_reader.validation import ElementValidator

logger = logging.getLogger(__name__)


class SdoReader:
    """
    Reads geometries from SDO_GEOMETRY encodings

    Supported geometry types are points, lines and polygons, their multi
    forms, and collections of them. The compact SDO_POINT representation and
    rectangle polygons are supported. Arcs, circles, compound elements,
    surfaces and solids are rejected.

    The SRID of the encoding is set on the returned geometry. The reader keeps
    no state between calls beyond its configuration, so one instance may be
    shared by threads as long as it is not reconfigured.
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        geometry_factory: Optional[IGeometryFactory] = None,
        sequence_factory: Optional[ICoordinateSequenceFactory] = None
    ):
        """
        Initialize the reader

        Args:
            config: Reader configuration (default: read native dimension)
            geometry_factory: Factory for output geometries (default: shapely)
            sequence_factory: Factory for coordinate sequences (default: numpy, max 3D)

        Raises:
            DimensionError: If the configured dimension is below 2
        """
        self._config = config or ReaderConfig()
        if self._config.dimension is not None:
            ElementValidator.check_dimension(self._config.dimension, "configured reader dimension")

        self._geometry_factory = geometry_factory or ShapelyGeometryFactory()
        self._sequence_factory = sequence_factory or NumpyCoordinateSequenceFactory()
        self._assembler = CoordinateAssembler(self._sequence_factory)

    @property
    def config(self) -> ReaderConfig:
        return self._config

    @property
    def geometry_factory(self) -> IGeometryFactory:
        return self._geometry_factory

    def read(self, encoding: Optional[GeometryEncoding]) -> Optional[Any]:
        """
        Decode an SDO_GEOMETRY encoding

        Args:
            encoding: Encoding to decode; None stands for a NULL column value

        Returns:
            The decoded geometry with the encoding's SRID, or None for None input

        Raises:
            DecodeError: If the encoding is malformed or uses unsupported features
        """
        if encoding is None:
            return None

        try:
            geometry = self._decode(encoding)
        except DecodeError as e:
            logger.warning(f"Rejected SDO_GEOMETRY with SDO_GTYPE {encoding.gtype}: {str(e)}")
            raise

        if encoding.srid is not None:
            geometry = self._geometry_factory.set_srid(geometry, encoding.srid)
        return geometry

    def read_result(self, encoding: Optional[GeometryEncoding]) -> DecodeResult:
        """
        Decode an SDO_GEOMETRY encoding without raising

        Args:
            encoding: Encoding to decode; None stands for a NULL column value

        Returns:
            DecodeResult holding either the geometry or the DecodeError
        """
        try:
            return DecodeResult(geometry=self.read(encoding))
        except DecodeError as e:
            return DecodeResult(error=e)

    def _decode(self, encoding: GeometryEncoding) -> Any:
        descriptor = TypeCodeInterpreter.interpret(encoding.gtype)
        output_dimension = self._config.output_dimension(descriptor.dimension)

        if encoding.is_compact_point:
            logger.debug(f"Reading SDO_GTYPE {encoding.gtype} from SDO_POINT")
            return self._read_compact_point(encoding, descriptor, output_dimension)

        logger.debug(
            f"Reading SDO_GTYPE {encoding.gtype}: {len(encoding.elements)} element(s), "
            f"{len(encoding.ordinates)} ordinate(s), output dimension {output_dimension}"
        )
        coordinates = self._assembler.assemble(
            encoding.ordinates,
            descriptor.dimension,
            output_dimension,
            check_length=True
        )
        directory = ElementDirectory(encoding.elements, len(encoding.ordinates), descriptor.dimension)
        builder = GeometryBuilder(directory, coordinates, self._geometry_factory, self._sequence_factory)
        return builder.build(descriptor)

    def _read_compact_point(
        self,
        encoding: GeometryEncoding,
        descriptor: TypeDescriptor,
        output_dimension: int
    ) -> Any:
        # SDO_POINT holds at most x, y, z whatever the SDO_GTYPE dimension
        native_dimension = min(descriptor.dimension, SDO_CONSTANTS.COMPACT_POINT_SIZE)
        coordinates = self._assembler.assemble(
            encoding.compact_point_ordinates(),
            native_dimension,
            output_dimension,
            check_length=False
        )
        return self._geometry_factory.make_point(coordinates)
