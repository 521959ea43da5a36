"""
Recursive-descent decoding of SDO element triplets into geometries.

A GeometryBuilder is created for one decode call. It walks the element
directory with a forward-only cursor: each shape reader consumes the element
at the cursor, plus any hole rings that follow a polygon shell, and leaves the
cursor on the next unread element.
"""
import logging
from typing import Any, Callable, Dict

from sdo_reader.core import (
    ElementType,
    Interpretation,
    GeometryKind,
    TopologyClass,
    SDO_CONSTANTS,
    POLYGON_SHELL_TYPES,
    POLYGON_RING_TYPES,
    POLYGON_RING_INTERPRETATIONS,
    UnsupportedElementTypeError,
    UnsupportedGeometryTypeError,
)
from sdo_reader.components.element_directory import ElementDirectory
from sdo_reader.components.coordinates import CoordinateSequence, ICoordinateSequenceFactory
from sdo_reader.components.geometry.geometry_factory import IGeometryFactory
from sdo_reader.components.geometry.geometry_ops import GeometryOps
from sdo_reader.components.geometry.parts_builder import PartsBuilder
from sdo_reader.models import TypeDescriptor
from sdo_reader.validation import ElementValidator

logger = logging.getLogger(__name__)


class GeometryBuilder:
    """
    Builds one geometry from an element directory and its coordinates

    Geometries are allocated through the injected IGeometryFactory. Errors
    are raised as DecodeError subclasses at the first inconsistency; no
    partially built geometry is ever returned.
    """

    def __init__(
        self,
        directory: ElementDirectory,
        coordinates: CoordinateSequence,
        geometry_factory: IGeometryFactory,
        sequence_factory: ICoordinateSequenceFactory
    ):
        """
        Initialize geometry builder

        Args:
            directory: Element triplets of the encoding
            coordinates: Every coordinate of the encoding
            geometry_factory: Factory allocating the output geometries
            sequence_factory: Factory for coordinate sequences created while decoding
        """
        self._directory = directory
        self._coordinates = coordinates
        self._geometry_factory = geometry_factory
        self._sequence_factory = sequence_factory
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Get the index of the next unread element"""
        return self._cursor

    def build(self, descriptor: TypeDescriptor) -> Any:
        """
        Build the geometry described by an SDO_GTYPE

        Args:
            descriptor: Decoded SDO_GTYPE

        Returns:
            Geometry produced by the geometry factory

        Raises:
            UnsupportedGeometryTypeError: If the topology class cannot be built
            DecodeError: If any element is inconsistent or unsupported
        """
        reader = self.TOPOLOGY_READERS.get(descriptor.topology_class)
        if reader is None:
            raise UnsupportedGeometryTypeError(descriptor.gtype)
        return reader(self)

    # Element readers: each consumes the element at the cursor

    def _next_point(self) -> Any:
        index = self._cursor
        kind = GeometryKind.POINT.value
        ElementValidator.check_ordinate_bounds(self._directory, index, kind)
        ElementValidator.check_element_type(self._directory, index, (ElementType.POINT,), kind)
        ElementValidator.check_interpretation(self._directory, index, (Interpretation.SIMPLE,), kind)

        coords = self._element_coordinates(index)
        ElementValidator.check_coordinate_count(self._directory, index, coords.size, kind, exact=1)
        self._cursor = index + 1
        return self._geometry_factory.make_point(coords)

    def _next_multi_point(self) -> Any:
        index = self._cursor
        kind = GeometryKind.MULTI_POINT.value
        ElementValidator.check_ordinate_bounds(self._directory, index, kind)
        ElementValidator.check_element_type(self._directory, index, (ElementType.POINT,), kind)
        ElementValidator.check_point_cluster(self._directory, index, kind)

        coords = self._element_coordinates(index)
        ElementValidator.check_coordinate_count(
            self._directory, index, coords.size, kind,
            exact=self._directory.interpretation(index)
        )
        self._cursor = index + 1
        return self._geometry_factory.make_multi_point(coords)

    def _next_line(self) -> Any:
        index = self._cursor
        kind = GeometryKind.LINE_STRING.value
        ElementValidator.check_ordinate_bounds(self._directory, index, kind)
        ElementValidator.check_element_type(self._directory, index, (ElementType.LINE,), kind)
        ElementValidator.check_interpretation(self._directory, index, (Interpretation.SIMPLE,), kind)

        coords = self._element_coordinates(index)
        ElementValidator.check_coordinate_count(
            self._directory, index, coords.size, kind,
            minimum=SDO_CONSTANTS.MIN_LINE_COORDINATES
        )
        self._cursor = index + 1
        return self._geometry_factory.make_line_string(coords)

    def _next_polygon(self) -> Any:
        index = self._cursor
        kind = GeometryKind.POLYGON.value
        ElementValidator.check_ordinate_bounds(self._directory, index, kind)
        ElementValidator.check_element_type(self._directory, index, POLYGON_SHELL_TYPES, kind)
        ElementValidator.check_interpretation(self._directory, index, POLYGON_RING_INTERPRETATIONS, kind)

        shell = self._geometry_factory.make_linear_ring(self._ring_coordinates(index))
        self._cursor = index + 1

        # Holes are explicit interior rings, or generic polygon rings wound clockwise
        holes = PartsBuilder()
        while True:
            hole_index = self._cursor
            element_type = self._directory.element_type(hole_index)
            if element_type == ElementType.POLYGON_INTERIOR:
                ring = self._ring_coordinates(hole_index)
            elif element_type == ElementType.POLYGON:
                ring = self._ring_coordinates(hole_index)
                if not GeometryOps.is_clockwise(ring):
                    break
            else:
                break
            holes.add(self._geometry_factory.make_linear_ring(ring))
            self._cursor = hole_index + 1

        logger.debug(f"Polygon at element {index} read with {len(holes)} hole(s)")
        return self._geometry_factory.make_polygon(shell, holes.build())

    def _ring_coordinates(self, index: int) -> CoordinateSequence:
        kind = GeometryKind.POLYGON.value
        ElementValidator.check_ordinate_bounds(self._directory, index, kind)
        ElementValidator.check_element_type(self._directory, index, POLYGON_RING_TYPES, kind)
        ElementValidator.check_interpretation(self._directory, index, POLYGON_RING_INTERPRETATIONS, kind)

        coords = self._element_coordinates(index)
        kind = GeometryKind.LINEAR_RING.value
        if self._directory.interpretation(index) == Interpretation.RECTANGLE:
            ElementValidator.check_coordinate_count(
                self._directory, index, coords.size, kind,
                exact=SDO_CONSTANTS.RECTANGLE_CORNERS
            )
            return GeometryOps.rectangle_ring(coords, self._sequence_factory)

        ElementValidator.check_coordinate_count(
            self._directory, index, coords.size, kind,
            minimum=SDO_CONSTANTS.MIN_RING_COORDINATES
        )
        ElementValidator.check_closed_ring(self._directory, index, coords, kind)
        return coords

    def _element_coordinates(self, index: int) -> CoordinateSequence:
        start, end = self._directory.coordinate_range(index)
        return self._coordinates.slice(start, end)

    # Topology readers: one per SDO_GTYPE topology class

    def _read_point(self) -> Any:
        point = self._next_point()
        self._log_unread(GeometryKind.POINT.value)
        return point

    def _read_line(self) -> Any:
        line = self._next_line()
        self._log_unread(GeometryKind.LINE_STRING.value)
        return line

    def _read_polygon(self) -> Any:
        polygon = self._next_polygon()
        self._log_unread(GeometryKind.POLYGON.value)
        return polygon

    def _read_multi_point(self) -> Any:
        multi_point = self._next_multi_point()
        self._log_unread(GeometryKind.MULTI_POINT.value)
        return multi_point

    def _read_multi_line(self) -> Any:
        ElementValidator.check_ordinate_bounds(
            self._directory, 0, GeometryKind.MULTI_LINE_STRING.value
        )
        lines = PartsBuilder()
        while self._directory.element_type(self._cursor) == ElementType.LINE:
            lines.add(self._next_line())
        self._log_unread(GeometryKind.MULTI_LINE_STRING.value)
        return self._geometry_factory.make_multi_line_string(lines.build())

    def _read_multi_polygon(self) -> Any:
        ElementValidator.check_ordinate_bounds(
            self._directory, 0, GeometryKind.MULTI_POLYGON.value
        )
        polygons = PartsBuilder()
        while self._directory.element_type(self._cursor) in POLYGON_SHELL_TYPES:
            polygons.add(self._next_polygon())
        self._log_unread(GeometryKind.MULTI_POLYGON.value)
        return self._geometry_factory.make_multi_polygon(polygons.build())

    def _read_collection(self) -> Any:
        ElementValidator.check_ordinate_bounds(
            self._directory, 0, GeometryKind.GEOMETRY_COLLECTION.value
        )
        members = PartsBuilder()
        while True:
            element_type = self._directory.element_type(self._cursor)
            if element_type == ElementType.END:
                break
            reader = self.COLLECTION_READERS.get(element_type, GeometryBuilder._reject_member)
            members.add(reader(self))
        return self._geometry_factory.make_collection(members.build())

    # Collection member readers, chosen by element type

    def _member_point(self) -> Any:
        interpretation = self._directory.interpretation(self._cursor)
        if interpretation == Interpretation.SIMPLE:
            return self._next_point()
        if interpretation > 1:
            return self._next_multi_point()
        ElementValidator.raise_interpretation(
            self._directory, self._cursor, GeometryKind.GEOMETRY_COLLECTION.value
        )

    def _member_line(self) -> Any:
        return self._next_line()

    def _member_polygon(self) -> Any:
        return self._next_polygon()

    def _reject_interior_ring(self) -> Any:
        raise UnsupportedElementTypeError(
            self._directory.element_type(self._cursor),
            GeometryKind.GEOMETRY_COLLECTION.value,
            element_index=self._cursor,
            interpretation=self._directory.interpretation(self._cursor),
            elem_info=str(self._directory),
            details="Polygon interior rings must follow their exterior ring"
        )

    def _reject_member(self) -> Any:
        raise UnsupportedElementTypeError(
            self._directory.element_type(self._cursor),
            GeometryKind.GEOMETRY_COLLECTION.value,
            element_index=self._cursor,
            interpretation=self._directory.interpretation(self._cursor),
            elem_info=str(self._directory),
            details="Custom, compound and curved elements are not supported"
        )

    def _log_unread(self, geometry_kind: str) -> None:
        if self._cursor < self._directory.count:
            logger.debug(
                f"{geometry_kind} read stopped at element {self._cursor} "
                f"(SDO_ETYPE {self._directory.element_type(self._cursor)}); "
                f"{self._directory.count - self._cursor} element(s) left unread"
            )

    # Strategy map: topology class -> reader (Strategy Pattern)
    TOPOLOGY_READERS: Dict[TopologyClass, Callable[["GeometryBuilder"], Any]] = {
        TopologyClass.POINT: _read_point,
        TopologyClass.LINE: _read_line,
        TopologyClass.POLYGON: _read_polygon,
        TopologyClass.MULTIPOINT: _read_multi_point,
        TopologyClass.MULTILINE: _read_multi_line,
        TopologyClass.MULTIPOLYGON: _read_multi_polygon,
        TopologyClass.COLLECTION: _read_collection,
    }

    # Strategy map: element type -> collection member reader; covers every
    # ElementType except END, unknown codes fall back to _reject_member
    COLLECTION_READERS: Dict[ElementType, Callable[["GeometryBuilder"], Any]] = {
        ElementType.POINT: _member_point,
        ElementType.LINE: _member_line,
        ElementType.POLYGON: _member_polygon,
        ElementType.POLYGON_EXTERIOR: _member_polygon,
        ElementType.POLYGON_INTERIOR: _reject_interior_ring,
        ElementType.CUSTOM: _reject_member,
        ElementType.COMPOUND_LINE: _reject_member,
        ElementType.COMPOUND_POLYGON_EXTERIOR: _reject_member,
        ElementType.COMPOUND_POLYGON_INTERIOR: _reject_member,
    }
