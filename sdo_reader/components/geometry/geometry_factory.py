from abc import ABC, abstractmethod
from typing import Any, Sequence

import shapely
from shapely.geometry import (
    Point as ShapelyPoint,
    LineString as ShapelyLineString,
    LinearRing as ShapelyLinearRing,
    Polygon as ShapelyPolygon,
    MultiPoint as ShapelyMultiPoint,
    MultiLineString as ShapelyMultiLineString,
    MultiPolygon as ShapelyMultiPolygon,
    GeometryCollection as ShapelyGeometryCollection,
)

from sdo_reader.components.coordinates import CoordinateSequence


class IGeometryFactory(ABC):
    """
    Abstract base class for geometry factories (Abstract Factory Pattern)

    The decoder decides what to build; the factory decides how geometries
    are represented.
    """

    @abstractmethod
    def make_point(self, coords: CoordinateSequence) -> Any:
        pass

    @abstractmethod
    def make_line_string(self, coords: CoordinateSequence) -> Any:
        pass

    @abstractmethod
    def make_linear_ring(self, coords: CoordinateSequence) -> Any:
        pass

    @abstractmethod
    def make_polygon(self, shell: Any, holes: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def make_multi_point(self, coords: CoordinateSequence) -> Any:
        pass

    @abstractmethod
    def make_multi_line_string(self, lines: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def make_multi_polygon(self, polygons: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def make_collection(self, geometries: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def set_srid(self, geometry: Any, srid: int) -> Any:
        """
        Attach an SRID to a geometry

        Returns:
            The geometry carrying the SRID (may be a new object)
        """
        pass


class ShapelyGeometryFactory(IGeometryFactory):
    """Geometry factory producing shapely geometries"""

    def make_point(self, coords: CoordinateSequence) -> ShapelyPoint:
        return ShapelyPoint(coords.to_array()[0])

    def make_line_string(self, coords: CoordinateSequence) -> ShapelyLineString:
        return ShapelyLineString(coords.to_array())

    def make_linear_ring(self, coords: CoordinateSequence) -> ShapelyLinearRing:
        return ShapelyLinearRing(coords.to_array())

    def make_polygon(self, shell: ShapelyLinearRing, holes: Sequence[ShapelyLinearRing]) -> ShapelyPolygon:
        return ShapelyPolygon(shell, list(holes))

    def make_multi_point(self, coords: CoordinateSequence) -> ShapelyMultiPoint:
        return ShapelyMultiPoint(coords.to_array())

    def make_multi_line_string(self, lines: Sequence[ShapelyLineString]) -> ShapelyMultiLineString:
        return ShapelyMultiLineString(list(lines))

    def make_multi_polygon(self, polygons: Sequence[ShapelyPolygon]) -> ShapelyMultiPolygon:
        return ShapelyMultiPolygon(list(polygons))

    def make_collection(self, geometries: Sequence[Any]) -> ShapelyGeometryCollection:
        return ShapelyGeometryCollection(list(geometries))

    def set_srid(self, geometry: Any, srid: int) -> Any:
        return shapely.set_srid(geometry, srid)
