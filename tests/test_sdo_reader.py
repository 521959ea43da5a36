"""
Unit tests for SdoReader

Tests verify:
1. Compact SDO_POINT decoding and SRID propagation
2. Polygons with explicit and orientation-detected holes
3. Rectangle polygons
4. Multi-geometries and collections
5. Rejection of malformed and unsupported encodings
6. Dimension handling and the non-raising result API
"""

import pytest
import shapely
from shapely.geometry import (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)

from sdo_reader import (
    SdoReader,
    GeometryEncoding,
    ReaderConfig,
    DecodeErrorType,
    DimensionError,
    MalformedEncodingError,
    UnsupportedElementTypeError,
    UnsupportedInterpretationError,
    UnsupportedGeometryTypeError,
)

# 10x10 square, counter-clockwise
SHELL = [0, 0, 10, 0, 10, 10, 0, 10, 0, 0]
# 2x2 square inside SHELL, clockwise
HOLE_CW = [2, 2, 2, 4, 4, 4, 4, 2, 2, 2]
# 2x2 square inside SHELL, counter-clockwise
HOLE_CCW = [2, 2, 4, 2, 4, 4, 2, 4, 2, 2]
# 10x10 square beside SHELL, counter-clockwise
SECOND_SHELL = [20, 20, 30, 20, 30, 30, 20, 30, 20, 20]


@pytest.fixture
def reader():
    """Create reader with default configuration"""
    return SdoReader()


class TestCompactPoint:
    """Test decoding of the SDO_POINT shortcut"""

    def test_compact_point_2d(self, reader):
        """Test 2D compact point yields a point and keeps the SRID"""
        encoding = GeometryEncoding(gtype=2001, srid=8307, point=(1.0, 2.0, None))

        geom = reader.read(encoding)

        assert isinstance(geom, Point)
        assert (geom.x, geom.y) == (1.0, 2.0)
        assert not geom.has_z
        assert shapely.get_srid(geom) == 8307

    def test_compact_point_accepts_xy_pair(self, reader):
        """Test a two-value point is read as x, y"""
        geom = reader.read(GeometryEncoding(gtype=2001, point=(1, 2)))

        assert (geom.x, geom.y) == (1.0, 2.0)

    def test_compact_point_3d(self, reader):
        """Test 3D compact point keeps its z"""
        geom = reader.read(GeometryEncoding(gtype=3001, point=(1.0, 2.0, 3.0)))

        assert geom.has_z
        assert geom.coords[0] == (1.0, 2.0, 3.0)

    def test_compact_point_truncated_to_configured_dimension(self):
        """Test configured dimension drops z from a 3D compact point"""
        reader = SdoReader(ReaderConfig(dimension=2))

        geom = reader.read(GeometryEncoding(gtype=3001, point=(1.0, 2.0, 3.0)))

        assert not geom.has_z
        assert geom.coords[0] == (1.0, 2.0)

    def test_point_ignored_when_elements_present(self, reader):
        """Test SDO_POINT is not used when element and ordinate arrays exist"""
        encoding = GeometryEncoding(
            gtype=2001, point=(9.0, 9.0, None),
            elements=[(1, 1, 1)], ordinates=[3, 4]
        )

        geom = reader.read(encoding)

        assert (geom.x, geom.y) == (3.0, 4.0)


class TestAtomicGeometries:
    """Test point, line and polygon encodings"""

    def test_point_from_elements(self, reader):
        """Test point element"""
        geom = reader.read(GeometryEncoding(gtype=2001, elements=[(1, 1, 1)], ordinates=[3, 4]))

        assert isinstance(geom, Point)
        assert (geom.x, geom.y) == (3.0, 4.0)

    def test_line_string(self, reader):
        """Test line element"""
        geom = reader.read(GeometryEncoding(
            gtype=2002, srid=4326, elements=[(1, 2, 1)], ordinates=[0, 0, 5, 5, 10, 0]
        ))

        assert isinstance(geom, LineString)
        assert list(geom.coords) == [(0, 0), (5, 5), (10, 0)]
        assert shapely.get_srid(geom) == 4326

    def test_polygon_with_explicit_hole(self, reader):
        """Test exterior ring followed by interior ring yields one hole"""
        geom = reader.read(GeometryEncoding(
            gtype=2003,
            elements=[(1, 1003, 1), (11, 2003, 1)],
            ordinates=SHELL + HOLE_CW
        ))

        assert isinstance(geom, Polygon)
        assert len(geom.interiors) == 1
        assert list(geom.interiors[0].coords) == [(2, 2), (2, 4), (4, 4), (4, 2), (2, 2)]
        assert list(geom.exterior.coords) == [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]

    def test_explicit_hole_consumed_regardless_of_orientation(self, reader):
        """Test interior ring type is a hole even when wound counter-clockwise"""
        geom = reader.read(GeometryEncoding(
            gtype=2003,
            elements=[(1, 1003, 1), (11, 2003, 1)],
            ordinates=SHELL + HOLE_CCW
        ))

        assert len(geom.interiors) == 1

    def test_generic_clockwise_ring_is_hole(self, reader):
        """Test generic polygon ring wound clockwise after a shell is a hole"""
        geom = reader.read(GeometryEncoding(
            gtype=2003,
            elements=[(1, 3, 1), (11, 3, 1)],
            ordinates=SHELL + HOLE_CW
        ))

        assert len(geom.interiors) == 1

    def test_generic_counter_clockwise_ring_is_not_hole(self, reader):
        """Test generic polygon ring wound counter-clockwise is not read as a hole"""
        geom = reader.read(GeometryEncoding(
            gtype=2003,
            elements=[(1, 3, 1), (11, 3, 1)],
            ordinates=SHELL + SECOND_SHELL
        ))

        assert len(geom.interiors) == 0
        assert list(geom.exterior.coords)[0] == (0, 0)

    def test_rectangle_polygon(self, reader):
        """Test rectangle corners expand to a closed five-point ring"""
        geom = reader.read(GeometryEncoding(
            gtype=2003, elements=[(1, 1003, 3)], ordinates=[0, 0, 10, 5]
        ))

        assert list(geom.exterior.coords) == [(0, 0), (10, 0), (10, 5), (0, 5), (0, 0)]

    def test_rectangle_hole(self, reader):
        """Test rectangle interior ring"""
        geom = reader.read(GeometryEncoding(
            gtype=2003,
            elements=[(1, 1003, 1), (11, 2003, 3)],
            ordinates=SHELL + [2, 2, 4, 4]
        ))

        assert list(geom.interiors[0].coords) == [(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)]


class TestMultiGeometries:
    """Test multi-geometry and collection encodings"""

    def test_multi_point(self, reader):
        """Test point cluster"""
        geom = reader.read(GeometryEncoding(
            gtype=2005, elements=[(1, 1, 3)], ordinates=[0, 0, 1, 1, 2, 2]
        ))

        assert isinstance(geom, MultiPoint)
        assert [(p.x, p.y) for p in geom.geoms] == [(0, 0), (1, 1), (2, 2)]

    def test_multi_line(self, reader):
        """Test consecutive line elements"""
        geom = reader.read(GeometryEncoding(
            gtype=2006,
            elements=[(1, 2, 1), (5, 2, 1)],
            ordinates=[0, 0, 1, 1, 5, 5, 6, 6]
        ))

        assert isinstance(geom, MultiLineString)
        assert [list(line.coords) for line in geom.geoms] == [
            [(0, 0), (1, 1)],
            [(5, 5), (6, 6)],
        ]

    def test_multi_polygon_with_implicit_holes(self, reader):
        """Test generic rings split into shells and holes by orientation"""
        geom = reader.read(GeometryEncoding(
            gtype=2007,
            elements=[(1, 3, 1), (11, 3, 1), (21, 3, 1)],
            ordinates=SHELL + HOLE_CW + SECOND_SHELL
        ))

        assert isinstance(geom, MultiPolygon)
        assert len(geom.geoms) == 2
        assert len(geom.geoms[0].interiors) == 1
        assert len(geom.geoms[1].interiors) == 0

    def test_multi_polygon_stops_at_line(self, reader):
        """Test multipolygon scan stops at the first non-polygon element"""
        geom = reader.read(GeometryEncoding(
            gtype=2007,
            elements=[(1, 1003, 1), (11, 1003, 1), (21, 2, 1)],
            ordinates=SHELL + SECOND_SHELL + [40, 40, 50, 50]
        ))

        assert len(geom.geoms) == 2

    def test_collection(self, reader):
        """Test heterogeneous collection with a polygon hole"""
        geom = reader.read(GeometryEncoding(
            gtype=2004,
            elements=[(1, 1, 1), (3, 2, 1), (7, 1003, 1), (17, 2003, 1), (27, 1, 2)],
            ordinates=[0, 0] + [1, 1, 2, 2] + SHELL + HOLE_CW + [7, 7, 8, 8]
        ))

        assert isinstance(geom, GeometryCollection)
        assert [g.geom_type for g in geom.geoms] == ["Point", "LineString", "Polygon", "MultiPoint"]
        assert len(geom.geoms[2].interiors) == 1

    def test_collection_rejects_interior_ring(self, reader):
        """Test interior ring at collection scope is an error"""
        encoding = GeometryEncoding(
            gtype=2004,
            elements=[(1, 1, 1), (3, 2003, 1)],
            ordinates=[0, 0] + HOLE_CW
        )

        with pytest.raises(UnsupportedElementTypeError) as exc_info:
            reader.read(encoding)

        assert exc_info.value.element_index == 1
        assert exc_info.value.element_type == 2003

    def test_collection_rejects_compound_element(self, reader):
        """Test compound line string in a collection is an error"""
        encoding = GeometryEncoding(
            gtype=2004, elements=[(1, 4, 2)], ordinates=[0, 0, 1, 1]
        )

        with pytest.raises(UnsupportedElementTypeError):
            reader.read(encoding)


class TestDecodeErrors:
    """Test rejection of malformed and unsupported encodings"""

    def test_starting_offset_beyond_ordinates(self, reader):
        """Test offset past the ordinate array names the element"""
        encoding = GeometryEncoding(
            gtype=2006,
            elements=[(1, 2, 1), (9, 2, 1)],
            ordinates=[0, 0, 1, 1]
        )

        with pytest.raises(MalformedEncodingError) as exc_info:
            reader.read(encoding)

        assert exc_info.value.element_index == 1
        assert "STARTING_OFFSET 9" in str(exc_info.value)

    def test_ordinate_length_not_multiple_of_dimension(self, reader):
        """Test ordinate array that is not whole coordinates"""
        with pytest.raises(MalformedEncodingError):
            reader.read(GeometryEncoding(gtype=2002, elements=[(1, 2, 1)], ordinates=[0, 0, 1]))

    def test_missing_elements(self, reader):
        """Test encoding without elements or point"""
        with pytest.raises(MalformedEncodingError):
            reader.read(GeometryEncoding(gtype=2003))

    @pytest.mark.parametrize("gtype", [2006, 2007])
    def test_missing_elements_multi(self, reader, gtype):
        """Test multi encoding without elements is not read as empty"""
        with pytest.raises(MalformedEncodingError) as exc_info:
            reader.read(GeometryEncoding(gtype=gtype))

        assert exc_info.value.element_index == 0

    def test_trailing_offset_beyond_ordinates_after_line(self, reader):
        """Test unread trailing element is still checked against the ordinates"""
        encoding = GeometryEncoding(
            gtype=2002,
            elements=[(1, 2, 1), (100, 2, 1)],
            ordinates=[0, 0, 1, 1]
        )

        with pytest.raises(MalformedEncodingError) as exc_info:
            reader.read(encoding)

        assert exc_info.value.element_index == 1
        assert "STARTING_OFFSET 100" in str(exc_info.value)

    def test_trailing_offset_beyond_ordinates_after_multi_polygon(self, reader):
        """Test element after the polygons is checked against the ordinates"""
        encoding = GeometryEncoding(
            gtype=2007,
            elements=[(1, 1003, 1), (11, 1003, 1), (500, 2, 1)],
            ordinates=SHELL + SECOND_SHELL
        )

        with pytest.raises(MalformedEncodingError) as exc_info:
            reader.read(encoding)

        assert exc_info.value.element_index == 2

    def test_offset_inside_coordinate(self, reader):
        """Test starting offset that splits a coordinate"""
        encoding = GeometryEncoding(
            gtype=2006,
            elements=[(1, 2, 1), (4, 2, 1)],
            ordinates=[0, 0, 1, 1, 2, 2, 3, 3]
        )

        with pytest.raises(MalformedEncodingError) as exc_info:
            reader.read(encoding)

        assert exc_info.value.element_index == 1
        assert "does not start a coordinate" in str(exc_info.value)

    def test_arc_line_rejected(self, reader):
        """Test arc interpretation is unsupported"""
        with pytest.raises(UnsupportedInterpretationError) as exc_info:
            reader.read(GeometryEncoding(
                gtype=2002, elements=[(1, 2, 2)], ordinates=[0, 0, 1, 1, 2, 0]
            ))

        assert exc_info.value.interpretation == 2

    def test_circle_polygon_rejected(self, reader):
        """Test circle interpretation is unsupported"""
        with pytest.raises(UnsupportedInterpretationError):
            reader.read(GeometryEncoding(
                gtype=2003, elements=[(1, 1003, 4)], ordinates=[0, 0, 1, 1, 2, 0]
            ))

    def test_wrong_element_type_for_polygon(self, reader):
        """Test line element in a polygon encoding"""
        with pytest.raises(UnsupportedElementTypeError) as exc_info:
            reader.read(GeometryEncoding(gtype=2003, elements=[(1, 2, 1)], ordinates=SHELL))

        assert exc_info.value.element_index == 0

    def test_unsupported_gtype(self, reader):
        """Test solid geometries are rejected"""
        with pytest.raises(UnsupportedGeometryTypeError):
            reader.read(GeometryEncoding(gtype=3008, elements=[(1, 1007, 1)], ordinates=[0, 0, 0]))

    def test_dimension_below_two(self, reader):
        """Test one-dimensional SDO_GTYPE is rejected"""
        with pytest.raises(DimensionError):
            reader.read(GeometryEncoding(gtype=1001, point=(1.0, 2.0, None)))

    def test_configured_dimension_below_two(self):
        """Test reader rejects configured dimension below 2"""
        with pytest.raises(DimensionError):
            SdoReader(ReaderConfig(dimension=1))

    def test_unclosed_ring(self, reader):
        """Test ring that does not end at its start"""
        with pytest.raises(MalformedEncodingError):
            reader.read(GeometryEncoding(
                gtype=2003, elements=[(1, 1003, 1)], ordinates=[0, 0, 10, 0, 10, 10, 0, 10]
            ))


class TestDimensions:
    """Test output dimension handling"""

    def test_3d_line(self, reader):
        """Test 3D ordinates are kept"""
        geom = reader.read(GeometryEncoding(
            gtype=3002, elements=[(1, 2, 1)], ordinates=[0, 0, 1, 1, 1, 2]
        ))

        assert list(geom.coords) == [(0, 0, 1), (1, 1, 2)]

    def test_3d_line_read_as_2d(self):
        """Test configured dimension truncates coordinates"""
        reader = SdoReader(ReaderConfig(dimension=2))

        geom = reader.read(GeometryEncoding(
            gtype=3002, elements=[(1, 2, 1)], ordinates=[0, 0, 1, 1, 1, 2]
        ))

        assert list(geom.coords) == [(0, 0), (1, 1)]

    def test_4d_line_capped_by_sequence_factory(self, reader):
        """Test four ordinates are read as x, y, z"""
        geom = reader.read(GeometryEncoding(
            gtype=4402, elements=[(1, 2, 1)], ordinates=[0, 0, 1, 5, 1, 1, 2, 6]
        ))

        assert list(geom.coords) == [(0, 0, 1), (1, 1, 2)]

    def test_multi_polygon_3d_offsets(self, reader):
        """Test starting offsets are translated with the native dimension"""
        shell_3d = [0, 0, 0, 10, 0, 0, 10, 10, 0, 0, 10, 0, 0, 0, 0]
        second_3d = [20, 20, 1, 30, 20, 1, 30, 30, 1, 20, 30, 1, 20, 20, 1]

        geom = reader.read(GeometryEncoding(
            gtype=3007,
            elements=[(1, 1003, 1), (16, 1003, 1)],
            ordinates=shell_3d + second_3d
        ))

        assert len(geom.geoms) == 2
        assert geom.geoms[1].exterior.coords[0] == (20, 20, 1)


class TestReaderContract:
    """Test null handling, determinism and the result API"""

    def test_none_input(self, reader):
        """Test absent input propagates to absent output"""
        assert reader.read(None) is None

    def test_deterministic(self, reader):
        """Test identical input yields identical output"""
        encoding = GeometryEncoding(
            gtype=2007,
            elements=[(1, 3, 1), (11, 3, 1), (21, 3, 1)],
            ordinates=SHELL + HOLE_CW + SECOND_SHELL
        )

        assert reader.read(encoding).wkt == reader.read(encoding).wkt

    def test_read_result_success(self, reader):
        """Test result API on a valid encoding"""
        result = reader.read_result(GeometryEncoding(gtype=2001, point=(1.0, 2.0, None)))

        assert result.is_valid
        assert result.error is None
        assert isinstance(result.geometry, Point)

    def test_read_result_none(self, reader):
        """Test result API on absent input"""
        result = reader.read_result(None)

        assert result.is_valid
        assert result.geometry is None

    def test_read_result_failure(self, reader):
        """Test result API returns the error instead of raising"""
        result = reader.read_result(GeometryEncoding(
            gtype=2002, elements=[(5, 2, 1)], ordinates=[0, 0, 1, 1]
        ))

        assert not result.is_valid
        assert result.geometry is None
        assert result.error_type == DecodeErrorType.MALFORMED_ENCODING
        assert result.error.element_index == 0
        with pytest.raises(MalformedEncodingError):
            result.unwrap()

    def test_from_sdo_arrays(self, reader):
        """Test decoding from flat SDO_ELEM_INFO"""
        encoding = GeometryEncoding.from_sdo(
            2003, 8307, None, [1, 1003, 1, 11, 2003, 1], SHELL + HOLE_CW
        )

        geom = reader.read(encoding)

        assert len(geom.interiors) == 1
        assert shapely.get_srid(geom) == 8307
