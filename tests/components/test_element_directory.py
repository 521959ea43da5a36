"""Tests for ElementDirectory"""
import pytest

from sdo_reader.components import ElementDirectory
from sdo_reader.core import MalformedEncodingError
from sdo_reader.models import ElementInfo


def make_directory(triplets, ordinate_count, dimension=2):
    elements = [
        ElementInfo(starting_offset=o, element_type=e, interpretation=i)
        for o, e, i in triplets
    ]
    return ElementDirectory(elements, ordinate_count, dimension)


class TestElementDirectory:
    """Test suite for element triplet access"""

    @pytest.fixture
    def directory(self):
        """Polygon with one hole over 20 ordinates"""
        return make_directory([(1, 1003, 1), (11, 2003, 1)], 20)

    def test_accessors(self, directory):
        """Test triplet fields"""
        assert directory.count == 2
        assert directory.starting_offset(1) == 11
        assert directory.element_type(1) == 2003
        assert directory.interpretation(0) == 1
        assert directory.ordinate_count == 20
        assert directory.dimension == 2

    def test_sentinel_past_end(self, directory):
        """Test probing past the last element"""
        assert directory.element_type(2) == -1
        assert directory.interpretation(2) == -1
        assert directory.starting_offset(2) == 21
        assert directory.element_type(10) == -1

    def test_coordinate_index(self, directory):
        """Test offsets translate to coordinate indices"""
        assert directory.coordinate_index(0) == 0
        assert directory.coordinate_index(1) == 5
        assert directory.coordinate_index(2) == 10

    def test_coordinate_range_of_last_element(self, directory):
        """Test last element range ends at the sentinel"""
        assert directory.coordinate_range(1) == (5, 10)

    def test_coordinate_index_3d(self):
        """Test offsets translate with the native dimension"""
        directory = make_directory([(1, 2, 1), (7, 2, 1)], 12, dimension=3)

        assert directory.coordinate_index(1) == 2
        assert directory.coordinate_range(1) == (2, 4)

    def test_str(self, directory):
        """Test rendering of the element array"""
        assert str(directory) == "(1,1003,1, 11,2003,1)"

    def test_decreasing_offsets_rejected(self):
        """Test starting offsets must not decrease"""
        with pytest.raises(MalformedEncodingError) as exc_info:
            make_directory([(11, 2, 1), (1, 2, 1)], 20)

        assert exc_info.value.element_index == 1

    def test_offset_below_one_rejected(self):
        """Test starting offsets are 1-based"""
        with pytest.raises(MalformedEncodingError) as exc_info:
            make_directory([(0, 2, 1)], 4)

        assert exc_info.value.element_index == 0

    def test_offset_past_ordinates_rejected(self):
        """Test every starting offset is checked against the ordinates"""
        with pytest.raises(MalformedEncodingError) as exc_info:
            make_directory([(1, 2, 1), (100, 2, 1)], 4)

        assert exc_info.value.element_index == 1

    def test_misaligned_offset_rejected(self):
        """Test starting offsets must start a coordinate"""
        with pytest.raises(MalformedEncodingError) as exc_info:
            make_directory([(1, 2, 1), (5, 2, 1)], 12, dimension=3)

        assert exc_info.value.element_index == 1

    def test_empty_directory(self):
        """Test empty element array is all sentinel"""
        directory = make_directory([], 0)

        assert directory.count == 0
        assert directory.element_type(0) == -1
        assert directory.starting_offset(0) == 1
