"""
Tests for the raw SDO_ELEM_INFO triplet helpers.
"""

import pytest

from sdo_geom import MalformedElemInfoError, Triplet
from sdo_geom import elem_info as ei

POLYGON_WITH_HOLE = [1, 1003, 1, 9, 2003, 1]


def test_triplet_fields():
    assert ei.starting_offset(POLYGON_WITH_HOLE, 1) == 9
    assert ei.e_type(POLYGON_WITH_HOLE, 0) == 1003
    assert ei.interpretation(POLYGON_WITH_HOLE, 1) == 1


def test_out_of_range_returns_minus_one():
    assert ei.starting_offset(POLYGON_WITH_HOLE, 2) == -1
    assert ei.e_type(POLYGON_WITH_HOLE, 2) == -1
    assert ei.interpretation(POLYGON_WITH_HOLE, 2) == -1
    assert ei.e_type(POLYGON_WITH_HOLE, -1) == -1


def test_none_directory_reads_as_empty():
    assert ei.num_triplets(None) == 0
    assert ei.starting_offset(None, 0) == -1
    assert list(ei.iter_triplets(None)) == []


@pytest.mark.parametrize("length, expected", [
    (0, 0), (1, 0), (2, 0), (3, 1), (5, 1), (6, 2), (7, 2), (9, 3),
])
def test_num_triplets_floors(length, expected):
    assert ei.num_triplets(list(range(length))) == expected


def test_partial_trailing_triplet():
    """A trailing partial triplet exposes only the entries that exist."""
    partial = [1, 2, 1, 7, 2]
    assert ei.num_triplets(partial) == 1
    assert ei.starting_offset(partial, 1) == 7
    assert ei.e_type(partial, 1) == 2
    assert ei.interpretation(partial, 1) == -1


def test_iter_triplets():
    assert list(ei.iter_triplets(POLYGON_WITH_HOLE)) == [
        Triplet(start_offset=1, e_type=1003, interpretation=1),
        Triplet(start_offset=9, e_type=2003, interpretation=1),
    ]


def test_check_elem_info():
    ei.check_elem_info(None)
    ei.check_elem_info([])
    ei.check_elem_info(POLYGON_WITH_HOLE)

    with pytest.raises(MalformedElemInfoError) as exc:
        ei.check_elem_info([1, 2, 1, 5])
    assert exc.value.length == 4
    assert isinstance(exc.value, ValueError)


def test_format_elem_info():
    assert ei.format_elem_info(None) == "null"
    assert ei.format_elem_info([]) == ""
    assert ei.format_elem_info(POLYGON_WITH_HOLE) == "1,1003,1,  9,2003,1"


def test_format_grouped_without_spacer():
    assert ei.format_grouped([1, 2, 3, 4], 0) == "1,2,3,4"
    assert ei.format_grouped([1, 2, 3, 4], 2) == "1,2,  3,4"
