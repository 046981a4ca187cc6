"""
Tests for shapely geometry classification.
"""

import pytest
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from sdo_geom import GeomType, geom_type_of, gtype_of

SQUARE = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.mark.parametrize("geom, expected", [
    (Point(1, 2), GeomType.POINT),
    (LineString([(0, 0), (1, 1)]), GeomType.LINE),
    (LinearRing([(0, 0), (1, 0), (1, 1)]), GeomType.LINE),
    (SQUARE, GeomType.POLYGON),
    (MultiPoint([(0, 0), (1, 1)]), GeomType.MULTIPOINT),
    (MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]]), GeomType.MULTILINE),
    (MultiPolygon([SQUARE]), GeomType.MULTIPOLYGON),
    (GeometryCollection([Point(0, 0), SQUARE]), GeomType.COLLECTION),
])
def test_geom_type_of(geom, expected):
    assert geom_type_of(geom) == expected


def test_empty_geometry_keeps_its_kind():
    assert geom_type_of(Point()) == GeomType.POINT
    assert geom_type_of(GeometryCollection()) == GeomType.COLLECTION


def test_none_is_unknown():
    assert geom_type_of(None) == GeomType.UNKNOWN_GEOMETRY


def test_foreign_object_is_unknown(caplog):
    assert geom_type_of("POINT (1 2)") == GeomType.UNKNOWN_GEOMETRY
    assert geom_type_of(42) == GeomType.UNKNOWN_GEOMETRY
    assert any("classify.unknown" in r.getMessage() for r in caplog.records)


def test_gtype_of():
    assert gtype_of(Point(1, 2)) == 2001
    assert gtype_of(Point(1, 2, 3)) == 3001
    assert gtype_of(SQUARE) == 2003
    assert gtype_of(LineString([(0, 0), (1, 1)]), lrs_dim=3) == 3302
    assert gtype_of(LineString([(0, 0, 0), (1, 1, 1)]), lrs_dim=4) == 4402
    assert gtype_of(None) == 2000
