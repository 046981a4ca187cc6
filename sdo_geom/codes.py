"""
SDO_GEOMETRY Code Tables
========================

Bounded Context: Persisted wire protocol

Integer codes stored in SDO_GEOMETRY columns. These values are the
contract with the database format and must not change.

    GeomType:        TT digits of SDO_GTYPE
    ElementType:     SDO_ETYPE of an SDO_ELEM_INFO triplet
    Interpretation:  SDO_INTERPRETATION of an SDO_ELEM_INFO triplet
"""

from enum import IntEnum


class GeomType(IntEnum):
    """Geometry type code (last two digits of SDO_GTYPE)."""
    UNKNOWN_GEOMETRY = 0
    POINT = 1
    LINE = 2           # Line or curve
    POLYGON = 3
    COLLECTION = 4
    MULTIPOINT = 5
    MULTILINE = 6      # MultiLine or MultiCurve
    MULTIPOLYGON = 7


class ElementType(IntEnum):
    """SDO_ETYPE code of an element directory triplet."""
    POINT = 1
    LINE = 2
    POLYGON = 3                # Shell/hole determined by orientation. Deprecated.
    POLYGON_EXTERIOR = 1003    # Counterclockwise
    POLYGON_INTERIOR = 2003    # Clockwise


class Interpretation(IntEnum):
    """
    SDO_INTERPRETATION code of an element directory triplet.

    STRAIGHT is the interpretation for points, linestrings and polygons
    made of straight segments. ARC and CIRCLE are valid in the database
    but have no counterpart in a linear geometry model.
    """
    STRAIGHT = 1
    ARC = 2
    RECTANGLE = 3
    CIRCLE = 4

    @property
    def is_supported(self) -> bool:
        return self in (Interpretation.STRAIGHT, Interpretation.RECTANGLE)


# Value indicating a null SRID
SRID_NULL = -1

# Returned by triplet accessors for an out-of-range index
INVALID_CODE = -1

# Database object types making up SDO_GEOMETRY
TYPE_GEOMETRY = "MDSYS.SDO_GEOMETRY"
TYPE_ELEM_INFO_ARRAY = "MDSYS.SDO_ELEM_INFO_ARRAY"
TYPE_ORDINATE_ARRAY = "MDSYS.SDO_ORDINATE_ARRAY"
TYPE_POINT_TYPE = "MDSYS.SDO_POINT_TYPE"
