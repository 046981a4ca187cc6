"""
Geometry Kind Classification
============================

Maps shapely geometries onto the SDO_GTYPE geometry type codes. Used on the
write path to seed the GTYPE before an encoder fills the element directory
and ordinates.

    Point               -> POINT (1)
    LineString          -> LINE (2)       (LinearRing included)
    Polygon             -> POLYGON (3)
    GeometryCollection  -> COLLECTION (4)
    MultiPoint          -> MULTIPOINT (5)
    MultiLineString     -> MULTILINE (6)
    MultiPolygon        -> MULTIPOLYGON (7)
    anything else       -> UNKNOWN_GEOMETRY (0)
"""

from typing import Any

from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from .codes import GeomType
from .gtype import compose
from .logging import create_logger, LogEvent

logger = create_logger("classify")

# Multi-part kinds are listed before the generic collection
_GEOM_TYPES = (
    (Point, GeomType.POINT),
    (LineString, GeomType.LINE),
    (Polygon, GeomType.POLYGON),
    (MultiPoint, GeomType.MULTIPOINT),
    (MultiLineString, GeomType.MULTILINE),
    (MultiPolygon, GeomType.MULTIPOLYGON),
    (GeometryCollection, GeomType.COLLECTION),
)


def geom_type_of(geom: Any) -> GeomType:
    """
    Return the GEOM_TYPE code for a geometry.

    Never raises: None and unrecognised objects map to UNKNOWN_GEOMETRY.
    """
    if geom is None:
        return GeomType.UNKNOWN_GEOMETRY
    for geom_class, geom_type in _GEOM_TYPES:
        if isinstance(geom, geom_class):
            return geom_type

    logger.warning(
        event=LogEvent.CLASSIFY_UNKNOWN,
        message="Unrecognised geometry; using UNKNOWN_GEOMETRY",
        metadata={'type': type(geom).__name__},
    )
    return GeomType.UNKNOWN_GEOMETRY


def gtype_of(geom: Any, lrs_dim: int = 0) -> int:
    """
    Compute the SDO_GTYPE code for a geometry.

    The coordinate dimension is 2, or 3 when the geometry has Z values,
    plus one for the measure when lrs_dim is non-zero.

    Args:
        geom: shapely geometry (or None)
        lrs_dim: Measure dimension to encode (0 if unmeasured)

    Returns:
        SDO_GTYPE code
    """
    dim = 3 if getattr(geom, "has_z", False) else 2
    if lrs_dim:
        dim += 1
    return compose(dim, lrs_dim, geom_type_of(geom))
