"""
sdo_geom - SDO_GEOMETRY codec model
===================================

Bounded Context: In-memory model of the spatial database geometry structure.

Design Philosophy:
- Faithful container: holds the stored fields as-is, no geometric computation
- Immutable values (frozen dataclasses, read-only numpy arrays)
- Defensive decode: accessors return sentinels instead of raising
- Codes are integer enums matching the stored values exactly

Architecture:

    sdo_geom/
    ├── codes.py       # GeomType, ElementType, Interpretation, SRID_NULL
    ├── gtype.py       # SDO_GTYPE compose / decompose
    ├── elem_info.py   # SDO_ELEM_INFO triplet helpers
    ├── geometry.py    # SdoGeometry container
    ├── classify.py    # shapely geometry -> GeomType
    ├── config.py      # CodecConfig (YAML)
    ├── errors.py      # Exceptions
    └── logging/       # Structured JSON logging

Usage:

    from sdo_geom import SdoGeometry, GeomType, compose

    geom = SdoGeometry(
        gtype=compose(2, 0, GeomType.POLYGON),
        srid=4326,
        elem_info=[1, 1003, 1,  9, 2003, 1],
        ordinates=[0, 0, 10, 0, 10, 10, 0, 0,  2, 2, 2, 4, 4, 4, 2, 2],
    )
    for i in range(geom.num_elements()):
        ords = geom.element_ordinates(i)
"""

from sdo_geom.codes import (
    GeomType,
    ElementType,
    Interpretation,
    SRID_NULL,
    INVALID_CODE,
    TYPE_GEOMETRY,
    TYPE_ELEM_INFO_ARRAY,
    TYPE_ORDINATE_ARRAY,
    TYPE_POINT_TYPE,
)
from sdo_geom.gtype import GTypeParts, compose, decompose
from sdo_geom.elem_info import Triplet
from sdo_geom.geometry import SdoGeometry
from sdo_geom.classify import geom_type_of, gtype_of
from sdo_geom.config import CodecConfig
from sdo_geom.errors import SdoGeometryError, MalformedElemInfoError

__version__ = "1.0.0"

__all__ = [
    # Codes
    "GeomType",
    "ElementType",
    "Interpretation",
    "SRID_NULL",
    "INVALID_CODE",
    "TYPE_GEOMETRY",
    "TYPE_ELEM_INFO_ARRAY",
    "TYPE_ORDINATE_ARRAY",
    "TYPE_POINT_TYPE",
    # GTYPE
    "GTypeParts",
    "compose",
    "decompose",
    # Container
    "Triplet",
    "SdoGeometry",
    # Classification
    "geom_type_of",
    "gtype_of",
    # Config / errors
    "CodecConfig",
    "SdoGeometryError",
    "MalformedElemInfoError",
]
