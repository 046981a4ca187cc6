"""
SDO_GTYPE Codec
===============

Packs and unpacks the four-digit SDO_GTYPE code ``DLTT``:

    D   coordinate dimension (2, 3 or 4)
    L   measure (LRS) dimension: 0 for none, else the ordinate slot of the measure
    TT  geometry type code (see codes.GeomType)

Example:
    >>> compose(2, 0, 1)
    2001
    >>> decompose(4401)
    GTypeParts(dim=4, lrs_dim=4, geom_type=1)

No validation is done. Division truncates toward zero the way the
database's integer arithmetic does, so ``compose(*decompose(code)) == code``
holds for every integer, negative codes included.
"""

from typing import NamedTuple


class GTypeParts(NamedTuple):
    """Decomposed SDO_GTYPE."""
    dim: int
    lrs_dim: int
    geom_type: int


def _div(a: int, b: int) -> int:
    # truncating division for positive b
    q = abs(a) // b
    return q if a >= 0 else -q


def _mod(a: int, b: int) -> int:
    return a - b * _div(a, b)


def compose(dim: int, lrs_dim: int, geom_type: int) -> int:
    """
    Compute the SDO_GTYPE code for the given D, L and TT components.

    Args:
        dim: Coordinate dimension
        lrs_dim: Measure dimension (0 if unmeasured)
        geom_type: Geometry type code

    Returns:
        SDO_GTYPE code
    """
    return dim * 1000 + lrs_dim * 100 + geom_type


def gtype_dim(gtype: int) -> int:
    """Extract the coordinate dimension from an SDO_GTYPE code."""
    return _div(gtype, 1000)


def gtype_measure_dim(gtype: int) -> int:
    """
    Extract the measure dimension from an SDO_GTYPE code.

    For a measured geometry this is 3 or 4 (or 0, meaning the last
    dimension holds the measure). For an unmeasured geometry it is 0.
    """
    return _div(_mod(gtype, 1000), 100)


def gtype_geom_type(gtype: int) -> int:
    """Extract the geometry type code (TT) from an SDO_GTYPE code."""
    return _mod(gtype, 100)


def decompose(gtype: int) -> GTypeParts:
    """Split an SDO_GTYPE code into (dim, lrs_dim, geom_type)."""
    return GTypeParts(
        dim=gtype_dim(gtype),
        lrs_dim=gtype_measure_dim(gtype),
        geom_type=gtype_geom_type(gtype),
    )
