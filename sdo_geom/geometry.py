"""
SDO_GEOMETRY Container
======================

Bounded Context: In-memory shape of an SDO_GEOMETRY value.

Design:
- Immutable value (frozen dataclass, read-only numpy arrays)
- GTYPE fields derived once at construction
- Triplet accessors never raise: out-of-range indexes return -1, and the
  starting offset past the last triplet is a virtual end offset
- Structural equality ignores SRID and treats NaN == NaN

Fields map one-to-one onto the database object:

    gtype       SDO_GTYPE         packed DLTT code
    srid        SDO_SRID          -1 for null
    point       SDO_POINT         x, y, z[, m]; compact points only
    elem_info   SDO_ELEM_INFO     int32 triplets
    ordinates   SDO_ORDINATES     float64 ordinate values
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Sequence

import numpy as np

from . import elem_info as triplets_
from .codes import GeomType, SRID_NULL
from .config import CodecConfig
from .elem_info import Triplet
from .errors import MalformedElemInfoError
from .gtype import decompose
from .logging import create_logger, LogEvent

logger = create_logger("geometry")


def _as_array(values: Optional[Sequence], dtype, name: str) -> Optional[np.ndarray]:
    """Copy values into a read-only 1-D array, or pass None through."""
    if values is None:
        return None
    array = np.array(values, dtype=dtype)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1-D sequence, got shape {array.shape}")
    array.flags.writeable = False
    return array


def _as_elem_info(values: Optional[Sequence]) -> Optional[np.ndarray]:
    """
    Copy directory entries into a read-only int32 array.

    Entries must be whole numbers within the 32-bit range; nothing is
    truncated or wrapped.
    """
    if values is None:
        return None
    raw = np.array(values)
    if raw.ndim != 1:
        raise ValueError(f"elem_info must be a 1-D sequence, got shape {raw.shape}")
    if raw.size:
        if raw.dtype.kind == 'f' and not np.all(np.mod(raw, 1) == 0):
            raise ValueError("elem_info values must be integers")
        if raw.dtype.kind not in 'biufO' or (
            raw.dtype.kind == 'O' and not all(isinstance(v, int) for v in raw.tolist())
        ):
            raise TypeError(f"elem_info values must be integers, got dtype {raw.dtype}")
        bounds = np.iinfo(np.int32)
        if min(raw.tolist()) < bounds.min or max(raw.tolist()) > bounds.max:
            raise ValueError("elem_info value out of 32-bit range")
    array = raw.astype(np.int32)
    array.flags.writeable = False
    return array


def _arrays_equal(a: Optional[np.ndarray], b: Optional[np.ndarray]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if len(a) != len(b):
        return False
    if a.dtype.kind == 'f' or b.dtype.kind == 'f':
        return bool(np.array_equal(a, b, equal_nan=True))
    return bool(np.array_equal(a, b))


def _format_floats(values: Optional[np.ndarray], group_size: int) -> str:
    if values is None:
        return "null"
    return triplets_.format_grouped([float(v) for v in values], group_size)


@dataclass(frozen=True, eq=False)
class SdoGeometry:
    """
    Contents of an SDO_GEOMETRY structure.

    A geometry is stored either as a compact point (``point`` set,
    ``elem_info`` None) or through the element directory and ordinates.

    Attributes:
        gtype: SDO_GTYPE code
        srid: Spatial reference id (SRID_NULL if none)
        point: Direct point values (3 or 4 floats), or None
        elem_info: Element directory, length a multiple of 3, or None
        ordinates: Ordinate values, or None
        ord_dim: Coordinate dimension derived from gtype
        lrs_dim: Measure dimension derived from gtype (0 = unmeasured)
        geom_type: Geometry type code derived from gtype

    Invariants:
        - The derived fields are recomputed only when a new instance is
          built (e.g. ``dataclasses.replace(geom, gtype=3002)``)
        - Arrays are private copies; containers never share storage

    Example:
        >>> geom = SdoGeometry(
        ...     gtype=2003,
        ...     srid=4326,
        ...     elem_info=[1, 1003, 1],
        ...     ordinates=[0, 0, 10, 0, 10, 10, 0, 0],
        ... )
        >>> geom.num_elements()
        1
        >>> geom.starting_offset(1)
        9
    """

    gtype: int
    srid: int = SRID_NULL
    point: Optional[np.ndarray] = None
    elem_info: Optional[np.ndarray] = None
    ordinates: Optional[np.ndarray] = None

    ord_dim: int = field(init=False)
    lrs_dim: int = field(init=False)
    geom_type: int = field(init=False)

    def __post_init__(self):
        """Copy arrays and derive the GTYPE fields."""
        object.__setattr__(self, 'gtype', int(self.gtype))
        object.__setattr__(self, 'srid', int(self.srid))

        point = _as_array(self.point, np.float64, "point")
        if point is not None and not 3 <= len(point) <= 4:
            raise ValueError(f"point must have 3 or 4 values, got {len(point)}")
        object.__setattr__(self, 'point', point)

        elem_info = _as_elem_info(self.elem_info)
        object.__setattr__(self, 'elem_info', elem_info)
        object.__setattr__(self, 'ordinates', _as_array(self.ordinates, np.float64, "ordinates"))

        parts = decompose(self.gtype)
        object.__setattr__(self, 'ord_dim', parts.dim)
        object.__setattr__(self, 'lrs_dim', parts.lrs_dim)
        object.__setattr__(self, 'geom_type', parts.geom_type)

        if not triplets_.is_well_formed(elem_info):
            logger.warning(
                event=LogEvent.ELEM_INFO_MALFORMED,
                message="Element directory length is not a multiple of 3; trailing entries ignored",
                metadata={'gtype': self.gtype, 'elem_info_len': len(elem_info)},
            )

    # ========== Factories ==========

    @classmethod
    def from_fields(
        cls,
        gtype: int,
        srid: int = SRID_NULL,
        point: Optional[Sequence[float]] = None,
        elem_info: Optional[Sequence[int]] = None,
        ordinates: Optional[Sequence[float]] = None,
        config: Optional[CodecConfig] = None,
    ) -> "SdoGeometry":
        """
        Build a geometry from the raw column values read from storage.

        Raises:
            MalformedElemInfoError: If config.strict_elem_info is set and the
                directory is not made of whole triplets
        """
        config = config or CodecConfig()
        if config.strict_elem_info:
            try:
                triplets_.check_elem_info(elem_info)
            except MalformedElemInfoError as e:
                logger.error(
                    event=LogEvent.ELEM_INFO_REJECTED,
                    message="Rejected malformed element directory",
                    metadata={'gtype': gtype, 'elem_info_len': e.length},
                    exc_info=e,
                )
                raise
        return cls(gtype=gtype, srid=srid, point=point, elem_info=elem_info, ordinates=ordinates)

    @classmethod
    def compact_point(
        cls,
        gtype: int,
        srid: int,
        point: Sequence[float],
    ) -> "SdoGeometry":
        """Build a point stored in SDO_POINT with no element directory."""
        return cls(gtype=gtype, srid=srid, point=point)

    # ========== Classification ==========

    def is_compact_point(self) -> bool:
        """True if this is an unmeasured point held in SDO_POINT only."""
        return (
            self.lrs_dim == 0
            and self.geom_type == GeomType.POINT
            and self.point is not None
            and self.elem_info is None
        )

    # ========== Triplet access ==========

    def ordinate_len(self) -> int:
        if self.ordinates is None:
            return 0
        return len(self.ordinates)

    def num_elements(self) -> int:
        return triplets_.num_triplets(self.elem_info)

    def starting_offset(self, elem_index: int) -> int:
        """
        SDO_STARTING_OFFSET of a triplet.

        An index past the last triplet returns ``ordinate_len() + 1``, so the
        ordinate range of element i is always
        ``[starting_offset(i), starting_offset(i + 1))``.
        Negative indexes are treated as out of range.
        """
        length = 0 if self.elem_info is None else len(self.elem_info)
        if elem_index < 0 or elem_index * 3 >= length:
            return self.ordinate_len() + 1
        return int(self.elem_info[elem_index * 3])

    def e_type(self, elem_index: int) -> int:
        """SDO_ETYPE of a triplet, or -1 if the index is out of range."""
        return triplets_.e_type(self.elem_info, elem_index)

    def interpretation(self, elem_index: int) -> int:
        """SDO_INTERPRETATION of a triplet, or -1 if the index is out of range."""
        return triplets_.interpretation(self.elem_info, elem_index)

    def triplets(self) -> Iterator[Triplet]:
        return triplets_.iter_triplets(self.elem_info)

    def element_ordinates(self, elem_index: int) -> np.ndarray:
        """
        Ordinates belonging to one element.

        Returns:
            Read-only view of the ordinates from this element's starting
            offset up to the next element's; empty if out of range
        """
        if self.ordinates is None:
            return np.empty(0, dtype=np.float64)
        start = max(self.starting_offset(elem_index) - 1, 0)
        end = max(self.starting_offset(elem_index + 1) - 1, start)
        return self.ordinates[start:end]

    def coordinates(self) -> np.ndarray:
        """
        Ordinates grouped into an (N, ord_dim) array.

        Raises:
            ValueError: If ord_dim is not positive or does not divide the
                ordinate count
        """
        if self.ord_dim <= 0:
            raise ValueError(f"Cannot group ordinates with ord_dim={self.ord_dim}")
        if self.ordinates is None:
            return np.empty((0, self.ord_dim), dtype=np.float64)
        if len(self.ordinates) % self.ord_dim != 0:
            raise ValueError(
                f"{len(self.ordinates)} ordinates do not divide into "
                f"{self.ord_dim}-dimensional coordinates"
            )
        return self.ordinates.reshape(-1, self.ord_dim)

    # ========== Equality ==========

    def is_equal(self, other: "SdoGeometry") -> bool:
        """
        Structural equality.

        GTYPE must match. SRID is ignored. Arrays must both be absent or
        have equal values, with NaN equal to NaN.
        """
        if self.gtype != other.gtype:
            return False
        if not _arrays_equal(self.point, other.point):
            return False
        # assume the shape is defined by elem_info and ordinates
        if not _arrays_equal(self.elem_info, other.elem_info):
            return False
        return _arrays_equal(self.ordinates, other.ordinates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SdoGeometry):
            return NotImplemented
        return self.is_equal(other)

    # ========== Rendering ==========

    def __str__(self) -> str:
        text = (
            f"GTYPE={self.gtype}"
            f" SRID={self.srid}"
            f" ELEM_INFO={triplets_.format_elem_info(self.elem_info)}"
            f" ORDS={_format_floats(self.ordinates, self.ord_dim)}"
        )
        if self.point is not None:
            text += f" POINT={_format_floats(self.point, 0)}"
        return text

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a four-field record (JSON-compatible apart from NaN)."""
        return {
            'gtype': self.gtype,
            'srid': self.srid,
            'point': None if self.point is None else [float(v) for v in self.point],
            'elem_info': None if self.elem_info is None else [int(v) for v in self.elem_info],
            'ordinates': None if self.ordinates is None else [float(v) for v in self.ordinates],
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        config: Optional[CodecConfig] = None,
    ) -> "SdoGeometry":
        """
        Deserialize from a record produced by to_dict().

        Only ``gtype`` is required; a missing or null ``srid`` takes
        ``config.default_srid``.
        """
        config = config or CodecConfig()
        srid = data.get('srid')
        try:
            geom = cls.from_fields(
                gtype=data['gtype'],
                srid=config.default_srid if srid is None else srid,
                point=data.get('point'),
                elem_info=data.get('elem_info'),
                ordinates=data.get('ordinates'),
                config=config,
            )
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.error(
                event=LogEvent.DESERIALIZATION_ERROR,
                message="Failed to rebuild SdoGeometry from record",
                exc_info=e,
            )
            raise

        logger.info(
            event=LogEvent.GEOMETRY_DESERIALIZED,
            message="Rebuilt SdoGeometry from record",
            metadata={'gtype': geom.gtype, 'num_elements': geom.num_elements()},
        )
        return geom
