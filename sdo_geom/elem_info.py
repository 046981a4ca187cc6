"""
SDO_ELEM_INFO Triplet Access
============================

The element directory is a flat integer array read as consecutive
triplets ``(starting_offset, etype, interpretation)``:

    [1, 2, 1,   5, 1003, 1,   9, 2003, 1]
     ^ triplet 0  ^ triplet 1    ^ triplet 2

Starting offsets are 1-based indexes into SDO_ORDINATES.

These helpers work on a bare directory. Out-of-range triplet indexes
return -1 and a None directory reads as empty. SdoGeometry layers the
virtual end offset on top of them.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .codes import INVALID_CODE
from .errors import MalformedElemInfoError


@dataclass(frozen=True)
class Triplet:
    """One SDO_ELEM_INFO entry."""
    start_offset: int
    e_type: int
    interpretation: int


def _entry(elem_info: Optional[Sequence[int]], pos: int) -> int:
    if elem_info is None or pos < 0 or pos >= len(elem_info):
        return INVALID_CODE
    return int(elem_info[pos])


def starting_offset(elem_info: Optional[Sequence[int]], triplet_index: int) -> int:
    """
    Extract SDO_STARTING_OFFSET for a triplet.

    Returns:
        Starting offset (1-based), or -1 if the triplet index is too large
    """
    return _entry(elem_info, triplet_index * 3)


def e_type(elem_info: Optional[Sequence[int]], triplet_index: int) -> int:
    """Extract SDO_ETYPE for a triplet, or -1 if the index is too large."""
    return _entry(elem_info, triplet_index * 3 + 1)


def interpretation(elem_info: Optional[Sequence[int]], triplet_index: int) -> int:
    """
    Extract SDO_INTERPRETATION for a triplet, or -1 if the index is too large.

    1 means straight edges and 3 a rectangle; 2 (arc) and 4 (circle) also
    occur in stored data.
    """
    return _entry(elem_info, triplet_index * 3 + 2)


def num_triplets(elem_info: Optional[Sequence[int]]) -> int:
    """Number of whole triplets. A trailing partial triplet is not counted."""
    if elem_info is None:
        return 0
    return len(elem_info) // 3


def iter_triplets(elem_info: Optional[Sequence[int]]) -> Iterator[Triplet]:
    for i in range(num_triplets(elem_info)):
        yield Triplet(
            start_offset=starting_offset(elem_info, i),
            e_type=e_type(elem_info, i),
            interpretation=interpretation(elem_info, i),
        )


def is_well_formed(elem_info: Optional[Sequence[int]]) -> bool:
    """True if the directory is absent or made of whole triplets."""
    return elem_info is None or len(elem_info) % 3 == 0


def check_elem_info(elem_info: Optional[Sequence[int]]) -> None:
    """
    Reject a directory that is not made of whole triplets.

    Raises:
        MalformedElemInfoError: If the length is not a multiple of 3
    """
    if not is_well_formed(elem_info):
        raise MalformedElemInfoError(len(elem_info))


def format_grouped(values: Optional[Sequence], group_size: int) -> str:
    """
    Comma-separated rendering with a spacer between groups.

    Returns "null" for an absent array. A group_size <= 0 disables the spacer.
    """
    if values is None:
        return "null"
    parts = []
    for i, value in enumerate(values):
        if i > 0:
            parts.append(",")
            # spacer between tuples
            if group_size > 0 and i % group_size == 0:
                parts.append("  ")
        parts.append(str(value))
    return "".join(parts)


def format_elem_info(elem_info: Optional[Sequence[int]]) -> str:
    if elem_info is None:
        return "null"
    return format_grouped([int(v) for v in elem_info], 3)
