"""Exceptions raised by sdo_geom."""


class SdoGeometryError(Exception):
    """Base class for sdo_geom errors."""
    pass


class MalformedElemInfoError(SdoGeometryError, ValueError):
    """Raised in strict mode when an element directory is not made of whole triplets."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"SDO_ELEM_INFO length must be a multiple of 3, got {length}"
        )
