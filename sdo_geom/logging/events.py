"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging of the SDO geometry codec.

Event Naming Convention:
    <component>.<category>.<action>

    component: elem_info, geometry, classify, config, inspect, error

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.elem_info_len
    | filter event = "elem_info.malformed"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - elem_info.*: SDO_ELEM_INFO directory decoding
    - geometry.*: Container (de)serialization
    - classify.*: Geometry kind classification
    - config.*: Configuration loading
    - inspect.*: CLI inspection
    - error.*: Error conditions
    """

    # ========== Element Directory Events ==========
    ELEM_INFO_MALFORMED = "elem_info.malformed"
    """Directory length is not a multiple of 3; trailing entries unreachable."""

    # ========== Geometry Events ==========
    GEOMETRY_DESERIALIZED = "geometry.deserialized"
    """SdoGeometry rebuilt from a four-field record."""

    # ========== Classification Events ==========
    CLASSIFY_UNKNOWN = "classify.unknown"
    """Object is not a recognised geometry; classified as UNKNOWN_GEOMETRY."""

    # ========== Config / CLI Events ==========
    CONFIG_LOADED = "config.loaded"
    """CodecConfig loaded from YAML."""

    INSPECT_RENDERED = "inspect.rendered"
    """Geometry record rendered by sdo-inspect."""

    # ========== Error Events ==========
    ELEM_INFO_REJECTED = "error.elem_info"
    """Malformed directory rejected in strict mode."""

    DESERIALIZATION_ERROR = "error.deserialization"
    """Failed to rebuild SdoGeometry from a record."""

