"""
Structured Logging for sdo_geom
===============================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from sdo_geom.logging import create_logger, LogEvent
    >>> logger = create_logger("geometry")
    >>> logger.info(
    ...     event=LogEvent.GEOMETRY_DESERIALIZED,
    ...     message="Rebuilt geometry",
    ...     metadata={'gtype': 2003}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
