"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

JSON structured logger for the codec. Every entry carries the component,
a typed LogEvent and optional metadata.

Example:
    >>> logger = StructuredLogger(component="geometry")
    >>> logger.warning(
    ...     event=LogEvent.ELEM_INFO_MALFORMED,
    ...     message="Element directory length is not a multiple of 3",
    ...     metadata={'elem_info_len': 7}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "WARNING",
        "component": "geometry",
        "event": "elem_info.malformed",
        "message": "Element directory length is not a multiple of 3",
        "metadata": {"elem_info_len": 7}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "geometry", "classify")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "geometry")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: sdo_geom.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"sdo_geom.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        # Configure JSON formatter if not already configured
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level (INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception for ERROR logs
        """
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        log_level = getattr(logging, level)
        self.logger.log(
            log_level,
            json.dumps(log_entry),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log INFO level message."""
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback

        Example:
            >>> try:
            ...     SdoGeometry.from_dict(record)
            ... except (KeyError, ValueError) as e:
            ...     logger.error(
            ...         event=LogEvent.DESERIALIZATION_ERROR,
            ...         message="Failed to rebuild geometry",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter used internally by StructuredLogger.

    The message built by StructuredLogger is already JSON, so it is
    passed through untouched.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO)

    Returns:
        Configured StructuredLogger instance
    """
    return StructuredLogger(component=component, level=level)
