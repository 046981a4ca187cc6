"""
Configuration schema for the SDO geometry codec.

Controls how element directories are decoded, which SRID is assumed when
a record omits one, and the log level of the codec's structured loggers.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union
import yaml

from .codes import SRID_NULL
from .logging import create_logger, LogEvent

logger = create_logger("config")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class CodecConfig:
    """
    Codec settings. Immutable after construction (frozen dataclass).

    Attributes:
        strict_elem_info: Reject element directories whose length is not a
            multiple of 3 instead of ignoring the partial trailing triplet
        default_srid: SRID used when a record has none (-1 = null SRID)
        log_level: Level name for the codec loggers
    """

    strict_elem_info: bool = False
    default_srid: int = SRID_NULL
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate codec configuration."""
        if not isinstance(self.strict_elem_info, bool):
            raise TypeError(
                f"strict_elem_info must be a bool, got {type(self.strict_elem_info).__name__}"
            )

        if isinstance(self.default_srid, bool) or not isinstance(self.default_srid, int):
            raise TypeError(
                f"default_srid must be an int, got {type(self.default_srid).__name__}"
            )
        if self.default_srid < SRID_NULL:
            raise ValueError(
                f"default_srid must be >= {SRID_NULL}, got {self.default_srid}"
            )

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CodecConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            strict_elem_info: false
            default_srid: 4326
            log_level: "WARNING"

        Missing keys take their defaults; an empty file yields the defaults.
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {yaml_path} must contain a mapping, got {type(data).__name__}"
            )

        config = cls(
            strict_elem_info=data.get("strict_elem_info", False),
            default_srid=data.get("default_srid", SRID_NULL),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded codec config",
            metadata={'path': str(yaml_path), 'strict_elem_info': config.strict_elem_info},
        )
        return config
