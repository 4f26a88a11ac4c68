"""Shared utilities for the configuration markup reader.

This module provides configuration objects, result types, the error hierarchy
and logging helpers used across all layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ReaderConfig,
    SettingsConfig,
)
from .errors import (
    MalformedAttributeError,
    MalformedTagError,
    NestingTooDeepError,
    StructuralMismatchError,
    UnterminatedDocumentError,
    UnterminatedValueError,
    XmlReadError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import LoadStatistics

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ReaderConfig",
    "SettingsConfig",
    "MalformedAttributeError",
    "MalformedTagError",
    "NestingTooDeepError",
    "StructuralMismatchError",
    "UnterminatedDocumentError",
    "UnterminatedValueError",
    "XmlReadError",
    "CorrelationLogger",
    "get_logger",
    "LoadStatistics",
]
