"""Ambient primitives shared by every patternlab module: errors, logging, settings."""

from patternlab.core.errors import (
    ConfigError,
    DataFileError,
    EngineError,
    ErrorCategory,
    ErrorContext,
    PatternError,
    PatternLabError,
    PatternNotFoundError,
    RenderError,
)
from patternlab.core.logging import LogContext, configure_logging, get_logger
from patternlab.core.settings import PatternLabSettings, get_settings

__all__ = [
    "ConfigError",
    "DataFileError",
    "EngineError",
    "ErrorCategory",
    "ErrorContext",
    "PatternError",
    "PatternLabError",
    "PatternNotFoundError",
    "RenderError",
    "LogContext",
    "configure_logging",
    "get_logger",
    "PatternLabSettings",
    "get_settings",
]
