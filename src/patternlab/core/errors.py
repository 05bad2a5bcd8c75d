"""
Structured error types for patternlab.

Provides a small hierarchy of typed errors carrying a category, structured
context and an optional chained cause, so that the CLI and the exporter can
report failures without losing where they came from.

Manifesto:
    - **Typed Error Hierarchy:** Config, data, pattern lookup and rendering
      failures are distinct types
    - **Rich Context:** Errors carry the pattern, file and setting involved
    - **Error Chaining:** The original exception is preserved as ``cause``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     PatternLabError                          │
        │              (category, context, cause)                      │
        ├─────────────────────────────────────────────────────────────┤
        │  ConfigError          DataFileError       PatternError       │
        │  (CONFIG)             (PARSE)             (PATTERN)          │
        │                                                │             │
        │                                       PatternNotFoundError   │
        │                                                              │
        │  EngineError          RenderError                            │
        │  (ENGINE)             (RENDER)                               │
        └─────────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Raise from discovery or aggregation for a single bad file
    ✅ DO: Log and skip; only configuration failures are fatal

    ❌ DON'T: Swallow the original exception when wrapping
    ✅ DO: Pass it as cause=

Tags:
    error-handling, exception-hierarchy, error-context, patternlab

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    CONFIG = "CONFIG"
    PARSE = "PARSE"
    PATTERN = "PATTERN"
    ENGINE = "ENGINE"
    RENDER = "RENDER"
    STORAGE = "STORAGE"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Attributes:
        pattern: Partial of the pattern involved
        file_path: File being read or written
        setting: Name of the config setting involved
        engine: Name of the template engine
        metadata: Additional key-value pairs
    """

    pattern: str | None = None
    file_path: str | None = None
    setting: str | None = None
    engine: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["pattern", "file_path", "setting", "engine"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class PatternLabError(Exception):
    """
    Base exception for all patternlab errors.

    Subclasses set ``default_category`` to classify themselves.

    Examples:
        >>> error = PatternLabError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = RenderError("Template failed").with_context(pattern="atoms-button")
        >>> error.context.pattern
        'atoms-button'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PatternLabError:
        """
        Add context to this error (fluent API).

        Usage:
            raise RenderError("Failed").with_context(pattern="atoms-button")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(PatternLabError):
    """
    Configuration error.

    Raised when the config file cannot be created or read. There is no
    sensible default to fall back on, so this propagates.
    """

    default_category = ErrorCategory.CONFIG


# =============================================================================
# DATA ERRORS
# =============================================================================


class DataFileError(PatternLabError):
    """A data file could not be read or is not a mapping."""

    default_category = ErrorCategory.PARSE


# =============================================================================
# PATTERN / ENGINE / RENDER ERRORS
# =============================================================================


class PatternError(PatternLabError):
    """Pattern-related error."""

    default_category = ErrorCategory.PATTERN


class PatternNotFoundError(PatternError):
    """No pattern matches a lookup term."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Pattern not found: {term}")
        self.context.pattern = term


class EngineError(PatternLabError):
    """No usable template engine is available."""

    default_category = ErrorCategory.ENGINE


class RenderError(PatternLabError):
    """A template engine failed to render a pattern."""

    default_category = ErrorCategory.RENDER


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PatternLabError",
    "ConfigError",
    "DataFileError",
    "PatternError",
    "PatternNotFoundError",
    "EngineError",
    "RenderError",
]
