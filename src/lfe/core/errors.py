"""
Structured error types for lfe.

Every fatal condition the explorer can hit is an ``LfeError`` subclass that
carries a category, a message, optional context metadata, and an optional
chained cause. Data-quality problems (duplicate names, dangling
dependencies) are NOT errors: they are recorded by
:mod:`lfe.core.diagnostics` and processing continues.

Manifesto:
    - **Typed hierarchy:** One class per failure class, so the CLI can
      decide how to report it without string matching
    - **Fail early:** Configuration and usage errors abort before any
      search runs
    - **Rich context:** Errors carry the path, query or feature involved
    - **Error chaining:** The underlying OS or regex error is preserved

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                         LfeError                            │
        │             (category, context, cause)                      │
        ├─────────────────────────────────────────────────────────────┤
        │  ConfigError         QuerySyntaxError      ManifestError    │
        │  (CONFIG)            (USAGE)               (PARSE)          │
        │      │                                         │            │
        │  InstallRootError                  FeatureManifestError     │
        │                                    ManifestParseError       │
        │                                                             │
        │  InvariantViolation (INTERNAL) - programmer error           │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = InstallRootError("/opt/wlp/lib/features")
    >>> error.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> error.context.path
    '/opt/wlp/lib/features'

Tags:
    error-handling, exception-hierarchy, error-context, lfe

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories used for reporting."""

    CONFIG = "CONFIG"
    USAGE = "USAGE"
    PARSE = "PARSE"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        path: Filesystem path involved (manifest file, install root)
        query: Raw query text involved
        feature: Full name of the feature involved
        metadata: Additional key-value pairs
    """

    path: str | None = None
    query: str | None = None
    feature: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["path", "query", "feature"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class LfeError(Exception):
    """
    Base exception for all lfe errors.

    Subclasses set ``default_category``; the CLI reports any ``LfeError``
    as ``ERROR: <message>`` and exits non-zero.

    Examples:
        >>> error = LfeError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(feature="com.ibm.websphere.appserver.cdi-2.0").context.feature
        'com.ibm.websphere.appserver.cdi-2.0'
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

    def with_context(self, **kwargs: Any) -> LfeError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ManifestParseError("bad value").with_context(
                path="lib/features/cdi-2.0.mf"
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key):
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


class ConfigError(LfeError):
    """
    Configuration error.

    The install location or settings are unusable; nothing can be queried.
    """

    default_category = ErrorCategory.CONFIG


class InstallRootError(ConfigError):
    """The install root or its feature subdirectory does not exist."""

    def __init__(self, path: str, message: str | None = None):
        super().__init__(
            message or f"No feature subdirectory found: {path}",
            context=ErrorContext(path=path),
        )


# =============================================================================
# USAGE ERRORS
# =============================================================================


class QuerySyntaxError(LfeError):
    """A query segment could not be compiled into a pattern."""

    default_category = ErrorCategory.USAGE

    def __init__(self, query: str, message: str | None = None, cause: Exception | None = None):
        super().__init__(
            message or f"Invalid query: {query!r}",
            context=ErrorContext(query=query),
            cause=cause,
        )


# =============================================================================
# MANIFEST ERRORS
# =============================================================================


class ManifestError(LfeError):
    """A feature manifest could not be turned into a feature record."""

    default_category = ErrorCategory.PARSE


class FeatureManifestError(ManifestError):
    """The manifest declares no symbolic name."""


class ManifestParseError(ManifestError):
    """A manifest file could not be read or split into headers and values."""


# =============================================================================
# INTERNAL ERRORS
# =============================================================================


class InvariantViolation(LfeError):
    """
    An internal invariant was broken.

    Raised for lookups of dense ids that were never assigned. Not reachable
    through any documented input.
    """

    default_category = ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "LfeError",
    "ConfigError",
    "InstallRootError",
    "QuerySyntaxError",
    "ManifestError",
    "FeatureManifestError",
    "ManifestParseError",
    "InvariantViolation",
]
