"""
Core primitives shared by every lfe layer: errors, logging, diagnostics
and settings.
"""

from lfe.core.diagnostics import Diagnostic, DiagnosticCode, Diagnostics, Severity
from lfe.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    FeatureManifestError,
    InstallRootError,
    InvariantViolation,
    LfeError,
    ManifestError,
    ManifestParseError,
    QuerySyntaxError,
)
from lfe.core.logging import configure_logging, get_logger
from lfe.core.settings import LfeSettings, clear_settings_cache, get_settings

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Diagnostics",
    "Severity",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "FeatureManifestError",
    "InstallRootError",
    "InvariantViolation",
    "LfeError",
    "ManifestError",
    "ManifestParseError",
    "QuerySyntaxError",
    "configure_logging",
    "get_logger",
    "LfeSettings",
    "clear_settings_cache",
    "get_settings",
]
