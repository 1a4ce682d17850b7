"""
Data-quality diagnostics.

Duplicate names, dangling dependencies and repeated qualifier keys do not
stop a query. They are recorded here and logged as warnings, and the caller
decides whether anything else should happen.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from lfe.core.logging import get_logger

logger = get_logger(__name__)


class Severity(str, Enum):
    """Severity level for a diagnostic."""

    WARNING = "warning"


class DiagnosticCode(str, Enum):
    """Known data-quality findings."""

    DUPLICATE_SYMBOLIC_NAME = "duplicate-symbolic-name"
    DUPLICATE_SHORT_NAME = "duplicate-short-name"
    MISSING_DEPENDENCY = "missing-dependency"
    DUPLICATE_QUALIFIER = "duplicate-qualifier"


@dataclass(frozen=True)
class Diagnostic:
    """A single data-quality finding.

    Attributes:
        code: What kind of finding this is.
        message: Human-readable description.
        subject: The name or value the finding is about.
        severity: Always ``warning`` for the findings above.
    """

    code: DiagnosticCode
    message: str
    subject: str
    severity: Severity = Severity.WARNING

    def __str__(self) -> str:
        return f"{self.severity.value.upper()}: {self.message}"


class Diagnostics:
    """Collects diagnostics and forwards each one to the log.

    Nothing here raises: recording a finding never changes what gets loaded
    or searched.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def warn(self, code: DiagnosticCode, message: str, subject: str) -> Diagnostic:
        diagnostic = Diagnostic(code=code, message=message, subject=subject)
        self._items.append(diagnostic)
        logger.warning(code.value, message=message, subject=subject)
        return diagnostic

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        return [d for d in self._items if d.code is code]

    @property
    def items(self) -> tuple[Diagnostic, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


__all__ = ["Severity", "DiagnosticCode", "Diagnostic", "Diagnostics"]
