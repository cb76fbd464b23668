"""Shared error types for grid and puzzle validation."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import List

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced by a grid check."""

    code: str
    msg: str
    path: str
    severity: str


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating a grid or a puzzle."""

    ok: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    def codes(self) -> List[str]:
        return [issue.code for issue in self.errors + self.warnings]


class ManagedValidationError(ValueError):
    """Raised by ``assert_valid`` when a report contains errors."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct a warning-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_WARN)


__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
