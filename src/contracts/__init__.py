"""Validation of Sudoku grids and dug puzzles."""

from __future__ import annotations

from .errors import ManagedValidationError, ValidationIssue, ValidationReport
from .validator import assert_valid, validate_grid, validate_puzzle

__all__ = [
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid",
    "validate_grid",
    "validate_puzzle",
]
