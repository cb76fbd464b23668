"""Validation of grids and dug puzzles."""

from __future__ import annotations

from collections import Counter
from typing import Any, List, Optional

from sudoku_engine.grid import EMPTY, SIZE, count_clues, iter_units

from .errors import ManagedValidationError, ValidationIssue, ValidationReport, make_error, make_warning

# smallest clue count known to admit a unique solution
MIN_UNIQUE_CLUES = 17


def _shape_checks(grid: Any, name: str) -> List[ValidationIssue]:
    if not isinstance(grid, list) or len(grid) != SIZE:
        return [make_error("grid.shape", f"{name} must be a list of {SIZE} rows", f"$.{name}")]
    issues: List[ValidationIssue] = []
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != SIZE:
            issues.append(make_error("grid.shape", f"row {r} must hold {SIZE} cells", f"$.{name}[{r}]"))
            continue
        for c, value in enumerate(row):
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= SIZE:
                issues.append(
                    make_error("grid.value_range", f"cell value {value!r} is not a digit 0..9", f"$.{name}[{r}][{c}]")
                )
    return issues


def _unit_checks(grid: List[List[int]], name: str, complete: bool) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for kind, number, cells in iter_units():
        counts = Counter(grid[r][c] for r, c in cells if grid[r][c] != EMPTY)
        for digit, seen in sorted(counts.items()):
            if seen > 1:
                issues.append(
                    make_error(
                        "unit.duplicate",
                        f"digit {digit} appears {seen} times in {kind} {number}",
                        f"$.{name}.{kind}[{number}]",
                    )
                )
    if complete:
        empties = SIZE * SIZE - count_clues(grid)
        if empties:
            issues.append(make_error("grid.incomplete", f"{empties} empty cells in a complete grid", f"$.{name}"))
    return issues


def validate_grid(grid: Any, *, complete: bool = False, name: str = "grid") -> ValidationReport:
    """Check shape, digit range and unit uniqueness of ``grid``."""

    errors = _shape_checks(grid, name)
    if not errors:
        errors = _unit_checks(grid, name, complete)
    return ValidationReport(ok=not errors, errors=errors, warnings=[])


def validate_puzzle(puzzle: Any, solution: Any) -> ValidationReport:
    """Check that ``solution`` is a valid full grid and ``puzzle`` a subset of it."""

    solution_report = validate_grid(solution, complete=True, name="solution")
    puzzle_report = validate_grid(puzzle, name="puzzle")
    errors = solution_report.errors + puzzle_report.errors
    warnings: List[ValidationIssue] = []
    if errors:
        return ValidationReport(ok=False, errors=errors, warnings=warnings)

    for r in range(SIZE):
        for c in range(SIZE):
            clue = puzzle[r][c]
            if clue != EMPTY and clue != solution[r][c]:
                errors.append(
                    make_error(
                        "puzzle.clue_mismatch",
                        f"clue {clue} disagrees with solution digit {solution[r][c]}",
                        f"$.puzzle[{r}][{c}]",
                    )
                )
    hints = count_clues(puzzle)
    if hints < MIN_UNIQUE_CLUES:
        warnings.append(
            make_warning("puzzle.below_minimum", f"{hints} hints is below {MIN_UNIQUE_CLUES}", "$.puzzle")
        )
    return ValidationReport(ok=not errors, errors=errors, warnings=warnings)


def assert_valid(puzzle: Any, solution: Optional[Any] = None, *, warn_as_error: bool = False) -> None:
    """Raise :class:`ManagedValidationError` unless the grid (or puzzle) passes."""

    if solution is None:
        report = validate_grid(puzzle, complete=False)
        subject = "grid"
    else:
        report = validate_puzzle(puzzle, solution)
        subject = "puzzle"
    if report.ok and not (warn_as_error and report.warnings):
        return
    issues = report.errors[:]
    if warn_as_error:
        issues.extend(report.warnings)
    codes = ", ".join(issue.code for issue in issues[:5])
    if len(issues) > 5:
        codes += ", …"
    raise ManagedValidationError(f"Validation failed for {subject}: {codes}", report)


__all__ = [
    "MIN_UNIQUE_CLUES",
    "ManagedValidationError",
    "assert_valid",
    "validate_grid",
    "validate_puzzle",
]
