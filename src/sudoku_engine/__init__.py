"""Random 9x9 Sudoku grids and puzzles recoverable by naked/hidden singles."""

from __future__ import annotations

from .backtracking import full_board, solve, solve_ordered, solve_randomized
from .candidates import CandidateTracker
from .generator import GenerationResult, dig_holes, generate
from .grid import Grid, empty_grid, from_string, grid_copy, to_string, unpack_index
from .printer import render
from .propagation import PropagationSolver, StepRunner

__all__ = [
    "CandidateTracker",
    "GenerationResult",
    "Grid",
    "PropagationSolver",
    "StepRunner",
    "dig_holes",
    "empty_grid",
    "from_string",
    "full_board",
    "generate",
    "grid_copy",
    "render",
    "solve",
    "solve_ordered",
    "solve_randomized",
    "to_string",
    "unpack_index",
]
