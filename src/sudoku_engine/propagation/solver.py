"""Non-branching deduction over a private copy of a grid."""

from __future__ import annotations

from typing import List

from ..candidates import CandidateTracker
from ..grid import EMPTY, SIZE, Cell, Grid, grid_copy, iter_units
from . import placeholders

# position markers for the per-unit digit scan
_NOT_SEEN = -1
_SEEN_MORE = -2


class PropagationSolver:
    """Human-like solver that only commits forced values.

    The solver never guesses.  Every pass returns the number of cells it
    filled, which lets callers drive the passes to a fixed point and compare
    the total with the number of holes in the grid.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid_copy(grid)
        self.tracker = CandidateTracker()
        for r in range(SIZE):
            for c in range(SIZE):
                self.tracker.pin(self.grid[r][c], r, c)
        self.tracker.apply(self.grid)

    def empty_cells(self) -> List[Cell]:
        return [(r, c) for r in range(SIZE) for c in range(SIZE) if self.grid[r][c] == EMPTY]

    def is_solved(self) -> bool:
        return not self.empty_cells()

    def _commit(self, value: int, row: int, col: int) -> None:
        self.tracker.pin(value, row, col)
        self.grid[row][col] = value

    def sole_candidate(self) -> int:
        """If only a single candidate is left for a cell, take it."""
        self.tracker.apply(self.grid)
        found = 0
        for r in range(SIZE):
            for c in range(SIZE):
                if self.grid[r][c] != EMPTY:
                    continue
                value = self.tracker.unique_value(r, c)
                if value != EMPTY:
                    self._commit(value, r, c)
                    found += 1
        return found

    def unique_candidate(self) -> int:
        """For every unit, place a digit that fits in exactly one of its cells.

        That cell may have other candidates too.  The tracker is not refreshed
        here; :meth:`sole_candidate` does that at the start of every round.
        """
        found = 0
        field = self.tracker.field
        for _, _, cells in iter_units():
            positions = [_NOT_SEEN] * SIZE
            for k, (r, c) in enumerate(cells):
                mask = field[r][c]
                for i in range(SIZE):
                    if mask & (1 << i):
                        positions[i] = k if positions[i] == _NOT_SEEN else _SEEN_MORE
            for i, k in enumerate(positions):
                if k < 0:
                    continue
                r, c = cells[k]
                if self.grid[r][c] == EMPTY:
                    self._commit(i + 1, r, c)
                    found += 1
        return found

    def line_block_interaction(self) -> int:
        return placeholders.line_block_interaction(self)

    def block_block_interaction(self) -> int:
        return placeholders.block_block_interaction(self)

    def naked_subset(self) -> int:
        return placeholders.naked_subset(self)

    def hidden_subset(self) -> int:
        return placeholders.hidden_subset(self)

    def x_wing(self) -> int:
        return placeholders.x_wing(self)


__all__ = ["PropagationSolver"]
