"""Per-cell candidate tracking derived from a grid by elimination."""

from __future__ import annotations

from typing import List

from .grid import BOX, EMPTY, SIZE, Grid

# bit d-1 set -> digit d is still possible
FULL = (1 << SIZE) - 1

UNIT_KINDS = ("row", "column", "block")


def _bit(value: int) -> int:
    assert 0 < value <= SIZE, f"digit out of range: {value!r}"
    return 1 << (value - 1)


class CandidateTracker:
    """Candidate masks for all 81 cells.

    A fresh tracker allows every digit everywhere.  Eliminations only ever
    clear bits, so applying the same elimination twice is a no-op; ``pin`` is
    the one operation that overwrites a cell outright.
    """

    __slots__ = ("field",)

    def __init__(self, field: List[List[int]] | None = None) -> None:
        if field is None:
            field = [[FULL] * SIZE for _ in range(SIZE)]
        self.field = field

    def clone(self) -> "CandidateTracker":
        return CandidateTracker([row[:] for row in self.field])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateTracker):
            return NotImplemented
        return self.field == other.field

    def __repr__(self) -> str:
        return f"CandidateTracker(open={sum(1 for row in self.field for m in row if m)})"

    # Queries ----------------------------------------------------------

    def has(self, row: int, col: int, value: int) -> bool:
        return bool(self.field[row][col] & _bit(value))

    def candidates(self, row: int, col: int) -> List[int]:
        mask = self.field[row][col]
        return [d for d in range(1, SIZE + 1) if mask & (1 << (d - 1))]

    def count(self, row: int, col: int) -> int:
        return bin(self.field[row][col]).count("1")

    def unique_value(self, row: int, col: int) -> int:
        """Return the only remaining candidate of the cell, or 0 if there is not exactly one."""
        mask = self.field[row][col]
        found = EMPTY
        for i in range(SIZE):
            if mask & (1 << i):
                if found:
                    return EMPTY
                found = i + 1
        return found

    # Mutations --------------------------------------------------------

    def pin(self, value: int, row: int, col: int) -> None:
        """Collapse the cell to the single candidate ``value`` (0 is ignored)."""
        assert 0 <= value <= SIZE, f"digit out of range: {value!r}"
        if value != EMPTY:
            self.field[row][col] = _bit(value)

    def eliminate_unit(self, value: int, row: int, col: int, kind: str) -> None:
        """Clear ``value`` from all nine cells of the ``kind`` unit through (row, col).

        The cell itself is cleared too; a filled cell needs no candidates.
        """
        if kind not in UNIT_KINDS:
            raise ValueError(f"Unsupported unit kind: {kind!r}")
        assert 0 <= value <= SIZE, f"digit out of range: {value!r}"
        if value == EMPTY:
            return
        keep = ~_bit(value)
        field = self.field
        if kind == "row":
            line = field[row]
            for c in range(SIZE):
                line[c] &= keep
        elif kind == "column":
            for r in range(SIZE):
                field[r][col] &= keep
        else:
            r0, c0 = row - row % BOX, col - col % BOX
            for r in range(r0, r0 + BOX):
                for c in range(c0, c0 + BOX):
                    field[r][c] &= keep

    def eliminate_lines(self, value: int, row: int, col: int) -> None:
        self.eliminate_unit(value, row, col, "row")
        self.eliminate_unit(value, row, col, "column")

    def eliminate_block(self, value: int, row: int, col: int) -> None:
        self.eliminate_unit(value, row, col, "block")

    def eliminate_peers(self, value: int, row: int, col: int) -> None:
        self.eliminate_lines(value, row, col)
        self.eliminate_block(value, row, col)

    def apply(self, grid: Grid) -> None:
        """Eliminate every filled cell's value from its row, column and block."""
        for r in range(SIZE):
            for c in range(SIZE):
                value = grid[r][c]
                if value != EMPTY:
                    self.eliminate_peers(value, r, c)

    @classmethod
    def from_grid(cls, grid: Grid) -> "CandidateTracker":
        tracker = cls()
        tracker.apply(grid)
        return tracker


__all__ = ["FULL", "UNIT_KINDS", "CandidateTracker"]
