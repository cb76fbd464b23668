"""Grid helpers: a 9x9 Sudoku board as nested lists of ints (0 = empty)."""

from __future__ import annotations

from typing import Iterator, List, Tuple

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
EMPTY = 0

Grid = List[List[int]]
Cell = Tuple[int, int]


def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def grid_copy(grid: Grid) -> Grid:
    """Deep copy of the nested rows; cell values are immutable ints."""
    return [list(row) for row in grid]


def unpack_index(index: int) -> Cell:
    """Map a linear cell index 0..80 to ``(row, col)``.

    The first coordinate advances fastest: ``1 -> (1, 0)``, ``9 -> (0, 1)``.
    """
    return index % SIZE, index // SIZE


def pack_index(row: int, col: int) -> int:
    return col * SIZE + row


def box_origin(row: int, col: int) -> Cell:
    return row - row % BOX, col - col % BOX


def row_cells(row: int) -> List[Cell]:
    return [(row, c) for c in range(SIZE)]


def col_cells(col: int) -> List[Cell]:
    return [(r, col) for r in range(SIZE)]


def box_cells(box: int) -> List[Cell]:
    """Cells of block ``box`` (0..8, numbered left to right, top to bottom)."""
    r0, c0 = (box // BOX) * BOX, (box % BOX) * BOX
    return [(r, c) for r in range(r0, r0 + BOX) for c in range(c0, c0 + BOX)]


def iter_units() -> Iterator[Tuple[str, int, List[Cell]]]:
    """Yield ``(kind, number, cells)`` for all 27 units."""
    for i in range(SIZE):
        yield "row", i, row_cells(i)
    for i in range(SIZE):
        yield "column", i, col_cells(i)
    for i in range(SIZE):
        yield "block", i, box_cells(i)


def count_clues(g: Grid) -> int:
    return sum(1 for r in range(SIZE) for c in range(SIZE) if g[r][c] != EMPTY)


def is_complete_valid(g: Grid) -> bool:
    need = list(range(1, SIZE + 1))
    return all(sorted(g[r][c] for r, c in cells) == need for _, _, cells in iter_units())


def to_string(grid: Grid) -> str:
    """Row-major string of 81 digits, '0' for an empty cell."""
    return "".join(str(value) for row in grid for value in row)


def from_string(text: str) -> Grid:
    """Parse 81 cell characters in row-major order, ignoring whitespace.

    Digits 1..9 are clues; any other character ('0', '.') is an empty cell.
    """
    cells = "".join(ch for ch in text if not ch.isspace())
    if len(cells) != CELLS:
        raise ValueError(f"expected {CELLS} cells, got {len(cells)}")
    values = [int(ch) if ch in "123456789" else EMPTY for ch in cells]
    return [values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


__all__ = [
    "BOX",
    "CELLS",
    "EMPTY",
    "SIZE",
    "Cell",
    "Grid",
    "box_cells",
    "box_origin",
    "col_cells",
    "count_clues",
    "empty_grid",
    "from_string",
    "grid_copy",
    "is_complete_valid",
    "iter_units",
    "pack_index",
    "row_cells",
    "to_string",
    "unpack_index",
]
