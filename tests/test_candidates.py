from __future__ import annotations

import pytest

from sudoku_engine.candidates import FULL, UNIT_KINDS, CandidateTracker
from sudoku_engine.grid import SIZE, box_origin, empty_grid


def _changed_cells(before: CandidateTracker, after: CandidateTracker) -> set:
    return {
        (r, c)
        for r in range(SIZE)
        for c in range(SIZE)
        if before.field[r][c] != after.field[r][c]
    }


def test_eliminate_block_clears_the_whole_block():
    p = CandidateTracker()
    p.eliminate_block(4, 1, 1)
    for r in range(SIZE):
        for c in range(SIZE):
            for d in range(1, 10):
                expected = not (d == 4 and box_origin(r, c) == (0, 0))
                assert p.has(r, c, d) is expected
    assert p.has(1, 1, 4) is False
    changed = _changed_cells(CandidateTracker(), p)
    assert changed == {(r, c) for r in range(3) for c in range(3)}


def test_eliminate_lines_clears_row_and_column_peers():
    p = CandidateTracker()
    p.eliminate_lines(7, 2, 5)
    changed = _changed_cells(CandidateTracker(), p)
    assert changed == {(2, c) for c in range(SIZE)} | {(r, 5) for r in range(SIZE)}
    assert len(changed) == 17
    assert all(p.field[r][c] == FULL & ~(1 << 6) for r, c in changed)
    assert not p.has(2, 5, 7)


def test_eliminate_unit_rejects_unknown_kind():
    with pytest.raises(ValueError):
        CandidateTracker().eliminate_unit(3, 0, 0, "diagonal")
    for kind in UNIT_KINDS:
        CandidateTracker().eliminate_unit(3, 0, 0, kind)


def test_eliminating_empty_value_is_a_no_op():
    p = CandidateTracker()
    p.eliminate_peers(0, 4, 4)
    p.pin(0, 4, 4)
    assert p == CandidateTracker()


def test_apply_clears_the_value_from_the_cell_and_its_twenty_peers():
    grid = empty_grid()
    grid[1][1] = 4
    p = CandidateTracker.from_grid(grid)
    assert len(_changed_cells(CandidateTracker(), p)) == 21
    assert not p.has(1, 1, 4)
    assert p.count(1, 1) == 8


def test_eliminations_are_idempotent(solved_grid):
    for r, c in [(0, 0), (3, 7), (8, 2)]:
        solved_grid[r][c] = 0
    once = CandidateTracker.from_grid(solved_grid)
    twice = once.clone()
    twice.apply(solved_grid)
    twice.eliminate_peers(5, 4, 4)
    twice.eliminate_peers(5, 4, 4)
    once.eliminate_peers(5, 4, 4)
    assert once == twice


def test_clone_is_independent():
    p = CandidateTracker()
    q = p.clone()
    q.eliminate_peers(9, 0, 0)
    assert p == CandidateTracker()
    assert q != p


def test_unique_value():
    p = CandidateTracker()
    assert p.unique_value(0, 0) == 0

    p.pin(6, 0, 0)
    assert p.unique_value(0, 0) == 6
    assert p.candidates(0, 0) == [6]

    p.field[0][1] = 0
    assert p.unique_value(0, 1) == 0

    p.field[0][2] = (1 << 0) | (1 << 8)
    assert p.unique_value(0, 2) == 0
    assert p.count(0, 2) == 2

    p.field[0][3] = 1 << 8
    assert p.unique_value(0, 3) == 9


def test_pin_overwrites_previous_eliminations():
    p = CandidateTracker()
    p.eliminate_peers(3, 0, 1)
    assert not p.has(0, 0, 3)
    p.pin(3, 0, 0)
    assert p.candidates(0, 0) == [3]


def test_out_of_range_digits_are_contract_violations():
    p = CandidateTracker()
    with pytest.raises(AssertionError):
        p.pin(10, 0, 0)
    with pytest.raises(AssertionError):
        p.eliminate_peers(-1, 0, 0)
    with pytest.raises(AssertionError):
        p.has(0, 0, 0)
