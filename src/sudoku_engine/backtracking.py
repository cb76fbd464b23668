"""Exact depth-first solver with forward checking.

Cells are visited in linear index order (see :func:`grid.unpack_index`).
The order in which digits are tried at each cell comes from an injected
ordering strategy, so the same search produces either the lexicographically
first completion or a random one.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from .candidates import CandidateTracker
from .grid import CELLS, EMPTY, SIZE, Grid, empty_grid, unpack_index

_LOGGER = logging.getLogger(__name__)

# Returns a permutation of the 0-based digit indices 0..8.
Ordering = Callable[[], List[int]]


def identity_ordering() -> List[int]:
    return list(range(SIZE))


def randomized_ordering(rng: Optional[random.Random] = None) -> Ordering:
    """Build an ordering that shuffles the digits anew on every call.

    Without ``rng`` the process-global :mod:`random` generator is used.
    """
    source = rng if rng is not None else random

    def ordering() -> List[int]:
        order = list(range(SIZE))
        source.shuffle(order)
        return order

    return ordering


def _search(grid: Grid, p: CandidateTracker, ordering: Ordering, index: int) -> bool:
    if index == CELLS:
        return True
    r, c = unpack_index(index)
    orig = grid[r][c]
    if orig != EMPTY:
        return _search(grid, p, ordering, index + 1)
    if index == CELLS - 1:
        # everything before is consistent, so any surviving candidate completes the grid
        for i in ordering():
            if p.field[r][c] & (1 << i):
                grid[r][c] = i + 1
                return True
        return False
    for i in ordering():
        if p.field[r][c] & (1 << i):
            branch = p.clone()
            grid[r][c] = i + 1
            branch.eliminate_peers(i + 1, r, c)
            if _search(grid, branch, ordering, index + 1):
                return True
    grid[r][c] = orig
    return False


def solve(grid: Grid, ordering: Ordering) -> bool:
    """Fill ``grid`` in place; on failure the grid is left untouched."""
    p = CandidateTracker.from_grid(grid)
    solved = _search(grid, p, ordering, 0)
    _LOGGER.debug("backtracking search %s", "solved" if solved else "exhausted")
    return solved


def solve_ordered(grid: Grid) -> bool:
    return solve(grid, identity_ordering)


def solve_randomized(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    return solve(grid, randomized_ordering(rng))


def full_board(rng: Optional[random.Random] = None) -> Grid:
    """Return a complete random valid grid."""
    grid = empty_grid()
    if not solve_randomized(grid, rng):  # pragma: no cover - an empty grid always has a completion
        raise RuntimeError("backtracking failed to complete an empty grid")
    return grid


__all__ = [
    "Ordering",
    "full_board",
    "identity_ordering",
    "randomized_ordering",
    "solve",
    "solve_ordered",
    "solve_randomized",
]
