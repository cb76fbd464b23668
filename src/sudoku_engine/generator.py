"""Hole-digging puzzle generator.

A random complete grid is built first; then cells are erased one by one in
random order.  An erasure is kept only while the propagation solver, limited
to its configured rules, can still deduce every erased cell.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from project_config import get_section

from .backtracking import full_board
from .grid import CELLS, EMPTY, Grid, count_clues, grid_copy, unpack_index
from .propagation import DEFAULT_RULES, PropagationSolver, StepRunner, resolve_rules

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DigResult:
    puzzle: Grid
    erased: int
    rejected: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class GenerationResult:
    """A puzzle together with the grid it was dug from."""

    puzzle: Grid
    solution: Grid
    erased: int
    rules: Tuple[str, ...]

    @property
    def hints(self) -> int:
        return CELLS - self.erased


def configured_rules() -> Tuple[str, ...]:
    rules = get_section("generator.rules", list(DEFAULT_RULES))
    return resolve_rules([str(name) for name in rules])


def erase_order(rng: Optional[random.Random] = None) -> List[int]:
    """Uniformly random permutation of the 81 cell indices."""
    order = list(range(CELLS))
    (rng if rng is not None else random).shuffle(order)
    return order


def deducible_count(grid: Grid, runner: StepRunner) -> int:
    """Number of empty cells a fresh propagation solver fills in ``grid``."""
    return runner.run_to_fixed_point(PropagationSolver(grid)).committed


def dig_holes(
    solution: Grid,
    rng: Optional[random.Random] = None,
    rules: Optional[Sequence[str]] = None,
) -> DigResult:
    """Erase as many cells of ``solution`` as the oracle can recover."""
    runner = StepRunner(rules if rules is not None else configured_rules())
    puzzle = grid_copy(solution)
    erased = 0
    rejected: List[int] = []
    for index in erase_order(rng):
        r, c = unpack_index(index)
        original = puzzle[r][c]
        erased += 1
        puzzle[r][c] = EMPTY
        deduced = deducible_count(puzzle, runner)
        if deduced != erased:
            _LOGGER.debug("cell %d restored: deduced %d of %d", index, deduced, erased)
            erased -= 1
            puzzle[r][c] = original
            rejected.append(index)
        else:
            _LOGGER.debug("cell %d erased (%d holes)", index, erased)
    assert count_clues(puzzle) == CELLS - erased
    return DigResult(puzzle=puzzle, erased=erased, rejected=rejected)


def generate(
    rng: Optional[random.Random] = None,
    rules: Optional[Sequence[str]] = None,
) -> GenerationResult:
    """Build a random full grid and dig a puzzle out of it."""
    resolved = resolve_rules(rules) if rules is not None else configured_rules()
    solution = full_board(rng)
    dug = dig_holes(solution, rng, resolved)
    _LOGGER.info("generated puzzle with %d hints", CELLS - dug.erased)
    return GenerationResult(puzzle=dug.puzzle, solution=solution, erased=dug.erased, rules=resolved)


__all__ = [
    "DigResult",
    "GenerationResult",
    "configured_rules",
    "deducible_count",
    "dig_holes",
    "erase_order",
    "generate",
]
