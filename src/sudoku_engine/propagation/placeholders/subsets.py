"""Placeholder for naked/hidden subset techniques."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..solver import PropagationSolver


def naked_subset(solver: "PropagationSolver") -> int:
    """n cells of a unit sharing exactly the same n candidates lock those
    digits out of the rest of the unit."""

    return 0


def hidden_subset(solver: "PropagationSolver") -> int:
    """n digits confined to the same n cells of a unit rule out every other
    candidate of those cells.  Subsumes unique_candidate but not
    naked_subset."""

    return 0


__all__ = ["hidden_subset", "naked_subset"]
