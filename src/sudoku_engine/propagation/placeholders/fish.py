"""Placeholder for fish patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..solver import PropagationSolver


def x_wing(solver: "PropagationSolver") -> int:
    """Four cells on a rectangle spanning at least two blocks holding one
    digit in alternating fashion.

    TODO: implement X-Wing and decide whether the generator should accept
    puzzles that need it.
    """

    return 0


__all__ = ["x_wing"]
