"""Placeholder for line/block interaction techniques."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..solver import PropagationSolver


def line_block_interaction(solver: "PropagationSolver") -> int:
    """If a digit inside a block is confined to one line, it cannot sit
    anywhere else on that line."""

    return 0


def block_block_interaction(solver: "PropagationSolver") -> int:
    """If a digit is ruled out of two blocks along a band, it has to be in
    the third block of that band."""

    return 0


__all__ = ["block_block_interaction", "line_block_interaction"]
