"""Named extension points for advanced deduction rules.

Each rule takes a :class:`PropagationSolver` and returns the number of cells
it committed.  None of them deduces anything yet, so enabling one leaves the
generator's output unchanged.
"""

from __future__ import annotations

from .fish import x_wing
from .interactions import block_block_interaction, line_block_interaction
from .subsets import hidden_subset, naked_subset

__all__ = [
    "block_block_interaction",
    "hidden_subset",
    "line_block_interaction",
    "naked_subset",
    "x_wing",
]
