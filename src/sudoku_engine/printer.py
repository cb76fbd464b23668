"""Plain-text rendering of a grid."""

from __future__ import annotations

from .grid import BOX, EMPTY, SIZE, Grid

RULE = "-" * 25


def render(g: Grid) -> str:
    """Render ``g`` with dashed rules between bands and ``|`` between stacks.

    Empty cells print as blanks, so a puzzle and its solution line up.
    """
    lines = []
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append(RULE)
        parts = []
        for c in range(SIZE):
            if c % BOX == 0:
                parts.append("| ")
            v = g[r][c]
            parts.append("  " if v == EMPTY else f"{v} ")
        parts.append("|")
        lines.append("".join(parts))
    lines.append(RULE)
    return "\n".join(lines)


__all__ = ["RULE", "render"]
