"""Execution scaffold for propagation rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from . import placeholders
from .solver import PropagationSolver

StepHandler = Callable[[PropagationSolver], int]

DEFAULT_RULES: Tuple[str, ...] = ("sole_candidate", "unique_candidate")
ADVANCED_RULES: Tuple[str, ...] = (
    "line_block_interaction",
    "block_block_interaction",
    "naked_subset",
    "hidden_subset",
    "x_wing",
)


@dataclass(frozen=True)
class StepTraceEntry:
    """Single record emitted for an executed rule."""

    round: int
    step_name: str
    committed: int


@dataclass(frozen=True)
class FixedPointResult:
    """Outcome of driving a rule list until a round commits nothing."""

    committed: int
    rounds: int
    per_rule: Dict[str, int]


@dataclass
class StepTraceRecorder:
    """In-memory trace accumulator respecting ``trace_level`` semantics."""

    trace_level: str = "none"
    entries: List[StepTraceEntry] = field(default_factory=list)

    def record(self, entry: StepTraceEntry) -> None:
        if self.trace_level == "none":
            return
        self.entries.append(entry)

    def snapshot(self) -> Tuple[StepTraceEntry, ...]:
        return tuple(self.entries)

    def reset(self) -> None:
        self.entries.clear()


_STEP_REGISTRY: Dict[str, StepHandler] = {
    "sole_candidate": PropagationSolver.sole_candidate,
    "unique_candidate": PropagationSolver.unique_candidate,
    "line_block_interaction": placeholders.line_block_interaction,
    "block_block_interaction": placeholders.block_block_interaction,
    "naked_subset": placeholders.naked_subset,
    "hidden_subset": placeholders.hidden_subset,
    "x_wing": placeholders.x_wing,
}


def register_step(name: str, handler: StepHandler) -> None:
    """Register a rule under ``name`` so rule lists can refer to it."""

    if not name:
        raise ValueError("Step name must be a non-empty string")
    _STEP_REGISTRY[name] = handler


def registered_steps() -> Tuple[str, ...]:
    return tuple(_STEP_REGISTRY)


def resolve_rules(names: Sequence[str]) -> Tuple[str, ...]:
    """Validate ``names`` against the registry and return them as a tuple."""

    unknown = [name for name in names if name not in _STEP_REGISTRY]
    if unknown:
        raise ValueError(f"Unknown propagation rule(s): {', '.join(unknown)}")
    return tuple(names)


class StepRunner:
    """Coordinator that applies propagation rules round by round."""

    def __init__(
        self,
        rules: Sequence[str] = DEFAULT_RULES,
        *,
        trace_level: str = "none",
        trace_recorder: Optional[StepTraceRecorder] = None,
    ) -> None:
        self.rules = resolve_rules(rules)
        self.trace_recorder = trace_recorder or StepTraceRecorder(trace_level=trace_level)

    def run_step(self, solver: PropagationSolver, name: str, *, round_no: int = 0) -> int:
        committed = _STEP_REGISTRY[name](solver)
        self.trace_recorder.record(StepTraceEntry(round=round_no, step_name=name, committed=committed))
        return committed

    def run_to_fixed_point(self, solver: PropagationSolver) -> FixedPointResult:
        """Repeat the rule list until a whole round commits no cell."""

        per_rule = {name: 0 for name in self.rules}
        total = 0
        rounds = 0
        while True:
            rounds += 1
            round_total = 0
            for name in self.rules:
                committed = self.run_step(solver, name, round_no=rounds)
                per_rule[name] += committed
                round_total += committed
            if round_total == 0:
                break
            total += round_total
        return FixedPointResult(committed=total, rounds=rounds, per_rule=per_rule)


__all__ = [
    "ADVANCED_RULES",
    "DEFAULT_RULES",
    "FixedPointResult",
    "StepHandler",
    "StepRunner",
    "StepTraceEntry",
    "StepTraceRecorder",
    "register_step",
    "registered_steps",
    "resolve_rules",
]
