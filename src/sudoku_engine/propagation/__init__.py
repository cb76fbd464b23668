"""Propagation ("human-like") solver used as a solvability oracle."""

from __future__ import annotations

from .solver import PropagationSolver
from .step_runner import (
    ADVANCED_RULES,
    DEFAULT_RULES,
    FixedPointResult,
    StepHandler,
    StepRunner,
    StepTraceEntry,
    StepTraceRecorder,
    register_step,
    registered_steps,
    resolve_rules,
)

__all__ = [
    "ADVANCED_RULES",
    "DEFAULT_RULES",
    "FixedPointResult",
    "PropagationSolver",
    "StepHandler",
    "StepRunner",
    "StepTraceEntry",
    "StepTraceRecorder",
    "register_step",
    "registered_steps",
    "resolve_rules",
]
