"""Generation pipeline and command line entry point (grid → puzzle → print)."""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import uuid
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from contracts import validator
from feature_flags import enabled_rules
from project_config import get_section
from sudoku_engine.generator import GenerationResult, configured_rules, generate
from sudoku_engine.grid import to_string
from sudoku_engine.printer import render
from sudoku_engine.propagation import ADVANCED_RULES, registered_steps, resolve_rules

from . import log as event_log

_LOGGER = logging.getLogger(__name__)

EVENT_TYPE = "sudoku.generation.v1"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _configured_seed() -> Optional[int]:
    seed = _as_dict(get_section("generator", {})).get("seed")
    return int(seed) if isinstance(seed, int) and not isinstance(seed, bool) else None


def resolve_oracle_rules(
    rules: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[str, ...]:
    """Rules for the solvability oracle: explicit list, else config plus enabled features."""

    if rules is not None:
        return resolve_rules(list(rules))
    base = list(configured_rules())
    extra = [name for name in enabled_rules(list(ADVANCED_RULES), env) if name not in base]
    return resolve_rules(base + extra)


def make_bundle(result: GenerationResult, *, seed: Optional[int]) -> Dict[str, Any]:
    return {
        "puzzle": to_string(result.puzzle),
        "solution": to_string(result.solution),
        "hints": result.hints,
        "erased": result.erased,
        "rules": list(result.rules),
        "seed": seed,
    }


def run_generation(
    *,
    seed: Optional[int] = None,
    rules: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    validate: Optional[bool] = None,
) -> Dict[str, Any]:
    """Generate one puzzle and return the result with its bundle and run id."""

    if seed is None:
        seed = _configured_seed()
    rng = random.Random(seed) if seed is not None else None
    oracle_rules = resolve_oracle_rules(rules, env)
    result = generate(rng, oracle_rules)

    if validate is None:
        validate = bool(_as_dict(get_section("generator", {})).get("validate_output", True))
    if validate:
        validator.assert_valid(result.puzzle, result.solution)

    run_id = uuid.uuid4().hex
    bundle = make_bundle(result, seed=seed)
    event_log.append_event({"type": EVENT_TYPE, "run_id": run_id, **bundle})
    _LOGGER.debug("run %s finished with %d hints", run_id, result.hints)
    return {"run_id": run_id, "result": result, "bundle": bundle}


def _configure_logging(level: Optional[str], event_log_dir: Optional[str]) -> None:
    logging_cfg = _as_dict(get_section("logging", {}))
    level_name = (level or str(logging_cfg.get("level", "WARNING"))).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")
    directory = event_log_dir if event_log_dir is not None else logging_cfg.get("event_log_dir") or None
    max_bytes = logging_cfg.get("max_bytes")
    event_log.configure(directory, max_bytes=int(max_bytes) if isinstance(max_bytes, int) else None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a random Sudoku puzzle solvable with naked and hidden singles.",
    )
    parser.add_argument("--seed", type=int, help="Seed the random source for a reproducible puzzle.")
    parser.add_argument(
        "--rules",
        help=(
            "Comma separated propagation rules for the solvability oracle. "
            f"Known rules: {', '.join(registered_steps())}."
        ),
    )
    parser.add_argument(
        "--show-solution",
        dest="show_solution",
        action="store_true",
        default=None,
        help="Also print the complete grid the puzzle was dug from.",
    )
    parser.add_argument("--output", help="Write the puzzle bundle as JSON to this path.")
    parser.add_argument("--event-log", dest="event_log", help="Directory for JSONL generation events.")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, WARNING, ...).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level, args.event_log)

    rules = None
    if args.rules:
        rules = [name.strip() for name in args.rules.split(",") if name.strip()]
    try:
        run = run_generation(seed=args.seed, rules=rules, env=os.environ)
    except ValueError as exc:
        parser.error(str(exc))

    result: GenerationResult = run["result"]
    print(f"{result.hints} hints")
    print(render(result.puzzle))

    show_solution = args.show_solution
    if show_solution is None:
        show_solution = bool(_as_dict(get_section("render", {})).get("show_solution", False))
    if show_solution:
        print()
        print(render(result.solution))

    if args.output:
        path = Path(args.output)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(run["bundle"], fh, ensure_ascii=False, indent=2)
        print(f"Saved JSON to {path}")
    return 0


__all__ = ["EVENT_TYPE", "build_parser", "main", "make_bundle", "resolve_oracle_rules", "run_generation"]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
