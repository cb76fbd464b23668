from __future__ import annotations

import json

import pytest

from orchestrator import log as event_log
from orchestrator.orchestrator import EVENT_TYPE, main, run_generation
from sudoku_engine.grid import count_clues, from_string


def _hints_and_grid(out: str):
    lines = out.splitlines()
    hints = int(lines[0].split()[0])
    assert lines[0] == f"{hints} hints"
    return hints, lines[1:14]


def test_default_invocation_prints_hints_and_grid(capsys) -> None:
    assert main([]) == 0
    hints, grid_lines = _hints_and_grid(capsys.readouterr().out)
    assert 17 <= hints <= 81
    assert grid_lines[0] == "-" * 25
    assert len(grid_lines) == 13
    digits = sum(ch.isdigit() for line in grid_lines for ch in line)
    assert digits == hints


def test_seed_makes_runs_reproducible(capsys) -> None:
    main(["--seed", "31"])
    first = capsys.readouterr().out
    main(["--seed", "31"])
    assert capsys.readouterr().out == first


def test_output_bundle_and_solution(tmp_path, capsys) -> None:
    target = tmp_path / "puzzle.json"
    assert main(["--seed", "8", "--show-solution", "--output", str(target)]) == 0
    out = capsys.readouterr().out
    assert f"Saved JSON to {target}" in out

    bundle = json.loads(target.read_text(encoding="utf-8"))
    assert bundle["seed"] == 8
    assert bundle["hints"] == 81 - bundle["erased"]
    assert count_clues(from_string(bundle["puzzle"])) == bundle["hints"]
    assert "0" not in bundle["solution"]
    assert bundle["rules"] == ["sole_candidate", "unique_candidate"]
    # puzzle grid plus a blank line plus the solution grid
    assert len(out.splitlines()) == 1 + 13 + 1 + 13 + 1


def test_unknown_rule_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--rules", "sole_candidate,telepathy"])
    assert excinfo.value.code == 2
    assert "telepathy" in capsys.readouterr().err


def test_event_log_records_the_run(tmp_path, capsys) -> None:
    main(["--seed", "4", "--event-log", str(tmp_path)])
    capsys.readouterr()
    path = event_log.current_log_path()
    assert path is not None and path.is_relative_to(tmp_path)
    event = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
    assert event["type"] == EVENT_TYPE
    assert event["seed"] == 4
    assert len(event["run_id"]) == 32


def test_run_generation_returns_bundle() -> None:
    run = run_generation(seed=12, rules=["sole_candidate", "unique_candidate", "x_wing"])
    result = run["result"]
    assert run["bundle"]["hints"] == result.hints == 81 - result.erased
    assert result.rules == ("sole_candidate", "unique_candidate", "x_wing")
