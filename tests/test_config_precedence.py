from __future__ import annotations

import pytest

import project_config
from orchestrator.orchestrator import resolve_oracle_rules
from sudoku_engine.generator import configured_rules


def test_config_defaults() -> None:
    assert project_config.get_section("generator.rules") == ["sole_candidate", "unique_candidate"]
    assert project_config.get_section("generator.validate_output") is True
    assert project_config.get_section("render.show_solution") is False


def test_missing_path_uses_default_or_raises() -> None:
    assert project_config.get_section("generator.missing", None) is None
    assert project_config.get_section("nope.deeper", 3) == 3
    with pytest.raises(KeyError):
        project_config.get_section("generator.missing")


def test_environment_points_at_another_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "alt.toml"
    path.write_text('[generator]\nrules = ["sole_candidate"]\nseed = 5\n', encoding="utf-8")
    monkeypatch.setenv("SUDOKU_DIGGER_CONFIG", str(path))
    project_config.reload()
    assert configured_rules() == ("sole_candidate",)
    assert project_config.get_section("generator.seed") == 5


def test_missing_explicit_file_is_an_error(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_DIGGER_CONFIG", str(tmp_path / "absent.toml"))
    project_config.reload()
    with pytest.raises(RuntimeError):
        project_config.get_config()


def test_explicit_rules_win_over_config_and_features() -> None:
    env = {"SUDOKU_RULE_X_WING": "1"}
    assert resolve_oracle_rules(["unique_candidate"], env) == ("unique_candidate",)
    assert resolve_oracle_rules(None, env) == ("sole_candidate", "unique_candidate", "x_wing")
    assert resolve_oracle_rules(None, {}) == ("sole_candidate", "unique_candidate")
