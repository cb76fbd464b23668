from feature_flags import (
    enabled_rules,
    get_rule_feature,
    is_rule_enabled,
    reload as reload_features,
)
from sudoku_engine.propagation import ADVANCED_RULES


def setup_function():
    reload_features()


def test_advanced_rules_disabled_by_default():
    assert all(is_rule_enabled(name, {}) is False for name in ADVANCED_RULES)
    assert enabled_rules(list(ADVANCED_RULES)) == []


def test_rule_can_be_overridden_via_env():
    assert is_rule_enabled("x_wing", {"SUDOKU_RULE_X_WING": "1"}) is True
    assert is_rule_enabled("naked_subset", {"SUDOKU_RULE_NAKED_SUBSET": "yes"}) is True
    assert is_rule_enabled("x_wing", {"SUDOKU_RULE_X_WING": "off"}) is False
    assert is_rule_enabled("x_wing", {"SUDOKU_RULE_X_WING": "maybe"}) is False


def test_enabled_rules_keep_order():
    env = {"SUDOKU_RULE_X_WING": "true", "SUDOKU_RULE_LINE_BLOCK_INTERACTION": "on"}
    assert enabled_rules(list(ADVANCED_RULES), env) == ["line_block_interaction", "x_wing"]


def test_feature_blocks_are_read_from_toml():
    assert get_rule_feature("hidden_subset") == {"enabled": False}
    assert get_rule_feature("swordfish") == {}
