"""Runtime feature flag helpers for the advanced deduction rules."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

__all__ = ["enabled_rules", "get_rule_feature", "is_rule_enabled", "reload"]

_FEATURES_FILENAME = "config/features.toml"
_ENV_PREFIX = "SUDOKU_RULE_"


def _features_path() -> Path:
    return Path(__file__).resolve().parents[1] / _FEATURES_FILENAME


@lru_cache(maxsize=1)
def _load_features() -> dict[str, Any]:
    path = _features_path()
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def reload() -> None:
    """Clear the cached feature configuration."""

    _load_features.cache_clear()


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def get_rule_feature(name: str) -> dict[str, Any]:
    """Return the feature block configured for the rule ``name``."""

    rules = _load_features().get("rules")
    if not isinstance(rules, dict):
        return {}
    entry = rules.get(name)
    return dict(entry) if isinstance(entry, dict) else {}


def is_rule_enabled(name: str, env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when the rule ``name`` is switched on.

    ``SUDOKU_RULE_<NAME>`` in ``env`` takes precedence over the TOML file.
    """

    enabled = bool(get_rule_feature(name).get("enabled", False))

    if env:
        override = _coerce_bool(env.get(_ENV_PREFIX + name.upper()))
        if override is not None:
            enabled = override

    return enabled


def enabled_rules(names: list[str], env: Mapping[str, str] | None = None) -> list[str]:
    """Filter ``names`` down to the rules whose flag is on, keeping order."""

    return [name for name in names if is_rule_enabled(name, env)]
