"""Utility helpers for loading project-wide configuration."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_DIGGER_CONFIG"

_MISSING = object()


def _config_path() -> Path:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary.

    An explicit ``SUDOKU_DIGGER_CONFIG`` path must exist; the default
    ``config.toml`` next to the project root is optional and an empty
    configuration is returned when it is absent (e.g. in a wheel install).
    """
    path = _config_path()
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as exc:
        if os.environ.get(_CONFIG_ENV):
            raise RuntimeError(f"Configuration file '{path}' was not found") from exc
        return {}


def reload() -> None:
    """Forget the cached configuration so the next call re-reads the file."""

    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not _MISSING:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


__all__ = ["get_config", "get_section", "reload"]
