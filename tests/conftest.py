from __future__ import annotations

import pytest

import feature_flags
import project_config
from orchestrator import log as event_log
from sudoku_engine.grid import Grid, from_string

SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


@pytest.fixture
def solved_grid() -> Grid:
    return from_string(SOLVED)


@pytest.fixture(autouse=True)
def _fresh_configuration():
    project_config.reload()
    feature_flags.reload()
    yield
    project_config.reload()
    feature_flags.reload()
    event_log.configure(None)
