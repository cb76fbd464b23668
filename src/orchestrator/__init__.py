"""Generation pipeline, event log and command line entry point."""

from . import log
from .orchestrator import build_parser, main, run_generation

__all__ = [
    "build_parser",
    "log",
    "main",
    "run_generation",
]
