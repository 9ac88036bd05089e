"""Example runner and result types."""

from pyprimer.runner.results import RunResult, RunSummary
from pyprimer.runner.runner import ExampleRunner, capture_output

__all__ = [
    "ExampleRunner",
    "RunResult",
    "RunSummary",
    "capture_output",
]
