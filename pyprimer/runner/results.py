"""Result contracts shared by the runner and the features layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from pyprimer.error_msg import PrimerException
from pyprimer.examples.api import UnitId


@dataclass(frozen=True)
class RunResult:
    """Outcome of a single example run."""

    unit_id: UnitId
    actual_output: tuple[str, ...]
    passed: bool
    error: PrimerException | None = None
    duration: float = 0.0

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return str(self.error)

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"


@dataclass
class RunSummary:
    """Totals over a finished sequence of runs."""

    results: list[RunResult] = field(default_factory=list)

    @classmethod
    def collect(cls, results: Iterable[RunResult]) -> "RunSummary":
        return cls(results=list(results))

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failed_ids(self) -> list[UnitId]:
        return [result.unit_id for result in self.results if not result.passed]

    @property
    def success(self) -> bool:
        return self.failed == 0
