"""Sequential example runner with stdout capture."""

from __future__ import annotations

from contextlib import redirect_stdout
from typing import Iterable, Iterator, TextIO
import io
import logging
import time

from pyprimer.error_msg import ExecutionError, NotFoundError, OutputMismatchError
from pyprimer.examples.api import ExampleUnit, UnitId
from pyprimer.examples.catalog import ExampleCatalog
from pyprimer.runner.results import RunResult

logger = logging.getLogger(__name__)


def capture_output(unit: ExampleUnit) -> tuple[str, BaseException | None]:
    """Run the unit body with stdout redirected into a fresh buffer.

    Returns the captured text and the exception the body raised, if any.
    Output printed before a failure is kept. Only KeyboardInterrupt
    propagates.
    """
    buffer = io.StringIO()
    failure: BaseException | None = None
    with redirect_stdout(buffer):
        try:
            unit.body()
        except KeyboardInterrupt:
            raise
        except BaseException as exc:  # noqa: BLE001
            failure = exc
    return buffer.getvalue(), failure


class ExampleRunner:
    """Runs catalog units one at a time and checks their printed lines."""

    def __init__(self, catalog: ExampleCatalog, sink: TextIO | None = None):
        self.catalog = catalog
        self.sink = sink

    def run(self, unit_id: UnitId) -> RunResult:
        unit = self.catalog.get(unit_id)
        return self.run_unit(unit)

    def run_unit(self, unit: ExampleUnit) -> RunResult:
        logger.debug("Running example %s", unit.id)
        start = time.perf_counter()
        text, failure = capture_output(unit)
        duration = time.perf_counter() - start

        if self.sink is not None and text:
            self.sink.write(text)
            self.sink.flush()

        actual = tuple(text.splitlines())
        error = None
        if failure is not None:
            error = ExecutionError(unit.id, failure)
        elif unit.expected_output is not None and actual != unit.expected_output:
            error = OutputMismatchError(unit.id, unit.expected_output, actual)

        if error is not None:
            logger.warning("Example %s failed: %s", unit.id, error.msg)
        return RunResult(
            unit_id=unit.id,
            actual_output=actual,
            passed=error is None,
            error=error,
            duration=duration,
        )

    def run_all(self) -> Iterator[RunResult]:
        return self._run_units(self.catalog.units())

    def run_topic(self, topic: str) -> Iterator[RunResult]:
        if not self.catalog.has_topic(topic):
            raise NotFoundError("topic", topic)
        return self._run_units(self.catalog.list_by_topic(topic))

    def _run_units(self, units: Iterable[ExampleUnit]) -> Iterator[RunResult]:
        for unit in units:
            yield self.run_unit(unit)
