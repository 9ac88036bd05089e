from __future__ import annotations

import asyncio
import io
import sys

import pytest

from pyprimer.error_msg import ExecutionError, NotFoundError, OutputMismatchError
from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.catalog import ExampleCatalog
from pyprimer.runner import ExampleRunner, RunSummary, capture_output


@pytest.mark.unit
def test_matching_output_passes(sample_catalog):
    result = ExampleRunner(sample_catalog).run("sample.sum")
    assert result.passed
    assert result.status == "PASS"
    assert result.actual_output == ("3",)
    assert result.error is None
    assert result.error_message is None
    assert result.duration >= 0.0


@pytest.mark.unit
def test_raising_body_fails_and_keeps_partial_output(sample_catalog):
    result = ExampleRunner(sample_catalog).run("sample.bad")
    assert not result.passed
    assert result.actual_output == ("before failure",)
    assert isinstance(result.error, ExecutionError)
    assert isinstance(result.error.cause, ValueError)
    assert result.error_message == "sample.bad raised ValueError: boom"


@pytest.mark.unit
def test_output_mismatch_reports_first_differing_line():
    unit = ExampleUnit(
        id="sample.mismatch",
        title="Mismatch",
        topic="Sample",
        body=lambda: print("a\nb\nc"),
        expected_output=("a", "x", "c"),
    )
    result = ExampleRunner(ExampleCatalog()).run_unit(unit)
    assert not result.passed
    assert isinstance(result.error, OutputMismatchError)
    assert result.error.line == 1
    assert "output differs at line 2" in result.error_message
    assert "expected: 'x'" in result.error_message
    assert "actual: 'b'" in result.error_message


@pytest.mark.unit
def test_missing_trailing_lines_are_a_mismatch():
    unit = ExampleUnit(
        id="sample.short",
        title="Short",
        topic="Sample",
        body=lambda: print("a"),
        expected_output=("a", "b"),
    )
    result = ExampleRunner(ExampleCatalog()).run_unit(unit)
    assert not result.passed
    assert result.error.line == 1
    assert "<end of output>" in result.error_message


@pytest.mark.unit
def test_unit_without_expectation_passes_when_it_does_not_raise(sample_catalog):
    result = ExampleRunner(sample_catalog).run("other.silent")
    assert result.passed
    assert result.actual_output == ()


@pytest.mark.unit
def test_system_exit_is_an_execution_failure():
    def leave():
        print("leaving")
        sys.exit(3)

    unit = ExampleUnit(id="sample.exit", title="Exit", topic="Sample", body=leave)
    result = ExampleRunner(ExampleCatalog()).run_unit(unit)
    assert not result.passed
    assert isinstance(result.error.cause, SystemExit)
    assert result.actual_output == ("leaving",)


@pytest.mark.unit
def test_stdout_is_restored_after_failure(bad_unit):
    before = sys.stdout
    text, failure = capture_output(bad_unit)
    assert sys.stdout is before
    assert text == "before failure\n"
    assert isinstance(failure, ValueError)


@pytest.mark.unit
def test_sink_receives_captured_text(sample_catalog):
    sink = io.StringIO()
    runner = ExampleRunner(sample_catalog, sink=sink)
    runner.run("sample.sum")
    runner.run("other.silent")
    assert sink.getvalue() == "3\n"


@pytest.mark.unit
def test_running_twice_gives_the_same_result(sample_catalog):
    runner = ExampleRunner(sample_catalog)
    first = runner.run("sample.sum")
    second = runner.run("sample.sum")
    assert first.actual_output == second.actual_output
    assert first.passed and second.passed


@pytest.mark.unit
def test_run_unknown_id_raises_not_found(sample_catalog):
    with pytest.raises(NotFoundError):
        ExampleRunner(sample_catalog).run("missing.id")


@pytest.mark.unit
def test_run_all_is_lazy_and_follows_catalog_order(sample_catalog):
    calls = []
    unit = ExampleUnit(
        id="z.tracked", title="Tracked", topic="Z", body=lambda: calls.append("ran")
    )
    sample_catalog.register(unit)

    results = ExampleRunner(sample_catalog).run_all()
    assert calls == []
    ids = [result.unit_id for result in results]
    assert ids == ["sample.sum", "sample.bad", "other.silent", "z.tracked"]
    assert calls == ["ran"]


@pytest.mark.unit
def test_run_topic_runs_only_that_topic(sample_catalog):
    results = list(ExampleRunner(sample_catalog).run_topic("Sample"))
    assert [result.unit_id for result in results] == ["sample.sum", "sample.bad"]


@pytest.mark.unit
def test_run_topic_rejects_unknown_topic_before_iterating(sample_catalog):
    with pytest.raises(NotFoundError) as exc_info:
        ExampleRunner(sample_catalog).run_topic("Nope")
    assert exc_info.value.name == "Nope"


@pytest.mark.unit
def test_summary_counts(sample_catalog):
    summary = RunSummary.collect(ExampleRunner(sample_catalog).run_all())
    assert summary.total == 3
    assert summary.passed == 2
    assert summary.failed == 1
    assert summary.failed_ids == ["sample.bad"]
    assert not summary.success
    assert RunSummary().success


class _CustomStop(BaseException):
    pass


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_type",
    [asyncio.CancelledError, GeneratorExit, _CustomStop],
)
def test_run_all_continues_past_base_exceptions(exc_type):
    def stop():
        print("stopping")
        raise exc_type("stopped in body")

    catalog = ExampleCatalog()
    catalog.register(ExampleUnit(id="a.stop", title="Stop", topic="A", body=stop))
    catalog.register(ExampleUnit(id="a.after", title="After", topic="A", body=lambda: print("after")))

    results = list(ExampleRunner(catalog).run_all())
    assert [result.unit_id for result in results] == ["a.stop", "a.after"]
    assert not results[0].passed
    assert isinstance(results[0].error.cause, exc_type)
    assert results[0].actual_output == ("stopping",)
    assert results[1].passed


@pytest.mark.unit
def test_keyboard_interrupt_propagates():
    def interrupt():
        raise KeyboardInterrupt

    before = sys.stdout
    unit = ExampleUnit(id="a.interrupt", title="Interrupt", topic="A", body=interrupt)
    with pytest.raises(KeyboardInterrupt):
        ExampleRunner(ExampleCatalog()).run_unit(unit)
    assert sys.stdout is before
