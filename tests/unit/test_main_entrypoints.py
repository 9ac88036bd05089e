from __future__ import annotations

import json
import logging

import pytest
import typer
from typer.testing import CliRunner

from pyprimer import features
from pyprimer import main as main_mod
from pyprimer.examples.api import ExampleUnit
from pyprimer.features import OperationResult
from pyprimer.runner import RunResult, RunSummary
from pyprimer.version import __version__

runner = CliRunner()


@pytest.fixture
def use_catalog(monkeypatch):
    def _use(catalog):
        monkeypatch.setattr(features, "default_catalog", lambda: catalog)
        return catalog

    return _use


@pytest.mark.unit
def test_feature_or_exit_unknown():
    with pytest.raises(typer.Exit):
        main_mod._feature_or_exit("does-not-exist")


@pytest.mark.unit
def test_exit_for_failure_picks_exit_code():
    with pytest.raises(typer.Exit) as exc_info:
        main_mod._exit_for_failure(OperationResult.fail("boom"))
    assert exc_info.value.exit_code == main_mod.EXIT_FAILED

    with pytest.raises(typer.Exit) as exc_info:
        main_mod._exit_for_failure(OperationResult.fail("gone", data={"not_found": "x"}))
    assert exc_info.value.exit_code == main_mod.EXIT_NOT_FOUND


@pytest.mark.unit
def test_setup_logging_levels():
    main_mod.setup_logging(debug=True)
    assert logging.getLogger().level == logging.DEBUG
    main_mod.setup_logging(verbose=True)
    assert logging.getLogger().level == main_mod.VERBOSE_LEVEL
    main_mod.setup_logging()
    assert logging.getLogger().level == logging.WARNING
    assert len(logging.getLogger().handlers) == 1


@pytest.mark.unit
def test_version_command():
    result = runner.invoke(main_mod.app, ["version"])
    assert result.exit_code == 0
    assert f"pyprimer version: {__version__}" in result.stdout


@pytest.mark.unit
def test_run_single_passing_example(use_catalog, sample_catalog):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["run", "sample.sum"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "3"


@pytest.mark.unit
def test_run_single_failing_example(use_catalog, sample_catalog):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["run", "sample.bad"])
    assert result.exit_code == 1
    assert "before failure" in result.output
    assert "sample.bad raised ValueError: boom" in result.output


@pytest.mark.unit
def test_run_single_mismatching_example(use_catalog, sample_catalog):
    sample_catalog.register(
        ExampleUnit(
            id="sample.wrong",
            title="Wrong",
            topic="Sample",
            body=lambda: print("2"),
            expected_output=("3",),
        )
    )
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["run", "sample.wrong"])
    assert result.exit_code == main_mod.EXIT_FAILED
    assert "sample.wrong: output differs at line 1" in result.output
    assert "expected: '3'" in result.output
    assert "actual: '2'" in result.output


@pytest.mark.unit
@pytest.mark.parametrize(
    "args",
    [
        ["run", "missing.id"],
        ["run", "--topic", "Nope"],
        ["list", "--topic", "Nope"],
        ["show", "missing.id"],
    ],
)
def test_unknown_selection_exits_with_not_found(use_catalog, sample_catalog, args):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, args)
    assert result.exit_code == main_mod.EXIT_NOT_FOUND


@pytest.mark.unit
def test_run_without_selector_fails(use_catalog, sample_catalog):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["run"])
    assert result.exit_code == main_mod.EXIT_FAILED


@pytest.mark.unit
def test_run_all_prints_summary(use_catalog, sample_catalog):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["run", "--all"])
    assert result.exit_code == 1
    assert "[PASS] sample.sum" in result.output
    assert "[FAIL] sample.bad" in result.output
    assert "3 examples, 2 passed, 1 failed" in result.output


@pytest.mark.unit
def test_run_topic_json_report(use_catalog, passing_catalog):
    use_catalog(passing_catalog)
    result = runner.invoke(main_mod.app, ["run", "--topic", "Sample", "--json"])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["version"] == __version__
    assert report["total"] == 1
    assert report["results"][0]["unit_id"] == "sample.sum"
    assert report["results"][0]["actual_output"] == ["3"]
    assert report["results"][0]["error"] is None


@pytest.mark.unit
def test_report_model_counts_results():
    summary = RunSummary.collect(
        [
            RunResult(unit_id="a.ok", actual_output=("x",), passed=True),
            RunResult(unit_id="a.no", actual_output=(), passed=False),
        ]
    )
    report = main_mod.RunReport.from_summary(summary)
    assert (report.total, report.passed, report.failed) == (2, 1, 1)
    assert report.results[0].actual_output == ["x"]


@pytest.mark.unit
def test_list_command(use_catalog, sample_catalog):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["list"])
    assert result.exit_code == 0
    assert "All available examples:" in result.stdout
    assert "sample.sum" in result.stdout
    assert "Available topics: Sample, Other" in result.stdout

    filtered = runner.invoke(main_mod.app, ["list", "--topic", "Other"])
    assert "Examples in topic 'Other':" in filtered.stdout
    assert "sample.sum" not in filtered.stdout


@pytest.mark.unit
def test_show_command(use_catalog, sample_catalog):
    use_catalog(sample_catalog)
    result = runner.invoke(main_mod.app, ["show", "sample.sum"])
    assert result.exit_code == 0
    assert "sample.sum: Sum [Sample]" in result.stdout
    assert "Expected output:" in result.stdout
    assert "print(1 + 2)" in result.stdout
