from __future__ import annotations

import io

import pytest

from pyprimer import features
from pyprimer.features import (
    FeatureRegistry,
    OperationResult,
    handle_list_examples,
    handle_run,
    handle_show_example,
    handle_version,
)
from pyprimer.version import __version__


@pytest.mark.unit
def test_builtin_features_are_registered():
    names = set(FeatureRegistry.get_all_features())
    assert {"version", "list", "show", "run"} <= names
    assert FeatureRegistry.get_feature("nope") is None


@pytest.mark.unit
def test_operation_result_helpers():
    ok = OperationResult.ok({"a": 1})
    assert ok.success and ok.data == {"a": 1} and ok.error is None
    failed = OperationResult.fail("bad", data={"not_found": "x"})
    assert not failed.success and failed.error == "bad"


@pytest.mark.unit
def test_version_handler():
    assert handle_version().data == {"version": __version__}


@pytest.mark.unit
def test_list_examples_all_and_by_topic(sample_catalog):
    result = handle_list_examples(catalog=sample_catalog)
    assert result.success
    assert [item["id"] for item in result.data["examples"]] == [
        "sample.sum",
        "sample.bad",
        "other.silent",
    ]
    assert result.data["topics"] == ["Sample", "Other"]
    assert result.data["topic_filter"] is None

    filtered = handle_list_examples(topic="Other", catalog=sample_catalog)
    assert [item["id"] for item in filtered.data["examples"]] == ["other.silent"]


@pytest.mark.unit
def test_list_examples_unknown_topic(sample_catalog):
    result = handle_list_examples(topic="Nope", catalog=sample_catalog)
    assert not result.success
    assert result.data == {"not_found": "Nope"}


@pytest.mark.unit
def test_list_uses_default_catalog(monkeypatch, sample_catalog):
    monkeypatch.setattr(features, "default_catalog", lambda: sample_catalog)
    assert len(handle_list_examples().data["examples"]) == 3


@pytest.mark.unit
def test_show_example_includes_source(sample_catalog):
    result = handle_show_example("sample.sum", catalog=sample_catalog)
    assert result.success
    assert result.data["expected_output"] == ["3"]
    assert "print(1 + 2)" in result.data["source"]

    silent = handle_show_example("other.silent", catalog=sample_catalog)
    assert silent.data["expected_output"] is None


@pytest.mark.unit
def test_show_unknown_example(sample_catalog):
    result = handle_show_example("missing.id", catalog=sample_catalog)
    assert not result.success
    assert "missing.id" in result.error
    assert result.data == {"not_found": "missing.id"}


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"unit_id": "sample.sum", "run_all": True},
        {"run_all": True, "topic": "Sample"},
    ],
)
def test_run_requires_exactly_one_selector(sample_catalog, kwargs):
    result = handle_run(catalog=sample_catalog, **kwargs)
    assert not result.success
    assert "Exactly one" in result.error


@pytest.mark.unit
def test_run_single_example_writes_to_sink(sample_catalog):
    sink = io.StringIO()
    result = handle_run(unit_id="sample.sum", sink=sink, catalog=sample_catalog)
    assert result.success
    summary = result.data["summary"]
    assert summary.total == 1 and summary.success
    assert sink.getvalue() == "3\n"


@pytest.mark.unit
def test_run_all_and_topic(sample_catalog):
    summary = handle_run(run_all=True, catalog=sample_catalog).data["summary"]
    assert summary.total == 3
    assert summary.failed_ids == ["sample.bad"]

    topic_summary = handle_run(topic="Other", catalog=sample_catalog).data["summary"]
    assert [r.unit_id for r in topic_summary.results] == ["other.silent"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs, missing",
    [({"unit_id": "missing.id"}, "missing.id"), ({"topic": "Nope"}, "Nope")],
)
def test_run_unknown_selection_is_not_found(sample_catalog, kwargs, missing):
    result = handle_run(catalog=sample_catalog, **kwargs)
    assert not result.success
    assert result.data == {"not_found": missing}
