from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from pyprimer.error_msg import InvalidUnitError
from pyprimer.examples.api import ExampleUnit, example, validate_unit


def _noop() -> None:
    pass


@pytest.mark.unit
def test_expected_output_is_frozen_to_tuple():
    unit = ExampleUnit(id="a.b", title="T", topic="A", body=_noop, expected_output=["x", "y"])
    assert unit.expected_output == ("x", "y")
    assert unit.has_expectation

    from_text = ExampleUnit(id="a.c", title="T", topic="A", body=_noop, expected_output="x\ny\n")
    assert from_text.expected_output == ("x", "y")


@pytest.mark.unit
def test_missing_expectation_stays_none():
    unit = ExampleUnit(id="a.b", title="T", topic="A", body=_noop)
    assert unit.expected_output is None
    assert not unit.has_expectation


@pytest.mark.unit
def test_units_are_immutable_and_compare_without_body():
    first = ExampleUnit(id="a.b", title="T", topic="A", body=_noop, expected_output=("x",))
    second = ExampleUnit(id="a.b", title="T", topic="A", body=lambda: None, expected_output=("x",))
    assert first == second
    with pytest.raises(FrozenInstanceError):
        first.title = "changed"


@pytest.mark.unit
def test_example_decorator_uses_docstring_as_description():
    @example("a.decorated", "Decorated", "A", expected_output=["hi"])
    def body():
        """Says hi."""
        print("hi")

    assert isinstance(body, ExampleUnit)
    assert body.description == "Says hi."
    assert body.expected_output == ("hi",)


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"id": ""}, "id cannot be empty"),
        ({"title": ""}, "title cannot be empty"),
        ({"topic": ""}, "topic cannot be empty"),
        ({"body": "not callable"}, "body must be callable"),
        ({"expected_output": ("ok", 3)}, "must contain strings"),
        ({"expected_output": ("two\nlines",)}, "cannot contain newlines"),
    ],
)
def test_validate_unit_rejects_malformed_units(kwargs, message):
    fields = {"id": "a.b", "title": "T", "topic": "A", "body": _noop, "expected_output": ("x",)}
    fields.update(kwargs)
    with pytest.raises(InvalidUnitError, match=message):
        validate_unit(ExampleUnit(**fields))


@pytest.mark.unit
def test_validate_unit_accepts_empty_expectation():
    validate_unit(ExampleUnit(id="a.b", title="T", topic="A", body=_noop, expected_output=()))
