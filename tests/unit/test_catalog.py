from __future__ import annotations

import logging

import pytest

from pyprimer.error_msg import DuplicateIdError, InvalidUnitError, NotFoundError
from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.catalog import (
    TOPICS_PACKAGE_ENV,
    ExampleCatalog,
    default_catalog,
)


def _unit(unit_id: str, topic: str = "Alpha") -> ExampleUnit:
    return ExampleUnit(id=unit_id, title=unit_id.title(), topic=topic, body=lambda: None)


FIRST = '''
from pyprimer.examples.api import ExampleUnit

def execute():
    print("one")

EXAMPLE_UNIT = ExampleUnit(
    id="alpha.first", title="First", topic="Alpha", body=execute, expected_output=("one",)
)
'''

SECOND = '''
from pyprimer.examples.api import ExampleUnit

EXAMPLE_UNITS = [
    ExampleUnit(id="alpha.second_a", title="A", topic="Alpha", body=lambda: None),
    ExampleUnit(id="alpha.second_b", title="B", topic="Alpha", body=lambda: None),
]
'''

BETA = '''
from pyprimer.examples.api import ExampleUnit

EXAMPLE_UNIT = ExampleUnit(id="beta.ok", title="Ok", topic="Beta", body=lambda: None)
'''


@pytest.mark.unit
def test_register_and_get():
    catalog = ExampleCatalog()
    unit = _unit("alpha.one")
    assert catalog.register(unit) is unit
    assert catalog.get("alpha.one") is unit
    assert "alpha.one" in catalog
    assert len(catalog) == 1


@pytest.mark.unit
def test_duplicate_id_is_rejected_and_first_unit_kept():
    catalog = ExampleCatalog()
    original = _unit("alpha.one")
    catalog.register(original)
    with pytest.raises(DuplicateIdError) as exc_info:
        catalog.register(_unit("alpha.one", topic="Beta"))
    assert exc_info.value.unit_id == "alpha.one"
    assert catalog.get("alpha.one") is original
    assert catalog.list_topics() == ["Alpha"]
    assert len(catalog) == 1


@pytest.mark.unit
def test_get_unknown_id_raises_not_found():
    with pytest.raises(NotFoundError) as exc_info:
        ExampleCatalog().get("missing.id")
    assert exc_info.value.name == "missing.id"
    assert "Unknown example: missing.id" in str(exc_info.value)


@pytest.mark.unit
def test_invalid_unit_is_not_registered():
    catalog = ExampleCatalog()
    with pytest.raises(InvalidUnitError):
        catalog.register(ExampleUnit(id="", title="x", topic="Alpha", body=lambda: None))
    assert len(catalog) == 0
    assert catalog.list_topics() == []


@pytest.mark.unit
def test_list_by_topic_keeps_registration_order_and_restarts():
    catalog = ExampleCatalog()
    for unit_id, topic in [("a.2", "A"), ("b.1", "B"), ("a.1", "A"), ("a.3", "A")]:
        catalog.register(_unit(unit_id, topic))

    sequence = catalog.list_by_topic("A")
    assert sequence.ids() == ["a.2", "a.1", "a.3"]
    assert [unit.id for unit in sequence] == [unit.id for unit in sequence]
    assert catalog.list_topics() == ["A", "B"]
    assert [unit.id for unit in catalog] == ["a.2", "b.1", "a.1", "a.3"]


@pytest.mark.unit
def test_sequences_reflect_later_registrations():
    catalog = ExampleCatalog()
    catalog.register(_unit("a.1", "A"))
    everything = catalog.units()
    topic_a = catalog.list_by_topic("A")
    catalog.register(_unit("a.2", "A"))
    assert everything.ids() == ["a.1", "a.2"]
    assert topic_a.ids() == ["a.1", "a.2"]


@pytest.mark.unit
def test_unknown_topic_is_an_empty_sequence():
    catalog = ExampleCatalog()
    catalog.register(_unit("a.1", "A"))
    assert list(catalog.list_by_topic("Nope")) == []
    assert not catalog.has_topic("Nope")
    assert catalog.has_topic("A")


@pytest.mark.unit
def test_discover_visits_topics_and_modules_in_name_order(topics_factory, caplog):
    package = topics_factory(
        "primer_fixture_discovery",
        {
            "beta/ok.py": BETA,
            "beta/broken.py": 'raise ImportError("boom")\n',
            "alpha/second.py": SECOND,
            "alpha/first.py": FIRST,
            "alpha/_private.py": 'raise RuntimeError("private modules are skipped")\n',
            "!loose/mod.py": BETA,
        },
    )

    with caplog.at_level(logging.WARNING, logger="pyprimer.examples.catalog"):
        catalog = ExampleCatalog().discover(package)

    assert catalog.units().ids() == ["alpha.first", "alpha.second_a", "alpha.second_b", "beta.ok"]
    assert catalog.list_topics() == ["Alpha", "Beta"]
    assert catalog.loaded_modules == (
        f"{package}.alpha.first",
        f"{package}.alpha.second",
        f"{package}.beta.ok",
    )
    assert "Failed loading example module" in caplog.text
    assert f"{package}.beta.broken" in caplog.text


@pytest.mark.unit
def test_discover_rejects_duplicate_ids_across_modules(topics_factory):
    package = topics_factory(
        "primer_fixture_duplicates",
        {"alpha/first.py": FIRST, "alpha/zcopy.py": FIRST},
    )
    with pytest.raises(DuplicateIdError):
        ExampleCatalog().discover(package)


@pytest.mark.unit
def test_discover_rejects_non_unit_exports(topics_factory):
    package = topics_factory(
        "primer_fixture_bad_export",
        {"alpha/weird.py": "EXAMPLE_UNIT = 42\n"},
    )
    with pytest.raises(InvalidUnitError, match="exports int"):
        ExampleCatalog().discover(package)


@pytest.mark.unit
def test_default_catalog_reads_package_from_environment(topics_factory, monkeypatch):
    package = topics_factory("primer_fixture_env", {"beta/ok.py": BETA})
    monkeypatch.setenv(TOPICS_PACKAGE_ENV, package)
    assert default_catalog().units().ids() == ["beta.ok"]


@pytest.mark.unit
def test_default_catalog_loads_bundled_topics(monkeypatch):
    monkeypatch.delenv(TOPICS_PACKAGE_ENV, raising=False)
    catalog = default_catalog()
    topics = catalog.list_topics()
    assert topics[0] == "Access Control"
    assert "The Basics" in topics
    assert len(topics) == 27
    assert catalog.get("the_basics.constants_and_variables").topic == "The Basics"
