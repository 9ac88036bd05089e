from __future__ import annotations

import pytest

from pyprimer.examples.catalog import default_catalog
from pyprimer.runner import ExampleRunner

CATALOG = default_catalog("pyprimer.examples")


@pytest.mark.unit
@pytest.mark.parametrize("unit_id", [unit.id for unit in CATALOG.units()])
def test_bundled_example_passes(unit_id):
    result = ExampleRunner(CATALOG).run(unit_id)
    assert result.passed, result.error_message


@pytest.mark.unit
def test_every_topic_has_examples():
    for topic in CATALOG.list_topics():
        assert CATALOG.list_by_topic(topic).ids(), topic


@pytest.mark.unit
def test_ids_are_prefixed_by_topic_package():
    for unit in CATALOG.units():
        package = unit.id.split(".", 1)[0]
        assert unit.id.count(".") == 1
        assert package.replace("_", " ").lower() == unit.topic.lower(), unit.id


@pytest.mark.unit
def test_decorated_units_register_in_module_order():
    assert CATALOG.list_by_topic("Protocols").ids() == [
        "protocols.abstract_base_classes",
        "protocols.dunder_protocols",
        "protocols.opaque_return_types",
        "protocols.boxed_protocol_types",
        "protocols.structural_typing",
    ]
    decorated = CATALOG.get("functions.call_site_info")
    assert decorated.description == ""
    assert CATALOG.get("protocols.opaque_return_types").description.startswith("Callers draw")
