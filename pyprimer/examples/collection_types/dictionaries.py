"""Dictionaries keep insertion order."""

from collections import defaultdict

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.collection_types import TOPIC


def execute():
    airports = {"YYZ": "Toronto Pearson", "DUB": "Dublin"}
    print(f"The airports dictionary contains {len(airports)} items.")

    airports["LHR"] = "London"
    airports["LHR"] = "London Heathrow"

    old_value = airports.get("DUB")
    airports["DUB"] = "Dublin Airport"
    print(f"The old value for DUB was {old_value}.")
    print(airports.get("APL", "That airport is not in the airports dictionary."))

    removed_value = airports.pop("DUB")
    print(f"The removed airport's name is {removed_value}.")

    for airport_code, airport_name in airports.items():
        print(f"{airport_code}: {airport_name}")
    print(sorted(airports))

    word_counts = defaultdict(int)
    for word in "the cat and the hat".split():
        word_counts[word] += 1
    print(dict(word_counts))


EXAMPLE_UNIT = ExampleUnit(
    id="collection_types.dictionaries",
    title="Dictionaries",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "The airports dictionary contains 2 items.",
        "The old value for DUB was Dublin.",
        "That airport is not in the airports dictionary.",
        "The removed airport's name is Dublin Airport.",
        "YYZ: Toronto Pearson",
        "LHR: London Heathrow",
        "['LHR', 'YYZ']",
        "{'the': 2, 'cat': 1, 'and': 1, 'hat': 1}",
    ),
)
