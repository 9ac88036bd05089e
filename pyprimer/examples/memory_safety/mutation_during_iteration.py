"""Changing a collection while looping over it."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.memory_safety import TOPIC


def execute():
    scores = {"a": 1, "b": 2}
    try:
        for key in scores:
            scores[key + "x"] = 0
    except RuntimeError as exc:
        print(exc)

    scores = {"a": 1, "b": 2}
    for key in list(scores):
        if scores[key] == 1:
            del scores[key]
    print(scores)

    # Removing while iterating skips the element after each removal.
    numbers = [2, 4, 6, 7]
    for n in numbers:
        if n % 2 == 0:
            numbers.remove(n)
    print(numbers)

    numbers = [2, 4, 6, 7]
    print([n for n in numbers if n % 2])


EXAMPLE_UNIT = ExampleUnit(
    id="memory_safety.mutation_during_iteration",
    title="Mutation during iteration",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "dictionary changed size during iteration",
        "{'b': 2}",
        "[4, 7]",
        "[7]",
    ),
)
