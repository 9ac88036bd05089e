"""Ranges and slices."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.basic_operators import TOPIC


def execute():
    for index in range(1, 6):
        print(f"{index} times 5 is {index * 5}")

    names = ["Anna", "Alex", "Brian", "Jack"]
    print(names[2:])
    print(names[:2])

    print(list(range(0, 10, 3)))
    print(list(range(5, 0, -2)))
    print(len(range(0, 100, 7)))


EXAMPLE_UNIT = ExampleUnit(
    id="basic_operators.ranges",
    title="Ranges and slices",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "1 times 5 is 5",
        "2 times 5 is 10",
        "3 times 5 is 15",
        "4 times 5 is 20",
        "5 times 5 is 25",
        "['Brian', 'Jack']",
        "['Anna', 'Alex']",
        "[0, 3, 6, 9]",
        "[5, 3, 1]",
        "15",
    ),
)
