"""
Capturing values

A nested function keeps the variables of its enclosing call alive.
``nonlocal`` lets it rebind them, so every incrementer owns a separate
running total.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.closures import TOPIC


def make_incrementer(amount):
    running_total = 0

    def incrementer():
        nonlocal running_total
        running_total += amount
        return running_total

    return incrementer


def execute():
    increment_by_ten = make_incrementer(10)
    print(increment_by_ten(), increment_by_ten(), increment_by_ten())

    increment_by_seven = make_incrementer(7)
    print(increment_by_seven())
    print(increment_by_ten())

    also_increment_by_ten = increment_by_ten
    print(also_increment_by_ten())
    print(increment_by_ten())


EXAMPLE_UNIT = ExampleUnit(
    id="closures.capturing_values",
    title="Capturing values",
    topic=TOPIC,
    body=execute,
    expected_output=("10 20 30", "7", "40", "50", "60"),
)
