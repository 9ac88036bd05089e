"""Arithmetic operators, floor division and remainders."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.basic_operators import TOPIC


def execute():
    print(1 + 2, 5 - 3, 2 * 3, 10.0 / 2.5)
    print("hello, " + "world")
    # the remainder takes the sign of the divisor
    print(9 % 4, -9 % 4, 9 // 4, -9 // 4)
    print(divmod(9, 4))
    print(7 / 2)
    print(2 ** 10)


EXAMPLE_UNIT = ExampleUnit(
    id="basic_operators.arithmetic",
    title="Arithmetic operators",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "3 2 6 4.0",
        "hello, world",
        "1 3 2 -3",
        "(2, 1)",
        "3.5",
        "1024",
    ),
)
