"""Binding names to values and converting between numeric types."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.the_basics import TOPIC


def execute():
    maximum_login_attempts = 10
    current_login_attempt = 0
    x, y, z = 0.0, 0.0, 0.0

    current_login_attempt += 1
    print(f"Attempt {current_login_attempt} of {maximum_login_attempts}")
    print(x, y, z)
    print(type(maximum_login_attempts).__name__, type(x).__name__)

    # int() parses text, and truncates floats toward zero
    print(int("123") + 1)
    # round() uses round-half-to-even
    print(int(3.99), round(3.5), round(2.5))


EXAMPLE_UNIT = ExampleUnit(
    id="the_basics.constants_and_variables",
    title="Constants and variables",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Attempt 1 of 10",
        "0.0 0.0 0.0",
        "int float",
        "124",
        "3 4 2",
    ),
)
