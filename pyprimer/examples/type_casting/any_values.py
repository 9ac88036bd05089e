"""
Working with values of any type

A heterogeneous list is sorted out with class patterns. ``int(0)``
matches only the integer zero, while a plain ``0`` literal would also
match ``0.0``.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.type_casting import TOPIC
from pyprimer.examples.type_casting.isinstance_checks import Movie


def describe(thing) -> str:
    match thing:
        case int(0):
            return "zero as an int"
        case float(0.0):
            return "zero as a float"
        case int(value):
            return f"an integer value of {value}"
        case float(value) if value > 0:
            return f"a positive float value of {value}"
        case float():
            return "some other float value that I don't want to print"
        case str(value):
            return f'a string value of "{value}"'
        case (float(x), float(y)):
            return f"an (x, y) point at {x}, {y}"
        case Movie(name=name, director=director):
            return f"a movie called {name}, dir. {director}"
        case _ if callable(thing):
            return thing("Michael")
        case _:
            return "something else"


def execute():
    things = [
        0,
        0.0,
        42,
        3.14159,
        -0.25,
        "hello",
        (3.0, 5.0),
        Movie("Ghostbusters", "Ivan Reitman"),
        lambda name: f"Hello, {name}",
        None,
    ]
    for thing in things:
        print(describe(thing))


EXAMPLE_UNIT = ExampleUnit(
    id="type_casting.any_values",
    title="Matching values of any type",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "zero as an int",
        "zero as a float",
        "an integer value of 42",
        "a positive float value of 3.14159",
        "some other float value that I don't want to print",
        'a string value of "hello"',
        "an (x, y) point at 3.0, 5.0",
        "a movie called Ghostbusters, dir. Ivan Reitman",
        "Hello, Michael",
        "something else",
    ),
)
