"""Building, iterating and formatting strings."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.strings_and_characters import TOPIC


def execute():
    empty_string = ""
    print(len(empty_string) == 0, not empty_string)

    variable_string = "Horse"
    variable_string += " and carriage"
    print(variable_string)

    for character in "Dog!":
        print(character)

    cat_characters = ["C", "a", "t", "!"]
    print("".join(cat_characters))

    multiplier = 3
    print(f"{multiplier} times 2.5 is {multiplier * 2.5}")
    print(f"{'left':<6}|{'right':>6}|{3.14159:.2f}")


EXAMPLE_UNIT = ExampleUnit(
    id="strings_and_characters.string_basics",
    title="String basics",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "True True",
        "Horse and carriage",
        "D",
        "o",
        "g",
        "!",
        "Cat!",
        "3 times 2.5 is 7.5",
        "left  | right|3.14",
    ),
)
