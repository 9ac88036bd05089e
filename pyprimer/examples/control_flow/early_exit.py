"""Leaving a function early with return, and skipping iterations with continue."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.control_flow import TOPIC


def greet(person):
    name = person.get("name")
    if name is None:
        return
    print(f"Hello {name}!")

    location = person.get("location")
    if location is None:
        print("I hope the weather is nice near you.")
        return
    print(f"I hope the weather is nice in {location}.")


def execute():
    greet({"name": "John"})
    greet({"name": "Jane", "location": "Cupertino"})
    greet({})

    puzzle_input = "great minds think alike"
    puzzle_output = ""
    for character in puzzle_input:
        if character in "aeiou ":
            continue
        puzzle_output += character
    print(puzzle_output)


EXAMPLE_UNIT = ExampleUnit(
    id="control_flow.early_exit",
    title="Early exit and continue",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Hello John!",
        "I hope the weather is nice near you.",
        "Hello Jane!",
        "I hope the weather is nice in Cupertino.",
        "grtmndsthnklk",
    ),
)
