"""Indexing, slicing and searching strings."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.strings_and_characters import TOPIC

ROMEO_AND_JULIET = [
    "Act 1 Scene 1: Verona, A public place",
    "Act 1 Scene 2: Capulet's mansion",
    "Act 2 Scene 1: Outside Capulet's mansion",
]


def execute():
    greeting = "Hello, world!"
    index = greeting.index(",")
    beginning = greeting[:index]
    print(beginning)
    print(greeting[0], greeting[-1], greeting[7:12])
    print(greeting.startswith("Hello"), greeting.endswith("?"))

    act1_scene_count = sum(1 for scene in ROMEO_AND_JULIET if scene.startswith("Act 1 "))
    mansion_count = sum(1 for scene in ROMEO_AND_JULIET if scene.endswith("Capulet's mansion"))
    print(f"There are {act1_scene_count} scenes in Act 1")
    print(f"{mansion_count} mansion scenes")

    print("a,b,,c".split(","))


EXAMPLE_UNIT = ExampleUnit(
    id="strings_and_characters.substrings",
    title="Substrings and searching",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Hello",
        "H ! world",
        "True False",
        "There are 2 scenes in Act 1",
        "2 mansion scenes",
        "['a', 'b', '', 'c']",
    ),
)
